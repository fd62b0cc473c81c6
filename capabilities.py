# hint1 support is resolved once, not probed per query
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations
from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db import engine as default_engine

logger = logging.getLogger(__name__)

TABLE = "questions"
HINT1 = "hint1"

# auto | on | off
HINT1_MODE = os.getenv("QUESTIONS_HINT1", "auto").strip().lower()
AUTO_ADD_HINT1 = os.getenv("QUESTIONS_AUTO_ADD_HINT1", "1").strip().lower() not in ("0", "false", "no")


@dataclass
class SchemaCapabilities:
    supports_hint1: bool = False
    # set by QUESTIONS_HINT1=on/off; the create path never alters a forced schema
    forced: bool = False


def has_column(engine: Engine, table: str, column: str) -> bool:
    """True if ``table.column`` exists. Probe failures count as absent."""
    try:
        cols = sa.inspect(engine).get_columns(table)
    except SQLAlchemyError as e:
        logger.warning("schema probe for %s.%s failed: %s", table, column, e)
        return False
    return any(c["name"] == column for c in cols)


def probe_capabilities(engine: Engine, mode: str = HINT1_MODE) -> SchemaCapabilities:
    if mode in ("on", "1", "true"):
        return SchemaCapabilities(supports_hint1=True, forced=True)
    if mode in ("off", "0", "false"):
        return SchemaCapabilities(supports_hint1=False, forced=True)
    caps = SchemaCapabilities(supports_hint1=has_column(engine, TABLE, HINT1))
    logger.info("questions schema: supports_hint1=%s", caps.supports_hint1)
    return caps


def ensure_hint1_column(engine: Engine, caps: SchemaCapabilities) -> bool:
    """Add ``questions.hint1`` if missing and record it on ``caps``.

    Never raises: a failed add (e.g. another worker added it first, or the
    role lacks ALTER rights) is logged and the caller carries on without it.
    """
    if caps.supports_hint1 or caps.forced:
        return caps.supports_hint1
    if not has_column(engine, TABLE, HINT1):
        try:
            with engine.begin() as conn:
                ops = Operations(MigrationContext.configure(conn))
                ops.add_column(TABLE, sa.Column(HINT1, sa.Text(), nullable=True))
            logger.info("added missing column %s.%s", TABLE, HINT1)
        except SQLAlchemyError as e:
            logger.warning("could not add column %s.%s: %s", TABLE, HINT1, e)
    # re-probe: a concurrent add counts as success
    caps.supports_hint1 = has_column(engine, TABLE, HINT1)
    return caps.supports_hint1


def get_capabilities(request: Request) -> SchemaCapabilities:
    caps = getattr(request.app.state, "capabilities", None)
    if caps is None:
        caps = probe_capabilities(default_engine)
        request.app.state.capabilities = caps
    return caps
