from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import sqlalchemy as sa
from sqlalchemy.orm import Session

from capabilities import AUTO_ADD_HINT1, SchemaCapabilities, ensure_hint1_column
from errors import NotFoundError
from models import questions_table as t
from validation import QuestionFields, total_pages
from vocab import parse_difficulty, to_api_type

logger = logging.getLogger(__name__)


def _columns(caps: SchemaCapabilities) -> List[sa.Column]:
    cols = [t.c.id, t.c.text, t.c.difficulty, t.c.type, t.c.answer]
    if caps.supports_hint1:
        cols.append(t.c.hint1)
    cols += [t.c.options, t.c.correct_index, t.c.created_at, t.c.used_at]
    return cols


def _row_to_dict(row: sa.Row) -> Dict[str, Any]:
    d = dict(row._mapping)
    d["type"] = to_api_type(d.get("type"))
    d.setdefault("hint1", None)
    return d


def _values(fields: QuestionFields, caps: SchemaCapabilities) -> Dict[str, Any]:
    vals: Dict[str, Any] = {
        "text": fields.text,
        "difficulty": fields.difficulty,
        "type": fields.type,
        "answer": fields.answer,
        "options": fields.options,
        "correct_index": fields.correct_index,
    }
    if caps.supports_hint1:
        vals["hint1"] = fields.hint1
    return vals


def _difficulty_filter(difficulty: Optional[str]):
    if not difficulty:
        return None
    d = parse_difficulty(difficulty)
    # unknown values are applied verbatim and simply match nothing
    return t.c.difficulty == (d.value if d else difficulty)


def list_questions(
    db: Session,
    caps: SchemaCapabilities,
    page: int,
    limit: int,
    difficulty: Optional[str] = None,
) -> Dict[str, Any]:
    where = _difficulty_filter(difficulty)

    count_q = sa.select(sa.func.count()).select_from(t)
    data_q = sa.select(*_columns(caps))
    if where is not None:
        count_q = count_q.where(where)
        data_q = data_q.where(where)

    total = db.execute(count_q).scalar_one()
    rows = db.execute(
        data_q.order_by(t.c.created_at.desc(), t.c.id.desc())
        .limit(limit)
        .offset((page - 1) * limit)
    ).all()

    data = [_row_to_dict(r) for r in rows]
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "total_pages": total_pages(total, limit),
        "count": len(data),
        "data": data,
    }


def get_question(db: Session, caps: SchemaCapabilities, qid: int) -> Dict[str, Any]:
    row = db.execute(sa.select(*_columns(caps)).where(t.c.id == qid)).first()
    if row is None:
        raise NotFoundError("question not found")
    return _row_to_dict(row)


def create_question(db: Session, caps: SchemaCapabilities, fields: QuestionFields) -> Dict[str, Any]:
    if not caps.supports_hint1 and not caps.forced and AUTO_ADD_HINT1:
        ensure_hint1_column(db.get_bind(), caps)

    result = db.execute(sa.insert(t).values(**_values(fields, caps)))
    qid = result.inserted_primary_key[0]
    db.commit()
    logger.info("created question id=%s type=%s", qid, fields.type)
    return get_question(db, caps, qid)


def update_question(
    db: Session, caps: SchemaCapabilities, qid: int, fields: QuestionFields
) -> Dict[str, Any]:
    # created_at and used_at are never part of the replacement
    result = db.execute(sa.update(t).where(t.c.id == qid).values(**_values(fields, caps)))
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("question not found")
    db.commit()
    logger.info("updated question id=%s", qid)
    return get_question(db, caps, qid)


def delete_question(db: Session, qid: int) -> None:
    result = db.execute(sa.delete(t).where(t.c.id == qid))
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError("question not found")
    db.commit()
    logger.info("deleted question id=%s", qid)
