# validation.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from errors import ValidationError
from schemas.questions import QuestionIn
from vocab import DB_MCQ, DEFAULT_DIFFICULTY, parse_difficulty, to_db_type

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5
MAX_LIMIT = 200
MCQ_OPTION_COUNT = 4

_ID_RE = re.compile(r"^\d+$")


@dataclass
class QuestionFields:
    """Validated, trimmed values ready to be written (type in storage vocabulary)."""

    text: str
    difficulty: str
    type: str
    answer: str
    options: Optional[List[str]] = None
    correct_index: Optional[int] = None
    hint1: Optional[str] = None


def is_non_empty(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def resolve_difficulty(value: Any) -> str:
    if not is_non_empty(value):
        return DEFAULT_DIFFICULTY.value
    d = parse_difficulty(value)
    if d is None:
        raise ValidationError("invalid difficulty")
    return d.value


def resolve_correct_index(value: Any) -> int:
    # bool is an int subclass; True must not select option 1
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and 0 <= value < MCQ_OPTION_COUNT:
        return value
    return 0


def validate_question(body: QuestionIn) -> QuestionFields:
    if not is_non_empty(body.text):
        raise ValidationError("question text required")

    difficulty = resolve_difficulty(body.difficulty)
    db_type = to_db_type(body.type)
    hint1 = body.hint1.strip() if is_non_empty(body.hint1) else None

    if db_type == DB_MCQ:
        raw = body.options if isinstance(body.options, list) else []
        trimmed = [o.strip() if isinstance(o, str) else "" for o in raw]
        if len(trimmed) != MCQ_OPTION_COUNT or not all(trimmed):
            raise ValidationError("MCQ requires 4 filled options")
        ci = resolve_correct_index(body.correct_index)
        answer = body.answer.strip() if is_non_empty(body.answer) else trimmed[ci]
        return QuestionFields(
            text=body.text.strip(),
            difficulty=difficulty,
            type=db_type,
            answer=answer,
            options=trimmed,
            correct_index=ci,
            hint1=hint1,
        )

    if not is_non_empty(body.answer):
        raise ValidationError("answer required for open question")
    return QuestionFields(
        text=body.text.strip(),
        difficulty=difficulty,
        type=db_type,
        answer=body.answer.strip(),
        hint1=hint1,
    )


def _positive_int(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    try:
        f = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(f) or f <= 0 or not f.is_integer():
        return None
    return int(f)


def resolve_page_params(page: Any, limit: Any) -> Tuple[int, int]:
    """Lenient pagination: anything unusable falls back to (1, 5)."""
    p = _positive_int(page) or DEFAULT_PAGE
    lim = _positive_int(limit)
    if lim is None or lim > MAX_LIMIT:
        lim = DEFAULT_LIMIT
    return p, lim


def total_pages(total: int, limit: int) -> int:
    return max(1, math.ceil(total / limit))


def parse_question_id(raw: Any) -> int:
    s = str(raw).strip() if raw is not None else ""
    if not _ID_RE.fullmatch(s) or int(s) <= 0:
        raise ValidationError("invalid id")
    return int(s)
