# Type and difficulty vocabularies.
#
# The API speaks OPEN/MCQ; the questions table stores discursiva/multipla_escolha.
# Both mappings are total: unknown input falls back to the open/discursive
# side instead of raising.
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

API_OPEN = "OPEN"
API_MCQ = "MCQ"
DB_OPEN = "discursiva"
DB_MCQ = "multipla_escolha"

_MCQ_TAGS = {"mcq", "multipla_escolha", "multiple-choice", "multiple_choice"}


def _is_mcq(t: Any) -> bool:
    return isinstance(t, str) and t.strip().lower() in _MCQ_TAGS


def to_db_type(t: Any) -> str:
    """Map a type tag in either vocabulary to the stored tag (default: discursiva)."""
    return DB_MCQ if _is_mcq(t) else DB_OPEN


def to_api_type(t: Any) -> str:
    """Map a type tag in either vocabulary to the API tag (default: OPEN)."""
    return API_MCQ if _is_mcq(t) else API_OPEN


class Difficulty(str, Enum):
    EASY = "facil"
    MEDIUM = "medio"
    HARD = "dificil"


DEFAULT_DIFFICULTY = Difficulty.EASY

_DIFFICULTY_ALIASES: Dict[str, Difficulty] = {
    "facil": Difficulty.EASY,
    "fácil": Difficulty.EASY,
    "easy": Difficulty.EASY,
    "medio": Difficulty.MEDIUM,
    "médio": Difficulty.MEDIUM,
    "medium": Difficulty.MEDIUM,
    "dificil": Difficulty.HARD,
    "difícil": Difficulty.HARD,
    "hard": Difficulty.HARD,
}


def parse_difficulty(value: Any) -> Optional[Difficulty]:
    """Return the matching Difficulty, or None for anything unrecognised."""
    if not isinstance(value, str):
        return None
    return _DIFFICULTY_ALIASES.get(value.strip().lower())
