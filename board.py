from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from vocab import API_MCQ, API_OPEN, Difficulty, parse_difficulty, to_api_type

logger = logging.getLogger(__name__)

PAGE_SIZE_MAX = 200


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class FormError(ValueError):
    """Raised by the form before anything is sent; shown to the user as an alert."""


class QuestionsClient:
    def __init__(self, http: httpx.Client, prefix: str = "/questions"):
        self.http = http
        self.prefix = prefix.rstrip("/")

    @classmethod
    def from_base_url(cls, base_url: str, timeout: float = 10.0) -> "QuestionsClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    @staticmethod
    def _check(r: httpx.Response) -> Any:
        if r.is_error:
            try:
                message = r.json().get("error") or r.reason_phrase
            except ValueError:
                message = r.text or r.reason_phrase
            raise ApiError(r.status_code, message)
        return r.json()

    def list(self, page: int = 1, limit: int = 5, difficulty: Optional[str] = None) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if difficulty:
            params["difficulty"] = difficulty
        return self._check(self.http.get(self.prefix, params=params))

    def list_all(self, difficulty: Optional[str] = None) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        page = 1
        while True:
            body = self.list(page=page, limit=PAGE_SIZE_MAX, difficulty=difficulty)
            out.extend(body["data"])
            if page >= body["totalPages"]:
                return out
            page += 1

    def get(self, qid: int) -> Dict[str, Any]:
        return self._check(self.http.get(f"{self.prefix}/{qid}"))

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._check(self.http.post(self.prefix, json=payload))

    def update(self, qid: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._check(self.http.put(f"{self.prefix}/{qid}", json=payload))

    def delete(self, qid: int) -> str:
        return self._check(self.http.delete(f"{self.prefix}/{qid}"))["message"]


def _blank_options() -> List[str]:
    return ["", "", "", ""]


@dataclass
class QuestionForm:
    text: str = ""
    answer: str = ""
    difficulty: Difficulty = Difficulty.EASY
    type: str = API_OPEN
    options: List[str] = field(default_factory=_blank_options)
    correct_index: int = 0
    hint1: str = ""

    def payload(self) -> Dict[str, Any]:
        """Build the POST body, mirroring the server's required-field checks."""
        text = self.text.strip()
        if not text:
            raise FormError("Fill in the question text.")

        body: Dict[str, Any] = {
            "text": text,
            "difficulty": Difficulty(self.difficulty).value,
            "type": to_api_type(self.type),
        }
        if self.hint1.strip():
            body["hint1"] = self.hint1.strip()

        if body["type"] == API_MCQ:
            options = [o.strip() for o in self.options]
            if len(options) != 4 or not all(options):
                raise FormError("Fill in all 4 options.")
            body["options"] = options
            body["correctIndex"] = self.correct_index
            if self.answer.strip():
                body["answer"] = self.answer.strip()
            return body

        answer = self.answer.strip()
        if not answer:
            raise FormError("Fill in the correct answer.")
        body["answer"] = answer
        return body

    def reset(self) -> None:
        # difficulty stays selected for the next entry
        self.text = ""
        self.answer = ""
        self.type = API_OPEN
        self.options = _blank_options()
        self.correct_index = 0
        self.hint1 = ""


@dataclass(frozen=True)
class PendingDelete:
    id: int
    text: str


class QuestionBoard:
    def __init__(self, client: QuestionsClient, selected: Difficulty = Difficulty.EASY):
        self.client = client
        self.questions: List[Dict[str, Any]] = []
        self.selected_difficulty = selected
        self.form = QuestionForm()
        self.pending_delete: Optional[PendingDelete] = None

    # ---------- list ----------

    def refresh(self) -> bool:
        try:
            self.questions = self.client.list_all()
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("could not load questions: %s", e)
            return False
        return True

    def select_difficulty(self, level: Difficulty | str) -> None:
        d = parse_difficulty(level.value if isinstance(level, Difficulty) else level)
        if d is None:
            raise ValueError(f"unknown difficulty: {level!r}")
        self.selected_difficulty = d

    @property
    def visible_questions(self) -> List[Dict[str, Any]]:
        level = self.selected_difficulty.value
        return [q for q in self.questions if q.get("difficulty") == level]

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def counts_by_difficulty(self) -> Dict[Difficulty, int]:
        counts = {level: 0 for level in Difficulty}
        for q in self.questions:
            try:
                counts[Difficulty(q.get("difficulty"))] += 1
            except ValueError:
                continue
        return counts

    @property
    def counts_by_type(self) -> Dict[str, int]:
        counts = {API_OPEN: 0, API_MCQ: 0}
        for q in self.questions:
            counts[to_api_type(q.get("type") or API_OPEN)] += 1
        return counts

    # ---------- delete confirmation ----------

    def request_delete(self, question: Dict[str, Any]) -> None:
        self.pending_delete = PendingDelete(id=question["id"], text=question.get("text", ""))

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        pending = self.pending_delete
        if pending is None:
            return False
        self.pending_delete = None
        try:
            self.client.delete(pending.id)
        except (ApiError, httpx.HTTPError) as e:
            logger.warning("could not delete question %s: %s", pending.id, e)
            return False
        self.refresh()
        return True

    # ---------- form ----------

    def submit(self) -> Dict[str, Any]:
        """Send the form. FormError / ApiError propagate so the caller can alert."""
        created = self.client.create(self.form.payload())
        self.form.reset()
        self.refresh()
        return created
