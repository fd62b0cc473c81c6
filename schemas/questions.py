# schemas/questions.py
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuestionIn(BaseModel):
    # Loose on purpose: per-type rules live in validation.validate_question
    model_config = ConfigDict(populate_by_name=True)
    text: Optional[str] = None
    difficulty: Optional[str] = None
    type: Optional[str] = None
    answer: Optional[str] = None
    options: Optional[List[Any]] = None
    correct_index: Optional[Any] = Field(default=None, alias="correctIndex")
    hint1: Optional[str] = None


class QuestionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: int
    text: str
    difficulty: str
    type: str
    answer: str
    hint1: Optional[str] = None
    options: Optional[List[str]] = None
    correct_index: Optional[int] = Field(default=None, alias="correctIndex")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    used_at: Optional[datetime] = Field(default=None, alias="usedAt")


class QuestionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")
    count: int
    data: List[QuestionOut]


class MessageOut(BaseModel):
    message: str
