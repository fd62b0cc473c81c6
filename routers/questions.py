from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import repository
from capabilities import SchemaCapabilities, get_capabilities
from db import get_db
from errors import UnexpectedError
from schemas.questions import MessageOut, QuestionIn, QuestionOut, QuestionPage
from validation import parse_question_id, resolve_page_params, validate_question

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["questions"])

db_dependency = Annotated[Session, Depends(get_db)]
caps_dependency = Annotated[SchemaCapabilities, Depends(get_capabilities)]


@router.get("", response_model=QuestionPage)
def list_questions(
    db: db_dependency,
    caps: caps_dependency,
    # raw strings: bad values fall back to defaults instead of a 422
    page: Optional[str] = Query(default=None),
    limit: Optional[str] = Query(default=None),
    difficulty: Optional[str] = None,
):
    p, lim = resolve_page_params(page, limit)
    try:
        return repository.list_questions(db, caps, p, lim, difficulty)
    except SQLAlchemyError as e:
        logger.exception("GET /questions failed")
        raise UnexpectedError("failed to fetch questions") from e


@router.post("", response_model=QuestionOut, status_code=201)
def create_question(body: QuestionIn, db: db_dependency, caps: caps_dependency):
    fields = validate_question(body)
    try:
        return repository.create_question(db, caps, fields)
    except SQLAlchemyError as e:
        logger.exception("POST /questions failed")
        raise UnexpectedError("failed to create question") from e


@router.get("/{qid}", response_model=QuestionOut)
def get_question(qid: str, db: db_dependency, caps: caps_dependency):
    numeric_id = parse_question_id(qid)
    try:
        return repository.get_question(db, caps, numeric_id)
    except SQLAlchemyError as e:
        logger.exception("GET /questions/%s failed", qid)
        raise UnexpectedError("failed to fetch question") from e


@router.put("/{qid}", response_model=QuestionOut)
def update_question(qid: str, body: QuestionIn, db: db_dependency, caps: caps_dependency):
    numeric_id = parse_question_id(qid)
    fields = validate_question(body)
    try:
        return repository.update_question(db, caps, numeric_id, fields)
    except SQLAlchemyError as e:
        logger.exception("PUT /questions/%s failed", qid)
        raise UnexpectedError("failed to update question") from e


@router.delete("/{qid}", response_model=MessageOut)
def delete_question(qid: str, db: db_dependency):
    numeric_id = parse_question_id(qid)
    try:
        repository.delete_question(db, numeric_id)
    except SQLAlchemyError as e:
        logger.exception("DELETE /questions/%s failed", qid)
        raise UnexpectedError("failed to delete question") from e
    return {"message": "question deleted"}
