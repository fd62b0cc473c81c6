import pytest

from errors import ValidationError
from schemas.questions import QuestionIn
from validation import (
    parse_question_id,
    resolve_correct_index,
    resolve_page_params,
    total_pages,
    validate_question,
)

OPTIONS = ["Paris", "Lyon", "Nice", "Metz"]


@pytest.mark.parametrize(
    "page,limit,expected",
    [
        (None, None, (1, 5)),
        ("2", "10", (2, 10)),
        ("abc", "xyz", (1, 5)),
        ("0", "-3", (1, 5)),
        ("1", "201", (1, 5)),
        ("3", "200", (3, 200)),
        ("inf", "nan", (1, 5)),
        ("2.5", "", (1, 5)),
    ],
)
def test_resolve_page_params(page, limit, expected):
    assert resolve_page_params(page, limit) == expected


@pytest.mark.parametrize(
    "total,limit,expected",
    [(0, 5, 1), (5, 5, 1), (6, 5, 2), (12, 5, 3), (200, 200, 1), (401, 200, 3)],
)
def test_total_pages(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_open_question_trimmed_and_no_options():
    f = validate_question(QuestionIn(text="  CSROHA ", type="OPEN", answer=" CHAROS "))
    assert f.text == "CSROHA"
    assert f.answer == "CHAROS"
    assert f.type == "discursiva"
    assert f.difficulty == "facil"
    assert f.options is None and f.correct_index is None


def test_open_question_requires_answer():
    with pytest.raises(ValidationError, match="answer required for open question"):
        validate_question(QuestionIn(text="CSROHA", type="OPEN", answer="   "))


def test_text_required_first():
    with pytest.raises(ValidationError, match="question text required"):
        validate_question(QuestionIn(text=" ", type="MCQ", options=[]))


def test_mcq_defaults_index_and_answer():
    f = validate_question(QuestionIn(text="Capital of France?", type="MCQ", options=OPTIONS))
    assert f.correct_index == 0
    assert f.answer == "Paris"
    assert f.type == "multipla_escolha"


def test_mcq_explicit_answer_wins():
    f = validate_question(
        QuestionIn(text="q", type="MCQ", options=OPTIONS, correctIndex=2, answer=" Nice! ")
    )
    assert f.correct_index == 2
    assert f.answer == "Nice!"


@pytest.mark.parametrize(
    "options",
    [["a", "b", "c"], ["a", "b", "c", " "], ["a", "b", "c", "d", "e"], ["a", "b", "c", 4], None],
)
def test_mcq_requires_four_filled_options(options):
    with pytest.raises(ValidationError, match="MCQ requires 4 filled options"):
        validate_question(QuestionIn(text="q", type="MCQ", options=options))


@pytest.mark.parametrize(
    "raw,expected",
    [(None, 0), (3, 3), (4, 0), (-1, 0), ("2", 0), (True, 0), (1.0, 1), (3.0, 3), (2.5, 0), (4.0, 0)],
)
def test_resolve_correct_index(raw, expected):
    assert resolve_correct_index(raw) == expected


def test_difficulty_alias_and_unknown():
    f = validate_question(QuestionIn(text="q", answer="a", difficulty="hard"))
    assert f.difficulty == "dificil"
    with pytest.raises(ValidationError, match="invalid difficulty"):
        validate_question(QuestionIn(text="q", answer="a", difficulty="impossible"))


def test_parse_question_id():
    assert parse_question_id("42") == 42
    for raw in ("abc", "0", "-1", "1.5", "", None):
        with pytest.raises(ValidationError, match="invalid id"):
            parse_question_id(raw)
