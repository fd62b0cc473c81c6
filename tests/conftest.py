import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from capabilities import get_capabilities, probe_capabilities
from db import Base, get_db
from main import app

# legacy layout: the table as created before hint1 was added
LEGACY_DDL = """
CREATE TABLE questions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    difficulty VARCHAR(16) NOT NULL DEFAULT 'facil',
    type VARCHAR(32) NOT NULL,
    answer TEXT NOT NULL,
    options JSON,
    correct_index INTEGER,
    created_at DATETIME NOT NULL,
    used_at DATETIME
)
"""


def _make_engine(path):
    return create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})


def _client_for(engine, mode="auto"):
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def _get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    caps = probe_capabilities(engine, mode=mode)
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_capabilities] = lambda: caps
    return TestClient(app), caps


@pytest.fixture
def engine(tmp_path):
    eng = _make_engine(tmp_path / "questions.db")
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def legacy_engine(tmp_path):
    eng = _make_engine(tmp_path / "legacy.db")
    with eng.begin() as conn:
        conn.execute(text(LEGACY_DDL))
    yield eng
    eng.dispose()


@pytest.fixture
def client(engine):
    c, _ = _client_for(engine)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def legacy(legacy_engine):
    c, caps = _client_for(legacy_engine)
    yield c, caps
    app.dependency_overrides.clear()


@pytest.fixture
def pinned_legacy(legacy_engine):
    # QUESTIONS_HINT1=off on a database that lacks the column
    c, caps = _client_for(legacy_engine, mode="off")
    yield c, caps
    app.dependency_overrides.clear()
