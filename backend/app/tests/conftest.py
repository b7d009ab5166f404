import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

from app.core.security import create_access_token  # noqa: E402
from app.db.database import Base  # noqa: E402
from app.deps.db import get_db  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def statements(db):
    """Records the kind of every ORM statement run through ``db``."""
    seen: list[str] = []

    def _record(state):
        if state.is_select:
            seen.append("select")
        elif state.is_delete:
            seen.append("delete")
        elif state.is_insert:
            seen.append("insert")
        else:
            seen.append("other")

    event.listen(db, "do_orm_execute", _record)
    yield seen
    event.remove(db, "do_orm_execute", _record)


@pytest.fixture
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user_id: str = "usr1"):
        return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}
    return _headers
