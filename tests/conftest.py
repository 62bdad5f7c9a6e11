from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import reaction_board.models  # noqa: F401
from reaction_board.app import create_app
from reaction_board.core import get_session
from reaction_board.models import Attempt


@pytest.fixture()
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture()
def app(engine):
    application = create_app(engine)

    def _session_override():
        with Session(engine) as db_session:
            yield db_session

    application.dependency_overrides[get_session] = _session_override
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def add_attempt(session):
    """Insert an attempt directly, optionally backdated."""

    def _add(
        name: str,
        reaction_time_ms: int,
        is_false_start: bool = False,
        created_at: Optional[datetime] = None,
    ) -> Attempt:
        attempt = Attempt(
            participant_name=name,
            reaction_time_ms=reaction_time_ms,
            is_false_start=is_false_start,
        )
        if created_at is not None:
            attempt.created_at = created_at
        session.add(attempt)
        session.commit()
        session.refresh(attempt)
        return attempt

    return _add
