"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from .config import DATABASE_URL, PROJECT_ROOT


def _default_sqlite_url() -> str:
    data_dir = PROJECT_ROOT / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'app.db'}"


def build_engine(url: str | None = None) -> Engine:
    """Create an engine for ``url``, falling back to the local SQLite file."""

    url = url or DATABASE_URL or _default_sqlite_url()
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = build_engine()


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["build_engine", "engine", "get_session"]
