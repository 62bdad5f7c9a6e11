"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    DB_RESET,
    SERVER_HOST,
    SERVER_PORT,
    configure_logging,
    engine,
)


def create_app(db_engine: Optional[Engine] = None) -> FastAPI:
    bound_engine = db_engine or engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if DB_RESET:
            SQLModel.metadata.drop_all(bound_engine)
        SQLModel.metadata.create_all(bound_engine)
        yield

    app = FastAPI(title="Reaction Board API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


def main() -> None:
    import uvicorn

    configure_logging()
    uvicorn.run("reaction_board.app:app", host=SERVER_HOST, port=SERVER_PORT)


app = create_app()


if __name__ == "__main__":
    main()
