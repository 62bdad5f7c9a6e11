"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report store failures without leaking driver details."""

    logger.error(
        "Storage failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse({"detail": "Storage unavailable"}, status_code=503)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers and error handlers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)


__all__ = ["register_routes", "storage_error_handler"]
