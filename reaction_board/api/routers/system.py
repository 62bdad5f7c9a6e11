"""System-level API endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter

from ...core import utcnow

router = APIRouter(tags=["system"])


@router.get("/healthcheck", operation_id="healthcheck")
def healthcheck() -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "timestamp": utcnow().isoformat()}


__all__ = ["router"]
