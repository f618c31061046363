"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.dependencies import get_session_store
from app.engine.store import SessionStore
from app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: SessionStore = Depends(get_session_store)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", active_sessions=store.count)
