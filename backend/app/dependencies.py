"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException, Request

from app.config import Settings
from app.engine.config import ScoringConfig
from app.engine.session import StrokeSession
from app.engine.store import SessionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def scoring_config_from_settings(s: Settings) -> ScoringConfig:
    return ScoringConfig(
        min_point_spacing=s.min_point_spacing,
        max_point_interval_ms=s.max_point_interval_ms,
        min_fit_points=s.min_fit_points,
        poor_fit_quality=s.poor_fit_quality,
        collinear_tolerance=s.collinear_tolerance,
        high_quality_percent=s.high_quality_percent,
        medium_quality_percent=s.medium_quality_percent,
    )


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def lookup_session(store: SessionStore, session_id: str) -> StrokeSession:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}") from None
