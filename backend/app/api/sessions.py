"""/api/sessions — drawing attempt lifecycle and point submission."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.config import Settings
from app.dependencies import get_session_store, get_settings, lookup_session
from app.engine.store import SessionStore
from app.models.requests import PointRequest
from app.models.responses import PointModel, SessionResponse, UpdateResponse
from app.svg.serializer import render_stroke_svg

router = APIRouter(prefix="/sessions")


def _snapshot(session_id: str, store: SessionStore) -> SessionResponse:
    session = lookup_session(store, session_id)
    return SessionResponse(
        session_id=session_id,
        point_count=session.point_count,
        points=[PointModel.from_point(p) for p in session.points],
    )


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(store: SessionStore = Depends(get_session_store)) -> SessionResponse:
    session_id, _ = store.create()
    return SessionResponse(session_id=session_id)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    return _snapshot(session_id, store)


@router.post("/{session_id}/start", response_model=SessionResponse)
async def restart_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    lookup_session(store, session_id).start()
    return _snapshot(session_id, store)


@router.post("/{session_id}/points", response_model=UpdateResponse)
async def submit_point(
    session_id: str,
    req: PointRequest,
    store: SessionStore = Depends(get_session_store),
) -> UpdateResponse:
    session = lookup_session(store, session_id)
    result = session.update(req.x, req.y)
    return UpdateResponse.from_result(result, session.point_count)


@router.get("/{session_id}/svg")
async def render_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    session = lookup_session(store, session_id)
    fit = None
    if session.point_count >= session.config.min_fit_points:
        fit, _ = session.evaluate()
    svg = render_stroke_svg(session.points, fit, settings.canvas_width, settings.canvas_height)
    return Response(content=svg, media_type="image/svg+xml")


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> Response:
    lookup_session(store, session_id)
    store.discard(session_id)
    return Response(status_code=204)
