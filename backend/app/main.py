"""FastAPI app factory."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings
from app.dependencies import scoring_config_from_settings
from app.engine.store import SessionStore

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.perfectcircle_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app(
    app_settings: Settings | None = None,
    clock: Callable[[], int] = time.monotonic_ns,
) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(
        title="Perfect Circle",
        description="Freehand circle scoring — stroke gate, circle fit and quality classes",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = app_settings
    app.state.sessions = SessionStore(
        scoring_config_from_settings(app_settings),
        clock=clock,
        idle_timeout_s=app_settings.session_idle_timeout_s,
        max_sessions=app_settings.max_sessions,
    )

    from app.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
