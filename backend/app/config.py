"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    perfectcircle_env: str = "development"
    perfectcircle_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Stroke gate
    min_point_spacing: float = 10.0
    max_point_interval_ms: int = 100

    # Fit gate and quality classes
    min_fit_points: int = 3
    poor_fit_quality: float = 50.0
    collinear_tolerance: float = 1e-9
    high_quality_percent: float = 95.0
    medium_quality_percent: float = 90.0

    # Session store
    session_idle_timeout_s: float = 600.0
    max_sessions: int = 1000

    # Rendered canvas
    canvas_width: float = 800.0
    canvas_height: float = 600.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
