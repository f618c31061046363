"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.engine.errors import StrokeError
from app.engine.point import Point
from app.engine.scoring import FitResult
from app.engine.session import UpdateResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    active_sessions: int = 0


class PointModel(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, p: Point) -> PointModel:
        return cls(x=p.x, y=p.y)


class FitModel(BaseModel):
    center: PointModel
    radius: float
    quality_percent: float
    quality_class: str
    color: str
    is_red_flag: bool = False

    @classmethod
    def from_result(cls, fit: FitResult) -> FitModel:
        return cls(
            center=PointModel.from_point(fit.center),
            radius=fit.radius,
            quality_percent=fit.quality_percent,
            quality_class=fit.quality_class.value,
            color=fit.color,
            is_red_flag=fit.is_red_flag,
        )


class StrokeErrorModel(BaseModel):
    kind: str
    message: str

    @classmethod
    def from_error(cls, error: StrokeError | None) -> StrokeErrorModel | None:
        if error is None:
            return None
        return cls(kind=error.kind.value, message=error.message)


class UpdateResponse(BaseModel):
    accepted: bool
    point_count: int = 0
    fit: FitModel | None = None
    error: StrokeErrorModel | None = None
    fit_error: StrokeErrorModel | None = None

    @classmethod
    def from_result(cls, result: UpdateResult, point_count: int) -> UpdateResponse:
        return cls(
            accepted=result.accepted,
            point_count=point_count,
            fit=FitModel.from_result(result.fit) if result.fit is not None else None,
            error=StrokeErrorModel.from_error(result.error),
            fit_error=StrokeErrorModel.from_error(result.fit_error),
        )


class SessionResponse(BaseModel):
    session_id: str
    point_count: int = 0
    points: list[PointModel] = Field(default_factory=list)
