"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PointRequest(BaseModel):
    x: float = Field(..., allow_inf_nan=False, description="Sample x in canvas coordinates")
    y: float = Field(..., allow_inf_nan=False, description="Sample y in canvas coordinates")
