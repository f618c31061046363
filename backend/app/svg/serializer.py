"""Write SVG output for a stroke and its fitted circle."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from app.engine.point import Point
from app.engine.scoring import FitResult

STROKE_COLOR = "#333333"


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions ({"tag": ..., **attrs})."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" width="{canvas_w:g}" height="{canvas_h:g}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def stroke_element(points: Sequence[Point]) -> dict[str, Any] | None:
    if not points:
        return None
    coords = " ".join(f"{p.x:g},{p.y:g}" for p in points)
    return {
        "tag": "polyline",
        "points": coords,
        "fill": "none",
        "stroke": STROKE_COLOR,
        "stroke-width": 2,
    }


def circle_element(fit: FitResult) -> dict[str, Any]:
    return {
        "tag": "circle",
        "cx": f"{fit.center.x:g}",
        "cy": f"{fit.center.y:g}",
        "r": f"{fit.radius:g}",
        "fill": "none",
        "stroke": fit.color,
        "stroke-width": 3,
        "data-quality": f"{fit.quality_percent:.1f}",
    }


def render_stroke_svg(
    points: Sequence[Point],
    fit: FitResult | None,
    canvas_w: float = 800.0,
    canvas_h: float = 600.0,
) -> str:
    """Stroke as a polyline, with the fitted circle on top when there is one."""
    elements = []
    stroke = stroke_element(points)
    if stroke is not None:
        elements.append(stroke)
    title = "Empty stroke"
    if fit is not None:
        elements.append(circle_element(fit))
        title = f"{fit.quality_percent:.1f}% circle"
    return serialize_svg(elements, canvas_w, canvas_h, title=title)
