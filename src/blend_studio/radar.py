"""Hexagonal radar chart geometry for a taste profile."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from blend_studio.config import Language
from blend_studio.geometry import Point
from blend_studio.schema import RADAR_AXES, RadarData
from blend_studio.translations import get_text

MAX_VALUE = 10
DEFAULT_VALUE = 5
WEB_LEVELS = (2, 4, 6, 8, 10)
LABEL_LEVEL = 12.5


@dataclass(frozen=True)
class RadarGeometry:
    center: Point
    radius: float
    points: tuple[Point, ...]
    webs: tuple[tuple[Point, ...], ...]
    spokes: tuple[Point, ...]
    label_anchors: tuple[Point, ...]


def axis_point(value: float, index: int, *, center: Point, radius: float, total: int = 6) -> Point:
    """Point for one axis; index 0 sits straight up, then clockwise."""
    angle = (math.pi * 2 * index) / total - math.pi / 2
    r = (value / MAX_VALUE) * radius
    return Point(center.x + r * math.cos(angle), center.y + r * math.sin(angle))


def _values(data: RadarData | Mapping[str, float]) -> list[float]:
    if isinstance(data, RadarData):
        data = data.model_dump()
    values = []
    for axis in RADAR_AXES:
        value = data.get(axis)
        if value is None:
            value = DEFAULT_VALUE
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"{axis} must be within 0-{MAX_VALUE}, got {value}")
        values.append(value)
    return values


def _ring(level: float, center: Point, radius: float) -> tuple[Point, ...]:
    total = len(RADAR_AXES)
    return tuple(axis_point(level, i, center=center, radius=radius, total=total) for i in range(total))


def radar_geometry(
    data: RadarData | Mapping[str, float],
    *,
    radius: float = 80.0,
    center: Point = Point(100.0, 100.0),
) -> RadarGeometry:
    """Compute the data polygon plus reference rings.

    Axes missing from a plain mapping are drawn at 5.
    """
    values = _values(data)
    total = len(values)
    points = tuple(
        axis_point(value, i, center=center, radius=radius, total=total) for i, value in enumerate(values)
    )
    return RadarGeometry(
        center=center,
        radius=radius,
        points=points,
        webs=tuple(_ring(level, center, radius) for level in WEB_LEVELS),
        spokes=_ring(MAX_VALUE, center, radius),
        label_anchors=_ring(LABEL_LEVEL, center, radius),
    )


def svg_points(points: Sequence[Point]) -> str:
    """Format points for an SVG `points` attribute."""
    return " ".join(f"{p.x:g},{p.y:g}" for p in points)


def radar_labels(language: Language) -> tuple[str, ...]:
    labels = get_text(language)["radar_labels"]
    return tuple(labels[axis] for axis in RADAR_AXES)
