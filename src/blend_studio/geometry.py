"""Screen-space value types shared by the input surfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in screen coordinates (y grows downwards)."""

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Rect needs a positive size, got {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, point: Point) -> bool:
        """Hit test with inclusive edges."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def clamp(self, point: Point) -> Point:
        return Point(
            x=max(self.left, min(self.right, point.x)),
            y=max(self.top, min(self.bottom, point.y)),
        )
