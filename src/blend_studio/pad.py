"""Two-axis balance pad."""

from __future__ import annotations

from collections.abc import Callable

from blend_studio.geometry import Point, Rect

Coordinate = tuple[float, float]
CoordinateListener = Callable[[Coordinate], None]


def normalize(region: Rect, point: Point) -> Coordinate:
    """Map a screen point to [-1, 1] x [-1, 1].

    The point is clamped to the region first. Screen y grows downwards, the
    output y grows upwards, so the top-left corner maps to (-1, 1).
    """
    clamped = region.clamp(point)
    u = (clamped.x - region.left) / region.width
    v = (clamped.y - region.top) / region.height
    return u * 2 - 1, (1 - v) * 2 - 1


def clamp_coordinate(x: float, y: float) -> Coordinate:
    return max(-1.0, min(1.0, float(x))), max(-1.0, min(1.0, float(y)))


class CoordinatePad:
    """Emits normalized coordinates while a press or drag is active."""

    def __init__(self, region: Rect, on_change: CoordinateListener | None = None):
        self.region = region
        self.active = False
        self.value: Coordinate = (0.0, 0.0)
        self._listeners: list[CoordinateListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

    def add_listener(self, listener: CoordinateListener) -> None:
        self._listeners.append(listener)

    def press(self, point: Point) -> Coordinate:
        self.active = True
        return self._update(point)

    def move(self, point: Point) -> Coordinate | None:
        if not self.active:
            return None
        return self._update(point)

    def release(self) -> None:
        self.active = False

    def _update(self, point: Point) -> Coordinate:
        self.value = normalize(self.region, point)
        for listener in self._listeners:
            listener(self.value)
        return self.value
