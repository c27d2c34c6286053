"""Drag-and-drop flavor selection into the cup."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from blend_studio.catalog import FLAVOR_CATALOG, MAX_FLAVORS
from blend_studio.geometry import Point, Rect
from blend_studio.schema import FlavorTag

logger = logging.getLogger(__name__)

SelectionListener = Callable[[tuple[str, ...]], None]


class SelectionStore(Protocol):
    """Owner of the selected flavor ids (the flow controller in practice)."""

    @property
    def selected_flavors(self) -> tuple[str, ...]: ...

    def add_flavor(self, flavor_id: str) -> bool: ...

    def remove_flavor(self, flavor_id: str) -> bool: ...


class DragSelectionSurface:
    """Tracks one drag gesture at a time over a set of flavor tags.

    The drop target is a single rectangle. Dropping inside it selects the
    dragged flavor when the cup still has room; anything else sends the tag
    back to where it started. Selected tags are removed with a tap.
    """

    def __init__(
        self,
        target: Rect,
        store: SelectionStore,
        *,
        items: Iterable[FlavorTag] = FLAVOR_CATALOG,
        max_selected: int = MAX_FLAVORS,
    ):
        self.target = target
        self.store = store
        self.items = {item.id: item for item in items}
        self.max_selected = max_selected
        self.active_id: str | None = None
        self.origin: Point | None = None
        self.pointer: Point | None = None
        self._listeners: list[SelectionListener] = []

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self.store.selected_flavors)

    @property
    def is_full(self) -> bool:
        return len(self.selected) >= self.max_selected

    @property
    def is_over_target(self) -> bool:
        if self.active_id is None or self.pointer is None:
            return False
        return self.target.contains(self.pointer)

    def add_listener(self, listener: SelectionListener) -> None:
        self._listeners.append(listener)

    def is_selected(self, flavor_id: str) -> bool:
        return flavor_id in self.selected

    def is_disabled(self, flavor_id: str) -> bool:
        return not self.is_selected(flavor_id) and self.is_full

    def is_draggable(self, flavor_id: str) -> bool:
        return flavor_id in self.items and not self.is_selected(flavor_id) and not self.is_full

    def start_drag(self, flavor_id: str, point: Point) -> bool:
        if self.active_id is not None or not self.is_draggable(flavor_id):
            return False
        self.active_id = flavor_id
        self.origin = point
        self.pointer = point
        return True

    def move(self, point: Point) -> bool:
        """Update the pointer and report whether it hovers the cup."""
        if self.active_id is None:
            return False
        self.pointer = point
        return self.is_over_target

    def end_drag(self, point: Point | None = None) -> bool:
        """Finish the gesture; True when the flavor landed in the cup."""
        if self.active_id is None:
            return False
        if point is not None:
            self.pointer = point

        flavor_id = self.active_id
        dropped = self.is_over_target
        self.active_id = None
        self.origin = None
        self.pointer = None

        if not dropped or self.is_selected(flavor_id) or self.is_full:
            logger.debug("drop of %s rejected", flavor_id)
            return False
        if not self.store.add_flavor(flavor_id):
            return False
        self._emit()
        return True

    def cancel(self) -> None:
        self.active_id = None
        self.origin = None
        self.pointer = None

    def tap(self, flavor_id: str) -> bool:
        """Remove a selected flavor; taps on anything else are ignored."""
        if not self.is_selected(flavor_id):
            return False
        if not self.store.remove_flavor(flavor_id):
            return False
        self._emit()
        return True

    def _emit(self) -> None:
        selected = self.selected
        for listener in self._listeners:
            listener(selected)


def fill_ratio(selected: Sequence[str], max_selected: int = MAX_FLAVORS) -> float:
    """How full the cup is drawn, 0.0 to 1.0."""
    return min(len(selected), max_selected) / max_selected
