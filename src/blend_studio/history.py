"""Session history of generated blends (the bean passport)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from blend_studio.config import Language
from blend_studio.schema import CoffeeResult, HistoryEntry
from blend_studio.translations import get_text

PASSPORT_SLOTS = 12


def mood_for(x: float) -> Literal["bright", "deep"]:
    return "bright" if x > 0 else "deep"


class HistoryLog:
    """Append-only, newest first. Nothing is evicted during a session."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> HistoryEntry | None:
        return self._entries[0] if self._entries else None

    def record(
        self,
        result: CoffeeResult,
        *,
        x: float,
        source: Literal["live", "fallback"] = "live",
        timestamp: datetime | None = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            timestamp=timestamp or datetime.now(timezone.utc),
            result=result,
            mood_color=mood_for(x),
            source=source,
        )
        self._entries.insert(0, entry)
        return entry

    def empty_slots(self) -> int:
        """Unstamped passport slots left on the first page."""
        return max(0, PASSPORT_SLOTS - len(self._entries))

    def live_entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(entry for entry in self._entries if entry.source == "live")

    def insight(self, language: Language) -> str | None:
        """Short note on which way recent choices lean, or None if empty."""
        if not self._entries:
            return None
        bright = sum(1 for entry in self._entries if entry.mood_color == "bright")
        key = "insight_bright" if bright * 2 >= len(self._entries) else "insight_deep"
        return get_text(language)[key]
