"""Tests for the history log."""

from datetime import datetime, timezone

from blend_studio.history import PASSPORT_SLOTS, HistoryLog, mood_for

from conftest import make_result


def test_newest_entry_first():
    log = HistoryLog()
    first = log.record(make_result(title="One"), x=0.5)
    second = log.record(make_result(title="Two"), x=-0.5)

    assert log.entries == (second, first)
    assert log.latest is second


def test_entry_shares_result_and_tags_provenance():
    log = HistoryLog()
    result = make_result()
    stamp = datetime(2025, 1, 1, tzinfo=timezone.utc)

    entry = log.record(result, x=-0.2, source="fallback", timestamp=stamp)

    assert entry.result is result
    assert entry.source == "fallback"
    assert entry.mood_color == "deep"
    assert entry.timestamp == stamp
    assert log.live_entries() == ()


def test_mood_for_sign_of_x():
    assert mood_for(0.01) == "bright"
    assert mood_for(0.0) == "deep"
    assert mood_for(-1.0) == "deep"


def test_empty_slots():
    log = HistoryLog()
    assert log.empty_slots() == PASSPORT_SLOTS
    for _ in range(PASSPORT_SLOTS + 2):
        log.record(make_result(), x=0)
    assert log.empty_slots() == 0
    assert len(log) == PASSPORT_SLOTS + 2


def test_insight_follows_majority_mood():
    log = HistoryLog()
    assert log.insight("en") is None

    log.record(make_result(), x=-0.5)
    assert "smooth" in log.insight("en")

    log.record(make_result(), x=0.5)
    log.record(make_result(), x=0.9)
    assert "acidity" in log.insight("en")
    assert "埃塞俄比亚" in log.insight("zh")
