"""Day bucketing of intake entries."""

from collections.abc import Iterable
from datetime import date

from sugar_counter.domain.entries import Entry, day_from_key
from sugar_counter.domain.stats import DayTotal


def day_totals(
    entries: Iterable[Entry], start: date | None = None, end: date | None = None
) -> dict[str, float]:
    """Sum entry quantities per day key, optionally within an inclusive range."""
    totals: dict[str, float] = {}
    for entry in entries:
        if not _in_range(entry.day_key, start, end):
            continue
        totals[entry.day_key] = totals.get(entry.day_key, 0.0) + entry.quantity
    return totals


def tracked_days(
    entries: Iterable[Entry], start: date | None = None, end: date | None = None
) -> set[str]:
    """Return the distinct day keys that have at least one entry."""
    return {entry.day_key for entry in entries if _in_range(entry.day_key, start, end)}


def sorted_day_totals(totals: dict[str, float]) -> list[DayTotal]:
    """Return day totals in chronological order."""
    return [
        DayTotal(day_key=day_key, day=day_from_key(day_key), total=totals[day_key])
        for day_key in sorted(totals)
    ]


def entries_for_day(entries: Iterable[Entry], day_key: str) -> list[Entry]:
    """Return a day's entries ordered by sequence number."""
    return sorted(
        (entry for entry in entries if entry.day_key == day_key),
        key=lambda entry: entry.sequence_number,
    )


def _in_range(day_key: str, start: date | None, end: date | None) -> bool:
    if start is None and end is None:
        return True
    day = day_from_key(day_key)
    if start is not None and day < start:
        return False
    return end is None or day <= end
