"""End-of-day projection from a partially logged day."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from sugar_counter.domain.entries import Entry

MIN_ENTRIES_TODAY = 2
ACTIVE_FROM_HOUR = 8
ACTIVE_UNTIL_HOUR = 22
TRACKING_DAY_START_HOUR = 6
MAX_HOURS_REMAINING = 16
REMAINING_RATE_FACTOR = 0.5


@dataclass(frozen=True)
class PaceProjection:
    """Projected end-of-day total based on the current hourly rate."""

    current_total: float
    hours_elapsed: int
    hourly_rate: float
    projected_total: float


def hours_since_midnight(reference: datetime) -> int:
    """Whole hours elapsed since local midnight of the reference instant."""
    start = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    elapsed = reference.astimezone(UTC) - start.astimezone(UTC)
    return int(elapsed.total_seconds() // 3600)


def project_pace(entries: Iterable[Entry], reference: datetime) -> PaceProjection | None:
    """Extrapolate today's total, or None outside active hours or with too few entries."""
    today_key = reference.date().isoformat()
    today_entries = [entry for entry in entries if entry.day_key == today_key]
    if len(today_entries) < MIN_ENTRIES_TODAY:
        return None

    hours_elapsed = hours_since_midnight(reference)
    if not ACTIVE_FROM_HOUR <= hours_elapsed < ACTIVE_UNTIL_HOUR:
        return None

    current_total = sum(entry.quantity for entry in today_entries)
    hours_remaining = min(MAX_HOURS_REMAINING, 24 - hours_elapsed)
    hourly_rate = current_total / max(1, hours_elapsed - TRACKING_DAY_START_HOUR)
    projected = current_total + hourly_rate * hours_remaining * REMAINING_RATE_FACTOR
    return PaceProjection(
        current_total=current_total,
        hours_elapsed=hours_elapsed,
        hourly_rate=hourly_rate,
        projected_total=projected,
    )
