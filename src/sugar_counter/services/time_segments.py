"""Hour-of-day segmentation of intake entries."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import tzinfo

from sugar_counter.domain.entries import Entry
from sugar_counter.domain.stats import DayPeriod, TimeBreakdown

MORNING_START = 6
AFTERNOON_START = 12
EVENING_START = 18


@dataclass
class PeriodBucket:
    """Running totals for one period of the day."""

    grams: float = 0.0
    entry_count: int = 0
    days: set[str] = field(default_factory=set)

    @property
    def average_per_day(self) -> float:
        if not self.days:
            return 0.0
        return self.grams / len(self.days)


def period_for_hour(hour: int) -> DayPeriod:
    """Map a local hour (0-23) to its period."""
    if MORNING_START <= hour < AFTERNOON_START:
        return DayPeriod.MORNING
    if AFTERNOON_START <= hour < EVENING_START:
        return DayPeriod.AFTERNOON
    if hour >= EVENING_START:
        return DayPeriod.EVENING
    return DayPeriod.NIGHT


def local_hour(entry: Entry, tz: tzinfo | None = None) -> int:
    timestamp = entry.timestamp.astimezone(tz) if tz is not None else entry.timestamp
    return timestamp.hour


def bucket_by_period(
    entries: Iterable[Entry], tz: tzinfo | None = None
) -> dict[DayPeriod, PeriodBucket]:
    """Group entry quantities into the four periods of the day."""
    buckets = {period: PeriodBucket() for period in DayPeriod}
    for entry in entries:
        bucket = buckets[period_for_hour(local_hour(entry, tz))]
        bucket.grams += entry.quantity
        bucket.entry_count += 1
        bucket.days.add(entry.day_key)
    return buckets


def period_totals(
    entries: Iterable[Entry], tz: tzinfo | None = None
) -> dict[DayPeriod, float]:
    """Return the raw gram sum for each period."""
    return {
        period: bucket.grams
        for period, bucket in bucket_by_period(entries, tz).items()
    }


def calculate_time_breakdown(
    entries: Iterable[Entry], tz: tzinfo | None = None
) -> TimeBreakdown:
    """Average per-day intake for each period, over days active in that period."""
    buckets = bucket_by_period(entries, tz)
    return TimeBreakdown(
        morning=buckets[DayPeriod.MORNING].average_per_day,
        afternoon=buckets[DayPeriod.AFTERNOON].average_per_day,
        evening=buckets[DayPeriod.EVENING].average_per_day,
        night=buckets[DayPeriod.NIGHT].average_per_day,
    )
