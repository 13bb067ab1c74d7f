"""Domain models for derived statistics."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from sugar_counter.domain.settings import IntakeStatus


@dataclass(frozen=True)
class DayTotal:
    """Total intake for one calendar day."""

    day_key: str
    day: date
    total: float


@dataclass(frozen=True)
class WeeklyTrend:
    """Average daily intake this week versus last week."""

    this_week_average: float
    last_week_average: float
    this_week_days_tracked: int
    last_week_days_tracked: int

    @property
    def difference(self) -> float:
        return self.last_week_average - self.this_week_average

    @property
    def is_improving(self) -> bool:
        return self.difference > 0

    @property
    def percent_change(self) -> float:
        if self.last_week_average <= 0:
            return 0.0
        return self.difference / self.last_week_average * 100

    @property
    def has_enough_data(self) -> bool:
        return self.this_week_days_tracked >= 2 and self.last_week_days_tracked >= 2


@dataclass(frozen=True)
class WeekPartition:
    """Average daily totals for weekdays and weekend days."""

    weekday_average: float
    weekend_average: float
    weekday_days: int
    weekend_days: int

    @property
    def difference(self) -> float:
        """Weekend average minus weekday average."""
        return self.weekend_average - self.weekday_average


class DayPeriod(str, Enum):
    """Hour-of-day segments."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @property
    def title(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class TimeBreakdown:
    """Per-day average intake for each period of the day."""

    morning: float
    afternoon: float
    evening: float
    night: float

    def average(self, period: DayPeriod) -> float:
        return getattr(self, period.value)

    @property
    def peak_period(self) -> str:
        """Title of the period with the highest average, Morning on ties."""
        peak = DayPeriod.MORNING
        for period in DayPeriod:
            if self.average(period) > self.average(peak):
                peak = period
        return peak.title

    @property
    def total(self) -> float:
        return self.morning + self.afternoon + self.evening + self.night

    def percentage(self, period: DayPeriod | str) -> float:
        """Share of the summed averages that falls in a period."""
        if self.total <= 0:
            return 0.0
        if not isinstance(period, DayPeriod):
            try:
                period = DayPeriod(period.lower())
            except ValueError:
                return 0.0
        return self.average(period) / self.total * 100


@dataclass(frozen=True)
class StreakSummary:
    """Current and longest runs of days under goal."""

    current: int
    longest: int


@dataclass(frozen=True)
class OverviewStats:
    """Headline statistics across all tracked days."""

    total_days_tracked: int
    days_under_goal: int
    average_daily: float
    best_day: float
    weekday_average: float
    weekend_average: float

    @property
    def success_rate(self) -> float:
        if self.total_days_tracked == 0:
            return 0.0
        return self.days_under_goal / self.total_days_tracked * 100


@dataclass(frozen=True)
class ChartDay:
    """One bar of the recent-days chart."""

    day_key: str
    day: date
    total: float
    status: IntakeStatus


@dataclass(frozen=True)
class ChartSummary:
    """Zero-filled series for the last N days with summary counts."""

    days: list[ChartDay]
    average: float
    days_over_limit: int
    days_in_green: int
