"""Statistics service tying the entry log to the analytics functions."""

from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo

from sugar_counter.domain.achievements import AchievementStatus
from sugar_counter.domain.entries import Entry
from sugar_counter.domain.insights import Insight
from sugar_counter.domain.stats import (
    ChartSummary,
    OverviewStats,
    StreakSummary,
    TimeBreakdown,
    WeeklyTrend,
)
from sugar_counter.services.achievements import evaluate_achievements
from sugar_counter.services.aggregation import day_totals
from sugar_counter.services.entries import EntryRepository
from sugar_counter.services.insights import generate_insight
from sugar_counter.services.streaks import summarize_streaks
from sugar_counter.services.time_segments import calculate_time_breakdown
from sugar_counter.services.trends import (
    calculate_chart,
    calculate_month,
    calculate_overview,
    calculate_weekly_trend,
)
from sugar_counter.services.user_settings import GoalSettingsService


@dataclass
class StatsService:
    """Computes analytics from a fresh snapshot of the log on every call."""

    repository: EntryRepository
    settings_service: GoalSettingsService
    timezone_name: str = "UTC"

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def resolve_reference(self, reference: datetime | None = None) -> datetime:
        """Return the reference instant in the user's timezone."""
        if reference is None:
            return datetime.now(tz=self.tz)
        if reference.tzinfo is None:
            return reference.replace(tzinfo=self.tz)
        return reference.astimezone(self.tz)

    def get_daily_insight(self, reference: datetime | None = None) -> Insight:
        return generate_insight(
            self._snapshot(),
            self.settings_service.get_settings(),
            self.resolve_reference(reference),
        )

    def get_weekly_trend(self, reference: datetime | None = None) -> WeeklyTrend:
        return calculate_weekly_trend(
            self._snapshot(), self.resolve_reference(reference).date()
        )

    def get_time_breakdown(self) -> TimeBreakdown:
        return calculate_time_breakdown(self._snapshot(), self.tz)

    def get_streaks(self, reference: datetime | None = None) -> StreakSummary:
        settings = self.settings_service.get_settings()
        return summarize_streaks(
            day_totals(self._snapshot()),
            settings.daily_goal,
            self.resolve_reference(reference).date(),
        )

    def get_overview(self) -> OverviewStats:
        return calculate_overview(
            day_totals(self._snapshot()), self.settings_service.get_settings()
        )

    def get_chart(
        self, reference: datetime | None = None, days: int = 7
    ) -> ChartSummary:
        return calculate_chart(
            day_totals(self._snapshot()),
            self.settings_service.get_settings(),
            self.resolve_reference(reference).date(),
            days,
        )

    def get_calendar(
        self, month: date | None = None, reference: datetime | None = None
    ) -> ChartSummary:
        """Day-by-day totals for the month containing ``month``.

        Defaults to the month of the reference instant.
        """
        if month is None:
            month = self.resolve_reference(reference).date()
        return calculate_month(
            day_totals(self._snapshot()),
            self.settings_service.get_settings(),
            month.year,
            month.month,
        )

    def get_achievements(self) -> list[AchievementStatus]:
        settings = self.settings_service.get_settings()
        return evaluate_achievements(day_totals(self._snapshot()), settings.daily_goal)

    def get_day_totals(self) -> dict[str, float]:
        """Day key to total mapping consumed by the CSV export."""
        return day_totals(self._snapshot())

    def _snapshot(self) -> tuple[Entry, ...]:
        return tuple(self.repository.list_entries())
