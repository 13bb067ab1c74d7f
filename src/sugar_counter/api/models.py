"""Pydantic request and response models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from sugar_counter.domain.achievements import AchievementStatus
from sugar_counter.domain.entries import Entry
from sugar_counter.domain.insights import Insight
from sugar_counter.domain.settings import GoalPreset, GoalSettings, status_for
from sugar_counter.domain.stats import (
    ChartSummary,
    DayPeriod,
    OverviewStats,
    StreakSummary,
    TimeBreakdown,
    WeeklyTrend,
)


class EntryCreate(BaseModel):
    """Payload for logging a new entry."""

    grams: float = Field(gt=0, allow_inf_nan=False)
    logged_at: datetime | None = None
    label: str | None = None


class EntryUpdate(BaseModel):
    """Partial update for an entry; only fields that are sent are applied."""

    grams: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    label: str | None = None
    logged_at: datetime | None = None


class EntryOut(BaseModel):
    id: UUID
    grams: float
    item_number: int
    logged_at: datetime
    day_key: str
    label: str | None
    display_name: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryOut":
        return cls(
            id=entry.id,
            grams=entry.quantity,
            item_number=entry.sequence_number,
            logged_at=entry.timestamp,
            day_key=entry.day_key,
            label=entry.label,
            display_name=entry.display_name,
        )


class DayLogOut(BaseModel):
    """Entries and status for one day."""

    day_key: str
    total: float
    status: str
    status_label: str
    entries: list[EntryOut]


class SettingsUpdate(BaseModel):
    """Payload for changing the goal preset."""

    preset: GoalPreset
    daily_goal: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    caution_threshold: float | None = Field(
        default=None, gt=0, allow_inf_nan=False
    )


class SettingsOut(BaseModel):
    daily_goal: float
    caution_threshold: float
    preset: GoalPreset
    preset_description: str

    @classmethod
    def from_settings(cls, settings: GoalSettings) -> "SettingsOut":
        return cls(
            daily_goal=settings.daily_goal,
            caution_threshold=settings.caution_threshold,
            preset=settings.preset,
            preset_description=settings.preset.description,
        )


class InsightOut(BaseModel):
    message: str
    category: str
    icon: str

    @classmethod
    def from_insight(cls, insight: Insight) -> "InsightOut":
        return cls(
            message=insight.message,
            category=insight.category.value,
            icon=insight.icon_hint,
        )


class WeeklyTrendOut(BaseModel):
    this_week_average: float
    last_week_average: float
    this_week_days_tracked: int
    last_week_days_tracked: int
    difference: float
    is_improving: bool
    percent_change: float
    has_enough_data: bool

    @classmethod
    def from_trend(cls, trend: WeeklyTrend) -> "WeeklyTrendOut":
        return cls(
            this_week_average=trend.this_week_average,
            last_week_average=trend.last_week_average,
            this_week_days_tracked=trend.this_week_days_tracked,
            last_week_days_tracked=trend.last_week_days_tracked,
            difference=trend.difference,
            is_improving=trend.is_improving,
            percent_change=trend.percent_change,
            has_enough_data=trend.has_enough_data,
        )


class TimeBreakdownOut(BaseModel):
    averages: dict[str, float]
    percentages: dict[str, float]
    peak_period: str
    total: float

    @classmethod
    def from_breakdown(cls, breakdown: TimeBreakdown) -> "TimeBreakdownOut":
        return cls(
            averages={period.value: breakdown.average(period) for period in DayPeriod},
            percentages={
                period.value: breakdown.percentage(period) for period in DayPeriod
            },
            peak_period=breakdown.peak_period,
            total=breakdown.total,
        )


class StreaksOut(BaseModel):
    current: int
    longest: int

    @classmethod
    def from_summary(cls, summary: StreakSummary) -> "StreaksOut":
        return cls(current=summary.current, longest=summary.longest)


class OverviewOut(BaseModel):
    total_days_tracked: int
    days_under_goal: int
    success_rate: float
    average_daily: float
    best_day: float
    weekday_average: float
    weekend_average: float

    @classmethod
    def from_overview(cls, overview: OverviewStats) -> "OverviewOut":
        return cls(
            total_days_tracked=overview.total_days_tracked,
            days_under_goal=overview.days_under_goal,
            success_rate=overview.success_rate,
            average_daily=overview.average_daily,
            best_day=overview.best_day,
            weekday_average=overview.weekday_average,
            weekend_average=overview.weekend_average,
        )


class ChartDayOut(BaseModel):
    day: date
    total: float
    status: str


class ChartOut(BaseModel):
    days: list[ChartDayOut]
    average: float
    days_over_limit: int
    days_in_green: int

    @classmethod
    def from_summary(cls, summary: ChartSummary) -> "ChartOut":
        return cls(
            days=[
                ChartDayOut(day=day.day, total=day.total, status=day.status.value)
                for day in summary.days
            ],
            average=summary.average,
            days_over_limit=summary.days_over_limit,
            days_in_green=summary.days_in_green,
        )


class CalendarDayOut(BaseModel):
    """A month grid cell; days without entries carry no status."""

    day: date
    total: float
    status: str | None


class CalendarOut(BaseModel):
    days: list[CalendarDayOut]
    days_tracked: int
    days_over_limit: int
    days_in_green: int

    @classmethod
    def from_summary(cls, summary: ChartSummary) -> "CalendarOut":
        return cls(
            days=[
                CalendarDayOut(
                    day=day.day,
                    total=day.total,
                    status=day.status.value if day.total > 0 else None,
                )
                for day in summary.days
            ],
            days_tracked=sum(1 for day in summary.days if day.total > 0),
            days_over_limit=summary.days_over_limit,
            days_in_green=summary.days_in_green,
        )


class AchievementOut(BaseModel):
    title: str
    description: str
    icon: str
    unlocked: bool

    @classmethod
    def from_status(cls, status: AchievementStatus) -> "AchievementOut":
        return cls(
            title=status.achievement.title,
            description=status.achievement.description,
            icon=status.achievement.icon_hint,
            unlocked=status.unlocked,
        )


def day_log(
    day_key: str, entries: list[Entry], total: float, settings: GoalSettings
) -> DayLogOut:
    """Build the day view payload from a day's ordered entries."""
    status = status_for(total, settings)
    return DayLogOut(
        day_key=day_key,
        total=total,
        status=status.value,
        status_label=status.label,
        entries=[EntryOut.from_entry(entry) for entry in entries],
    )
