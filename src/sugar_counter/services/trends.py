"""Trend analysis over day totals."""

import calendar
from collections.abc import Iterable
from datetime import date, timedelta

from sugar_counter.domain.entries import Entry, day_from_key
from sugar_counter.domain.settings import GoalSettings, IntakeStatus, status_for
from sugar_counter.domain.stats import (
    ChartDay,
    ChartSummary,
    OverviewStats,
    WeeklyTrend,
    WeekPartition,
)
from sugar_counter.services.aggregation import day_totals

SATURDAY = 5
CHART_PERIODS = (7, 14, 21, 30)


def week_windows(today: date) -> tuple[tuple[date, date], tuple[date, date]]:
    """Return inclusive (start, end) ranges for this week and last week."""
    this_week_start = today - timedelta(days=6)
    last_week_start = today - timedelta(days=13)
    return (
        (this_week_start, today),
        (last_week_start, this_week_start - timedelta(days=1)),
    )


def calculate_weekly_trend(entries: Iterable[Entry], today: date) -> WeeklyTrend:
    """Compare average tracked-day totals for the last two 7-day windows."""
    snapshot = list(entries)
    (this_start, this_end), (last_start, last_end) = week_windows(today)
    this_week = day_totals(snapshot, this_start, this_end)
    last_week = day_totals(snapshot, last_start, last_end)
    return WeeklyTrend(
        this_week_average=_average(this_week.values()),
        last_week_average=_average(last_week.values()),
        this_week_days_tracked=len(this_week),
        last_week_days_tracked=len(last_week),
    )


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY


def calculate_week_partition(totals: dict[str, float]) -> WeekPartition:
    """Average day totals separately for weekdays and weekends."""
    weekday: list[float] = []
    weekend: list[float] = []
    for day_key, total in totals.items():
        if total <= 0:
            continue
        if is_weekend(day_from_key(day_key)):
            weekend.append(total)
        else:
            weekday.append(total)
    return WeekPartition(
        weekday_average=_average(weekday),
        weekend_average=_average(weekend),
        weekday_days=len(weekday),
        weekend_days=len(weekend),
    )


def calculate_overview(totals: dict[str, float], settings: GoalSettings) -> OverviewStats:
    """Headline statistics across every tracked day."""
    tracked = [total for total in totals.values() if total > 0]
    partition = calculate_week_partition(totals)
    return OverviewStats(
        total_days_tracked=len(totals),
        days_under_goal=sum(1 for total in tracked if total <= settings.daily_goal),
        average_daily=_average(tracked),
        best_day=min(tracked, default=0.0),
        weekday_average=partition.weekday_average,
        weekend_average=partition.weekend_average,
    )


def calculate_chart(
    totals: dict[str, float], settings: GoalSettings, today: date, days: int = 7
) -> ChartSummary:
    """Zero-filled series of the last ``days`` days ending today."""
    if days not in CHART_PERIODS:
        raise ValueError(f"Unsupported chart period: {days}")
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    return _summarize(totals, settings, window)


def calculate_month(
    totals: dict[str, float], settings: GoalSettings, year: int, month: int
) -> ChartSummary:
    """Zero-filled series covering every day of a calendar month."""
    _, length = calendar.monthrange(year, month)
    window = [date(year, month, day) for day in range(1, length + 1)]
    return _summarize(totals, settings, window)


def _summarize(
    totals: dict[str, float], settings: GoalSettings, window: list[date]
) -> ChartSummary:
    series = []
    for day in window:
        day_key = day.isoformat()
        total = totals.get(day_key, 0.0)
        series.append(
            ChartDay(
                day_key=day_key,
                day=day,
                total=total,
                status=status_for(total, settings),
            )
        )
    return ChartSummary(
        days=series,
        average=sum(day.total for day in series) / len(series),
        days_over_limit=sum(
            1 for day in series if day.status is IntakeStatus.OVER_LIMIT
        ),
        days_in_green=sum(
            1 for day in series if day.total > 0 and day.status is IntakeStatus.GOOD
        ),
    )


def _average(values: Iterable[float]) -> float:
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)
