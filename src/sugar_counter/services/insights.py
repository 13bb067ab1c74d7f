"""Rule-based selection of the daily insight."""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime

from sugar_counter.domain.entries import Entry
from sugar_counter.domain.insights import PLACEHOLDER_INSIGHT, Insight, InsightCategory
from sugar_counter.domain.settings import GoalSettings
from sugar_counter.domain.stats import DayPeriod
from sugar_counter.services.aggregation import day_totals, tracked_days
from sugar_counter.services.pace import project_pace
from sugar_counter.services.streaks import streak_before
from sugar_counter.services.time_segments import bucket_by_period
from sugar_counter.services.trends import (
    calculate_week_partition,
    calculate_weekly_trend,
)

_logger = logging.getLogger(__name__)

MIN_TRACKED_DAYS = 2
MIN_WEEK_DAYS = 3
WEEKLY_DIFFERENCE_GRAMS = 3
PACE_COMFORT_RATIO = 0.8
MIN_PERIOD_ENTRIES = 3
MIN_QUALIFYING_PERIODS = 2
PERIOD_DIFFERENCE_GRAMS = 3
MIN_WEEKDAY_DAYS = 3
MIN_WEEKEND_DAYS = 2
WEEKEND_DIFFERENCE_GRAMS = 5
STREAK_BANDS = ((3, 7), (7, 14))

InsightStrategy = Callable[[Sequence[Entry], GoalSettings, datetime], Insight | None]


def weekly_comparison_insight(
    entries: Sequence[Entry], settings: GoalSettings, reference: datetime
) -> Insight | None:
    """Compare this week's average with last week's."""
    trend = calculate_weekly_trend(entries, reference.date())
    if (
        trend.this_week_days_tracked < MIN_WEEK_DAYS
        or trend.last_week_days_tracked < MIN_WEEK_DAYS
    ):
        return None
    if abs(trend.difference) < WEEKLY_DIFFERENCE_GRAMS:
        return None
    if trend.is_improving:
        return Insight(
            message=(
                f"This week you're averaging {int(trend.this_week_average)}g - "
                f"{int(trend.difference)}g better than last week!"
            ),
            category=InsightCategory.WEEKLY_COMPARISON,
            icon_hint="arrow.down.circle.fill",
        )
    return Insight(
        message=(
            f"This week's average is {int(trend.this_week_average)}g - "
            f"{int(abs(trend.difference))}g higher than last week"
        ),
        category=InsightCategory.WEEKLY_COMPARISON,
        icon_hint="arrow.up.circle",
    )


def pace_projection_insight(
    entries: Sequence[Entry], settings: GoalSettings, reference: datetime
) -> Insight | None:
    """Warn or encourage based on today's projected total."""
    projection = project_pace(entries, reference)
    if projection is None:
        return None
    goal = settings.daily_goal
    if projection.projected_total > goal and projection.current_total <= goal:
        return Insight(
            message=(
                f"At this pace, you might hit ~{int(projection.projected_total)}g "
                "by end of day"
            ),
            category=InsightCategory.PACE_PROJECTION,
            icon_hint="exclamationmark.triangle",
        )
    if projection.projected_total <= goal * PACE_COMFORT_RATIO:
        return Insight(
            message=(
                "Great pace! You're on track to stay well under your "
                f"{int(goal)}g goal"
            ),
            category=InsightCategory.PACE_PROJECTION,
            icon_hint="checkmark.circle.fill",
        )
    return None


def time_of_day_insight(
    entries: Sequence[Entry], settings: GoalSettings, reference: datetime
) -> Insight | None:
    """Name the period of the day with the highest per-day average."""
    buckets = bucket_by_period(entries, reference.tzinfo)
    averages = {
        period: bucket.average_per_day
        for period, bucket in buckets.items()
        if period is not DayPeriod.NIGHT and bucket.entry_count >= MIN_PERIOD_ENTRIES
    }
    if len(averages) < MIN_QUALIFYING_PERIODS:
        return None
    peak = max(averages, key=averages.__getitem__)
    if averages[peak] - min(averages.values()) < PERIOD_DIFFERENCE_GRAMS:
        return None
    return Insight(
        message=(
            f"{peak.title} is your peak sugar time at {int(averages[peak])}g average"
        ),
        category=InsightCategory.TIME_OF_DAY_PATTERN,
        icon_hint="clock.fill",
    )


def weekday_vs_weekend_insight(
    entries: Sequence[Entry], settings: GoalSettings, reference: datetime
) -> Insight | None:
    """Contrast weekend and weekday averages."""
    partition = calculate_week_partition(day_totals(entries))
    if (
        partition.weekday_days < MIN_WEEKDAY_DAYS
        or partition.weekend_days < MIN_WEEKEND_DAYS
    ):
        return None
    difference = partition.difference
    if abs(difference) < WEEKEND_DIFFERENCE_GRAMS:
        return None
    if difference > 0:
        return Insight(
            message=f"Your weekend average is {int(difference)}g higher than weekdays",
            category=InsightCategory.WEEKDAY_VS_WEEKEND,
            icon_hint="calendar.badge.exclamationmark",
        )
    return Insight(
        message=f"You consume {int(abs(difference))}g less sugar on weekends",
        category=InsightCategory.WEEKDAY_VS_WEEKEND,
        icon_hint="hand.thumbsup.fill",
    )


def streak_progress_insight(
    entries: Sequence[Entry], settings: GoalSettings, reference: datetime
) -> Insight | None:
    """Celebrate a running streak that ended yesterday."""
    streak = streak_before(day_totals(entries), settings.daily_goal, reference.date())
    short_band, long_band = STREAK_BANDS
    if short_band[0] <= streak < short_band[1]:
        return Insight(
            message=f"You're on a {streak}-day streak! Keep it going for 7 days",
            category=InsightCategory.STREAK_PROGRESS,
            icon_hint="flame.fill",
        )
    if long_band[0] <= streak < long_band[1]:
        return Insight(
            message=f"Amazing {streak}-day streak! Push for 14 days",
            category=InsightCategory.STREAK_PROGRESS,
            icon_hint="bolt.fill",
        )
    return None


INSIGHT_STRATEGIES: tuple[InsightStrategy, ...] = (
    weekly_comparison_insight,
    pace_projection_insight,
    time_of_day_insight,
    weekday_vs_weekend_insight,
    streak_progress_insight,
)


def generate_insight(
    entries: Iterable[Entry],
    settings: GoalSettings | None,
    reference: datetime,
    strategies: Sequence[InsightStrategy] = INSIGHT_STRATEGIES,
) -> Insight:
    """Return the first applicable insight in priority order."""
    snapshot = tuple(entries)
    resolved = settings or GoalSettings()
    if len(tracked_days(snapshot)) < MIN_TRACKED_DAYS:
        return PLACEHOLDER_INSIGHT
    for strategy in strategies:
        insight = strategy(snapshot, resolved, reference)
        if insight is not None:
            _logger.debug("Insight selected: strategy=%s", strategy.__name__)
            return insight
    return PLACEHOLDER_INSIGHT
