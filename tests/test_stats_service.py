"""Tests for the stats service."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from sugar_counter.domain.insights import InsightCategory
from sugar_counter.domain.settings import GoalPreset, IntakeStatus
from tests.conftest import REFERENCE, TODAY, make_entry


def _seed_week(container) -> None:  # noqa: ANN001
    repo = container.stats_service.repository
    for offset, grams in enumerate([10, 12, 30, 8]):
        repo.add(make_entry(TODAY - timedelta(days=offset), grams))


def test_resolve_reference_localizes_naive_times(container) -> None:
    container.stats_service.timezone_name = "Europe/Berlin"

    naive = container.stats_service.resolve_reference(datetime(2026, 3, 18, 9, 0))
    aware = container.stats_service.resolve_reference(REFERENCE)

    assert naive.tzinfo == ZoneInfo("Europe/Berlin")
    assert naive.hour == 9
    assert aware.hour == 15


def test_resolve_reference_defaults_to_now(container) -> None:
    before = datetime.now(tz=UTC)

    resolved = container.stats_service.resolve_reference()

    assert resolved >= before


def test_streaks_use_stored_goal(container) -> None:
    _seed_week(container)

    default = container.stats_service.get_streaks(REFERENCE)
    container.settings_service.apply_preset(GoalPreset.AHA_MEN)
    relaxed = container.stats_service.get_streaks(REFERENCE)

    assert (default.current, default.longest) == (2, 2)
    assert (relaxed.current, relaxed.longest) == (4, 4)


def test_overview_and_chart(container) -> None:
    _seed_week(container)

    overview = container.stats_service.get_overview()
    chart = container.stats_service.get_chart(REFERENCE, days=7)

    assert overview.total_days_tracked == 4
    assert overview.days_under_goal == 3
    assert overview.best_day == 8
    assert len(chart.days) == 7
    assert chart.days[-1].day == TODAY
    assert chart.days[-1].total == 10
    assert chart.days[-3].status is IntakeStatus.OVER_LIMIT
    assert chart.average == pytest.approx(60 / 7)
    assert chart.days_over_limit == 1
    assert chart.days_in_green == 3


def test_chart_rejects_unknown_period(container) -> None:
    with pytest.raises(ValueError):
        container.stats_service.get_chart(REFERENCE, days=10)


def test_daily_insight_reads_fresh_snapshot(container) -> None:
    assert (
        container.stats_service.get_daily_insight(REFERENCE).category
        is InsightCategory.GOAL_PROXIMITY
    )

    repo = container.stats_service.repository
    repo.add(
        make_entry(TODAY - timedelta(days=1), 5),
        make_entry(TODAY, 12, hour=9),
        make_entry(TODAY, 8, hour=12, sequence=2),
    )

    insight = container.stats_service.get_daily_insight(REFERENCE)

    assert insight.category is InsightCategory.PACE_PROJECTION


def test_achievements_and_day_totals(container) -> None:
    _seed_week(container)

    statuses = container.stats_service.get_achievements()
    totals = container.stats_service.get_day_totals()

    assert statuses[0].achievement.title == "First Step"
    assert statuses[0].unlocked
    assert totals[TODAY.isoformat()] == 10
    assert len(totals) == 4
