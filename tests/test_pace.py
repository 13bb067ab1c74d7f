"""Tests for pace projection."""

from datetime import UTC, datetime

import pytest

from sugar_counter.services.pace import hours_since_midnight, project_pace
from tests.conftest import TODAY, make_entry


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(TODAY.year, TODAY.month, TODAY.day, hour, minute, tzinfo=UTC)


def test_projection_at_two_pm() -> None:
    entries = [make_entry(TODAY, 12, hour=9), make_entry(TODAY, 8, hour=12, sequence=2)]

    projection = project_pace(entries, _at(14))

    assert projection is not None
    assert projection.hours_elapsed == 14
    assert projection.hourly_rate == 2.5
    assert projection.projected_total == pytest.approx(32.5)


def test_projection_needs_two_entries_today() -> None:
    entries = [make_entry(TODAY, 20, hour=9)]

    assert project_pace(entries, _at(14)) is None


@pytest.mark.parametrize("hour", [7, 22, 23])
def test_projection_only_during_active_hours(hour: int) -> None:
    entries = [make_entry(TODAY, 5, hour=1), make_entry(TODAY, 5, hour=2, sequence=2)]

    assert project_pace(entries, _at(hour)) is None


def test_elapsed_hours_are_truncated() -> None:
    assert hours_since_midnight(_at(8, 59)) == 8


def test_rate_assumes_tracking_starts_at_six() -> None:
    entries = [make_entry(TODAY, 3, hour=6), make_entry(TODAY, 3, hour=7, sequence=2)]

    projection = project_pace(entries, _at(8))

    assert projection is not None
    # 8 hours elapsed, tracking from 6 AM gives a 2 hour window.
    assert projection.hourly_rate == 3
    assert projection.projected_total == 6 + 3 * 16 * 0.5
