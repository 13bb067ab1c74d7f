"""Streaks of days kept under the daily goal.

Two gap semantics coexist here on purpose:

* ``streak_before`` and ``current_streak`` walk the calendar one day at a
  time, so a day without entries ends the streak.
* ``longest_streak`` and ``has_perfect_week`` scan only tracked days, so a
  calendar gap between two tracked days does not reset the run.
"""

from datetime import date, timedelta

from sugar_counter.domain.stats import StreakSummary
from sugar_counter.services.aggregation import sorted_day_totals

PERFECT_WEEK_DAYS = 7


def is_qualifying(total: float, daily_goal: float) -> bool:
    """A day counts toward a streak when something was logged and stayed under goal."""
    return 0 < total <= daily_goal


def streak_before(totals: dict[str, float], daily_goal: float, day: date) -> int:
    """Count consecutive qualifying calendar days ending the day before ``day``."""
    streak = 0
    check = day - timedelta(days=1)
    while is_qualifying(totals.get(check.isoformat(), 0.0), daily_goal):
        streak += 1
        check -= timedelta(days=1)
    return streak


def current_streak(totals: dict[str, float], daily_goal: float, today: date) -> int:
    """Streak as shown to the user, counting today once it qualifies."""
    today_total = totals.get(today.isoformat(), 0.0)
    if today_total > daily_goal:
        return 0
    streak = streak_before(totals, daily_goal, today)
    if today_total > 0:
        streak += 1
    return streak


def longest_streak(totals: dict[str, float], daily_goal: float) -> int:
    """Longest run of consecutive qualifying tracked days."""
    longest = 0
    running = 0
    for day in sorted_day_totals(totals):
        if is_qualifying(day.total, daily_goal):
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return longest


def has_perfect_week(totals: dict[str, float], daily_goal: float) -> bool:
    return longest_streak(totals, daily_goal) >= PERFECT_WEEK_DAYS


def days_under_goal(totals: dict[str, float], daily_goal: float) -> int:
    return sum(1 for total in totals.values() if is_qualifying(total, daily_goal))


def summarize_streaks(
    totals: dict[str, float], daily_goal: float, today: date
) -> StreakSummary:
    return StreakSummary(
        current=current_streak(totals, daily_goal, today),
        longest=longest_streak(totals, daily_goal),
    )
