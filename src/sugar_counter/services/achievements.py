"""Achievement evaluation."""

from collections.abc import Sequence

from sugar_counter.domain.achievements import (
    ACHIEVEMENTS,
    Achievement,
    AchievementStats,
    AchievementStatus,
)
from sugar_counter.services.streaks import (
    days_under_goal,
    has_perfect_week,
    longest_streak,
)


def achievement_stats(totals: dict[str, float], daily_goal: float) -> AchievementStats:
    return AchievementStats(
        longest_streak=longest_streak(totals, daily_goal),
        total_days_tracked=len(totals),
        days_under_goal=days_under_goal(totals, daily_goal),
        perfect_week=has_perfect_week(totals, daily_goal),
    )


def evaluate_achievements(
    totals: dict[str, float],
    daily_goal: float,
    catalog: Sequence[Achievement] = ACHIEVEMENTS,
) -> list[AchievementStatus]:
    """Return every catalog entry with its unlock state, in catalog order."""
    stats = achievement_stats(totals, daily_goal)
    return [
        AchievementStatus(
            achievement=achievement,
            unlocked=achievement.requirement.is_met(stats),
        )
        for achievement in catalog
    ]
