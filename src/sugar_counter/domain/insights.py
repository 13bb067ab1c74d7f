"""Insight domain models."""

from dataclasses import dataclass
from enum import Enum


class InsightCategory(str, Enum):
    """Kinds of insight the engine can produce."""

    WEEKLY_COMPARISON = "weekly_comparison"
    PACE_PROJECTION = "pace_projection"
    TIME_OF_DAY_PATTERN = "time_of_day_pattern"
    WEEKDAY_VS_WEEKEND = "weekday_vs_weekend"
    STREAK_PROGRESS = "streak_progress"
    GOAL_PROXIMITY = "goal_proximity"


@dataclass(frozen=True)
class Insight:
    """A single natural-language observation about the user's data."""

    message: str
    category: InsightCategory
    icon_hint: str


PLACEHOLDER_INSIGHT = Insight(
    message="Track a few days to unlock personalized insights",
    category=InsightCategory.GOAL_PROXIMITY,
    icon_hint="lightbulb",
)
