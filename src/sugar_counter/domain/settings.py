"""Goal settings and intake status models."""

import math
from dataclasses import dataclass
from enum import Enum

DEFAULT_DAILY_GOAL = 25.0
DEFAULT_CAUTION_THRESHOLD = 15.0


class GoalPreset(str, Enum):
    """Named daily goal presets."""

    WHO_RECOMMENDED = "WHO Recommended"
    AHA_WOMEN = "AHA Women"
    AHA_MEN = "AHA Men"
    LOW_SUGAR = "Low Sugar"
    CUSTOM = "Custom"

    @property
    def daily_goal(self) -> float:
        return _PRESET_THRESHOLDS[self][0]

    @property
    def caution_threshold(self) -> float:
        return _PRESET_THRESHOLDS[self][1]

    @property
    def description(self) -> str:
        return _PRESET_DESCRIPTIONS[self]


_PRESET_THRESHOLDS: dict[GoalPreset, tuple[float, float]] = {
    GoalPreset.WHO_RECOMMENDED: (25.0, 15.0),
    GoalPreset.AHA_WOMEN: (25.0, 15.0),
    GoalPreset.AHA_MEN: (36.0, 24.0),
    GoalPreset.LOW_SUGAR: (15.0, 10.0),
    GoalPreset.CUSTOM: (30.0, 20.0),
}

_PRESET_DESCRIPTIONS: dict[GoalPreset, str] = {
    GoalPreset.WHO_RECOMMENDED: "World Health Organization recommendation for adults",
    GoalPreset.AHA_WOMEN: "American Heart Association limit for women",
    GoalPreset.AHA_MEN: "American Heart Association limit for men",
    GoalPreset.LOW_SUGAR: "Strict low-sugar lifestyle goal",
    GoalPreset.CUSTOM: "Set your own daily goal",
}


class IntakeStatus(str, Enum):
    """Status of a daily total relative to the user's thresholds."""

    GOOD = "good"
    CAUTION = "caution"
    OVER_LIMIT = "over_limit"

    @property
    def label(self) -> str:
        return {
            IntakeStatus.GOOD: "Good",
            IntakeStatus.CAUTION: "Caution",
            IntakeStatus.OVER_LIMIT: "Over Limit",
        }[self]


@dataclass(frozen=True)
class GoalSettings:
    """Daily goal and caution threshold, in grams."""

    daily_goal: float = DEFAULT_DAILY_GOAL
    caution_threshold: float = DEFAULT_CAUTION_THRESHOLD
    preset: GoalPreset = GoalPreset.WHO_RECOMMENDED

    @classmethod
    def from_preset(cls, preset: GoalPreset) -> "GoalSettings":
        """Build settings using a preset's thresholds."""
        return cls(
            daily_goal=preset.daily_goal,
            caution_threshold=preset.caution_threshold,
            preset=preset,
        )


def status_for(total: float, settings: GoalSettings | None = None) -> IntakeStatus:
    """Classify a daily total as good, caution or over limit."""
    resolved = settings or GoalSettings()
    if total <= resolved.caution_threshold:
        return IntakeStatus.GOOD
    if total <= resolved.daily_goal:
        return IntakeStatus.CAUTION
    return IntakeStatus.OVER_LIMIT


def validate_thresholds(daily_goal: float, caution_threshold: float) -> None:
    """Raise ValueError unless 0 < caution < goal and both are finite."""
    if not (math.isfinite(daily_goal) and math.isfinite(caution_threshold)):
        raise ValueError("Goal and caution threshold must be finite numbers")
    if daily_goal <= 0 or caution_threshold <= 0:
        raise ValueError("Goal and caution threshold must be positive")
    if caution_threshold >= daily_goal:
        raise ValueError("Caution threshold must be below the daily goal")
