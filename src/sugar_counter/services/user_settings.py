"""Goal settings service."""

from dataclasses import dataclass
from typing import Protocol

from sugar_counter.domain.settings import (
    DEFAULT_CAUTION_THRESHOLD,
    DEFAULT_DAILY_GOAL,
    GoalPreset,
    GoalSettings,
    validate_thresholds,
)


class SettingsRepository(Protocol):
    """Persistence interface for goal settings."""

    def get_settings(self) -> GoalSettings | None:
        """Return stored settings if any."""

    def save_settings(self, settings: GoalSettings) -> None:
        """Persist settings."""


@dataclass
class GoalSettingsService:
    """Service for reading and changing the daily goal."""

    repository: SettingsRepository
    default_daily_goal: float = DEFAULT_DAILY_GOAL
    default_caution_threshold: float = DEFAULT_CAUTION_THRESHOLD

    def get_settings(self) -> GoalSettings:
        """Return stored settings or the configured defaults."""
        stored = self.repository.get_settings()
        if stored is not None:
            return stored
        return GoalSettings(
            daily_goal=self.default_daily_goal,
            caution_threshold=self.default_caution_threshold,
        )

    def apply_preset(
        self,
        preset: GoalPreset,
        daily_goal: float | None = None,
        caution_threshold: float | None = None,
    ) -> GoalSettings:
        """Switch preset; custom thresholds only apply to the custom preset."""
        if preset is GoalPreset.CUSTOM:
            current = self.get_settings()
            settings = GoalSettings(
                daily_goal=daily_goal if daily_goal is not None else current.daily_goal,
                caution_threshold=(
                    caution_threshold
                    if caution_threshold is not None
                    else current.caution_threshold
                ),
                preset=preset,
            )
        else:
            settings = GoalSettings.from_preset(preset)
        validate_thresholds(settings.daily_goal, settings.caution_threshold)
        self.repository.save_settings(settings)
        return settings
