"""Supabase repository for goal settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from sugar_counter.domain.settings import GoalPreset, GoalSettings
from sugar_counter.services.user_settings import SettingsRepository

SETTINGS_ROW_ID = 1


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation for goal settings, stored as a single row."""

    client: Client

    def get_settings(self) -> GoalSettings | None:
        """Return the stored settings row, if any."""
        response = (
            self.client.table("user_settings")
            .select("daily_goal, caution_threshold, selected_preset")
            .eq("id", SETTINGS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        try:
            preset = GoalPreset(row.get("selected_preset"))
        except ValueError:
            preset = GoalPreset.WHO_RECOMMENDED
        return GoalSettings(
            daily_goal=float(row["daily_goal"]),
            caution_threshold=float(row["caution_threshold"]),
            preset=preset,
        )

    def save_settings(self, settings: GoalSettings) -> None:
        """Create or replace the settings row."""
        self.client.table("user_settings").upsert(
            {
                "id": SETTINGS_ROW_ID,
                "daily_goal": settings.daily_goal,
                "caution_threshold": settings.caution_threshold,
                "selected_preset": settings.preset.value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
