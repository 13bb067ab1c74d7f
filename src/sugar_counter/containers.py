"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from sugar_counter.adapters.supabase_entry_repository import SupabaseEntryRepository
from sugar_counter.adapters.supabase_settings_repository import (
    SupabaseSettingsRepository,
)
from sugar_counter.config import Settings
from sugar_counter.services.entries import EntryLogService
from sugar_counter.services.stats import StatsService
from sugar_counter.services.user_settings import GoalSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_log_service: EntryLogService
    settings_service: GoalSettingsService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(supabase_client)
    settings_repository = SupabaseSettingsRepository(supabase_client)
    entry_log_service = EntryLogService(
        repository=entry_repository,
        timezone_name=resolved_settings.timezone,
    )
    settings_service = GoalSettingsService(
        repository=settings_repository,
        default_daily_goal=resolved_settings.default_daily_goal,
        default_caution_threshold=resolved_settings.default_caution_threshold,
    )
    stats_service = StatsService(
        repository=entry_repository,
        settings_service=settings_service,
        timezone_name=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        entry_log_service=entry_log_service,
        settings_service=settings_service,
        stats_service=stats_service,
    )
