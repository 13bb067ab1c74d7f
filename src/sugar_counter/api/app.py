"""FastAPI application factory."""

import logging
from datetime import date, datetime
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, Response, status

from sugar_counter.api.models import (
    AchievementOut,
    CalendarOut,
    ChartOut,
    DayLogOut,
    EntryCreate,
    EntryOut,
    EntryUpdate,
    InsightOut,
    OverviewOut,
    SettingsOut,
    SettingsUpdate,
    StreaksOut,
    TimeBreakdownOut,
    WeeklyTrendOut,
    day_log,
)
from sugar_counter.app_logging import configure_logging
from sugar_counter.containers import AppContainer
from sugar_counter.domain.entries import Entry
from sugar_counter.services.export import export_csv, export_filename

MONTH_FORMAT = "%Y-%m"
UNPROCESSABLE_STATUS = 422


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Sugar Counter")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/entries")
    async def list_day(request: Request, day: date | None = None) -> DayLogOut:
        """Return one day's entries, today by default."""
        state_container: AppContainer = request.app.state.container
        if day is None:
            day = state_container.stats_service.resolve_reference().date()
        day_key = day.isoformat()
        service = state_container.entry_log_service
        return day_log(
            day_key,
            service.list_day(day_key),
            service.day_total(day_key),
            state_container.settings_service.get_settings(),
        )

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    async def create_entry(payload: EntryCreate, request: Request) -> EntryOut:
        """Log a new entry, at the current time unless one is given."""
        state_container: AppContainer = request.app.state.container
        logged_at = state_container.stats_service.resolve_reference(payload.logged_at)
        try:
            entry = state_container.entry_log_service.add_entry(
                payload.grams, logged_at, payload.label
            )
        except ValueError as exc:
            raise _unprocessable(exc) from exc
        return EntryOut.from_entry(entry)

    @app.patch("/entries/{entry_id}")
    async def update_entry(
        entry_id: UUID, payload: EntryUpdate, request: Request
    ) -> EntryOut:
        """Apply grams, label and time changes to an entry."""
        state_container: AppContainer = request.app.state.container
        service = state_container.entry_log_service
        updated: Entry | None = service.repository.get_entry(entry_id)
        try:
            if updated is not None and payload.grams is not None:
                updated = service.update_quantity(entry_id, payload.grams)
        except ValueError as exc:
            raise _unprocessable(exc) from exc
        if updated is not None and "label" in payload.model_fields_set:
            updated = service.rename(entry_id, payload.label)
        if updated is not None and payload.logged_at is not None:
            updated = service.move(
                entry_id,
                state_container.stats_service.resolve_reference(payload.logged_at),
            )
        if updated is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return EntryOut.from_entry(updated)

    @app.delete("/entries/{entry_id}")
    async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
        """Delete an entry."""
        state_container: AppContainer = request.app.state.container
        if not state_container.entry_log_service.delete(entry_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"status": "ok"}

    @app.get("/settings")
    async def get_settings(request: Request) -> SettingsOut:
        """Return the current goal settings."""
        state_container: AppContainer = request.app.state.container
        return SettingsOut.from_settings(
            state_container.settings_service.get_settings()
        )

    @app.put("/settings")
    async def update_settings(payload: SettingsUpdate, request: Request) -> SettingsOut:
        """Apply a goal preset, with custom thresholds for the custom preset."""
        state_container: AppContainer = request.app.state.container
        try:
            settings = state_container.settings_service.apply_preset(
                payload.preset, payload.daily_goal, payload.caution_threshold
            )
        except ValueError as exc:
            raise _unprocessable(exc) from exc
        logger.info("Goal settings updated: preset=%s", settings.preset.value)
        return SettingsOut.from_settings(settings)

    @app.get("/insights/daily")
    async def daily_insight(request: Request, at: datetime | None = None) -> InsightOut:
        """Return the single most relevant insight."""
        state_container: AppContainer = request.app.state.container
        return InsightOut.from_insight(
            state_container.stats_service.get_daily_insight(at)
        )

    @app.get("/stats/weekly-trend")
    async def weekly_trend(
        request: Request, at: datetime | None = None
    ) -> WeeklyTrendOut:
        """Compare this week's average with last week's."""
        state_container: AppContainer = request.app.state.container
        return WeeklyTrendOut.from_trend(
            state_container.stats_service.get_weekly_trend(at)
        )

    @app.get("/stats/time-breakdown")
    async def time_breakdown(request: Request) -> TimeBreakdownOut:
        """Return per-period daily averages."""
        state_container: AppContainer = request.app.state.container
        return TimeBreakdownOut.from_breakdown(
            state_container.stats_service.get_time_breakdown()
        )

    @app.get("/stats/streaks")
    async def streaks(request: Request, at: datetime | None = None) -> StreaksOut:
        """Return current and longest streaks."""
        state_container: AppContainer = request.app.state.container
        return StreaksOut.from_summary(state_container.stats_service.get_streaks(at))

    @app.get("/stats/overview")
    async def overview(request: Request) -> OverviewOut:
        """Return headline statistics."""
        state_container: AppContainer = request.app.state.container
        return OverviewOut.from_overview(state_container.stats_service.get_overview())

    @app.get("/stats/chart")
    async def chart(
        request: Request, days: int = 7, at: datetime | None = None
    ) -> ChartOut:
        """Return a zero-filled series for the last week, fortnight or month."""
        state_container: AppContainer = request.app.state.container
        try:
            summary = state_container.stats_service.get_chart(at, days)
        except ValueError as exc:
            raise _unprocessable(exc) from exc
        return ChartOut.from_summary(summary)

    @app.get("/stats/calendar")
    async def calendar_month(
        request: Request, month: str | None = None, at: datetime | None = None
    ) -> CalendarOut:
        """Return every day of a month (YYYY-MM), the current month by default."""
        state_container: AppContainer = request.app.state.container
        try:
            month_start = (
                datetime.strptime(month, MONTH_FORMAT).date() if month else None
            )
        except ValueError as exc:
            raise _unprocessable(exc) from exc
        summary = state_container.stats_service.get_calendar(month_start, at)
        return CalendarOut.from_summary(summary)

    @app.get("/achievements")
    async def achievements(request: Request) -> dict[str, object]:
        """Return the achievement catalog with unlock state."""
        state_container: AppContainer = request.app.state.container
        statuses = state_container.stats_service.get_achievements()
        return {
            "unlocked": sum(1 for item in statuses if item.unlocked),
            "total": len(statuses),
            "achievements": [AchievementOut.from_status(item) for item in statuses],
        }

    @app.get("/export.csv")
    async def export(request: Request, at: datetime | None = None) -> Response:
        """Download day totals as CSV."""
        state_container: AppContainer = request.app.state.container
        stats_service = state_container.stats_service
        filename = export_filename(stats_service.resolve_reference(at).date())
        return Response(
            content=export_csv(stats_service.get_day_totals()),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


def _unprocessable(exc: ValueError) -> HTTPException:
    return HTTPException(
        status_code=UNPROCESSABLE_STATUS, detail=str(exc)
    )
