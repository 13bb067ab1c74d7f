"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from sugar_counter.adapters.supabase_entry_repository import SupabaseEntryRepository
from sugar_counter.adapters.supabase_settings_repository import (
    SETTINGS_ROW_ID,
    SupabaseSettingsRepository,
)
from sugar_counter.domain.entries import Entry
from sugar_counter.domain.settings import GoalPreset, GoalSettings


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _row(entry_id: str, **overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": entry_id,
        "grams": 6.5,
        "item_number": 2,
        "logged_at": "2026-03-18T09:30:00+00:00",
        "day_key": "2026-03-18",
        "custom_name": None,
    }
    row.update(overrides)
    return row


def test_supabase_entry_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("sugar_entries")
    entry_id = str(uuid4())
    table.queue("insert", [_row(entry_id)])
    table.queue("select", [_row(entry_id, custom_name="Juice")])

    repository = SupabaseEntryRepository(client)
    created = repository.create_entry(
        Entry(
            id=uuid4(),
            quantity=6.5,
            sequence_number=2,
            timestamp=datetime(2026, 3, 18, 9, 30, tzinfo=UTC),
            day_key="2026-03-18",
        )
    )
    listed = repository.list_entries()

    assert str(created.id) == entry_id
    assert created.label is None
    assert created.display_name == "Item 2"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["grams"] == 6.5
    assert listed[0].label == "Juice"
    assert listed[0].timestamp.hour == 9


def test_supabase_entry_repository_create_failure() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseEntryRepository(client)
    entry = Entry(
        id=uuid4(),
        quantity=1,
        sequence_number=1,
        timestamp=datetime(2026, 3, 18, 9, 30, tzinfo=UTC),
        day_key="2026-03-18",
    )

    try:
        repository.create_entry(entry)
    except RuntimeError as exc:
        assert "Failed to create entry" in str(exc)
    else:
        raise AssertionError("Expected RuntimeError")


def test_supabase_entry_repository_get_update_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("sugar_entries")
    entry_id = str(uuid4())
    table.queue("select", [_row(entry_id)])

    repository = SupabaseEntryRepository(client)
    fetched = repository.get_entry(uuid4())
    assert fetched is not None
    assert repository.get_entry(uuid4()) is None

    repository.update_entry(fetched)
    assert isinstance(table.last_payload, dict)
    assert "id" not in table.last_payload
    assert table.last_filters[-1] == ("id", entry_id)

    repository.delete_entry(fetched.id)
    assert table.actions[-1] == "delete"


def test_supabase_settings_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_settings")
    table.queue(
        "select",
        [{"daily_goal": 36, "caution_threshold": 24, "selected_preset": "AHA Men"}],
    )
    table.queue(
        "select",
        [{"daily_goal": 20, "caution_threshold": 12, "selected_preset": "Unknown"}],
    )

    repository = SupabaseSettingsRepository(client)

    assert repository.get_settings() == GoalSettings(36, 24, GoalPreset.AHA_MEN)
    fallback = repository.get_settings()
    assert fallback is not None
    assert fallback.preset is GoalPreset.WHO_RECOMMENDED
    assert repository.get_settings() is None

    repository.save_settings(GoalSettings(30, 20, GoalPreset.CUSTOM))
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["id"] == SETTINGS_ROW_ID
    assert table.last_payload["selected_preset"] == "Custom"
    assert table.actions[-1] == "upsert"
