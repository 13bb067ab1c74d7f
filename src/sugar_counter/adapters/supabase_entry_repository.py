"""Supabase repository for intake entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from sugar_counter.domain.entries import Entry
from sugar_counter.services.entries import EntryRepository

_COLUMNS = "id, grams, item_number, logged_at, day_key, custom_name"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for the entry log."""

    client: Client

    def list_entries(self) -> list[Entry]:
        """Return all entries ordered by time."""
        response = (
            self.client.table("sugar_entries")
            .select(_COLUMNS)
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_entry(self, entry_id: UUID) -> Entry | None:
        """Return a single entry by id."""
        response = (
            self.client.table("sugar_entries")
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_entry(self, entry: Entry) -> Entry:
        """Insert an entry row."""
        response = (
            self.client.table("sugar_entries").insert(_serialize(entry)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create entry")
        return _parse_row(response.data[0])

    def update_entry(self, entry: Entry) -> None:
        """Overwrite grams, label and timing for an entry."""
        payload = _serialize(entry)
        payload.pop("id")
        self.client.table("sugar_entries").update(payload).eq(
            "id", str(entry.id)
        ).execute()

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("sugar_entries").delete().eq("id", str(entry_id)).execute()


def _serialize(entry: Entry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "grams": entry.quantity,
        "item_number": entry.sequence_number,
        "logged_at": entry.timestamp.isoformat(),
        "day_key": entry.day_key,
        "custom_name": entry.label,
    }


def _parse_row(row: dict[str, object]) -> Entry:
    label = row.get("custom_name")
    return Entry(
        id=UUID(str(row["id"])),
        quantity=float(row.get("grams", 0.0)),
        sequence_number=int(row.get("item_number", 1)),
        timestamp=datetime.fromisoformat(str(row["logged_at"])),
        day_key=str(row["day_key"]),
        label=str(label) if label else None,
    )
