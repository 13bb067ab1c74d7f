"""Entry log service."""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from sugar_counter.domain.entries import Entry, day_key_for
from sugar_counter.services.aggregation import entries_for_day

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for intake entries."""

    def list_entries(self) -> list[Entry]:
        """Return every stored entry."""

    def get_entry(self, entry_id: UUID) -> Entry | None:
        """Return an entry by id, if present."""

    def create_entry(self, entry: Entry) -> Entry:
        """Persist a new entry and return it."""

    def update_entry(self, entry: Entry) -> None:
        """Overwrite an existing entry."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove an entry."""


@dataclass
class EntryLogService:
    """Creates, edits and lists logged entries."""

    repository: EntryRepository
    timezone_name: str = "UTC"

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def add_entry(
        self, quantity: float, timestamp: datetime, label: str | None = None
    ) -> Entry:
        """Log a new entry with the next item number for its day."""
        _validate_quantity(quantity)
        day_key = day_key_for(timestamp, self.tz)
        entry = Entry(
            id=uuid4(),
            quantity=quantity,
            sequence_number=self._next_sequence_number(day_key),
            timestamp=timestamp,
            day_key=day_key,
            label=_clean_label(label),
        )
        created = self.repository.create_entry(entry)
        _logger.info("Entry logged: day=%s grams=%s", day_key, quantity)
        return created

    def update_quantity(self, entry_id: UUID, quantity: float) -> Entry | None:
        """Change the grams recorded for an entry."""
        _validate_quantity(quantity)
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        updated = replace(entry, quantity=quantity)
        self.repository.update_entry(updated)
        return updated

    def rename(self, entry_id: UUID, label: str | None) -> Entry | None:
        """Set or clear an entry's custom label."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        updated = replace(entry, label=_clean_label(label))
        self.repository.update_entry(updated)
        return updated

    def move(self, entry_id: UUID, timestamp: datetime) -> Entry | None:
        """Re-time an entry, recomputing its day key and item number."""
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            return None
        moved = entry.moved_to(timestamp, self.tz)
        if moved.day_key != entry.day_key:
            moved = replace(
                moved, sequence_number=self._next_sequence_number(moved.day_key)
            )
        self.repository.update_entry(moved)
        return moved

    def delete(self, entry_id: UUID) -> bool:
        """Delete an entry, returning False when it does not exist."""
        if self.repository.get_entry(entry_id) is None:
            return False
        self.repository.delete_entry(entry_id)
        _logger.info("Entry deleted: id=%s", entry_id)
        return True

    def list_day(self, day_key: str) -> list[Entry]:
        return entries_for_day(self.repository.list_entries(), day_key)

    def day_total(self, day_key: str) -> float:
        return sum(entry.quantity for entry in self.list_day(day_key))

    def _next_sequence_number(self, day_key: str) -> int:
        numbers = [entry.sequence_number for entry in self.list_day(day_key)]
        return max(numbers, default=0) + 1


def _validate_quantity(quantity: float) -> None:
    if not math.isfinite(quantity) or quantity <= 0:
        raise ValueError("Quantity must be a positive number of grams")


def _clean_label(label: str | None) -> str | None:
    if label is None:
        return None
    cleaned = label.strip()
    return cleaned or None
