"""Domain models for logged intake entries."""

from dataclasses import dataclass, replace
from datetime import date, datetime, tzinfo
from uuid import UUID

DAY_KEY_FORMAT = "%Y-%m-%d"


def day_key_for(timestamp: datetime, tz: tzinfo | None = None) -> str:
    """Return the local calendar day key for a timestamp."""
    local = timestamp.astimezone(tz) if tz is not None else timestamp
    return local.strftime(DAY_KEY_FORMAT)


def day_from_key(day_key: str) -> date:
    """Parse a day key back into a date."""
    return date.fromisoformat(day_key)


@dataclass(frozen=True)
class Entry:
    """A single logged intake event."""

    id: UUID
    quantity: float
    sequence_number: int
    timestamp: datetime
    day_key: str
    label: str | None = None

    @property
    def display_name(self) -> str:
        """Return the label, falling back to the item number."""
        return self.label or f"Item {self.sequence_number}"

    @property
    def day(self) -> date:
        return day_from_key(self.day_key)

    def moved_to(self, timestamp: datetime, tz: tzinfo | None = None) -> "Entry":
        """Return a copy at a new timestamp with its day key recomputed."""
        return replace(self, timestamp=timestamp, day_key=day_key_for(timestamp, tz))
