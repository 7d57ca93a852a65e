"""Pure journal entry domain logic - no I/O dependencies."""

import json
from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class JournalEntry:
    """A single journal note. Immutable once created."""

    id: int
    content: str
    timestamp: datetime

    @property
    def day(self) -> date:
        return self.timestamp.date()

    def to_dict(self) -> dict:
        """Serialize using the backing file's field names."""
        return {
            "Id": self.id,
            "Content": self.content,
            "Timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        """Create JournalEntry from a payload object."""
        if not isinstance(data, dict):
            raise ValueError(f"Invalid entry: expected object, got {type(data).__name__}")

        entry_id = data["Id"]
        content = data["Content"]
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise ValueError(f"Invalid entry id: {entry_id!r}")
        if not isinstance(content, str):
            raise ValueError(f"Invalid content for entry {entry_id}")

        return cls(
            id=entry_id,
            content=content,
            timestamp=parse_timestamp(data["Timestamp"]),
        )


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing 'Z' and up to seven fractional digits (the
    extra digit is dropped). Naive values are taken as UTC.
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    # Trim fractional seconds beyond microseconds
    if "." in text:
        head, _, frac = text.partition(".")
        digits = len(frac) - len(frac.lstrip("0123456789"))
        text = head + "." + frac[: min(digits, 6)] + frac[digits:]

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {value!r}") from e


def dump_entries(entries: list[JournalEntry]) -> str:
    """Serialize the full entry set to the indented payload text."""
    return json.dumps([e.to_dict() for e in entries], indent=2)


def load_entries(payload: str) -> list[JournalEntry]:
    """
    Parse payload text back into entries.

    Raises ValueError (or KeyError for a missing field) on a malformed payload.
    """
    data = json.loads(payload)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("Invalid payload: expected a list of entries")
    entries = [JournalEntry.from_dict(item) for item in data]
    if len({e.id for e in entries}) != len(entries):
        raise ValueError("Invalid payload: duplicate entry ids")
    return entries


def sort_newest_first(entries: list[JournalEntry]) -> list[JournalEntry]:
    """
    Sort entries by timestamp descending.

    Stable: entries with equal timestamps keep their relative order.
    """
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)


def take(entries: list[JournalEntry], limit: int = 0) -> list[JournalEntry]:
    """First `limit` entries; 0 or less means no limit."""
    if limit > 0:
        return entries[:limit]
    return list(entries)


def filter_by_date(entries: list[JournalEntry], target_date: date) -> list[JournalEntry]:
    """Entries whose timestamp falls on the given calendar date."""
    if isinstance(target_date, datetime):
        target_date = target_date.date()
    return [e for e in entries if e.day == target_date]
