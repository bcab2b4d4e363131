"""Append-only text journal backing the message board."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Empty message"
NO_MESSAGES = "No messages yet."


class StorageError(RuntimeError):
    """Raised when the backing file cannot be written or read."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class LogEntry:
    timestamp: str
    text: str

    @classmethod
    def create(cls, text: Optional[str], moment: datetime) -> "LogEntry":
        return cls(timestamp=format_timestamp(moment), text=text or EMPTY_MESSAGE)

    def to_line(self) -> str:
        # Embedded newlines are written as-is.
        return f"{self.timestamp}: {self.text}\n"


class MessageLog:
    """Flat file journal: one ``<timestamp>: <text>`` line per append."""

    def __init__(self, data_file: Path, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self.data_file = Path(data_file)
        self.clock = clock
        self._storage_ready = False

    def ensure_storage(self) -> Path:
        """Create the parent directory if needed. Safe to call repeatedly."""
        directory = self.data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        self._storage_ready = True
        return directory

    def append(self, text: Optional[str]) -> LogEntry:
        if not self._storage_ready:
            self.ensure_storage()
        entry = LogEntry.create(text, self.clock())
        try:
            with self.data_file.open("a", encoding="utf-8") as fp:
                fp.write(entry.to_line())
        except OSError as exc:
            raise StorageError(str(exc)) from exc
        logger.debug("Appended message to %s", self.data_file)
        return entry

    def read_all(self) -> str:
        try:
            # undecodable bytes show up as U+FFFD instead of failing the read
            return self.data_file.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return NO_MESSAGES
        except OSError as exc:
            raise StorageError(str(exc)) from exc


__all__ = [
    "EMPTY_MESSAGE",
    "NO_MESSAGES",
    "LogEntry",
    "MessageLog",
    "StorageError",
    "format_timestamp",
]
