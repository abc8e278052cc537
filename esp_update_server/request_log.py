from __future__ import annotations

import threading
import weakref
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import UpdateSettings
from .logs import _log

SEPARATOR = "-------------------------"

# A lock lives only while some writer holds it, so past days drop out on their own.
_LOCKS: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = str(path)
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = threading.Lock()
            _LOCKS[key] = lock
        return lock


def format_timestamp(now: datetime) -> str:
    # e.g. "October 19, 2026, 3:04 pm"
    hour = now.hour % 12 or 12
    meridiem = "am" if now.hour < 12 else "pm"
    return f"{now:%B} {now.day}, {now.year}, {hour}:{now:%M} {meridiem}"


def format_record(remote_addr: str, message: str, now: datetime) -> str:
    return (
        f"User: {remote_addr} - {format_timestamp(now)}\n"
        f"Msg: {message}\n"
        f"{SEPARATOR}\n"
    )


class RequestLog:
    """Per-day plain text log of update requests. Write-only."""

    def __init__(self, settings: UpdateSettings):
        self.settings = settings

    def write(self, remote_addr: str, message: str, now: Optional[datetime] = None) -> None:
        now = now or datetime.now()
        path = self.settings.log_path(now)
        record = format_record(remote_addr, message, now)
        try:
            with _lock_for(path):
                with open(path, "a", encoding="utf-8") as f:
                    f.write(record)
        except OSError:
            _log().warning("Failed to write request log %s", path, exc_info=True)
