# -*- coding: utf-8 -*-
"""Action log: file storage helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List

from ..config import settings
from ..store import load_log, save_log, store_lock
from .models import LogAction, LogEntry


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def append_log_entry(action: LogAction, api_key: str) -> Dict[str, Any]:
    entry = LogEntry(action=LogAction(action), api_key=api_key, time=_utc_now()).model_dump(mode="json")
    with store_lock:
        entries = load_log()
        entries.append(entry)
        if settings.log_max_entries and len(entries) > settings.log_max_entries:
            entries = entries[-settings.log_max_entries:]
        save_log(entries)
    return entry


def list_logs() -> List[Any]:
    return load_log()
