# -*- coding: utf-8 -*-
"""API keys: flat-file operations.

Every operation loads the whole key store, applies one lookup or mutation
and, for mutations, writes the whole store back before recording the action.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional, Union

from ..activity import LogAction, append_log_entry
from ..errors import DuplicateKeyError, NotFoundError, ValidationError
from ..store import load_key_store, save_key_store, store_lock
from .models import KeyRecord

logger = logging.getLogger(__name__)

_LOG_PREFIX_CHARS = 4


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _masked(api_key: str) -> str:
    return f"{api_key[:_LOG_PREFIX_CHARS]}***"


def parse_expiry(value: Any) -> Optional[datetime]:
    """Parse an expiry timestamp into an aware datetime, or None if unparseable.

    Strings are ISO-8601 or RFC 2822; numbers are epoch milliseconds.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    # Handle trailing Z.
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_expired(value: Any, now: Optional[datetime] = None) -> bool:
    expiry = parse_expiry(value)
    if expiry is None:
        return False
    return (now or datetime.now(timezone.utc)) > expiry


def add_key(
    api_key: Union[str, int, float, None],
    expired_time: Union[str, int, float, None],
) -> Dict[str, Any]:
    # Falsy values (empty string, 0) count as missing.
    if not api_key or not expired_time:
        raise ValidationError("API key and expired time are required!")
    api_key = str(api_key)

    with store_lock:
        store = load_key_store()
        if api_key in store:
            raise DuplicateKeyError("API key already exists!")
        record = KeyRecord(expired=expired_time, created_at=_utc_now()).model_dump()
        store[api_key] = record
        save_key_store(store)
        append_log_entry(LogAction.ADD, api_key)

    logger.info("Added API key %s (expires %s)", _masked(api_key), expired_time)
    return record


def get_key_status(api_key: str) -> Dict[str, Any]:
    record = load_key_store().get(api_key)

    if not isinstance(record, dict):
        return {"status": "invalid", "message": "API key not found!"}

    # Deleted wins over expired.
    if record.get("deleted"):
        return {"status": "deleted", "message": "API key has been marked as deleted!"}

    if is_expired(record.get("expired")):
        return {
            "status": "expired",
            "message": "API key has expired!",
            "expired_time": record.get("expired"),
        }

    return {
        "status": "valid",
        "data": record,
        "expired_time": record.get("expired"),
    }


def soft_delete_key(api_key: str) -> None:
    with store_lock:
        store = load_key_store()
        record = store.get(api_key)
        if not isinstance(record, dict):
            raise NotFoundError("API key not found!")
        # Repeating on an already deleted key rewrites the flag and logs again.
        record["deleted"] = True
        save_key_store(store)
        append_log_entry(LogAction.SOFT_DELETE, api_key)
    logger.info("Marked API key %s as deleted", _masked(api_key))


def hard_delete_key(api_key: str) -> None:
    with store_lock:
        store = load_key_store()
        if api_key not in store:
            raise NotFoundError("API key not found!")
        del store[api_key]
        save_key_store(store)
        append_log_entry(LogAction.HARD_DELETE, api_key)
    logger.info("Removed API key %s", _masked(api_key))


def list_keys() -> Dict[str, Any]:
    return load_key_store()
