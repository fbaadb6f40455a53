# -*- coding: utf-8 -*-
"""Flat-file persistence for the key store and the action log.

Both files are rewritten in full on every save. Reads never fail: a missing,
unreadable or malformed file behaves as an empty store.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import settings

logger = logging.getLogger(__name__)

# Serialises read-modify-write cycles within this process.
store_lock = threading.RLock()


def _read_json(path: Path, expected: type) -> Optional[Any]:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Falling back to empty store, cannot read %s: %s", path, exc)
        return None
    if not isinstance(data, expected):
        logger.warning(
            "Falling back to empty store, %s holds %s instead of %s",
            path,
            type(data).__name__,
            expected.__name__,
        )
        return None
    return data


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=4), encoding="utf-8")


def load_key_store() -> Dict[str, Dict[str, Any]]:
    data = _read_json(settings.data_file, dict)
    return data if data is not None else {}


def save_key_store(store: Dict[str, Dict[str, Any]]) -> None:
    _write_json(settings.data_file, store)


def load_log() -> List[Dict[str, Any]]:
    data = _read_json(settings.log_file, list)
    return data if data is not None else []


def save_log(entries: List[Dict[str, Any]]) -> None:
    _write_json(settings.log_file, entries)


def init_store() -> None:
    """Create both store files, empty, when they do not exist yet."""
    with store_lock:
        if not settings.data_file.exists():
            _write_json(settings.data_file, {})
            logger.info("Created key store %s", settings.data_file)
        if not settings.log_file.exists():
            _write_json(settings.log_file, [])
            logger.info("Created action log %s", settings.log_file)
