from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List


def _int_env(*names: str, default: int) -> int:
    for name in names:
        raw = os.environ.get(name)
        if raw is None or not raw.strip():
            continue
        try:
            return int(raw)
        except ValueError:
            return default
    return default


class Settings:
    """Centralized configuration for the key ledger service."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent

        self.host: str = os.environ.get("KEYLEDGER_HOST") or os.environ.get("HOST") or "0.0.0.0"
        self.port: int = _int_env("KEYLEDGER_PORT", "PORT", default=3000)

        self.data_root: Path = Path(
            os.environ.get("KEYLEDGER_DATA_ROOT") or (repo_root / "data")
        ).expanduser()
        self.data_file: Path = Path(
            os.environ.get("KEYLEDGER_DATA_FILE") or (self.data_root / "data.json")
        ).expanduser()
        self.log_file: Path = Path(
            os.environ.get("KEYLEDGER_LOG_FILE") or (self.data_root / "log.json")
        ).expanduser()
        self.static_dir: Path = Path(
            os.environ.get("KEYLEDGER_STATIC_DIR") or (base_dir / "static")
        ).expanduser()

        # 0 keeps every entry; a positive value keeps only the newest N.
        self.log_max_entries: int = max(_int_env("KEYLEDGER_LOG_MAX_ENTRIES", default=0), 0)
        self.log_level: str = (
            os.environ.get("KEYLEDGER_LOG_LEVEL") or os.environ.get("LOG_LEVEL") or "INFO"
        ).upper()

        cors = os.environ.get("KEYLEDGER_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
