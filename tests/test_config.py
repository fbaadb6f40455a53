# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from keyledger.config import Settings

_PORT_VARS = ("PORT", "KEYLEDGER_PORT")


def _env_without(*names: str) -> dict:
    return {k: v for k, v in os.environ.items() if k not in names}


class TestSettings(unittest.TestCase):
    def _settings(self, **env: str) -> Settings:
        values = _env_without(*_PORT_VARS, "KEYLEDGER_LOG_MAX_ENTRIES", "KEYLEDGER_DATA_ROOT",
                              "KEYLEDGER_DATA_FILE", "KEYLEDGER_LOG_FILE")
        values.update(env)
        with mock.patch.dict(os.environ, values, clear=True):
            return Settings()

    def test_port_defaults_to_3000(self) -> None:
        self.assertEqual(self._settings().port, 3000)

    def test_port_from_env(self) -> None:
        self.assertEqual(self._settings(PORT="8080").port, 8080)

    def test_keyledger_port_overrides_port(self) -> None:
        self.assertEqual(self._settings(PORT="8080", KEYLEDGER_PORT="9090").port, 9090)

    def test_unparseable_port_falls_back(self) -> None:
        self.assertEqual(self._settings(PORT="not-a-port").port, 3000)
        self.assertEqual(self._settings(PORT="  ").port, 3000)

    def test_store_paths(self) -> None:
        settings = self._settings(KEYLEDGER_DATA_ROOT="/tmp/kl-data")
        self.assertEqual(settings.data_file, Path("/tmp/kl-data/data.json"))
        self.assertEqual(settings.log_file, Path("/tmp/kl-data/log.json"))
        settings = self._settings(KEYLEDGER_DATA_FILE="/tmp/keys.json")
        self.assertEqual(settings.data_file, Path("/tmp/keys.json"))

    def test_log_retention_setting(self) -> None:
        self.assertEqual(self._settings().log_max_entries, 0)
        self.assertEqual(self._settings(KEYLEDGER_LOG_MAX_ENTRIES="50").log_max_entries, 50)
        self.assertEqual(self._settings(KEYLEDGER_LOG_MAX_ENTRIES="-5").log_max_entries, 0)


if __name__ == "__main__":
    unittest.main()
