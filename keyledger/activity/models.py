# -*- coding: utf-8 -*-
"""Action log: models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class LogAction(str, Enum):
    ADD = "add"
    SOFT_DELETE = "deleted"
    HARD_DELETE = "delete"


class LogEntry(BaseModel):
    action: LogAction
    api_key: str
    time: str
