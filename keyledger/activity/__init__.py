# -*- coding: utf-8 -*-
"""Action log (add / soft delete / hard delete history)."""

from .models import LogAction, LogEntry
from .storage import append_log_entry, list_logs

__all__ = ["LogAction", "LogEntry", "append_log_entry", "list_logs"]
