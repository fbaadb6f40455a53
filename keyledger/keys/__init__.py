# -*- coding: utf-8 -*-
"""API key records (add / status / soft delete / hard delete / list)."""

from .storage import add_key, get_key_status, hard_delete_key, list_keys, soft_delete_key

__all__ = ["add_key", "get_key_status", "hard_delete_key", "list_keys", "soft_delete_key"]
