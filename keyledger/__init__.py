# -*- coding: utf-8 -*-
"""API key ledger: flat-file key store with an append-only action log."""

__version__ = "1.0.0"
