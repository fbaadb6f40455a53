# -*- coding: utf-8 -*-
"""Domain errors, reported to clients as ``status: "error"`` envelopes."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class KeyLedgerError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(KeyLedgerError):
    """A required request field is missing or empty."""


class DuplicateKeyError(KeyLedgerError):
    """The key is already present in the store (deleted or not)."""


class NotFoundError(KeyLedgerError):
    """The key is absent from the store."""


async def _handle_keyledger_error(request: Request, exc: KeyLedgerError) -> JSONResponse:
    # Logical failures still answer 200; ``status`` carries the outcome.
    return JSONResponse(status_code=200, content={"status": "error", "message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(KeyLedgerError, _handle_keyledger_error)
