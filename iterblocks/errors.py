"""Exceptions raised by iterblocks."""

from __future__ import annotations

from typing import Any


class IterblocksError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgument(IterblocksError, ValueError):
    """Raised eagerly when a function receives an argument it cannot iterate with."""

    def __init__(self, argument: str, value: Any, reason: str | None = None):
        self.argument = argument
        self.value = value
        message = f"invalid {argument} parameter: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
