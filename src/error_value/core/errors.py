"""Exceptions raised by the library itself (as opposed to error values it models)."""

from __future__ import annotations

from typing import Any


class ErrorValueException(Exception):
    """Base for error-value library failures."""
    pass


class InvalidArgument(ErrorValueException, ValueError, TypeError):
    """A constructor received a reason or details it cannot accept.

    Attributes:
        argument: Name of the offending parameter (``"reason"``, ``"details"``, ...).
        value: The rejected value.
    """

    def __init__(self, argument: str, value: Any, problem: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument} {value!r}: {problem}")
