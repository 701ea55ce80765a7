"""
ValidationOutcome — single-error holder shared by both validator layers.

An outcome starts empty (no error). A failing rule moves it to the failed
state, and a later failure overwrites the message. Passing rules never
touch it, so an earlier failure survives later successful checks.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories recorded alongside the message."""

    EMPTY_VALUE = "empty_value"
    LENGTH_OUT_OF_BOUNDS = "length_out_of_bounds"
    INVALID_FORMAT = "invalid_format"
    OUT_OF_RANGE = "out_of_range"
    NOT_A_NUMBER = "not_a_number"
    PATTERN_MISMATCH = "pattern_mismatch"
    INVALID_PATTERN = "invalid_pattern"
    FIELD_NOT_FOUND = "field_not_found"
    CONVERSION_FAILURE = "conversion_failure"


class ValidationOutcome:
    """Holds at most one failure message; an empty message means success."""

    __slots__ = ("_message", "_kind")

    def __init__(self) -> None:
        self._message: str = ""
        self._kind: Optional[ErrorKind] = None

    def set_message(self, message: str, kind: Optional[ErrorKind] = None) -> "ValidationOutcome":
        """
        Overwrite the held message unconditionally.

        *kind* is kept when omitted, so callers replacing the text of a
        recorded failure do not lose its category.
        """
        self._message = message
        if kind is not None:
            self._kind = kind
        return self

    def error_text(self) -> str:
        return self._message

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self._kind if self._message else None

    @property
    def failed(self) -> bool:
        return self._message != ""

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        if not self._message:
            return "ValidationOutcome(ok)"
        return f"ValidationOutcome({self._kind.value if self._kind else 'error'}: {self._message!r})"
