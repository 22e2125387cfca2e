from __future__ import annotations

from typing import Any


class ParseError(ValueError):
    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def to_detail(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "field": self.field,
            "value": self.value,
            "message": str(self),
        }


class MalformedTimestamp(ParseError):
    """A single-event time, combined with the fixed offset, is not an RFC 3339 date-time."""


class MalformedTimeOfDay(ParseError):
    """A monthly-event time is not a 24-hour ``HH:MM`` value."""


class InvalidRecord(ParseError):
    """A decoded document is missing a key or has a value of the wrong type."""
