"""Validation error taxonomy.

Every rule failure is an ordinary, recoverable outcome: rules *return*
a :class:`ValidationError`, they never raise it. Callers branch on
:attr:`ValidationError.kind`, never on the message text.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class ErrorKind(StrEnum):
    """Fixed categories of validation failure."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    REQUIRED = "required"
    REGEX_NOT_MATCHED = "regex_not_matched"
    INVALID_DATE = "invalid_date"
    INVALID_UUID = "invalid_uuid"

    @property
    def message(self) -> str:
        """Base message, before any contextual detail is appended."""
        return _BASE_MESSAGES[self]


_BASE_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.TOO_SHORT: "should not be shorter than",
    ErrorKind.TOO_LONG: "should not be longer than",
    ErrorKind.REQUIRED: "is required",
    ErrorKind.REGEX_NOT_MATCHED: "should satisfy the regex",
    ErrorKind.INVALID_DATE: "should be a parseable date string",
    ErrorKind.INVALID_UUID: "should be a parseable uuid string",
}

# Parser failures read "<base>, <parser text>"; bounds and patterns read "<base> <detail>".
_COMMA_SEPARATED = frozenset({ErrorKind.INVALID_DATE, ErrorKind.INVALID_UUID})


class ErrorPayload(BaseModel):
    """Serializable form of a :class:`ValidationError` for API responses."""

    model_config = {"frozen": True}

    code: str
    message: str
    field: str | None = None
    detail: Any = None


class ValidationError(Exception):
    """A failed rule, optionally attributed to a named field.

    Attributes:
        kind: The failure category.
        detail: Contextual payload: the violated bound, the pattern
            source, or the underlying parser message. None for REQUIRED.
        field: Field name, set once a :class:`FieldValidator` wraps it.
    """

    def __init__(
        self,
        kind: ErrorKind,
        detail: Any = None,
        *,
        field: str | None = None,
    ) -> None:
        self.kind = kind
        self.detail = detail
        self.field = field
        super().__init__(kind, detail, field)

    @property
    def rule_message(self) -> str:
        """Message without the field prefix."""
        base = self.kind.message
        if self.detail is None:
            return base
        if self.kind in _COMMA_SEPARATED:
            return f"{base}, {self.detail}"
        return f"{base} {self.detail}"

    @property
    def message(self) -> str:
        if self.field is None:
            return self.rule_message
        return f"{self.field} is invalid: {self.rule_message}"

    def is_kind(self, kind: ErrorKind) -> bool:
        """Check the failure category, ignoring detail and field."""
        return self.kind is kind

    def with_field(self, field: str) -> ValidationError:
        """Return a copy attributed to *field*. The original is left untouched."""
        return ValidationError(self.kind, self.detail, field=field)

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            code=self.kind.value,
            message=self.message,
            field=self.field,
            detail=self.detail,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # *field* is keyword-only, so the default ``cls(*args)`` rebuild cannot restore it.
        return (type(self), (self.kind, self.detail), {"field": self.field})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind!r}, detail={self.detail!r}, field={self.field!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.kind, self.detail, self.field) == (other.kind, other.detail, other.field)

    def __hash__(self) -> int:
        return hash((self.kind, str(self.detail), self.field))
