"""fieldcheck — composable validation rules for string fields.

Build rules, bind them to a field, validate::

    from fieldcheck import ErrorKind, field_validator, length, uuid

    user_id = field_validator("user_id", True, uuid(), length(1, 36))
    err = user_id.validate(raw)
    if err is not None and err.is_kind(ErrorKind.INVALID_UUID):
        ...
"""

from fieldcheck.domain.errors import ErrorKind, ErrorPayload, ValidationError
from fieldcheck.domain.layouts import DATE_ONLY, DATETIME, RFC1123Z, RFC3339, TIME_ONLY
from fieldcheck.domain.rules import (
    DateRule,
    LengthRule,
    RegexRule,
    RequiredRule,
    StringRule,
    UUIDRule,
    date,
    length,
    regex,
    required,
    uuid,
)
from fieldcheck.domain.validator import FieldValidator, field_validator

__version__ = "0.1.0"

__all__ = [
    "DATE_ONLY",
    "DATETIME",
    "RFC1123Z",
    "RFC3339",
    "TIME_ONLY",
    "DateRule",
    "ErrorKind",
    "ErrorPayload",
    "FieldValidator",
    "LengthRule",
    "RegexRule",
    "RequiredRule",
    "StringRule",
    "UUIDRule",
    "ValidationError",
    "date",
    "field_validator",
    "length",
    "regex",
    "required",
    "uuid",
]
