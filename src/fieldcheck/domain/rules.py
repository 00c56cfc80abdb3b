"""String rule ABC and the built-in rules.

Each rule is a frozen dataclass: configuration is fixed at construction
and :meth:`StringRule.validate` is a pure function of its input, so a
single rule instance can be shared across threads without locking.

The lowercase helpers at the bottom (:func:`length`, :func:`required`,
:func:`regex`, :func:`date`, :func:`uuid`) are the intended public
constructors.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID

from fieldcheck.domain.errors import ErrorKind, ValidationError
from fieldcheck.domain.layouts import RFC3339, parse_date

# The four RFC 4122 textual forms: canonical, bare hex, braced, URN.
_UUID_TEXT_PATTERN = re.compile(
    r"(?:urn:uuid:)?[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
    r"|\{[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\}"
    r"|[0-9a-f]{32}",
    re.IGNORECASE | re.ASCII,
)


class StringRule(ABC):
    """Abstract base class for rules over a single string value."""

    @abstractmethod
    def validate(self, value: str) -> ValidationError | None:
        """Return None if *value* satisfies the rule, else the failure."""
        ...


@dataclass(frozen=True)
class LengthRule(StringRule):
    """Byte-length bounds, both inclusive.

    Length is measured in UTF-8 bytes, not code points: ``"é"`` has
    length 2. An inverted range (``min > max``) is accepted and rejects
    every input.
    """

    min: int
    max: int

    def validate(self, value: str) -> ValidationError | None:
        # Lone surrogates (e.g. from surrogateescape) count 3 bytes each.
        size = len(value.encode("utf-8", "surrogatepass"))
        if size < self.min:
            return ValidationError(ErrorKind.TOO_SHORT, self.min)
        if size > self.max:
            return ValidationError(ErrorKind.TOO_LONG, self.max)
        return None


@dataclass(frozen=True)
class RequiredRule(StringRule):
    """Rejects the empty string when *required* is set."""

    required: bool

    def validate(self, value: str) -> ValidationError | None:
        if self.required and len(value) == 0:
            return ValidationError(ErrorKind.REQUIRED)
        return None


@dataclass(frozen=True)
class RegexRule(StringRule):
    """Requires *pattern* to match somewhere in the value (search, not fullmatch)."""

    pattern: re.Pattern[str]

    def validate(self, value: str) -> ValidationError | None:
        if self.pattern.search(value) is None:
            return ValidationError(ErrorKind.REGEX_NOT_MATCHED, self.pattern.pattern)
        return None


@dataclass(frozen=True)
class DateRule(StringRule):
    """Requires the value to parse under *layout*. The parsed value is discarded."""

    layout: str = RFC3339

    def validate(self, value: str) -> ValidationError | None:
        try:
            parse_date(value, self.layout)
        except ValueError as exc:
            return ValidationError(ErrorKind.INVALID_DATE, str(exc))
        return None


@dataclass(frozen=True)
class UUIDRule(StringRule):
    """Requires one of the textual UUID forms.

    Accepted: canonical hyphenated, bare 32-digit hex, ``{braced}`` and
    ``urn:uuid:`` representations. The shape is checked before
    :class:`uuid.UUID` parses the digits, because ``UUID`` alone also
    tolerates whitespace and underscores.
    """

    def validate(self, value: str) -> ValidationError | None:
        if _UUID_TEXT_PATTERN.fullmatch(value) is None:
            return ValidationError(ErrorKind.INVALID_UUID, f"invalid UUID format: {value!r}")
        try:
            UUID(value.lower())
        except ValueError as exc:
            return ValidationError(ErrorKind.INVALID_UUID, str(exc))
        return None


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def length(min: int, max: int) -> LengthRule:  # noqa: A002
    """Build a :class:`LengthRule`. Negative bounds are a programming error.

    Raises:
        ValueError: If either bound is negative.
    """
    if min < 0 or max < 0:
        msg = f"length bounds must be non-negative, got min={min} max={max}"
        raise ValueError(msg)
    return LengthRule(min, max)


def required(flag: bool = True) -> RequiredRule:
    return RequiredRule(flag)


def regex(pattern: str | re.Pattern[str]) -> RegexRule:
    """Build a :class:`RegexRule` from a compiled pattern or a pattern string.

    Raises:
        re.error: If *pattern* is a string that does not compile.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return RegexRule(pattern)


def date(layout: str = RFC3339) -> DateRule:
    return DateRule(layout)


def uuid() -> UUIDRule:
    return UUIDRule()
