"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fieldcheck.toml only declares
the fields it needs. Each ``[fields.<name>]`` table becomes one
:class:`~fieldcheck.domain.validator.FieldValidator`::

    [fields.user_id]
    required = true
    rules = [{ kind = "uuid" }]

    [fields.nickname]
    rules = [
        { kind = "length", min = 2, max = 32 },
        { kind = "regex", pattern = "^[a-z0-9_]+$" },
    ]
"""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from fieldcheck.domain.layouts import RFC3339
from fieldcheck.domain.rules import (
    DateRule,
    LengthRule,
    RegexRule,
    StringRule,
    UUIDRule,
)
from fieldcheck.domain.validator import FieldValidator
from fieldcheck.domain.validator import field_validator as build_field_validator

# --- rule entries ---


class LengthRuleConfig(BaseModel):
    """``{kind = "length", min = .., max = ..}``"""

    model_config = {"frozen": True}

    kind: Literal["length"] = "length"
    min: int = Field(default=0, ge=0)
    max: int = Field(ge=0)

    def build(self) -> StringRule:
        return LengthRule(self.min, self.max)


class RegexRuleConfig(BaseModel):
    """``{kind = "regex", pattern = ".."}``"""

    model_config = {"frozen": True}

    kind: Literal["regex"] = "regex"
    pattern: str

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            msg = f"invalid regex {v!r}: {exc}"
            raise ValueError(msg) from exc
        return v

    def build(self) -> StringRule:
        return RegexRule(re.compile(self.pattern))


class DateRuleConfig(BaseModel):
    """``{kind = "date", layout = "rfc3339"}``; layout may be any strptime format."""

    model_config = {"frozen": True}

    kind: Literal["date"] = "date"
    layout: str = RFC3339

    def build(self) -> StringRule:
        return DateRule(self.layout)


class UUIDRuleConfig(BaseModel):
    """``{kind = "uuid"}``"""

    model_config = {"frozen": True}

    kind: Literal["uuid"] = "uuid"

    def build(self) -> StringRule:
        return UUIDRule()


RuleConfig = Annotated[
    LengthRuleConfig | RegexRuleConfig | DateRuleConfig | UUIDRuleConfig,
    Field(discriminator="kind"),
]


# --- fieldcheck.toml sections ---


class FieldConfig(BaseModel):
    """[fields.<name>] section."""

    model_config = {"frozen": True}

    required: bool = False
    rules: list[RuleConfig] = Field(default_factory=list)

    def build(self, name: str) -> FieldValidator:
        """Materialize a validator; rules keep their declared order."""
        return build_field_validator(name, self.required, *(r.build() for r in self.rules))


class FieldcheckConfig(BaseModel):
    """Root config model — all sections with defaults."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
    fields: dict[str, FieldConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _names_not_blank(self) -> FieldcheckConfig:
        blank = [name for name in self.fields if not name.strip()]
        if blank:
            msg = "field names must not be blank"
            raise ValueError(msg)
        return self
