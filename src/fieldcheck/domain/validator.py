"""FieldValidator — a named, ordered rule chain for one string field.

INVARIANT: The required check always runs first, before any content rule.

INVARIANT: An empty value on an optional field succeeds without running
any content rule. Length, regex, date and UUID rules only describe
present values, so ``field_validator("f", False, length(1, 2))`` accepts
``""``. This holds even for a regex that would reject the empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fieldcheck.domain.errors import ValidationError
from fieldcheck.domain.rules import RequiredRule, StringRule


@dataclass(frozen=True)
class FieldValidator:
    """Required/optional policy plus ordered rules, bound to a field name.

    Attributes:
        name: Field name, prefixed to every error message.
        required_rule: Presence check, evaluated before *rules*.
        rules: Content rules in execution order.
    """

    name: str
    required_rule: RequiredRule
    rules: tuple[StringRule, ...] = field(default_factory=tuple)

    @property
    def required(self) -> bool:
        return self.required_rule.required

    def validate(self, value: str) -> ValidationError | None:
        """Run the rule chain, returning the first failure or None."""
        err = self.required_rule.validate(value)
        if err is not None:
            return err.with_field(self.name)

        if len(value) == 0:
            return None

        for rule in self.rules:
            err = rule.validate(value)
            if err is not None:
                return err.with_field(self.name)
        return None


def field_validator(name: str, required: bool, *rules: StringRule) -> FieldValidator:
    """Build a :class:`FieldValidator`; *rules* run in the order given."""
    return FieldValidator(name=name, required_rule=RequiredRule(required), rules=tuple(rules))
