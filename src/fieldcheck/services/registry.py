"""ValidatorRegistry — named field validators for a host application.

Built once (usually from :class:`~fieldcheck.config.settings.FieldcheckSettings`)
and read-only afterwards, so a single registry can serve concurrent
callers without locking as long as registration happens before use.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fieldcheck.domain.errors import ValidationError
from fieldcheck.domain.validator import FieldValidator

if TYPE_CHECKING:
    from fieldcheck.config.settings import FieldcheckSettings

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Field validators keyed by field name.

    Usage::

        registry = ValidatorRegistry.from_settings(FieldcheckSettings.load())
        err = registry.validate("user_id", payload["user_id"])
        if err is not None:
            return err.to_payload().model_dump()
    """

    def __init__(self, validators: Iterable[FieldValidator] = ()) -> None:
        self._validators: dict[str, FieldValidator] = {}
        for validator in validators:
            self.register(validator)

    @classmethod
    def from_settings(cls, settings: FieldcheckSettings) -> ValidatorRegistry:
        """Build one validator per ``[fields.<name>]`` entry, in declaration order."""
        registry = cls(cfg.build(name) for name, cfg in settings.fields.items())
        logger.debug(
            "Built validator registry with %d field(s) from %s",
            len(registry),
            settings.config_path or "defaults",
        )
        return registry

    def register(self, validator: FieldValidator) -> ValidatorRegistry:
        """Add *validator* under its field name.

        Raises:
            KeyError: If a validator with the same name is already registered.
        """
        if validator.name in self._validators:
            msg = f"Validator already registered for field: {validator.name}"
            raise KeyError(msg)
        self._validators[validator.name] = validator
        return self

    def get(self, name: str) -> FieldValidator:
        """Return the validator for *name*.

        Raises:
            KeyError: If no validator is registered under *name*.
        """
        try:
            return self._validators[name]
        except KeyError:
            msg = f"No validator registered for field: {name}"
            raise KeyError(msg) from None

    def names(self) -> list[str]:
        return list(self._validators)

    def validate(self, name: str, value: str) -> ValidationError | None:
        """Validate *value* with the validator registered under *name*."""
        err = self.get(name).validate(value)
        if err is not None:
            logger.debug("Field %s failed validation: %s", name, err.kind.value)
        return err

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)
