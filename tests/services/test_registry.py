"""Tests for ValidatorRegistry."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fieldcheck.config.settings import FieldcheckSettings
from fieldcheck.domain.errors import ErrorKind
from fieldcheck.domain.rules import length, uuid
from fieldcheck.domain.validator import field_validator
from fieldcheck.services.registry import ValidatorRegistry

CANONICAL_UUID = "4b9e7348-bdda-4584-88c1-a1e9ac4c6595"


@pytest.fixture
def registry(config_file: Path) -> ValidatorRegistry:
    return ValidatorRegistry.from_settings(FieldcheckSettings.load(start=config_file.parent))


class TestFromSettings:
    def test_builds_every_field_in_order(self, registry: ValidatorRegistry) -> None:
        assert registry.names() == ["user_id", "nickname", "created_at"]
        assert len(registry) == 3

    def test_empty_settings(self, tmp_path: Path) -> None:
        registry = ValidatorRegistry.from_settings(FieldcheckSettings.load(start=tmp_path))
        assert len(registry) == 0

    def test_logs_construction(
        self, config_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldcheck"):
            ValidatorRegistry.from_settings(FieldcheckSettings.load(start=config_file.parent))
        assert any("3 field(s)" in r.getMessage() for r in caplog.records)


class TestValidate:
    def test_valid_values(self, registry: ValidatorRegistry) -> None:
        assert registry.validate("user_id", CANONICAL_UUID) is None
        assert registry.validate("nickname", "neo_1") is None
        assert registry.validate("created_at", "2021-11-20T18:01:24Z") is None

    def test_optional_empty(self, registry: ValidatorRegistry) -> None:
        assert registry.validate("nickname", "") is None

    @pytest.mark.parametrize(
        ("name", "value", "kind"),
        [
            ("user_id", "", ErrorKind.REQUIRED),
            ("user_id", "12314", ErrorKind.INVALID_UUID),
            ("nickname", "a", ErrorKind.TOO_SHORT),
            ("nickname", "much_too_long", ErrorKind.TOO_LONG),
            ("nickname", "Neo!", ErrorKind.REGEX_NOT_MATCHED),
            ("created_at", "2021-11-20T18:01", ErrorKind.INVALID_DATE),
        ],
    )
    def test_failures(
        self, registry: ValidatorRegistry, name: str, value: str, kind: ErrorKind
    ) -> None:
        err = registry.validate(name, value)
        assert err is not None
        assert err.is_kind(kind)
        assert err.field == name
        assert err.to_payload().field == name

    def test_logs_failures(
        self, registry: ValidatorRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldcheck"):
            registry.validate("user_id", "nope")
        assert any("invalid_uuid" in r.getMessage() for r in caplog.records)

    def test_unknown_field(self, registry: ValidatorRegistry) -> None:
        with pytest.raises(KeyError, match="No validator registered"):
            registry.validate("missing", "x")


class TestRegister:
    def test_register_and_get(self) -> None:
        validator = field_validator("user_id", True, uuid(), length(1, 36))
        registry = ValidatorRegistry().register(validator)
        assert registry.get("user_id") is validator
        assert "user_id" in registry
        assert "other" not in registry

    def test_constructor_accepts_validators(self) -> None:
        registry = ValidatorRegistry([field_validator("a", True), field_validator("b", False)])
        assert registry.names() == ["a", "b"]

    def test_duplicate_rejected(self) -> None:
        registry = ValidatorRegistry([field_validator("a", True)])
        with pytest.raises(KeyError, match="already registered"):
            registry.register(field_validator("a", False))
