"""Shared pytest fixtures and test helpers for fieldcheck tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from fieldcheck.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME

CANONICAL_UUID = "4b9e7348-bdda-4584-88c1-a1e9ac4c6595"

SAMPLE_TOML = """\
[fields.user_id]
required = true
rules = [{ kind = "uuid" }, { kind = "length", min = 1, max = 36 }]

[fields.nickname]
rules = [
    { kind = "length", min = 2, max = 8 },
    { kind = "regex", pattern = "^[a-z0-9_]+$" },
]

[fields.created_at]
required = true
rules = [{ kind = "date" }]
"""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FIELDCHECK_* environment out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("FIELDCHECK_VERBOSE", raising=False)
    monkeypatch.delenv("FIELDCHECK_LOG_JSON", raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A fieldcheck.toml declaring three fields."""
    path = tmp_path / CONFIG_FILENAME
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def restore_logging() -> Generator[None]:
    """Restore root and fieldcheck logger state after a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fc = logging.getLogger("fieldcheck")
    fc_level = fc.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fc.setLevel(fc_level)
