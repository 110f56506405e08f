"""Shared pytest fixtures for litcal tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from litcal.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from any litcal.toml or LITCAL_* variables on the host."""
    for name in ("LITCAL_CONFIG", "LITCAL_QUIET", "LITCAL_VERBOSE", "LITCAL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """A --verbose invocation must not leak span collection into later tests."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger against a throwaway stderr."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    ours = logging.getLogger("litcal")
    our_level = ours.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    ours.setLevel(our_level)
