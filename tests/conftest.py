"""Shared pytest fixtures for snn tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from snn.config.discovery import CONFIG_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray snn.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_dir")`` on command test
    classes.
    """
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    snn_logger = logging.getLogger("snn")
    snn_level = snn_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    snn_logger.setLevel(snn_level)
