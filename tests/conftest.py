"""Shared pytest fixtures for resname tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from resname.config.settings import ResnameSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop RESNAME_* env vars so the host environment never leaks into settings."""
    for key in list(os.environ):
        if key.startswith("RESNAME_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and app logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("resname")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> ResnameSettings:
    """Default settings (255-byte limit, human output)."""
    return ResnameSettings.from_cli()
