"""Shared pytest fixtures for annotations-policy tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the package logger after each test.

    The CLI attaches a handler bound to the runner's captured stderr,
    which is closed once the invocation ends.
    """
    pkg = logging.getLogger("annotations_policy")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate


@pytest.fixture(autouse=True)
def _clear_policy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ANNOTATIONS_POLICY_* variables from leaking into tests."""
    for name in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"ANNOTATIONS_POLICY_{name}", raising=False)
