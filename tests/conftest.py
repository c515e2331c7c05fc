"""Shared fixtures.

Every test runs with the action's input and runner variables removed from
the environment, so a suite executed inside GitHub Actions sees the same
clean slate as a local run.
"""

import logging
import os
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    for name in list(os.environ):
        upper = name.upper()
        if upper.startswith(("INPUT_", "GITHUB_")) or upper == "RUNNER_DEBUG":
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sbt_workspace(tmp_path: Path) -> Path:
    """A minimal sbt build: project/build.properties."""
    (tmp_path / "project").mkdir()
    (tmp_path / "project" / "build.properties").write_text(
        "sbt.version=1.9.9\n", encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def mill_workspace(tmp_path: Path) -> Path:
    """A minimal Mill build: build.sc."""
    (tmp_path / "build.sc").write_text("import mill._\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging config bound to a per-test capture stream."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
