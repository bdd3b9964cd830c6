"""Shared pytest fixtures for the express-start test suite.

Provides reusable fixtures for:
- Answer sets covering the documented scenarios
- A ``Config`` rooted in a temporary working directory
- A scripted disposition chooser standing in for the interactive prompt
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from express_start.config import Config
from express_start.scaffolder.destination import Disposition
from express_start.scaffolder.models import Answers


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def make_answers() -> Callable[..., Answers]:
    """Factory building ``Answers`` with defaults for unspecified fields."""

    def _make(**overrides: Any) -> Answers:
        values: dict[str, Any] = {"project_name": "demo"}
        values.update(overrides)
        return Answers(**values)

    return _make


@pytest.fixture
def ts_full_answers(make_answers) -> Answers:
    """TypeScript + Prisma + JWT with logger and parser."""
    return make_answers(
        project_name="demo",
        language="TypeScript",
        orm="Prisma",
        auth="JWT",
        logger=True,
        parser=True,
    )


@pytest.fixture
def js_minimal_answers(make_answers) -> Answers:
    """JavaScript with every optional feature switched off."""
    return make_answers(
        project_name="demo2",
        language="JavaScript",
        orm="None",
        auth="None",
        logger=False,
        parser=False,
    )


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Temporary working directory in which projects are generated."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config(workdir: Path) -> Config:
    return Config(cwd=workdir)


# ---------------------------------------------------------------------------
# Prompt collaborators
# ---------------------------------------------------------------------------

class ScriptedChooser:
    """Disposition chooser that replays pre-recorded answers."""

    def __init__(self, disposition: Disposition, names: Optional[list[str]] = None) -> None:
        self.disposition = disposition
        self.names = list(names or [])
        self.choose_calls: list[Path] = []
        self.errors: list[Optional[str]] = []

    def choose(self, path: Path) -> Disposition:
        self.choose_calls.append(path)
        return self.disposition

    def ask_new_name(self, error: Optional[str]) -> str:
        self.errors.append(error)
        return self.names.pop(0)


@pytest.fixture
def scripted_chooser() -> Callable[..., ScriptedChooser]:
    return ScriptedChooser
