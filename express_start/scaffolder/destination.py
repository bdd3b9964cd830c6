"""Destination directory conflict resolution.

Decides what happens when ``cwd/<project_name>`` already exists.  The decision
logic is a small state machine (:func:`start` and :func:`transition`) that
knows nothing about prompting; :class:`DestinationResolver` drives it with a
pluggable :class:`DispositionChooser` that asks the user.

Only the ``overwrite`` disposition touches the filesystem, and only after it
has been chosen explicitly.
"""

from __future__ import annotations

import asyncio
import shutil
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

from .errors import GenerationError, NonEmptyDirectoryError


# ---------------------------------------------------------------------------
# Name validation
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> Optional[str]:
    """Return an error message for an unusable project name, else ``None``."""
    name = name.strip()
    if not name:
        return "Project name cannot be empty."
    if name == "/":
        return "Project name cannot be the filesystem root."
    if name.startswith(".."):
        return "Project name cannot point outside the current directory."
    return None


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class ResolutionState(str, Enum):
    NO_CONFLICT = "no-conflict"
    CONFLICT_UNRESOLVED = "conflict-unresolved"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class Disposition(str, Enum):
    """What to do with an existing destination directory."""
    OVERWRITE = "overwrite"
    RENAME = "rename"
    CANCEL = "cancel"


class Action(str, Enum):
    PROCEED = "proceed"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Resolution:
    """Snapshot of the resolver state for one candidate name."""

    state: ResolutionState
    name: str
    error: Optional[str] = None
    overwrite: bool = False

    @property
    def settled(self) -> bool:
        return self.state is not ResolutionState.CONFLICT_UNRESOLVED


def start(cwd: Path, candidate: str) -> Resolution:
    """Initial state for *candidate* relative to *cwd*."""
    if (Path(cwd) / candidate).exists():
        return Resolution(ResolutionState.CONFLICT_UNRESOLVED, candidate)
    return Resolution(ResolutionState.NO_CONFLICT, candidate)


def transition(
    resolution: Resolution,
    choice: Disposition,
    cwd: Path,
    new_name: Optional[str] = None,
) -> Resolution:
    """Apply a user *choice* to an unresolved conflict.

    A rejected rename keeps the conflict unresolved and carries the reason in
    ``error`` so the caller can ask again.
    """
    if resolution.state is not ResolutionState.CONFLICT_UNRESOLVED:
        raise ValueError(f"Cannot apply {choice.value!r} in state {resolution.state.value!r}")

    if choice is Disposition.OVERWRITE:
        return Resolution(ResolutionState.RESOLVED, resolution.name, overwrite=True)

    if choice is Disposition.CANCEL:
        return Resolution(ResolutionState.CANCELLED, resolution.name)

    candidate = (new_name or "").strip()
    error = validate_project_name(candidate)
    if error is None and (Path(cwd) / candidate).exists():
        error = f'A directory named "{candidate}" already exists. Choose a different name.'
    if error:
        return replace(resolution, error=error)
    return Resolution(ResolutionState.RESOLVED, candidate)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class DispositionChooser(Protocol):
    """Collaborator that asks the user how to handle an existing directory."""

    def choose(self, path: Path) -> Disposition: ...

    def ask_new_name(self, error: Optional[str]) -> str: ...


@dataclass(frozen=True)
class ResolveResult:
    final_name: str
    action: Action


class DestinationResolver:
    """Resolves a candidate project name against the working directory."""

    def __init__(self, cwd: str | Path, chooser: DispositionChooser) -> None:
        self.cwd = Path(cwd)
        self.chooser = chooser

    async def resolve(self, candidate: str) -> ResolveResult:
        """Return the final project name and whether generation may proceed.

        Raises:
            OSError: If the overwrite disposition fails to delete the
                existing entry.
        """
        resolution = start(self.cwd, candidate)
        if resolution.state is ResolutionState.NO_CONFLICT:
            return ResolveResult(candidate, Action.PROCEED)

        choice = self.chooser.choose(self.cwd / candidate)
        if choice is Disposition.RENAME:
            while not resolution.settled:
                new_name = self.chooser.ask_new_name(resolution.error)
                resolution = transition(resolution, choice, self.cwd, new_name)
        else:
            resolution = transition(resolution, choice, self.cwd)

        if resolution.state is ResolutionState.CANCELLED:
            return ResolveResult(resolution.name, Action.CANCEL)

        if resolution.overwrite:
            await asyncio.to_thread(_remove_existing, self.cwd / resolution.name)
        return ResolveResult(resolution.name, Action.PROCEED)


def _remove_existing(path: Path) -> None:
    """Delete the directory tree, or the single file or link, at *path*."""
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


# ---------------------------------------------------------------------------
# Pre-condition guard
# ---------------------------------------------------------------------------


def ensure_empty_destination(path: str | Path) -> None:
    """Refuse to generate into a destination that already holds entries."""
    target = Path(path)
    if not target.exists():
        return
    if not target.is_dir():
        raise GenerationError(f"Destination {target} exists and is not a directory")
    if any(target.iterdir()):
        raise NonEmptyDirectoryError(target)
