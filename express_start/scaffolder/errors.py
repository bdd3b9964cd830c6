"""Exceptions raised by the generation engine."""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Raised when project generation cannot continue."""


class NonEmptyDirectoryError(GenerationError):
    """Raised when the destination already exists and contains entries."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Destination {self.path} already exists and is not empty"
        )


class RenderError(GenerationError):
    """Raised when a template document cannot be rendered."""

    def __init__(self, template_path: str, message: str) -> None:
        self.template_path = template_path
        super().__init__(f"Failed to render {template_path}: {message}")
