"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which mirrors a template tree under
``express_start/scaffolder/templates/`` into a destination directory.  Files
ending in ``.j2`` are rendered against the wizard answers; everything else is
copied byte-for-byte.  Output names and skip rules are plain functions so
they can be tested without touching the filesystem.
"""

from __future__ import annotations

import asyncio
import re
import shutil
from pathlib import Path, PurePosixPath
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    select_autoescape,
)

from .errors import RenderError
from .models import Answers, Auth, Orm, Validator


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"
TSCONFIG_TEMPLATE = "tsconfig.json.j2"


# ---------------------------------------------------------------------------
# Per-entry rules
# ---------------------------------------------------------------------------


def is_template(name: str) -> bool:
    """Return ``True`` if *name* is a template document."""
    return name.endswith(TEMPLATE_SUFFIX)


def output_name(name: str, answers: Answers) -> str:
    """Map a template entry name to the name written in the destination.

    ``app.ts.j2`` becomes ``app.ts`` for TypeScript and ``app.js`` for
    JavaScript.
    """
    if is_template(name):
        name = name[: -len(TEMPLATE_SUFFIX)]
    if not answers.is_typescript and name.endswith(".ts"):
        name = name[: -len(".ts")] + ".js"
    return name


def _feature_gates(answers: Answers) -> dict[str, bool]:
    # relative template path -> whether the entry is rendered
    has_auth = answers.auth is not Auth.NONE
    return {
        "src/db": answers.orm is not Orm.NONE,
        "src/middleware/auth.ts.j2": has_auth,
        "src/routes/auth.ts.j2": has_auth,
        "src/validators": answers.validator is not Validator.NONE,
        "src/utils/prototypes.ts.j2": answers.extend_prototypes,
    }


def should_skip(rel_path: str | PurePosixPath, answers: Answers) -> bool:
    """Return ``True`` if the entry at *rel_path* must not be produced.

    *rel_path* is relative to the tree root, ``/``-separated.
    """
    rel = PurePosixPath(rel_path)
    if rel.name == TSCONFIG_TEMPLATE and not answers.is_typescript:
        return True
    return _feature_gates(answers).get(str(rel), True) is False


def build_context(answers: Answers) -> dict[str, Any]:
    """Build the Jinja2 template context from the wizard answers."""
    context = answers.model_dump(mode="json")
    context["project_name_slug"] = _slugify(answers.project_name)
    return context


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Undefined names are errors: a template that references something the
    answers do not provide fails with :class:`RenderError` instead of
    silently rendering an empty string.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"project/src/app.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            RenderError: If the template is missing, malformed, or refers
                to an undefined name.
        """
        try:
            template = self.env.get_template(template_path)
            return template.render(**context)
        except TemplateError as exc:
            raise RenderError(template_path, str(exc)) from exc

    # -- Tree rendering (async) --------------------------------------------

    async def render_tree(
        self,
        template_prefix: str,
        output_dir: str | Path,
        answers: Answers,
    ) -> list[Path]:
        """Mirror the tree under *template_prefix* into *output_dir*.

        Directories are created before their children.  Template documents
        are rendered, static assets are copied unchanged, and every output
        name goes through :func:`output_name`.  Entries rejected by
        :func:`should_skip` are not produced, and neither is anything below
        a skipped directory.

        Returns:
            List of written file paths.
        """
        prefix_path = self.template_dir / template_prefix
        if not prefix_path.is_dir():
            raise FileNotFoundError(f"Template tree '{template_prefix}' not found at {prefix_path}")

        context = build_context(answers)
        written: list[Path] = []
        await self._render_dir(
            prefix_path, PurePosixPath(), Path(output_dir), answers, context, written
        )
        return written

    async def _render_dir(
        self,
        src_dir: Path,
        rel_dir: PurePosixPath,
        out_dir: Path,
        answers: Answers,
        context: dict[str, Any],
        written: list[Path],
    ) -> None:
        await asyncio.to_thread(out_dir.mkdir, parents=True, exist_ok=True)

        for entry in sorted(src_dir.iterdir(), key=lambda p: p.name):
            rel = rel_dir / entry.name
            if should_skip(rel, answers):
                continue

            target = out_dir / output_name(entry.name, answers)

            if entry.is_dir():
                await self._render_dir(entry, rel, target, answers, context, written)
            elif is_template(entry.name):
                template_key = entry.relative_to(self.template_dir).as_posix()
                content = self.render(template_key, context)
                await asyncio.to_thread(_write_file, target, content)
                written.append(target)
            else:
                await asyncio.to_thread(shutil.copyfile, entry, target)
                written.append(target)


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def _slugify(value: str) -> str:
    """Convert a string to an npm-safe package slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")

