"""Language- and ORM-specific artefacts that are not plain template files.

Runs after the template tree has been rendered.  Every step is safe to run
again on the same destination.
"""

from __future__ import annotations

import asyncio
import shutil
import textwrap
from pathlib import Path

from .models import Answers, Orm


PROTOTYPE_DECLARATIONS = textwrap.dedent(
    """\
    export {};

    declare global {
      interface Array<T> {
        /** Index of `target` in a sorted array, or -1 when absent. */
        binarySearch(target: T, compare?: (a: T, b: T) => number): number;
        /** Split the array into consecutive slices of at most `size` items. */
        chunk(size: number): T[][];
      }

      interface Object {
        /** Shallow copy holding only the listed keys. */
        pick<T extends object, K extends keyof T>(this: T, ...keys: K[]): Pick<T, K>;
      }
    }
    """
)

TYPES_DECLARATION_PATH = Path("src") / "types" / "global.d.ts"
PRISMA_DIR = "prisma"
SEQUELIZE_MODELS_DIR = Path("src") / "models"


class FeaturePostProcessor:
    """Writes the artefacts that depend on the language and ORM choices."""

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)

    async def apply(self, project_root: str | Path, answers: Answers) -> list[Path]:
        """Run every applicable step and return the paths it produced."""
        root = Path(project_root)
        produced: list[Path] = []

        if answers.is_typescript:
            produced.append(await self.write_type_declarations(root))

        if answers.orm is Orm.PRISMA:
            produced.append(await self.copy_prisma_schema(root))
        elif answers.orm is Orm.SEQUELIZE:
            produced.append(await self.ensure_models_dir(root))

        return produced

    async def write_type_declarations(self, root: Path) -> Path:
        # Typing aid only, independent of whether the helpers are installed.
        target = root / TYPES_DECLARATION_PATH
        await asyncio.to_thread(target.parent.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(target.write_text, PROTOTYPE_DECLARATIONS, "utf-8")
        return target

    async def copy_prisma_schema(self, root: Path) -> Path:
        target = root / PRISMA_DIR
        await asyncio.to_thread(
            shutil.copytree, self.template_dir / PRISMA_DIR, target, dirs_exist_ok=True
        )
        return target

    async def ensure_models_dir(self, root: Path) -> Path:
        target = root / SEQUELIZE_MODELS_DIR
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
        return target
