"""Main scaffolding orchestrator.

Takes the finalised wizard ``Answers`` and generates an Express project
directory: the rendered template tree, ``package.json``, and the
language/ORM specific extras.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from ..config import Config
from .destination import ensure_empty_destination
from .manifest import synthesize, write_manifest
from .models import Answers, PackageDescriptor
from .postprocess import FeaturePostProcessor
from .templates import TemplateRenderer


PROJECT_TREE = "project"


class ProjectGenerator:
    """Generates a project from a set of answers.

    Steps run one after another and are not rolled back: when a step fails
    the destination is left as far as it got.
    """

    def __init__(self, answers: Answers, config: Optional[Config] = None) -> None:
        self.answers = answers
        self.config = config or Config()
        self.renderer = TemplateRenderer(self.config.template_dir)
        self.post_processor = FeaturePostProcessor(self.config.template_dir)
        self.descriptor: Optional[PackageDescriptor] = None

    # -- Public API --------------------------------------------------------

    async def generate(self, cwd: str | Path | None = None) -> Path:
        """Generate the project under *cwd* (defaults to ``config.cwd``).

        Returns:
            Path to the generated project root.

        Raises:
            NonEmptyDirectoryError: If the destination already holds files.
            RenderError: If a template document fails to render.
            OSError: On any filesystem failure.
        """
        if cwd is not None:
            project_root = Path(cwd) / self.answers.project_name
        else:
            project_root = self.config.project_path(self.answers.project_name)

        # 1. Never write into a populated directory
        ensure_empty_destination(project_root)
        await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)

        # 2. Render the template tree
        await self.renderer.render_tree(PROJECT_TREE, project_root, self.answers)

        # 3. Synthesise and write package.json
        self.descriptor = synthesize(self.answers.project_name, self.answers)
        await write_manifest(project_root, self.descriptor)

        # 4. Type declarations, Prisma schema, Sequelize models directory
        await self.post_processor.apply(project_root, self.answers)

        return project_root
