"""express-start configuration.

Typed settings for a scaffolding run.  Uses a Pydantic v2 model so values
coming from the environment are validated at construction time.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for one ``create-express-start`` invocation.

    Instances are created once by the CLI entry point and passed to the
    resolver and generator.
    """

    template_dir: Path = Field(
        default=_DEFAULT_TEMPLATE_DIR,
        description="Root holding the project/, prisma/ and _partials/ trees",
    )
    cwd: Path = Field(
        default_factory=Path.cwd,
        description="Directory in which the project folder is created",
    )
    default_project_name: str = Field(default="express-start-app")
    assume_defaults: bool = Field(
        default=False, description="Use defaults instead of prompting"
    )

    def project_path(self, name: str) -> Path:
        """Destination directory for project *name*."""
        return self.cwd / name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_START_TEMPLATE_DIR, EXPRESS_START_CWD,
            EXPRESS_START_DEFAULT_NAME, EXPRESS_START_YES.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("EXPRESS_START_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["EXPRESS_START_TEMPLATE_DIR"])
        if os.environ.get("EXPRESS_START_CWD"):
            kwargs["cwd"] = Path(os.environ["EXPRESS_START_CWD"])
        if os.environ.get("EXPRESS_START_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["EXPRESS_START_DEFAULT_NAME"]
        if os.environ.get("EXPRESS_START_YES"):
            kwargs["assume_defaults"] = os.environ["EXPRESS_START_YES"].strip().lower() in _TRUTHY
        return cls(**kwargs)
