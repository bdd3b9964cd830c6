"""Pydantic v2 models for the express-start scaffolder.

Defines the wizard answers that drive generation and the package descriptor
that is serialised to ``package.json``.  ``Answers`` is frozen: once the
wizard finishes no generation step may change a choice, and the project
name can only be swapped wholesale through :meth:`Answers.with_project_name`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .destination import validate_project_name


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Source language of the generated server."""
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"


class Orm(str, Enum):
    """Database access layer wired into the generated server."""
    PRISMA = "Prisma"
    SEQUELIZE = "Sequelize"
    NONE = "None"


class Validator(str, Enum):
    """Request payload validation library."""
    JOI = "Joi"
    ZOD = "Zod"
    NONE = "None"


class Auth(str, Enum):
    """Authentication strategy."""
    JWT = "JWT"
    SESSION = "Session"
    NONE = "None"


# ---------------------------------------------------------------------------
# Wizard answers
# ---------------------------------------------------------------------------

class Answers(BaseModel):
    """The complete, validated set of scaffold choices."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name of the project")
    language: Language = Field(default=Language.JAVASCRIPT)
    orm: Orm = Field(default=Orm.NONE)
    validator: Validator = Field(default=Validator.NONE)
    auth: Auth = Field(default=Auth.NONE)
    logger: bool = Field(default=True, description="Include morgan request logging")
    parser: bool = Field(default=True, description="Include body-parser for JSON bodies")
    extend_prototypes: bool = Field(
        default=False, description="Install Array/Object prototype helpers at startup"
    )

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        value = value.strip()
        error = validate_project_name(value)
        if error:
            raise ValueError(error)
        return value

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def source_ext(self) -> str:
        """File extension of generated source files, without the dot."""
        return "ts" if self.is_typescript else "js"

    def with_project_name(self, name: str) -> "Answers":
        """Return a copy carrying *name*, re-running validation."""
        return Answers.model_validate({**self.model_dump(), "project_name": name})


# ---------------------------------------------------------------------------
# Package descriptor
# ---------------------------------------------------------------------------

class Scripts(BaseModel):
    """npm scripts emitted into the manifest."""
    start: str
    dev: str
    build: str


class PackageDescriptor(BaseModel):
    """Structured form of the generated ``package.json``."""

    name: str
    version: str = Field(default="1.0.0")
    type: Optional[str] = Field(
        default=None, description="Module type; only set for TypeScript projects"
    )
    main: str
    scripts: Scripts
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict)

    def to_manifest(self) -> dict[str, Any]:
        """Return the JSON object written to ``package.json``.

        Keys are emitted in npm's conventional order and ``type`` is left out
        entirely when it is not set.
        """
        manifest: dict[str, Any] = {"name": self.name, "version": self.version}
        if self.type is not None:
            manifest["type"] = self.type
        manifest["main"] = self.main
        manifest["scripts"] = self.scripts.model_dump()
        manifest["dependencies"] = dict(sorted(self.dependencies.items()))
        manifest["devDependencies"] = dict(sorted(self.dev_dependencies.items()))
        return manifest
