"""express-start scaffolder -- generates Express server projects.

Quick usage::

    from express_start.scaffolder import Answers, ProjectGenerator

    answers = Answers(project_name="my-api", language="TypeScript", orm="Prisma")
    project_path = await ProjectGenerator(answers).generate("/tmp/output")
"""

from express_start.scaffolder.destination import (
    Action,
    DestinationResolver,
    Disposition,
    ResolveResult,
    validate_project_name,
)
from express_start.scaffolder.errors import (
    GenerationError,
    NonEmptyDirectoryError,
    RenderError,
)
from express_start.scaffolder.generator import ProjectGenerator
from express_start.scaffolder.manifest import synthesize
from express_start.scaffolder.models import (
    Answers,
    Auth,
    Language,
    Orm,
    PackageDescriptor,
    Validator,
)
from express_start.scaffolder.templates import TemplateRenderer

__all__ = [
    "Action",
    "Answers",
    "Auth",
    "DestinationResolver",
    "Disposition",
    "GenerationError",
    "Language",
    "NonEmptyDirectoryError",
    "Orm",
    "PackageDescriptor",
    "ProjectGenerator",
    "RenderError",
    "ResolveResult",
    "TemplateRenderer",
    "Validator",
    "synthesize",
    "validate_project_name",
]
