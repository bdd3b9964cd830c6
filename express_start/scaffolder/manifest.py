"""``package.json`` synthesis.

The manifest is a pure function of the project name and the wizard answers.
Each feature contributes an isolated :class:`ManifestFragment`; the fragments
are merged in :func:`synthesize` without looking at one another, so toggling
one choice never changes what another choice contributes.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .models import Answers, Auth, Orm, PackageDescriptor, Scripts, Validator


# ---------------------------------------------------------------------------
# Version ranges
# ---------------------------------------------------------------------------

PACKAGE_VERSIONS: dict[str, str] = {
    # runtime
    "express": "^4.21.2",
    "dotenv": "^16.4.7",
    "cors": "^2.8.5",
    "helmet": "^8.0.0",
    "bcrypt": "^5.1.1",
    "cookie-parser": "^1.4.7",
    "jsonwebtoken": "^9.0.2",
    "express-session": "^1.18.1",
    "@prisma/client": "^6.2.1",
    "sequelize": "^6.37.5",
    "pg": "^8.13.1",
    "morgan": "^1.10.0",
    "body-parser": "^1.20.3",
    "joi": "^17.13.3",
    "zod": "^3.24.1",
    # tooling
    "nodemon": "^3.1.9",
    "typescript": "^5.7.3",
    "ts-node": "^10.9.2",
    "prisma": "^6.2.1",
    # type declarations
    "@types/node": "^22.10.7",
    "@types/express": "^4.17.21",
    "@types/cors": "^2.8.17",
    "@types/jsonwebtoken": "^9.0.7",
    "@types/morgan": "^1.9.9",
    "@types/cookie-parser": "^1.4.8",
    "@types/bcrypt": "^5.0.2",
    "@types/body-parser": "^1.19.5",
    "@types/express-session": "^1.18.1",
    "@types/pg": "^8.11.10",
}

BASE_DEPENDENCIES = ("express", "dotenv", "cors", "helmet")

# Runtime packages that ship their typings separately on DefinitelyTyped.
TYPED_SEPARATELY = frozenset(
    {
        "express",
        "cors",
        "jsonwebtoken",
        "morgan",
        "cookie-parser",
        "bcrypt",
        "body-parser",
        "express-session",
        "pg",
    }
)


def _pin(*names: str) -> dict[str, str]:
    return {name: PACKAGE_VERSIONS[name] for name in names}


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------


@dataclass
class ManifestFragment:
    """Partial dependency contribution of a single feature."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)


def base_fragment(answers: Answers) -> ManifestFragment:
    return ManifestFragment(_pin(*BASE_DEPENDENCIES), _pin("nodemon"))


def auth_fragment(answers: Answers) -> ManifestFragment:
    if answers.auth is Auth.NONE:
        return ManifestFragment()
    deps = _pin("bcrypt", "cookie-parser")
    if answers.auth is Auth.JWT:
        deps.update(_pin("jsonwebtoken"))
    elif answers.auth is Auth.SESSION:
        deps.update(_pin("express-session"))
    return ManifestFragment(deps)


def orm_fragment(answers: Answers) -> ManifestFragment:
    if answers.orm is Orm.PRISMA:
        return ManifestFragment(_pin("@prisma/client"))
    if answers.orm is Orm.SEQUELIZE:
        return ManifestFragment(_pin("sequelize", "pg"))
    return ManifestFragment()


def logger_fragment(answers: Answers) -> ManifestFragment:
    return ManifestFragment(_pin("morgan") if answers.logger else {})


def parser_fragment(answers: Answers) -> ManifestFragment:
    return ManifestFragment(_pin("body-parser") if answers.parser else {})


def validator_fragment(answers: Answers) -> ManifestFragment:
    if answers.validator is Validator.JOI:
        return ManifestFragment(_pin("joi"))
    if answers.validator is Validator.ZOD:
        return ManifestFragment(_pin("zod"))
    return ManifestFragment()


def prisma_cli_fragment(answers: Answers) -> ManifestFragment:
    """The Prisma CLI for TypeScript projects whose ORM is not Prisma.

    The condition is literal: it also applies when no ORM was chosen.
    """
    if answers.is_typescript and answers.orm is not Orm.PRISMA:
        return ManifestFragment(dev_dependencies=_pin("prisma"))
    return ManifestFragment()


RUNTIME_FRAGMENTS: tuple[Callable[[Answers], ManifestFragment], ...] = (
    base_fragment,
    auth_fragment,
    orm_fragment,
    logger_fragment,
    parser_fragment,
    validator_fragment,
    prisma_cli_fragment,
)


def typescript_fragment(answers: Answers, dependencies: dict[str, str]) -> ManifestFragment:
    """Compiler toolchain plus ``@types/*`` for every selected runtime package."""
    if not answers.is_typescript:
        return ManifestFragment()
    dev = _pin("typescript", "ts-node", "@types/node")
    dev.update(_pin(*(f"@types/{name}" for name in dependencies if name in TYPED_SEPARATELY)))
    return ManifestFragment(dev_dependencies=dev)


# ---------------------------------------------------------------------------
# Language switch
# ---------------------------------------------------------------------------


def _entry_point(answers: Answers) -> tuple[str, Scripts, str | None]:
    if answers.is_typescript:
        return (
            "dist/index.js",
            Scripts(
                start="node dist/index.js",
                dev='nodemon --watch src --ext ts --exec "node --loader ts-node/esm src/index.ts"',
                build="tsc",
            ),
            "module",
        )
    return (
        "src/index.js",
        Scripts(
            start="node src/index.js",
            dev="nodemon src/index.js",
            build='echo "No build step for JavaScript"',
        ),
        None,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def synthesize(project_name: str, answers: Answers) -> PackageDescriptor:
    """Derive the package descriptor for *answers*."""
    dependencies: dict[str, str] = {}
    dev_dependencies: dict[str, str] = {}
    for contribute in RUNTIME_FRAGMENTS:
        fragment = contribute(answers)
        dependencies.update(fragment.dependencies)
        dev_dependencies.update(fragment.dev_dependencies)

    dev_dependencies.update(typescript_fragment(answers, dependencies).dev_dependencies)

    main, scripts, module_type = _entry_point(answers)
    return PackageDescriptor(
        name=project_name,
        type=module_type,
        main=main,
        scripts=scripts,
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
    )


def manifest_json(descriptor: PackageDescriptor) -> str:
    """Serialise *descriptor* the way npm formats ``package.json``."""
    return json.dumps(descriptor.to_manifest(), indent=2, ensure_ascii=False) + "\n"


async def write_manifest(project_root: str | Path, descriptor: PackageDescriptor) -> Path:
    """Write ``package.json`` into *project_root* and return its path."""
    target = Path(project_root) / "package.json"
    await asyncio.to_thread(target.write_text, manifest_json(descriptor), "utf-8")
    return target
