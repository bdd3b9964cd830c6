"""Command-line entry point for ``create-express-start``.

Usage::

    create-express-start my-api
    create-express-start my-api --language TypeScript --orm Prisma --auth JWT
    python -m express_start.cli my-api --yes
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Optional

from pydantic import ValidationError

from . import __version__
from .config import Config
from .prompts import RichDispositionChooser, ask_project_name, default_answers, run_wizard
from .scaffolder.destination import (
    Action,
    DestinationResolver,
    DispositionChooser,
    validate_project_name,
)
from .scaffolder.errors import GenerationError, NonEmptyDirectoryError
from .scaffolder.generator import ProjectGenerator
from .scaffolder.models import Answers, Auth, Language, Orm, Validator
from .utils import (
    print_banner,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-express-start",
        description="Scaffold an Express.js project with a wizard and utils",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-express-start my-api\n"
            "  create-express-start my-api --language TypeScript --orm Prisma\n"
            "  create-express-start my-api --yes\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", help="Name of the project")
    parser.add_argument("--language", choices=[m.value for m in Language])
    parser.add_argument("--orm", choices=[m.value for m in Orm])
    parser.add_argument("--auth", choices=[m.value for m in Auth])
    parser.add_argument("--validator", choices=[m.value for m in Validator])
    parser.add_argument(
        "--logger", action=argparse.BooleanOptionalAction, default=None,
        help="Include morgan request logging",
    )
    parser.add_argument(
        "--parser", action=argparse.BooleanOptionalAction, default=None,
        help="Include body-parser for JSON",
    )
    parser.add_argument(
        "--extend-prototypes", action=argparse.BooleanOptionalAction, default=None,
        help="Install Array/Object prototype helpers",
    )
    parser.add_argument(
        "--yes", "-y", action="store_true",
        help="Accept defaults for every question that was not given as a flag",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _preset(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "language": args.language,
        "orm": args.orm,
        "auth": args.auth,
        "validator": args.validator,
        "logger": args.logger,
        "parser": args.parser,
        "extend_prototypes": args.extend_prototypes,
    }


def next_steps(answers: Answers) -> list[str]:
    """Follow-up commands printed after a successful run."""
    commands = [f"cd {answers.project_name}", "npm install"]
    if answers.orm is Orm.PRISMA:
        commands.append("npx prisma generate")
    commands.append("npm run dev")
    return commands


async def scaffold(
    answers: Answers,
    config: Config,
    chooser: Optional[DispositionChooser],
) -> Optional[Answers]:
    """Resolve the destination and generate the project.

    Returns the answers that were used (the project name may have changed),
    or ``None`` when the user cancelled.  Without a *chooser* an existing
    destination is not negotiated and generation fails its pre-condition
    check instead.
    """
    if chooser is not None:
        result = await DestinationResolver(config.cwd, chooser).resolve(answers.project_name)
        if result.action is Action.CANCEL:
            return None
        if result.final_name != answers.project_name:
            answers = answers.with_project_name(result.final_name)

    await ProjectGenerator(answers, config).generate(config.cwd)
    return answers


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    if args.yes:
        config.assume_defaults = True

    name = args.project_name
    if name is None:
        name = config.default_project_name if config.assume_defaults else ask_project_name(
            config.default_project_name
        )
    name = name.strip()
    error = validate_project_name(name)
    if error:
        print_error(error)
        sys.exit(1)

    print_banner(name)

    preset = _preset(args)
    if config.assume_defaults:
        values = {**default_answers(), **{k: v for k, v in preset.items() if v is not None}}
    else:
        values = run_wizard(preset)

    try:
        answers = Answers(project_name=name, **values)
    except ValidationError as exc:
        print_error(str(exc))
        sys.exit(1)

    chooser = None if config.assume_defaults else RichDispositionChooser()
    try:
        used = asyncio.run(scaffold(answers, config, chooser))
    except NonEmptyDirectoryError as exc:
        print_error(f"{exc}. Choose another name or remove it first.")
        sys.exit(1)
    except (GenerationError, OSError) as exc:
        print_error(str(exc))
        sys.exit(1)

    if used is None:
        sys.exit(0)

    print_summary_table(
        {
            "Language": used.language.value,
            "ORM": used.orm.value,
            "Auth": used.auth.value,
            "Validator": used.validator.value,
            "Logger": "yes" if used.logger else "no",
            "Body parser": "yes" if used.parser else "no",
            "Prototype utilities": "yes" if used.extend_prototypes else "no",
        },
        title=used.project_name,
    )
    print_success(f'Project "{used.project_name}" created!')
    print_next_steps(next_steps(used))


if __name__ == "__main__":
    main()
