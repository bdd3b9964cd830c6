"""Interactive wizard built on ``rich.prompt``.

Collects the project name and every scaffold choice, and implements the
disposition chooser used by the destination resolver.  Values supplied on
the command line are never asked again.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .scaffolder.destination import Disposition, validate_project_name
from .scaffolder.models import Auth, Language, Orm, Validator
from .utils import console, print_warning


# field -> (question, choices, default)
CHOICE_QUESTIONS: dict[str, tuple[str, list[str], str]] = {
    "language": (
        "Choose your language",
        [m.value for m in Language],
        Language.JAVASCRIPT.value,
    ),
    "orm": ("Choose an ORM (or none)", [m.value for m in Orm], Orm.NONE.value),
    "auth": ("Choose an auth strategy", [m.value for m in Auth], Auth.NONE.value),
    "validator": (
        "Choose a request validator",
        [m.value for m in Validator],
        Validator.NONE.value,
    ),
}

# field -> (question, default)
CONFIRM_QUESTIONS: dict[str, tuple[str, bool]] = {
    "logger": ("Include morgan for logging?", True),
    "parser": ("Include body-parser for JSON?", True),
    "extend_prototypes": ("Add Array/Object prototype utilities?", False),
}


def default_answers() -> dict[str, Any]:
    """Defaults applied when prompting is disabled."""
    values: dict[str, Any] = {name: q[2] for name, q in CHOICE_QUESTIONS.items()}
    values.update({name: q[1] for name, q in CONFIRM_QUESTIONS.items()})
    return values


def ask_project_name(default: str) -> str:
    """Prompt until a usable project name is entered."""
    while True:
        name = Prompt.ask("Enter your project name", default=default, console=console).strip()
        error = validate_project_name(name)
        if error is None:
            return name
        print_warning(error)


def run_wizard(preset: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Ask every question not already answered in *preset*.

    Returns a mapping suitable for building ``Answers`` (without
    ``project_name``).
    """
    values = dict(preset or {})
    for name, (question, choices, default) in CHOICE_QUESTIONS.items():
        if values.get(name) is None:
            values[name] = Prompt.ask(question, choices=choices, default=default, console=console)
    for name, (question, default) in CONFIRM_QUESTIONS.items():
        if values.get(name) is None:
            values[name] = Confirm.ask(question, default=default, console=console)
    return values


class RichDispositionChooser:
    """Asks the user what to do when the destination directory exists."""

    def choose(self, path: Path) -> Disposition:
        console.print(f'[yellow]Directory "{escape(str(path))}" already exists.[/yellow]')
        choice = Prompt.ask(
            "What would you like to do?",
            choices=[d.value for d in Disposition],
            default=Disposition.CANCEL.value,
            console=console,
        )
        return Disposition(choice)

    def ask_new_name(self, error: Optional[str]) -> str:
        if error:
            print_warning(error)
        return Prompt.ask("Enter a new project name", console=console)
