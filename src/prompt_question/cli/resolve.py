"""CLI command: prompt-question resolve -- show the answer a question resolves to."""

from __future__ import annotations

import json
import sys

import click

from prompt_question.config import QuestionConfig
from prompt_question.errors import QuestionError
from prompt_question.model import Question


@click.command()
@click.argument("name")
@click.argument("answer", required=False)
@click.option("--default", "default", default=None, help="Default answer")
@click.option(
    "--default-index", type=int, default=None, help="Choice position checked when none are"
)
@click.option("--choice", "-c", "choices", multiple=True, help="Add a choice (repeatable)")
@click.option("--check", "checks", multiple=True, help="Toggle a choice by name (repeatable)")
@click.option("--radio", is_flag=True, help="Allow a single checked choice only")
@click.option("--strict", is_flag=True, help="Treat empty answers and defaults as missing")
def resolve(
    name: str,
    answer: str | None,
    default: str | None,
    default_index: int | None,
    choices: tuple[str, ...],
    checks: tuple[str, ...],
    radio: bool,
    strict: bool,
) -> None:
    """Resolve the answer for NAME given an optional ANSWER.

    Checked choices take precedence, then ANSWER, then the default.
    """
    fields: dict[str, object] = {}
    if default_index is not None:
        fields["default"] = default_index
    elif default is not None:
        fields["default"] = default
    if radio:
        fields["radio"] = True

    try:
        question = Question.create(name, None, fields, config=QuestionConfig(strict_answers=strict))
        if choices:
            question.choices = list(choices)
        for key in checks:
            if question.get_choice(key) is None:
                raise click.BadParameter(f"unknown choice {key!r}", param_hint="--check")
            question.toggle_choice(key)
    except QuestionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = question.get_answer(answer)
    if isinstance(result, list):
        click.echo(json.dumps(result))
    else:
        click.echo(result)
