"""CLI command: prompt-question inspect -- display a normalized question."""

from __future__ import annotations

import json
import sys

import click

from prompt_question.errors import QuestionError
from prompt_question.model import Question


@click.command()
@click.argument("name")
@click.option("--message", "-m", default=None, help="Prompt text (defaults to NAME)")
@click.option("--type", "qtype", default=None, help="Question type (default: input)")
@click.option("--default", "default", default=None, help="Default answer")
@click.option("--choice", "-c", "choices", multiple=True, help="Add a choice (repeatable)")
@click.option("--radio", is_flag=True, help="Allow a single checked choice only")
@click.option("--json", "as_json", is_flag=True, help="Print the question as JSON")
def inspect(
    name: str,
    message: str | None,
    qtype: str | None,
    default: str | None,
    choices: tuple[str, ...],
    radio: bool,
    as_json: bool,
) -> None:
    """Build a question from NAME and options and display its fields."""
    fields: dict[str, object] = {}
    if qtype:
        fields["type"] = qtype
    if default is not None:
        fields["default"] = default
    if radio:
        fields["radio"] = True

    try:
        question = Question.create(name, message, fields)
        if choices:
            question.choices = list(choices)
    except QuestionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(question.to_dict(), indent=2, default=str))
        return

    click.echo(f"Name:    {question.name}")
    click.echo(f"Type:    {question.type}")
    click.echo(f"Message: {question.message}")
    if question.has_default:
        click.echo(f"Default: {question.default}")
    if question.options:
        click.echo(f"Options: {json.dumps(question.options, default=str)}")

    if question.has_choices:
        click.echo()
        click.echo("Choices:")
        for item in question.choices.items:
            if item.type == "separator":
                click.echo(f"  {item}")
                continue
            mark = "x" if item.checked else " "
            parts = [f"  [{mark}] {item.name}"]
            if item.value != item.name:
                parts.append(f"value={item.value}")
            if item.disabled:
                parts.append("disabled")
            click.echo("  ".join(parts))
