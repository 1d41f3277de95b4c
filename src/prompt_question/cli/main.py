"""prompt-question CLI entry point: Click group with subcommands."""

import logging

import click

from prompt_question import __version__


@click.group()
@click.version_option(version=__version__, prog_name="prompt-question")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """prompt-question - build and inspect normalized prompt questions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from prompt_question.cli.inspect import inspect  # noqa: E402
from prompt_question.cli.resolve import resolve  # noqa: E402

cli.add_command(inspect)
cli.add_command(resolve)
