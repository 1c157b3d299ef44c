"""Top-level Click group for the lineprompt demo CLI."""

import logging
import sys

import click

from lineprompt.errors import PromptError
from lineprompt.options import FormattingPolicy, InputOptions, SelectOptions
from lineprompt.prompt import new_prompt_with_options

MEANING_OF_LIFE = "42"
MODES = ["Ludicrous mode", "Normal mode"]


def validate_meaning_of_life(text):
    if text != MEANING_OF_LIFE:
        return f"the answer must be {MEANING_OF_LIFE}"
    return None


@click.group()
@click.option("--question-marks/--no-question-marks", default=True,
              help="Append a question mark to every prompt")
@click.option("--show-default/--no-show-default", default=True,
              help="Show the default answer in brackets")
@click.option("--space/--no-space", default=True, help="Append a space after every prompt")
@click.option("--verbose", is_flag=True, help="Log prompt resolution to stderr")
@click.pass_context
def main(ctx, question_marks, show_default, space, verbose):
    """lineprompt - ask questions on the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    ctx.obj = FormattingPolicy(
        append_question_mark=question_marks,
        append_space=space,
        show_default_in_prompt=show_default,
    )


@main.command("example")
@click.pass_obj
def example_cmd(policy):
    """Ask, confirm and select once each, printing the answers."""
    p = new_prompt_with_options(policy)

    try:
        answer = p.ask(
            "what is the meaning of life",
            InputOptions(default=MEANING_OF_LIFE, validator=validate_meaning_of_life),
        )
        click.echo(f"answered: {answer}")
    except PromptError as exc:
        click.echo(str(exc), err=True)

    try:
        confirmed = p.confirm("Do you confirm these changes", InputOptions(default="yes"))
        click.echo(f"confirmed: {confirmed}")
    except PromptError as exc:
        click.echo(str(exc), err=True)

    try:
        selected, index = p.select("Select an option", MODES, SelectOptions(default=1))
        click.echo(f"selected option: {selected}")
        click.echo(f"selected index: {index}")
    except PromptError as exc:
        click.echo(str(exc), err=True)


@main.command("confirm")
@click.argument("database")
@click.pass_obj
def confirm_cmd(policy, database):
    """Ask before permanently removing DATABASE."""
    p = new_prompt_with_options(policy)
    try:
        remove = p.confirm(
            f"Are you sure you want to permanently remove the database {database!r}",
            InputOptions(default="no", append_question_mark=True),
        )
    except PromptError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)

    click.echo(str(remove))
