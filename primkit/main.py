# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
from enum import StrEnum
from pathlib import Path

import typer
from loguru import logger

from primkit.config import Settings, load_settings
from primkit.core.exceptions import ConfigurationError, TemplateArgumentError
from primkit.logging import configure_logging
from primkit.sequences import int_range
from primkit.text.helpers import capitalize, reverse
from primkit.text.template import TemplateFormatter, arguments_from, placeholders
from primkit.text.trim import PatternTrimmer


app = typer.Typer(help="primkit string, sequence and object utilities.")


class TrimSide(StrEnum):
    """Which end(s) of the text to trim."""

    BOTH = "both"
    START = "start"
    END = "end"


def _safe_load_settings(config_path: Path | None) -> Settings:
    """Load settings, exiting with an error message on failure.

    Raises:
        typer.Exit: If the settings file is missing or invalid.
    """
    try:
        return load_settings(config_path)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Path to a primkit.yaml settings file.",
    ),
) -> None:
    """
    primkit: string, sequence and object utilities.
    """
    settings = _safe_load_settings(config_path)
    configure_logging(settings.log_level)
    ctx.obj = settings


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    """Split ``key=value`` strings into a mapping.

    Raises:
        typer.BadParameter: If a pair has no '='.
    """
    result: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--set")
        result[key] = value
    return result


@app.command(name="trim")
def trim_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to trim."),
    chars: str | None = typer.Option(
        None, "--chars", "-c", help="Characters to trim (default: configured whitespace set)."
    ),
    side: TrimSide = typer.Option(TrimSide.BOTH, "--side", help="Which end(s) to trim."),
) -> None:
    """Trim a set of characters from the ends of TEXT."""
    settings: Settings = ctx.obj
    trimmer = PatternTrimmer(settings.trim_chars)
    if side is TrimSide.START:
        result = trimmer.trim_start(text, chars)
    elif side is TrimSide.END:
        result = trimmer.trim_end(text, chars)
    else:
        result = trimmer.trim(text, chars)
    typer.echo(result)


@app.command(name="format")
def format_command(
    ctx: typer.Context,
    template: str = typer.Argument(..., help="Template with {0} or {name} placeholders."),
    values: list[str] | None = typer.Argument(None, help="Positional values."),
    named_values: list[str] | None = typer.Option(
        None, "--set", "-s", help="Named value as key=value (repeatable)."
    ),
    replace_all: bool = typer.Option(
        False, "--all", help="Replace every occurrence of each placeholder."
    ),
) -> None:
    """Substitute placeholders in TEMPLATE.

    Raises:
        typer.Exit: If positional and named values are mixed.
    """
    settings: Settings = ctx.obj
    try:
        arguments = arguments_from(*(values or []), **_parse_pairs(named_values or []))
    except TemplateArgumentError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None

    formatter = TemplateFormatter(replace_all=replace_all or settings.format_replace_all)
    typer.echo(formatter.format(template, arguments))


@app.command(name="placeholders")
def placeholders_command(
    template: str = typer.Argument(..., help="Template to inspect."),
) -> None:
    """List the placeholder names in TEMPLATE, one per line."""
    for name in placeholders(template):
        typer.echo(name)


@app.command(name="range")
def range_command(
    count: int = typer.Argument(..., help="Number of values."),
    step: int = typer.Option(1, "--step", help="Difference between values."),
    start: int = typer.Option(0, "--start", help="First value."),
) -> None:
    """Print COUNT integers separated by spaces."""
    logger.debug("Generating range", count=count, step=step, start=start)
    typer.echo(" ".join(str(n) for n in int_range(count, step, start)))


@app.command(name="reverse")
def reverse_command(text: str = typer.Argument(..., help="Text to reverse.")) -> None:
    """Reverse TEXT."""
    typer.echo(reverse(text))


@app.command(name="capitalize")
def capitalize_command(text: str = typer.Argument(..., help="Text to capitalize.")) -> None:
    """Upper-case the first character of TEXT."""
    typer.echo(capitalize(text))
