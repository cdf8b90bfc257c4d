"""Command-line interface for bounded.

Provides range checking of values, greeting page rendering, and
configuration inspection.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import yaml
from rich.markup import escape
from rich.table import Table

from bounded import __version__
from bounded.cli.utils import console, print_error, print_success
from bounded.config import BoundedConfig, configure_logging, load_config
from bounded.errors import BoundedError, ConfigurationError
from bounded.greeting import ScopedConfigStore, build_greeting_page
from bounded.validators import RangeValidator, ValidationResult

_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)


def _load(ctx: click.Context, config_path: Path | None) -> BoundedConfig:
    config = load_config(config_path)
    level = ctx.obj.get("log_level") if ctx.obj else None
    logging_config = config.logging
    if level is not None:
        logging_config = logging_config.model_copy(update={"level": level})
    configure_logging(logging_config)
    return config


def _build_validator(
    config: BoundedConfig,
    min_: str | None,
    max_: str | None,
    inclusive: bool | None,
) -> RangeValidator:
    base = config.range
    low = min_ if min_ is not None else (base.min if base else None)
    high = max_ if max_ is not None else (base.max if base else None)
    if inclusive is None:
        inclusive = base.inclusive if base else True
    messages = base.messages if base else None
    return RangeValidator(low, high, inclusive, messages=messages)


@click.group()
@click.version_option(__version__, prog_name="bounded")
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    r"""Bounded-range validation.

    \b
    Examples:
        $ bounded check 5 12 --min 1 --max 10
        $ bounded check apple --min a --max m --exclusive
        $ bounded greet --config bounded.yaml
        $ bounded config show --config bounded.yaml
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--min", "min_", help="Lower bound (overrides the config file)")
@click.option("--max", "max_", help="Upper bound (overrides the config file)")
@click.option(
    "--inclusive/--exclusive",
    default=None,
    help="Whether the bounds are valid values (default: inclusive)",
)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per value")
@_CONFIG_OPTION
@click.pass_context
def check(
    ctx: click.Context,
    values: tuple[str, ...],
    min_: str | None,
    max_: str | None,
    inclusive: bool | None,
    as_json: bool,
    config_path: Path | None,
) -> None:
    r"""Check whether values lie within a range.

    Exits with status 1 when any value is out of range.

    Parameters
    ----------
    ctx : click.Context
        Click context object.
    values : tuple[str, ...]
        Values to check.
    min_ : str | None
        Lower bound.
    max_ : str | None
        Upper bound.
    inclusive : bool | None
        Inclusive flag, or None to use the configured value.
    as_json : bool
        Emit JSON lines instead of a table.
    config_path : Path | None
        Optional configuration file.

    Examples
    --------
    $ bounded check 1 10 11 --min 1 --max 10

    $ bounded check b --min a --max c --exclusive --json
    """
    try:
        config = _load(ctx, config_path)
        validator = _build_validator(config, min_, max_, inclusive)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e}")
        ctx.exit(1)

    results = [validator.validate(value) for value in values]

    if as_json:
        for result in results:
            click.echo(json.dumps(result.model_dump(mode="json")))
    else:
        console.print(_results_table(validator, results))

    failed = sum(1 for result in results if not result.valid)
    if failed:
        ctx.exit(1)
    if not as_json:
        print_success(f"All {len(results)} value(s) are within the range")


def _results_table(validator: RangeValidator, results: list[ValidationResult]) -> Table:
    bounds = "[{}, {}]" if validator.inclusive else "({}, {})"
    table = Table(
        title=f"Range {escape(bounds.format(validator.min, validator.max))}"
    )
    table.add_column("Value", style="cyan", no_wrap=True)
    table.add_column("Result", no_wrap=True)
    table.add_column("Code", style="yellow", no_wrap=True)
    table.add_column("Message")

    for result in results:
        table.add_row(
            escape(str(result.value)),
            "[green]valid[/green]" if result.valid else "[red]invalid[/red]",
            result.code.value if result.code else "",
            escape(result.message or ""),
        )
    return table


@cli.command()
@click.option("--scope", help="Configuration scope to read the message from")
@_CONFIG_OPTION
@click.pass_context
def greet(ctx: click.Context, scope: str | None, config_path: Path | None) -> None:
    """Render the greeting page from the configured message."""
    try:
        config = _load(ctx, config_path)
        greeting = config.greeting
        if scope is not None:
            greeting = greeting.model_copy(update={"scope": scope})
        page = build_greeting_page(ScopedConfigStore(greeting.values), config=greeting)
    except BoundedError as e:
        print_error(str(e))
        ctx.exit(1)

    console.print(f"[bold]{escape(page.title)}[/bold]")
    console.print(escape(page.regions[greeting.block]))


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("show")
@_CONFIG_OPTION
@click.pass_context
def show(ctx: click.Context, config_path: Path | None) -> None:
    """Print the effective configuration as YAML."""
    try:
        effective = _load(ctx, config_path)
    except ConfigurationError as e:
        print_error(f"Configuration error: {e}")
        ctx.exit(1)

    data = effective.model_dump(mode="json")
    click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
