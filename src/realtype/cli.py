"""
Command-line interface for realtype.

Usage:
    realtype                       # run the built-in self-check suite
    realtype check --strict        # same, exit code 1 on any failure
    realtype classify 1 null NaN '"abc"' '[1, 2]'
    realtype count --file values.json
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import replace
from functools import wraps
from typing import Any, TypeVar

import click

from realtype import __version__
from realtype.application import CheckRunner, count_real_types, run_builtin_suite
from realtype.config import RunConfig, collect_values
from realtype.console import (
    make_consoles,
    print_counts_table,
    print_error,
    print_types_table,
)
from realtype.domain.exceptions import ConfigurationError
from realtype.infrastructure import RichConsoleReporter
from realtype.logging_setup import setup_logging

logger = logging.getLogger(__name__)

EXIT_FAILED_CHECKS = 1
EXIT_BAD_INPUT = 2


F = TypeVar("F", bound=Callable[..., Any])


def values_options(func: F) -> F:
    """
    Decorator adding value input to a click command.

    Options added:
        VALUES: JSON literals given as arguments
        --file: JSON file holding an array of values
    """

    @click.argument("values", nargs=-1)
    @click.option(
        "--file",
        "file",
        default=None,
        type=click.Path(),
        help="JSON file holding an array of values",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _run_checks(config: RunConfig) -> None:
    console, _ = make_consoles(config.color)
    runner = CheckRunner(RichConsoleReporter(console))
    summary = run_builtin_suite(runner)
    if config.strict and not summary.ok:
        logger.warning("%d of %d checks failed", summary.failed, summary.total)
        sys.exit(EXIT_FAILED_CHECKS)


def _load_or_exit(
    config: RunConfig, values: tuple[str, ...], file: str | None
) -> list[Any]:
    try:
        return collect_values(values, file)
    except ConfigurationError as e:
        logger.error(f"Input error: {e}")
        _, error_console = make_consoles(config.color)
        print_error(error_console, str(e), e.hint or None)
        sys.exit(EXIT_BAD_INPUT)


@click.group(invoke_without_command=True)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging to console",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(),
    help="Path to log file",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.version_option(__version__, prog_name="realtype")
@click.pass_context
def main(
    ctx: click.Context, verbose: bool, log_file: str | None, no_color: bool
) -> None:
    """Classify values by their real type.

    Without a command, runs the built-in self-check suite.
    """
    config = RunConfig(verbose=verbose, log_file=log_file, color=not no_color)
    ctx.obj = config
    setup_logging("realtype", log_file, verbose)
    logger.debug(f"realtype {__version__}: {config}")

    if ctx.invoked_subcommand is None:
        _run_checks(config)


@main.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with code 1 when any check fails",
)
@click.pass_obj
def check(config: RunConfig, strict: bool) -> None:
    """Run the built-in self-check suite."""
    _run_checks(replace(config, strict=strict))


@main.command()
@values_options
@click.pass_obj
def classify(config: RunConfig, values: tuple[str, ...], file: str | None) -> None:
    """Show the type and real type of each VALUE.

    Values are JSON literals (null, NaN, Infinity, [1, 2], {"a": 1});
    "undefined" is the absent value and any other text is a string.
    """
    items = _load_or_exit(config, values, file)
    logger.debug(f"Classifying {len(items)} value(s)")
    console, _ = make_consoles(config.color)
    print_types_table(console, items)


@main.command()
@values_options
@click.pass_obj
def count(config: RunConfig, values: tuple[str, ...], file: str | None) -> None:
    """Count VALUES per real type, sorted by type."""
    items = _load_or_exit(config, values, file)
    logger.debug(f"Counting {len(items)} value(s)")
    console, _ = make_consoles(config.color)
    print_counts_table(console, count_real_types(items))
