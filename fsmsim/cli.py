"""CLI entry point for fsmsim."""

from __future__ import annotations

import json
import sys
import uuid
from pathlib import Path
from typing import NoReturn, Optional

import click

from fsmsim import __version__
from fsmsim.config.settings import (
    ENV_CONFIG_PATH,
    LOG_FORMATS,
    OUTPUT_FORMATS,
    SimulatorConfig,
    load_config,
)
from fsmsim.errors import ParseError, RunError
from fsmsim.models.machine import Machine
from fsmsim.models.results import RunResult
from fsmsim.parser import parse_definition
from fsmsim.simulator import simulate
from fsmsim.utils.logging import configure_logging, get_logger, set_run_id
from fsmsim.utils.result import Err, ExitCode, InputError, Ok, Result


class Context:
    """CLI context for sharing state between commands."""

    def __init__(self, config: SimulatorConfig) -> None:
        self.config = config
        self.logger = get_logger("cli")


pass_context = click.make_pass_decorator(Context)


def output_json(data: dict) -> None:
    """Output JSON to stdout."""
    click.echo(json.dumps(data, indent=2, default=str))


def fail(ctx: Context, code: int, event: str, error: object) -> NoReturn:
    """Log a failure, report it on stderr and exit with ``code``."""
    ctx.logger.debug(event, error=str(error), error_type=type(error).__name__)
    click.echo(f"Error: {error}", err=True)
    sys.exit(code)


def read_definition(path: Path) -> Result[str, InputError]:
    """Read a definition file as UTF-8 text."""
    try:
        return Ok(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        return Err(InputError(path=str(path), message="file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(InputError(path=str(path), message="read failed", cause=e))


def load_machine(ctx: Context, path: Path) -> Machine:
    """Read and parse ``path``, exiting with the matching code on failure."""
    result = read_definition(path)
    if result.is_err():
        fail(ctx, ExitCode.DEFINITION_UNREADABLE, "definition_unreadable", result.unwrap_err())

    try:
        machine = parse_definition(result.unwrap())
    except ParseError as e:
        fail(ctx, ExitCode.PARSE_FAILED, "parse_failed", e)

    ctx.logger.info("definition_loaded", path=str(path), states=len(machine.states))
    return machine


def format_result(result: RunResult) -> list[str]:
    lines = [f"{result.verdict} (final state {result.final_state})"]
    if result.trace is not None:
        for step in result.trace:
            lines.append(
                f"  {step.position}: '{step.symbol}' {step.source} -> {step.destination}"
            )
    return lines


def format_summary(machine: Machine) -> list[str]:
    finals = [s for s in machine.states if s in machine.final_states]
    return [
        "valid definition",
        f"states: {' '.join(machine.states)}",
        f"final: {' '.join(finals)}",
        f"alphabet: {' '.join(machine.alphabet)}",
        f"start: {machine.start}",
        f"transitions: {len(machine.states) * len(machine.alphabet)}",
    ]


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=ENV_CONFIG_PATH,
    default=None,
    help=f"Path to YAML config file (or set {ENV_CONFIG_PATH})",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Logging level",
)
@click.option(
    "--log-format",
    type=click.Choice(list(LOG_FORMATS), case_sensitive=False),
    default=None,
    help="Log format",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    log_level: Optional[str],
    log_format: Optional[str],
) -> None:
    """
    Finite state machine simulator.

    Reads a textual FSM definition and reports whether the machine accepts
    an input string. Logs go to stderr; stdout carries only results.
    """
    result = load_config(config_path)
    if result.is_err():
        click.echo(f"Error: {result.unwrap_err()}", err=True)
        sys.exit(ExitCode.CONFIG_INVALID)

    config = result.unwrap().with_overrides(log_level=log_level, log_format=log_format)

    configure_logging(level=config.logging.level, format_type=config.logging.format)
    set_run_id(str(uuid.uuid4())[:8])

    ctx.obj = Context(config=config)


@cli.command()
@click.option(
    "-f",
    "--fsm-file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="FSM definition file",
)
@click.option(
    "-i",
    "--input-string",
    required=True,
    help="Input string to simulate",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format",
)
@click.option(
    "--trace/--no-trace",
    default=None,
    help="Print every transition taken",
)
@pass_context
def run(
    ctx: Context,
    fsm_file: Path,
    input_string: str,
    output_format: Optional[str],
    trace: Optional[bool],
) -> None:
    """Run an input string through a machine and print the verdict."""
    config = ctx.config.with_overrides(output_format=output_format, trace=trace)
    machine = load_machine(ctx, fsm_file)

    text = input_string.rstrip() if config.output.strip_input else input_string

    try:
        result = simulate(machine, text, trace=config.output.trace)
    except RunError as e:
        fail(ctx, ExitCode.RUN_FAILED, "run_failed", e)

    ctx.logger.info(
        "run_completed",
        final_state=result.final_state,
        accepted=result.accepted,
        steps=result.steps,
    )

    if config.output.format == "json":
        output_json(result.to_dict())
    else:
        for line in format_result(result):
            click.echo(line)


@cli.command()
@click.option(
    "-f",
    "--fsm-file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="FSM definition file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format",
)
@pass_context
def check(ctx: Context, fsm_file: Path, output_format: Optional[str]) -> None:
    """Validate a definition file without running it."""
    config = ctx.config.with_overrides(output_format=output_format)
    machine = load_machine(ctx, fsm_file)

    if config.output.format == "json":
        output_json({"status": "valid", **machine.to_dict()})
    else:
        for line in format_summary(machine):
            click.echo(line)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        logger = get_logger("cli")
        logger.error("cli_error", error=str(e))
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
