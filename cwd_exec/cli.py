from __future__ import annotations

import json
import logging
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .errors import ExecutionError, InvalidWorkingDirectory
from .shell_runner import CommandOutcome, execute, validate
from .workdir import resolve_working_directory

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _exit_status(outcome: CommandOutcome) -> int:
    # subprocess reports death by signal N as -N
    if outcome.exit_code < 0:
        return 128 - outcome.exit_code
    return outcome.exit_code


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="CWD_EXEC_LOG_LEVEL",
    show_default=True,
    help="Logging level",
)
def cli(log_level: str) -> None:
    """Run commands inside a validated working directory."""
    _configure_logging(log_level.upper())


@cli.command("run")
@click.argument("command")
@click.option("--cwd", type=click.Path(), default=None, envvar="CWD_EXEC_CWD", help="Working directory (defaults to the current one)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.pass_context
def run_cmd(ctx: click.Context, command: str, cwd: Optional[str], output_format: str) -> None:
    """Execute COMMAND through the system shell and exit with its status."""
    try:
        outcome = execute(command, resolve_working_directory(cwd))
    except ExecutionError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps(outcome.to_dict(), indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(outcome.to_dict(), sort_keys=False), nl=False)
    else:
        click.echo(outcome.stdout, nl=False)
        click.echo(outcome.stderr, nl=False, err=True)
    ctx.exit(_exit_status(outcome))


@cli.command("check")
@click.argument("command")
@click.option("--cwd", type=click.Path(), default=None, envvar="CWD_EXEC_CWD", help="Working directory (defaults to the current one)")
@click.pass_context
def check_cmd(ctx: click.Context, command: str, cwd: Optional[str]) -> None:
    """Validate COMMAND and the working directory without running anything."""
    workdir = resolve_working_directory(cwd)
    table = Table(title="Preflight")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail")
    try:
        executable = validate(command, workdir)
    except ExecutionError as exc:
        gate = "cwd" if isinstance(exc, InvalidWorkingDirectory) else "executable"
        table.add_row(gate, "[red]FAILED[/red]", str(exc))
        console.print(table)
        ctx.exit(1)
    table.add_row("executable", "[green]OK[/green]", executable)
    table.add_row("cwd", "[green]OK[/green]", str(workdir))
    console.print(table)


@cli.command("pwd")
@click.argument("directory", required=False)
def pwd_cmd(directory: Optional[str]) -> None:
    """Print DIRECTORY, or the current working directory when omitted."""
    click.echo(str(resolve_working_directory(directory)))


def main() -> int:
    try:
        rv = cli(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as e:
        if isinstance(e.code, str):
            click.echo(e.code, err=True)
            return 1
        return int(e.code or 0)
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
