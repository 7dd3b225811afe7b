"""Command-line interface for heap-fixtures."""

import json
import logging
import sys
from pathlib import Path

import click

from .capture import capture as capture_snapshot
from .config import COMMAND_ENV_VAR, TOOL_ENV_VAR, CaptureConfig
from .exceptions import CaptureError, SnapshotMissingError, ValidationError
from .graph import describe as describe_graph
from .roots import RootRegistry
from .shapes import SHAPES, get_shape

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(package_name="heap-fixtures")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="HEAP_FIXTURES_LOG_LEVEL",
    show_default=True,
    help="Library log level (env: HEAP_FIXTURES_LOG_LEVEL)",
)
def cli(log_level: str) -> None:
    """heap-fixtures: object graph fixtures and heap snapshot capture."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("shapes")
def list_shapes() -> None:
    """List available fixture shapes."""
    width = max(len(name) for name in SHAPES)
    for shape in SHAPES.values():
        click.echo(f"{shape.name:<{width}}  root={shape.root_name:<3}  {shape.description}")


@cli.command()
@click.argument("shape", type=click.Choice(list(SHAPES)))
def describe(shape: str) -> None:
    """Build SHAPE and print its reachable object graph."""
    roots = RootRegistry()
    fixture = get_shape(shape)
    root = roots.populate(fixture)
    for line in describe_graph(root, fixture.root_name):
        click.echo(line)
    click.echo(f"{len(roots.reachable())} reachable objects")


@cli.command()
@click.argument("shape", type=click.Choice(list(SHAPES)))
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--tool",
    envvar=TOOL_ENV_VAR,
    default="jcmd",
    show_default=True,
    help=f"Diagnostic tool command, shell-split (env: {TOOL_ENV_VAR})",
)
@click.option(
    "--command",
    "diagnostic_command",
    envvar=COMMAND_ENV_VAR,
    default="GC.heap_dump",
    show_default=True,
    help=f"Diagnostic command passed after the pid (env: {COMMAND_ENV_VAR})",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the capture outcome as JSON",
)
def capture(shape: str, path: Path, tool: str, diagnostic_command: str, as_json: bool) -> None:
    """Build SHAPE in this process and snapshot the heap to PATH.

    Exits 0 when the snapshot file exists afterwards, 1 otherwise.
    """
    try:
        config = CaptureConfig.from_tool_string(tool, command=diagnostic_command)
    except ValidationError as e:
        raise click.BadParameter(e.reason, param_hint="--tool/--command") from e

    # held until the command returns so the graph is live during the snapshot
    roots = RootRegistry()
    roots.populate(get_shape(shape))

    try:
        outcome = capture_snapshot(path, roots, config)
    except CaptureError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(outcome.as_dict(), indent=2))
    else:
        if outcome.removed_stale:
            click.echo(f"dump file removed: {outcome.path}")
        click.echo(f"Exit code: {outcome.exit_code}")
        if outcome.generated:
            click.echo(f"dump file generated: {outcome.path}")

    try:
        outcome.raise_for_missing()
    except SnapshotMissingError as e:
        if not as_json:
            click.echo(f"dump file failed: PID={e.pid}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
