"""Typer CLI for buildrunner: wiring hub for command modules."""

from __future__ import annotations

from typing import Annotated

import typer

from buildrunner.cli._helpers import console

app = typer.Typer(
    name="buildrunner",
    help="Build a WebAssembly web package and stage its assets.",
    no_args_is_help=False,
)


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    if value:
        from buildrunner import __version__

        console.print(f"buildrunner {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """buildrunner: compile, stage assets, print serving instructions."""
    from buildrunner._log import setup_logging

    setup_logging(verbose=verbose)

    if ctx.invoked_subcommand is not None:
        return

    # No subcommand: run the default build
    from buildrunner.cli.build_cmd import build

    ctx.invoke(build)


# ---------------------------------------------------------------------------
# Command registrations: plain functions from *_cmd modules
# ---------------------------------------------------------------------------

from buildrunner.cli.build_cmd import build  # noqa: E402
from buildrunner.cli.project_cmd import init, validate  # noqa: E402

app.command()(build)
app.command()(validate)
app.command()(init)
