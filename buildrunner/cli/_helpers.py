"""Shared CLI helpers: consoles and build definition loading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from buildrunner.pipeline.schema import BuildDefinition

console = Console()
err_console = Console(stderr=True)


def load_build_or_exit(
    config: Path | None,
    project_dir: Path,
) -> tuple[BuildDefinition, Path | None]:
    from buildrunner.pipeline.loader import BuildLoadError, resolve_build

    try:
        return resolve_build(config, project_dir)
    except BuildLoadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None


def warn_missing_compiler(command: str) -> bool:
    """Print a warning if *command* is not on PATH. Returns True when it is found."""
    from buildrunner.pipeline.runner import resolve_executable

    if resolve_executable(command) is None:
        err_console.print(
            f"[yellow]Warning:[/yellow] compiler not found on PATH: '{command}'"
        )
        return False
    return True
