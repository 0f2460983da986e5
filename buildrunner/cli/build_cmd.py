"""Build command: compile, stage assets, print serving hint."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.markup import escape
from rich.table import Table

from buildrunner.cli._helpers import (
    console,
    err_console,
    load_build_or_exit,
    warn_missing_compiler,
)

if TYPE_CHECKING:
    from buildrunner.pipeline.results import PipelineOutcome
    from buildrunner.pipeline.schema import BuildDefinition, Step

_INTERRUPTED_EXIT = 130


def build(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Build definition (default: ./buildrunner.yaml)"),
    ] = None,
    project_dir: Annotated[
        Path,
        typer.Option("--project-dir", "-C", help="Project root the build runs in"),
    ] = Path("."),
    target: Annotated[
        str | None,
        typer.Option(help="wasm-pack target: web, bundler, nodejs, no-modules, deno"),
    ] = None,
    out_dir: Annotated[str | None, typer.Option("--out-dir", help="Output directory")] = None,
    profile: Annotated[
        str | None, typer.Option(help="Build profile: release, dev, profiling")
    ] = None,
    assets: Annotated[
        str | None, typer.Option("--assets", help="Static assets directory to stage")
    ] = None,
    skip_assets: Annotated[
        bool, typer.Option("--skip-assets", help="Do not copy the assets directory")
    ] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Validate and display the step plan without running")
    ] = False,
) -> None:
    """Compile the package, stage its assets and print serving instructions."""
    from buildrunner.config import get_compiler_override
    from buildrunner.pipeline.loader import BuildLoadError
    from buildrunner.pipeline.plan import build_plan, with_overrides

    project_dir = project_dir.resolve()
    definition, source = load_build_or_exit(config, project_dir)

    try:
        definition = with_overrides(
            definition,
            command=get_compiler_override(),
            target=target,
            out_dir=out_dir,
            profile=profile,
            assets=assets,
        )
    except BuildLoadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    steps = build_plan(definition, project_dir, skip_assets=skip_assets)

    if dry_run:
        _display_plan(definition, steps, source)
        warn_missing_compiler(definition.spec.compiler.command)
        return

    from buildrunner.pipeline.executor import run_pipeline

    try:
        outcome = run_pipeline(steps, name=definition.metadata.name, console=console)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Build interrupted.[/yellow]")
        raise typer.Exit(_INTERRUPTED_EXIT) from None

    _display_outcome(outcome)

    if not outcome.success:
        raise typer.Exit(outcome.exit_code)


def _display_plan(definition: BuildDefinition, steps: list[Step], source: Path | None) -> None:
    from buildrunner.pipeline.schema import CommandStep, CopyStep, MessageStep

    table = Table(title=f"Build: {definition.metadata.name}")
    table.add_column("#", justify="right")
    table.add_column("Step", style="cyan")
    table.add_column("Kind")
    table.add_column("Action")

    for i, step in enumerate(steps, 1):
        if isinstance(step, CommandStep):
            action = " ".join(step.argv())
        elif isinstance(step, CopyStep):
            action = f"{step.source} -> {step.destination} (if present)"
        elif isinstance(step, MessageStep):
            action = f"print {len(step.lines)} line(s)"
        else:
            action = ""
        table.add_row(str(i), step.name, step.kind, action)

    console.print(table)
    console.print(f"\n[bold]Definition:[/bold] {source or '(built-in defaults)'}")
    console.print("[bold]Strategy:[/bold] fail-fast")
    console.print("\n[green]Build definition is valid.[/green]")


def _display_outcome(outcome: PipelineOutcome) -> None:
    table = Table(title=f"Build: {outcome.build_name} ({outcome.build_id})")
    table.add_column("Step", style="cyan")
    table.add_column("Status")
    table.add_column("Exit")
    table.add_column("Duration")

    for sr in outcome.step_results:
        if sr.skipped:
            status = f"[dim]SKIP[/dim] ({sr.skip_reason})"
        elif sr.success:
            status = "[green]PASS[/green]"
        else:
            status = "[red]FAIL[/red]"
        exit_code = "" if sr.exit_code is None else str(sr.exit_code)
        table.add_row(sr.name, status, exit_code, f"{sr.duration_ms}ms")

    console.print(table)
    total = f"[bold]Total: {outcome.duration_ms}ms[/bold]"
    if outcome.success:
        console.print(f"\n{total} [green]Build succeeded[/green]")
        return

    console.print(f"\n{total} [red]Build failed[/red]")
    failed = outcome.failed_step
    if failed is not None and failed.error:
        err_console.print(f"[red]Error:[/red] {escape(failed.error)}")
