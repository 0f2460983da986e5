"""Project commands: validate, init."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from buildrunner.cli._helpers import console, err_console, warn_missing_compiler


def validate(
    config_file: Annotated[
        Path | None,
        typer.Argument(help="Path to buildrunner.yaml (default: lookup in the current directory)"),
    ] = None,
) -> None:
    """Validate a build definition file."""
    from buildrunner.config import get_config_path
    from buildrunner.pipeline.loader import BuildLoadError, load_build

    path = config_file or get_config_path()
    try:
        definition = load_build(path)
    except BuildLoadError as e:
        err_console.print(f"[red]Invalid:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    spec = definition.spec
    table = Table(title=f"Build: {definition.metadata.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("API Version", definition.apiVersion)
    table.add_row("Kind", definition.kind)
    table.add_row("Name", definition.metadata.name)
    table.add_row("Description", definition.metadata.description or "(none)")
    table.add_row("Compiler", spec.compiler.command)
    table.add_row("Target", spec.compiler.target)
    table.add_row("Output Dir", spec.compiler.out_dir)
    table.add_row("Profile", spec.compiler.profile or "(default)")
    if spec.compiler.extra_args:
        table.add_row("Extra Args", " ".join(spec.compiler.extra_args))
    table.add_row("Assets", spec.assets.source if spec.assets.enabled else "(disabled)")
    table.add_row("Serve URL", spec.serve.url)

    console.print(table)
    warn_missing_compiler(spec.compiler.command)
    console.print(f"\n[green]Valid[/green] build definition: {path}")


def init(
    name: Annotated[str, typer.Option(help="Build name")] = "wasm-build",
    output: Annotated[Path, typer.Option(help="Output file path")] = Path("buildrunner.yaml"),
    target: Annotated[str, typer.Option(help="wasm-pack target")] = "web",
    out_dir: Annotated[str, typer.Option("--out-dir", help="Output directory")] = "pkg",
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing file")] = False,
) -> None:
    """Scaffold a template buildrunner.yaml."""
    from buildrunner.templates import template_build

    if output.exists() and not force:
        err_console.print(f"[red]Error:[/red] Refusing to overwrite existing {output}")
        raise typer.Exit(1)

    output.write_text(template_build(name, target=target, out_dir=out_dir))
    console.print(f"[green]Created[/green] {output}")
    console.print("\n[dim]Next steps:[/dim]")
    console.print(f"  1. Review {output}")
    console.print(f"  2. Run: buildrunner validate {output}")
    console.print("  3. Run: buildrunner build")
