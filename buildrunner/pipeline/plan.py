"""Turn a build definition into the ordered list of steps to run."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import Any

from pydantic import ValidationError

from buildrunner.pipeline.loader import BuildLoadError
from buildrunner.pipeline.schema import (
    BuildDefinition,
    CommandStep,
    CopyStep,
    MessageStep,
    ServeConfig,
    Step,
)


def serving_hint(serve: ServeConfig) -> list[str]:
    return [
        "Build complete! You can now serve the files with a web server.",
        f"For example, run: {serve.command} {serve.port}",
        f"Then open {serve.url} in your browser",
    ]


def with_overrides(definition: BuildDefinition, **overrides: Any) -> BuildDefinition:
    """Return a copy of *definition* with CLI/env overrides applied.

    Recognised keys: ``command``, ``target``, ``out_dir``, ``profile``
    (compiler settings) and ``assets`` (assets source). ``None`` values
    are ignored. The result is re-validated.
    """
    data = definition.model_dump()
    compiler = data["spec"]["compiler"]
    for key in ("command", "target", "out_dir", "profile"):
        if overrides.get(key) is not None:
            compiler[key] = overrides[key]
    if overrides.get("assets") is not None:
        data["spec"]["assets"]["source"] = overrides["assets"]

    try:
        return BuildDefinition.model_validate(data)
    except ValidationError as e:
        raise BuildLoadError(f"Invalid override:\n{e}") from e


def build_plan(
    definition: BuildDefinition,
    base_dir: Path,
    *,
    skip_assets: bool = False,
) -> list[Step]:
    """Return compile, asset staging and summary steps for *definition*."""
    spec = definition.spec
    compiler = spec.compiler

    steps: list[Step] = [
        CommandStep(
            name="compile",
            description="Building WASM package...",
            command=compiler.command,
            args=(
                "build",
                "--target",
                compiler.target,
                "--out-dir",
                compiler.out_dir,
                *compiler.profile_flag(),
                *compiler.extra_args,
            ),
            cwd=base_dir,
        )
    ]

    if spec.assets.enabled and not skip_assets:
        source = base_dir / spec.assets.source
        steps.append(
            CopyStep(
                name="assets",
                description="Copying assets...",
                source=source,
                destination=base_dir / compiler.out_dir / PurePath(spec.assets.source).name,
            )
        )

    steps.append(MessageStep(name="summary", lines=tuple(serving_hint(spec.serve))))
    return steps
