"""Load and validate build definition YAML files."""

from __future__ import annotations

from pathlib import Path

from buildrunner._yaml import load_yaml_model
from buildrunner.pipeline.schema import BuildDefinition


class BuildLoadError(Exception):
    """Raised when a build definition cannot be loaded or validated."""


def load_build(path: Path) -> BuildDefinition:
    """Read a YAML file and validate it as a BuildDefinition."""
    return load_yaml_model(path, BuildDefinition, BuildLoadError)


def resolve_build(
    config: Path | None,
    base_dir: Path,
) -> tuple[BuildDefinition, Path | None]:
    """Return the build definition for *base_dir* and the file it came from.

    An explicit *config* always wins. Otherwise the configured lookup in
    :mod:`buildrunner.config` is used, and built-in defaults apply when
    no file is found.
    """
    from buildrunner.config import find_config

    path = config if config is not None else find_config(base_dir)
    if path is None:
        return BuildDefinition(), None
    return load_build(path), path
