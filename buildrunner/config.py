"""Centralized path and environment configuration for buildrunner.

The build definition is looked up from ``BUILDRUNNER_CONFIG`` first and
falls back to ``buildrunner.yaml`` in the project directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "buildrunner.yaml"
CONFIG_ENV = "BUILDRUNNER_CONFIG"
COMPILER_ENV = "BUILDRUNNER_COMPILER"


def get_config_path(base_dir: Path | None = None) -> Path:
    """Return the build definition path.

    Resolution order:
    1. ``BUILDRUNNER_CONFIG`` environment variable
    2. ``<base_dir>/buildrunner.yaml`` (``base_dir`` defaults to the cwd)
    """
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return (base_dir or Path.cwd()) / CONFIG_FILENAME


def find_config(base_dir: Path | None = None) -> Path | None:
    """Return the build definition path, or ``None`` when there is none to load.

    A path named by ``BUILDRUNNER_CONFIG`` is always returned so that a
    typo surfaces as a load error. The project-local file is returned
    only if it exists.
    """
    path = get_config_path(base_dir)
    if os.environ.get(CONFIG_ENV):
        return path
    return path if path.is_file() else None


def get_compiler_override() -> str | None:
    return os.environ.get(COMPILER_ENV) or None
