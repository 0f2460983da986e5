"""Copy an optional static assets tree into the build output."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from buildrunner._log import get_logger
from buildrunner.pipeline.errors import CopyError

logger = get_logger("pipeline.assets")


@dataclass
class StageResult:
    source: Path
    destination: Path
    copied: bool = False
    files: int = 0


def stage_assets(source: Path, destination: Path, *, step_name: str = "assets") -> StageResult:
    """Recursively copy *source* to *destination* if *source* is a directory.

    A missing source is not an error: the result has ``copied=False``.
    Existing files under *destination* are overwritten, so staging twice
    gives the same tree. Partial copies are left in place on failure.

    Raises:
        CopyError: If any file cannot be read or the destination cannot
            be written.
    """
    if not source.is_dir():
        logger.debug("No assets directory at %s, skipping", source)
        return StageResult(source=source, destination=destination)

    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except OSError as e:
        raise CopyError(step_name, f"Cannot copy {source} to {destination}: {e}") from e

    files = sum(1 for p in source.rglob("*") if p.is_file())
    logger.info("Copied %d file(s) from %s to %s", files, source, destination)
    return StageResult(source=source, destination=destination, copied=True, files=files)
