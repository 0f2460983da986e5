"""Run a single external command step."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import time

from buildrunner.pipeline.errors import NonZeroExit, SpawnError
from buildrunner.pipeline.results import StepResult
from buildrunner.pipeline.schema import CommandStep

logger = logging.getLogger(__name__)

# Seconds a child gets to exit after SIGTERM before it is killed.
_TERMINATE_GRACE = 5


def resolve_executable(command: str) -> str | None:
    """Return the full path of *command*, or ``None`` if it is not on PATH."""
    return shutil.which(command)


def _tee_stderr(proc: subprocess.Popen[str]) -> str:
    """Forward the child's stderr to ours line by line and return all of it."""
    assert proc.stderr is not None
    chunks: list[str] = []
    for line in proc.stderr:
        sys.stderr.write(line)
        sys.stderr.flush()
        chunks.append(line)
    proc.stderr.close()
    return "".join(chunks)


def _terminate(proc: subprocess.Popen[str]) -> None:
    if proc.poll() is not None:
        return
    proc.terminate()
    try:
        proc.wait(timeout=_TERMINATE_GRACE)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait()


def run_step(step: CommandStep, *, check: bool = False) -> StepResult:
    """Spawn *step*, wait for it and return its result.

    Standard output is inherited so compiler logs stream live. Standard
    error is forwarded as it arrives and also captured on the result.

    Raises:
        SpawnError: If the executable cannot be located or launched.
        NonZeroExit: If *check* is true and the command exits non-zero.
    """
    argv = step.argv()
    logger.debug("Spawning %s (cwd=%s)", argv, step.cwd)
    start = time.monotonic()

    try:
        proc = subprocess.Popen(
            argv,
            cwd=step.cwd,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            bufsize=1,
        )
    except OSError as e:
        raise SpawnError(step.name, step.command, e.strerror or str(e)) from e

    try:
        stderr = _tee_stderr(proc)
        exit_code = proc.wait()
    except KeyboardInterrupt:
        logger.warning("Interrupted, terminating '%s' (pid %d)", step.command, proc.pid)
        _terminate(proc)
        raise

    result = StepResult(
        name=step.name,
        exit_code=exit_code,
        success=exit_code == 0,
        stderr=stderr,
        duration_ms=int((time.monotonic() - start) * 1000),
    )
    if not result.success:
        result.error = f"'{step.command}' exited with status {exit_code}"
        if check:
            raise NonZeroExit(step.name, exit_code, stderr)
    return result
