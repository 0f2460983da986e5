"""Sequential, fail-fast execution engine for build steps."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from rich.console import Console

from buildrunner.pipeline.assets import stage_assets
from buildrunner.pipeline.errors import CopyError, SpawnError
from buildrunner.pipeline.results import PipelineOutcome, StepResult, new_build_id
from buildrunner.pipeline.runner import run_step
from buildrunner.pipeline.schema import CommandStep, CopyStep, MessageStep, Step

logger = logging.getLogger(__name__)


def _execute_step(step: Step, console: Console) -> StepResult:
    """Execute a single step, converting step errors into a failed result."""
    start = time.monotonic()

    if isinstance(step, CommandStep):
        try:
            return run_step(step)
        except SpawnError as e:
            return StepResult(
                name=step.name,
                success=False,
                error=str(e),
                duration_ms=int((time.monotonic() - start) * 1000),
            )

    result = StepResult(name=step.name)

    if isinstance(step, CopyStep):
        try:
            staged = stage_assets(step.source, step.destination, step_name=step.name)
        except CopyError as e:
            result.success = False
            result.error = str(e)
        else:
            if not staged.copied:
                result.skipped = True
                result.skip_reason = f"No directory at {step.source}"
    elif isinstance(step, MessageStep):
        for line in step.lines:
            console.print(line, markup=False, highlight=False)
    else:
        raise TypeError(f"Unsupported step type: {type(step).__name__}")

    result.duration_ms = int((time.monotonic() - start) * 1000)
    return result


def run_pipeline(
    steps: Sequence[Step],
    *,
    name: str = "wasm-build",
    console: Console | None = None,
) -> PipelineOutcome:
    """Run *steps* in order, halting at the first failure.

    Later steps get no result at all once a step fails. A
    ``KeyboardInterrupt`` propagates to the caller after the runner has
    torn down its child process.
    """
    console = console or Console()
    outcome = PipelineOutcome(build_id=new_build_id(), build_name=name)
    start = time.monotonic()

    for index, step in enumerate(steps, 1):
        if step.description:
            console.print(step.description, markup=False, highlight=False)
        logger.info("Step %d/%d '%s' started", index, len(steps), step.name)

        sr = _execute_step(step, console)
        outcome.step_results.append(sr)

        if not sr.success:
            logger.warning("Step '%s' failed: %s", step.name, sr.error)
            outcome.success = False
            break
        logger.info("Step '%s' finished in %dms", step.name, sr.duration_ms)

    outcome.duration_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "Build '%s' (%s) %s in %dms",
        outcome.build_name,
        outcome.build_id,
        "succeeded" if outcome.success else "failed",
        outcome.duration_ms,
    )
    return outcome
