"""Result records produced while running a build."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


def new_build_id() -> str:
    """Return a short random hex ID for one build run."""
    return uuid.uuid4().hex[:12]


@dataclass
class StepResult:
    name: str
    exit_code: int | None = None
    success: bool = True
    stderr: str = ""
    error: str | None = None
    duration_ms: int = 0
    skipped: bool = False
    skip_reason: str | None = None


@dataclass
class PipelineOutcome:
    build_id: str
    build_name: str
    step_results: list[StepResult] = field(default_factory=list)
    duration_ms: int = 0
    success: bool = True

    @property
    def failed_step(self) -> StepResult | None:
        for sr in self.step_results:
            if not sr.success:
                return sr
        return None

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome.

        0 on success. Otherwise the failing step's own status when it has
        one, ``128 + N`` for a child killed by signal N, and 1 for
        failures that never produced a status (spawn or copy errors).
        """
        if self.success:
            return 0
        failed = self.failed_step
        if failed is None or not failed.exit_code:
            return 1
        if failed.exit_code < 0:
            return 128 - failed.exit_code
        return failed.exit_code
