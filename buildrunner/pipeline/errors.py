"""Step failure taxonomy."""

from __future__ import annotations


class StepError(Exception):
    """Base class for failures raised while running a build step."""

    def __init__(self, step_name: str, message: str) -> None:
        self.step_name = step_name
        super().__init__(message)


class SpawnError(StepError):
    """Raised when a step's executable cannot be located or launched."""

    def __init__(self, step_name: str, command: str, reason: str) -> None:
        self.command = command
        super().__init__(step_name, f"Cannot launch '{command}': {reason}")


class NonZeroExit(StepError):
    """Raised when a checked command exits with a non-zero status."""

    def __init__(self, step_name: str, exit_code: int, stderr: str = "") -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(step_name, f"Step '{step_name}' exited with status {exit_code}")


class CopyError(StepError):
    """Raised when the asset tree cannot be copied into the output directory."""
