"""Pipeline module: ordered, fail-fast build steps."""

from buildrunner.pipeline.assets import StageResult, stage_assets
from buildrunner.pipeline.errors import CopyError, NonZeroExit, SpawnError, StepError
from buildrunner.pipeline.executor import run_pipeline
from buildrunner.pipeline.loader import BuildLoadError, load_build, resolve_build
from buildrunner.pipeline.plan import build_plan, serving_hint, with_overrides
from buildrunner.pipeline.results import PipelineOutcome, StepResult
from buildrunner.pipeline.runner import resolve_executable, run_step
from buildrunner.pipeline.schema import (
    BuildDefinition,
    BuildSpec,
    CommandStep,
    CopyStep,
    MessageStep,
    Step,
)

__all__ = [
    "BuildDefinition",
    "BuildLoadError",
    "BuildSpec",
    "CommandStep",
    "CopyError",
    "CopyStep",
    "MessageStep",
    "NonZeroExit",
    "PipelineOutcome",
    "SpawnError",
    "StageResult",
    "Step",
    "StepError",
    "StepResult",
    "build_plan",
    "load_build",
    "resolve_build",
    "resolve_executable",
    "run_pipeline",
    "run_step",
    "serving_hint",
    "stage_assets",
    "with_overrides",
]
