"""Pydantic models for build definitions and planned steps."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Flags the plan always emits itself.
_RESERVED_FLAGS = ("--target", "-t", "--out-dir", "-d")

_PROFILE_FLAGS = {"release": "--release", "dev": "--dev", "profiling": "--profiling"}


class CompilerConfig(BaseModel):
    command: str = "wasm-pack"
    target: Literal["web", "bundler", "nodejs", "no-modules", "deno"] = "web"
    out_dir: str = "pkg"
    profile: Literal["release", "dev", "profiling"] | None = None
    extra_args: list[str] = []

    @field_validator("out_dir")
    @classmethod
    def _relative_out_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("out_dir must not be empty")
        if Path(v).is_absolute() or PurePosixPath(v).is_absolute():
            raise ValueError(f"out_dir must be relative to the project, got '{v}'")
        return v

    @field_validator("extra_args")
    @classmethod
    def _no_reserved_flags(cls, v: list[str]) -> list[str]:
        for arg in v:
            flag = arg.split("=", 1)[0]
            if flag in _RESERVED_FLAGS:
                raise ValueError(f"'{flag}' is set by the build; use the matching field instead")
        return v

    def profile_flag(self) -> list[str]:
        if self.profile is None:
            return []
        return [_PROFILE_FLAGS[self.profile]]


class AssetsConfig(BaseModel):
    source: str = "assets"
    enabled: bool = True


class ServeConfig(BaseModel):
    command: str = "python3 -m http.server"
    port: int = Field(default=8000, ge=1, le=65535)
    host: str = "localhost"

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


class BuildMetadata(BaseModel):
    name: str = "wasm-build"
    description: str = ""


class BuildSpec(BaseModel):
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    serve: ServeConfig = Field(default_factory=ServeConfig)


class BuildDefinition(BaseModel):
    apiVersion: str = "buildrunner/v1"
    kind: Literal["Build"] = "Build"
    metadata: BuildMetadata = Field(default_factory=BuildMetadata)
    spec: BuildSpec = Field(default_factory=BuildSpec)


# ---------------------------------------------------------------------------
# Planned steps
# ---------------------------------------------------------------------------


class _StepBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class CommandStep(_StepBase):
    """An external tool invocation."""

    kind: Literal["command"] = "command"
    command: str
    args: tuple[str, ...] = ()
    cwd: Path = Path(".")

    def argv(self) -> list[str]:
        return [self.command, *self.args]


class CopyStep(_StepBase):
    """Recursive copy of an optional directory into the build output."""

    kind: Literal["copy"] = "copy"
    source: Path
    destination: Path


class MessageStep(_StepBase):
    """Lines printed to the console; produces no artifacts."""

    kind: Literal["message"] = "message"
    lines: tuple[str, ...] = ()


Step = Annotated[CommandStep | CopyStep | MessageStep, Field(discriminator="kind")]
