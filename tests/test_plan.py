"""Tests for turning a build definition into steps."""

from pathlib import Path

import pytest

from buildrunner.pipeline.loader import BuildLoadError
from buildrunner.pipeline.plan import build_plan, serving_hint, with_overrides
from buildrunner.pipeline.schema import (
    AssetsConfig,
    BuildDefinition,
    BuildSpec,
    CommandStep,
    CompilerConfig,
    CopyStep,
    MessageStep,
    ServeConfig,
)


class TestServingHint:
    def test_default_lines(self):
        assert serving_hint(ServeConfig()) == [
            "Build complete! You can now serve the files with a web server.",
            "For example, run: python3 -m http.server 8000",
            "Then open http://localhost:8000 in your browser",
        ]

    def test_custom_port(self):
        lines = serving_hint(ServeConfig(port=9090))
        assert lines[1].endswith("9090")
        assert "http://localhost:9090" in lines[2]


class TestBuildPlan:
    def test_default_plan(self, tmp_path):
        steps = build_plan(BuildDefinition(), tmp_path)
        assert [s.name for s in steps] == ["compile", "assets", "summary"]

        compile_step = steps[0]
        assert isinstance(compile_step, CommandStep)
        assert compile_step.argv() == [
            "wasm-pack",
            "build",
            "--target",
            "web",
            "--out-dir",
            "pkg",
        ]
        assert compile_step.cwd == tmp_path
        assert compile_step.description == "Building WASM package..."

        assets_step = steps[1]
        assert isinstance(assets_step, CopyStep)
        assert assets_step.source == tmp_path / "assets"
        assert assets_step.destination == tmp_path / "pkg" / "assets"
        assert assets_step.description == "Copying assets..."

        summary = steps[2]
        assert isinstance(summary, MessageStep)
        assert summary.lines == tuple(serving_hint(ServeConfig()))

    def test_profile_and_extra_args(self, tmp_path):
        d = BuildDefinition(
            spec=BuildSpec(
                compiler=CompilerConfig(
                    target="nodejs", out_dir="dist", profile="release", extra_args=["--no-pack"]
                )
            )
        )
        step = build_plan(d, tmp_path)[0]
        assert step.args == (
            "build",
            "--target",
            "nodejs",
            "--out-dir",
            "dist",
            "--release",
            "--no-pack",
        )

    def test_nested_assets_source_lands_by_basename(self, tmp_path):
        d = BuildDefinition(spec=BuildSpec(assets=AssetsConfig(source="web/static")))
        step = build_plan(d, tmp_path)[1]
        assert step.source == tmp_path / "web" / "static"
        assert step.destination == tmp_path / "pkg" / "static"

    def test_assets_disabled(self, tmp_path):
        d = BuildDefinition(spec=BuildSpec(assets=AssetsConfig(enabled=False)))
        assert [s.name for s in build_plan(d, tmp_path)] == ["compile", "summary"]

    def test_skip_assets(self, tmp_path):
        steps = build_plan(BuildDefinition(), tmp_path, skip_assets=True)
        assert [s.name for s in steps] == ["compile", "summary"]


class TestWithOverrides:
    def test_none_values_ignored(self):
        d = BuildDefinition()
        assert with_overrides(d, target=None, out_dir=None) == d

    def test_compiler_overrides(self):
        d = with_overrides(
            BuildDefinition(), command="/opt/wasm-pack", target="bundler", profile="dev"
        )
        assert d.spec.compiler.command == "/opt/wasm-pack"
        assert d.spec.compiler.target == "bundler"
        assert d.spec.compiler.profile == "dev"

    def test_assets_override(self):
        d = with_overrides(BuildDefinition(), assets="static")
        assert d.spec.assets.source == "static"

    def test_original_untouched(self):
        original = BuildDefinition()
        with_overrides(original, out_dir="dist")
        assert original.spec.compiler.out_dir == "pkg"

    def test_invalid_override(self):
        with pytest.raises(BuildLoadError, match="Invalid override"):
            with_overrides(BuildDefinition(), target="wasi")

    def test_absolute_out_dir_override_rejected(self):
        with pytest.raises(BuildLoadError):
            with_overrides(BuildDefinition(), out_dir=str(Path("/abs").resolve()))
