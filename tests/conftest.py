"""Shared test fixtures and helpers."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

from buildrunner.pipeline.schema import CommandStep


def python_step(name: str, code: str, cwd: Path) -> CommandStep:
    """Build a CommandStep that runs *code* with the current interpreter."""
    return CommandStep(name=name, command=sys.executable, args=("-c", code), cwd=cwd)


def make_fake_compiler(bin_dir: Path, *, exit_code: int = 0) -> Path:
    """Write an executable stand-in for wasm-pack.

    It creates ``--out-dir`` with a wasm module and JS bindings, records
    its arguments in ``compiler-args.txt`` in its cwd, then exits with
    *exit_code*.
    """
    bin_dir.mkdir(parents=True, exist_ok=True)
    script = bin_dir / "fake-wasm-pack"
    script.write_text(
        f"#!{sys.executable}\n"
        + textwrap.dedent(f"""\
        import pathlib
        import sys

        args = sys.argv[1:]
        pathlib.Path("compiler-args.txt").write_text(" ".join(args))
        if {exit_code}:
            sys.stderr.write("error: could not compile `game`\\n")
            sys.exit({exit_code})
        out = pathlib.Path(args[args.index("--out-dir") + 1])
        out.mkdir(parents=True, exist_ok=True)
        (out / "game_bg.wasm").write_bytes(b"\\x00asm\\x01\\x00\\x00\\x00")
        (out / "game.js").write_text("export default function init() {{}}\\n")
        """)
    )
    script.chmod(0o755)
    return script


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Provide an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def project_with_assets(project: Path) -> Path:
    """Provide a project with ``assets/a.txt`` and ``assets/sub/b.txt``."""
    assets = project / "assets"
    (assets / "sub").mkdir(parents=True)
    (assets / "a.txt").write_text("alpha")
    (assets / "sub" / "b.txt").write_bytes(b"\x00beta\xff")
    return project


@pytest.fixture
def fake_compiler(tmp_path: Path) -> Path:
    return make_fake_compiler(tmp_path / "bin")


@pytest.fixture
def failing_compiler(tmp_path: Path) -> Path:
    return make_fake_compiler(tmp_path / "bin-fail", exit_code=1)
