"""Tests for the asset stager."""

import pytest

from buildrunner.pipeline.assets import stage_assets
from buildrunner.pipeline.errors import CopyError


def _tree(root):
    return {
        p.relative_to(root).as_posix(): p.read_bytes() for p in root.rglob("*") if p.is_file()
    }


class TestStageAssets:
    def test_missing_source_is_noop(self, project):
        dest = project / "pkg" / "assets"
        result = stage_assets(project / "assets", dest)
        assert result.copied is False
        assert result.files == 0
        assert not dest.exists()

    def test_source_file_not_dir_is_noop(self, project):
        (project / "assets").write_text("not a directory")
        result = stage_assets(project / "assets", project / "pkg" / "assets")
        assert result.copied is False

    def test_copies_tree_with_identical_bytes(self, project_with_assets):
        src = project_with_assets / "assets"
        dest = project_with_assets / "pkg" / "assets"
        result = stage_assets(src, dest)

        assert result.copied is True
        assert result.files == 2
        assert _tree(dest) == {"a.txt": b"alpha", "sub/b.txt": b"\x00beta\xff"}

    def test_creates_missing_parents(self, project_with_assets):
        dest = project_with_assets / "deep" / "out" / "assets"
        stage_assets(project_with_assets / "assets", dest)
        assert (dest / "sub" / "b.txt").is_file()

    def test_repeated_staging_is_idempotent(self, project_with_assets):
        src = project_with_assets / "assets"
        dest = project_with_assets / "pkg" / "assets"
        stage_assets(src, dest)
        first = _tree(dest)
        stage_assets(src, dest)
        assert _tree(dest) == first

    def test_overwrites_existing_files(self, project_with_assets):
        dest = project_with_assets / "pkg" / "assets"
        dest.mkdir(parents=True)
        (dest / "a.txt").write_text("stale")
        stage_assets(project_with_assets / "assets", dest)
        assert (dest / "a.txt").read_text() == "alpha"

    def test_unwritable_destination_raises_copy_error(self, project_with_assets):
        blocker = project_with_assets / "pkg"
        blocker.write_text("a file where the output directory should be")
        with pytest.raises(CopyError) as exc_info:
            stage_assets(project_with_assets / "assets", blocker / "assets", step_name="assets")
        assert exc_info.value.step_name == "assets"
        assert "Cannot copy" in str(exc_info.value)
