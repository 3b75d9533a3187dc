"""Tests for the scanner's filesystem access layer."""
import os

import pytest

from tailor.scanner.filesystem import FileSystem, IgnoreMatcher


# ── Ignore matching ─────────────────────────────────────────────────────


class TestIgnoreMatcher:
    def test_segment_matches_whole_names(self):
        matcher = IgnoreMatcher(mode="segment")
        assert matcher.is_ignored("node_modules")
        assert matcher.is_ignored("packages/web/node_modules")
        assert not matcher.is_ignored("my-build-tools")

    def test_substring_matches_inside_names(self):
        matcher = IgnoreMatcher(mode="substring")
        assert matcher.is_ignored("my-build-tools")
        assert matcher.is_ignored("distribution")

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError, match="fuzzy"):
            IgnoreMatcher(mode="fuzzy")

    def test_custom_names(self):
        matcher = IgnoreMatcher(names=("vendor",))
        assert matcher.is_ignored("vendor")
        assert not matcher.is_ignored("node_modules")


# ── Probes ──────────────────────────────────────────────────────────────


class TestProbes:
    def test_exists(self, tmp_path):
        fs = FileSystem()
        (tmp_path / "a.txt").write_text("x")
        assert fs.exists(tmp_path / "a.txt")
        assert not fs.exists(tmp_path / "missing.txt")

    def test_exists_never_raises_on_bad_path(self):
        assert FileSystem().exists("bad\0path") is False

    def test_is_directory(self, tmp_path):
        fs = FileSystem()
        (tmp_path / "f").write_text("x")
        assert fs.is_directory(tmp_path)
        assert not fs.is_directory(tmp_path / "f")
        assert not fs.is_directory(tmp_path / "nope")

    def test_stat_missing_is_none(self, tmp_path):
        assert FileSystem().stat(tmp_path / "nope") is None


# ── Listing ─────────────────────────────────────────────────────────────


class TestListFiles:
    def test_non_recursive_lists_immediate_files(self, make_project):
        root = make_project({"a.py": "", "b.js": "", "sub/c.py": ""})
        assert FileSystem().list_files(root) == ["a.py", "b.js"]

    def test_recursive_uses_posix_relative_paths(self, make_project):
        root = make_project({"a.py": "", "sub/deeper/c.py": ""})
        assert FileSystem().list_files(root, recursive=True) == ["a.py", "sub/deeper/c.py"]

    def test_recursive_skips_ignored_dirs(self, make_project):
        root = make_project({
            "src/a.ts": "",
            "node_modules/lib/index.js": "",
            "build/out.js": "",
        })
        assert FileSystem().list_files(root, recursive=True) == ["src/a.ts"]

    def test_segment_mode_keeps_similar_names(self, make_project):
        root = make_project({"my-build-tools/run.py": ""})
        fs = FileSystem(ignore=IgnoreMatcher(mode="segment"))
        assert fs.list_files(root, recursive=True) == ["my-build-tools/run.py"]

    def test_substring_mode_drops_similar_names(self, make_project):
        root = make_project({"my-build-tools/run.py": "", "main.py": ""})
        fs = FileSystem(ignore=IgnoreMatcher(mode="substring"))
        assert fs.list_files(root, recursive=True) == ["main.py"]

    def test_missing_root_returns_empty(self, tmp_path):
        assert FileSystem().list_files(tmp_path / "nope", recursive=True) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_loop_visited_once(self, make_project):
        root = make_project({"sub/a.py": ""})
        os.symlink(root, root / "sub" / "loop")
        files = FileSystem().list_files(root, recursive=True)
        assert files == ["sub/a.py"]

    def test_list_entries_sorted(self, make_project):
        root = make_project({"b": "", "a": "", "c/x": ""})
        assert FileSystem().list_entries(root) == ["a", "b", "c"]

    def test_list_entries_raises_for_missing(self, tmp_path):
        with pytest.raises(OSError):
            FileSystem().list_entries(tmp_path / "nope")


# ── Reading & writing ───────────────────────────────────────────────────


class TestReadWrite:
    def test_write_creates_parents(self, tmp_path):
        fs = FileSystem()
        target = tmp_path / "a" / "b" / "c.md"
        fs.write_text(target, "hello")
        assert fs.read_text(target) == "hello"

    def test_append(self, tmp_path):
        fs = FileSystem()
        target = tmp_path / "notes" / "log.txt"
        fs.append_text(target, "one\n")
        fs.append_text(target, "two\n")
        assert target.read_text() == "one\ntwo\n"

    def test_read_missing_raises(self, tmp_path):
        with pytest.raises(OSError):
            FileSystem().read_text(tmp_path / "missing.md")

    def test_write_failure_reraised(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(OSError):
            FileSystem().write_text(blocker / "child.md", "y")


# ── Project root ────────────────────────────────────────────────────────


class TestProjectRoot:
    def test_find_git_root_from_nested_dir(self, make_project):
        root = make_project({".git/HEAD": "", "src/pkg/mod.py": ""})
        assert FileSystem().find_git_root(root / "src" / "pkg") == root

    def test_git_file_marker_counts(self, make_project):
        root = make_project({".git": "gitdir: ../.git/worktrees/x\n", "src/a.py": ""})
        assert FileSystem().find_git_root(root / "src") == root

    def test_resolve_without_git_returns_start(self, tmp_path, monkeypatch):
        fs = FileSystem()
        monkeypatch.setattr(fs, "find_git_root", lambda start: None)
        assert fs.resolve_project_root(tmp_path) == tmp_path

    def test_resolve_defaults_to_cwd(self, monkeypatch, tmp_path):
        fs = FileSystem()
        monkeypatch.setattr(fs, "find_git_root", lambda start: None)
        monkeypatch.chdir(tmp_path)
        assert fs.resolve_project_root() == tmp_path
