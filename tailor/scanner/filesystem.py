"""Filesystem access layer used by the scanner.

Existence checks never raise. Listing collapses traversal errors to an
empty result. Reads and writes log failures and re-raise them.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, Optional, Union

PathLike = Union[str, os.PathLike]

# Directories skipped by recursive listing
IGNORED_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "__pycache__",
    ".venv",
    "venv",
)

GIT_MARKER = ".git"


class IgnoreMatcher:
    """Decides whether a relative directory path is excluded from listing.

    ``segment`` mode matches ignore names against whole path segments.
    ``substring`` mode matches them anywhere in the relative path, so
    ``my-build-tools`` is excluded because it contains ``build``.
    """

    def __init__(self, names: tuple[str, ...] = IGNORED_DIRS, mode: str = "segment"):
        if mode not in ("segment", "substring"):
            raise ValueError(f"Unknown ignore match mode: {mode}")
        self.names = names
        self.mode = mode

    def is_ignored(self, rel_path: str) -> bool:
        if self.mode == "substring":
            return any(name in rel_path for name in self.names)
        segments = rel_path.split("/")
        return any(segment in self.names for segment in segments)


class FileSystem:
    """Thin I/O wrapper with the scanner's error-collapsing policy."""

    def __init__(
        self,
        ignore: Optional[IgnoreMatcher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.ignore = ignore or IgnoreMatcher()
        self.logger = logger or logging.getLogger("tailor.scanner.fs")

    # ── Probes ──

    def exists(self, path: PathLike) -> bool:
        try:
            os.stat(path)
            return True
        except (OSError, ValueError):
            return False

    def is_directory(self, path: PathLike) -> bool:
        try:
            return stat.S_ISDIR(os.stat(path).st_mode)
        except (OSError, ValueError):
            return False

    def stat(self, path: PathLike) -> Optional[os.stat_result]:
        try:
            return os.stat(path)
        except (OSError, ValueError):
            return None

    # ── Listing ──

    def list_entries(self, path: PathLike) -> list[str]:
        """Names directly inside ``path``, sorted. Raises OSError."""
        return sorted(os.listdir(path))

    def list_files(self, root: PathLike, recursive: bool = False) -> list[str]:
        """Relative POSIX paths of files under ``root``.

        Directories matched by the ignore list are not descended. Any
        error during traversal yields an empty list.
        """
        root = Path(root)
        files: list[str] = []
        try:
            for rel_path, is_dir in self._walk(root, recursive):
                if not is_dir:
                    files.append(rel_path)
        except OSError as e:
            self.logger.error("Failed to list files in %s: %s", root, e)
            return []
        return files

    def _walk(self, root: Path, recursive: bool) -> Iterator[tuple[str, bool]]:
        """Depth-first pre-order walk yielding (relative path, is_dir)."""
        root_stat = os.stat(root)
        visited = {(root_stat.st_dev, root_stat.st_ino)}
        stack: list[tuple[Path, str, Iterator[str]]] = [
            (root, "", iter(self.list_entries(root)))
        ]
        while stack:
            current, rel, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            full_path = current / entry
            rel_path = f"{rel}/{entry}" if rel else entry
            st = os.stat(full_path)

            if stat.S_ISDIR(st.st_mode):
                yield rel_path, True
                key = (st.st_dev, st.st_ino)
                if recursive and key not in visited and not self.ignore.is_ignored(rel_path):
                    visited.add(key)
                    stack.append((full_path, rel_path, iter(self.list_entries(full_path))))
            else:
                yield rel_path, False

    # ── Reading & writing ──

    def read_text(self, path: PathLike) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to read file %s: %s", path, e)
            raise

    def write_text(self, path: PathLike, content: str) -> None:
        """Write ``content``, creating parent directories as needed."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to write file %s: %s", path, e)
            raise
        self.logger.info("File written: %s", path)

    def append_text(self, path: PathLike, content: str) -> None:
        """Append ``content``, creating parent directories as needed."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            self.logger.error("Failed to append to file %s: %s", path, e)
            raise
        self.logger.info("Content appended to file: %s", path)

    # ── Project root ──

    def find_git_root(self, start: PathLike) -> Optional[Path]:
        """Nearest ancestor of ``start`` (inclusive) holding a .git marker."""
        current = Path(os.path.abspath(start))
        while current != current.parent:
            if self.exists(current / GIT_MARKER):
                return current
            current = current.parent
        return None

    def resolve_project_root(self, start: Optional[PathLike] = None) -> Path:
        """Git root above ``start``, or ``start`` itself (default: cwd)."""
        start_path = Path(os.path.abspath(start if start is not None else os.getcwd()))
        git_root = self.find_git_root(start_path)
        return git_root or start_path
