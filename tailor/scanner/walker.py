"""Bounded-depth structure walker.

Produces a ProjectStructure: every folder reached (with its immediate
file count) and every file reached, in depth-first pre-order.
"""
from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, Optional

from .filesystem import FileSystem
from .models import FileInfo, FolderInfo, ProjectStructure

DEFAULT_MAX_DEPTH = 3
DEFAULT_MAX_REPORTED_FILES = 100

# Hard limit on max_depth regardless of what callers ask for
MAX_DEPTH_CEILING = 32


class StructureWalker:
    """Walks a project tree to a bounded depth."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        max_reported_files: int = DEFAULT_MAX_REPORTED_FILES,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger("tailor.scanner.walker")
        self.fs = fs or FileSystem(logger=self.logger)
        self.max_reported_files = max_reported_files

    def scan(
        self,
        root: os.PathLike | str,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> ProjectStructure:
        """Scan ``root``.

        Entries directly under ``root`` have depth 0. A folder at depth
        ``d`` is descended only while ``d < max_depth``; deeper folders
        are recorded but their contents are neither listed nor counted.

        ``total_files`` counts every file reached, while ``files`` keeps
        only the first ``max_reported_files`` of them.
        """
        root_str = str(root)
        if max_depth > MAX_DEPTH_CEILING:
            self.logger.warning(
                "max_depth %d exceeds ceiling, using %d", max_depth, MAX_DEPTH_CEILING,
            )
            max_depth = MAX_DEPTH_CEILING

        folders: list[FolderInfo] = []
        files: list[FileInfo] = []
        total_files = 0

        # Each frame: (directory, depth of its entries, remaining entries)
        stack: list[tuple[Path, int, Iterator[str]]] = []
        self._push(stack, Path(root), 0)

        while stack:
            current, depth, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            full_path = current / entry
            st = self.fs.stat(full_path)
            if st is None:
                continue

            if stat.S_ISDIR(st.st_mode):
                folders.append(FolderInfo(
                    path=str(full_path),
                    name=entry,
                    depth=depth,
                    file_count=len(self.fs.list_files(full_path)),
                ))
                if depth < max_depth:
                    self._push(stack, full_path, depth + 1)
            else:
                total_files += 1
                if len(files) < self.max_reported_files:
                    files.append(FileInfo(
                        path=str(full_path),
                        name=entry,
                        extension=os.path.splitext(entry)[1],
                        size=st.st_size,
                    ))

        self.logger.debug(
            "Scanned %s: %d folders, %d files", root_str, len(folders), total_files,
        )
        return ProjectStructure(
            root=root_str,
            folders=tuple(folders),
            files=tuple(files),
            total_files=total_files,
        )

    def _push(
        self,
        stack: list[tuple[Path, int, Iterator[str]]],
        directory: Path,
        depth: int,
    ) -> None:
        """Queue a directory's entries; unreadable directories are skipped."""
        try:
            entries = self.fs.list_entries(directory)
        except OSError as e:
            self.logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return
        stack.append((directory, depth, iter(entries)))
