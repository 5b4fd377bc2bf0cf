# SPDX-License-Identifier: MIT
"""Locating tool executables.

Tools are looked up in an explicit, ordered list of directories, with no
fallback to PATH. An Apple toolchain always comes from the SDK it is
resolved against.

Whether a candidate path is an executable is decided by an
ExecutableChecker, so tests can declare the executables that exist
instead of building a fake SDK on disk.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from applecxx.core.errors import ToolNotFoundError


@runtime_checkable
class ExecutableChecker(Protocol):
    """Decides whether a path names an executable file."""

    def is_executable(self, path: Path) -> bool:
        """Return True if path is an existing executable file."""
        ...


class FileExecutableChecker:
    """Checks the real filesystem."""

    def is_executable(self, path: Path) -> bool:
        return path.is_file() and os.access(path, os.X_OK)

    def __repr__(self) -> str:
        return "FileExecutableChecker()"


class FakeExecutableChecker:
    """Reports a fixed set of paths as executable.

    Never touches the filesystem.

    Example:
        checker = FakeExecutableChecker(["Toolchains/X.xctoolchain/usr/bin/clang"])
        locator = ExecutableLocator(checker)
    """

    def __init__(self, paths: Iterable[Path | str] = ()) -> None:
        self._paths = frozenset(Path(p) for p in paths)

    @property
    def paths(self) -> frozenset[Path]:
        return self._paths

    def is_executable(self, path: Path) -> bool:
        return Path(path) in self._paths

    def __repr__(self) -> str:
        return f"FakeExecutableChecker({sorted(str(p) for p in self._paths)!r})"


class ExecutableLocator:
    """Finds tools in an ordered list of directories.

    Only reads the filesystem (through its checker), so one locator can be
    shared by concurrent resolutions.
    """

    def __init__(self, checker: ExecutableChecker | None = None) -> None:
        """Create a locator.

        Args:
            checker: Executable checker; defaults to FileExecutableChecker.
        """
        self.checker: ExecutableChecker = checker or FileExecutableChecker()

    def find_optional(
        self, name: str, search_paths: Sequence[Path | str]
    ) -> Path | None:
        """Find a tool, returning None if it is not in any directory.

        Args:
            name: Executable name (e.g., 'clang').
            search_paths: Directories to try, in priority order.

        Returns:
            The first matching candidate path, or None.
        """
        for directory in search_paths:
            candidate = Path(directory) / name
            if self.checker.is_executable(candidate):
                return candidate
        return None

    def find(self, name: str, search_paths: Sequence[Path | str]) -> Path:
        """Find a required tool.

        Args:
            name: Executable name (e.g., 'clang').
            search_paths: Directories to try, in priority order.

        Returns:
            The first matching candidate path.

        Raises:
            ToolNotFoundError: If no directory contains the tool.
        """
        path = self.find_optional(name, search_paths)
        if path is None:
            raise ToolNotFoundError(name, search_paths)
        return path

    def __repr__(self) -> str:
        return f"ExecutableLocator({self.checker!r})"
