# SPDX-License-Identifier: MIT
"""SDK installation paths.

An SdkPaths value describes one installed SDK: the developer directory,
the toolchains to take compilers from, the platform directory and the
SDK sysroot. It is built once per SDK and shared read-only by every
toolchain resolved against that SDK.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from applecxx.core.errors import InvalidSdkPathsError


def _to_path(name: str, value: Path | str | None) -> Path:
    # Path("") silently becomes ".", so empty strings are rejected first.
    if value is None or value == "":
        raise InvalidSdkPathsError(name)
    return Path(value)


def _to_paths(name: str, values: Iterable[Path | str] | None) -> tuple[Path, ...]:
    if values is None:
        raise InvalidSdkPathsError(name)
    # A bare string would otherwise be iterated character by character.
    if isinstance(values, (str, Path)):
        values = [values]
    return tuple(_to_path(name, v) for v in values)


@dataclass(frozen=True)
class SdkPaths:
    """Paths of an installed Apple SDK.

    Attributes:
        developer_path: Root of the developer tools tree
                        (e.g., Xcode.app/Contents/Developer).
        toolchain_paths: Toolchain roots, searched in this order
                         (e.g., Toolchains/XcodeDefault.xctoolchain).
        platform_path: Platform directory (e.g., Platforms/iPhoneOS.platform).
        sdk_path: SDK sysroot passed to the compiler with -isysroot.

    Example:
        paths = SdkPaths(
            developer_path=".",
            toolchain_paths=["Toolchains/XcodeDefault.xctoolchain"],
            platform_path="Platforms/iPhoneOS.platform",
            sdk_path="Platforms/iPhoneOS.platform/Developer/SDKs/iPhoneOS8.0.sdk",
        )
    """

    developer_path: Path
    toolchain_paths: tuple[Path, ...]
    platform_path: Path
    sdk_path: Path

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__.
        object.__setattr__(
            self, "developer_path", _to_path("developer_path", self.developer_path)
        )
        object.__setattr__(
            self, "toolchain_paths", _to_paths("toolchain_paths", self.toolchain_paths)
        )
        object.__setattr__(
            self, "platform_path", _to_path("platform_path", self.platform_path)
        )
        object.__setattr__(self, "sdk_path", _to_path("sdk_path", self.sdk_path))

    @property
    def platform_bin_path(self) -> Path:
        """Directory holding the platform's own developer tools."""
        return self.platform_path / "Developer" / "usr" / "bin"

    def tool_search_paths(self) -> list[Path]:
        """Get the directories to search for tools, in priority order.

        Every toolchain's usr/bin comes first, in declaration order,
        followed by the platform's developer bin directory.
        """
        paths = [tc / "usr" / "bin" for tc in self.toolchain_paths]
        paths.append(self.platform_bin_path)
        return paths
