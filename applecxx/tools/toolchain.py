# SPDX-License-Identifier: MIT
"""Resolved toolchain values.

A Toolchain is a coordinated set of tools that work together for one
target (e.g., clang, clang++ and ar from one SDK, all compiling for
iphoneos armv7). Toolchain values are immutable and may be shared
freely between consumers and threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from applecxx.configure.platform import ApplePlatform

# Tool roles every toolchain provides.
TOOL_ROLES: tuple[str, ...] = ("cc", "cpp", "cxx", "cxxpp", "as", "aspp", "ld", "ar")


@dataclass(frozen=True)
class ResolvedTool:
    """A located tool and the flags it must always receive.

    Attributes:
        name: Executable name (e.g., 'clang++').
        path: Path the executable was found at.
        flags: Flags following the executable, in order.
    """

    name: str
    path: Path
    flags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "flags", tuple(self.flags))

    @property
    def command_prefix(self) -> list[str]:
        """The executable followed by its flags."""
        return [str(self.path), *self.flags]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": str(self.path),
            "flags": list(self.flags),
        }


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Toolchain:
    """A resolved Apple C/C++ toolchain for one platform and architecture.

    Attributes:
        flavor: Identifier of this toolchain within a build
                ('<sdk_name>-<architecture>').
        platform: Target platform variant.
        sdk_name: SDK name (e.g., 'iphoneos8.0').
        build_version: SDK build version (e.g., '6A2008a'); metadata only.
        min_version: Minimum deployment version.
        architecture: Target architecture.
        tools: Resolved tool for each role in TOOL_ROLES.
        flags: Composed flag list for each flag category.
        optional_tools: Auxiliary tools (lipo, strip, ...) that were found.
    """

    flavor: str
    platform: ApplePlatform
    sdk_name: str
    build_version: str
    min_version: str
    architecture: str
    tools: Mapping[str, ResolvedTool]
    flags: Mapping[str, tuple[str, ...]]
    optional_tools: Mapping[str, Path] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [role for role in TOOL_ROLES if role not in self.tools]
        if missing:
            raise ValueError(f"toolchain is missing tool roles: {', '.join(missing)}")
        object.__setattr__(self, "tools", _freeze(self.tools))
        object.__setattr__(
            self,
            "flags",
            _freeze({k: tuple(v) for k, v in self.flags.items()}),
        )
        object.__setattr__(self, "optional_tools", _freeze(self.optional_tools))

    # Unhashable mapping fields; identity is the flavor.
    def __hash__(self) -> int:
        return hash(self.flavor)

    def get_tool(self, role: str) -> ResolvedTool:
        """Get the tool for a role.

        Raises:
            KeyError: If role is not one of TOOL_ROLES.
        """
        return self.tools[role]

    def get_flags(self, category: str) -> tuple[str, ...]:
        """Get a flag category's flags (empty if unknown)."""
        return self.flags.get(category, ())

    def get_optional_tool(self, name: str) -> Path | None:
        """Get an auxiliary tool's path, or None if it was not found."""
        return self.optional_tools.get(name)

    @property
    def cc(self) -> ResolvedTool:
        return self.tools["cc"]

    @property
    def cpp(self) -> ResolvedTool:
        return self.tools["cpp"]

    @property
    def cxx(self) -> ResolvedTool:
        return self.tools["cxx"]

    @property
    def cxxpp(self) -> ResolvedTool:
        return self.tools["cxxpp"]

    @property
    def as_(self) -> ResolvedTool:
        return self.tools["as"]

    @property
    def aspp(self) -> ResolvedTool:
        return self.tools["aspp"]

    @property
    def ld(self) -> ResolvedTool:
        return self.tools["ld"]

    @property
    def ar(self) -> ResolvedTool:
        return self.tools["ar"]

    @property
    def cflags(self) -> tuple[str, ...]:
        return self.get_flags("cflags")

    @property
    def cppflags(self) -> tuple[str, ...]:
        return self.get_flags("cppflags")

    @property
    def cxxflags(self) -> tuple[str, ...]:
        return self.get_flags("cxxflags")

    @property
    def cxxppflags(self) -> tuple[str, ...]:
        return self.get_flags("cxxppflags")

    @property
    def asflags(self) -> tuple[str, ...]:
        return self.get_flags("asflags")

    @property
    def asppflags(self) -> tuple[str, ...]:
        return self.get_flags("asppflags")

    @property
    def ldflags(self) -> tuple[str, ...]:
        return self.get_flags("ldflags")

    @property
    def cxxldflags(self) -> tuple[str, ...]:
        return self.get_flags("cxxldflags")

    @property
    def arflags(self) -> tuple[str, ...]:
        return self.get_flags("arflags")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "flavor": self.flavor,
            "platform": self.platform.name,
            "sdk_name": self.sdk_name,
            "build_version": self.build_version,
            "min_version": self.min_version,
            "architecture": self.architecture,
            "tools": {role: tool.to_dict() for role, tool in self.tools.items()},
            "flags": {k: list(v) for k, v in self.flags.items()},
            "optional_tools": {k: str(v) for k, v in self.optional_tools.items()},
        }

    def __repr__(self) -> str:
        tools = ", ".join(self.tools.keys())
        return f"Toolchain({self.flavor!r}, tools=[{tools}])"
