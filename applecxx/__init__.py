# SPDX-License-Identifier: MIT
"""
Applecxx: resolves Apple Clang toolchains for a platform, SDK and architecture.

Given an installed SDK, applecxx finds clang, clang++ and ar and works out
the flags every invocation needs (sysroot, architecture, minimum
deployment version) plus user overrides, producing one immutable
Toolchain per platform/architecture flavor.
"""

from __future__ import annotations

from applecxx.configure.config import ConfigOverrides, load_overrides
from applecxx.configure.platform import (
    ApplePlatform,
    apple_platforms,
    get_apple_platform,
)
from applecxx.configure.programs import (
    ExecutableChecker,
    ExecutableLocator,
    FakeExecutableChecker,
    FileExecutableChecker,
)
from applecxx.configure.sdk import SdkPaths
from applecxx.core.errors import (
    ApplecxxError,
    ConfigureError,
    ToolNotFoundError,
)
from applecxx.toolchains import resolve_apple_toolchain, resolve_apple_toolchains
from applecxx.tools.toolchain import ResolvedTool, Toolchain

__version__ = "0.1.0"

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Inputs
    "ApplePlatform",
    "apple_platforms",
    "get_apple_platform",
    "SdkPaths",
    "ConfigOverrides",
    "load_overrides",
    # Executable lookup
    "ExecutableChecker",
    "ExecutableLocator",
    "FakeExecutableChecker",
    "FileExecutableChecker",
    # Resolution
    "resolve_apple_toolchain",
    "resolve_apple_toolchains",
    "ResolvedTool",
    "Toolchain",
    # Errors
    "ApplecxxError",
    "ConfigureError",
    "ToolNotFoundError",
]
