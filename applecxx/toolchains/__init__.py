# SPDX-License-Identifier: MIT
"""Toolchain definitions."""

from applecxx.toolchains.apple import (
    OPTIONAL_TOOLS,
    ROLE_EXECUTABLES,
    make_flavor,
    resolve_apple_toolchain,
    resolve_apple_toolchains,
)

__all__ = [
    "OPTIONAL_TOOLS",
    "ROLE_EXECUTABLES",
    "make_flavor",
    "resolve_apple_toolchain",
    "resolve_apple_toolchains",
]
