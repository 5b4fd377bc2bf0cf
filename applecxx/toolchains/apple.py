# SPDX-License-Identifier: MIT
"""Apple Clang toolchain resolution.

Resolves the Clang-based toolchain of an Apple SDK for one platform
variant and architecture:
- C compiler, preprocessor and assembler (clang)
- C++ compiler and preprocessor (clang++)
- Linker (clang++ as the linker driver)
- Archiver (ar)

Tools are searched in the SDK's toolchains first, then in the platform's
developer bin directory. Resolution performs filesystem reads only: it
does not log, cache or retry, and a missing tool is fatal.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from applecxx.configure.platform import ApplePlatform, get_apple_platform
from applecxx.configure.programs import ExecutableLocator
from applecxx.core.flags import compose_flag_categories, compose_tool_flags
from applecxx.tools.toolchain import TOOL_ROLES, ResolvedTool, Toolchain

if TYPE_CHECKING:
    from applecxx.configure.config import ConfigOverrides
    from applecxx.configure.sdk import SdkPaths


# Executable providing each tool role.
ROLE_EXECUTABLES: dict[str, str] = {
    "cc": "clang",
    "cpp": "clang",
    "as": "clang",
    "aspp": "clang",
    "cxx": "clang++",
    "cxxpp": "clang++",
    "ld": "clang++",
    "ar": "ar",
}

# Auxiliary tools recorded when present.
OPTIONAL_TOOLS: tuple[str, ...] = ("libtool", "lipo", "strip", "nm", "dsymutil")


def make_flavor(sdk_name: str, architecture: str) -> str:
    """Get the flavor identifying a toolchain.

    Example:
        >>> make_flavor("iphoneos8.0", "armv7")
        'iphoneos8.0-armv7'
    """
    return f"{sdk_name}-{architecture}"


def resolve_apple_toolchain(
    platform: ApplePlatform | str,
    sdk_name: str,
    build_version: str,
    min_version: str,
    architecture: str,
    sdk_paths: SdkPaths,
    overrides: ConfigOverrides | None = None,
    locator: ExecutableLocator | None = None,
) -> Toolchain:
    """Resolve the toolchain for one platform variant and architecture.

    Args:
        platform: Platform variant, or its short name (e.g., 'iphoneos').
        sdk_name: SDK name (e.g., 'iphoneos8.0').
        build_version: SDK build version (e.g., '6A2008a'). Carried through
                       as metadata; it does not affect any flag.
        min_version: Minimum deployment version (e.g., '7.0').
        architecture: Target architecture (e.g., 'armv7').
        sdk_paths: Paths of the installed SDK.
        overrides: User flag overrides.
        locator: Executable locator; defaults to one that checks the
                 real filesystem.

    Returns:
        The resolved Toolchain.

    Raises:
        ToolNotFoundError: If clang, clang++ or ar cannot be found.
        UnknownPlatformError: If platform is an unknown name.

    Example:
        developer = Path("/Applications/Xcode.app/Contents/Developer")
        paths = SdkPaths(
            developer_path=developer,
            toolchain_paths=[developer / "Toolchains/XcodeDefault.xctoolchain"],
            platform_path=developer / "Platforms/iPhoneOS.platform",
            sdk_path=developer / "Platforms/iPhoneOS.platform/Developer/SDKs/iPhoneOS8.0.sdk",
        )
        tc = resolve_apple_toolchain(
            "iphoneos", "iphoneos8.0", "12A365", "7.0", "armv7", paths
        )
        cmd = tc.cc.command_prefix + ["-c", "-o", "main.o", "main.c"]
    """
    platform = get_apple_platform(platform)
    if locator is None:
        locator = ExecutableLocator()

    search_paths = sdk_paths.tool_search_paths()

    # Look each executable up once, even when it serves several roles.
    executables: dict[str, Path] = {}
    for name in dict.fromkeys(ROLE_EXECUTABLES.values()):
        executables[name] = locator.find(name, search_paths)

    optional_tools: dict[str, Path] = {}
    for name in OPTIONAL_TOOLS:
        path = locator.find_optional(name, search_paths)
        if path is not None:
            optional_tools[name] = path

    categories = compose_flag_categories(overrides)

    tools: dict[str, ResolvedTool] = {}
    for role in TOOL_ROLES:
        name = ROLE_EXECUTABLES[role]
        flags = compose_tool_flags(
            role,
            sdk_paths.sdk_path,
            architecture,
            min_version,
            platform,
            categories,
        )
        tools[role] = ResolvedTool(name, executables[name], tuple(flags))

    return Toolchain(
        flavor=make_flavor(sdk_name, architecture),
        platform=platform,
        sdk_name=sdk_name,
        build_version=build_version,
        min_version=min_version,
        architecture=architecture,
        tools=tools,
        flags={k: tuple(v) for k, v in categories.items()},
        optional_tools=optional_tools,
    )


def resolve_apple_toolchains(
    platform: ApplePlatform | str,
    sdk_name: str,
    build_version: str,
    min_version: str,
    sdk_paths: SdkPaths,
    overrides: ConfigOverrides | None = None,
    locator: ExecutableLocator | None = None,
    architectures: Iterable[str] | None = None,
) -> dict[str, Toolchain]:
    """Resolve one toolchain per architecture.

    Args:
        architectures: Architectures to resolve; defaults to the platform's
                       default architectures.
        (other arguments as for resolve_apple_toolchain)

    Returns:
        Toolchains keyed by flavor, in architecture order.
    """
    platform = get_apple_platform(platform)
    if architectures is None:
        architectures = platform.default_architectures

    toolchains: dict[str, Toolchain] = {}
    for arch in architectures:
        tc = resolve_apple_toolchain(
            platform,
            sdk_name,
            build_version,
            min_version,
            arch,
            sdk_paths,
            overrides=overrides,
            locator=locator,
        )
        toolchains[tc.flavor] = tc
    return toolchains
