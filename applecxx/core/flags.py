# SPDX-License-Identifier: MIT
"""Flag composition for Apple toolchains.

Every compiler invocation needs three mandatory pieces of information:
the SDK sysroot, the target architecture and the minimum deployment
version. These are followed by the user's overrides for the tool's flag
category.

Flag categories layer as follows:

    cflags     = overrides[cflags]
    cppflags   = cflags + overrides[cppflags]
    cxxflags   = overrides[cxxflags]
    cxxppflags = cxxflags + overrides[cxxppflags]
    asflags    = overrides[asflags]
    asppflags  = asflags + overrides[asppflags]

so a preprocessor invocation always sees the compile flags of its
language. Layering only appends: nothing is replaced or de-duplicated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from applecxx.configure.config import FLAG_CATEGORIES, ConfigOverrides

if TYPE_CHECKING:
    from pathlib import Path

    from applecxx.configure.platform import ApplePlatform


# Preprocessor categories and the compile category they extend.
PREPROCESSOR_BASE_CATEGORY: dict[str, str] = {
    "cppflags": "cflags",
    "cxxppflags": "cxxflags",
    "asppflags": "asflags",
}

# Flag category layered onto each tool role ('ar' takes none).
# ldflags is composed and exposed on the Toolchain for consumers only.
ROLE_FLAG_CATEGORY: dict[str, str] = {
    "cc": "cflags",
    "cpp": "cppflags",
    "cxx": "cxxflags",
    "cxxpp": "cxxppflags",
    "as": "asflags",
    "aspp": "asppflags",
    "ld": "cxxldflags",
}

LINKER_ROLES: frozenset[str] = frozenset(["ld"])
ARCHIVER_ROLES: frozenset[str] = frozenset(["ar"])


def compiler_flags(
    sdk_path: Path | str,
    architecture: str,
    min_version: str,
    platform: ApplePlatform,
) -> list[str]:
    """Get the mandatory flags for a compiler, preprocessor or assembler.

    Example:
        >>> compiler_flags("iPhoneOS8.0.sdk", "armv7", "7.0", IPHONEOS)
        ['-isysroot', 'iPhoneOS8.0.sdk', '-arch', 'armv7', '-mios-version-min=7.0']
    """
    return [
        "-isysroot",
        str(sdk_path),
        "-arch",
        architecture,
        platform.min_version_flag(min_version),
    ]


def linker_flags(
    sdk_path: Path | str,
    architecture: str,
    min_version: str,
    platform: ApplePlatform,
) -> list[str]:
    """Get the mandatory flags for the linker driver.

    Simulator links need the minimum version spelled out; device links
    do not carry it.
    """
    flags = ["-isysroot", str(sdk_path), "-arch", architecture]
    if platform.is_simulator:
        flags.append(platform.min_version_flag(min_version))
    return flags


def compose_flag_categories(
    overrides: ConfigOverrides | None = None,
) -> dict[str, list[str]]:
    """Compose every flag category from user overrides.

    Args:
        overrides: User overrides; None means no overrides.

    Returns:
        Mapping of each name in FLAG_CATEGORIES to its flag list.
    """
    if overrides is None:
        overrides = ConfigOverrides()

    categories: dict[str, list[str]] = {}
    for category in FLAG_CATEGORIES:
        base = PREPROCESSOR_BASE_CATEGORY.get(category)
        flags = list(categories[base]) if base else []
        flags.extend(overrides.get(category))
        categories[category] = flags
    return categories


def compose_tool_flags(
    role: str,
    sdk_path: Path | str,
    architecture: str,
    min_version: str,
    platform: ApplePlatform,
    categories: dict[str, list[str]],
) -> list[str]:
    """Compose the full flag list for one tool role.

    Mandatory flags come first, in fixed order, followed by the role's
    flag category from `categories`.

    Args:
        role: Tool role ('cc', 'cxx', 'ld', 'ar', ...).
        sdk_path: SDK sysroot.
        architecture: Target architecture.
        min_version: Minimum deployment version.
        platform: Target platform variant.
        categories: Result of compose_flag_categories().

    Returns:
        Flags for the role. The archiver gets none.
    """
    if role in ARCHIVER_ROLES:
        return []

    if role in LINKER_ROLES:
        flags = linker_flags(sdk_path, architecture, min_version, platform)
    else:
        flags = compiler_flags(sdk_path, architecture, min_version, platform)

    category = ROLE_FLAG_CATEGORY.get(role)
    if category is not None:
        flags.extend(categories.get(category, []))
    return flags
