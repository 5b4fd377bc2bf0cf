# SPDX-License-Identifier: MIT
"""Apple platform variants.

Each Apple SDK targets one platform variant: a device platform or the
matching simulator. Variants differ in the compiler flag that encodes the
minimum deployment version, and simulator variants additionally need that
flag when linking.

The table below is fixed at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

from applecxx.core.errors import UnknownPlatformError


@dataclass(frozen=True)
class ApplePlatform:
    """One Apple platform variant.

    Attributes:
        name: Canonical short name, as used in SDK names (e.g., 'iphoneos').
        min_version_flag_prefix: Compiler flag carrying the minimum
            deployment version (e.g., '-mios-version-min').
        is_simulator: True for simulator variants.
        default_architectures: Architectures built when none is requested.
    """

    name: str
    min_version_flag_prefix: str
    is_simulator: bool = False
    default_architectures: tuple[str, ...] = ()

    def min_version_flag(self, version: str) -> str:
        """Get the minimum version flag as a single token.

        Example:
            >>> IPHONEOS.min_version_flag("7.0")
            '-mios-version-min=7.0'
        """
        return f"{self.min_version_flag_prefix}={version}"

    def __str__(self) -> str:
        return self.name


MACOSX = ApplePlatform(
    "macosx",
    "-mmacosx-version-min",
    default_architectures=("x86_64", "arm64"),
)
IPHONEOS = ApplePlatform(
    "iphoneos",
    "-mios-version-min",
    default_architectures=("armv7", "arm64"),
)
IPHONESIMULATOR = ApplePlatform(
    "iphonesimulator",
    "-mios-simulator-version-min",
    is_simulator=True,
    default_architectures=("i386", "x86_64"),
)
WATCHOS = ApplePlatform(
    "watchos",
    "-mwatchos-version-min",
    default_architectures=("armv7k", "arm64_32"),
)
WATCHSIMULATOR = ApplePlatform(
    "watchsimulator",
    "-mwatchos-simulator-version-min",
    is_simulator=True,
    default_architectures=("i386", "x86_64"),
)
APPLETVOS = ApplePlatform(
    "appletvos",
    "-mtvos-version-min",
    default_architectures=("arm64",),
)
APPLETVSIMULATOR = ApplePlatform(
    "appletvsimulator",
    "-mtvos-simulator-version-min",
    is_simulator=True,
    default_architectures=("x86_64",),
)

_PLATFORMS: dict[str, ApplePlatform] = {
    p.name: p
    for p in (
        MACOSX,
        IPHONEOS,
        IPHONESIMULATOR,
        WATCHOS,
        WATCHSIMULATOR,
        APPLETVOS,
        APPLETVSIMULATOR,
    )
}


def apple_platforms() -> list[ApplePlatform]:
    """Get all known platform variants, in table order."""
    return list(_PLATFORMS.values())


def get_apple_platform(name: str | ApplePlatform) -> ApplePlatform:
    """Look up a platform variant by short name.

    Args:
        name: Short name (case-insensitive), or an ApplePlatform which is
              returned unchanged.

    Returns:
        The matching ApplePlatform.

    Raises:
        UnknownPlatformError: If the name is not in the table.
    """
    if isinstance(name, ApplePlatform):
        return name
    platform = _PLATFORMS.get(name.lower())
    if platform is None:
        raise UnknownPlatformError(name, known=list(_PLATFORMS))
    return platform
