# SPDX-License-Identifier: MIT
"""Custom exceptions for applecxx.

All applecxx exceptions inherit from ApplecxxError. Errors raised while
resolving a toolchain are configuration errors: they are never retried
and never degrade into a partial toolchain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ApplecxxError(Exception):
    """Base class for all applecxx exceptions.

    Attributes:
        message: The error message.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigureError(ApplecxxError):
    """Error while configuring a toolchain.

    Raised when tool detection fails or when the inputs describing
    the SDK are invalid.
    """


class ToolNotFoundError(ConfigureError):
    """Required tool was not found in any searched directory.

    Attributes:
        tool: The logical name of the tool that was not found.
        searched: The directories that were searched, in order.
    """

    def __init__(self, tool: str, searched: Sequence[Path | str] = ()) -> None:
        self.tool = tool
        self.searched = tuple(searched)
        dirs = ", ".join(str(d) for d in self.searched)
        super().__init__(f"Cannot find tool {tool} in [{dirs}]")


class InvalidSdkPathsError(ConfigureError):
    """An SDK path component is missing or empty.

    Attributes:
        field: The name of the offending component.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"SDK path component must not be empty: {field}")


class UnknownPlatformError(ConfigureError):
    """Platform name is not in the Apple platform table.

    Attributes:
        name: The requested platform name.
    """

    def __init__(self, name: str, known: Sequence[str] = ()) -> None:
        self.name = name
        message = f"unknown Apple platform: {name}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)


class ConfigFileError(ConfigureError):
    """Flag override configuration could not be read.

    Attributes:
        path: The configuration file path.
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")
