# SPDX-License-Identifier: MIT
"""User flag overrides.

Overrides come from the [cxx] table of a TOML file (or an equivalent
mapping already in memory). Each recognised key holds extra flags for
one flag category, either as a single whitespace-separated string or as
a list of tokens:

    [cxx]
    cflags = "-std=gnu11"
    cppflags = "-DCTHING"
    cxxflags = ["-std=c++11", "-stdlib=libc++"]
    cxxppflags = "-DCXXTHING"
"""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from applecxx.core.errors import ConfigFileError

# Flag categories that may be overridden, in display order.
FLAG_CATEGORIES: tuple[str, ...] = (
    "cflags",
    "cppflags",
    "cxxflags",
    "cxxppflags",
    "asflags",
    "asppflags",
    "ldflags",
    "cxxldflags",
    "arflags",
)

DEFAULT_SECTION = "cxx"


def _is_flag_value(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(t, str) for t in value)


def split_flags(value: str | Iterable[str]) -> tuple[str, ...]:
    """Split a configuration value into flag tokens.

    Strings are split on whitespace; quoting is not interpreted.
    Lists are taken token by token.

    Examples:
        >>> split_flags("-std=gnu11  -Wall")
        ('-std=gnu11', '-Wall')
        >>> split_flags(["-DFOO", "-O2"])
        ('-DFOO', '-O2')
    """
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(value)


@dataclass(frozen=True)
class ConfigOverrides:
    """Flag overrides, keyed by flag category.

    Categories that were not configured read as empty. The value is only
    consulted while a toolchain is being composed.
    """

    flags: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "flags",
            MappingProxyType(
                {
                    category: split_flags(value)
                    for category, value in self.flags.items()
                    if category in FLAG_CATEGORIES
                }
            ),
        )

    def get(self, category: str) -> tuple[str, ...]:
        """Get the override tokens for a category (empty if unset)."""
        return self.flags.get(category, ())

    def __bool__(self) -> bool:
        return any(self.flags.values())

    @classmethod
    def from_section(cls, section: Mapping[str, Any]) -> ConfigOverrides:
        """Build overrides from one configuration section.

        Unknown keys are ignored.
        """
        return cls(
            {
                key: value
                for key, value in section.items()
                if key in FLAG_CATEGORIES
            }
        )

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Mapping[str, Any]],
        section: str = DEFAULT_SECTION,
    ) -> ConfigOverrides:
        """Build overrides from a nested configuration mapping.

        Args:
            config: Mapping of section name to section contents.
            section: Section holding the flag overrides.

        Returns:
            Overrides from that section, or empty overrides if the
            section is absent.
        """
        return cls.from_section(config.get(section, {}))


def load_overrides(
    path: Path | str, section: str = DEFAULT_SECTION
) -> ConfigOverrides:
    """Load flag overrides from a TOML file.

    Args:
        path: Path to the TOML file.
        section: Table holding the flag overrides.

    Returns:
        The overrides found in the table.

    Raises:
        ConfigFileError: If the file is missing or is not valid TOML, or
            if the file cannot be read, or if the table holds a value that
            is neither a string nor a list of strings.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigFileError(path, "config file not found")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(path, f"invalid TOML: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigFileError(path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigFileError(
            path, f"cannot read config file: {e.strerror or e}"
        ) from e

    table = data.get(section, {})
    if not isinstance(table, dict):
        raise ConfigFileError(path, f"[{section}] must be a table")

    for key, value in table.items():
        if key in FLAG_CATEGORIES and not _is_flag_value(value):
            raise ConfigFileError(
                path, f"{section}.{key} must be a string or a list of strings"
            )

    return ConfigOverrides.from_section(table)
