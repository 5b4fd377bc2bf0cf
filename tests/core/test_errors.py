# SPDX-License-Identifier: MIT
"""Tests for applecxx.core.errors."""

from pathlib import Path

import pytest

from applecxx.core.errors import (
    ApplecxxError,
    ConfigFileError,
    ConfigureError,
    InvalidSdkPathsError,
    ToolNotFoundError,
    UnknownPlatformError,
)


class TestApplecxxError:
    def test_message(self):
        err = ApplecxxError("something failed")
        assert err.message == "something failed"
        assert str(err) == "something failed"


class TestToolNotFoundError:
    def test_message_names_tool(self):
        err = ToolNotFoundError("clang", [Path("a/usr/bin"), Path("b/usr/bin")])
        assert "Cannot find tool clang" in str(err)
        assert "a/usr/bin" in str(err)
        assert "b/usr/bin" in str(err)

    def test_attributes(self):
        err = ToolNotFoundError("ar", ["x"])
        assert err.tool == "ar"
        assert err.searched == ("x",)

    def test_no_directories(self):
        err = ToolNotFoundError("clang")
        assert str(err) == "Cannot find tool clang in []"

    def test_is_configure_error(self):
        assert issubclass(ToolNotFoundError, ConfigureError)
        with pytest.raises(ApplecxxError):
            raise ToolNotFoundError("ld")


class TestOtherErrors:
    def test_invalid_sdk_paths(self):
        err = InvalidSdkPathsError("sdk_path")
        assert err.field == "sdk_path"
        assert "sdk_path" in str(err)

    def test_unknown_platform_lists_known(self):
        err = UnknownPlatformError("beos", known=["macosx", "iphoneos"])
        assert err.name == "beos"
        assert "beos" in str(err)
        assert "macosx, iphoneos" in str(err)

    def test_config_file_error(self):
        err = ConfigFileError("flags.toml", "config file not found")
        assert str(err) == "flags.toml: config file not found"
        assert isinstance(err, ConfigureError)
