# SPDX-License-Identifier: MIT
"""Tests for applecxx CLI."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from applecxx.cli import main, setup_logging

pytestmark = pytest.mark.skipif(
    sys.platform == "win32", reason="fake SDK tools rely on POSIX permissions"
)


def make_tool(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)


@pytest.fixture
def fake_sdk(tmp_path: Path) -> dict[str, Path]:
    """Create a minimal Xcode-like developer directory."""
    developer = tmp_path / "Developer"
    toolchain = developer / "Toolchains" / "XcodeDefault.xctoolchain"
    platform = developer / "Platforms" / "iPhoneOS.platform"
    sdk = platform / "Developer" / "SDKs" / "iPhoneOS8.0.sdk"
    sdk.mkdir(parents=True)
    make_tool(toolchain / "usr" / "bin" / "clang")
    make_tool(toolchain / "usr" / "bin" / "clang++")
    make_tool(platform / "Developer" / "usr" / "bin" / "ar")
    return {
        "developer": developer,
        "toolchain": toolchain,
        "platform": platform,
        "sdk": sdk,
    }


def resolve_args(fake_sdk: dict[str, Path], *extra: str) -> list[str]:
    return [
        "resolve",
        "--platform",
        "iphoneos",
        "--sdk-name",
        "iphoneos8.0",
        "--build-version",
        "12A365",
        "--min-version",
        "7.0",
        "--developer-dir",
        str(fake_sdk["developer"]),
        "--toolchain",
        str(fake_sdk["toolchain"]),
        "--platform-path",
        str(fake_sdk["platform"]),
        "--sdk-path",
        str(fake_sdk["sdk"]),
        *extra,
    ]


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_normal(self) -> None:
        """Test normal logging setup."""
        # Just ensure it doesn't crash
        setup_logging(verbose=False, debug=False)

    def test_setup_logging_verbose(self) -> None:
        """Test verbose logging setup."""
        setup_logging(verbose=True, debug=False)

    def test_setup_logging_debug(self) -> None:
        """Test debug logging setup."""
        setup_logging(verbose=False, debug=True)


class TestCLICommands:
    """Tests for CLI commands."""

    def test_applecxx_help(self) -> None:
        """Test applecxx --help."""
        result = subprocess.run(
            [sys.executable, "-m", "applecxx.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "applecxx" in result.stdout
        assert "platforms" in result.stdout
        assert "resolve" in result.stdout

    def test_applecxx_version(self) -> None:
        """Test applecxx --version."""
        result = subprocess.run(
            [sys.executable, "-m", "applecxx.cli", "--version"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "applecxx" in result.stdout

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that running without a command prints help and fails."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_platforms(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing platforms."""
        assert main(["platforms"]) == 0
        out = capsys.readouterr().out
        assert "iphoneos" in out
        assert "-mios-simulator-version-min" in out


class TestResolveCommand:
    """Tests for 'applecxx resolve'."""

    def test_text_output(
        self, fake_sdk: dict[str, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(resolve_args(fake_sdk, "--arch", "armv7")) == 0
        out = capsys.readouterr().out
        assert "[iphoneos8.0-armv7]" in out
        assert "-mios-version-min=7.0" in out
        assert str(fake_sdk["toolchain"] / "usr" / "bin" / "clang") in out

    def test_json_output(
        self, fake_sdk: dict[str, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(resolve_args(fake_sdk, "--arch", "armv7", "--json")) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 1
        assert data[0]["flavor"] == "iphoneos8.0-armv7"
        assert data[0]["build_version"] == "12A365"
        assert data[0]["tools"]["ar"]["path"] == str(
            fake_sdk["platform"] / "Developer" / "usr" / "bin" / "ar"
        )

    def test_default_architectures(
        self, fake_sdk: dict[str, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(resolve_args(fake_sdk, "--json")) == 0
        flavors = [tc["flavor"] for tc in json.loads(capsys.readouterr().out)]
        assert flavors == ["iphoneos8.0-armv7", "iphoneos8.0-arm64"]

    def test_config_overrides(
        self,
        fake_sdk: dict[str, Path],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = tmp_path / "flags.toml"
        config.write_text('[cxx]\ncflags = "-std=gnu11"\ncppflags = "-DCTHING"\n')
        args = resolve_args(fake_sdk, "--arch", "arm64", "--config", str(config), "--json")
        assert main(args) == 0
        data = json.loads(capsys.readouterr().out)[0]
        assert data["flags"]["cflags"] == ["-std=gnu11"]
        assert data["flags"]["cppflags"] == ["-std=gnu11", "-DCTHING"]
        assert data["tools"]["cc"]["flags"][-1] == "-std=gnu11"

    def test_missing_tool(
        self, fake_sdk: dict[str, Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        (fake_sdk["toolchain"] / "usr" / "bin" / "clang").unlink()
        assert main(resolve_args(fake_sdk, "--arch", "armv7")) == 1
        assert "Cannot find tool clang" in caplog.text

    def test_unknown_platform(
        self, fake_sdk: dict[str, Path], caplog: pytest.LogCaptureFixture
    ) -> None:
        args = resolve_args(fake_sdk)
        args[args.index("iphoneos")] = "amiga"
        assert main(args) == 1
        assert "unknown Apple platform" in caplog.text

    def test_missing_config(
        self,
        fake_sdk: dict[str, Path],
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        args = resolve_args(fake_sdk, "--config", str(tmp_path / "nope.toml"))
        assert main(args) == 1
        assert "config file not found" in caplog.text

    def test_config_is_directory(
        self,
        fake_sdk: dict[str, Path],
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        args = resolve_args(fake_sdk, "--config", str(tmp_path))
        assert main(args) == 1
        assert "cannot read config file" in caplog.text

    def test_config_not_utf8(
        self,
        fake_sdk: dict[str, Path],
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        config = tmp_path / "flags.toml"
        config.write_bytes(b'[cxx]\ncflags = "\xff\xfe"\n')
        assert main(resolve_args(fake_sdk, "--config", str(config))) == 1
        assert "UTF-8" in caplog.text
