# SPDX-License-Identifier: MIT
"""Command-line interface for applecxx."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from applecxx.configure.config import ConfigOverrides, load_overrides
from applecxx.configure.platform import apple_platforms, get_apple_platform
from applecxx.configure.sdk import SdkPaths
from applecxx.core.errors import ApplecxxError
from applecxx.toolchains.apple import resolve_apple_toolchains
from applecxx.tools.toolchain import TOOL_ROLES, Toolchain

# Set up logging
logger = logging.getLogger("applecxx")


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def format_toolchain(tc: Toolchain) -> str:
    """Format a toolchain as human-readable text."""
    lines = [f"[{tc.flavor}]"]
    lines.append(f"  platform: {tc.platform.name}")
    lines.append(f"  sdk: {tc.sdk_name} ({tc.build_version})")
    lines.append(f"  min version: {tc.min_version}")
    for role in TOOL_ROLES:
        lines.append(f"  {role}: {' '.join(tc.get_tool(role).command_prefix)}")
    for category, flags in tc.flags.items():
        if flags:
            lines.append(f"  {category}: {' '.join(flags)}")
    for name, path in tc.optional_tools.items():
        lines.append(f"  {name}: {path}")
    return "\n".join(lines)


def cmd_platforms(args: argparse.Namespace) -> int:
    """List the known Apple platform variants."""
    setup_logging(args.verbose, args.debug)

    for platform in apple_platforms():
        kind = "simulator" if platform.is_simulator else "device"
        archs = ",".join(platform.default_architectures)
        print(
            f"{platform.name:<18} {kind:<10} "
            f"{platform.min_version_flag_prefix:<34} {archs}"
        )
    return 0


def cmd_resolve(args: argparse.Namespace) -> int:
    """Resolve toolchains and print them.

    Without --arch, resolves every default architecture of the platform.
    """
    setup_logging(args.verbose, args.debug)

    try:
        platform = get_apple_platform(args.platform)
        sdk_paths = SdkPaths(
            developer_path=args.developer_dir,
            toolchain_paths=args.toolchain or [],
            platform_path=args.platform_path,
            sdk_path=args.sdk_path,
        )

        if args.config:
            logger.info("Reading flag overrides from %s", args.config)
            overrides = load_overrides(args.config, section=args.section)
        else:
            overrides = ConfigOverrides()

        logger.debug("Tool search paths:")
        for path in sdk_paths.tool_search_paths():
            logger.debug("  %s", path)

        toolchains = resolve_apple_toolchains(
            platform,
            args.sdk_name,
            args.build_version,
            args.min_version,
            sdk_paths,
            overrides=overrides,
            architectures=args.arch or None,
        )
    except ApplecxxError as e:
        logger.error("%s", e)
        return 1

    for flavor in toolchains:
        logger.info("Resolved %s", flavor)

    if args.json:
        data = [tc.to_dict() for tc in toolchains.values()]
        print(json.dumps(data, indent=2))
    else:
        print("\n\n".join(format_toolchain(tc) for tc in toolchains.values()))
    return 0


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments to a parser."""
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")


def add_resolve_args(parser: argparse.ArgumentParser) -> None:
    """Add arguments describing the target and the SDK."""
    parser.add_argument(
        "--platform", required=True, help="Platform variant (e.g., iphoneos)"
    )
    parser.add_argument(
        "--sdk-name", required=True, help="SDK name (e.g., iphoneos8.0)"
    )
    parser.add_argument(
        "--build-version", default="", help="SDK build version (e.g., 12A365)"
    )
    parser.add_argument(
        "--min-version", required=True, help="Minimum deployment version"
    )
    parser.add_argument(
        "-a",
        "--arch",
        action="append",
        metavar="ARCH",
        help="Architecture (repeatable; default: the platform's defaults)",
    )
    parser.add_argument(
        "--developer-dir", required=True, type=Path, help="Developer directory"
    )
    parser.add_argument(
        "-t",
        "--toolchain",
        action="append",
        type=Path,
        metavar="DIR",
        help="Toolchain directory (repeatable, searched in order)",
    )
    parser.add_argument(
        "--platform-path", required=True, type=Path, help="Platform directory"
    )
    parser.add_argument("--sdk-path", required=True, type=Path, help="SDK sysroot")
    parser.add_argument("-c", "--config", type=Path, help="TOML flag override file")
    parser.add_argument(
        "--section",
        default="cxx",
        help="Config table holding flag overrides (default: cxx)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the applecxx CLI."""
    parser = argparse.ArgumentParser(
        prog="applecxx",
        description="Resolve Apple Clang toolchains for a platform, SDK and architecture.",
        epilog="Run 'applecxx <command> --help' for command-specific help.",
    )
    from applecxx import __version__

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # applecxx platforms
    platforms_parser = subparsers.add_parser(
        "platforms", help="List known Apple platform variants"
    )
    add_common_args(platforms_parser)
    platforms_parser.set_defaults(func=cmd_platforms)

    # applecxx resolve
    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve toolchains for an SDK"
    )
    add_common_args(resolve_parser)
    add_resolve_args(resolve_parser)
    resolve_parser.set_defaults(func=cmd_resolve)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    # Run the specified command
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
