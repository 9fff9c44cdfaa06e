from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from native_platform import (
    Architecture,
    DataModel,
    OperatingSystem,
    OperatingSystemVersion,
    Platform,
    PlatformError,
    __version__,
    probe_platform,
)
from native_platform.config import AppConfig, ConfigError, find_config_path, load_app_config
from native_platform.ui import build_console, render_platform, report_error


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Describe the operating system, architecture and C data model of a platform",
        add_help=True,
    )
    parser.add_argument("--os", help='Operating system name to classify, e.g. "Linux" or "Mac OS X"')
    parser.add_argument("--os-version", help='Operating system version string, e.g. "6.1.0-13-amd64"')
    parser.add_argument("--arch", help='Architecture name to classify, e.g. "x86_64" or "armv7l"')
    parser.add_argument(
        "--data-model",
        choices=[model.value for model in DataModel],
        help="Data model (inferred from OS and architecture when omitted)",
    )
    parser.add_argument("--library", help="Also show the shared library file name for this library")
    parser.add_argument("--config", help="Path to config TOML file")
    parser.add_argument("--json", action="store_true", help="Print the description as JSON")
    parser.add_argument("--plain", action="store_true", help="Disable rich formatting")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    args = parser.parse_args(argv)
    if bool(args.os) != bool(args.arch):
        parser.error("--os and --arch must be given together.")
    if (args.os_version or args.data_model) and not args.os:
        parser.error("--os-version and --data-model require --os and --arch.")
    return args


def load_config(args: argparse.Namespace) -> AppConfig:
    cli_path = Path(args.config).expanduser() if args.config else None
    if cli_path and not cli_path.is_file():
        raise ConfigError(f"Config file not found: {cli_path}")

    return load_app_config(cli_path or find_config_path())


def resolve_platform(args: argparse.Namespace, config: AppConfig) -> Platform:
    """Build the platform described on the command line, or probe the host."""
    if not args.os:
        return probe_platform(config.host)

    return Platform(
        os=OperatingSystem.of(args.os),
        architecture=Architecture.of(args.arch),
        os_version=OperatingSystemVersion.of(args.os_version) if args.os_version else None,
        data_model=DataModel(args.data_model) if args.data_model else None,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"native-platform {__version__}")
        return 0

    try:
        config = load_config(args)
    except ConfigError as exc:
        report_error(f"Config error: {exc}")
        return 1

    try:
        platform = resolve_platform(args, config)
    except PlatformError as exc:
        report_error(f"Platform error: {exc}")
        return 1

    if args.json:
        payload = platform.describe()
        if args.library:
            payload["library_file"] = platform.os.map_library_file_name(args.library)
        print(json.dumps(payload, indent=2))
        return 0

    use_rich = config.ui.rich and not args.plain
    console = build_console(use_rich)
    render_platform(console, platform, use_rich, args.library)
    return 0


if __name__ == "__main__":
    sys.exit(main())
