from __future__ import annotations

import argparse
import logging
import sys

import toml
from pydantic import ConfigDict

from configr import dirs
from configr.errors import ConfigError
from configr.loader import resolve_config_path
from configr.logging import init_logging
from configr.models import LoggingSettings
from configr.templates import DefaultConfig

logger = logging.getLogger(__name__)


class RawConfig(DefaultConfig):
    """Accepts any TOML table; used to inspect a config file without knowing its model."""

    model_config = ConfigDict(extra="allow")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="configr", description="Locate and inspect application config files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: locate
    locate_parser = subparsers.add_parser("locate", help="Print the config path that would be tried first")
    locate_parser.add_argument("app_name", help="Application name, e.g. 'My App'")
    locate_parser.add_argument(
        "--user",
        action="store_true",
        help="Skip the system/local directory and use the OS user config directory",
    )

    # Command: show
    show_parser = subparsers.add_parser("show", help="Load the config file (creating it if missing) and print it")
    show_parser.add_argument("app_name", help="Application name, e.g. 'My App'")
    show_parser.add_argument(
        "--user",
        action="store_true",
        help="Skip the system/local directory and use the OS user config directory",
    )

    return parser


def _locate(args: argparse.Namespace) -> None:
    base_dir = dirs.user_config_dir() if args.user else dirs.system_or_local_dir()
    print(resolve_config_path(args.app_name, base_dir))


def _show(args: argparse.Namespace) -> None:
    config = RawConfig.load(args.app_name, force_user_dir=args.user)
    logger.info("config.loaded app_name=%s", args.app_name)
    sys.stdout.write(toml.dumps(config.model_dump(mode="json", exclude_none=True)))


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    init_logging(LoggingSettings(level=args.log_level))

    try:
        if args.command == "locate":
            _locate(args)
        elif args.command == "show":
            _show(args)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
