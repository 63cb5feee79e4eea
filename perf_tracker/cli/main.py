"""Command-line helpers for timing shell commands."""

from __future__ import annotations

import argparse
import subprocess
from typing import List

from ..config import settings
from ..registry import TimingRegistry
from ..report import DEFAULT_TITLE, locale_grouping
from ..resolution import Resolution
from ..utils.logging_utils import get_logger

LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perf-tracker", description="Time named sections and print a summary table"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run_parser = sub.add_parser("run", help="Run shell commands and report their runtimes")
    run_parser.add_argument("commands", nargs="+", help="Shell commands, run in order")
    run_parser.add_argument(
        "--resolution",
        type=Resolution.parse,
        default=None,
        help="s, ms, us or ns (default: config value)",
    )
    run_parser.add_argument("--title", type=str, default=DEFAULT_TITLE, help="Report title")
    run_parser.add_argument(
        "--width", type=int, default=None, help="Table width (default: config value)"
    )
    run_parser.add_argument(
        "--locale",
        action="store_true",
        help="Group digits with the host locale instead of commas",
    )

    sub.add_parser("settings", help="Show the effective configuration")

    return parser


def _run_commands(args: argparse.Namespace) -> int:
    formatter = locale_grouping() if args.locale else None
    registry = TimingRegistry(formatter=formatter, width=args.width)
    exit_code = 0
    for command in args.commands:
        section_id = registry.begin(command, args.resolution)
        completed = subprocess.run(command, shell=True)
        registry.end(section_id)
        if completed.returncode != 0:
            LOGGER.warning("Command %r exited with %d", command, completed.returncode)
            if exit_code == 0:
                exit_code = completed.returncode
    registry.show(args.title)
    return exit_code


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        return _run_commands(args)

    if args.command == "settings":
        print(f"table_width: {settings.table_width}")
        print(f"default_resolution: {settings.default_resolution.suffix}")
        print(f"allow_repeat_end: {settings.allow_repeat_end}")
        print(f"use_locale: {settings.use_locale}")
        print(f"log_level: {settings.log_level}")
        return 0

    parser.error("Unknown command")


if __name__ == "__main__":
    raise SystemExit(main())
