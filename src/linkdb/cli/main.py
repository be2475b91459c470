# Copyright 2026 LinkDB Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the linkdb command-line interface."""

import argparse
import datetime
import sys
from pathlib import Path

from linkdb.cli.console import ConsoleSink
from linkdb.cli.epoch import epoch_seconds, parse_date_argument
from linkdb.config.logging import configure_logging
from linkdb.config.settings import ColorMode, ConfigError, LinkDbConfig, find_config, load_config
from linkdb.parser.parser import LinkDbFileError, parse_file

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the linkdb CLI."""
    parser = argparse.ArgumentParser(
        prog="linkdb",
        description="linkdb - bookmark file checker",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON lines")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check linkdb file syntax",
        description="Scan a linkdb file and report duplicate tags, duplicate links and malformed commands.",
    )
    check_parser.add_argument("file", help="Path to the linkdb file")
    check_parser.add_argument("-a", "--all", action="store_true", help="Perform all checks")
    check_parser.add_argument("-dt", "--duplicate-tags", action="store_true", help="Check duplicate tags")
    check_parser.add_argument("-dl", "--duplicate-links", action="store_true", help="Check duplicate links")
    check_parser.add_argument(
        "--config",
        default=None,
        help="Path to a .linkdb.yaml config file (default: the one next to FILE, if present)",
    )

    # epoch subcommand
    epoch_parser = subparsers.add_parser(
        "epoch",
        help="Calculate dates with respect to Unix epoch",
        description="Print the seconds between the Unix epoch and midnight of a date.",
    )
    epoch_parser.add_argument(
        "date",
        nargs="?",
        type=parse_date_argument,
        default=None,
        help="Date as YYYY-MM-DD or YYYYMMDD (default: today)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(verbose=args.verbose, log_json=args.log_json)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "epoch":
        return _cmd_epoch(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    file_path = Path(args.file)

    config_path = Path(args.config) if args.config is not None else find_config(file_path.resolve())
    config = LinkDbConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.all or args.duplicate_tags or args.duplicate_links:
        report_tags = args.all or args.duplicate_tags
        report_links = args.all or args.duplicate_links
    else:
        report_tags = config.check_duplicate_tags
        report_links = config.check_duplicate_links

    sink = ConsoleSink(
        report_duplicate_tags=report_tags,
        report_duplicate_links=report_links,
        color=_use_color(config.color),
    )
    try:
        result = parse_file(file_path, sink, report_stray_lines=config.report_stray_lines)
    except LinkDbFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Counts: Tags={result.tag_count}; Links={result.link_count}")
    return 1 if sink.error_count else 0


def _cmd_epoch(args: argparse.Namespace) -> int:
    """Handle the epoch subcommand."""
    value = args.date if args.date is not None else datetime.date.today()
    print(f"Epoch time for {value.isoformat()} is {epoch_seconds(value)}")
    return 0


def _use_color(mode: ColorMode) -> bool:
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return sys.stdout.isatty()
