#!/usr/bin/env python3
"""
xlreports CLI — list and generate the bundled example reports.

USAGE:
  python -m xlreports.cli list                               # Registered reports
  python -m xlreports.cli generate no_styles                 # One report into ./reports
  python -m xlreports.cli generate no_styles with_styles --output ./out
  python -m xlreports.cli --log-level DEBUG generate border_presets
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from xlreports.config import LOG_LEVEL, OUTPUT_FOLDER
from xlreports.reports import REPORTS, get_report
from xlreports.utils.exceptions import UnknownReportError
from xlreports.utils.logging import LEVEL_NAMES, configure_logging


def cmd_list(args) -> int:
    """Print every registered report."""
    width = max(len(name) for name in REPORTS)
    for name, report_cls in REPORTS.items():
        print(f"  {name:<{width}}  {report_cls().get_description()}")
    return 0


def cmd_generate(args) -> int:
    """Generate the requested reports as .xlsx files."""
    try:
        reports = [get_report(name) for name in args.reports]
    except UnknownReportError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(f"Available: {', '.join(sorted(REPORTS))}", file=sys.stderr)
        return 2

    out = Path(args.output)
    for report in reports:
        path = report.save(out / f"{report.name}.xlsx")
        print(f"  Saved {report.name}: {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="xlreports — spreadsheet reports built from composable elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVEL_NAMES,
        default=LOG_LEVEL,
        help=f"Log level (default {LOG_LEVEL})",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    list_parser = subparsers.add_parser("list", help="List available reports")
    list_parser.set_defaults(func=cmd_list)

    generate_parser = subparsers.add_parser("generate", help="Generate report(s)")
    generate_parser.add_argument("reports", nargs="+", help="Report name(s)")
    generate_parser.add_argument(
        "--output", default=str(OUTPUT_FOLDER), help=f"Output directory (default: {OUTPUT_FOLDER})"
    )
    generate_parser.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
