"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bird_rarities import __version__
from bird_rarities.config import get_settings
from bird_rarities.flows.rarities import find_rarities


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bird-rarities",
        description="Report bird species observed exactly once in the US, overall and per year",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the reports (default: output_dir from settings)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="Observation CSV file(s) to merge",
    )
    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Run the pipeline over the given files."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    result = find_rarities(list(args.files), output_dir=args.output_dir)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    data = result.data or {}
    print(f"Success: {result.message}")
    print(f"  Files read: {len(data.get('files_read', []))}")
    print(f"  Files skipped: {len(data.get('files_skipped', []))}")
    print(f"  Merged rows: {data.get('merged_rows', 0)}")
    print(f"  US observations: {data.get('us_observations', 0)}")
    print(f"  Overall report: {data.get('overall_report')}")
    print(f"  Yearly report: {data.get('yearly_report')}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.files:
        parser.print_usage(sys.stderr)
        print("Error: at least one observation file is required.", file=sys.stderr)
        return 1

    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
