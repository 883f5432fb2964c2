"""Command line interface for codelock.

Usage:
    codelock verify [PATH ...] [--json]
    codelock info PATH [--json]
    codelock sections PATH [--json]

Global options:
    --config PATH       codelock.yaml to read (default: $CODELOCK_CONFIG or ./codelock.yaml)
    --log-level LEVEL   DEBUG, INFO, WARNING, ... (default: $CODELOCK_LOG_LEVEL or WARNING)
"""

import argparse
import sys

from codelock import __version__
from codelock.cli.files import cmd_info, cmd_sections, cmd_verify
from codelock.config import log_level
from codelock.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codelock",
        description="Verify and inspect locked generated files",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to codelock.yaml",
    )
    parser.add_argument(
        "--log-level", default=None,
        help="Log level (default: $CODELOCK_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # verify
    ver = sub.add_parser("verify", help="Check that generated files are untampered")
    ver.add_argument(
        "paths", nargs="*",
        help="Files to verify (default: files listed in codelock.yaml)",
    )
    ver.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # info
    info = sub.add_parser("info", help="Show lock details of a generated file")
    info.add_argument("path")
    info.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # sections
    sec = sub.add_parser("sections", help="List manual sections of a generated file")
    sec.add_argument("path")
    sec.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or log_level())

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "verify": cmd_verify,
        "info": cmd_info,
        "sections": cmd_sections,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
