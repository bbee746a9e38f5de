"""CLI entrypoint for skillcheck."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillcheck import __version__
from skillcheck.constants.branding import CLI_DESCRIPTION, SUCCESS_MESSAGE_TEMPLATE
from skillcheck.exceptions import CollectionNotFoundError, ConfigError
from skillcheck.scanner import validate_collection

EXIT_OK: int = 0
EXIT_VIOLATIONS: int = 1
EXIT_USAGE: int = 2


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillcheck",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate the metadata block of every skill document")
    validate.add_argument("path", type=Path, help="Collection root directory")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument("-q", "--quiet", action="store_true", help="Print nothing when all documents are valid")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show discovery and per-file diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.command != "validate":
        parser.error(f"Unsupported command: {args.command}")

    try:
        report = validate_collection(args.path, config_path=args.config)
    except CollectionNotFoundError as exc:
        print(f"Path error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if not report.ok:
        for line in report.format_lines():
            print(line, file=sys.stderr)
        return EXIT_VIOLATIONS

    if not args.quiet:
        print(SUCCESS_MESSAGE_TEMPLATE.format(count=report.files_checked))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
