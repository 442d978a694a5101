"""Formcheck CLI — rule linting and one-off validation.

Entry point registered as ``formcheck`` in ``pyproject.toml``::

    [project.scripts]
    formcheck = "formcheck.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``formcheck`` command."""
    parser = argparse.ArgumentParser(
        prog="formcheck",
        description="Formcheck — declarative rule-string validation for forms.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- formcheck check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Lint rule strings")
    check_parser.add_argument(
        "rules",
        nargs="+",
        metavar="FIELD=RULES",
        help='Field id and rule string (e.g. username="required|min:3")',
    )

    # -- formcheck validate -----------------------------------------------
    validate_parser = subparsers.add_parser("validate", help="Validate values against rules")
    validate_parser.add_argument(
        "--rule",
        action="append",
        default=[],
        metavar="FIELD=RULES",
        help="Field id and rule string (repeatable)",
    )
    validate_parser.add_argument(
        "--value",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Field id and submitted value (repeatable)",
    )
    validate_parser.add_argument(
        "--html",
        action="store_true",
        help="Print the rendered form instead of a plain report",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from formcheck.cli._check import run_check

        run_check(args)
    elif args.command == "validate":
        from formcheck.cli._validate import run_validate

        run_validate(args)


def parse_pairs(pairs: list[str], what: str) -> dict[str, str]:
    """Split ``FIELD=TEXT`` arguments into a dict, preserving order."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, text = pair.partition("=")
        if not sep or not key.strip():
            print(f"Error: expected FIELD={what}, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        parsed[key.strip()] = text
    return parsed
