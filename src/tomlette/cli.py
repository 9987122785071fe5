"""Command-line entry point: parse a TOML file and print its structure.

Provides the ``tomlette`` console script via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pydantic import ValidationError

from .config import ParserConfig
from .errors import TomlSyntaxError
from .getter import lookup
from .logging_utils import configure_logging
from .parser import loads
from .printer import format_value, print_table, type_name

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tomlette", description="Parse a TOML file and print its structure"
    )
    parser.add_argument("path", help="Path to the TOML file")
    parser.add_argument("--get", metavar="KEY", help="Print only the value at a dotted key")
    parser.add_argument("--max-depth", type=int, help="Maximum nesting depth")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    overrides = {} if args.max_depth is None else {"max_depth": args.max_depth}
    try:
        config = ParserConfig(**overrides)
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        with open(args.path, encoding="utf-8") as fh:
            contents = fh.read()
    except OSError as exc:
        logger.debug("cannot read %s: %s", args.path, exc)
        print(f"Failed to open file: {args.path}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"File is not valid UTF-8: {args.path} ({exc.reason} at byte {exc.start})", file=sys.stderr)
        return 1

    try:
        root = loads(contents, config)
    except TomlSyntaxError as exc:
        print(f"Error parsing TOML: {exc}", file=sys.stderr)
        return 1

    if args.get is not None:
        value = lookup(root, args.get)
        if value is None:
            print(f"Key not found: {args.get}", file=sys.stderr)
            return 1
        print(f"{args.get} = {format_value(value)} ({type_name(value)})")
        return 0

    print("Parsed TOML structure:")
    print("====================")
    print_table(root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
