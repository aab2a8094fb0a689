"""CLI entry point for converting text.

Usage:
    python -m typedtext "list[int]" "1, 2, 3"
    python -m typedtext "dict[str, decimal.Decimal]" "$(cat prices.properties)" --name prices
"""

import argparse
import sys

from typedtext.converter import convert
from typedtext.utils.types.names import resolve_type_expression


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert text into a value of the given type and print its repr.",
        prog="python -m typedtext",
    )
    parser.add_argument(
        "type",
        help="Target type expression (e.g., int, list[int], dict[str, myapp.Level])",
    )
    parser.add_argument("text", help="Text to convert")
    parser.add_argument(
        "-n",
        "--name",
        default="value",
        help="Field name used in error messages (default: value)",
    )

    args = parser.parse_args(argv)

    try:
        target_tp = resolve_type_expression(args.type)
        print(repr(convert(args.text, target_tp, args.name)))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
