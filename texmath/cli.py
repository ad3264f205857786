"""Translate Python expressions into LaTeX math markup."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .errors import TranslationError
from .notation import DEFAULT_NOTATION, NotationTable
from .python_frontend import parse_expression
from .translator import Translator


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="texmath", description=__doc__)
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Python expressions to translate. Use '-' to read one expression"
        " per line from standard input.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read one expression per line from this file",
    )
    parser.add_argument(
        "--notation",
        type=Path,
        default=None,
        help="JSON file with extra symbols and functions layered over the defaults",
    )
    parser.add_argument(
        "--show-scope",
        action="store_true",
        help="Print the scope chain built for each expression",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def collect_expressions(args: argparse.Namespace) -> List[str]:
    expressions: List[str] = []
    for expression in args.expressions:
        if expression == "-":
            expressions.extend(_non_blank(sys.stdin))
        else:
            expressions.append(expression)
    if args.input is not None:
        if not args.input.exists():
            raise SystemExit(f"missing input file: {args.input}")
        expressions.extend(_non_blank(args.input.read_text("utf-8").splitlines()))
    if not expressions:
        raise SystemExit("no expressions given")
    return expressions


def load_notation(path: Optional[Path]) -> NotationTable:
    if path is None:
        return DEFAULT_NOTATION
    if not path.exists():
        raise SystemExit(f"missing notation file: {path}")
    try:
        return NotationTable.load(path)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError as well
        raise SystemExit(f"invalid notation file {path}: {exc}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    translator = Translator(load_notation(args.notation))
    for expression in collect_expressions(args):
        try:
            tree = parse_expression(expression)
            if args.show_scope:
                print(translator.scope_for(tree).describe())
            result = translator.translate(tree)
        except TranslationError as exc:
            raise SystemExit(f"error: {expression}: {exc}") from None
        logger.debug("translated %r", expression)
        print(result.to_text())
    return 0


def _non_blank(lines: Iterable[str]) -> List[str]:
    return [line.strip() for line in lines if line.strip()]


if __name__ == "__main__":
    sys.exit(main())
