from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from . import config
from .api import evaluate, simplify_expression, solve_equation, tokenize_expression
from .config import VERSION
from .logging_config import setup_logging
from .parser import parse_text
from .types import MathError

logger = logging.getLogger(__name__)


def _print_result(data: dict[str, Any], output_format: str) -> None:
    if output_format == "json":
        print(json.dumps(data))
        return
    if not data.get("ok"):
        print(f"Error: {data.get('error')}")
        return
    line = data.get("result", "")
    if data.get("verified") is False:
        line += "  (unverified)"
    print(line)


def _choose_action(text: str) -> tuple[str, str | None]:
    """Pick what to do with a formula when no action flag is given."""
    try:
        ast = parse_text(text)
    except MathError:
        # Let the evaluation path report the error
        return "evaluate", None
    if ast.is_equation and ast.variable_count == 1:
        return "solve", ast.variables[0]
    if ast.variable_count == 0 and not ast.is_equation:
        return "evaluate", None
    return "simplify", None


def run(text: str, args: argparse.Namespace, output_format: str) -> int:
    if args.tokens:
        action, variable = "tokens", None
    elif args.solve:
        action, variable = "solve", args.solve
    elif args.simplify:
        action, variable = "simplify", None
    else:
        action, variable = _choose_action(text)
    logger.debug("Running %s on %r", action, text)

    if action == "tokens":
        result = tokenize_expression(text)
    elif action == "solve":
        result = solve_equation(text, variable)
    elif action == "simplify":
        result = simplify_expression(text)
    else:
        result = evaluate(text)

    data = result.to_dict()
    _print_result(data, output_format)
    return 0 if result.ok else 1


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the muxt CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="muxt")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate, simplify or solve one formula and exit",
        dest="eval_expr",
    )
    parser.add_argument(
        "--solve",
        type=str,
        metavar="VAR",
        help="Solve the equation for this single-letter variable",
    )
    parser.add_argument(
        "--simplify", action="store_true", help="Simplify instead of evaluating"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token sequence only"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--trace", action="store_true", help="Log every evaluation step at DEBUG level"
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file, trace=args.trace)

    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.version:
        print(VERSION)
        return 0

    text = (args.eval_expr or "").strip()
    if not text:
        print("Error: Empty input. Pass a formula with -e/--eval.")
        return 1
    return run(text, args, args.format)


if __name__ == "__main__":
    sys.exit(main_entry())
