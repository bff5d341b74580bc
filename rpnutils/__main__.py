import argparse
import logging
import sys

from .errors import RPNError
from .evaluator import UnknownTokenPolicy, calculate
from .infix2postfix import infix2postfix
from .postfix2infix import postfix2infix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpnutils",
        description="Evaluate integer arithmetic through Reverse Polish Notation.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--postfix",
        action="store_true",
        help="print the RPN form of each infix expression instead of its value",
    )
    mode.add_argument(
        "--infix",
        action="store_true",
        help="read each argument as RPN text and print it as parenthesized infix",
    )
    parser.add_argument(
        "--skip-unknown",
        action="store_true",
        help="ignore unknown tokens during evaluation instead of failing "
        "(not allowed with --postfix or --infix)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("expressions", nargs="+", metavar="EXPRESSION")
    return parser


def run(expression: str, args: argparse.Namespace) -> str:
    if args.postfix:
        return infix2postfix(expression)
    if args.infix:
        return postfix2infix(expression)
    policy = UnknownTokenPolicy.SKIP if args.skip_unknown else UnknownTokenPolicy.RAISE
    return str(calculate(expression, policy))


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.skip_unknown and (args.postfix or args.infix):
        parser.error("--skip-unknown only applies when evaluating")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    for expression in args.expressions:
        try:
            print(run(expression, args))
        except RPNError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
