"""
main.py — Factorial prompt
===========================
Asks for up to 100 numbers (enter 'q' to stop early), then prints the
factorial of each one in the order entered.

Usage:
    python -m factorial_prompt [--max-size 100] [--max-depth 500]
                               [--wrap] [--quiet]
"""

import argparse
import sys

from factorial_prompt.collector import MAX_SIZE, collect_numbers
from factorial_prompt.evaluator import MAX_DEPTH, OVERFLOWED, UNDEFINED, evaluate_all


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="factorial-prompt",
        description="Read numbers from standard input and print the factorial of each",
    )
    parser.add_argument("--max-size", type=positive_int, default=MAX_SIZE,
                        help="Maximum number of values to collect (default: %(default)s)")
    parser.add_argument("--max-depth", type=positive_int, default=MAX_DEPTH,
                        help="Largest n to evaluate recursively (default: %(default)s)")
    parser.add_argument("--wrap", action="store_true",
                        help="Print results as signed 32-bit integers, wrapping on overflow")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print [WARN] diagnostics to stderr")
    return parser


def report(numbers, out, err, wrap=False, quiet=False, max_depth=MAX_DEPTH):
    print("\nFactorials of the entered numbers:", file=out)
    for result in evaluate_all(numbers, max_depth):
        print(result.format(wrap=wrap), file=out)

        if quiet:
            continue
        if result.kind == UNDEFINED:
            print(f"[WARN] {result.reason}", file=err)
        elif result.kind == OVERFLOWED and wrap:
            print(f"[WARN] {result.reason}; printed value wrapped to {result.wrapped}", file=err)
        elif result.kind == OVERFLOWED:
            print(f"[WARN] {result.reason}", file=err)


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_depth > sys.getrecursionlimit() - 100:
        parser.error(f"--max-depth must stay below the interpreter recursion limit ({sys.getrecursionlimit()})")

    print(f"Enter up to {args.max_size} numbers (enter 'q' to quit):", file=stdout)
    try:
        numbers = collect_numbers(stdin, stdout, capacity=args.max_size)
    except KeyboardInterrupt:
        print("\nExiting", file=stdout)
        return 130

    report(numbers, stdout, stderr, wrap=args.wrap, quiet=args.quiet, max_depth=args.max_depth)
    return 0


if __name__ == "__main__":
    sys.exit(main())
