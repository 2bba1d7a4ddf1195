"""Command line front end for the number routines and the butterfly pattern."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from numpatterns import arith, patterns

_DEFAULT_BUTTERFLY_SIZE = 4


def _cells(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def _bin_to_decimal(n: int) -> str:
    return f"{arith.bin_to_decimal(n)}\n"


def _decimal_to_binary(n: int) -> str:
    return f"{arith.decimal_to_binary(n)}\n"


def _fibonacci(n: int) -> str:
    return f"Fibonacci Series: {_cells(arith.fibonacci(n))}\n"


def _prime(n: int) -> str:
    verdict = "is a prime." if arith.is_prime(n) else "is not a prime."
    return f"{n} {verdict}\n"


def _primes(n: int) -> str:
    return f"{_cells(arith.primes_up_to(n))}\n"


def _power_of_two(n: int) -> str:
    return f"{int(arith.is_power_of_two_bitwise(n))}\n"


def _reverse(n: int) -> str:
    return f"{arith.reverse_digits(n)}\n"


def _butterfly(n: int) -> str:
    return patterns.render(patterns.butterfly(n))


# name -> (help text, prompt shown when no value is given, handler)
_COMMANDS: dict[str, tuple[str, str, Callable[[int], str]]] = {
    "bin2dec": (
        "convert a number written in binary digits to decimal",
        "Enter a Binary Number:\n",
        _bin_to_decimal,
    ),
    "dec2bin": (
        "write a decimal number in binary digits",
        "Enter a Number:",
        _decimal_to_binary,
    ),
    "fib": (
        "print the first N Fibonacci numbers",
        "Enter number of terms: ",
        _fibonacci,
    ),
    "prime": (
        "tell whether a number is prime",
        "Enter a number:\n",
        _prime,
    ),
    "primes": (
        "print every prime up to N",
        "Enter a number:\n",
        _primes,
    ),
    "pow2": (
        "print 1 if the number is a power of two, else 0",
        "Enter a Num:\n",
        _power_of_two,
    ),
    "reverse": (
        "reverse the decimal digits of a number",
        "Enter a Num:\n",
        _reverse,
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numpatterns",
        description="Small number routines and text patterns.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (help_text, _prompt, _handler) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "value",
            nargs="?",
            type=int,
            help="the input number; asked for interactively when left out",
        )
    butterfly = commands.add_parser("butterfly", help="print a butterfly of stars")
    butterfly.add_argument(
        "size",
        nargs="?",
        type=int,
        default=_DEFAULT_BUTTERFLY_SIZE,
        help=f"number of rows in each half (default {_DEFAULT_BUTTERFLY_SIZE})",
    )
    return parser


def _prompt_for_int(parser: argparse.ArgumentParser, prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        text = input()
    except EOFError:
        parser.error("no number given")
    try:
        return int(text.strip())
    except ValueError:
        parser.error(f"not a whole number: {text.strip()!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one subcommand and print its result; returns the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "butterfly":
        print(_butterfly(args.size), end="")
        return 0

    _help, prompt, handler = _COMMANDS[args.command]
    value = args.value
    if value is None:
        value = _prompt_for_int(parser, prompt)
    print(handler(value), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())