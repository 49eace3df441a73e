"""Command-line front end reading whitespace-separated integers from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from algopractice.arrays import longest_passages
from algopractice.matching import allocate_apartments
from algopractice.numbers import prime_factors, sieve


class InputError(ValueError):
    """The input does not hold the integers a command expects."""


class _Tokens:
    """Reads integers one after another from a body of text."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def next_int(self, what: str) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError(f"missing {what}") from None
        try:
            return int(token)
        except ValueError:
            raise InputError(f"{what} must be an integer, got {token!r}") from None

    def ints(self, count: int, what: str) -> list[int]:
        if count < 0:
            raise InputError(f"count of {what} must be non-negative, got {count}")
        return [self.next_int(what) for _ in range(count)]


def _run_sieve(tokens: _Tokens) -> list[str]:
    n = tokens.next_int("upper bound")
    if n < 0:
        raise InputError(f"upper bound must be non-negative, got {n}")
    table = sieve(n)
    return [
        f"Number: {number} is {'prime' if table[number] else 'not prime'}"
        for number in range(1, n + 1)
    ]


def _run_factorize(tokens: _Tokens) -> list[str]:
    limit = tokens.next_int("table limit")
    number = tokens.next_int("number")
    return [" ".join(str(factor) for factor in prime_factors(number, limit))]


def _run_apartments(tokens: _Tokens) -> list[str]:
    apartment_count = tokens.next_int("number of apartments")
    applicant_count = tokens.next_int("number of applicants")
    tolerance = tokens.next_int("tolerance")
    apartments = tokens.ints(apartment_count, "apartment size")
    applicants = tokens.ints(applicant_count, "desired size")
    return [str(allocate_apartments(applicants, apartments, tolerance))]


def _run_traffic_lights(tokens: _Tokens) -> list[str]:
    street_length = tokens.next_int("street length")
    count = tokens.next_int("number of lights")
    lights = tokens.ints(count, "light position")
    return [" ".join(str(gap) for gap in longest_passages(street_length, lights))]


_COMMANDS = {
    "sieve": (_run_sieve, "mark each number from 1 to n as prime or not"),
    "factorize": (_run_factorize, "print the distinct prime factors of a number"),
    "apartments": (_run_apartments, "count applicants that can get an apartment"),
    "traffic-lights": (
        _run_traffic_lights,
        "longest passage without lights after each addition",
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algopractice",
        description="Solve a problem from integers given on standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen command on standard input; return the exit status."""
    args = _build_parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    try:
        lines = run(_Tokens(sys.stdin.read()))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())