"""Command line front end for the exercises."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass

from . import numbers, patterns, text


@dataclass
class Record:
    """A plain record of a number and a name."""

    num: int = 25
    name: str = "Harsh"


def _verdict(flag: bool, yes: str, no: str) -> str:
    return yes if flag else no


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="basicprograms")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("gcd", "lcm"):
        cmd = sub.add_parser(name)
        cmd.add_argument("a", type=int)
        cmd.add_argument("b", type=int)

    for name, default in (("even-odd", 5), ("factorial", 5)):
        sub.add_parser(name).add_argument("n", type=int, nargs="?", default=default)

    for name in ("prime", "leap", "armstrong", "fibonacci", "digit-sum", "patterns"):
        sub.add_parser(name).add_argument("n", type=int)

    sub.add_parser("vowels").add_argument("text")
    sub.add_parser("reverse").add_argument("text")
    sub.add_parser("palindrome").add_argument("word")

    record = sub.add_parser("record")
    record.add_argument("--num", type=int, default=Record.num)
    record.add_argument("--name", default=Record.name)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one exercise chosen by the first argument and print its result."""
    args = _build_parser().parse_args(argv)
    cmd = args.command

    if cmd == "gcd":
        print(math.gcd(args.a, args.b))
        print(numbers.gcd_brute(args.a, args.b))
        print(numbers.gcd_euclid(args.a, args.b))
    elif cmd == "lcm":
        print(numbers.lcm_brute(args.a, args.b))
        print(numbers.lcm(args.a, args.b))
    elif cmd == "even-odd":
        print(_verdict(numbers.is_even(args.n), "even", "Odd"))
    elif cmd == "factorial":
        print(numbers.factorial(args.n))
    elif cmd == "prime":
        print(_verdict(numbers.is_prime(args.n), "Is Prime", "Is Not Prime"))
    elif cmd == "leap":
        print(_verdict(numbers.is_leap_year(args.n), "Leap", "Not Leap"))
    elif cmd == "armstrong":
        print(_verdict(numbers.is_armstrong(args.n), "Armstrong", "Not Armstrong"))
    elif cmd == "fibonacci":
        print(" ".join(map(str, numbers.fibonacci(args.n))))
    elif cmd == "digit-sum":
        print(numbers.digit_sum(args.n))
    elif cmd == "patterns":
        print(patterns.all_patterns(args.n), end="")
    elif cmd == "vowels":
        vowels, consonants = text.count_vowels_consonants(args.text)
        print(vowels, consonants)
    elif cmd == "reverse":
        print(text.reverse(args.text))
    elif cmd == "palindrome":
        print(_verdict(text.is_palindrome(args.word), "Palindrome", "Not Palindrome"))
    elif cmd == "record":
        record = Record(args.num, args.name)
        print(record.num)
        print(record.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())