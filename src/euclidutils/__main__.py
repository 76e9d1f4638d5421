"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface). Operands passed on the command line are
used as-is, missing ones are asked for interactively, or in non-interactive mode read as whitespace separated integers
from standard input. Each selected strategy prints one `gcd x y` line.

Typical usage example:

    euclidutils 240 46
    echo "240 46" | python -m euclidutils -n
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import euclidutils


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "a":
        HelpData(
            description="The first natural number.",
            format=int,
        ),
    "b":
        HelpData(
            description="The second natural number.",
            format=int,
        ),
    "method":
        HelpData(
            description="Strategy to compute with. 'both' runs the recursive, then the iterative strategy.",
            choices=["both", *euclidutils.STRATEGIES],
            default="both",
        ),
    "width":
        HelpData(
            description="Integer width in bits for operands and coefficients, or 'unbounded'.",
            choices=["8", "16", "32", "64", "unbounded"],
            default=str(euclidutils.DEFAULT_WIDTH),
        ),
}

needs = ("a", "b")
methods = {"both": ("recursive", "iterative")}

corep = argparse.ArgumentParser(prog="euclidutils",
                                description="Greatest common divisor and Bezout coefficients of two natural numbers.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {euclidutils.__version__}")
corep.add_argument("--non-interactive",
                   "-n",
                   action="store_true",
                   help="Enable non-interactive mode, missing operands are read from standard input")
corep.add_argument("a", nargs="?", type=help_dict["a"].format, help=help_dict["a"].description)
corep.add_argument("b", nargs="?", type=help_dict["b"].format, help=help_dict["b"].description)
corep.add_argument("--method",
                   "-m",
                   choices=help_dict["method"].choices,
                   default=help_dict["method"].default,
                   help=help_dict["method"].description)
corep.add_argument("--width",
                   "-w",
                   choices=help_dict["width"].choices,
                   default=help_dict["width"].default,
                   help=help_dict["width"].description)


def input_handler(arg: str, prntr: typing.Callable = print):
    """Ask for a value until it converts to the expected format."""
    helper_data = help_dict[arg]
    prntr(f"Please specify {arg}!")
    prntr("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ").strip()
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def stream_handler(missing: list[str], stream: typing.TextIO) -> dict[str, int]:
    """Read the missing operands as whitespace separated integers from `stream`.

    Args:
        missing: Names of the operands still missing, in order.
        stream: Text stream to read from.

    Returns:
        Mapping of operand name to parsed value. Empty without touching `stream` if nothing is missing.

    Raises:
        ValueError: If the stream runs out of tokens or a token is not an integer.
    """
    if not missing:
        return {}
    tokens = stream.read().split()
    if len(tokens) < len(missing):
        raise ValueError(f"Expected {len(missing)} integer(s) on standard input, got {len(tokens)}.")
    return {name: int(token) for name, token in zip(missing, tokens)}


def parse_width(width: str) -> None | int:
    if width == "unbounded":
        return None
    return int(width)


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not args.non_interactive:
            print(text)

    pspr("Welcome to Euclid Utils!\n")
    missing = [reqs for reqs in needs if getattr(args, reqs) is None]
    if not args.non_interactive:
        for reqs in needs:
            if reqs in missing:
                setattr(args, reqs, input_handler(reqs))
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
    elif missing:
        try:
            for reqs, value in stream_handler(missing, sys.stdin).items():
                setattr(args, reqs, value)
        except ValueError as exc:
            corep.error(str(exc))
    pspr("\nInput Complete! Executing...")
    width = parse_width(args.width)
    for method in methods.get(args.method, (args.method,)):
        try:
            g, x, y = euclidutils.extended_gcd(args.a, args.b, method, width)
        except ValueError as exc:
            corep.error(str(exc))
        pspr(f"{method.capitalize()}:")
        print(f"{g} {x} {y}")
    pspr("\nThank you for using Euclid Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
