"""Bitwise operators and single-bit queries."""

from __future__ import annotations

import argparse
import sys
from typing import NamedTuple


class _BitResults(NamedTuple):
    bitwise_or: int
    bitwise_xor: int
    bitwise_and: int
    shifted_right: int
    shifted_left: int


def bit_operations(a, b):
    """Return a|b, a^b, a&b, and ``a`` shifted right and left by two."""
    return _BitResults(a | b, a ^ b, a & b, a >> 2, a << 2)


def is_bit_set(n, k):
    """Return True if bit ``k`` (counting from 1 at the lowest bit) of ``n`` is set."""
    if k < 1:
        raise ValueError("bit position must be at least 1")
    return (n >> (k - 1)) & 1 == 1


def main(argv=None):
    """Read N and K from the arguments or standard input and report bit K of N."""
    parser = argparse.ArgumentParser(description="Report whether bit K of N is set.")
    parser.add_argument("numbers", nargs="*", metavar="INT", help="N then K")
    args = parser.parse_args(argv)

    tokens = args.numbers if len(args.numbers) >= 2 else sys.stdin.read().split()
    try:
        n, k = (int(token) for token in tokens[:2])
        answer = is_bit_set(n, k)
    except ValueError as exc:
        print(f"error: expected two integers N and K ({exc})", file=sys.stderr)
        return 1
    print("set haiii" if answer else "not set")
    return 0