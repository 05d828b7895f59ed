"""Chaldean numerology: digit-sum reduction and symbol scoring.

Two reduction modes exist and callers pick one explicitly:

- ``reduce`` keeps the master numbers 11, 22 and 33;
- ``reduce_forced`` always ends on a single digit.

``value_of`` scores every space-delimited token on its own before summing,
then re-reduces the running total after each input string. Because of that
two-level reduction, ``value_of(["2026 01 09"])`` is 11 while
``value_of(["20260109"])`` is 2.
"""

from __future__ import annotations

MASTER_NUMBERS: frozenset[int] = frozenset({11, 22, 33})

CHALDEAN_VALUES: dict[str, int] = {
    "A": 1, "I": 1, "J": 1, "Q": 1, "Y": 1,
    "B": 2, "K": 2, "R": 2,
    "C": 3, "G": 3, "L": 3, "S": 3,
    "D": 4, "M": 4, "T": 4,
    "E": 5, "H": 5, "N": 5, "X": 5,
    "U": 6, "V": 6, "W": 6,
    "O": 7, "Z": 7,
    "F": 8, "P": 8,
}


def _digit_sum(n: int) -> int:
    total = 0
    while n:
        total += n % 10
        n //= 10
    return total


def reduce(n: int) -> int:
    """Reduce to 1-9, stopping early on a master number."""
    while n > 9 and n not in MASTER_NUMBERS:
        n = _digit_sum(n)
    return n


def reduce_forced(n: int) -> int:
    """Reduce to a single digit, collapsing master numbers too."""
    while n > 9:
        n = _digit_sum(n)
    return n


def is_master(n: int) -> bool:
    return n in MASTER_NUMBERS


def char_value(char: str) -> int:
    """Score one character: digits count as themselves, letters by the Chaldean table."""
    if char.isdigit() and char.isascii():
        return int(char)
    return CHALDEAN_VALUES.get(char.upper(), 0)


def raw_value(text: str) -> int:
    """Unreduced score of a string."""
    return sum(char_value(c) for c in text)


def token_value(token: str) -> int:
    """Score a single space-free token, preserving master numbers."""
    if token in ("11", "22", "33"):
        return int(token)
    return reduce(raw_value(token))


def value_of(symbols: list[str]) -> int:
    """Numerology value of a list of strings.

    Each string is split on spaces and every token is scored independently.
    The running total is re-reduced (master-preserving) after each string.
    """
    total = 0
    for symbol in symbols:
        tokens_sum = sum(token_value(token) for token in symbol.split(" "))
        total = token_value(str(total + tokens_sum))
    return total
