# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Positional decoding of share values written in bases 2 to 36.

``decode``
    Turn a digit string such as ``"aed7015a346d63"`` into an exact ``int``.

``encode``
    The inverse, used to build fixtures.
"""

from __future__ import annotations

from .errors import DigitOutOfRange, InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int) or not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(base, minimum=MIN_BASE, maximum=MAX_BASE)


def digit_value(char: str) -> int | None:
    """Map a single ASCII digit or letter to 0..35, ``None`` otherwise."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return None


def decode(digits: str, base: int) -> int:
    """Decode ``digits`` (most significant first) in ``base``."""
    _check_base(base)
    if not digits:
        raise InvalidDigit("", 0)

    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value is None:
            raise InvalidDigit(char, position)
        if value >= base:
            raise DigitOutOfRange(char, value, base, position)
        result = result * base + value
    return result


def encode(value: int, base: int) -> str:
    """Format a non-negative ``value`` in ``base`` using lowercase letters."""
    _check_base(base)
    if value < 0:
        raise ValueError("Only non-negative values can be encoded")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, base)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out))


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "encode", "digit_value"]
