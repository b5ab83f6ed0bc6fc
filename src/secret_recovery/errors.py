# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Error kinds raised while decoding shares and reconstructing secrets."""

from __future__ import annotations

from typing import Hashable


class SecretRecoveryError(ValueError):
    """Base class for every failure surfaced by :mod:`secret_recovery`."""


class DecodeError(SecretRecoveryError):
    """A share value could not be decoded from its stated base."""


class InvalidBase(DecodeError):
    def __init__(self, base: object, *, minimum: int = 2, maximum: int = 36) -> None:
        super().__init__(f"Base {base!r} is outside [{minimum}, {maximum}]")
        self.base = base
        self.minimum = minimum
        self.maximum = maximum


class InvalidDigit(DecodeError):
    def __init__(self, char: str, position: int) -> None:
        if char:
            message = f"Invalid character {char!r} at position {position}"
        else:
            message = "Digit string is empty"
        super().__init__(message)
        self.char = char
        self.position = position


class DigitOutOfRange(InvalidDigit):
    """A recognised digit whose value is not below the base."""

    def __init__(self, char: str, digit: int, base: int, position: int) -> None:
        DecodeError.__init__(self, f"Digit {char!r} ({digit}) at position {position} is invalid for base {base}")
        self.char = char
        self.digit = digit
        self.base = base
        self.position = position


class ReconstructionError(SecretRecoveryError):
    """The point set cannot determine an integer secret."""


class InsufficientPoints(ReconstructionError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Need {required} points, got {available}")
        self.required = required
        self.available = available


class SingularInterpolation(ReconstructionError):
    """Two selected points share an abscissa."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate abscissa x={x}")
        self.x = x


DuplicateAbscissa = SingularInterpolation


class NonIntegerResult(ReconstructionError):
    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(f"Interpolated value {numerator}/{denominator} is not an integer")
        self.numerator = numerator
        self.denominator = denominator


class InvalidInstance(SecretRecoveryError):
    """The problem document is structurally malformed."""

    def __init__(self, message: str, *, field: Hashable | None = None) -> None:
        super().__init__(message if field is None else f"{field}: {message}")
        self.field = field


__all__ = [
    "SecretRecoveryError",
    "DecodeError",
    "InvalidBase",
    "InvalidDigit",
    "DigitOutOfRange",
    "ReconstructionError",
    "InsufficientPoints",
    "SingularInterpolation",
    "DuplicateAbscissa",
    "NonIntegerResult",
    "InvalidInstance",
]
