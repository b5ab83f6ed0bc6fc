# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Recover the constant term of a polynomial from base-encoded shares."""

from .base_decoder import MAX_BASE, MIN_BASE, decode, encode
from .errors import (
    DecodeError,
    DigitOutOfRange,
    DuplicateAbscissa,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    InvalidInstance,
    NonIntegerResult,
    ReconstructionError,
    SecretRecoveryError,
    SingularInterpolation,
)
from .models import EncodedPoint, Point, ProblemInstance
from .reconstruct import lagrange_at_zero, reconstruct, select_points
from .pipeline import solve, solve_document

__version__ = "0.1.0"

__all__ = [
    "MIN_BASE",
    "MAX_BASE",
    "decode",
    "encode",
    "Point",
    "EncodedPoint",
    "ProblemInstance",
    "select_points",
    "lagrange_at_zero",
    "reconstruct",
    "solve",
    "solve_document",
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
