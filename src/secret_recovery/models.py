# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Immutable data model shared by the loader and the reconstructor."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .base_decoder import decode
from .errors import InvalidInstance


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class EncodedPoint:
    """A share before its ordinate is decoded."""

    x: int
    base: int
    digits: str

    def decode(self) -> Point:
        return Point(self.x, decode(self.digits, self.base))


@dataclass(frozen=True)
class ProblemInstance:
    """``n`` encoded shares of a polynomial of degree ``k - 1``.

    ``shares`` is keyed by the share identifier from the input document. The
    identifier only has to be unique; ``EncodedPoint.x`` is the abscissa.
    """

    n: int
    k: int
    shares: Mapping[str, EncodedPoint] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (1 <= self.k <= self.n):
            raise InvalidInstance(f"expected 1 <= k <= n, got n={self.n}, k={self.k}", field="keys")
        if len(self.shares) != self.n:
            raise InvalidInstance(f"declared n={self.n} but {len(self.shares)} shares present", field="keys")
        object.__setattr__(self, "shares", MappingProxyType(dict(self.shares)))

    def decoded_points(self) -> list[Point]:
        """Decode every share and return the points sorted by ``x``."""
        return sorted((share.decode() for share in self.shares.values()), key=lambda p: p.x)


__all__ = ["Point", "EncodedPoint", "ProblemInstance"]
