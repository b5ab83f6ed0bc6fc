# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation at ``x = 0``.

``select_points``
    Sort shares by abscissa and pick the ``k`` used for interpolation. The
    default is the first ``k`` after sorting; this is a reproducibility
    policy, any ``k`` consistent points give the same polynomial.

``lagrange_at_zero``
    Evaluate the interpolant at zero as a :class:`fractions.Fraction`.

``reconstruct``
    Select, interpolate and insist on an integer result.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence, Tuple, Union

from .errors import InsufficientPoints, NonIntegerResult, SingularInterpolation
from .models import Point

PointLike = Union[Point, Tuple[int, int]]


def _as_point(item: PointLike) -> Point:
    if isinstance(item, Point):
        return item
    x, y = item
    return Point(x, y)


def _check_distinct(points: Iterable[Point]) -> None:
    seen: set[int] = set()
    for point in points:
        if point.x in seen:
            raise SingularInterpolation(point.x)
        seen.add(point.x)


def select_points(
    points: Iterable[PointLike],
    k: int,
    *,
    indices: Sequence[int] | None = None,
) -> list[Point]:
    """Return the ``k`` points to interpolate, sorted by ``x``.

    ``indices`` are positions in the sorted sequence; when omitted the first
    ``k`` are used. Every abscissa must be distinct, selected or not.
    """
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"Threshold must be a positive integer, got {k!r}")

    ordered = sorted((_as_point(p) for p in points), key=lambda p: p.x)
    if len(ordered) < k:
        raise InsufficientPoints(k, len(ordered))
    _check_distinct(ordered)

    if indices is None:
        chosen = ordered[:k]
    else:
        if len(indices) != k:
            raise ValueError(f"Expected {k} indices, got {len(indices)}")
        if len(set(indices)) != len(indices):
            raise ValueError("Indices must not repeat")
        for i in indices:
            if not 0 <= i < len(ordered):
                raise ValueError(f"Index {i} out of range for {len(ordered)} points")
        chosen = sorted((ordered[i] for i in indices), key=lambda p: p.x)

    return chosen


def lagrange_at_zero(points: Sequence[Point]) -> Fraction:
    """Sum ``y_i * prod(-x_j) / prod(x_i - x_j)`` exactly."""
    _check_distinct(points)
    total = Fraction(0)
    for i, pi in enumerate(points):
        num = 1
        den = 1
        for j, pj in enumerate(points):
            if i == j:
                continue
            num *= -pj.x
            den *= pi.x - pj.x
        total += Fraction(pi.y * num, den)
    return total


def reconstruct(
    points: Iterable[PointLike],
    k: int,
    *,
    indices: Sequence[int] | None = None,
) -> int:
    """Recover the constant term of the polynomial through ``k`` of ``points``."""
    chosen = select_points(points, k, indices=indices)
    value = lagrange_at_zero(chosen)
    if value.denominator != 1:
        raise NonIntegerResult(value.numerator, value.denominator)
    return value.numerator


__all__ = ["select_points", "lagrange_at_zero", "reconstruct"]
