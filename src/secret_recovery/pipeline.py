# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Decode, select and reconstruct in one call."""

from __future__ import annotations

import logging
from typing import Any

from .loader import parse_instance
from .models import ProblemInstance
from .reconstruct import reconstruct, select_points

_logger = logging.getLogger(__name__)


def solve(instance: ProblemInstance) -> int:
    """Return the secret encoded by ``instance`` using its first ``k`` shares."""
    points = instance.decoded_points()
    _logger.info("reconstructing with threshold k=%d from %d shares", instance.k, len(points))
    selected = select_points(points, instance.k)
    _logger.debug("selected abscissae: %s", [p.x for p in selected])
    return reconstruct(selected, instance.k)


def solve_document(data: Any) -> int:
    return solve(parse_instance(data))


__all__ = ["solve", "solve_document"]
