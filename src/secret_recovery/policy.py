# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Limits applied while loading share documents.

Decoding and interpolation cost grow with the digit count of each share and
with the number of shares, so the loader refuses documents past these bounds
before any big-integer work starts. ``SECRET_RECOVERY_*`` environment
variables override the defaults; an unparsable value keeps the default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_level(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    # getLevelName() maps known names to ints and echoes unknown ones back
    return level if isinstance(logging.getLevelName(level), int) else default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Loader bounds and the CLI's default log level.

    ``max_digits``
        Longest accepted share value; bounds the size of each decoded ordinate.
    ``max_shares``
        Largest accepted ``n``; interpolation is quadratic in the point count.
    ``max_document_bytes``
        Largest document read from disk or handed to :func:`loads`.
    ``log_level``
        Level the CLI configures when ``--verbose`` is not given.
    """

    max_digits: int = 4096
    max_shares: int = 1024
    max_document_bytes: int = 1024 * 1024
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    defaults = RecoveryPolicy()
    return RecoveryPolicy(
        max_digits=_env_int("SECRET_RECOVERY_MAX_DIGITS", defaults.max_digits),
        max_shares=_env_int("SECRET_RECOVERY_MAX_SHARES", defaults.max_shares),
        max_document_bytes=_env_int("SECRET_RECOVERY_MAX_DOC_BYTES", defaults.max_document_bytes),
        log_level=_env_level("SECRET_RECOVERY_LOG_LEVEL", defaults.log_level),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
