# SPDX-FileCopyrightText: 2025 Secret Recovery contributors
# SPDX-License-Identifier: MIT

"""Deserialize share documents into :class:`ProblemInstance` values.

Documents look like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Every key other than ``"keys"`` is a share identifier whose decimal value is
the abscissa. JSON and YAML encodings of the same structure are accepted.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml

from . import policy as policy_module
from .errors import InvalidInstance
from .models import EncodedPoint, ProblemInstance
from .policy import RecoveryPolicy

_logger = logging.getLogger(__name__)

DocumentFormat = Literal["json", "yaml"]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_YAML_SUFFIXES = {".yaml", ".yml"}


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidInstance(f"expected an integer, got {value!r}", field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    raise InvalidInstance(f"expected an integer, got {value!r}", field=field)


def _as_digits(value: Any, field: str, limits: RecoveryPolicy) -> str:
    if isinstance(value, bool) or value is None:
        raise InvalidInstance(f"expected a digit string, got {value!r}", field=field)
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise InvalidInstance(f"expected a digit string, got {value!r}", field=field)
    if len(value) > limits.max_digits:
        raise InvalidInstance(f"value longer than {limits.max_digits} digits", field=field)
    return value


def _parse_share(share_id: str, body: Any, limits: RecoveryPolicy) -> EncodedPoint:
    if not isinstance(body, Mapping):
        raise InvalidInstance("share must be a mapping with 'base' and 'value'", field=share_id)
    for required in ("base", "value"):
        if required not in body:
            raise InvalidInstance(f"missing '{required}'", field=share_id)
    return EncodedPoint(
        x=_as_int(share_id, "share id"),
        base=_as_int(body["base"], f"{share_id}.base"),
        digits=_as_digits(body["value"], f"{share_id}.value", limits),
    )


def parse_instance(data: Any, *, limits: RecoveryPolicy | None = None) -> ProblemInstance:
    """Map an already-deserialized document onto the data model."""
    limits = limits or policy_module.policy
    if not isinstance(data, Mapping):
        raise InvalidInstance("document must be a mapping")
    keys = data.get("keys")
    if not isinstance(keys, Mapping):
        raise InvalidInstance("missing 'keys' section with 'n' and 'k'", field="keys")
    if "n" not in keys or "k" not in keys:
        raise InvalidInstance("'keys' must define both 'n' and 'k'", field="keys")

    n = _as_int(keys["n"], "keys.n")
    k = _as_int(keys["k"], "keys.k")
    if n > limits.max_shares:
        raise InvalidInstance(f"n={n} exceeds the limit of {limits.max_shares} shares", field="keys.n")

    shares = {
        str(share_id): _parse_share(str(share_id), body, limits)
        for share_id, body in data.items()
        if share_id != "keys"
    }
    _logger.debug("parsed %d shares (n=%d, k=%d)", len(shares), n, k)
    return ProblemInstance(n=n, k=k, shares=shares)


def loads(text: str, *, fmt: DocumentFormat = "json", limits: RecoveryPolicy | None = None) -> ProblemInstance:
    """Parse a JSON or YAML document held in ``text``."""
    limits = limits or policy_module.policy
    try:
        size = len(text.encode("utf-8"))
    except UnicodeError as exc:
        raise InvalidInstance(f"document is not valid UTF-8 text: {exc}") from exc
    if size > limits.max_document_bytes:
        raise InvalidInstance(f"document larger than {limits.max_document_bytes} bytes")
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            raise ValueError(f"Unknown document format: {fmt!r}")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidInstance(f"cannot parse {fmt} document: {exc}") from exc
    return parse_instance(data, limits=limits)


def format_for(path: str | os.PathLike[str]) -> DocumentFormat:
    return "yaml" if Path(path).suffix.lower() in _YAML_SUFFIXES else "json"


def load_path(
    path: str | os.PathLike[str],
    *,
    fmt: DocumentFormat | None = None,
    limits: RecoveryPolicy | None = None,
) -> ProblemInstance:
    """Read a share document from disk, guessing the format from the suffix."""
    limits = limits or policy_module.policy
    source = Path(path)
    if source.stat().st_size > limits.max_document_bytes:
        raise InvalidInstance(f"{source} is larger than {limits.max_document_bytes} bytes")
    _logger.info("loading share document %s", source)
    try:
        text = source.read_text(encoding="utf-8")
    except UnicodeError as exc:
        raise InvalidInstance(f"{source} is not valid UTF-8: {exc}") from exc
    return loads(text, fmt=fmt or format_for(source), limits=limits)


__all__ = ["DocumentFormat", "parse_instance", "loads", "load_path", "format_for"]
