"""Test configuration helpers."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def scenario1() -> dict:
    return json.loads((FIXTURES / "scenario1.json").read_text(encoding="utf-8"))


@pytest.fixture
def scenario2() -> dict:
    return json.loads((FIXTURES / "scenario2.json").read_text(encoding="utf-8"))
