"""Test configuration ensuring the package source tree is importable."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = ROOT / "schema_combinator"

if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from schema_combinator.models import ObjectSchema, EmptySchema  # noqa: E402


@pytest.fixture
def defines_x():
    """Factory for leaf schemas that declare property ``x``."""

    def _make(title: str) -> ObjectSchema:
        return ObjectSchema({"x": EmptySchema()}, title=title)

    return _make


@pytest.fixture
def lacks_x():
    """Factory for leaf schemas that do not declare property ``x``."""

    def _make(title: str) -> ObjectSchema:
        return ObjectSchema({"y": EmptySchema()}, title=title)

    return _make
