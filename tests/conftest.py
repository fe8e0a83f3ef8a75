"""Shared test fixtures for lisp-lexer.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "lisplex"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def circle_area_source() -> str:
    """A small program exercising keywords, symbols, numbers and nesting."""
    return "(\n(define r 10)\n(define pi 3.14)\n(* pi (* r r))\n)"
