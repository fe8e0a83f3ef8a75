"""Shared bootstrap for lisp-lexer benchmarks."""
from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).parent.parent

for _path in [str(_REPO_ROOT / "src"), str(_REPO_ROOT / "benchmarks")]:
    if _path not in sys.path:
        sys.path.insert(0, _path)
