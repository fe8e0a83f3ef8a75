"""Token serialization to plain dicts, JSON and YAML."""
from __future__ import annotations

from lisplex.serializer.serializer import TokenSerializer

__all__ = ["TokenSerializer"]
