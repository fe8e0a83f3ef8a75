"""Token serialization and deserialization for lisplex.

Converts token sequences to and from a plain list-of-dicts form that maps
naturally to JSON and YAML.  Each token becomes ``{"kind": ..., "value": ...}``;
parentheses carry no ``"value"`` key.

Usage
-----
::

    from lisplex.serializer import TokenSerializer

    serializer = TokenSerializer()
    json_text = serializer.to_json(tokens)
    tokens2 = serializer.from_json(json_text)
    assert tokens == tokens2
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from lisplex.grammar.tokens import Token, TokenType

_PAYLOAD_TYPES: dict[TokenType, type] = {
    TokenType.FLOAT: float,
    TokenType.INTEGER: int,
    TokenType.SYMBOL: str,
    TokenType.STRING: str,
    TokenType.BINARY_OP: str,
    TokenType.KEYWORD: str,
}


class TokenSerializer:
    """Converts between ``Token`` objects and plain Python data.

    The ``"kind"`` field holds the ``TokenType`` member name, which makes
    deserialization unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (Token → dict)
    # ------------------------------------------------------------------

    def to_dict(self, token: Token) -> dict[str, object]:
        """Serialize a single ``Token`` to a JSON-compatible dict."""
        if token.value is None:
            return {"kind": token.type.name}
        return {"kind": token.type.name, "value": token.value}

    def to_list(self, tokens: Iterable[Token]) -> list[dict[str, object]]:
        return [self.to_dict(t) for t in tokens]

    # ------------------------------------------------------------------
    # Deserialization (dict → Token)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Token:
        """Deserialize a ``Token`` from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If the kind is unknown or the payload does not fit the kind.
        """
        kind = data.get("kind")
        try:
            token_type = TokenType[str(kind)]
        except KeyError:
            raise ValueError(f"Unknown token kind: {kind!r}") from None

        payload_type = _PAYLOAD_TYPES.get(token_type)
        if payload_type is None:
            return Token(token_type)

        if "value" not in data:
            raise ValueError(f"Token kind {token_type.name} requires a 'value'")
        value = data["value"]
        # YAML and JSON both read 1.0 back as a float but 1 as an int.
        if payload_type is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not isinstance(value, payload_type) or isinstance(value, bool):
            raise ValueError(
                f"Token kind {token_type.name} expects {payload_type.__name__}, "
                f"got {type(value).__name__}"
            )
        return Token(token_type, value)

    def from_list(self, data: Iterable[dict[str, object]]) -> list[Token]:
        return [self.from_dict(item) for item in data]

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, tokens: Iterable[Token], indent: int = 2) -> str:
        """Serialize tokens to a JSON string."""
        return json.dumps(self.to_list(tokens), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Token]:
        """Deserialize tokens from a JSON string."""
        data: list[dict[str, object]] = json.loads(text)
        return self.from_list(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, tokens: Iterable[Token]) -> str:
        """Serialize tokens to a YAML string."""
        return yaml.dump(self.to_list(tokens), default_flow_style=False, allow_unicode=True)

    def from_yaml(self, text: str) -> list[Token]:
        """Deserialize tokens from a YAML string."""
        data: list[dict[str, object]] | None = yaml.safe_load(text)
        return self.from_list(data or [])
