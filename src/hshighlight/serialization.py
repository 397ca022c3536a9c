"""Token serialization: JSON round-trip for highlight token lists.

Converts ``list[HighlightToken]`` to/from JSON-compatible dicts. Useful for:
- Caching highlighted files to disk
- Handing tokens to a front end that does its own rendering
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from hshighlight import tokenize
    from hshighlight.serialization import to_json, from_json

    tokens = tokenize("f = 1")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from hshighlight.categories import HighlightToken, TokenCategory

_TYPE_NAME = "HighlightTokens"


def to_dict(tokens: Sequence[HighlightToken]) -> dict[str, Any]:
    """Convert a token list to a JSON-compatible dict.

    Categories are stored by their string value (``"keyword"``, ``"space"``).

    Args:
        tokens: Highlight tokens in source order.

    Returns:
        Dict with a ``_type`` discriminator and a ``tokens`` list.

    """
    return {
        "_type": _TYPE_NAME,
        "tokens": [
            {"category": token.category.value, "text": token.text} for token in tokens
        ],
    }


def from_dict(data: dict[str, Any]) -> list[HighlightToken]:
    """Rebuild a token list from a dict produced by to_dict.

    Raises:
        ValueError: If ``_type`` is missing or wrong, or a category is unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized tokens"
        raise ValueError(msg)
    if type_name != _TYPE_NAME:
        msg = f"Unknown serialized type: {type_name!r}"
        raise ValueError(msg)

    tokens: list[HighlightToken] = []
    for item in data.get("tokens", []):
        try:
            category = TokenCategory(item["category"])
        except ValueError:
            msg = f"Unknown token category: {item['category']!r}"
            raise ValueError(msg) from None
        tokens.append(HighlightToken(category, item["text"]))
    return tokens


def to_json(tokens: Sequence[HighlightToken], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON string.

    Args:
        tokens: Highlight tokens to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(tokens), sort_keys=True, indent=indent)


def from_json(data: str) -> list[HighlightToken]:
    """Deserialize a token list from a JSON string produced by to_json."""
    return from_dict(json.loads(data))
