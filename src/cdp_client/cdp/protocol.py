"""CDP message decoding.

CDP messages are plain JSON objects, one per transport frame:
    {"id": 1, "result": {...}}
    {"id": 2, "error": {"code": -32000, "message": "..."}}
"""

from __future__ import annotations

import json
from typing import Any

from cdp_client.exceptions import DecodeError


def _reject_constant(name: str) -> Any:
    # json accepts NaN and Infinity, which are not JSON
    raise ValueError(f"Invalid constant {name}")


def decode_message(content: bytes | str) -> dict[str, Any]:
    """Decode a CDP message body.

    Args:
        content: The JSON content, as bytes or text.

    Returns:
        The decoded message dictionary.

    Raises:
        DecodeError: If the content is not valid JSON or not a JSON object.
    """
    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        data = json.loads(text, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(f"Invalid JSON in CDP message: {e}", content) from e

    if not isinstance(data, dict):
        raise DecodeError(f"CDP message must be an object, got {type(data).__name__}", content)

    return data
