"""CDP message types.

Only the inbound shapes needed to surface peer failures are modelled:
- Response: peer → client (with id, result or error)
- ErrorObject: the JSON-RPC style error carried by a failed response
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

logger = logging.getLogger(__name__)

# Same grammar as a base-10 integer literal: optional sign, ASCII digits only
_NUMERIC_CODE = re.compile(r"[+-]?[0-9]+")

# Codes are 64-bit signed integers on the wire; anything wider is unrecognized
_CODE_MIN = -(2**63)
_CODE_MAX = 2**63 - 1


class ErrorObject(BaseModel):
    """The error member of a failed CDP response.

    Peers disagree on how ``code`` is encoded: some send a JSON number,
    others a JSON string holding the same number. Both are accepted, and a
    code of any other shape falls back to 0 rather than failing the decode.
    """

    code: int = 0
    message: str = ""
    data: str = ""

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> int:
        code: int | None = None
        if isinstance(value, int) and not isinstance(value, bool):
            code = value
        elif isinstance(value, str) and _NUMERIC_CODE.fullmatch(value):
            try:
                code = int(value)
            except ValueError:
                # Exceeds the interpreter's integer string conversion limit
                pass
        if code is not None and _CODE_MIN <= code <= _CODE_MAX:
            return code
        logger.debug("Unrecognized error code %r, defaulting to 0", value)
        return 0

    @field_validator("message", "data", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Response(BaseModel):
    """A CDP command response from peer to client."""

    id: int
    session_id: str | None = Field(default=None, alias="sessionId")
    result: dict[str, Any] | None = None
    error: ErrorObject | None = None

    model_config = {"populate_by_name": True, "extra": "allow"}
