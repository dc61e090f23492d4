"""CDP (Chrome DevTools Protocol) error handling."""

from __future__ import annotations

from cdp_client.cdp.errors import CONTEXT_DESTROYED
from cdp_client.cdp.errors import CONTEXT_NOT_FOUND
from cdp_client.cdp.errors import KNOWN_ERRORS
from cdp_client.cdp.errors import NODE_NOT_FOUND_AT_POSITION
from cdp_client.cdp.errors import NOT_ATTACHED_TO_ACTIVE_PAGE
from cdp_client.cdp.errors import OBJECT_NOT_FOUND
from cdp_client.cdp.errors import SEARCH_SESSION_NOT_FOUND
from cdp_client.cdp.errors import SESSION_NOT_FOUND
from cdp_client.cdp.errors import ProtocolError
from cdp_client.cdp.errors import match_known_error
from cdp_client.cdp.errors import response_error
from cdp_client.cdp.protocol import decode_message

__all__ = [
    "CONTEXT_DESTROYED",
    "CONTEXT_NOT_FOUND",
    "KNOWN_ERRORS",
    "NODE_NOT_FOUND_AT_POSITION",
    "NOT_ATTACHED_TO_ACTIVE_PAGE",
    "OBJECT_NOT_FOUND",
    "SEARCH_SESSION_NOT_FOUND",
    "SESSION_NOT_FOUND",
    "ProtocolError",
    "decode_message",
    "match_known_error",
    "response_error",
]
