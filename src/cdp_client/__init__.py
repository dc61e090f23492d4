"""Error representation for Chrome DevTools Protocol clients."""

from __future__ import annotations

from cdp_client.cdp import CONTEXT_DESTROYED
from cdp_client.cdp import CONTEXT_NOT_FOUND
from cdp_client.cdp import KNOWN_ERRORS
from cdp_client.cdp import NODE_NOT_FOUND_AT_POSITION
from cdp_client.cdp import NOT_ATTACHED_TO_ACTIVE_PAGE
from cdp_client.cdp import OBJECT_NOT_FOUND
from cdp_client.cdp import SEARCH_SESSION_NOT_FOUND
from cdp_client.cdp import SESSION_NOT_FOUND
from cdp_client.cdp import ProtocolError
from cdp_client.cdp import decode_message
from cdp_client.cdp import match_known_error
from cdp_client.cdp import response_error
from cdp_client.config import ClientConfig
from cdp_client.config import get_config
from cdp_client.config import load_config
from cdp_client.exceptions import CDPClientError
from cdp_client.exceptions import DecodeError
from cdp_client.log import configure_logging

__version__ = "0.1.0"

__all__ = [
    "CONTEXT_DESTROYED",
    "CONTEXT_NOT_FOUND",
    "KNOWN_ERRORS",
    "NODE_NOT_FOUND_AT_POSITION",
    "NOT_ATTACHED_TO_ACTIVE_PAGE",
    "OBJECT_NOT_FOUND",
    "SEARCH_SESSION_NOT_FOUND",
    "SESSION_NOT_FOUND",
    "CDPClientError",
    "ClientConfig",
    "DecodeError",
    "ProtocolError",
    "configure_logging",
    "decode_message",
    "get_config",
    "load_config",
    "match_known_error",
    "response_error",
]
