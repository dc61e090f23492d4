"""CDP protocol errors and the catalog of well-known failures.

A failed command response carries a JSON-RPC style error object. It is
decoded into a ProtocolError, which compares by value so callers can
classify it against the sentinels below:

    err = response_error(message)
    if err == CONTEXT_DESTROYED:
        ...  # the page navigated away, nothing to clean up

Several sentinels share the generic -32000 server error code and differ
only in their message, so matching always uses every field.
"""

from __future__ import annotations

import types
from typing import TYPE_CHECKING
from typing import Any

from pydantic import ValidationError

from cdp_client.cdp.messages import ErrorObject
from cdp_client.cdp.messages import Response
from cdp_client.cdp.protocol import decode_message
from cdp_client.exceptions import CDPClientError
from cdp_client.exceptions import DecodeError

if TYPE_CHECKING:
    from collections.abc import Mapping


class ProtocolError(CDPClientError):
    """A failure reported by the CDP peer.

    Instances are immutable and compare equal when code, message and data
    all match. The module-level sentinels are shared; raise a decoded
    instance rather than a sentinel itself.
    """

    def __init__(self, code: int, message: str, data: str = "") -> None:
        """Initialize protocol error.

        Args:
            code: JSON-RPC style error code (may be negative)
            message: Error text as sent by the peer
            data: Optional supplementary context
        """
        super().__init__(code, message, data)
        self._code = code
        self._message = message
        self._data = data

    @classmethod
    def decode(cls, raw: bytes | str) -> ProtocolError:
        """Decode an error object from its raw JSON encoding.

        Args:
            raw: The JSON error object.

        Returns:
            The decoded error.

        Raises:
            DecodeError: If the payload is malformed.
        """
        return cls._validate(decode_message(raw), raw)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ProtocolError:
        """Build an error from an already-parsed JSON error object.

        Raises:
            DecodeError: If the payload does not have the error object shape.
        """
        return cls._validate(payload, None)

    @classmethod
    def from_object(cls, obj: ErrorObject) -> ProtocolError:
        """Build an error from a validated wire model."""
        return cls(obj.code, obj.message, obj.data)

    @classmethod
    def _validate(cls, payload: Any, raw: bytes | str | None) -> ProtocolError:
        try:
            obj = ErrorObject.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Invalid CDP error object: {e}", raw) from e
        return cls.from_object(obj)

    @property
    def code(self) -> int:
        """JSON-RPC style error code."""
        return self._code

    @property
    def message(self) -> str:
        """Error text as sent by the peer."""
        return self._message

    @property
    def data(self) -> str:
        """Supplementary context, empty when the peer sent none."""
        return self._data

    def is_same_as(self, other: object) -> bool:
        """Check whether ``other`` describes the same failure."""
        if not isinstance(other, ProtocolError):
            return False
        return (self._code, self._message, self._data) == (
            other._code,
            other._message,
            other._data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Get the error as a JSON-compatible error object."""
        return {"code": self._code, "message": self._message, "data": self._data}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProtocolError):
            return NotImplemented
        return self.is_same_as(other)

    def __hash__(self) -> int:
        return hash((self._code, self._message, self._data))

    def __str__(self) -> str:
        return f"{self._message} (code: {self._code}, data: {self._data!r})"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, "
            f"message={self._message!r}, data={self._data!r})"
        )


# === Well-known failures ===

CONTEXT_NOT_FOUND = ProtocolError(-32000, "Cannot find context with specified id")
SESSION_NOT_FOUND = ProtocolError(-32001, "Session with given id not found.")
SEARCH_SESSION_NOT_FOUND = ProtocolError(-32000, "No search session with given id found")
CONTEXT_DESTROYED = ProtocolError(-32000, "Execution context was destroyed.")
OBJECT_NOT_FOUND = ProtocolError(-32000, "Could not find object with given id")
NODE_NOT_FOUND_AT_POSITION = ProtocolError(-32000, "No node found at given location")
NOT_ATTACHED_TO_ACTIVE_PAGE = ProtocolError(-32000, "Not attached to an active page")

KNOWN_ERRORS: Mapping[str, ProtocolError] = types.MappingProxyType(
    {
        "ContextNotFound": CONTEXT_NOT_FOUND,
        "SessionNotFound": SESSION_NOT_FOUND,
        "SearchSessionNotFound": SEARCH_SESSION_NOT_FOUND,
        "ContextDestroyed": CONTEXT_DESTROYED,
        "ObjectNotFound": OBJECT_NOT_FOUND,
        "NodeNotFoundAtPosition": NODE_NOT_FOUND_AT_POSITION,
        "NotAttachedToActivePage": NOT_ATTACHED_TO_ACTIVE_PAGE,
    }
)


def match_known_error(err: ProtocolError) -> str | None:
    """Get the catalog name of a well-known failure.

    Args:
        err: A decoded protocol error.

    Returns:
        The name in KNOWN_ERRORS that ``err`` is the same as, or None.
    """
    for name, known in KNOWN_ERRORS.items():
        if err.is_same_as(known):
            return name
    return None


def response_error(message: Mapping[str, Any]) -> ProtocolError | None:
    """Extract the failure from a decoded CDP response.

    Args:
        message: A response message as returned by decode_message.

    Returns:
        The peer's error, or None if the response succeeded.

    Raises:
        DecodeError: If the message is not a valid response envelope.
    """
    try:
        response = Response.model_validate(message)
    except ValidationError as e:
        raise DecodeError(f"Invalid CDP response message: {e}") from e

    if response.error is None:
        return None
    return ProtocolError.from_object(response.error)
