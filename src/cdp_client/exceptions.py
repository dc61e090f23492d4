"""Custom exceptions for cdp-client."""

from __future__ import annotations


class CDPClientError(Exception):
    """Base exception for all cdp-client errors."""


class DecodeError(CDPClientError):
    """Malformed CDP payload (invalid JSON or wrong envelope shape)."""

    def __init__(self, message: str, payload: bytes | str | None = None) -> None:
        """Initialize decode error.

        Args:
            message: Description of what failed to decode
            payload: The offending raw payload, kept for diagnostics
        """
        super().__init__(message)
        self.payload = payload
