"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def error_payload() -> dict[str, object]:
    """A fully populated CDP error object."""
    return {
        "code": -32602,
        "message": "Invalid parameters",
        "data": "Failed to deserialize params.expression",
    }
