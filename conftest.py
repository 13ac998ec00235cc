"""
Pytest configuration and fixtures for MCP server tests.
"""
import os
import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

# Set test environment variables before importing anything
os.environ.setdefault("GAS_ACCESS_TOKEN", "test-token")

from auth_provider import reset_auth_provider
from handlers.scripts import ScriptsHandler

FIXED_NOW = datetime(2025, 1, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)


# ========== Response Assertion Helpers ==========

class ResponseAssertions:
    """Helper class for asserting script_run result shapes."""

    @staticmethod
    def assert_error_record(payload: dict, error_type: str | None = None, script_id: str | None = None) -> dict:
        """Assert payload is an Error Record and return its details.

        Args:
            payload: The value returned by script_run / to_payload()
            error_type: Optional expected details.errorType
            script_id: Optional expected details.scriptId

        Returns:
            The details dict from the record
        """
        assert isinstance(payload, dict), f"Expected dict, got: {payload!r}"
        assert payload.get("error") is True, f"Expected error record, got: {payload}"
        assert set(payload) == {"error", "message", "details", "rawError"}
        details = payload["details"]
        assert set(details) == {"message", "stack", "scriptId", "timestamp", "errorType"}
        assert set(payload["rawError"]) == {"name", "stack"}
        assert details["message"] == payload["message"]
        assert payload["rawError"]["name"] == details["errorType"]
        if error_type:
            assert details["errorType"] == error_type, \
                f"Expected errorType {error_type}, got {details['errorType']}"
        if script_id is not None:
            assert details["scriptId"] == script_id
        return details


@pytest.fixture
def assertions():
    """Fixture providing response assertion helpers."""
    return ResponseAssertions()


class FakeAuth:
    """Deterministic auth provider."""

    def __init__(self, headers: dict[str, str] | None = None, exc: Exception | None = None):
        self.headers = headers if headers is not None else {"Authorization": "Bearer X"}
        self.exc = exc
        self.calls = 0

    async def get_headers(self) -> dict[str, str]:
        self.calls += 1
        if self.exc is not None:
            raise self.exc
        return self.headers


@pytest.fixture
def fake_auth():
    return FakeAuth()


@pytest.fixture
def failing_auth():
    return FakeAuth(exc=RuntimeError("token refresh failed"))


@pytest.fixture
def mock_logger():
    """loguru-compatible logger mock: logger.bind(...).info/error(...)"""
    return MagicMock()


@pytest.fixture
def mock_console():
    return MagicMock()


@pytest.fixture
def make_handler(fake_auth, mock_logger, mock_console):
    """
    Factory for ScriptsHandler wired to fakes.

    Usage:
        handler = make_handler()
        handler = make_handler(auth=failing_auth, omit_unset=True)
    """
    def _make(auth=None, **kwargs):
        kwargs.setdefault("logger", mock_logger)
        kwargs.setdefault("console", mock_console)
        kwargs.setdefault("clock", lambda: FIXED_NOW)
        return ScriptsHandler(auth or fake_auth, **kwargs)
    return _make


@pytest.fixture(autouse=True)
def _reset_auth_provider():
    reset_auth_provider()
    yield
    reset_auth_provider()
