"""
Failure taxonomy for scripts.run invocations.
Every failure raised inside the runner is one of these categories;
the runner converts them into an Error Record instead of propagating.
"""
import json
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes, one per failure category."""
    BAD_REQUEST = "BAD_REQUEST"
    AUTH_ERROR = "AUTH_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    REMOTE_ERROR = "REMOTE_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ScriptRunError(Exception):
    """Base class for scripts.run failures."""
    code: ErrorCode = ErrorCode.INTERNAL_ERROR


class InvalidRequestError(ScriptRunError):
    """The invocation request cannot be sent (e.g. empty scriptId)."""
    code = ErrorCode.BAD_REQUEST


class AuthError(ScriptRunError):
    """The auth provider failed to supply headers."""
    code = ErrorCode.AUTH_ERROR


class TransportError(ScriptRunError):
    """Network-level failure from the HTTP client."""
    code = ErrorCode.TRANSPORT_ERROR


class DecodeError(ScriptRunError):
    """Response body is not valid JSON."""
    code = ErrorCode.DECODE_ERROR


class RemoteRejectionError(ScriptRunError):
    """
    Non-success HTTP status. Carries the decoded error payload as data.

    Attributes:
        payload: Decoded JSON error body, exactly as returned by the API
        status_code: HTTP status of the response
    """
    code = ErrorCode.REMOTE_ERROR

    def __init__(self, payload: Any, status_code: int) -> None:
        self.payload = payload
        self.status_code = status_code
        super().__init__(json.dumps(payload, ensure_ascii=False))


def error_code_for(exc: BaseException) -> ErrorCode:
    """Map any exception to an ErrorCode (INTERNAL_ERROR for foreign ones)."""
    if isinstance(exc, ScriptRunError):
        return exc.code
    return ErrorCode.INTERNAL_ERROR
