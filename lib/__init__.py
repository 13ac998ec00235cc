"""
Utility libraries for the MCP server.
Pure helpers shared by the handlers and the server.
"""
from .common import ok, iso_timestamp, format_stack, stringify_bool
from .errors import (
    ErrorCode,
    ScriptRunError,
    InvalidRequestError,
    AuthError,
    TransportError,
    DecodeError,
    RemoteRejectionError,
    error_code_for,
)
from .input_parser import strip_quotes, coerce_str, coerce_optional_str, coerce_bool
from .types import (
    ErrorDetails,
    RawError,
    ErrorRecord,
    ToolDefinition,
    ResponseBody,
    QueryParams,
)

__all__ = [
    # Response types
    "ErrorDetails",
    "RawError",
    "ErrorRecord",
    "ToolDefinition",
    "ResponseBody",
    "QueryParams",
    # Errors
    "ErrorCode",
    "ScriptRunError",
    "InvalidRequestError",
    "AuthError",
    "TransportError",
    "DecodeError",
    "RemoteRejectionError",
    "error_code_for",
    # Functions
    "ok",
    "iso_timestamp",
    "format_stack",
    "stringify_bool",
    "strip_quotes",
    "coerce_str",
    "coerce_optional_str",
    "coerce_bool",
]
