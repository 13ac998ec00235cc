"""
Type definitions for the MCP server.
Shapes of the Error Record returned by script_run and of tool descriptors.
"""
from typing import TypedDict, Any


class ErrorDetails(TypedDict):
    """Diagnostic details of a failed invocation."""
    message: str
    stack: str | None
    scriptId: str
    timestamp: str
    errorType: str


class RawError(TypedDict):
    """Name and stack of the underlying exception."""
    name: str
    stack: str | None


class ErrorRecord(TypedDict):
    """Value returned (not raised) when an invocation fails."""
    error: bool
    message: str
    details: ErrorDetails
    rawError: RawError


class FunctionDefinition(TypedDict):
    name: str
    description: str
    parameters: dict[str, Any]


class ToolDefinition(TypedDict):
    """Function-calling tool descriptor."""
    type: str
    function: FunctionDefinition


# A successful result is whatever JSON the API returned
ResponseBody = Any

# Ordered query parameters as sent on the wire
QueryParams = list[tuple[str, str]]
