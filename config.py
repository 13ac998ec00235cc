"""
Configuration constants for the MCP server.
Centralizes the Apps Script endpoint, fixed query parameters and defaults.
"""
from typing import Final

# Apps Script API endpoint root (not configurable)
SCRIPT_API_BASE_URL: Final[str] = "https://script.googleapis.com"
SCRIPT_RUN_PATH: Final[str] = "/v1/scripts/{script_id}:run"

# Sent on every scripts.run call regardless of input
FIXED_QUERY_PARAMS: Final[tuple[tuple[str, str], ...]] = (
    ("$.xgafv", "1"),
    ("upload_protocol", "raw"),
    ("uploadType", "raw"),
)

# Optional query parameters, in wire order (prettyPrint follows them)
OPTIONAL_QUERY_PARAMS: Final[tuple[str, ...]] = (
    "fields",
    "alt",
    "key",
    "access_token",
    "oauth_token",
    "quotaUser",
)

ALT_VALUES: Final[tuple[str, ...]] = ("json", "xml")
DEFAULT_ALT: Final[str] = "json"
DEFAULT_PRETTY_PRINT: Final[bool] = True

# OAuth scopes requested for service account credentials
SCOPES: Final[list[str]] = [
    "https://www.googleapis.com/auth/script.projects",
    "https://www.googleapis.com/auth/script.external_request",
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/spreadsheets",
]

# Operation tag used in log records
LOG_OP: Final[str] = "SCRIPT_RUN"

# Hosts accepted by default for DNS rebinding protection
DEFAULT_ALLOWED_HOSTS: Final[list[str]] = [
    "localhost:8080",
    "127.0.0.1:8080",
]
