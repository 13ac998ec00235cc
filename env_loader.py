"""
Environment variable loader for the MCP server.
Handles loading credentials and runtime switches from .env file or environment.
"""
import os
import json
from pathlib import Path

# Load .env file if it exists
from dotenv import load_dotenv

from config import DEFAULT_ALLOWED_HOSTS

_TRUTHY = {"1", "true", "yes", "on"}


# Find .env file (look in current dir and parent dirs)
def _find_env_file() -> Path | None:
    current = Path(__file__).parent
    for _ in range(3):  # Check up to 3 levels up
        env_path = current / ".env"
        if env_path.exists():
            return env_path
        current = current.parent
    return None

_env_file = _find_env_file()
if _env_file:
    load_dotenv(_env_file)


def _flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


def get_access_token() -> str | None:
    """Static OAuth access token (GAS_ACCESS_TOKEN), if configured."""
    tok = os.environ.get("GAS_ACCESS_TOKEN")
    return tok if tok else None


def get_google_credentials() -> dict:
    """
    Get Google Service Account credentials.

    Priority:
    1. GOOGLE_CREDENTIALS_FILE (path to JSON file)
    2. GOOGLE_CREDENTIALS_JSON (JSON string content)

    Returns:
        dict: Parsed credentials dictionary

    Raises:
        RuntimeError: If no credentials are configured
    """
    # Option 1: File path
    creds_file = os.environ.get("GOOGLE_CREDENTIALS_FILE")
    if creds_file:
        creds_path = Path(creds_file)
        if not creds_path.exists():
            raise RuntimeError(f"GOOGLE_CREDENTIALS_FILE not found: {creds_file}")
        with open(creds_path, "r") as f:
            return json.load(f)

    # Option 2: JSON content
    creds_json = os.environ.get("GOOGLE_CREDENTIALS_JSON")
    if creds_json:
        try:
            return json.loads(creds_json)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Invalid GOOGLE_CREDENTIALS_JSON: {e}")

    raise RuntimeError(
        "No Google credentials configured. "
        "Set GAS_ACCESS_TOKEN, GOOGLE_CREDENTIALS_FILE or GOOGLE_CREDENTIALS_JSON in .env"
    )


def get_delegated_user() -> str | None:
    """User to impersonate with domain-wide delegation, if any."""
    user = os.environ.get("GOOGLE_DELEGATED_USER")
    return user if user else None


def omit_unset_params() -> bool:
    """Whether unset query parameters are dropped instead of sent empty."""
    return _flag("SCRIPT_RUN_OMIT_UNSET")


def get_timeout() -> float | None:
    """Transport timeout in seconds, or None for the httpx default."""
    raw = os.environ.get("SCRIPT_RUN_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid SCRIPT_RUN_TIMEOUT: {raw}")


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def json_logs_enabled() -> bool:
    return _flag("JSON_LOGS")


def get_port() -> int:
    """Get server port from environment."""
    return int(os.environ.get("PORT", "8080"))


def get_allowed_hosts() -> list[str]:
    """Hosts accepted by the MCP transport (MCP_ALLOWED_HOSTS, comma-separated)."""
    raw = os.environ.get("MCP_ALLOWED_HOSTS")
    if not raw:
        return list(DEFAULT_ALLOWED_HOSTS)
    return [h.strip() for h in raw.split(",") if h.strip()]
