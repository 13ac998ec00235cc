"""
HTTP transport for the Apps Script Execution API.
"""
import httpx

from env_loader import get_timeout


def http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create a fresh AsyncClient for a single invocation.

    No transport retries. When timeout is None, SCRIPT_RUN_TIMEOUT is used
    if set, otherwise the httpx default applies.
    """
    if timeout is None:
        timeout = get_timeout()
    if timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))
