"""
Auth providers for the Apps Script API.
Supplies Authorization headers from a static token or Service Account credentials.
"""
import asyncio
from typing import Any, Protocol

from google.auth.transport.requests import Request
from google.oauth2.service_account import Credentials

from config import SCOPES


class AuthProvider(Protocol):
    """Anything that can produce request headers for one API call."""

    async def get_headers(self) -> dict[str, str]:
        ...


class StaticTokenAuth:
    """Bearer token supplied up front (e.g. GAS_ACCESS_TOKEN)."""

    def __init__(self, token: str):
        if not token:
            raise ValueError("token is required")
        self.token = token

    async def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class ServiceAccountAuth:
    """Wrapper around google-auth Service Account credentials."""

    def __init__(
        self,
        credentials_info: dict[str, Any],
        scopes: list[str] | None = None,
        subject: str | None = None,
    ):
        """
        Initialize with Service Account credentials.

        Args:
            credentials_info: Parsed Service Account JSON
            scopes: OAuth scopes (defaults to config.SCOPES)
            subject: Optional user to impersonate via domain-wide delegation
        """
        creds = Credentials.from_service_account_info(credentials_info, scopes=scopes or SCOPES)
        if subject:
            creds = creds.with_subject(subject)
        self.credentials = creds

    def _fetch_token(self) -> str:
        """Refresh and return an access token (blocking, runs in thread pool)."""
        self.credentials.refresh(Request())
        if not self.credentials.token:
            raise RuntimeError("Service Account refresh returned no access token")
        return self.credentials.token

    async def get_headers(self) -> dict[str, str]:
        token = await asyncio.to_thread(self._fetch_token)
        return {"Authorization": f"Bearer {token}"}


class DefaultAuthProvider:
    """
    Resolves credentials from the environment when headers are requested.

    Priority:
    1. GAS_ACCESS_TOKEN
    2. GOOGLE_CREDENTIALS_FILE / GOOGLE_CREDENTIALS_JSON (+ GOOGLE_DELEGATED_USER)

    Configuration errors surface from get_headers(), never from construction.
    """

    def __init__(self) -> None:
        self._delegate: AuthProvider | None = None

    def _resolve(self) -> AuthProvider:
        from env_loader import get_access_token, get_google_credentials, get_delegated_user

        token = get_access_token()
        if token:
            return StaticTokenAuth(token)
        return ServiceAccountAuth(get_google_credentials(), subject=get_delegated_user())

    async def get_headers(self) -> dict[str, str]:
        if self._delegate is None:
            self._delegate = self._resolve()
        return await self._delegate.get_headers()


# Singleton instance for the application
_auth_provider: AuthProvider | None = None


def get_auth_provider() -> AuthProvider:
    """Get the global AuthProvider instance."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = DefaultAuthProvider()
    return _auth_provider


def reset_auth_provider() -> None:
    """Reset the global provider (useful for testing)."""
    global _auth_provider
    _auth_provider = None
