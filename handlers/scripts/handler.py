"""
Scripts handler: runs an Apps Script project via the scripts.run endpoint.

Every failure (invalid request, auth, network, HTTP status, JSON decoding)
is logged, echoed to the console and returned as a ScriptRunFailure.
Nothing is raised to the caller.
"""
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
from loguru import logger as default_logger

from auth_provider import AuthProvider
from config import ALT_VALUES, LOG_OP
from core.invocation import InvocationRequest, RunResult, ScriptRunFailure, ScriptRunSuccess
from exec_api import http_client
from lib.common import format_stack, iso_timestamp
from lib.errors import (
    AuthError,
    DecodeError,
    InvalidRequestError,
    RemoteRejectionError,
    ScriptRunError,
    TransportError,
    error_code_for,
)
from lib.logger import log
from lib.types import ErrorDetails, RawError


class ScriptsHandler:
    """
    Runs scripts through the Apps Script API.

    Collaborators are injected so tests can substitute fakes:

    Args:
        auth: Provider of Authorization headers
        logger: Structured logger (loguru-compatible: bind().info/error)
        console: Human-readable sink, called like print()
        client_factory: Returns a fresh httpx.AsyncClient per call
        clock: Returns the current aware datetime
        omit_unset: Drop unset optional query parameters instead of sending them empty
    """

    def __init__(
        self,
        auth: AuthProvider,
        *,
        logger: Any = None,
        console: Callable[..., None] | None = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
        clock: Callable[[], datetime] | None = None,
        omit_unset: bool = False,
    ) -> None:
        self.auth = auth
        self.logger = logger or default_logger
        self.console = console or log
        self.client_factory = client_factory or http_client
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.omit_unset = omit_unset

    async def run(self, request: InvocationRequest) -> RunResult:
        """Execute one scripts.run call. Never raises for request failures."""
        try:
            return await self._run(request)
        except Exception as e:
            return self._failure(request, e)

    async def _run(self, request: InvocationRequest) -> ScriptRunSuccess:
        self._validate(request)

        headers = await self._auth_headers()
        headers["Content-Type"] = "application/json"
        params = request.query_params(omit_unset=self.omit_unset)

        async with self.client_factory() as client:
            try:
                response = await client.post(request.url, params=params, headers=headers)
            except httpx.HTTPError as e:
                raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise RemoteRejectionError(self._decode(response), response.status_code)

        data = self._decode(response)
        self.logger.bind(op=LOG_OP, scriptId=request.script_id).info(
            f"Script run succeeded (HTTP {response.status_code})"
        )
        return ScriptRunSuccess(data=data, status_code=response.status_code)

    @staticmethod
    def _validate(request: InvocationRequest) -> None:
        if not isinstance(request.script_id, str) or not request.script_id.strip():
            raise InvalidRequestError("scriptId is required")
        if request.alt not in ALT_VALUES:
            raise InvalidRequestError(f"alt must be one of {', '.join(ALT_VALUES)}: {request.alt!r}")
        if not isinstance(request.pretty_print, bool):
            raise InvalidRequestError(f"prettyPrint must be a boolean: {request.pretty_print!r}")

    async def _auth_headers(self) -> dict[str, str]:
        try:
            return dict(await self.auth.get_headers())
        except ScriptRunError:
            raise
        except Exception as e:
            raise AuthError(str(e) or type(e).__name__) from e

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"HTTP {response.status_code}: response body is not valid JSON ({e})"
            ) from e

    def _failure(self, request: InvocationRequest, exc: Exception) -> ScriptRunFailure:
        """Convert an exception into a failure result, logging it on the way."""
        message = str(exc)
        stack = format_stack(exc)
        error_type = type(exc).__name__
        details: ErrorDetails = {
            "message": message,
            "stack": stack,
            "scriptId": request.script_id,
            "timestamp": iso_timestamp(self.clock()),
            "errorType": error_type,
        }
        raw_error: RawError = {"name": error_type, "stack": stack}

        self.logger.bind(op=LOG_OP, code=error_code_for(exc).value, **details).error("Error running the script")
        self.console("❌ Error running the script:", details)

        return ScriptRunFailure(message=message, details=details, raw_error=raw_error, exception=exc)
