"""
Apps Script MCP Server

Connects Claude to the Google Apps Script API (scripts.run).
"""
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from auth_provider import get_auth_provider
from core.invocation import InvocationRequest
from env_loader import (
    get_allowed_hosts,
    get_log_level,
    get_port,
    json_logs_enabled,
    omit_unset_params,
)
from handlers.scripts import ScriptsHandler, SCRIPT_RUN_TOOL
from lib.common import ok
from lib.input_parser import coerce_bool, coerce_optional_str, coerce_str
from lib.logger import log, setup_logging

setup_logging(json_logs=json_logs_enabled(), log_level=get_log_level())

transport_security = TransportSecuritySettings(
    enable_dns_rebinding_protection=True,
    allowed_hosts=get_allowed_hosts(),
)

mcp = FastMCP("apps-script", transport_security=transport_security)


# ===== Script Tools =====

def _pretty_print(value: Any) -> Any:
    """Boolean for recognizable flags; anything else passes through for validation."""
    flag = coerce_bool(value, default=True)
    return value if flag is None else flag


@mcp.tool()
async def script_run(
    scriptId: Any,
    fields: Any = None,
    alt: Any = "json",
    key: Any = None,
    access_token: Any = None,
    oauth_token: Any = None,
    quotaUser: Any = None,
    prettyPrint: Any = True,
) -> Any:
    """Run a Google Apps Script.

    Args:
    - scriptId: The ID of the script to run (required).
    - fields: Selector specifying which fields to include in a partial response.
    - alt: Data format for response ("json" or "xml", default "json"). Any other
      value, including "", is rejected.
    - key: API key for the project.
    - access_token: OAuth access token.
    - oauth_token: OAuth 2.0 token for the current user.
    - quotaUser: Available to use for quota purposes for server-side applications.
    - prettyPrint: Returns response with indentations and line breaks (default true).
      Values that are not a recognizable boolean are rejected.

    Returns:
    - On success: the JSON body returned by the API, unchanged. scripts.run
      answers with an Operation object; MCP clients receive a non-object body
      as one content item per element.
    - On failure: {"error": true, "message": ..., "details": {message, stack,
      scriptId, timestamp, errorType}, "rawError": {name, stack}}
    """
    request = InvocationRequest.from_args(
        scriptId=coerce_str(scriptId, ("scriptId", "script_id", "id")) or "",
        fields=coerce_optional_str(fields),
        alt=coerce_optional_str(alt),
        key=coerce_optional_str(key),
        access_token=coerce_optional_str(access_token),
        oauth_token=coerce_optional_str(oauth_token),
        quotaUser=coerce_optional_str(quotaUser),
        prettyPrint=_pretty_print(prettyPrint),
    )
    handler = ScriptsHandler(get_auth_provider(), omit_unset=omit_unset_params())
    result = await handler.run(request)
    return result.to_payload()


# Function + descriptor pair for function-calling frameworks
API_TOOL = {
    "function": script_run,
    "definition": SCRIPT_RUN_TOOL,
}


# ===== Utility Tools =====

@mcp.tool()
async def tools_help() -> dict:
    """List the tools exposed by this MCP server with their parameter schemas."""
    return ok("tools.help", {"tools": [SCRIPT_RUN_TOOL]})


# ===== Server Entry Point =====

if __name__ == "__main__":
    import uvicorn
    from contextlib import asynccontextmanager
    from starlette.applications import Starlette
    from starlette.routing import Route
    from starlette.responses import JSONResponse

    async def healthz(request):
        return JSONResponse({"status": "ok"})

    async def root(request):
        return JSONResponse(
            {"error": "Use /mcp for MCP endpoint or /healthz for health check"},
            status_code=406,
        )

    # Get MCP ASGI app
    mcp_app = mcp.streamable_http_app()

    @asynccontextmanager
    async def lifespan(app):
        async with mcp.session_manager.run():
            yield

    # Create Starlette app for non-MCP routes
    starlette_app = Starlette(
        routes=[
            Route("/", root),
            Route("/healthz", healthz),
        ],
        lifespan=lifespan,
    )

    # Combined ASGI app - MCP app handles /mcp path internally
    async def combined_app(scope, receive, send):
        path = scope.get("path", "/")
        if path.startswith("/mcp"):
            await mcp_app(scope, receive, send)
        else:
            await starlette_app(scope, receive, send)

    port = get_port()
    log(f"Starting server on port {port}")
    uvicorn.run(combined_app, host="0.0.0.0", port=port, lifespan="on")
