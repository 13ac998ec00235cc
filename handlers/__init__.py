"""
Domain handlers for the MCP server.
"""
from .scripts import ScriptsHandler, SCRIPT_RUN_TOOL

__all__ = ["ScriptsHandler", "SCRIPT_RUN_TOOL"]
