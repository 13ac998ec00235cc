"""Scripts handler module."""
from .handler import ScriptsHandler
from .definition import SCRIPT_RUN_TOOL

__all__ = ["ScriptsHandler", "SCRIPT_RUN_TOOL"]
