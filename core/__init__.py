"""Core request/result types."""
from .invocation import (
    InvocationRequest,
    ScriptRunSuccess,
    ScriptRunFailure,
    RunResult,
)

__all__ = ["InvocationRequest", "ScriptRunSuccess", "ScriptRunFailure", "RunResult"]
