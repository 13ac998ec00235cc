"""Logging configuration using loguru, plus the stderr console sink."""

import sys
from typing import Any

from loguru import logger


def log(*a: Any) -> None:
    print(*a, file=sys.stderr, flush=True)


def format_record(record: dict) -> str:
    """Format log record, appending the op tag when bound."""
    op = record["extra"].get("op")
    op_str = f"[{op}] " if op else ""
    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        f"{op_str}"
        "<level>{message}</level>\n"
        "{exception}"
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure loguru for the application.

    Args:
        json_logs: If True, output logs as JSON (useful for production)
        log_level: Minimum log level to output
    """
    # Remove default handler
    logger.remove()

    # stdout carries the MCP stdio transport, so logs go to stderr
    if json_logs:
        logger.add(
            sys.stderr,
            format="{message}",
            level=log_level,
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=format_record,
            level=log_level,
            colorize=True,
        )


__all__ = ["logger", "log", "setup_logging"]
