"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from akafo.utils.logger import setup_session_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path, source: str = "") -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this parsing session
        source: Where the feed came from (URL or file), for provenance

    Returns:
        Path to log file
    """
    return setup_session_logger(log_dir, log_name="parse", source=source)


# Wrapper functions with automatic [parse] prefix


def _log_success(message: str) -> None:
    """Log success message with [parse] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [parse] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
