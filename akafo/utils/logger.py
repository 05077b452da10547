"""
Session logging for akafo front-ends.

Parsing and retrieval code only emits records through the prefixed wrappers
in contexts/{context}/logger.py. Sinks are configured here, once per script
run. Each session log opens with a header naming the feed source and the
versions of the libraries that read it.
"""

import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from akafo import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

# Distributions whose behaviour decides how a feed is read
TRACKED_LIBRARIES = ("feedparser", "beautifulsoup4", "requests")

HEADER_RULE = "-" * 60


def _library_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "not installed"


def session_header(source: str = "", extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Key/value pairs written at the top of a session log.

    Args:
        source: Feed URL or file path being parsed
        extra: Additional pairs appended after the standard ones

    Returns:
        Ordered dict of header lines
    """
    header = {
        "Feed source": source or "(unknown)",
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        "akafo": __version__,
    }
    header.update({name: _library_version(name) for name in TRACKED_LIBRARIES})
    header.update(extra or {})
    return header


def setup_session_logger(
    log_dir: Path,
    log_name: str,
    source: str = "",
    console_level: str = "INFO",
    extra: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Replace all loguru sinks with a session file sink and a console sink.

    The file sink records everything from DEBUG up. The console sink writes
    to stderr so stdout carries only the menu.

    Args:
        log_dir: Directory for this session, created if missing
        log_name: Log file stem, e.g. "parse" -> <log_dir>/parse.log
        source: Feed URL or file path, recorded in the header
        console_level: Minimum level shown on stderr
        extra: Additional header pairs

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{log_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    logger.debug(HEADER_RULE)
    for key, value in session_header(source, extra).items():
        logger.debug(f"{key}: {value}")
    logger.debug(HEADER_RULE)

    return log_file
