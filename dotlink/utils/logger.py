"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking and structured
key=value fields. Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

load_dotenv(find_dotenv(usecwd=True))

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"


def _with_fields(base_format: str):
    """
    Build a loguru format function that appends bound extras as key=value pairs.

    Field names (homePath, dotsPath, linkedTarget, error, ...) are kept verbatim
    so scripts grepping the output can rely on them.
    """

    def _format(record) -> str:
        fields = "".join(f" {key}={{extra[{key}]}}" for key in record["extra"])
        return base_format + fields + "\n{exception}"

    return _format


def setup_logger(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    extra_provenance: dict = None,
    level_colors: dict = {},
) -> Optional[Path]:
    """
    Configure loguru for a dotlink run.

    Console output goes to stderr at WARNING, or DEBUG when verbose. An optional
    log file captures everything at DEBUG.

    Args:
        verbose: Lower the console threshold from WARNING to DEBUG
        log_file: Optional file that receives every record
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when logging to stderr only

    Example:
        from dotlink.utils.logger import setup_logger

        setup_logger(verbose=True, extra_provenance={"dotsPath": "/home/me/.dotfiles"})
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **level_colors}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(
        sys.stderr,
        format=_with_fields(CONSOLE_FORMAT),
        level="DEBUG" if verbose else "WARNING",
        colorize=sys.stderr.isatty(),
    )

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(exist_ok=True, parents=True)
        logger.add(log_file, format=_with_fields(FILE_FORMAT), level="DEBUG")

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance at DEBUG level.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
