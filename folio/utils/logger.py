"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for a context with provenance tracking.

    Sets up dual output (file + console) and logs execution provenance
    (script, command, working directory, Python version, etc.).

    Args:
        context_name: Context identifier (e.g., "build", "check")
        log_dir: Directory for this logging session
        extra_provenance: Additional key-value pairs for provenance header
        console_level: Minimum level printed to stdout (file sink always gets DEBUG)

    Returns:
        Path to log file

    Example:
        from folio.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="build",
            log_dir=Path("outs/logs/build_20261019_123456"),
            extra_provenance={"Adapter": "static"}
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # Remove default logger
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    # File handler captures everything
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )

    logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
