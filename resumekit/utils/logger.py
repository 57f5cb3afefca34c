"""
Loguru setup shared by every context.

Contexts wrap this in their own logger.py (setup_drafting_logger, ...) and add a
prefix to each record. Library code only emits records; scripts call the setup.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Send records to <log_dir>/<context_name>.log (DEBUG) and to stderr (INFO).

    stdout is left alone so command output (e.g. a plain-text export) can be piped.

    Args:
        context_name: Log file stem, e.g. "draft"
        log_dir: Directory for this run, created if missing
        extra_provenance: Additional lines for the run header (e.g. {"Store": path})

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the run header (plus extra_context lines) to every sink."""
    # Deferred: the scoring package imports the drafting logger, which imports this module
    from resumekit import __version__
    from resumekit.contexts.scoring.rules import get_rules_path

    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "resumekit": __version__,
        "Python": sys.version.split()[0],
        "ATS rules": get_rules_path(),
        **(extra_context or {}),
    }

    logger.info("-" * 60)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 60)
