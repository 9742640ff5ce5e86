"""
Logging configuration for the noise filter.

Provides:
- Console handler: WARNING by default, INFO when verbose
- File handler: Optional rotating debug log
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# Module-level state
_logging_initialized = False
_log_file_path: Optional[str] = None


def setup_logging(
    log_dir: Optional[Path] = None,
    job_name: str = "noise_filter",
    verbose: bool = False,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3
) -> Optional[str]:
    """
    Initialize logging with a console handler and, if log_dir is given,
    a rotating file handler.

    Args:
        log_dir: Directory for log files. If None, no log file is written.
        job_name: Name prefix for log file.
        verbose: Show INFO messages on the console.
        file_level: Log level for file output (default: DEBUG).
        max_bytes: Maximum size per log file before rotation.
        backup_count: Number of backup files to keep.

    Returns:
        Path to the log file, or None when only logging to the console.
    """
    global _logging_initialized, _log_file_path

    # Avoid re-initialization
    if _logging_initialized:
        return _log_file_path

    logger = logging.getLogger("noisy_snp_filter")
    logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir) / "logs"
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"{job_name}_{timestamp}.log"
        _log_file_path = str(log_file)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        logger.addHandler(file_handler)

    _logging_initialized = True

    return _log_file_path


def reset_logging():
    """Reset logging state. Useful for testing."""
    global _logging_initialized, _log_file_path
    _logging_initialized = False
    _log_file_path = None

    logger = logging.getLogger("noisy_snp_filter")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
