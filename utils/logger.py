"""
Logging configuration for ZipBoundary.

This module provides centralized logging configuration for both console and file output.
Console displays INFO-level messages for operator feedback, while file captures DEBUG-level
details such as per-step union traces.

Functions:
    setup_logging: Initialize logging handlers and return log file path
    get_logger: Get a logger instance for a specific module

Example:
    >>> from utils.logger import setup_logging, get_logger
    >>> log_file = setup_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("Server starting")
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, TextIO

ROOT_LOGGER_NAME = 'zipboundary'


def setup_logging(log_dir: Optional[Path] = None,
                  log_to_file: bool = True,
                  stream: Optional[TextIO] = None) -> Optional[Path]:
    """
    Setup logging to console and (optionally) file.

    Creates up to two handlers:
    - Console: INFO level with clean formatting
    - File: DEBUG level with timestamps and module names

    Parameters:
    -----------
    log_dir : Optional[Path]
        Directory for log files. Defaults to PROJECT_ROOT/logs
    log_to_file : bool
        Whether to attach the DEBUG file handler
    stream : Optional[TextIO]
        Console stream. Defaults to sys.stdout

    Returns:
    --------
    Optional[Path]
        Path to the created log file, or None when file logging is disabled
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Console handler (INFO level) - clean output for operators
    console = logging.StreamHandler(stream or sys.stdout)
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console)

    if not log_to_file:
        return None

    if log_dir is None:
        log_dir = Path(__file__).parent.parent / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f'zipboundary_{timestamp}.log'

    # File handler (DEBUG level) - detailed output for debugging
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(file_handler)

    logger.debug(f"Logging initialized: {log_file}")

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Parameters:
    -----------
    name : str
        Module name (typically __name__)

    Returns:
    --------
    logging.Logger
        Logger namespaced under the ``zipboundary`` root

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Module initialized")
    """
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
