"""
Logging Configuration Module.

This module provides centralized logging configuration for the invoice
scanner. Console output goes to stderr so that stdout carries only the
extracted invoice. Levels can be tuned per module through an
environment variable (INVOICE_SCANNER_LOG by default):

    INVOICE_SCANNER_LOG=debug
    INVOICE_SCANNER_LOG=info,model_inference.stream=debug

Usage:
    from invoice_scanner.utils.logger import setup_logger, get_logger

    # Initialize logging (call once at startup)
    setup_logger()

    # Get logger in any module
    logger = get_logger(__name__)
    logger.debug("chunk received")
"""

import logging
import logging.handlers
import os
import sys
from typing import Dict, List, Optional, Tuple

import colorama
from colorama import Fore, Style

from .helpers import ensure_directory

ROOT_LOGGER_NAME = "invoice_scanner"
DEFAULT_ENV_VAR = "INVOICE_SCANNER_LOG"

LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter that adds color to console log output.

    Colors:
        - DEBUG: Cyan
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Red (bold)
    """

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }
    RESET = Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, '')
        message = super().format(record)
        return f"{color}{message}{self.RESET}"


def parse_log_filter(
    value: Optional[str]
) -> Tuple[Optional[int], Dict[str, int], List[str]]:
    """
    Parse an environment log filter into a default level and per-logger levels.

    Directives are comma separated. A bare level sets the package level,
    ``name=level`` sets the level of ``invoice_scanner.<name>``. Directives
    with an unknown level are skipped and returned for reporting.

    Args:
        value: Raw filter string, e.g. "info,model_inference=debug".

    Returns:
        Tuple of (default level or None, mapping of logger name to level,
        directives that were skipped).

    Example:
        >>> parse_log_filter("warn,input_handler=debug")
        (30, {'invoice_scanner.input_handler': 10}, [])
    """
    default_level = None
    module_levels: Dict[str, int] = {}
    rejected: List[str] = []

    if not value:
        return default_level, module_levels, rejected

    for directive in value.split(','):
        directive = directive.strip()
        if not directive:
            continue

        if '=' in directive:
            name, _, level_name = directive.partition('=')
            level = LEVELS.get(level_name.strip().lower())
            if level is None:
                rejected.append(directive)
                continue
            name = name.strip()
            if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
                name = f"{ROOT_LOGGER_NAME}.{name}"
            module_levels[name] = level
        else:
            level = LEVELS.get(directive.lower())
            if level is None:
                rejected.append(directive)
                continue
            default_level = level

    return default_level, module_levels, rejected


def setup_logger(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: int = 10485760,  # 10 MB
    backup_count: int = 5,
    colorize: bool = True,
    env_var: str = DEFAULT_ENV_VAR,
    debug: bool = False
) -> logging.Logger:
    """
    Configure the package logger for the invoice scanner.

    This function should be called once at application startup. All
    subsequent calls to get_logger() inherit this configuration. A filter
    found in ``env_var`` overrides ``level``. ``debug`` overrides both,
    including per-module levels from the filter.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Custom log format string.
        date_format: Custom date format string.
        log_file: Path to log file. If None, file logging is disabled.
        max_bytes: Maximum log file size before rotation.
        backup_count: Number of backup files to keep.
        colorize: Whether to colorize console output.
        env_var: Environment variable holding the level filter.
        debug: Force DEBUG on the whole package.

    Returns:
        Configured package logger.
    """
    if log_format is None:
        log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    env_level, module_levels, rejected = parse_log_filter(os.environ.get(env_var))
    if debug:
        package_level = logging.DEBUG
    elif env_level is not None:
        package_level = env_level
    else:
        package_level = getattr(logging, level.upper())

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(package_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Handlers pass everything; loggers decide
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)

    if colorize:
        colorama.init()
        console_formatter = ColoredFormatter(log_format, datefmt=date_format)
    else:
        console_formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = ensure_directory(os.path.dirname(log_file) or ".") / os.path.basename(log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        root_logger.addHandler(file_handler)

    for name, module_level in module_levels.items():
        # NOTSET defers to the package level
        logging.getLogger(name).setLevel(logging.NOTSET if debug else module_level)

    # Prevent propagation to root logger
    root_logger.propagate = False

    for directive in rejected:
        root_logger.warning(f"Ignoring {env_var} directive '{directive}': unknown level")

    root_logger.debug("Logging initialized")
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger, typically __name__.

    Returns:
        Logger instance under the package namespace.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing started")
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger_from_config(debug: bool = False) -> logging.Logger:
    """
    Initialize logging using settings from the configuration file.

    Args:
        debug: Force DEBUG regardless of configured and environment levels.

    Returns:
        Configured package logger.
    """
    from config import get_config

    log_file = None
    if get_config("logging.file.enabled", False):
        log_file = get_config("logging.file.path")

    return setup_logger(
        level=get_config("logging.level", "INFO"),
        log_format=get_config("logging.format"),
        date_format=get_config("logging.date_format"),
        log_file=log_file,
        max_bytes=get_config("logging.file.max_bytes", 10485760),
        backup_count=get_config("logging.file.backup_count", 5),
        colorize=get_config("logging.console.colorize", True),
        env_var=get_config("logging.env_var", DEFAULT_ENV_VAR),
        debug=debug
    )
