"""
Utility Module for Invoice Scanner.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Custom exceptions
    - Common helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, get_file_extension, format_file_size

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'get_file_extension',
    'format_file_size'
]
