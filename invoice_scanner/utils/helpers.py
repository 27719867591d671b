"""
Helper Utilities Module.

This module provides small utility functions used throughout the
invoice scanner. Functions here should be generic and reusable
across different modules.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - get_file_extension: Extract file extension safely
    - format_file_size: Human readable byte counts
    - merge_dicts: Deep merge of configuration mappings
"""

from pathlib import Path
from typing import Union, Optional


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Example:
        >>> ensure_directory("logs")
        PosixPath('logs')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def get_file_extension(filepath: Union[str, Path]) -> Optional[str]:
    """
    Extract the file extension from a filepath.

    Returns the extension in lowercase, without the leading dot.
    Returns None if the name has no extension.

    Args:
        filepath: Path to the file.

    Returns:
        Lowercase file extension (e.g., "pdf") or None.

    Example:
        >>> get_file_extension("document.PDF")
        "pdf"
        >>> get_file_extension("noextension") is None
        True
    """
    suffix = Path(filepath).suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Example:
        >>> format_file_size(1536)
        "1.5 KB"
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"


def merge_dicts(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries, with override taking precedence.

    Args:
        base: Base dictionary.
        override: Dictionary with values to override.

    Returns:
        Merged dictionary.

    Example:
        >>> base = {"a": 1, "b": {"c": 2}}
        >>> override = {"b": {"d": 3}}
        >>> merge_dicts(base, override)
        {"a": 1, "b": {"c": 2, "d": 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result
