"""
File Classifier Module.

Derives the file name, extension and MIME type of an input path
without touching the filesystem.
"""

import mimetypes
from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional, Union

from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.helpers import get_file_extension
from invoice_scanner.utils.exceptions import FileInfoError

logger = get_logger(__name__)

OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class FileInfo:
    """
    Name, extension and MIME type of an input file.

    Attributes:
        file_name: Final component of the path
        extension: Lowercase extension without the dot, or None
        mime_type: Best guess MIME type
    """
    file_name: str
    extension: Optional[str]
    mime_type: str


def guess_mime_type(extension: Optional[str]) -> str:
    """
    Guess a MIME type from a bare extension.

    Example:
        >>> guess_mime_type("jpg")
        'image/jpeg'
        >>> guess_mime_type(None)
        'application/octet-stream'
    """
    if not extension:
        return OCTET_STREAM
    mime_type, _ = mimetypes.guess_type(f"file.{extension}", strict=False)
    return mime_type or OCTET_STREAM


def classify_file(filepath: Union[str, PurePath]) -> FileInfo:
    """
    Classify an input path.

    Args:
        filepath: Path to the invoice file.

    Returns:
        FileInfo for the path.

    Raises:
        FileInfoError: If the path has no file name component.
    """
    raw = str(filepath)
    path = PurePath(raw)

    # PurePath drops trailing separators, so "dir/" would look like "dir"
    if not raw or raw.endswith(("/", "\\")) or path.name in ("", ".", ".."):
        raise FileInfoError(raw)

    file_name = path.name
    extension = get_file_extension(path)
    mime_type = guess_mime_type(extension)

    logger.debug(
        f"file_name={file_name} extension={extension or ''} mime_type={mime_type}"
    )

    return FileInfo(file_name=file_name, extension=extension, mime_type=mime_type)
