"""
Image Processor Module.

This module handles the raster side of input processing:
    - Reading JPEG files as-is
    - Encoding rendered pages to JPEG

JPEG sources are passed through byte for byte.

Author: ML Engineering Team
"""

import io
from pathlib import Path
from typing import Union

from PIL import Image

from config import get_config
from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.helpers import format_file_size
from invoice_scanner.utils.exceptions import FileReadError, ImageEncodeError

# Initialize module logger
logger = get_logger(__name__)


class ImageProcessor:
    """
    Processor for raster images.

    Attributes:
        jpeg_quality: JPEG quality used when encoding rendered pages

    Example:
        >>> processor = ImageProcessor()
        >>> data = processor.read_raw("invoice.jpg")
        >>> jpeg = processor.encode_jpeg(page_image)
    """

    def __init__(self, jpeg_quality: int = None) -> None:
        """Initialize the image processor with configuration."""
        self.jpeg_quality = jpeg_quality or get_config("input.jpeg.quality", 90)

        logger.debug(f"ImageProcessor initialized (jpeg_quality={self.jpeg_quality})")

    def read_raw(self, filepath: Union[str, Path]) -> bytes:
        """
        Read an image file without decoding it.

        Args:
            filepath: Path to the image file.

        Returns:
            Raw file bytes.

        Raises:
            FileReadError: If the file cannot be read.
        """
        filepath = Path(filepath)

        try:
            data = filepath.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read image {filepath}: {e}")
            raise FileReadError(str(filepath), str(e)) from e

        logger.info(f"Read image: {filepath.name} ({format_file_size(len(data))})")
        return data

    def encode_jpeg(self, image: Image.Image) -> bytes:
        """
        Encode a PIL image to JPEG bytes.

        Args:
            image: Image to encode. Non-RGB modes are converted first
                   since JPEG cannot hold alpha or palette data.

        Returns:
            JPEG encoded bytes.

        Raises:
            ImageEncodeError: If encoding fails.
        """
        try:
            if image.mode != 'RGB':
                image = image.convert('RGB')

            buffer = io.BytesIO()
            image.save(buffer, format='JPEG', quality=self.jpeg_quality)
        except (OSError, ValueError) as e:
            logger.error(f"JPEG encoding failed: {e}")
            raise ImageEncodeError(str(e)) from e

        data = buffer.getvalue()
        logger.debug(
            f"Encoded {image.width}x{image.height} page to JPEG "
            f"({format_file_size(len(data))})"
        )
        return data
