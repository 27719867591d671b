"""
Main Input Handler Module.

This module provides the ImageExtractor class that turns an invoice file
into the JPEG buffers sent to the vision model. The supported source
formats form a closed enumeration; each member has its own handler.

Usage:
    from invoice_scanner.input_handler import ImageExtractor, classify_file

    info = classify_file("invoice.pdf")
    images = ImageExtractor().extract("invoice.pdf", info.extension)

Classes:
    SourceFormat: Supported source formats
    ImageExtractor: Source file to JPEG buffers
"""

from enum import Enum
from pathlib import Path
from typing import Union, List, Optional

from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.exceptions import UnsupportedFileTypeError

from .pdf_processor import PDFProcessor
from .image_processor import ImageProcessor


# Initialize module logger
logger = get_logger(__name__)


class SourceFormat(Enum):
    """Source formats accepted by the extractor."""

    JPEG = "jpeg"
    PDF = "pdf"

    @classmethod
    def from_extension(cls, extension: Optional[str]) -> 'SourceFormat':
        """
        Map a file extension to a source format.

        Args:
            extension: Extension without the dot, any case.

        Returns:
            Matching SourceFormat.

        Raises:
            UnsupportedFileTypeError: If the extension is not supported.
        """
        fmt = _EXTENSIONS.get((extension or "").lower())
        if fmt is None:
            raise UnsupportedFileTypeError(extension, sorted(SUPPORTED_EXTENSIONS))
        return fmt


_EXTENSIONS = {
    "jpg": SourceFormat.JPEG,
    "jpeg": SourceFormat.JPEG,
    "pdf": SourceFormat.PDF,
}

SUPPORTED_EXTENSIONS = frozenset(_EXTENSIONS)


class ImageExtractor:
    """
    Converts an invoice file into JPEG encoded page images.

    Attributes:
        pdf_processor: PDFProcessor instance for PDF files
        image_processor: ImageProcessor instance for reading and encoding

    Example:
        >>> extractor = ImageExtractor()
        >>> images = extractor.extract("invoice.jpg", "jpg")
        >>> len(images)
        1
    """

    # Only the first page of a PDF is sent to the model
    PDF_PAGES = (0,)

    def __init__(
        self,
        pdf_processor: Optional[PDFProcessor] = None,
        image_processor: Optional[ImageProcessor] = None
    ) -> None:
        self.pdf_processor = pdf_processor or PDFProcessor()
        self.image_processor = image_processor or ImageProcessor()

        self._handlers = {
            SourceFormat.JPEG: self._extract_jpeg,
            SourceFormat.PDF: self._extract_pdf,
        }

    def extract(self, filepath: Union[str, Path], extension: Optional[str]) -> List[bytes]:
        """
        Extract JPEG buffers from an invoice file.

        Args:
            filepath: Path to the invoice file.
            extension: File extension as reported by the classifier.

        Returns:
            Ordered list of JPEG encoded images.

        Raises:
            UnsupportedFileTypeError: If the extension is not supported.
            FileReadError: If an image file cannot be read.
            PDFRenderError: If a PDF cannot be rendered.
            ImageEncodeError: If a rendered page cannot be encoded.
        """
        source_format = SourceFormat.from_extension(extension)
        logger.debug(f"Extracting {source_format.value} images from {filepath}")

        images = self._handlers[source_format](Path(filepath))

        logger.info(f"Extracted {len(images)} image(s) from {Path(filepath).name}")
        return images

    def _extract_jpeg(self, filepath: Path) -> List[bytes]:
        return [self.image_processor.read_raw(filepath)]

    def _extract_pdf(self, filepath: Path) -> List[bytes]:
        pages = self.pdf_processor.render(filepath, pages=self.PDF_PAGES)
        return [self.image_processor.encode_jpeg(page) for page in pages]
