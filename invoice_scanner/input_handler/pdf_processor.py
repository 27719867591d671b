"""
PDF Processor Module.

This module rasterizes PDF pages for the vision model. Rendering is
delegated to pdf2image (Poppler), using the pdftocairo backend unless
input.pdf.use_pdftocairo is false.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Union, List, Sequence

import pdf2image
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError
from PIL import Image

from config import get_config
from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.exceptions import PDFRenderError

# Initialize module logger
logger = get_logger(__name__)


class PDFProcessor:
    """
    Processor for PDF files.

    Attributes:
        dpi: Resolution for PDF to image conversion
        use_pdftocairo: Whether to render with pdftocairo instead of pdftoppm

    Example:
        >>> processor = PDFProcessor()
        >>> images = processor.render("invoice.pdf", pages=[0])
        >>> print(f"Rendered {len(images)} page(s)")
    """

    def __init__(self) -> None:
        """Initialize the PDF processor with configuration."""
        self.dpi = get_config("input.pdf.dpi", 200)
        self.use_pdftocairo = get_config("input.pdf.use_pdftocairo", True)

        logger.debug(
            f"PDFProcessor initialized (DPI={self.dpi}, pdftocairo={self.use_pdftocairo})"
        )

    def render(
        self,
        filepath: Union[str, Path],
        pages: Sequence[int] = (0,)
    ) -> List[Image.Image]:
        """
        Render selected pages of a PDF.

        Args:
            filepath: Path to the PDF file.
            pages: Zero-based page indices, rendered in the given order.

        Returns:
            List of RGB PIL Images, one per requested page.

        Raises:
            PDFRenderError: If the PDF cannot be opened or a page is missing.
        """
        filepath = Path(filepath)
        logger.info(f"Rendering PDF: {filepath.name} (pages={list(pages)})")

        images = []
        for page_index in pages:
            if page_index < 0:
                raise PDFRenderError(str(filepath), f"Invalid page index: {page_index}")
            images.append(self._render_page(filepath, page_index))

        logger.info(f"Rendered {len(images)} page(s) from {filepath.name}")
        return images

    def _render_page(self, filepath: Path, page_index: int) -> Image.Image:
        """
        Render a single zero-based page.

        Args:
            filepath: Path to PDF file.
            page_index: Zero-based page index.

        Returns:
            RGB PIL Image of the page.
        """
        # pdf2image page numbers are 1-based
        page_number = page_index + 1

        try:
            rendered = pdf2image.convert_from_path(
                filepath,
                dpi=self.dpi,
                first_page=page_number,
                last_page=page_number,
                use_pdftocairo=self.use_pdftocairo
            )
        except (PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError, OSError) as e:
            logger.error(f"pdf2image conversion failed: {e}")
            raise PDFRenderError(str(filepath), str(e)) from e

        if not rendered:
            raise PDFRenderError(str(filepath), f"Page {page_index} not found")

        image = rendered[0]
        if image.mode != 'RGB':
            image = image.convert('RGB')

        logger.debug(f"Rendered page {page_index}: {image.width}x{image.height}")
        return image
