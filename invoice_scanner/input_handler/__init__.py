"""
Input Handler Module for Invoice Scanner.

This module provides functionality for:
    - Classifying input files (name, extension, MIME type)
    - Reading JPEG files
    - Rendering the first PDF page to JPEG

Supported formats:
    - JPG, JPEG (sent as-is)
    - PDF (first page only)

Author: ML Engineering Team
"""

from .classifier import FileInfo, classify_file
from .handler import ImageExtractor, SourceFormat, SUPPORTED_EXTENSIONS
from .pdf_processor import PDFProcessor
from .image_processor import ImageProcessor

__all__ = [
    'FileInfo',
    'classify_file',
    'ImageExtractor',
    'SourceFormat',
    'SUPPORTED_EXTENSIONS',
    'PDFProcessor',
    'ImageProcessor',
]
