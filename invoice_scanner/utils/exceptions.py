"""
Custom Exceptions Module.

This module defines all custom exceptions used throughout the invoice
scanner. Every stage of the pipeline raises its own exception type so
the entry point can report which stage failed and why.

Exception Hierarchy:
    InvoiceScanError (base)
    ├── InputError
    │   ├── FileInfoError
    │   ├── UnsupportedFileTypeError
    │   ├── FileReadError
    │   ├── PDFRenderError
    │   └── ImageEncodeError
    └── InferenceError
        ├── TransportError
        ├── StreamChunkError
        │   ├── InvalidChunkError
        │   └── APIError
        └── ResponseParseError
"""

from typing import Optional


class InvoiceScanError(Exception):
    """
    Base exception for all invoice scanner errors.

    All custom exceptions in this system inherit from this class,
    allowing for easy catching of all system-specific errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(InvoiceScanError):
    """Base exception for input handling errors."""
    pass


class FileInfoError(InputError):
    """Raised when no file name can be derived from the given path."""

    def __init__(self, filepath: str):
        message = f"Error extract file info: file name not found in '{filepath}'"
        details = {"filepath": filepath}
        super().__init__(message, details)


class UnsupportedFileTypeError(InputError):
    """
    Raised when an unsupported file extension is provided.

    Example:
        >>> raise UnsupportedFileTypeError("png", ["jpg", "jpeg", "pdf"])
    """

    def __init__(self, extension: Optional[str], supported_types: list):
        self.extension = extension or ""
        message = f"Unsupported file extension: {self.extension}"
        details = {"extension": self.extension, "supported_types": supported_types}
        super().__init__(message, details)


class FileReadError(InputError):
    """Raised when the source file cannot be read."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Error reading file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


class PDFRenderError(InputError):
    """Raised when a PDF cannot be opened or rasterized."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Error rendering PDF: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


class ImageEncodeError(InputError):
    """Raised when a rendered page cannot be encoded to JPEG."""

    def __init__(self, reason: str = None):
        message = "Error encoding image to JPEG"
        details = {"reason": reason}
        super().__init__(message, details)


# =============================================================================
# INFERENCE ERRORS
# =============================================================================

class InferenceError(InvoiceScanError):
    """Base exception for inference endpoint errors."""
    pass


class TransportError(InferenceError):
    """Raised when the request cannot be sent or the body cannot be read."""

    def __init__(self, endpoint: str, reason: str = None):
        message = f"Request to inference endpoint failed: {endpoint}"
        details = {"endpoint": endpoint, "reason": reason}
        super().__init__(message, details)


class StreamChunkError(InferenceError):
    """Base exception for unusable chunks in the streamed response."""
    pass


class InvalidChunkError(StreamChunkError):
    """Raised when a streamed chunk is not a JSON object."""

    def __init__(self, chunk: str):
        self.chunk = chunk
        super().__init__(f"Invalid JSON response: {chunk}")


class APIError(StreamChunkError):
    """Raised when the inference server reports an error in the stream."""

    def __init__(self, error: str):
        self.error = error
        super().__init__(f"API error: {error}")


class ResponseParseError(InferenceError):
    """Raised when the assembled answer does not decode into an invoice."""

    def __init__(self, reason: str, text: str):
        self.reason = reason
        self.text = text
        super().__init__(f"Error deserialize response: {reason}\n{text}")


# Export all exceptions
__all__ = [
    'InvoiceScanError',
    'InputError',
    'FileInfoError',
    'UnsupportedFileTypeError',
    'FileReadError',
    'PDFRenderError',
    'ImageEncodeError',
    'InferenceError',
    'TransportError',
    'StreamChunkError',
    'InvalidChunkError',
    'APIError',
    'ResponseParseError',
]
