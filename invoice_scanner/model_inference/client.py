"""
Inference Client Module.

This module provides the InferenceClient class that sends invoice pages
to a local vision-language model server and turns its streamed answer
into an InvoiceInfo.

Pipeline:
    classify file -> extract JPEG pages -> base64 -> POST (streamed)
    -> assemble chunks -> strip fences -> decode InvoiceInfo

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Optional, Union

import requests

from config import get_config
from invoice_scanner.input_handler import ImageExtractor, classify_file
from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.exceptions import TransportError

from .invoice_info import InvoiceInfo
from .prompt import INVOICE_PROMPT
from .request import GenerateRequest
from .response_parser import parse_invoice
from .stream import assemble_response

# Initialize module logger
logger = get_logger(__name__)


class InferenceClient:
    """
    Client for an Ollama-compatible ``/api/generate`` endpoint.

    Each call to scan() makes exactly one streamed request; nothing is
    retried.

    Attributes:
        endpoint: URL of the generate endpoint
        model: Model identifier sent with each request
        timeout: Requests timeout in seconds, None to wait indefinitely
        session: requests.Session used for the HTTP call
        extractor: ImageExtractor turning files into JPEG pages

    Example:
        >>> client = InferenceClient()
        >>> invoice = client.scan("invoice.pdf")
        >>> print(invoice.receiver_name, invoice.amount)
    """

    DEFAULT_ENDPOINT = "http://localhost:11434/api/generate"
    DEFAULT_MODEL = "qwen2.5vl:7b"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        extractor: Optional[ImageExtractor] = None
    ) -> None:
        self.endpoint = endpoint or get_config("inference.endpoint", self.DEFAULT_ENDPOINT)
        self.model = model or get_config("inference.model", self.DEFAULT_MODEL)
        self.timeout = timeout if timeout is not None else get_config("inference.timeout")
        self.session = session or requests.Session()
        self.extractor = extractor or ImageExtractor()

        logger.debug(f"InferenceClient initialized (endpoint={self.endpoint}, model={self.model})")

    def scan(self, filepath: Union[str, Path], prompt: str = INVOICE_PROMPT) -> InvoiceInfo:
        """
        Extract invoice fields from an image or PDF.

        Args:
            filepath: Path to a JPEG or PDF invoice.
            prompt: Instruction prompt for the model.

        Returns:
            Parsed InvoiceInfo.

        Raises:
            FileInfoError: If the path has no file name.
            UnsupportedFileTypeError: If the extension is not jpg, jpeg or pdf.
            FileReadError, PDFRenderError, ImageEncodeError: On extraction failures.
            TransportError: If the request or the body read fails.
            InvalidChunkError, APIError: On unusable stream chunks.
            ResponseParseError: If the answer is not a valid invoice.
        """
        info = classify_file(filepath)
        images = self.extractor.extract(filepath, info.extension)

        request = GenerateRequest.from_images(self.model, prompt, images)
        answer = self.generate(request)

        return parse_invoice(answer)

    def generate(self, request: GenerateRequest) -> str:
        """
        Send a request and assemble the streamed answer.

        Args:
            request: Request to send.

        Returns:
            Complete answer text.
        """
        logger.info(f"Sending {request!r} to {self.endpoint}")

        try:
            response = self.session.post(
                self.endpoint,
                json=request.to_dict(),
                stream=True,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Request to {self.endpoint} failed: {e}")
            raise TransportError(self.endpoint, str(e)) from e

        with response:
            logger.debug(f"Inference endpoint answered with HTTP {response.status_code}")
            try:
                answer = assemble_response(response.iter_lines())
            except requests.RequestException as e:
                logger.error(f"Reading response stream failed: {e}")
                raise TransportError(self.endpoint, str(e)) from e

        logger.info(f"Received answer ({len(answer)} chars)")
        return answer
