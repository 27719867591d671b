"""
Model Inference Module for Invoice Scanner.

This module delegates field extraction to a local vision-language model
served over HTTP (Ollama-compatible ``/api/generate``).

Features:
    - Base64 page encoding and request assembly
    - Streamed answer assembly with early exit on server errors
    - Code fence stripping and schema validation of the answer

Author: ML Engineering Team
"""

from .client import InferenceClient
from .invoice_info import InvoiceInfo
from .prompt import INVOICE_PROMPT
from .request import GenerateRequest, encode_images
from .response_parser import clean_response, parse_invoice
from .stream import assemble_response

__all__ = [
    'InferenceClient',
    'InvoiceInfo',
    'INVOICE_PROMPT',
    'GenerateRequest',
    'encode_images',
    'clean_response',
    'parse_invoice',
    'assemble_response',
]
