"""
Invoice Scanner - Source Package.

Extracts payer, receiver, bank and payment details from a scanned
invoice (JPEG or PDF) using a local vision-language model.

Modules:
    - input_handler: File classification and page image extraction
    - model_inference: Request, streamed answer assembly and parsing
    - utils: Logging, exceptions and helpers

Architecture:
    Classify → Extract images → Inference request → Parse answer
"""

__version__ = "0.1.0"
__author__ = "ML Engineering Team"

__all__ = [
    'input_handler',
    'model_inference',
    'utils'
]
