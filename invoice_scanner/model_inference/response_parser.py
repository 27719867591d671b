"""
Response Parser Module.

Turns the model's assembled answer into an InvoiceInfo. Models tend to
wrap JSON in markdown code fences even when told not to, so the fences
are stripped before decoding.
"""

from pydantic import ValidationError

from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.exceptions import ResponseParseError

from .invoice_info import InvoiceInfo

logger = get_logger(__name__)

CODE_FENCES = ("```json", "```")


def clean_response(text: str) -> str:
    """
    Remove markdown code fences and surrounding whitespace.

    Example:
        >>> clean_response('```json\\n{"amount": 1.0}\\n```')
        '{"amount": 1.0}'
    """
    for fence in CODE_FENCES:
        text = text.replace(fence, "")
    return text.strip()


def parse_invoice(text: str) -> InvoiceInfo:
    """
    Decode an assembled model answer.

    Args:
        text: Full answer text, possibly fenced.

    Returns:
        Parsed InvoiceInfo.

    Raises:
        ResponseParseError: If the cleaned text is not a JSON object matching
            the invoice schema. A single bad field rejects the whole answer.
    """
    cleaned = clean_response(text)

    try:
        # camelCase keys only; snake_case names are for Python callers
        invoice = InvoiceInfo.model_validate_json(cleaned, by_name=False)
    except ValidationError as e:
        logger.debug(f"Rejected model answer: {cleaned!r}")
        raise ResponseParseError(str(e), cleaned) from e

    logger.debug(f"Parsed invoice for payer '{invoice.payer_name}'")
    return invoice
