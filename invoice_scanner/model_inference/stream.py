"""
Streamed Response Assembly.

The inference server streams generated text as newline-delimited JSON
objects, e.g.::

    {"model": "qwen2.5vl:7b", "response": "{\\"payer", "done": false}
    {"model": "qwen2.5vl:7b", "response": "Name\\": ", "done": false}
    ...
    {"model": "qwen2.5vl:7b", "response": "", "done": true}

or a single ``{"error": "..."}`` object when generation fails.
"""

import json
from typing import Iterable, Union

from invoice_scanner.utils.logger import get_logger
from invoice_scanner.utils.exceptions import APIError, InvalidChunkError

logger = get_logger(__name__)


def assemble_response(chunks: Iterable[Union[str, bytes]]) -> str:
    """
    Fold streamed chunks into the complete answer text.

    Chunks are consumed in order. ``response`` fragments are appended to
    the answer; the first ``error`` chunk stops consumption.

    Args:
        chunks: Raw chunks, one JSON object each. Blank keep-alive lines
            are skipped.

    Returns:
        Concatenated answer text.

    Raises:
        InvalidChunkError: If a chunk is not a JSON object.
        APIError: If a chunk carries an ``error`` message.

    Example:
        >>> assemble_response(['{"response": "A"}', '{"response": "B"}'])
        'AB'
    """
    parts = []
    done = False

    for chunk in chunks:
        if isinstance(chunk, bytes):
            chunk = chunk.decode("utf-8", errors="replace")

        logger.debug(f"chunk_str: {chunk}")

        if not chunk.strip():
            continue

        try:
            payload = json.loads(chunk)
        except json.JSONDecodeError as e:
            raise InvalidChunkError(chunk) from e

        if not isinstance(payload, dict):
            raise InvalidChunkError(chunk)

        text = payload.get("response")
        error = payload.get("error")

        if isinstance(text, str):
            parts.append(text)
        elif isinstance(error, str):
            raise APIError(error)

        if payload.get("done") is True:
            done = True

    if not done:
        logger.warning("Stream ended without a final 'done' chunk; answer may be incomplete")

    return "".join(parts)
