"""
Generate Request Data Class.

This module defines the payload posted to the inference endpoint and
the base64 encoding of page images.

Author: ML Engineering Team
"""

import base64
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Iterable, List


def encode_images(images: Iterable[bytes]) -> List[str]:
    """
    Base64-encode image buffers (standard alphabet, padded).

    Example:
        >>> encode_images([b"\\xff\\xd8\\xff"])
        ['/9j/']
    """
    return [base64.b64encode(image).decode("ascii") for image in images]


@dataclass
class GenerateRequest:
    """
    Request body for the inference endpoint.

    Attributes:
        model: Model identifier, e.g. "qwen2.5vl:7b"
        prompt: Instruction prompt
        images: Base64 encoded JPEG images, in page order
    """
    model: str
    prompt: str
    images: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.images:
            raise ValueError("GenerateRequest requires at least one image")

    @classmethod
    def from_images(cls, model: str, prompt: str, images: Iterable[bytes]) -> 'GenerateRequest':
        """Build a request from raw image buffers."""
        return cls(model=model, prompt=prompt, images=encode_images(images))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body sent over the wire."""
        return asdict(self)

    def __repr__(self) -> str:
        # Keep multi-megabyte base64 out of logs
        return (
            f"GenerateRequest(model='{self.model}', "
            f"prompt_chars={len(self.prompt)}, "
            f"images={len(self.images)})"
        )
