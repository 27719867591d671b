# tests/test_request.py

import base64
import json

import pytest

from invoice_scanner.model_inference import GenerateRequest, encode_images


class TestEncodeImages:
    def test_base64_round_trip(self, jpeg_bytes):
        (encoded,) = encode_images([jpeg_bytes])

        assert base64.b64decode(encoded, validate=True) == jpeg_bytes

    def test_padding_is_kept(self):
        assert encode_images([b"ab"]) == ["YWI="]

    def test_order_is_preserved(self):
        assert encode_images([b"1", b"2", b"3"]) == ["MQ==", "Mg==", "Mw=="]


class TestGenerateRequest:
    def test_wire_format(self):
        request = GenerateRequest.from_images("qwen2.5vl:7b", "Extract", [b"ab"])

        assert request.to_dict() == {
            "model": "qwen2.5vl:7b",
            "prompt": "Extract",
            "images": ["YWI="],
        }
        json.dumps(request.to_dict())

    def test_requires_images(self):
        with pytest.raises(ValueError, match="at least one image"):
            GenerateRequest(model="m", prompt="p", images=[])

    def test_repr_hides_image_data(self):
        request = GenerateRequest(model="m", prompt="prompt", images=["A" * 10000])

        assert "AAAA" not in repr(request)
        assert "images=1" in repr(request)
