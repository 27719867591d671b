# tests/conftest.py

import io
import logging
from unittest.mock import MagicMock

import pytest
from PIL import Image

from config import ConfigurationManager
from invoice_scanner.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    """Fresh configuration and package logger for every test."""
    monkeypatch.delenv("INVOICE_SCANNER_LOG", raising=False)
    ConfigurationManager.reset()

    yield

    ConfigurationManager.reset()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    for name, child in logging.root.manager.loggerDict.items():
        if name.startswith(ROOT_LOGGER_NAME + ".") and isinstance(child, logging.Logger):
            child.setLevel(logging.NOTSET)


@pytest.fixture
def sample_image():
    """Small RGB page image."""
    return Image.new("RGB", (64, 48), color=(255, 255, 255))


@pytest.fixture
def jpeg_bytes(sample_image):
    buffer = io.BytesIO()
    sample_image.save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def sample_jpeg(tmp_path, jpeg_bytes):
    """JPEG invoice on disk."""
    path = tmp_path / "invoice.jpg"
    path.write_bytes(jpeg_bytes)
    return path


@pytest.fixture
def sample_pdf(tmp_path):
    """Placeholder PDF; rendering is mocked in tests that use it."""
    path = tmp_path / "invoice.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path


@pytest.fixture
def make_stream_response():
    """Build a mock streamed HTTP response yielding the given lines."""

    def _make(lines, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        if callable(lines):
            response.iter_lines.side_effect = lines
        else:
            response.iter_lines.return_value = iter(lines)
        return response

    return _make


@pytest.fixture
def mock_session(make_stream_response):
    """requests.Session stand-in whose post() returns a streamed response."""

    def _session(lines):
        session = MagicMock()
        session.post.return_value = make_stream_response(lines)
        return session

    return _session
