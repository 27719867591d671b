# tests/test_classifier.py

import logging
from pathlib import Path

import pytest

from invoice_scanner.input_handler.classifier import (
    OCTET_STREAM,
    FileInfo,
    classify_file,
    guess_mime_type,
)
from invoice_scanner.utils.exceptions import FileInfoError


class TestClassifyFile:
    """Test file name, extension and MIME derivation."""

    def test_pdf_extension_is_lowercased(self):
        info = classify_file("scans/Invoice.PDF")

        assert info == FileInfo(
            file_name="Invoice.PDF", extension="pdf", mime_type="application/pdf"
        )

    @pytest.mark.parametrize("name", ["photo.jpg", "photo.jpeg", "photo.JPG"])
    def test_jpeg_mime_type(self, name):
        info = classify_file(name)

        assert info.mime_type == "image/jpeg"
        assert info.extension == name.rsplit(".", 1)[1].lower()

    def test_accepts_path_objects(self):
        info = classify_file(Path("/tmp/docs/invoice.jpeg"))

        assert info.file_name == "invoice.jpeg"
        assert info.extension == "jpeg"

    def test_no_extension_defaults_to_octet_stream(self):
        info = classify_file("/tmp/README")

        assert info.extension is None
        assert info.mime_type == OCTET_STREAM

    def test_unknown_extension_defaults_to_octet_stream(self):
        info = classify_file("archive.zzzunknown")

        assert info.extension == "zzzunknown"
        assert info.mime_type == OCTET_STREAM

    @pytest.mark.parametrize("path", ["", "/", "..", "scans/"])
    def test_missing_file_name_raises(self, path):
        with pytest.raises(FileInfoError, match="file name not found"):
            classify_file(path)

    def test_does_not_touch_filesystem(self, tmp_path):
        missing = tmp_path / "does-not-exist.pdf"

        info = classify_file(missing)

        assert info.file_name == "does-not-exist.pdf"

    def test_emits_debug_trace(self, caplog):
        caplog.set_level(logging.DEBUG, logger="invoice_scanner")

        classify_file("invoice.pdf")

        assert "file_name=invoice.pdf extension=pdf mime_type=application/pdf" in caplog.text


class TestGuessMimeType:
    def test_none(self):
        assert guess_mime_type(None) == OCTET_STREAM

    def test_known(self):
        assert guess_mime_type("pdf") == "application/pdf"
