# tests/test_main.py

import json
import logging

import pytest

import main
from invoice_scanner.model_inference import InvoiceInfo
from invoice_scanner.utils.exceptions import APIError, UnsupportedFileTypeError


@pytest.fixture
def mock_client(mocker):
    """Patch the inference client used by the entry point."""
    client_cls = mocker.patch("main.InferenceClient")
    client = client_cls.return_value
    client.model = "qwen2.5vl:7b"
    return client_cls


class TestArguments:
    @pytest.mark.parametrize("argv", [[], ["a.jpg", "b.jpg"]])
    def test_wrong_arity_prints_usage(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main.main(argv)

        assert exc_info.value.code != 0
        assert "usage: invoice-scan" in capsys.readouterr().err

    def test_single_path(self):
        args = main.parse_arguments(["invoice.pdf"])

        assert args.image_path == "invoice.pdf"
        assert args.model is None
        assert args.debug is False


class TestMain:
    def test_prints_invoice_json_once(self, mock_client, capsys):
        mock_client.return_value.scan.return_value = InvoiceInfo(payer_name="Acme", amount=10000.0)

        assert main.main(["invoice.jpg"]) == 0

        out = capsys.readouterr().out
        assert out.count('"payerName"') == 1
        assert json.loads(out)["payerName"] == "Acme"
        assert json.loads(out)["amount"] == 10000.0
        mock_client.return_value.scan.assert_called_once_with("invoice.jpg")

    def test_model_override(self, mock_client, capsys):
        mock_client.return_value.scan.return_value = InvoiceInfo()

        main.main(["--model", "llava:13b", "invoice.jpg"])

        mock_client.assert_called_once_with(model="llava:13b")

    @pytest.mark.parametrize(
        "error,text",
        [
            (UnsupportedFileTypeError("png", ["jpeg", "jpg", "pdf"]), "Unsupported file extension: png"),
            (APIError("quota exceeded"), "API error: quota exceeded"),
        ],
    )
    def test_pipeline_errors_exit_nonzero(self, mock_client, capsys, error, text):
        mock_client.return_value.scan.side_effect = error

        assert main.main(["scan.png"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert text in captured.err

    def test_debug_overrides_env_module_levels(self, mock_client, monkeypatch):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "model_inference=warn")
        mock_client.return_value.scan.return_value = InvoiceInfo()

        assert main.main(["--debug", "x.jpg"]) == 0

        stream_logger = logging.getLogger("invoice_scanner.model_inference.stream")
        assert stream_logger.getEffectiveLevel() == logging.DEBUG

    def test_env_module_levels_apply_without_debug(self, mock_client, monkeypatch):
        monkeypatch.setenv("INVOICE_SCANNER_LOG", "model_inference=warn")
        mock_client.return_value.scan.return_value = InvoiceInfo()

        main.main(["x.jpg"])

        stream_logger = logging.getLogger("invoice_scanner.model_inference.stream")
        assert stream_logger.getEffectiveLevel() == logging.WARNING

    def test_missing_config_file(self, tmp_path, capsys):
        code = main.main(["--config", str(tmp_path / "absent.yaml"), "invoice.jpg"])

        assert code == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_unsupported_file_end_to_end(self, tmp_path, capsys):
        path = tmp_path / "scan.tiff"
        path.write_bytes(b"II*\x00")

        assert main.main([str(path)]) == 1
        assert "Unsupported file extension: tiff" in capsys.readouterr().err
