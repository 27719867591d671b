#!/usr/bin/env python3
"""
Invoice Scanner - Main Entry Point.

Extracts payer, receiver, bank and payment details from a single
invoice image or PDF and prints them as JSON on stdout. Logs go to
stderr.

Usage:
    Command Line:
        python main.py invoice.pdf
        INVOICE_SCANNER_LOG=debug python main.py scan.jpg
        python main.py --model llava:13b --config my_settings.yaml scan.jpg

    Python:
        from main import run_extraction
        invoice = run_extraction("invoice.pdf")

Author: ML Engineering Team
Version: 0.1.0
"""

import argparse
import sys
from typing import Optional, List

from config import ConfigurationManager
from invoice_scanner.model_inference import InferenceClient, InvoiceInfo
from invoice_scanner.utils.exceptions import InvoiceScanError
from invoice_scanner.utils.logger import setup_logger_from_config, get_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Exactly one positional argument is accepted; argparse prints the
    usage message to stderr and exits with status 2 otherwise.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        prog="invoice-scan",
        description="Extract invoice fields from an image or PDF with a local vision model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Scan a PDF (first page only):
        invoice-scan invoice.pdf

    Trace every streamed chunk:
        INVOICE_SCANNER_LOG=debug invoice-scan scan.jpg
        """
    )

    parser.add_argument(
        "image_path",
        help="Path to a JPG/JPEG image or a PDF invoice"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="YAML file overriding the bundled settings"
    )

    parser.add_argument(
        "--model", "-m",
        type=str,
        default=None,
        help="Model identifier (default: inference.model from settings)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config(debug=args.debug)

    logger.debug(f"Version: {config.get('project.version', '0.1.0')}")
    logger.debug(f"Input: {args.image_path}")

    return config


def run_extraction(image_path: str, model: Optional[str] = None) -> InvoiceInfo:
    """
    Run the invoice scanner on a single file.

    This is the main programmatic entry point.

    Args:
        image_path: Path to a JPG/JPEG image or PDF.
        model: Optional model identifier overriding the configuration.

    Returns:
        Extracted InvoiceInfo.

    Raises:
        InvoiceScanError: If any pipeline stage fails.

    Example:
        >>> invoice = run_extraction("invoice.pdf")
        >>> print(invoice.amount)
    """
    logger = get_logger(__name__)

    client = InferenceClient(model=model)
    logger.info(f"Scanning {image_path} with {client.model}")

    return client.scan(image_path)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_arguments(argv)

    try:
        initialize_system(args)

        invoice = run_extraction(args.image_path, model=args.model)

        print(invoice.to_json())
        return 0

    except InvoiceScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
