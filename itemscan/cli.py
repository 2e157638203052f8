"""
Match OCR text from a screenshot against an item catalog.

Usage:
    # Match text already produced by an OCR engine
    itemscan --catalog assets/data/vatpham.txt --text ocr_output.txt

    # Recognize a screenshot first (needs Tesseract with the 'vie' pack)
    itemscan --catalog assets/data/vatpham.txt --image inventory.png

    # Read OCR text from stdin, write JSON
    cat ocr_output.txt | itemscan --catalog vatpham.txt --format json -o results.json

    # Custom thresholds
    itemscan --catalog vatpham.txt --text ocr_output.txt --config matching.yaml
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from itemscan.catalog import load_catalog
from itemscan.config import MatchConfig
from itemscan.exceptions import ItemScanError
from itemscan.matching.matcher import ItemMatcher
from itemscan.ocr.recognition import TesseractRecognizer, open_image
from itemscan.ocr.silver import extract_silver_amount
from itemscan.reports import generate_cli_report, generate_json_report, save_json_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itemscan",
        description="Match OCR text against an item catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        required=True,
        help="Catalog file (one item per line, first line is a header)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        type=Path,
        help="File with raw OCR text (default: read stdin)",
    )
    source.add_argument(
        "--image",
        type=Path,
        help="Screenshot to recognize with Tesseract",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with matching thresholds",
    )
    parser.add_argument(
        "--language",
        default="vie",
        help="Tesseract language for --image (default: vie)",
    )
    parser.add_argument(
        "--format",
        choices=["cli", "json"],
        default="cli",
        help="Output format (default: cli)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the JSON report to this path",
    )
    parser.add_argument(
        "--silver",
        action="store_true",
        help="Also extract the silver (vạn) amount from the text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every match decision",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog)
        config = MatchConfig.from_yaml(args.config) if args.config else MatchConfig()

        ocr_confidence = None
        if args.image:
            recognizer = TesseractRecognizer(language=args.language)
            recognized = recognizer.recognize(open_image(args.image))
            raw_text = recognized.text
            ocr_confidence = recognized.confidence
        elif args.text:
            try:
                raw_text = args.text.read_text(encoding="utf-8")
            except OSError as e:
                print(f"Error: Cannot read OCR text '{args.text}': {e.strerror}", file=sys.stderr)
                return 1
            except UnicodeDecodeError as e:
                print(f"Error: OCR text '{args.text}' is not valid UTF-8: {e}", file=sys.stderr)
                return 1
        else:
            raw_text = sys.stdin.read()

        logger.debug("Matching %d characters of OCR text", len(raw_text))
        report = ItemMatcher(catalog, config).match_text(raw_text, ocr_confidence)
    except ItemScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    silver = extract_silver_amount(raw_text) if args.silver else None

    if args.format == "json" or args.output:
        if args.output:
            try:
                save_json_report(report, args.output, str(args.catalog), silver)
            except OSError as e:
                print(
                    f"Error: Cannot write report '{args.output}': {e.strerror or e}",
                    file=sys.stderr,
                )
                return 1
            print(f"Results saved to: {args.output}")
        else:
            data = generate_json_report(report, str(args.catalog), silver)
            print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print(generate_cli_report(report, silver=silver))

    return 0
