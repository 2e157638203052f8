"""
itemscan: Match OCR text from game screenshots against an item catalog.

This library takes noisy, diacritic-mangled, line-broken text recognized
from an inventory screenshot and identifies which catalog items it names,
with a confidence score per line. Lines that match nothing are turned into
copyable catalog-entry suggestions.

Example:
    >>> import itemscan
    >>> catalog = itemscan.load_catalog("vatpham.txt")
    >>> report = itemscan.match_text(raw_ocr_text, catalog)
    >>> for result in report.matched:
    ...     print(result.matched_entry, result.confidence_band.value)
    >>> print(report.suggestion_block)  # paste into vatpham.txt
"""

from itemscan.catalog import Catalog, load_catalog, parse_catalog
from itemscan.config import MatchConfig
from itemscan.exceptions import (
    CatalogError,
    ConfigurationError,
    ItemScanError,
    RecognitionError,
)
from itemscan.matching import (
    ItemMatcher,
    match_text,
    split_ocr_lines,
    suggest_entries,
    suggest_entry,
)
from itemscan.models import (
    # Enums
    ConfidenceBand,
    MatchStrategy,
    # Results
    MatchCandidate,
    MatchReport,
    MatchResult,
)
from itemscan.ocr import (
    RecognitionResult,
    Recognizer,
    SilverAmount,
    TesseractRecognizer,
    extract_silver_amount,
    scan_image,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "match_text",
    "scan_image",
    "ItemMatcher",
    "split_ocr_lines",
    "suggest_entry",
    "suggest_entries",
    "extract_silver_amount",
    # Catalog
    "Catalog",
    "load_catalog",
    "parse_catalog",
    # Configuration
    "MatchConfig",
    # Enums
    "ConfidenceBand",
    "MatchStrategy",
    # Results
    "MatchCandidate",
    "MatchResult",
    "MatchReport",
    "SilverAmount",
    # Recognition
    "Recognizer",
    "RecognitionResult",
    "TesseractRecognizer",
    # Exceptions
    "ItemScanError",
    "CatalogError",
    "ConfigurationError",
    "RecognitionError",
]
