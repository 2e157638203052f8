"""
OCR-facing helpers: recognition adapter and silver-amount extraction.

Example:
    >>> from itemscan.ocr import scan_image
    >>> report = scan_image("inventory.png", catalog)
    >>> report.summary()
    'Matched 3/4 items (OCR: 81%)'
"""

from itemscan.ocr.recognition import (
    RecognitionResult,
    Recognizer,
    TesseractRecognizer,
    open_image,
    preprocess_image,
    scan_image,
)
from itemscan.ocr.silver import SilverAmount, extract_silver_amount

__all__ = [
    # Recognition
    "Recognizer",
    "RecognitionResult",
    "TesseractRecognizer",
    "open_image",
    "preprocess_image",
    "scan_image",
    # Silver
    "SilverAmount",
    "extract_silver_amount",
]
