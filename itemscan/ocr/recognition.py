"""
Screenshot recognition: image in, raw text plus confidence out.

The OCR engine is an external collaborator. This module only adapts it:
- preprocess_image() prepares game screenshots (upscale, grayscale, binarize)
- Recognizer is the engine interface the rest of the library depends on
- TesseractRecognizer drives Tesseract through pytesseract (optional install)
- scan_image() chains recognition and catalog matching
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from itemscan.exceptions import RecognitionError

if TYPE_CHECKING:
    from itemscan.catalog import Catalog
    from itemscan.config import MatchConfig
    from itemscan.models import MatchReport

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_LANGUAGE = "vie"

# Small screenshots are upscaled so the longer side approaches this
TARGET_LONG_SIDE_PX = 2000
MAX_UPSCALE = 3.0

CONTRAST_FACTOR = 1.5
CONTRAST_PIVOT = 128
BINARIZE_THRESHOLD = 140


# =============================================================================
# PREPROCESSING
# =============================================================================


def _binarize_level(gray: int) -> int:
    adjusted = (gray - CONTRAST_PIVOT) * CONTRAST_FACTOR + CONTRAST_PIVOT
    adjusted = max(0.0, min(255.0, adjusted))
    return 255 if adjusted > BINARIZE_THRESHOLD else 0


_BINARIZE_TABLE = [_binarize_level(level) for level in range(256)]


def preprocess_image(image: Image.Image) -> Image.Image:
    """
    Prepare a screenshot for OCR.

    Upscales small images (never more than 3x, never down), converts to
    grayscale with ITU-R 601 luma weights, boosts contrast around mid-gray
    and binarizes to pure black and white.

    Args:
        image: Source image in any mode.

    Returns:
        New grayscale ("L") image with only 0 and 255 values.
    """
    width, height = image.size
    longest = max(width, height)
    scale = max(1.0, min(MAX_UPSCALE, TARGET_LONG_SIDE_PX / longest)) if longest else 1.0

    if scale > 1.0:
        image = image.resize((int(width * scale), int(height * scale)), Image.Resampling.BILINEAR)

    gray = image.convert("RGB").convert("L")
    return gray.point(_BINARIZE_TABLE)


# =============================================================================
# ENGINES
# =============================================================================


@dataclass(frozen=True)
class RecognitionResult:
    """Raw output of one recognition call."""

    text: str
    confidence: float  # 0-100, mean word confidence


class Recognizer(ABC):
    """Interface for OCR engines."""

    @abstractmethod
    def recognize(self, image: Image.Image) -> RecognitionResult:
        """Convert an image to raw text.

        Raises:
            RecognitionError: If the engine cannot process the image.
        """
        pass

    @property
    def is_available(self) -> bool:
        """Whether the engine can be used in this environment."""
        return True


def _check_tesseract_available() -> bool:
    """Check if Tesseract is installed and usable."""
    try:
        import pytesseract

        # Try to get version to verify installation
        pytesseract.get_tesseract_version()
        return True
    except ImportError:
        logger.debug("pytesseract not installed")
        return False
    except pytesseract.TesseractNotFoundError:
        logger.debug("Tesseract binary not found")
        return False


def _join_tesseract_words(data: dict[str, list]) -> tuple[str, float]:
    """
    Rebuild text lines and mean confidence from ``image_to_data`` output.

    Words are grouped by (block, paragraph, line) in reading order. Entries
    with confidence -1 are layout rows, not words.
    """
    lines: dict[tuple[int, int, int], list[str]] = {}
    confidences: list[float] = []

    for i, word in enumerate(data["text"]):
        conf = float(data["conf"][i])
        if conf < 0 or not word.strip():
            continue
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines.setdefault(key, []).append(word.strip())
        confidences.append(conf)

    text = "\n".join(" ".join(words) for words in lines.values())
    confidence = sum(confidences) / len(confidences) if confidences else 0.0
    return text, confidence


@dataclass
class TesseractRecognizer(Recognizer):
    """
    Tesseract-backed recognizer.

    Attributes:
        language: Tesseract language pack (Vietnamese by default).
        preprocess: Run preprocess_image() before recognition.
        tesseract_config: Extra command-line options, e.g. "--psm 6".

    Example:
        >>> recognizer = TesseractRecognizer()
        >>> if recognizer.is_available:
        ...     result = recognizer.recognize(Image.open("inventory.png"))
        ...     print(result.text, result.confidence)
    """

    language: str = DEFAULT_LANGUAGE
    preprocess: bool = True
    tesseract_config: str = ""

    @property
    def is_available(self) -> bool:
        return _check_tesseract_available()

    def recognize(self, image: Image.Image) -> RecognitionResult:
        try:
            import pytesseract
        except ImportError as e:
            raise RecognitionError(
                "pytesseract is not installed; install itemscan[ocr] for image input"
            ) from e

        prepared = preprocess_image(image) if self.preprocess else image

        try:
            data = pytesseract.image_to_data(
                prepared,
                lang=self.language,
                config=self.tesseract_config,
                output_type=pytesseract.Output.DICT,
            )
        except pytesseract.TesseractNotFoundError as e:
            raise RecognitionError("Tesseract binary not found") from e
        except pytesseract.TesseractError as e:
            raise RecognitionError(f"Tesseract failed: {e}") from e

        text, confidence = _join_tesseract_words(data)
        logger.debug("Recognized %d characters (confidence %.1f)", len(text), confidence)
        return RecognitionResult(text=text, confidence=confidence)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def open_image(path: str | Path) -> Image.Image:
    """
    Load an image file fully into memory.

    Raises:
        RecognitionError: If the file is missing or not an image.
    """
    try:
        with Image.open(path) as opened:
            opened.load()
            return opened.copy()
    except OSError as e:
        raise RecognitionError(f"Cannot open image '{path}': {e}") from e


def scan_image(
    image: Image.Image | str | Path,
    catalog: Catalog | Iterable[str],
    recognizer: Recognizer | None = None,
    config: MatchConfig | None = None,
) -> MatchReport:
    """
    Recognize a screenshot and match its lines against a catalog.

    Args:
        image: PIL image or path to an image file.
        catalog: Catalog, or any iterable of item names.
        recognizer: OCR engine (default: TesseractRecognizer()).
        config: Matching thresholds (defaults if None).

    Returns:
        MatchReport carrying the engine's confidence.

    Raises:
        RecognitionError: If the image cannot be opened or recognized.
    """
    from itemscan.matching.matcher import ItemMatcher

    if isinstance(image, (str, Path)):
        image = open_image(image)

    recognizer = recognizer or TesseractRecognizer()
    if not recognizer.is_available:
        logger.warning("OCR engine %s is not available", type(recognizer).__name__)

    result = recognizer.recognize(image)
    return ItemMatcher(catalog, config).match_text(result.text, ocr_confidence=result.confidence)
