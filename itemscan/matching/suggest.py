"""
Catalog-entry suggestions for OCR lines that matched nothing.

Catalog names of elemental items carry the element and tier, e.g.
``"Kinh Bạch Ngọc Bội - Thổ (cấp 2)"``. An unmatched name without that
suffix is expanded into one line per element so the operator can keep
the right one and paste it into the catalog file.

Catalog files separate the element with a hyphen or an en dash. The em
dash is accepted too, since OCR renders long dashes either way.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

ELEMENTS = ("Kim", "Thủy", "Mộc", "Hỏa", "Thổ")
SUGGESTED_TIER = 5

# "- Thổ (cấp 2)", "– Kim [cap 3", "-Mộc cấp 1", ...
TIERED_NAME_PATTERN = re.compile(
    r"[-–—]\s*(" + "|".join(ELEMENTS) + r")\s*[(\[]?\s*(cấp|cap)\s*\d+",
    re.IGNORECASE,
)


def is_catalog_ready(name: str) -> bool:
    """True if ``name`` already names a single element and tier."""
    return TIERED_NAME_PATTERN.search(name) is not None


def suggest_entry(name: str) -> str:
    """
    Suggest catalog text for an unmatched item name.

    Example:
        >>> suggest_entry("Ngọc Bội - Kim (cấp 3)")
        'Ngọc Bội - Kim (cấp 3)'
        >>> print(suggest_entry("Ngọc Bội"))
        Ngọc Bội - Kim (cấp 5)
        Ngọc Bội - Thủy (cấp 5)
        Ngọc Bội - Mộc (cấp 5)
        Ngọc Bội - Hỏa (cấp 5)
        Ngọc Bội - Thổ (cấp 5)
    """
    if is_catalog_ready(name):
        return name
    return "\n".join(f"{name} - {element} (cấp {SUGGESTED_TIER})" for element in ELEMENTS)


def suggest_entries(names: Iterable[str]) -> str:
    """Suggestions for several names, newline-joined into one copyable block."""
    return "\n".join(suggest_entry(name) for name in names)
