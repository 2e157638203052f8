"""
Item catalog: the authoritative list of names OCR lines are matched against.

The catalog is an immutable value built once and passed to the matcher at
call time. Its usual source is a plain-text file with one item name per
line, where the first line is a category header:

    Vật phẩm
    Kinh Bạch Ngọc Bội - Thổ (cấp 2)
    Thúy Lựu Thạch Giới Chỉ (cấp 5)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from itemscan.exceptions import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    """
    Ordered, read-only sequence of catalog entries.

    Uniqueness is not enforced: duplicate names are kept and simply
    produce duplicate candidates during matching.

    Example:
        >>> catalog = Catalog.from_entries(["Kinh Bạch Ngọc Bội - Thổ (cấp 2)"])
        >>> len(catalog)
        1
    """

    entries: tuple[str, ...] = ()
    name: str | None = None  # Category header, when loaded from a file

    @classmethod
    def from_entries(cls, entries: Iterable[str], name: str | None = None) -> Catalog:
        """Build a catalog from any iterable of item names."""
        return cls(entries=tuple(entries), name=name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> str:
        return self.entries[index]

    def __contains__(self, item: object) -> bool:
        return item in self.entries


def parse_catalog(content: str) -> Catalog:
    """
    Parse catalog file content.

    Lines are trimmed and blank lines dropped; the first remaining line is
    the category header and is not an entry.

    Args:
        content: Full text of the catalog file.

    Returns:
        Catalog with the header stored as its name.
    """
    lines = [line.strip() for line in content.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return Catalog()

    return Catalog.from_entries(lines[1:], name=lines[0])


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog from a UTF-8 text file.

    Args:
        path: Catalog file path.

    Returns:
        Parsed Catalog.

    Raises:
        CatalogError: If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog '{path}': {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog '{path}' is not valid UTF-8: {e}") from e

    catalog = parse_catalog(content)
    logger.info("Loaded %d catalog entries from %s", len(catalog), path)
    return catalog
