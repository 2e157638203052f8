"""
Exception classes for itemscan.

All itemscan exceptions inherit from ItemScanError,
making it easy to catch all library errors.

The matching core itself never raises: a line with no candidate simply
produces a result without a matched entry. These exceptions belong to
the layers around it (catalog loading, configuration, recognition).

Example:
    >>> try:
    ...     catalog = itemscan.load_catalog("vatpham.txt")
    ... except itemscan.CatalogError as e:
    ...     print(f"Catalog unavailable: {e}")
    ... except itemscan.ItemScanError as e:
    ...     print(f"itemscan error: {e}")
"""


class ItemScanError(Exception):
    """
    Base exception for all itemscan errors.

    Catch this to handle any itemscan-specific error.
    """

    pass


class CatalogError(ItemScanError):
    """
    Raised when a catalog source cannot be read.

    Example:
        >>> itemscan.load_catalog("missing.txt")
        CatalogError: Cannot read catalog 'missing.txt': No such file or directory
    """

    pass


class ConfigurationError(ItemScanError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> MatchConfig(match_threshold=1.5)
        ConfigurationError: match_threshold must be between 0.0 and 1.0, got 1.5
    """

    pass


class RecognitionError(ItemScanError):
    """
    Raised when the OCR engine cannot turn an image into text.

    Covers a missing engine as well as engine failures on a given image.
    """

    pass
