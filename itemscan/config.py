"""
Configuration for itemscan matching.

The thresholds below were tuned by hand against real inventory
screenshots. They are kept as configuration rather than constants so
they can be adjusted per catalog without touching the cascade.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from itemscan.exceptions import ConfigurationError

# Score-valued options, all constrained to [0.0, 1.0]
_SCORE_FIELDS = (
    "match_threshold",
    "contains_min_score",
    "token_trigger",
    "token_min_score",
    "stripped_trigger",
    "stripped_min_score",
    "stripped_floor",
    "fuzzy_trigger",
    "fuzzy_distance_ratio",
)

# Integer options, constrained to >= 0
_COUNT_FIELDS = ("fuzzy_min_distance", "min_line_length")


@dataclass(frozen=True)
class MatchConfig:
    """
    Thresholds for the matching cascade.

    All options have the tuned defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = MatchConfig(match_threshold=0.5, fuzzy_min_distance=6)
        >>> matcher = ItemMatcher(catalog, config)
    """

    # Minimum score for a result to carry a matched entry
    match_threshold: float = 0.4

    # Strategy 2: substring containment
    contains_min_score: float = 0.5  # score must exceed this

    # Strategy 3: token overlap
    token_trigger: float = 0.7  # runs while best score is below this
    token_min_score: float = 0.5  # score must reach this

    # Strategy 4: diacritic-stripped containment
    stripped_trigger: float = 0.7
    stripped_min_score: float = 0.4  # raw score must exceed this
    stripped_floor: float = 0.6  # accepted scores are raised to this

    # Strategy 5: edit distance
    fuzzy_trigger: float = 0.6
    fuzzy_min_distance: int = 10  # allowed distance is never below this
    fuzzy_distance_ratio: float = 0.45  # ... or this share of the entry length

    # OCR lines shorter than this are ignored
    min_line_length: int = 4

    def __post_init__(self):
        """Validate configuration."""
        for name in _SCORE_FIELDS:
            value = getattr(self, name)
            if (
                not isinstance(value, (int, float))
                or isinstance(value, bool)
                or not 0.0 <= value <= 1.0
            ):
                raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {value!r}")

        for name in _COUNT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigurationError(f"{name} must be an integer >= 0, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatchConfig:
        """
        Build a config from a mapping of option names to values.

        Args:
            data: Option overrides; missing options keep their defaults.

        Returns:
            Validated MatchConfig.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown matching option(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MatchConfig:
        """
        Load a config from a YAML file.

        The file holds either the options at top level or under a
        ``matching:`` section. An empty file yields the defaults.

        Raises:
            ConfigurationError: If the file is unreadable, malformed, or invalid.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config '{path}': {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Config '{path}' is not valid UTF-8: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed YAML in '{path}': {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config '{path}' must contain a mapping")
        if "matching" in data:
            data = data["matching"] or {}
            if not isinstance(data, dict):
                raise ConfigurationError(f"'matching' section in '{path}' must be a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)
