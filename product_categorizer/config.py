#!/usr/bin/env python3
"""
Configuration for the product categorizer.

Holds the two ordered reference lists (known brands, known product types), the
sentinels returned when nothing matches, and the similarity threshold. Defaults
reproduce the compiled-in behaviour; a JSON file can override any of them.
"""

import json
import numbers
from pathlib import Path
from typing import Iterable, List, Optional

from .exceptions import ConfigurationError

DEFAULT_SIMILARITY_THRESHOLD = 0.7
UNKNOWN_BRAND = "unknown brand"
UNKNOWN_TYPE = "unknown type"

# Order matters: the first entry found in a title wins.
DEFAULT_BRANDS = [
    'Piracanjuba', 'Italac', 'Parmalat', 'Elegê', 'Ninho', 'Molico',
    'Nestlé', 'Itambé', 'Betânia', 'Aurora', 'Camponesa', 'Batavo',
    'Tirol', 'Jussara', 'Vigor', 'Quatá', 'Shefa', 'Leitíssimo',
    'Alibra', 'Frimesa', 'Danone', 'Verde Campo', 'Lider', 'Polenghi',
]

# Longer labels that contain shorter ones come first ("Semidesnatado" > "Desnatado").
DEFAULT_TYPES = [
    'Zero Lactose', 'Sem Lactose', 'Semidesnatado', 'Semi Desnatado',
    'Desnatado', 'Integral', 'Condensado', 'Em Pó',
]

CONFIG_KEYS = ('known_brands', 'known_types', 'similarity_threshold', 'unknown_brand', 'unknown_type')


class CategorizerConfig:
    """Configuration class for the categorization pipeline."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration with default values or load from file.

        Args:
            config_file: Optional path to JSON configuration file
        """
        self.load_default_config()

        if config_file:
            self.load_from_file(config_file)

        self.validate()

    def load_default_config(self):
        """Load default configuration values."""
        self.known_brands: List[str] = list(DEFAULT_BRANDS)
        self.known_types: List[str] = list(DEFAULT_TYPES)
        self.similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
        self.unknown_brand: str = UNKNOWN_BRAND
        self.unknown_type: str = UNKNOWN_TYPE

    @classmethod
    def from_values(cls, known_brands: Optional[Iterable[str]] = None,
                    known_types: Optional[Iterable[str]] = None,
                    similarity_threshold: Optional[float] = None) -> "CategorizerConfig":
        """Build a validated configuration, overriding only the values given."""
        config = cls()
        if known_brands is not None:
            config.known_brands = list(known_brands)
        if known_types is not None:
            config.known_types = list(known_types)
        if similarity_threshold is not None:
            config.similarity_threshold = similarity_threshold
        config.validate()
        return config

    def add_brands(self, brands: Iterable[str]):
        """Append brands to the end of the reference list, skipping duplicates."""
        for brand in brands:
            if brand not in self.known_brands:
                self.known_brands.append(brand)
        self.validate()

    def add_types(self, types: Iterable[str]):
        """Append product types to the end of the reference list, skipping duplicates."""
        for product_type in types:
            if product_type not in self.known_types:
                self.known_types.append(product_type)
        self.validate()

    def validate(self):
        """
        Check the reference lists and the threshold.

        Raises:
            ConfigurationError: if a list is empty or holds a non-string / empty entry,
                or the threshold is not a number in [0, 1]
        """
        for name in ('known_brands', 'known_types'):
            values = getattr(self, name)
            if not isinstance(values, list) or not values:
                raise ConfigurationError(f"{name} must be a non-empty list")
            for value in values:
                # An empty entry would be a substring of every title
                if not isinstance(value, str) or not value.strip():
                    raise ConfigurationError(f"{name} contains an invalid entry: {value!r}")

        for name in ('unknown_brand', 'unknown_type'):
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(f"{name} must be a string")

        threshold = self.similarity_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
            raise ConfigurationError(f"similarity_threshold must be a number, got {threshold!r}")
        if not 0 <= threshold <= 1:
            raise ConfigurationError(f"similarity_threshold must be within [0, 1], got {threshold}")

    def load_from_file(self, config_file: str):
        """
        Load configuration from JSON file.

        Raises:
            ConfigurationError: if the file cannot be read, is not a JSON object,
                or names an unknown setting
        """
        path = Path(config_file)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not load config file {path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")

        unknown = sorted(set(config_data) - set(CONFIG_KEYS))
        if unknown:
            raise ConfigurationError(f"Unknown settings in {path}: {', '.join(unknown)}")

        for key, value in config_data.items():
            setattr(self, key, value)

        self.validate()
