"""
Product Categorizer

Groups supermarket product listings that denote the same physical product.
"""

from .categorizer import ProductCategorizer, categorize_products
from .config import CategorizerConfig, UNKNOWN_BRAND, UNKNOWN_TYPE
from .exceptions import CategorizerError, ConfigurationError, InvalidProductError, ProductFileError
from .extractors import BrandExtractor, TypeExtractor, extract_term
from .models import Category, Product
from .normalizer import normalize_description
from .similarity import similarity

__version__ = "0.1.0"
__all__ = [
    "ProductCategorizer", "categorize_products",
    "CategorizerConfig", "UNKNOWN_BRAND", "UNKNOWN_TYPE",
    "CategorizerError", "ConfigurationError", "InvalidProductError", "ProductFileError",
    "BrandExtractor", "TypeExtractor", "extract_term",
    "Category", "Product",
    "normalize_description", "similarity",
]
