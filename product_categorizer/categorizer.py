#!/usr/bin/env python3
"""
Product Categorizer

Groups supermarket listings that denote the same physical product. Each product
is reduced to a signature (brand, product type, normalized description) and
assigned to the first existing category, in creation order, whose representative
has the same brand and type and a description similarity above the threshold.
Products matching no category open a new one and become its representative.

The assignment is greedy and first-fit, so the grouping depends on input order:
the same products in a different order can yield different categories.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .config import CategorizerConfig
from .exceptions import InvalidProductError
from .extractors import BrandExtractor, TypeExtractor
from .models import Category, Product
from .normalizer import normalize_description
from .similarity import similarity

logger = logging.getLogger(__name__)


class ProductCategorizer:
    """
    Folds an ordered sequence of products into an ordered list of categories.

    A categorizer holds only read-only configuration; every call to
    categorize() works on its own category list.
    """

    def __init__(self, config: Optional[CategorizerConfig] = None):
        """
        Initialize the categorizer.

        Args:
            config: Reference lists and threshold; defaults to CategorizerConfig()
        """
        self.config = config if config is not None else CategorizerConfig()
        self.config.validate()

        self.similarity_threshold = self.config.similarity_threshold
        self.brand_extractor = BrandExtractor(self.config.known_brands, self.config.unknown_brand)
        self.type_extractor = TypeExtractor(self.config.known_types, self.config.unknown_type)

    def signature(self, title: str) -> Tuple[str, str, str]:
        """Return (brand, product type, normalized key) for a title."""
        return (
            self.brand_extractor.extract(title),
            self.type_extractor.extract(title),
            normalize_description(title),
        )

    def validate_products(self, products: Iterable[Any], skip_invalid: bool = False) -> List[Product]:
        """
        Turn raw records into Products before any of them is classified.

        Args:
            products: Product instances or mappings with 'title' / 'supermarket'
            skip_invalid: Log and drop invalid records instead of raising

        Returns:
            The valid products, in input order

        Raises:
            InvalidProductError: on the first invalid record unless skip_invalid is set
        """
        valid = []
        for index, record in enumerate(products):
            try:
                valid.append(Product.from_record(record, index))
            except InvalidProductError as e:
                if not skip_invalid:
                    raise
                logger.warning(f"Skipping product: {e}")
        return valid

    def find_category(self, categories: List[Category], brand: str, product_type: str,
                      key: str) -> Optional[Category]:
        """Return the first category the signature matches, or None."""
        for category in categories:
            if category.brand != brand or category.product_type != product_type:
                continue
            if similarity(category.key, key) > self.similarity_threshold:
                return category
        return None

    def categorize(self, products: Iterable[Any], skip_invalid: bool = False) -> List[Category]:
        """
        Assign every product to a category.

        Args:
            products: Ordered products; the order affects the result
            skip_invalid: Log and drop records without a string title instead of
                aborting the whole batch

        Returns:
            Categories in creation order

        Raises:
            InvalidProductError: if a record has no string title and skip_invalid is False
        """
        valid_products = self.validate_products(products, skip_invalid=skip_invalid)
        categories: List[Category] = []

        for product in valid_products:
            brand, product_type, key = self.signature(product.title)
            category = self.find_category(categories, brand, product_type, key)

            if category is None:
                category = Category(
                    representative_title=product.title,
                    brand=brand,
                    product_type=product_type,
                    key=key,
                )
                categories.append(category)
                logger.debug(f"New category '{product.title}' ({brand} / {product_type})")
            else:
                logger.debug(f"'{product.title}' merged into '{category.representative_title}'")

            category.add(product)

        merged = len(valid_products) - len(categories)
        logger.info(
            f"Categorized {len(valid_products)} products into {len(categories)} categories "
            f"({merged} merged, threshold {self.similarity_threshold})"
        )
        return categories


def categorize_products(products: Iterable[Any], config: Optional[CategorizerConfig] = None,
                        skip_invalid: bool = False) -> List[Category]:
    """Categorize products with a one-off ProductCategorizer."""
    return ProductCategorizer(config).categorize(products, skip_invalid=skip_invalid)
