#!/usr/bin/env python3
"""
Data types shared by the categorization pipeline.

A Product is the immutable input record; a Category groups the products that
were judged to be the same physical item as its representative.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import InvalidProductError


@dataclass(frozen=True)
class Product:
    title: str
    supermarket: str = ""

    @classmethod
    def from_record(cls, record: Any, index: Optional[int] = None) -> "Product":
        """
        Build a Product from a loaded record.

        Args:
            record: A Product instance or a mapping with 'title' / 'supermarket' keys
            index: Position of the record in its batch, used in error messages

        Returns:
            The validated Product

        Raises:
            InvalidProductError: if the record has no string title
        """
        if isinstance(record, Product):
            if not isinstance(record.title, str):
                raise InvalidProductError(record, index)
            return record

        if not isinstance(record, Mapping):
            raise InvalidProductError(record, index, reason="record is not a mapping")

        title = record.get('title')
        if not isinstance(title, str):
            raise InvalidProductError(record, index)

        supermarket = record.get('supermarket')
        if supermarket is None:
            supermarket = ""
        elif not isinstance(supermarket, str):
            supermarket = str(supermarket)

        return cls(title=title, supermarket=supermarket)

    def to_dict(self) -> Dict[str, str]:
        return {'title': self.title, 'supermarket': self.supermarket}


@dataclass
class Category:
    """
    A group of products sharing brand, type and a similar description.

    The brand, type and normalized key of the representative title are filled in
    by the categorizer when the category is opened; the representative title is
    never changed afterwards so they stay valid for the whole run.
    """
    representative_title: str
    brand: str
    product_type: str
    key: str
    products: List[Product] = field(default_factory=list)
    count: int = 0

    def add(self, product: Product):
        self.products.append(product)
        self.count += 1

    @property
    def supermarkets(self) -> List[str]:
        """Distinct supermarkets of the members, in first-seen order."""
        seen = []
        for product in self.products:
            if product.supermarket not in seen:
                seen.append(product.supermarket)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.representative_title,
            'count': self.count,
            'products': [product.to_dict() for product in self.products],
        }
