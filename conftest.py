import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from product_categorizer.categorizer import ProductCategorizer
from product_categorizer.config import CategorizerConfig


@pytest.fixture
def categorizer():
    return ProductCategorizer()


@pytest.fixture
def plain_categorizer():
    """Categorizer whose vocabularies match none of the synthetic titles."""
    config = CategorizerConfig.from_values(known_brands=["Marca"], known_types=["Tipo"])
    return ProductCategorizer(config)


@pytest.fixture
def sample_products():
    return [
        {"title": "Leite Integral Piracanjuba 1L", "supermarket": "A"},
        {"title": "Leite Italac Integral 1L", "supermarket": "A"},
        {"title": "piracanjuba leite integral 1l", "supermarket": "B"},
        {"title": "Leite Desnatado Piracanjuba 1L", "supermarket": "B"},
        {"title": "Leite Semidesnatado Italac 1L", "supermarket": "C"},
        {"title": "Leite, Italac (Integral) 1L.", "supermarket": "C"},
        {"title": "Leite em Pó Ninho 400g", "supermarket": "A"},
        {"title": "generic milk", "supermarket": "C"},
    ]
