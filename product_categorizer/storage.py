#!/usr/bin/env python3
"""
Loading product lists and saving categorization results.

Products are read from a JSON array or a CSV file of {title, supermarket}
records. Results are written as a JSON list of categories plus a flat CSV
summary with one row per product.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from .exceptions import ProductFileError
from .models import Category

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ['category_id', 'category', 'brand', 'product_type', 'title', 'supermarket']


def load_products(file_path: str) -> List[Dict[str, Any]]:
    """
    Load raw product records in file order.

    Records are returned as read; missing values become None and are rejected
    later by the categorizer. JSON values keep their parsed types.

    Args:
        file_path: Path to a .json (array of objects) or .csv file

    Returns:
        List of record dictionaries

    Raises:
        FileNotFoundError: if the file does not exist
        ProductFileError: if the file cannot be parsed
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Product file not found: {path}")

    if path.suffix.lower() == '.csv':
        try:
            df = pd.read_csv(path, dtype=str)
        except (ValueError, pd.errors.ParserError) as e:
            raise ProductFileError(f"Could not parse product file {path}: {e}") from e
        df = df.astype(object).where(pd.notna(df), None)
        records = df.to_dict(orient='records')
    else:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except ValueError as e:
            raise ProductFileError(f"Could not parse product file {path}: {e}") from e
        if not isinstance(records, list):
            raise ProductFileError(f"Product file {path} must contain a JSON array")

    logger.info(f"Loaded {len(records)} products from {path}")
    return records


def categories_to_records(categories: Sequence[Category]) -> List[Dict[str, Any]]:
    return [category.to_dict() for category in categories]


def build_summary_frame(categories: Sequence[Category]) -> pd.DataFrame:
    """One row per product with the category it was assigned to."""
    rows = []
    for category_id, category in enumerate(categories):
        for product in category.products:
            rows.append({
                'category_id': category_id,
                'category': category.representative_title,
                'brand': category.brand,
                'product_type': category.product_type,
                'title': product.title,
                'supermarket': product.supermarket,
            })
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def save_results(categories: Sequence[Category], output_dir: str = 'output',
                 name: str = 'products') -> Dict[str, Path]:
    """
    Save results to JSON and CSV.

    Args:
        categories: Categorization result
        output_dir: Directory for output files, created if missing
        name: Prefix for the output file names

    Returns:
        Mapping of format name to written path
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    name_clean = re.sub(r'[^\w\-]', '_', name.lower())

    json_file = output_path / f"{name_clean}_categories.json"
    with open(json_file, 'w', encoding='utf-8') as f:
        json.dump(categories_to_records(categories), f, indent=2, ensure_ascii=False)

    summary_file = output_path / f"{name_clean}_category_summary.csv"
    build_summary_frame(categories).to_csv(summary_file, index=False, encoding='utf-8')

    logger.info(f"Results saved to {json_file} and {summary_file}")
    return {'json': json_file, 'summary': summary_file}
