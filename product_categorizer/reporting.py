#!/usr/bin/env python3
"""
Console reporting and logging setup.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .models import Category


def setup_logging(console: Optional[Console] = None, logs_dir: str = 'logs',
                  level: int = logging.INFO):
    """Setup rich logging configuration with a log file in logs_dir."""
    logs_path = Path(logs_dir)
    logs_path.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=console or Console(), rich_tracebacks=True),
            logging.FileHandler(logs_path / 'product_categories.log', encoding='utf-8')
        ]
    )


def display_results_summary(categories: Sequence[Category], console: Optional[Console] = None,
                            top: int = 5):
    """Display a summary table of categorization results and the largest categories."""
    console = console or Console()

    total_products = sum(category.count for category in categories)
    merged = [category for category in categories if category.count > 1]

    table = Table(title="Product Categorization Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Total Products", str(total_products))
    table.add_row("Total Categories", str(len(categories)))
    table.add_row("Categories with Duplicates", str(len(merged)))
    table.add_row("Single-Product Categories", str(len(categories) - len(merged)))

    console.print(table)

    if not merged:
        return

    largest = sorted(merged, key=lambda category: category.count, reverse=True)[:top]

    top_table = Table(title=f"Top {len(largest)} Categories")
    top_table.add_column("Category", style="green")
    top_table.add_column("Brand", style="blue")
    top_table.add_column("Type", style="blue")
    top_table.add_column("Count", style="magenta", justify="right")
    top_table.add_column("Supermarkets", style="yellow")

    for category in largest:
        top_table.add_row(
            category.representative_title,
            category.brand,
            category.product_type,
            str(category.count),
            ", ".join(s for s in category.supermarkets if s) or "-",
        )

    console.print(top_table)
