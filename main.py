#!/usr/bin/env python3
"""
Product Categorizer - Main Execution Script

This script runs the complete categorization pipeline:
1. Loads the product list scraped from the supermarkets (JSON or CSV)
2. Groups listings of the same product by brand, type and description similarity
3. Saves the categories as JSON plus a per-product CSV summary
4. Displays a summary of the run

Usage:
    python3 main.py [options] products_file

Examples:
    python3 main.py data/data.json
    python3 main.py --threshold 0.8 --output-dir output data/data.json
    python3 main.py --config categorizer.json --skip-invalid data/products.csv
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from product_categorizer.categorizer import ProductCategorizer
from product_categorizer.config import CategorizerConfig
from product_categorizer.exceptions import CategorizerError
from product_categorizer.reporting import display_results_summary, setup_logging
from product_categorizer.storage import load_products, save_results


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Supermarket Product Categorizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 main.py data/data.json
  python3 main.py --threshold 0.8 data/data.json
  python3 main.py --config categorizer.json --skip-invalid data/products.csv
        """
    )

    parser.add_argument(
        'file',
        help='JSON or CSV file with the products ({title, supermarket} records)'
    )

    parser.add_argument(
        '--config',
        help='JSON file overriding known_brands, known_types, similarity_threshold, unknown_brand or unknown_type'
    )

    parser.add_argument(
        '--threshold',
        type=float,
        help='Similarity a description must exceed to join a category (default: 0.7)'
    )

    parser.add_argument(
        '--output-dir',
        default='output',
        help='Output directory for results (default: output)'
    )

    parser.add_argument(
        '--logs-dir',
        default='logs',
        help='Logs directory (default: logs)'
    )

    parser.add_argument(
        '--skip-invalid',
        action='store_true',
        help='Skip products without a string title instead of aborting the run'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log every category decision'
    )

    return parser.parse_args(argv)


def build_config(args) -> CategorizerConfig:
    """Build the configuration from the optional file and command line overrides."""
    config = CategorizerConfig(args.config)
    if args.threshold is not None:
        config.similarity_threshold = args.threshold
        config.validate()
    return config


def display_processing_summary(args, config: CategorizerConfig, console: Console):
    """Display processing configuration summary."""
    table = Table(title="Processing Configuration")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Input File", args.file)
    table.add_row("Config File", args.config or "defaults")
    table.add_row("Known Brands", str(len(config.known_brands)))
    table.add_row("Known Types", str(len(config.known_types)))
    table.add_row("Similarity Threshold", str(config.similarity_threshold))
    table.add_row("Invalid Products", "Skip" if args.skip_invalid else "Abort")
    table.add_row("Output Directory", args.output_dir)

    console.print(table)


def main(argv=None) -> int:
    """Main execution function."""
    start_time = time.time()
    args = parse_arguments(argv)
    console = Console()

    setup_logging(console, args.logs_dir, logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger(__name__)

    console.print(Panel("[bold blue]Supermarket Product Categorizer[/bold blue]", border_style="blue"))

    try:
        config = build_config(args)
        display_processing_summary(args, config, console)

        products = load_products(args.file)
        categorizer = ProductCategorizer(config)
        categories = categorizer.categorize(products, skip_invalid=args.skip_invalid)

        paths = save_results(categories, args.output_dir, Path(args.file).stem)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except CategorizerError as e:
        logger.error(f"Categorization failed: {e}")
        return 1

    display_results_summary(categories, console)

    console.print("\n[bold green]Results saved to:[/bold green]")
    for label, path in paths.items():
        console.print(f"  {label}: {path}")
    console.print(f"[blue]Done in {time.time() - start_time:.1f} seconds[/blue]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
