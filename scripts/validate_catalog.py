#!/usr/bin/env python3
"""Validate an answer catalog file and check every answer renders."""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.services.catalog.answer_catalog import AnswerCatalog, CatalogError, DEFAULT_CATALOG_PATH
from core.services.content.content_generator import ContentGenerator
from core.utils.logger import logger


def validate_catalog(path: Path) -> bool:
    """
    Load a catalog and render each answer through its formatter.
    
    Args:
        path: Catalog JSON file
    
    Returns:
        True when the catalog loads and every answer renders
    """
    try:
        catalog = AnswerCatalog.from_file(path)
    except CatalogError as e:
        logger.error(str(e))
        return False
    
    generator = ContentGenerator()
    failures = 0
    
    for answer in catalog:
        if not answer.keywords:
            logger.warning(f"  ⚠️  {answer.id}: no keywords, can only match via category or type")
        try:
            content = generator.generate_content(answer, strict=True)
        except Exception as e:
            failures += 1
            logger.error(f"  ✗ {answer.id} ({answer.answer_type.value}): {type(e).__name__}: {str(e)}")
            continue
        kpi_count = len(content.kpis or [])
        logger.info(f"  ✓ {answer.id} ({answer.answer_type.value}): {kpi_count} KPIs")
    
    logger.info(f"Checked {len(catalog)} answers, {failures} failed")
    return failures == 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate an answer catalog file")
    parser.add_argument(
        "path",
        type=str,
        nargs="?",
        default=str(DEFAULT_CATALOG_PATH),
        help="Catalog JSON file (default: bundled catalog)"
    )
    args = parser.parse_args()
    
    sys.exit(0 if validate_catalog(Path(args.path)) else 1)


if __name__ == "__main__":
    main()
