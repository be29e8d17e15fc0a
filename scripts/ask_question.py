#!/usr/bin/env python3
"""Ask the answer catalog a question from the command line."""
import sys
import json
import argparse
from pathlib import Path
from typing import Dict, List

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models.question import QuestionRequest
from core.services.catalog.answer_catalog import AnswerCatalog, CatalogError
from core.services.questions.question_service import QuestionService
from core.utils.logger import logger


def parse_placeholders(pairs: List[str]) -> Dict[str, str]:
    """Parse key=value pairs, keeping their command-line order."""
    placeholders: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Placeholder must be key=value: {pair}")
        placeholders[key] = value
    return placeholders


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Ask the portfolio answer catalog a question",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python ask_question.py "What is my YTD performance vs S&P 500?"
  
  # Fill {account} before matching
  python ask_question.py "Show {account} tax efficiency" -p account=401k
  
  # Include the dashboard presentation
  python ask_question.py "Top 10 holdings" --content
        """
    )
    
    parser.add_argument("question", type=str, help="Question to ask")
    
    parser.add_argument(
        "--placeholder",
        "-p",
        action="append",
        default=[],
        help="Placeholder value as key=value (repeatable)"
    )
    
    parser.add_argument(
        "--content",
        "-c",
        action="store_true",
        help="Include generated dashboard content"
    )
    
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Catalog JSON file (default: configured catalog)"
    )
    
    args = parser.parse_args()
    
    try:
        placeholders = parse_placeholders(args.placeholder)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    
    try:
        catalog = AnswerCatalog.from_file(args.catalog) if args.catalog else None
        service = QuestionService(catalog=catalog)
    except CatalogError as e:
        logger.error(str(e))
        sys.exit(2)
    
    request = QuestionRequest(
        question=args.question,
        placeholders=placeholders or None,
        include_content=args.content
    )
    response = service.answer(request)
    print(json.dumps(response.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
