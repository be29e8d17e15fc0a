"""Core services package, organized by domain.

Main Services:
- QuestionService: Question answering over the answer catalog
- AnswerCatalog: Read-only catalog of pre-authored answers
- ContentGenerator: Dashboard content for an answer

Usage:
    from core.services import QuestionService
    from core.models.question import QuestionRequest

    service = QuestionService()
    response = service.answer(QuestionRequest(question="What is my YTD performance?"))
"""
# Catalog
from core.services.catalog import AnswerCatalog, CatalogError, get_default_catalog

# Matching
from core.services.matching import QuestionClassifier, QuestionMatcher

# Content
from core.services.content import ContentGenerator

# Question answering
from core.services.questions import QuestionService

__all__ = [
    # Main Services (Public API)
    "QuestionService",
    "ContentGenerator",
    # Catalog
    "AnswerCatalog",
    "CatalogError",
    "get_default_catalog",
    # Matching
    "QuestionMatcher",
    "QuestionClassifier",
]
