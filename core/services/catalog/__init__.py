"""Answer catalog.

- AnswerCatalog: Ordered, read-only collection of answer records
- CatalogError: Raised when a catalog file cannot be loaded
- get_default_catalog: Process-wide catalog built from settings
"""
from core.services.catalog.answer_catalog import (
    AnswerCatalog,
    CatalogError,
    DEFAULT_CATALOG_PATH,
    get_default_catalog,
)

__all__ = ["AnswerCatalog", "CatalogError", "DEFAULT_CATALOG_PATH", "get_default_catalog"]
