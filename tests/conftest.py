"""Shared fixtures."""
import pytest

from core.models.answer import AnswerRecord, AnswerType
from core.services.catalog.answer_catalog import AnswerCatalog, DEFAULT_CATALOG_PATH


def build_record(
    answer_id: str,
    keywords=None,
    title: str = "Untitled Answer",
    category=None,
    answer_type: AnswerType = AnswerType.HOLDINGS,
    data=None
) -> AnswerRecord:
    """Build a catalog record with test defaults."""
    return AnswerRecord(
        id=answer_id,
        title=title,
        content=f"Content for {answer_id}",
        category=category,
        keywords=keywords or [],
        answer_type=answer_type,
        data=data
    )


@pytest.fixture
def make_record():
    """Factory for catalog records."""
    return build_record


@pytest.fixture(scope="session")
def bundled_catalog() -> AnswerCatalog:
    """The catalog shipped with the service."""
    return AnswerCatalog.from_file(DEFAULT_CATALOG_PATH)
