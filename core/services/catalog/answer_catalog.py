"""Read-only catalog of pre-authored answers."""
import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from app.config import settings
from core.models.answer import AnswerRecord, AnswerSummary
from core.utils.logger import logger

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "answers.json"


class CatalogError(Exception):
    """Raised when the answer catalog cannot be loaded."""


class AnswerCatalog:
    """
    Ordered, immutable collection of answer records.
    
    Records keep the order they were loaded in; the matcher relies on it to
    break score ties in favour of the earlier record. Nothing writes to the
    catalog after construction, so one instance can be shared across requests.
    """
    
    def __init__(self, records: Iterable[AnswerRecord]):
        self._records: Tuple[AnswerRecord, ...] = tuple(records)
        self._by_id = {}
        
        for record in self._records:
            if record.id in self._by_id:
                raise CatalogError(f"Duplicate answer id in catalog: {record.id}")
            self._by_id[record.id] = record
    
    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "AnswerCatalog":
        """
        Load a catalog from a JSON file holding a list of answer records.
        
        Args:
            path: Path to the JSON catalog
        
        Returns:
            Loaded catalog
        
        Raises:
            CatalogError: If the file is missing, malformed, or fails validation
        """
        catalog_path = Path(path)
        try:
            raw = json.loads(catalog_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise CatalogError(f"Catalog file not found: {catalog_path}")
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file is not valid JSON: {catalog_path} ({e})")
        
        if not isinstance(raw, list):
            raise CatalogError(f"Catalog file must contain a list of answers: {catalog_path}")
        
        records: List[AnswerRecord] = []
        for index, item in enumerate(raw):
            try:
                records.append(AnswerRecord.model_validate(item))
            except ValidationError as e:
                raise CatalogError(f"Invalid answer at index {index} in {catalog_path}: {e}")
        
        catalog = cls(records)
        logger.info(f"Loaded {len(catalog)} answers from {catalog_path}")
        return catalog
    
    def get(self, answer_id: str) -> Optional[AnswerRecord]:
        """Get a record by id."""
        return self._by_id.get(answer_id)
    
    def ids(self) -> List[str]:
        """Record ids in catalog order."""
        return [record.id for record in self._records]
    
    def summaries(self) -> List[AnswerSummary]:
        """Listing entries for every record, in catalog order."""
        return [
            AnswerSummary(
                id=record.id,
                title=record.title,
                category=record.category,
                answer_type=record.answer_type
            )
            for record in self._records
        ]
    
    def __iter__(self) -> Iterator[AnswerRecord]:
        return iter(self._records)
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __contains__(self, answer_id: object) -> bool:
        return answer_id in self._by_id


@lru_cache(maxsize=1)
def get_default_catalog() -> AnswerCatalog:
    """Load the catalog named by settings (bundled answers.json when unset)."""
    path = settings.CATALOG_PATH or DEFAULT_CATALOG_PATH
    return AnswerCatalog.from_file(path)
