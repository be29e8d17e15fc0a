"""Read-only answer catalog endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from core.models.answer import AnswerRecord
from core.models.content import GeneratedContent
from core.models.response import APIResponse
from core.services.catalog.answer_catalog import AnswerCatalog, get_default_catalog
from core.services.content.content_generator import ContentGenerator
from core.services.errors.error_handler import ErrorHandler

router = APIRouter()
content_generator = ContentGenerator()


def _get_answer(catalog: AnswerCatalog, answer_id: str) -> AnswerRecord:
    answer = catalog.get(answer_id)
    if answer is None:
        error = ErrorHandler.handle_not_found(answer_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=error.error
        )
    return answer


@router.get("", response_model=APIResponse)
async def list_answers(catalog: AnswerCatalog = Depends(get_default_catalog)):
    """List catalog answers (id, title, category, answer type)."""
    summaries = catalog.summaries()
    return APIResponse(
        success=True,
        message=f"{len(summaries)} answers available",
        data=[summary.model_dump(by_alias=True) for summary in summaries]
    )


@router.get("/{answer_id}", response_model=AnswerRecord)
async def get_answer(answer_id: str, catalog: AnswerCatalog = Depends(get_default_catalog)):
    """Get a full catalog answer."""
    return _get_answer(catalog, answer_id)


@router.get(
    "/{answer_id}/content",
    response_model=GeneratedContent,
    response_model_exclude_none=True
)
async def get_answer_content(answer_id: str, catalog: AnswerCatalog = Depends(get_default_catalog)):
    """Get the dashboard presentation of a catalog answer."""
    return content_generator.generate_content(_get_answer(catalog, answer_id))
