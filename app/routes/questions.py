"""Question answering endpoints."""
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status

from core.models.question import QuestionRequest, QuestionResponse
from core.services.errors.error_handler import ErrorHandler
from core.services.questions.question_service import QuestionService

router = APIRouter()


@lru_cache(maxsize=1)
def get_question_service() -> QuestionService:
    """Shared question service (the catalog is read-only, so one instance serves all requests)."""
    return QuestionService()


@router.post(
    "",
    response_model=QuestionResponse,
    response_model_exclude_none=True
)
async def ask_question(
    request: QuestionRequest,
    question_service: QuestionService = Depends(get_question_service)
):
    """
    Answer a portfolio question from the answer catalog.
    
    Statuses:
    - matched: a catalog answer was found (with confidence high/medium/low)
    - review: the question asks for advice and was queued for the advisor
    - no_match: nothing matched; a fallback answer explains where to look
    """
    try:
        return question_service.answer(request)
    except HTTPException:
        raise
    except Exception as e:
        error = ErrorHandler.handle_unexpected_error(e, path="/api/questions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error.error
        )


@router.get("/health")
async def questions_health():
    """Health check for the question service."""
    return {"status": "healthy", "service": "questions"}
