"""Question answering over the static answer catalog."""
import secrets
import string
import time
from typing import Optional

from core.models.question import AnswerPayload, QuestionRequest, QuestionResponse
from core.services.catalog.answer_catalog import AnswerCatalog, get_default_catalog
from core.services.content.content_generator import ContentGenerator
from core.services.errors.fallback_responses import FallbackResponses
from core.services.matching.match_result import Classification, MatchResult
from core.services.matching.question_classifier import QuestionClassifier
from core.services.matching.question_matcher import QuestionMatcher
from core.utils.logger import logger
from core.utils.text_utils import truncate

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_response_id() -> str:
    """Correlation id: epoch milliseconds plus nine random base36 characters."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


class QuestionService:
    """Matches a question against the catalog and falls back to classification."""
    
    def __init__(
        self,
        catalog: Optional[AnswerCatalog] = None,
        content_generator: Optional[ContentGenerator] = None
    ):
        self.catalog = catalog if catalog is not None else get_default_catalog()
        self.matcher = QuestionMatcher(self.catalog)
        self.classifier = QuestionClassifier()
        self.content_generator = content_generator or ContentGenerator()
        
        logger.info(f"Question service initialized with {len(self.catalog)} answers")
    
    def answer(self, request: QuestionRequest) -> QuestionResponse:
        """
        Answer a question.
        
        Args:
            request: Validated question request
        
        Returns:
            Matched response, or a review/no_match response built from the
            fallback classification
        """
        if request.context:
            logger.debug(f"Question context: {request.context.model_dump(exclude_none=True)}")
        
        match = self.matcher.find_best_match(request.question, request.placeholders)
        if match:
            logger.info(
                f"Matched '{truncate(request.question)}' to {match.answer.id} "
                f"(score={match.score}, confidence={match.confidence})"
            )
            response = self._matched_response(match)
        else:
            classification = self.classifier.classify(request.question)
            logger.info(f"No match for '{truncate(request.question)}', classified as {classification.type.value}")
            response = self._fallback_response(classification)
        
        if request.include_content and response.answer is not None:
            response.generated_content = self.content_generator.generate_content(response.answer)
        
        return response
    
    def _matched_response(self, match: MatchResult) -> QuestionResponse:
        record = match.answer
        return QuestionResponse(
            id=generate_response_id(),
            status="matched",
            answer=AnswerPayload(
                id=record.id,
                title=record.title,
                content=record.content,
                category=record.category,
                answer_type=record.answer_type.value,
                data=record.data
            ),
            confidence=match.confidence,
            message=f"Found {match.confidence} confidence match"
        )
    
    def _fallback_response(self, classification: Classification) -> QuestionResponse:
        if classification.needs_review():
            # Queued for the advisor; nothing to show yet
            return QuestionResponse(
                id=generate_response_id(),
                status="review",
                message=classification.message
            )
        
        fallback_type = classification.type.value
        return QuestionResponse(
            id=generate_response_id(),
            status="no_match",
            message=classification.message,
            answer=AnswerPayload(
                id=f"fallback-{fallback_type}",
                title=FallbackResponses.get_title(fallback_type),
                content=classification.message,
                category="Fallback",
                answer_type=fallback_type,
                data={
                    "fallbackType": fallback_type,
                    "actionText": classification.action_text,
                    "isUnmatched": True
                }
            )
        )
