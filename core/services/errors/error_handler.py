"""Error handling utilities."""
from typing import Any, Optional, Sequence

from fastapi.encoders import jsonable_encoder

from core.models.response import ErrorResponse
from core.services.errors.fallback_responses import FallbackResponses
from core.utils.logger import logger


class ErrorHandler:
    """Centralized construction of error envelopes."""
    
    @staticmethod
    def handle_validation_error(
        errors: Sequence[Any],
        path: Optional[str] = None
    ) -> ErrorResponse:
        """Build the 400 envelope for a malformed request, keeping the validation details."""
        logger.warning(f"Invalid request{f' to {path}' if path else ''}: {len(errors)} validation error(s)")
        return ErrorResponse(
            error=FallbackResponses.get_error("validation_error"),
            details=jsonable_encoder(list(errors))
        )
    
    @staticmethod
    def handle_unexpected_error(
        error: Exception,
        path: Optional[str] = None
    ) -> ErrorResponse:
        """Build the 500 envelope for an unexpected failure; details are logged, never returned."""
        logger.error(
            f"Error processing request{f' to {path}' if path else ''}: {str(error)}",
            exc_info=error
        )
        return ErrorResponse(error=FallbackResponses.get_error("internal_error"))
    
    @staticmethod
    def handle_not_found(answer_id: str) -> ErrorResponse:
        """Build the 404 envelope for an unknown answer id."""
        logger.info(f"Answer not found: {answer_id}")
        return ErrorResponse(error=FallbackResponses.get_error("not_found"))
