"""Pydantic models shared by the API and the core services."""
from core.models.answer import AnswerRecord, AnswerSummary, AnswerType
from core.models.content import GeneratedContent, KPI, Metric
from core.models.question import (
    AnswerPayload,
    QuestionContext,
    QuestionRequest,
    QuestionResponse,
)
from core.models.response import APIResponse, ErrorResponse

__all__ = [
    "AnswerRecord",
    "AnswerSummary",
    "AnswerType",
    "GeneratedContent",
    "KPI",
    "Metric",
    "AnswerPayload",
    "QuestionContext",
    "QuestionRequest",
    "QuestionResponse",
    "APIResponse",
    "ErrorResponse",
]
