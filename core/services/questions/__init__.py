"""Question answering service.

- QuestionService: Catalog match with classified fallback
"""
from core.services.questions.question_service import QuestionService, generate_response_id

__all__ = ["QuestionService", "generate_response_id"]
