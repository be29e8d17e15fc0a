"""Result types for question matching and fallback classification."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.models.answer import AnswerRecord


@dataclass(frozen=True)
class MatchResult:
    """Best catalog record for a question."""
    answer: AnswerRecord
    confidence: str  # "high" | "medium" | "low"
    score: int


class ClassificationType(str, Enum):
    """Fallback categories for questions the catalog cannot answer."""
    PERSONAL = "personal"
    MARKET = "market"
    FINANCIAL_ADVICE = "financial_advice"
    PORTFOLIO = "portfolio"


@dataclass(frozen=True)
class Classification:
    """Fallback category with the copy shown to the user."""
    type: ClassificationType
    message: str
    action_text: Optional[str] = None
    
    def needs_review(self) -> bool:
        """Advice requests are queued for the advisor instead of answered."""
        return self.type == ClassificationType.FINANCIAL_ADVICE
