"""Fallback classification for questions the catalog cannot answer."""
from typing import List, Tuple

from core.services.errors.fallback_responses import FallbackResponses
from core.services.matching.match_result import Classification, ClassificationType
from core.utils.text_utils import contains_any


class QuestionClassifier:
    """
    Keyword-list classifier for unmatched questions.
    
    Lists are checked in order and the first list with any substring hit
    wins; questions that hit nothing are portfolio questions.
    """
    
    PERSONAL_KEYWORDS: List[str] = [
        "name", "address", "phone", "email", "advisor", "contact",
        "who am i", "my information", "account details",
    ]
    
    MARKET_KEYWORDS: List[str] = [
        "stock price", "market news", "interest rates", "fed", "inflation",
        "earnings", "when will", "what will happen",
    ]
    
    ADVICE_KEYWORDS: List[str] = [
        "should i", "what should", "recommend", "advice", "strategy",
        "buy", "sell", "rebalance", "allocate",
    ]
    
    RULES: List[Tuple[ClassificationType, List[str]]] = [
        (ClassificationType.PERSONAL, PERSONAL_KEYWORDS),
        (ClassificationType.MARKET, MARKET_KEYWORDS),
        (ClassificationType.FINANCIAL_ADVICE, ADVICE_KEYWORDS),
    ]
    
    @classmethod
    def classify(cls, question: str) -> Classification:
        """Classify an unmatched question into one of the fallback categories."""
        question_lower = question.lower()
        
        for classification_type, keywords in cls.RULES:
            if contains_any(question_lower, keywords):
                return cls._build(classification_type)
        
        return cls._build(ClassificationType.PORTFOLIO)
    
    @staticmethod
    def _build(classification_type: ClassificationType) -> Classification:
        return Classification(
            type=classification_type,
            message=FallbackResponses.get_message(classification_type.value),
            action_text=FallbackResponses.get_action_text(classification_type.value)
        )
