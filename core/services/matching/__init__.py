"""Question matching services.

- QuestionMatcher: Keyword scoring against the answer catalog
- QuestionClassifier: Fallback categories for unmatched questions
"""
from core.services.matching.match_result import Classification, ClassificationType, MatchResult
from core.services.matching.question_classifier import QuestionClassifier
from core.services.matching.question_matcher import QuestionMatcher, confidence_for_score

__all__ = [
    "Classification",
    "ClassificationType",
    "MatchResult",
    "QuestionClassifier",
    "QuestionMatcher",
    "confidence_for_score",
]
