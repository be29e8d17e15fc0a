"""
Keyword scoring of questions against the answer catalog.

Every record is scored with plain substring checks against the lower-cased
question; the first record with the highest score wins, provided it reaches
MIN_MATCH_SCORE.
"""
from typing import Mapping, Optional

from core.models.answer import AnswerRecord
from core.services.catalog.answer_catalog import AnswerCatalog
from core.services.matching.match_result import MatchResult
from core.utils.text_utils import normalize_question

TITLE_WEIGHT = 100
KEYWORD_WEIGHT = 10
CATEGORY_WEIGHT = 20
ANSWER_TYPE_WEIGHT = 15

MIN_MATCH_SCORE = 10
HIGH_CONFIDENCE_SCORE = 50
MEDIUM_CONFIDENCE_SCORE = 25


def confidence_for_score(score: int) -> str:
    """Map a match score to its confidence tier."""
    if score >= HIGH_CONFIDENCE_SCORE:
        return "high"
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return "medium"
    return "low"


class QuestionMatcher:
    """Finds the catalog record that best answers a question."""
    
    def __init__(self, catalog: AnswerCatalog):
        self.catalog = catalog
    
    @staticmethod
    def process_question(question: str, placeholders: Optional[Mapping[str, str]] = None) -> str:
        """Lower-case the question and substitute {key} placeholders in mapping order."""
        return normalize_question(question, placeholders)
    
    @staticmethod
    def score(record: AnswerRecord, processed_question: str) -> int:
        """
        Score one record against an already processed question.
        
        The title bonus applies when the whole question appears inside the
        title, not the other way round.
        """
        score = 0
        
        if processed_question in record.title.lower():
            score += TITLE_WEIGHT
        
        for keyword in record.keywords:
            if keyword.lower() in processed_question:
                score += KEYWORD_WEIGHT
        
        if record.category and record.category.lower() in processed_question:
            score += CATEGORY_WEIGHT
        
        if record.answer_type.value in processed_question:
            score += ANSWER_TYPE_WEIGHT
        
        return score
    
    def find_best_match(
        self,
        question: str,
        placeholders: Optional[Mapping[str, str]] = None
    ) -> Optional[MatchResult]:
        """
        Find the highest-scoring catalog record for a question.
        
        Args:
            question: Free-text question
            placeholders: Optional values for {key} tokens in the question
        
        Returns:
            MatchResult with confidence tier, or None when nothing scores
            at least MIN_MATCH_SCORE
        """
        processed_question = self.process_question(question, placeholders)
        
        best_match: Optional[AnswerRecord] = None
        highest_score = 0
        
        for record in self.catalog:
            score = self.score(record, processed_question)
            if score > highest_score:
                highest_score = score
                best_match = record
        
        if best_match is None or highest_score < MIN_MATCH_SCORE:
            return None
        
        return MatchResult(
            answer=best_match,
            confidence=confidence_for_score(highest_score),
            score=highest_score
        )
