"""Tests for question matching."""
import pytest

from core.models.answer import AnswerType
from core.services.catalog.answer_catalog import AnswerCatalog
from core.services.matching.question_matcher import QuestionMatcher, confidence_for_score


class TestQuestionScoring:
    """Test cases for the per-record score."""
    
    def test_keywords_score_ten_each(self, make_record):
        """Test every keyword found in the question adds 10."""
        record = make_record("r", keywords=["bond", "yield", "coupon"])
        assert QuestionMatcher.score(record, "bond yield today") == 20
    
    def test_category_and_type_bonuses(self, make_record):
        """Test category adds 20 and answer type adds 15."""
        record = make_record("r", category="Income", answer_type=AnswerType.TAX)
        assert QuestionMatcher.score(record, "income") == 20
        assert QuestionMatcher.score(record, "tax") == 15
        assert QuestionMatcher.score(record, "income tax") == 35
    
    def test_title_bonus_requires_question_inside_title(self, make_record):
        """Test the title bonus applies only when the whole question is part of the title."""
        record = make_record("r", title="Dividend Growth Analysis")
        assert QuestionMatcher.score(record, "growth") == 100
        assert QuestionMatcher.score(record, "dividend growth analysis please") == 0
    
    def test_keywords_overlapping_count_independently(self, make_record):
        """Test overlapping keywords each contribute."""
        record = make_record("r", keywords=["s&p", "500", "s&p 500"])
        assert QuestionMatcher.score(record, "vs the s&p 500") == 30


class TestConfidence:
    """Test cases for confidence tiers."""
    
    @pytest.mark.parametrize("score,expected", [
        (10, "low"), (24, "low"), (25, "medium"), (49, "medium"), (50, "high"), (185, "high"),
    ])
    def test_tiers(self, score, expected):
        """Test tier boundaries."""
        assert confidence_for_score(score) == expected


class TestQuestionMatcher:
    """Test cases for QuestionMatcher."""
    
    def test_unique_keyword_matches_its_record(self, make_record):
        """Test a keyword unique to one record selects that record."""
        catalog = AnswerCatalog([
            make_record("bonds", keywords=["duration"]),
            make_record("stocks", keywords=["equity"]),
        ])
        match = QuestionMatcher(catalog).find_best_match("What is my Duration?")
        assert match.answer.id == "bonds"
        assert match.score == 10
        assert match.confidence == "low"
    
    def test_no_overlap_returns_none(self, make_record):
        """Test questions scoring zero everywhere are unmatched."""
        catalog = AnswerCatalog([make_record("bonds", keywords=["duration"])])
        assert QuestionMatcher(catalog).find_best_match("how is the weather") is None
    
    def test_first_record_wins_ties(self, make_record):
        """Test the earlier record wins an equal score."""
        catalog = AnswerCatalog([
            make_record("first", keywords=["zebra"]),
            make_record("second", keywords=["zebra"]),
        ])
        assert QuestionMatcher(catalog).find_best_match("zebra").answer.id == "first"
    
    def test_higher_score_wins_regardless_of_order(self, make_record):
        """Test a later record with a strictly higher score replaces the leader."""
        catalog = AnswerCatalog([
            make_record("first", keywords=["zebra"]),
            make_record("second", keywords=["zebra", "lion"]),
        ])
        match = QuestionMatcher(catalog).find_best_match("zebra and lion")
        assert match.answer.id == "second"
        assert match.score == 20
    
    def test_medium_and_high_confidence(self, make_record):
        """Test scores of 25 and 50 map to medium and high."""
        catalog = AnswerCatalog([
            make_record("r", keywords=["a1", "b2", "c3", "d4", "e5"], answer_type=AnswerType.TAX),
        ])
        matcher = QuestionMatcher(catalog)
        assert matcher.find_best_match("a1 tax").confidence == "medium"
        assert matcher.find_best_match("a1 b2 c3 d4 e5").confidence == "high"
    
    def test_placeholders_substituted_before_scoring(self, make_record):
        """Test {key} tokens are replaced by lower-cased values."""
        catalog = AnswerCatalog([make_record("tax", keywords=["401k"])])
        matcher = QuestionMatcher(catalog)
        assert matcher.find_best_match("show {account} performance") is None
        
        match = matcher.find_best_match("show {account} performance", {"account": "401K"})
        assert match.answer.id == "tax"
    
    def test_process_question(self):
        """Test lower-casing and placeholder substitution."""
        processed = QuestionMatcher.process_question("Show {Account} Performance", {"account": "401K"})
        assert processed == "show 401k performance"
    
    def test_empty_question_never_raises(self, make_record):
        """Test the empty question is contained in every title, so the first record wins."""
        catalog = AnswerCatalog([make_record("first"), make_record("second")])
        match = QuestionMatcher(catalog).find_best_match("")
        assert match.answer.id == "first"
        assert match.confidence == "high"
    
    def test_empty_catalog(self):
        """Test an empty catalog never matches."""
        assert QuestionMatcher(AnswerCatalog([])).find_best_match("anything") is None


class TestBundledCatalogMatching:
    """Test cases against the shipped catalog."""
    
    def test_ytd_performance_vs_sp500(self, bundled_catalog):
        """Test the YTD benchmark question matches with high confidence."""
        match = QuestionMatcher(bundled_catalog).find_best_match("What is my YTD performance vs S&P 500?")
        assert match.answer.id == "ytd-performance-sp500"
        assert match.score >= 50
        assert match.confidence == "high"
    
    def test_advisor_question_is_unmatched(self, bundled_catalog):
        """Test a contact question has no catalog answer."""
        assert QuestionMatcher(bundled_catalog).find_best_match("Who is my financial advisor?") is None
    
    def test_trade_advice_question_is_unmatched(self, bundled_catalog):
        """Test a buy/sell advice question has no catalog answer."""
        assert QuestionMatcher(bundled_catalog).find_best_match("Should I sell my Tesla position?") is None
    
    def test_placeholder_question(self, bundled_catalog):
        """Test a templated question resolves once its placeholder is filled."""
        match = QuestionMatcher(bundled_catalog).find_best_match(
            "Show {account} tax efficiency", {"account": "401k"}
        )
        assert match.answer.id == "tax-efficiency"
        assert match.confidence == "high"
    
    @pytest.mark.parametrize("question,answer_id", [
        ("What are my top 10 holdings?", "top-holdings"),
        ("What is my dividend yield?", "dividend-income"),
        ("How is my ESG score?", "esg-scoring"),
        ("How much do I pay in fees?", "expense-ratio"),
    ])
    def test_common_questions(self, bundled_catalog, question, answer_id):
        """Test typical dashboard questions."""
        assert QuestionMatcher(bundled_catalog).find_best_match(question).answer.id == answer_id
