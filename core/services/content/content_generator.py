"""Content generator that turns answer data into dashboard presentations."""
from typing import Any, Callable, Dict, Optional, Union

from core.models.answer import AnswerRecord, AnswerType
from core.models.content import GeneratedContent
from core.models.question import AnswerPayload
from core.services.content.allocation import format_alternatives, format_allocation, format_geographic
from core.services.content.esg import format_esg
from core.services.content.income import format_dividend, format_fixed_income
from core.services.content.performance import format_holdings, format_performance
from core.services.content.risk import format_risk
from core.services.content.trading import format_costs, format_tax, format_trading
from core.utils.logger import logger

Formatter = Callable[[Dict[str, Any]], GeneratedContent]


class ContentGenerator:
    """
    Dispatches an answer to the formatter registered for its answer type.
    
    Answers without data, and answer types with no formatter (fallback
    answers among them), render as a single paragraph of the answer content.
    """
    
    FORMATTERS: Dict[str, Formatter] = {
        AnswerType.PERFORMANCE.value: format_performance,
        AnswerType.HOLDINGS.value: format_holdings,
        AnswerType.RISK.value: format_risk,
        AnswerType.ALLOCATION.value: format_allocation,
        AnswerType.DIVIDEND.value: format_dividend,
        AnswerType.TRADING.value: format_trading,
        AnswerType.ESG.value: format_esg,
        AnswerType.COSTS.value: format_costs,
        AnswerType.GEOGRAPHIC.value: format_geographic,
        AnswerType.FIXED_INCOME.value: format_fixed_income,
        AnswerType.ALTERNATIVES.value: format_alternatives,
        AnswerType.TAX.value: format_tax,
    }
    
    def get_formatter(self, answer_type: Optional[str]) -> Optional[Formatter]:
        """Formatter registered for an answer type, if any."""
        if answer_type is None:
            return None
        if isinstance(answer_type, AnswerType):
            answer_type = answer_type.value
        return self.FORMATTERS.get(answer_type)
    
    def generate_content(
        self,
        answer: Union[AnswerRecord, AnswerPayload],
        strict: bool = False
    ) -> GeneratedContent:
        """
        Generate UI content for an answer.
        
        Args:
            answer: Catalog record or answer payload
            strict: Raise when the data does not fit its formatter instead of
                falling back to the paragraph rendering
        
        Returns:
            Generated content
        """
        formatter = self.get_formatter(answer.answer_type)
        if not answer.data or formatter is None:
            return GeneratedContent(paragraph=answer.content)
        
        try:
            return formatter(answer.data)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            if strict:
                raise
            logger.warning(f"Could not format answer {answer.id} as {answer.answer_type}: {str(e)}")
            return GeneratedContent(paragraph=answer.content)
