"""Answer catalog models."""
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class AnswerType(str, Enum):
    """Answer types understood by the content generator."""
    PERFORMANCE = "performance"
    HOLDINGS = "holdings"
    RISK = "risk"
    ALLOCATION = "allocation"
    DIVIDEND = "dividend"
    TRADING = "trading"
    ESG = "esg"
    COSTS = "costs"
    GEOGRAPHIC = "geographic"
    FIXED_INCOME = "fixed_income"
    ALTERNATIVES = "alternatives"
    TAX = "tax"


class AnswerRecord(BaseModel):
    """Pre-authored catalog answer with the keywords that trigger it."""
    id: str
    title: str
    content: str
    category: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    answer_type: AnswerType = Field(alias="answerType")
    data: Optional[Dict[str, Any]] = None  # Shape depends on answer_type
    
    class Config:
        frozen = True
        populate_by_name = True


class AnswerSummary(BaseModel):
    """Catalog listing entry (no content or data)."""
    id: str
    title: str
    category: Optional[str] = None
    answer_type: AnswerType = Field(alias="answerType")
    
    class Config:
        populate_by_name = True
