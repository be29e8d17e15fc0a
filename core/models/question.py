"""Question data models."""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional

from core.models.content import GeneratedContent

ResponseStatus = Literal["matched", "review", "no_match"]
Confidence = Literal["high", "medium", "low"]


class QuestionContext(BaseModel):
    """Dashboard selection the question was asked from."""
    accounts: Optional[List[str]] = None
    timeframe: Optional[str] = None
    selection_mode: Optional[str] = Field(default=None, alias="selectionMode")
    
    class Config:
        populate_by_name = True


class QuestionRequest(BaseModel):
    """Question request model."""
    question: str
    context: Optional[QuestionContext] = None
    placeholders: Optional[Dict[str, str]] = None  # {key} tokens to substitute before matching
    include_content: bool = Field(default=False, alias="includeContent")
    
    class Config:
        populate_by_name = True


class AnswerPayload(BaseModel):
    """Answer as returned to the client (catalog record or synthetic fallback)."""
    id: str
    title: str
    content: str
    category: Optional[str] = None
    answer_type: Optional[str] = Field(default=None, alias="answerType")
    data: Optional[Dict[str, Any]] = None
    
    class Config:
        populate_by_name = True


class QuestionResponse(BaseModel):
    """Question response model."""
    id: str
    status: ResponseStatus
    answer: Optional[AnswerPayload] = None
    confidence: Optional[Confidence] = None
    message: Optional[str] = None
    generated_content: Optional[GeneratedContent] = Field(default=None, alias="generatedContent")
    
    class Config:
        populate_by_name = True
