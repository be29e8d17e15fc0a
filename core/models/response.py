"""Response data models."""
from pydantic import BaseModel
from typing import Any, List, Optional


class APIResponse(BaseModel):
    """Generic API response model."""
    success: bool
    message: str
    data: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str
    details: Optional[List[Any]] = None
