"""UI content models produced by the content generator."""
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class KPI(BaseModel):
    """Headline figure with a short change line."""
    label: str
    value: str
    change: str
    is_positive: bool = Field(alias="isPositive")
    
    class Config:
        populate_by_name = True


class Metric(BaseModel):
    """Secondary figure with optional subtext."""
    label: str
    value: str
    subtext: Optional[str] = None


class GeneratedContent(BaseModel):
    """Dashboard-ready presentation of an answer."""
    paragraph: Optional[str] = None
    kpis: Optional[List[KPI]] = None
    chart_data: Optional[List[Dict[str, Any]]] = Field(default=None, alias="chartData")
    table_data: Optional[List[Dict[str, Any]]] = Field(default=None, alias="tableData")
    highlights: Optional[List[str]] = None
    metrics: Optional[List[Metric]] = None
    
    class Config:
        populate_by_name = True
