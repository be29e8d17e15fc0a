"""Presentation of answer data for the dashboard.

- ContentGenerator: Per-answer-type KPIs, tables, charts, metrics and highlights
"""
from core.services.content.content_generator import ContentGenerator

__all__ = ["ContentGenerator"]
