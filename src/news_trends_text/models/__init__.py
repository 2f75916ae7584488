"""
Pydantic models for the parsed bulletin hierarchy.

PeriodDocument -> Section -> Subsection -> NewsItem, collected in a
ParsedReport. All models are frozen once the parser returns them.
"""

from news_trends_text.models.document import NewsItem, Subsection, Section, PeriodDocument
from news_trends_text.models.report import ParsedReport

__all__ = [
    'NewsItem',
    'Subsection',
    'Section',
    'PeriodDocument',
    'ParsedReport',
]
