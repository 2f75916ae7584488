"""
User-facing API for news-trends-text.

This module provides the document assembler that turns bulletin text into
a ParsedReport.
"""

from news_trends_text.api.report_parser import ReportParser, parse

__all__ = [
    'ReportParser',
    'parse'
]
