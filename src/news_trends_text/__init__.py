"""
news-trends-text: News & Trends bulletin parsing library.

Main package exports for user-facing API.
"""

from news_trends_text.api import ReportParser, parse
from news_trends_text.models import NewsItem, Subsection, Section, PeriodDocument, ParsedReport
from news_trends_text.services import ShareLinkService, render_text, render_html
from news_trends_text.validators import ReportInputError

__all__ = [
    'parse',
    'ReportParser',
    'ParsedReport',
    'PeriodDocument',
    'Section',
    'Subsection',
    'NewsItem',
    'ReportInputError',
    'ShareLinkService',
    'render_text',
    'render_html',
    'parse_shared',
]


def parse_shared(url: str) -> ParsedReport:
    """
    Parse the bulletin carried by a share URL.

    Args:
        url: Share URL with a ``data`` query parameter

    Returns:
        ParsedReport of the decoded text

    Raises:
        ShareLinkError: If the URL carries no decodable data

    Example:
        >>> from news_trends_text import parse_shared
        >>> report = parse_shared("http://localhost:3000/?data=...")
        >>> report.titles
        ['2.3 月']
    """
    return parse(ShareLinkService().decode_url(url))
