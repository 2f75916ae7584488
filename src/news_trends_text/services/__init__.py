"""
Collaborator services for news-trends-text.

This module contains the thin layers around the parser:
- ShareLinkService: Raw text <-> share URL encoding
- render_text / render_html: Canonical text and HTML rendering
- export_items_csv: CSV export of news items
"""

from news_trends_text.services.share_link import ShareLinkService, ShareLinkError
from news_trends_text.services.render import (
    build_period_element,
    period_heading,
    render_html,
    render_text,
)
from news_trends_text.services.export import export_items_csv

__all__ = [
    'ShareLinkService',
    'ShareLinkError',
    'render_text',
    'render_html',
    'period_heading',
    'build_period_element',
    'export_items_csv'
]
