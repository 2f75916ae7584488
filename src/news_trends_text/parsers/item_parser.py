"""
News item list builder.
"""

from typing import Optional, Tuple

from news_trends_text.models import NewsItem
from .line_classifier import classify_line
from .patterns import MarkerPatterns, get_patterns


def build_items(
    body: Optional[str],
    patterns: Optional[MarkerPatterns] = None
) -> Tuple[NewsItem, ...]:
    """
    Build the ordered news items of a subsection body.

    Blank lines are skipped; every other line goes through classify_line().

    Args:
        body: Subsection body (everything after its title line); may be None

    Returns:
        Tuple of NewsItem in line order (empty for empty or None body)

    Example:
        >>> build_items("ㆍ Bonds fell\\n\\n📍 Record high close")
        (NewsItem(text='Bonds fell', highlight=False), NewsItem(text='Record high close', highlight=True))
    """
    if not body:
        return ()

    patterns = patterns or get_patterns()
    items = []
    for line in body.split('\n'):
        item = classify_line(line, patterns)
        if item is not None:
            items.append(item)
    return tuple(items)
