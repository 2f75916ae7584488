"""
Per-line classification of news items.

A line is highlighted when it contains any configured highlight marker
(plain substring containment, case-sensitive, anywhere in the line). Its text
is the trimmed line with at most one leading bullet removed.
"""

from typing import Optional

from news_trends_text.models import NewsItem
from .patterns import MarkerPatterns, get_patterns


def is_highlight(line: str, patterns: Optional[MarkerPatterns] = None) -> bool:
    """
    Check whether a line carries a highlight marker.

    Example:
        >>> is_highlight("📍 Record high close")
        True
        >>> is_highlight("Highlight of the week")  # case-sensitive
        False
    """
    patterns = patterns or get_patterns()
    return any(marker in line for marker in patterns.highlight_markers)


def strip_bullet(line: str, patterns: Optional[MarkerPatterns] = None) -> str:
    """
    Remove one leading bullet glyph and the whitespace after it.

    Only the start of the trimmed line is touched; bullets further in are
    kept verbatim.

    Example:
        >>> strip_bullet("- 급등했다")
        '급등했다'
        >>> strip_bullet("ㆍㆍ double")
        'ㆍ double'
    """
    patterns = patterns or get_patterns()
    trimmed = line.strip()
    if patterns.bullet is None:
        return trimmed
    return patterns.bullet.sub('', trimmed, count=1)


def classify_line(line: str, patterns: Optional[MarkerPatterns] = None) -> Optional[NewsItem]:
    """
    Turn one line into a NewsItem.

    Args:
        line: Raw line (surrounding whitespace is ignored)
        patterns: Marker patterns; defaults to the global marker config

    Returns:
        NewsItem, or None when the line is blank or is nothing but a bullet
    """
    patterns = patterns or get_patterns()
    trimmed = line.strip()
    if not trimmed:
        return None

    text = strip_bullet(trimmed, patterns)
    if not text:
        return None

    return NewsItem(text=text, highlight=is_highlight(trimmed, patterns))
