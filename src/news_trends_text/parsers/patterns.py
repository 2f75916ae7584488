"""
Compiled regular expressions built from the marker tables.

Patterns are derived from MarkerConfig rather than written inline, so a new
numeral set or bullet glyph only touches resources/markers.yaml.
"""

import re
from typing import Optional, Sequence, Tuple

from news_trends_text.config import MarkerConfig, get_config


def _alternation(glyphs: Sequence[str]) -> str:
    """Non-capturing alternation of escaped glyphs, longest first."""
    ordered = sorted(glyphs, key=len, reverse=True)
    return '(?:' + '|'.join(re.escape(g) for g in ordered) + ')'


class MarkerPatterns:
    """
    Regular expressions for one marker configuration.

    Attributes:
        period_header: Full header; group 1 is the label (``2.3 月``)
        section_marker: A section numeral immediately followed by a dot
        section_caption: Section marker plus rest of line; group 1 is the caption
        subsection_run: A marker line and its continuation lines (MULTILINE)
        bullet: Leading bullet plus trailing whitespace, or None if no bullets
        quote: First double-quoted phrase; group 1 is the phrase
        highlight_markers: Substrings that flag a line as highlighted
    """

    def __init__(self, config: MarkerConfig):
        self.config = config

        header = config.period_header
        glyph = re.escape(header.glyph)
        weekdays = '[' + ''.join(re.escape(c) for c in header.weekdays) + ']'
        phrase = r'\s*'.join(re.escape(word) for word in header.phrase.split())
        self.period_header = re.compile(
            rf'{glyph}\s*([0-9.]+\s*{weekdays})\s*{phrase}\s*{glyph}'
        )

        numerals = _alternation(config.section_numerals)
        self.section_marker = re.compile(rf'{numerals}\.')
        self.section_caption = re.compile(rf'{numerals}\.[^\S\n]*(\S[^\n]*)')

        shapes = [r'[0-9]+\.'] + [re.escape(g) for g in config.subsection_glyphs]
        marker = '(?:' + '|'.join(shapes) + ')'
        self.subsection_run = re.compile(
            rf'^[^\S\n]*{marker}[^\n]*(?:\n(?![^\S\n]*{marker})[^\n]*)*',
            re.MULTILINE
        )

        self.bullet: Optional[re.Pattern] = None
        if config.bullet_glyphs:
            self.bullet = re.compile(rf'^{_alternation(config.bullet_glyphs)}\s*')

        self.quote = re.compile(r'"([^"]+)"')
        self.highlight_markers: Tuple[str, ...] = tuple(config.highlight_markers)


_cached: Optional[MarkerPatterns] = None


def get_patterns() -> MarkerPatterns:
    """
    Patterns for the global marker config, rebuilt if the config was reset.
    """
    global _cached
    config = get_config()
    if _cached is None or _cached.config is not config:
        _cached = MarkerPatterns(config)
    return _cached
