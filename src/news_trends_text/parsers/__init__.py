"""
Text parsing modules for News & Trends bulletins.

Parsing is a strict top-down fold, one pass per level:
- Periods split on ``♧ <label> News & Trends ♧`` headers
- Sections split on numeral markers (Ⅰ. to Ⅵ.)
- Subsections split on ``<digits>.``, ▶, ◇, ■ lines
- News items classified line by line (highlight markers, bullet stripping)
"""

from .patterns import MarkerPatterns, get_patterns
from .line_classifier import classify_line, is_highlight, strip_bullet
from .item_parser import build_items
from .subsection_parser import split_subsections
from .section_parser import split_sections
from .period_parser import PeriodBlock, split_periods, extract_quote
from .captions import (
    CaptionPairing,
    PositionalPairing,
    AnchoredPairing,
    create_pairing
)

__all__ = [
    # Patterns
    'MarkerPatterns',
    'get_patterns',
    # Splitters
    'classify_line',
    'is_highlight',
    'strip_bullet',
    'build_items',
    'split_subsections',
    'split_sections',
    'split_periods',
    'extract_quote',
    'PeriodBlock',
    # Caption Pairing Strategies
    'CaptionPairing',
    'PositionalPairing',
    'AnchoredPairing',
    'create_pairing',
]
