"""
Discovery helper classes for exploring the marker tables.

Provides user-facing APIs to list the section numerals, highlight markers
and bullet glyphs configured in resources/markers.yaml.
"""

from typing import Dict, List

from news_trends_text.config import get_config


class SectionNumerals:
    """
    Helper class for the ordered section numerals.

    Example:
        >>> SectionNumerals.list_available()
        ['Ⅰ', 'Ⅱ', 'Ⅲ', 'Ⅳ', 'Ⅴ', 'Ⅵ']
        >>> SectionNumerals.ordinal_of('Ⅲ')
        3
    """

    @staticmethod
    def list_available() -> List[str]:
        """List numerals in order (a copy)."""
        return list(get_config().section_numerals)

    @staticmethod
    def ordinal_of(numeral: str) -> int:
        """
        1-based position of a numeral.

        Raises:
            ValueError: If numeral is not configured
        """
        numerals = get_config().section_numerals
        if numeral not in numerals:
            raise ValueError(f"Unknown section numeral: {numeral}")
        return numerals.index(numeral) + 1

    @staticmethod
    def numeral_for(ordinal: int) -> str:
        """
        Numeral for a 1-based ordinal.

        Raises:
            ValueError: If ordinal is outside the configured range

        Example:
            >>> SectionNumerals.numeral_for(1)
            'Ⅰ'
        """
        numerals = get_config().section_numerals
        if not 1 <= ordinal <= len(numerals):
            raise ValueError(
                f"Section ordinal must be between 1 and {len(numerals)}, got {ordinal}"
            )
        return numerals[ordinal - 1]

    @staticmethod
    def is_valid(numeral: str) -> bool:
        return numeral in get_config().section_numerals


class HighlightMarkers:
    """
    Helper class for highlight markers.

    Example:
        >>> HighlightMarkers.is_valid('급등')
        True
        >>> HighlightMarkers.found_in('코스피 사상 최고치')
        ['사상', '최고']
    """

    @staticmethod
    def list_available() -> List[str]:
        return list(get_config().highlight_markers)

    @staticmethod
    def is_valid(marker: str) -> bool:
        return get_config().is_highlight_marker(marker)

    @staticmethod
    def found_in(line: str) -> List[str]:
        """
        Markers contained in a line, in table order.

        Useful to explain why a news item was highlighted.
        """
        return [m for m in get_config().highlight_markers if m in line]


class BulletGlyphs:
    """
    Helper class for bullet glyphs stripped from news lines.

    Example:
        >>> BulletGlyphs.is_valid('ㆍ')
        True
    """

    @staticmethod
    def list_available() -> List[str]:
        return list(get_config().bullet_glyphs)

    @staticmethod
    def is_valid(glyph: str) -> bool:
        return glyph in get_config().bullet_glyphs


def list_marker_tables() -> Dict[str, List[str]]:
    """
    All glyph and keyword tables, keyed by table name.

    Example:
        >>> list_marker_tables()['section_numerals']
        ['Ⅰ', 'Ⅱ', 'Ⅲ', 'Ⅳ', 'Ⅴ', 'Ⅵ']
    """
    config = get_config()
    return {
        'section_numerals': SectionNumerals.list_available(),
        'subsection_glyphs': list(config.subsection_glyphs),
        'highlight_markers': HighlightMarkers.list_available(),
        'bullet_glyphs': BulletGlyphs.list_available(),
        'featured_title_keywords': list(config.featured_title_keywords),
    }
