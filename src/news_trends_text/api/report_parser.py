"""
Document assembler: raw bulletin text in, ParsedReport out.

This module provides ReportParser and the module-level parse() shortcut.
Parsing runs Period -> Section -> Subsection -> Item in a single pass per
level; an outer boundary is never revisited once fixed.
"""

import logging
from typing import Any, Optional

from news_trends_text.config import MarkerConfig
from news_trends_text.models import ParsedReport, PeriodDocument
from news_trends_text.parsers import (
    CaptionPairing,
    MarkerPatterns,
    create_pairing,
    get_patterns,
    split_periods,
    split_sections,
)
from news_trends_text.validators import validate_raw_text

logger = logging.getLogger(__name__)


class ReportParser:
    """
    Parser for News & Trends bulletins.

    Holds no state between calls: every parse() allocates a fresh document
    tree, so one instance can serve concurrent callers.

    Example:
        >>> parser = ReportParser()
        >>> report = parser.parse("♧ 2.3 月 News & Trends ♧\\nⅠ. Markets\\n1. Stocks rose")
        >>> report[0].sections[0].title
        'Markets'

        >>> # Opt out of positional caption pairing
        >>> parser = ReportParser(pairing="anchored")
    """

    def __init__(
        self,
        config: Optional[MarkerConfig] = None,
        pairing: Optional[str] = None
    ):
        """
        Initialize parser.

        Args:
            config: Marker tables; defaults to the global MarkerConfig
            pairing: Caption pairing policy name; defaults to
                     AppConfig.caption_pairing

        Raises:
            ValueError: If pairing is not a known policy
        """
        self._patterns: MarkerPatterns = (
            MarkerPatterns(config) if config is not None else get_patterns()
        )
        self._pairing: CaptionPairing = create_pairing(pairing)

    @property
    def config(self) -> MarkerConfig:
        return self._patterns.config

    @property
    def pairing(self) -> CaptionPairing:
        return self._pairing

    def parse(self, raw_text: Any) -> ParsedReport:
        """
        Parse bulletin text into a ParsedReport.

        Never fails on a string: missing headers and markers are resolved by
        fallbacks. The empty string gives an empty report.

        Args:
            raw_text: Bulletin text

        Returns:
            ParsedReport with one PeriodDocument per period

        Raises:
            ReportInputError: If raw_text is not a string
        """
        text = validate_raw_text(raw_text)

        periods = []
        for block in split_periods(text, self._patterns, self._pairing):
            sections = split_sections(block.body, self._patterns, self._pairing)
            periods.append(PeriodDocument(
                title=block.title,
                quote=block.quote,
                sections=sections
            ))

        report = ParsedReport(periods)
        logger.debug(
            f"Parsed {report.period_count} periods, {report.section_count} sections, "
            f"{report.item_count} items ({report.highlight_count} highlighted) "
            f"using {self._pairing.name} caption pairing"
        )
        return report


def parse(raw_text: Any) -> ParsedReport:
    """
    Parse bulletin text with the global configuration.

    Example:
        >>> from news_trends_text import parse
        >>> parse("")
        ParsedReport(periods=0, sections=0, items=0)
    """
    return ReportParser().parse(raw_text)
