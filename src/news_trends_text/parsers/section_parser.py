"""
Section splitting inside one period.

Sections open with one of the numeral markers (Ⅰ. through Ⅵ.). Text before
the first marker is the period's preamble (pull-quote and the like) and never
becomes a section; a period without any marker therefore has no sections.
"""

import logging
from typing import List, Optional, Tuple

from news_trends_text.models import Section
from .captions import CaptionPairing, MarkedBlock, create_pairing, split_marked_blocks
from .patterns import MarkerPatterns, get_patterns
from .subsection_parser import split_subsections

logger = logging.getLogger(__name__)


def scan_section_titles(period_text: str, patterns: Optional[MarkerPatterns] = None) -> List[str]:
    """
    Collect section captions left to right.

    A marker with nothing after it on its line is skipped by this scan.

    Example:
        >>> scan_section_titles("Ⅰ. Markets\\n...\\nⅡ. Policy")
        ['Markets', 'Policy']
    """
    patterns = patterns or get_patterns()
    return [m.group(1).strip() for m in patterns.section_caption.finditer(period_text)]


def _caption_after_marker(block: MarkedBlock) -> str:
    """Rest of the marker's line."""
    return block.body.split('\n', 1)[0].strip()


def split_sections(
    period_text: str,
    patterns: Optional[MarkerPatterns] = None,
    pairing: Optional[CaptionPairing] = None
) -> Tuple[Section, ...]:
    """
    Split a period's text into sections.

    Each section's text keeps its caption line and is handed to
    split_subsections(). Blank sections are dropped. Sections without a
    usable caption are titled ``Section {ordinal}``.

    Args:
        period_text: Text of one period (header removed)
        patterns: Marker patterns; defaults to the global marker config
        pairing: Caption pairing strategy; defaults to AppConfig.caption_pairing

    Returns:
        Tuple of Section in input order

    Example:
        >>> sections = split_sections('"Stay bullish"\\nⅠ. Markets\\n1. Stocks rose')
        >>> [s.title for s in sections]
        ['Markets']
    """
    patterns = patterns or get_patterns()
    pairing = pairing or create_pairing()

    _, blocks = split_marked_blocks(patterns.section_marker, period_text)
    if not blocks:
        logger.debug("No section markers found, period has no sections")
        return ()

    blocks = [block for block in blocks if block.body.strip()]
    captions = pairing.pair(blocks, scan_section_titles(period_text, patterns), _caption_after_marker)

    sections = []
    for ordinal, (block, caption) in enumerate(zip(blocks, captions), start=1):
        if not caption:
            logger.debug(f"Section {ordinal} has no caption, using fallback title")
        sections.append(Section(
            title=caption or patterns.config.fallback_section_title(ordinal),
            subsections=split_subsections(block.body, patterns)
        ))
    return tuple(sections)
