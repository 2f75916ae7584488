"""
Period ("week") splitting of the raw bulletin.

A period opens with a header such as ``♧ 2.3 月 News & Trends ♧``. The header
itself is discarded; its label (``2.3 月``) becomes the period title.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from .captions import CaptionPairing, MarkedBlock, create_pairing, split_marked_blocks
from .patterns import MarkerPatterns, get_patterns

logger = logging.getLogger(__name__)


class PeriodBlock(NamedTuple):
    """Title, pull-quote and raw text of one period, before sectioning."""

    title: str
    quote: str
    body: str


def extract_quote(block_text: str, patterns: Optional[MarkerPatterns] = None) -> str:
    """
    First double-quoted phrase in a period's text, trimmed.

    No escaping is recognized: the phrase ends at the next straight quote.

    Example:
        >>> extract_quote('intro "Stay bullish" and "more"')
        'Stay bullish'
        >>> extract_quote('no quote here')
        ''
    """
    patterns = patterns or get_patterns()
    match = patterns.quote.search(block_text)
    if match is None:
        return ''
    return match.group(1).strip()


def scan_period_labels(raw: str, patterns: Optional[MarkerPatterns] = None) -> List[str]:
    """
    Collect header labels left to right.

    Example:
        >>> scan_period_labels("♧ 2.3 月 News & Trends ♧ ... ♧ 2.10 月 News & Trends ♧")
        ['2.3 月', '2.10 月']
    """
    patterns = patterns or get_patterns()
    return [m.group(1).strip() for m in patterns.period_header.finditer(raw)]


def _label_of(block: MarkedBlock) -> str:
    return block.marker.group(1).strip()


def split_periods(
    raw: str,
    patterns: Optional[MarkerPatterns] = None,
    pairing: Optional[CaptionPairing] = None
) -> Tuple[PeriodBlock, ...]:
    """
    Split raw bulletin text into periods.

    Blocks that are blank after trimming are dropped. Non-blank text before
    the first header is kept as an implicit first period. Periods without a
    label are titled ``Week {ordinal}``.

    Args:
        raw: Entire bulletin text
        patterns: Marker patterns; defaults to the global marker config
        pairing: Caption pairing strategy; defaults to AppConfig.caption_pairing

    Returns:
        Tuple of PeriodBlock in input order

    Example:
        >>> [p.title for p in split_periods("♧ 2.3 月 News & Trends ♧\\nⅠ. Markets")]
        ['2.3 月']
        >>> [p.title for p in split_periods("Ⅰ. Markets")]
        ['Week 1']
    """
    patterns = patterns or get_patterns()
    pairing = pairing or create_pairing()

    preamble, marked = split_marked_blocks(patterns.period_header, raw)
    blocks = [MarkedBlock(None, preamble)] + marked
    blocks = [block for block in blocks if block.body.strip()]

    if blocks and blocks[0].marker is None:
        logger.debug("Text before the first period header kept as an implicit period")

    labels = pairing.pair(blocks, scan_period_labels(raw, patterns), _label_of)

    periods = []
    for ordinal, (block, label) in enumerate(zip(blocks, labels), start=1):
        periods.append(PeriodBlock(
            title=label or patterns.config.fallback_period_title(ordinal),
            quote=extract_quote(block.body, patterns),
            body=block.body
        ))
    return tuple(periods)
