"""
Subsection splitting inside one section.

Primary strategy: a subsection starts at a line beginning with ``<digits>.``
or one of the subsection glyphs (▶, ◇, ■) and runs until the next such line.
Fallback: a section without any such line is a single subsection.
"""

import logging
from typing import List, Optional, Tuple

from news_trends_text.models import Subsection
from .item_parser import build_items
from .patterns import MarkerPatterns, get_patterns

logger = logging.getLogger(__name__)


def find_subsection_runs(
    section_text: str,
    patterns: Optional[MarkerPatterns] = None
) -> List[str]:
    """
    Find marker-led runs of lines in a section.

    Returns:
        Raw text of each run in order (empty if the section has no markers)
    """
    patterns = patterns or get_patterns()
    return [m.group(0) for m in patterns.subsection_run.finditer(section_text)]


def build_subsection(
    raw_text: str,
    patterns: Optional[MarkerPatterns] = None
) -> Optional[Subsection]:
    """
    Build one subsection from its raw text.

    The first non-blank line (marker included) is the title; the remaining
    non-blank lines are the body. The featured flag comes from the title
    and the configured featured keywords.

    Returns:
        Subsection, or None if the text has no non-blank line
    """
    patterns = patterns or get_patterns()
    lines = [line for line in raw_text.split('\n') if line.strip()]
    if not lines:
        return None

    title = lines[0].strip()
    body = '\n'.join(lines[1:])
    return Subsection(
        title=title,
        content=build_items(body, patterns),
        featured=patterns.config.is_featured_title(title)
    )


def split_subsections(
    section_text: str,
    patterns: Optional[MarkerPatterns] = None
) -> Tuple[Subsection, ...]:
    """
    Split a section's text into subsections.

    Args:
        section_text: Text of one section (its caption line included)
        patterns: Marker patterns; defaults to the global marker config

    Returns:
        Tuple of Subsection in input order

    Example:
        >>> subs = split_subsections(" Markets\\n1. Stocks rose\\nㆍ Bonds fell")
        >>> [s.title for s in subs]
        ['1. Stocks rose']
    """
    patterns = patterns or get_patterns()

    raw_texts = find_subsection_runs(section_text, patterns)
    if not raw_texts:
        logger.debug("No subsection markers found, using whole section as one subsection")
        raw_texts = [section_text]

    subsections = []
    for raw_text in raw_texts:
        subsection = build_subsection(raw_text, patterns)
        if subsection is not None:
            subsections.append(subsection)
    return tuple(subsections)
