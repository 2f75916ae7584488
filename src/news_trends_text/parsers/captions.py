"""
Caption Pairing Strategies

Attaches an optional caption (period label, section title) to each block
produced by delimiter splitting.

Design:
- Strategy Pattern: pairings are interchangeable
- Splitters are agnostic to the pairing in use
- PositionalPairing keeps the established behaviour, AnchoredPairing reads
  each block's caption from the marker that opened it
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from news_trends_text.config import get_app_config
from news_trends_text.validators import validate_caption_pairing


class MarkedBlock(NamedTuple):
    """Text following a delimiter match, up to the next match."""

    marker: Optional[re.Match]
    body: str


def split_marked_blocks(pattern: re.Pattern, text: str) -> Tuple[str, List[MarkedBlock]]:
    """
    Partition text on every non-overlapping match of a pattern.

    The matched delimiter text is discarded.

    Returns:
        (preamble, blocks): text before the first match, then one block per
        match holding the match and the text up to the next match

    Example:
        >>> preamble, blocks = split_marked_blocks(re.compile(r'Ⅰ\\.|Ⅱ\\.'), "intro Ⅰ. a Ⅱ. b")
        >>> preamble, [b.body for b in blocks]
        ('intro ', [' a ', ' b'])
    """
    matches = list(pattern.finditer(text))
    if not matches:
        return text, []

    preamble = text[:matches[0].start()]
    blocks = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        blocks.append(MarkedBlock(match, text[match.end():end]))
    return preamble, blocks


CaptionReader = Callable[[MarkedBlock], Optional[str]]


class CaptionPairing(ABC):
    """
    Abstract base class for caption pairing strategies.

    Given the blocks that survived splitting and the captions found by an
    independent scan of the same text, decide which caption each block gets.
    """

    name: str = ''

    @abstractmethod
    def pair(
        self,
        blocks: Sequence[MarkedBlock],
        scanned: Sequence[str],
        read_caption: CaptionReader
    ) -> List[Optional[str]]:
        """
        Choose a caption per block.

        Args:
            blocks: Blocks in input order
            scanned: Captions from a left-to-right scan of the whole text
            read_caption: Reads the caption belonging to a block's own marker

        Returns:
            One caption (or None) per block; callers substitute fallbacks
        """
        pass


class PositionalPairing(CaptionPairing):
    """
    Nth scanned caption goes to the Nth block.

    A block without a matching caption (kept preamble, marker whose caption
    the scan could not read) shifts every later caption by one; blocks left
    over at the end get None.
    """

    name = 'positional'

    def pair(
        self,
        blocks: Sequence[MarkedBlock],
        scanned: Sequence[str],
        read_caption: CaptionReader
    ) -> List[Optional[str]]:
        return [scanned[i] if i < len(scanned) else None for i in range(len(blocks))]


class AnchoredPairing(CaptionPairing):
    """
    Each block takes the caption of the marker that opens it.

    A block without an opening marker takes None. Missing markers elsewhere
    never affect other blocks.
    """

    name = 'anchored'

    def pair(
        self,
        blocks: Sequence[MarkedBlock],
        scanned: Sequence[str],
        read_caption: CaptionReader
    ) -> List[Optional[str]]:
        return [read_caption(block) if block.marker is not None else None for block in blocks]


def create_pairing(name: Optional[str] = None) -> CaptionPairing:
    """
    Create a caption pairing strategy by name.

    Args:
        name: 'positional' or 'anchored'; defaults to AppConfig.caption_pairing

    Raises:
        ValueError: If the name is not a known policy
    """
    if name is None:
        name = get_app_config().caption_pairing

    policy = validate_caption_pairing(name)
    if policy == AnchoredPairing.name:
        return AnchoredPairing()
    return PositionalPairing()
