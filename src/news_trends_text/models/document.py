"""
Pydantic models for the parsed bulletin hierarchy.

Schema Design:
- PeriodDocument -> Section -> Subsection -> NewsItem, in input order
- Frozen models with tuple-valued children (nothing changes after parsing)
- Titles are never empty: missing captions are replaced by ordinal fallbacks
"""

from math import ceil
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class NewsItem(BaseModel):
    """
    One news line with its bullet removed.

    Example:
        >>> NewsItem(text="급등했다", highlight=True)
        NewsItem(text='급등했다', highlight=True)
    """

    text: str = Field(
        ...,
        min_length=1,
        description="Trimmed line text with at most one leading bullet removed",
        examples=["Record high close"]
    )

    highlight: bool = Field(
        default=False,
        description="True when the original line carried a highlight marker"
    )

    model_config = ConfigDict(frozen=True)


class Subsection(BaseModel):
    """
    Titled group of news items inside a section.

    The title is the first non-blank line of the subsection's source block,
    marker included (e.g. ``"1. Stocks rose"``).
    """

    title: str = Field(
        ...,
        min_length=1,
        description="First non-blank line of the subsection block",
        examples=["1. Stocks rose"]
    )

    content: Tuple[NewsItem, ...] = Field(
        default=(),
        description="News items in original line order"
    )

    featured: bool = Field(
        default=False,
        description="True when the title carries a featured keyword; presentation emphasizes the whole card"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def highlight_count(self) -> int:
        return sum(1 for item in self.content if item.highlight)


class Section(BaseModel):
    """
    Numeral-delimited part of a period (``Ⅰ. Markets``).
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Caption after the numeral marker, or 'Section {ordinal}'",
        examples=["Markets", "Section 2"]
    )

    subsections: Tuple[Subsection, ...] = Field(
        default=(),
        description="Subsections in input order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def items(self) -> Tuple[NewsItem, ...]:
        """All news items of the section, flattened in order."""
        return tuple(item for sub in self.subsections for item in sub.content)


class PeriodDocument(BaseModel):
    """
    One reporting period ("week") of the bulletin.

    Example:
        >>> week = PeriodDocument(title="2.3 月", quote="Stay bullish")
        >>> week.sections
        ()
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Label captured from the period header, or 'Week {ordinal}'",
        examples=["2.3 月", "Week 2"]
    )

    quote: str = Field(
        default="",
        description="First double-quoted phrase in the period block, or empty"
    )

    sections: Tuple[Section, ...] = Field(
        default=(),
        description="Sections in input order"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "title": "2.3 月",
                    "quote": "Stay bullish",
                    "sections": [
                        {
                            "title": "Markets",
                            "subsections": [
                                {
                                    "title": "1. Stocks rose",
                                    "content": [
                                        {"text": "Record high close", "highlight": True}
                                    ]
                                }
                            ]
                        }
                    ]
                }
            ]
        }
    )

    @property
    def items(self) -> Tuple[NewsItem, ...]:
        """All news items of the period, flattened in order."""
        return tuple(item for section in self.sections for item in section.items)

    def columns(self) -> Tuple[Tuple[Section, ...], Tuple[Section, ...]]:
        """
        Split sections into two rendering columns.

        The left column takes the larger half when the count is odd.

        Example:
            >>> left, right = week.columns()  # 3 sections
            >>> len(left), len(right)
            (2, 1)
        """
        split = ceil(len(self.sections) / 2)
        return self.sections[:split], self.sections[split:]
