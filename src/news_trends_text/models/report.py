"""
ParsedReport collection class for ordered PeriodDocument objects.

This module defines ParsedReport, the parser's sole output: an immutable,
ordered collection of periods with convenient access patterns, statistics
and tabular export.
"""

from typing import Iterable, Iterator, List, Tuple, Union, overload

import pandas as pd

from .document import PeriodDocument


ITEM_COLUMNS = [
    'period', 'quote', 'section', 'subsection', 'featured',
    'position', 'text', 'highlight',
]


class ParsedReport:
    """
    Ordered collection of PeriodDocument objects parsed from one bulletin.

    Unlike most collections in this package a report may be empty: parsing
    the empty string yields ``ParsedReport([])``.

    Key Features:
    - Supports indexing by position (int), period title (str), or slice
    - Equality with another report compares every field of every period
    - Offers statistics (periods, sections, subsections, items, highlights)
    - Flattens to a pandas DataFrame with one row per news item

    Example:
        >>> from news_trends_text import parse
        >>> report = parse(text)
        >>>
        >>> first = report[0]                # By index -> PeriodDocument
        >>> week = report["2.3 月"]          # By title -> PeriodDocument
        >>> rest = report[1:]                # By slice -> ParsedReport
        >>>
        >>> print(report.period_count, report.highlight_count)
        2 7
    """

    def __init__(self, periods: Iterable[PeriodDocument] = ()):
        self._periods: Tuple[PeriodDocument, ...] = tuple(periods)

    @property
    def periods(self) -> Tuple[PeriodDocument, ...]:
        return self._periods

    # === Collection Access ===

    @overload
    def __getitem__(self, key: int) -> PeriodDocument: ...

    @overload
    def __getitem__(self, key: str) -> PeriodDocument: ...

    @overload
    def __getitem__(self, key: slice) -> 'ParsedReport': ...

    def __getitem__(self, key: Union[int, str, slice]) -> Union[PeriodDocument, 'ParsedReport']:
        """
        Access periods by index, title, or slice.

        Raises:
            KeyError: If no period has the given title
            IndexError: If integer index out of range

        Examples:
            >>> report[0]           # First period -> PeriodDocument
            >>> report["2.3 月"]    # By title -> first period with that title
            >>> report[1:3]         # Slice -> ParsedReport
        """
        if isinstance(key, int):
            return self._periods[key]
        elif isinstance(key, str):
            for period in self._periods:
                if period.title == key:
                    return period
            raise KeyError(f"No period titled '{key}' in report")
        elif isinstance(key, slice):
            return ParsedReport(self._periods[key])
        else:
            raise TypeError(f"Invalid key type: {type(key).__name__}")

    def __iter__(self) -> Iterator[PeriodDocument]:
        return iter(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    def __bool__(self) -> bool:
        return bool(self._periods)

    def __contains__(self, title: object) -> bool:
        return any(p.title == title for p in self._periods)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedReport):
            return self._periods == other._periods
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._periods)

    # === Period Metadata ===

    @property
    def titles(self) -> List[str]:
        """
        Period titles in order.

        Example:
            >>> report.titles
            ['2.3 月', '2.10 月']
        """
        return [p.title for p in self._periods]

    # === Statistics ===

    @property
    def period_count(self) -> int:
        return len(self._periods)

    @property
    def section_count(self) -> int:
        return sum(len(p.sections) for p in self._periods)

    @property
    def subsection_count(self) -> int:
        return sum(len(s.subsections) for p in self._periods for s in p.sections)

    @property
    def item_count(self) -> int:
        return sum(len(p.items) for p in self._periods)

    @property
    def highlight_count(self) -> int:
        return sum(1 for p in self._periods for item in p.items if item.highlight)

    # === Export ===

    def to_dict(self) -> dict:
        """
        Convert to dictionary.

        Returns:
            Dictionary with periods and statistics

        Example:
            >>> report.to_dict().keys()
            dict_keys(['periods', 'statistics'])
        """
        return {
            "periods": [p.model_dump() for p in self._periods],
            "statistics": {
                "period_count": self.period_count,
                "section_count": self.section_count,
                "subsection_count": self.subsection_count,
                "item_count": self.item_count,
                "highlight_count": self.highlight_count,
            }
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        Flatten the report to one row per news item.

        Columns: period, quote, section, subsection, featured, position
        (0-based within the subsection), text, highlight. Subsections without
        items contribute no rows.

        Example:
            >>> df = report.to_dataframe()
            >>> df[df['highlight']]['text'].tolist()
            ['Record high close']
        """
        rows = []
        for period in self._periods:
            for section in period.sections:
                for subsection in section.subsections:
                    featured = subsection.featured
                    for position, item in enumerate(subsection.content):
                        rows.append({
                            'period': period.title,
                            'quote': period.quote,
                            'section': section.title,
                            'subsection': subsection.title,
                            'featured': featured,
                            'position': position,
                            'text': item.text,
                            'highlight': item.highlight,
                        })
        return pd.DataFrame(rows, columns=ITEM_COLUMNS)

    def to_list(self) -> List[PeriodDocument]:
        return list(self._periods)

    def __repr__(self) -> str:
        return (
            f"ParsedReport(periods={self.period_count}, "
            f"sections={self.section_count}, items={self.item_count})"
        )

    def __str__(self) -> str:
        titles_str = ", ".join(self.titles[:3])
        if len(self._periods) > 3:
            titles_str += ", ..."
        return f"ParsedReport[{titles_str}] ({self.period_count} periods)"
