"""
Rendering of a ParsedReport.

- render_text(): canonical marker format, parseable again
- render_html(): HTML fragment mirroring the report page (period heading,
  pull-quote, two section columns, subsection cards, news items)

Rendering reads only the model; it never parses text again.
"""

import logging
from typing import Optional

from lxml import etree

from news_trends_text.config import MarkerConfig, get_config
from news_trends_text.models import ParsedReport, PeriodDocument, Section, Subsection

logger = logging.getLogger(__name__)

HIGHLIGHT_BULLET = '📍'
PLAIN_BULLET = 'ㆍ'


def period_heading(title: str, config: Optional[MarkerConfig] = None) -> str:
    """
    Header line for a period.

    Example:
        >>> period_heading("2.3 月")
        '♧ 2.3 月 News & Trends ♧'
    """
    config = config or get_config()
    glyph = config.period_header.glyph
    return f"{glyph} {title} {config.period_header.phrase} {glyph}"


def render_text(report: ParsedReport, config: Optional[MarkerConfig] = None) -> str:
    """
    Serialize a report back to the canonical bulletin format.

    Highlighted items are written with a ``📍`` bullet and plain items with
    ``ㆍ``, so highlight flags survive a reparse. Section numerals follow the
    configured order; a section titled with its ordinal fallback is written
    as a bare numeral.

    Raises:
        ValueError: If a period has more sections than there are numerals

    Example:
        >>> print(render_text(parse(text)))
        ♧ 2.3 月 News & Trends ♧
        "Stay bullish"
        Ⅰ. Markets
        1. Stocks rose
        📍 Record high close
    """
    config = config or get_config()
    numerals = config.section_numerals

    lines = []
    for period in report:
        lines.append(period_heading(period.title, config))
        if period.quote:
            lines.append(f'"{period.quote}"')

        if len(period.sections) > len(numerals):
            raise ValueError(
                f"Period '{period.title}' has {len(period.sections)} sections, "
                f"only {len(numerals)} numerals are configured"
            )

        for ordinal, (numeral, section) in enumerate(zip(numerals, period.sections), start=1):
            # A fallback title was never in the source; a bare marker reparses to it
            if section.title == config.fallback_section_title(ordinal):
                lines.append(f"{numeral}.")
            else:
                lines.append(f"{numeral}. {section.title}")
            for index, subsection in enumerate(section.subsections):
                # An unmarked section's only subsection is titled by the caption line itself
                if index > 0 or subsection.title != section.title:
                    lines.append(subsection.title)
                for item in subsection.content:
                    bullet = HIGHLIGHT_BULLET if item.highlight else PLAIN_BULLET
                    lines.append(f"{bullet} {item.text}")

    return '\n'.join(lines)


def _subsection_card(parent: etree._Element, subsection: Subsection) -> None:
    card_class = 'news-card featured' if subsection.featured else 'news-card'
    card = etree.SubElement(parent, 'div', {'class': card_class})
    etree.SubElement(card, 'h3').text = subsection.title

    items = etree.SubElement(card, 'ul', {'class': 'news-items'})
    for item in subsection.content:
        li = etree.SubElement(items, 'li', {'class': 'highlight' if item.highlight else 'plain'})
        etree.SubElement(li, 'span', {'class': 'bullet'}).text = (
            HIGHLIGHT_BULLET if item.highlight else PLAIN_BULLET
        )
        etree.SubElement(li, 'span', {'class': 'text'}).text = item.text


def _section_block(parent: etree._Element, section: Section) -> None:
    block = etree.SubElement(parent, 'section', {'class': 'report-section'})
    etree.SubElement(block, 'h2').text = section.title
    for subsection in section.subsections:
        _subsection_card(block, subsection)


def build_period_element(period: PeriodDocument, config: Optional[MarkerConfig] = None) -> etree._Element:
    """
    Build the element tree for one period.

    Sections are split over two columns, the left one taking the larger half.
    """
    root = etree.Element('article', {'class': 'period'})
    header = etree.SubElement(root, 'header')
    etree.SubElement(header, 'h2').text = period_heading(period.title, config)
    if period.quote:
        etree.SubElement(header, 'blockquote').text = f'"{period.quote}"'

    grid = etree.SubElement(root, 'div', {'class': 'columns'})
    for column in period.columns():
        column_elem = etree.SubElement(grid, 'div', {'class': 'column'})
        for section in column:
            _section_block(column_elem, section)

    return root


def render_html(report: ParsedReport, config: Optional[MarkerConfig] = None) -> str:
    """
    Render a report as an HTML fragment, one <article> per period.

    Example:
        >>> html = render_html(parse(text))
        >>> html.startswith('<div class="report">')
        True
    """
    root = etree.Element('div', {'class': 'report'})
    for period in report:
        root.append(build_period_element(period, config))

    logger.debug(f"Rendered {report.period_count} periods to HTML")
    return etree.tostring(root, method='html', encoding='unicode')
