"""
Unit tests for period ("week") splitting, label pairing and quote extraction.
"""

import pytest


HEADER_2_3 = "♧ 2.3 月 News & Trends ♧"
HEADER_2_10 = "♧ 2.10 火 News & Trends ♧"


class TestPeriodHeaderPattern:
    """Test recognition of the period header."""

    @pytest.mark.parametrize("header,label", [
        ("♧ 2.3 月 News & Trends ♧", "2.3 月"),
        ("♧2.3月News&Trends♧", "2.3月"),
        ("♧   12.31   日   News   &   Trends   ♧", "12.31   日"),
        ("♧ 1.2.3 水 News & Trends ♧", "1.2.3 水"),
    ])
    def test_header_variants_capture_label(self, header, label):
        from news_trends_text.parsers.period_parser import scan_period_labels

        assert scan_period_labels(header) == [label]

    @pytest.mark.parametrize("header", [
        "♧ 2.3 X News & Trends ♧",     # weekday outside the alphabet
        "♧ 2.3 月 News Trends ♧",      # phrase without '&'
        "♧ 月 News & Trends ♧",        # missing numeral label
        "♣ 2.3 月 News & Trends ♣",    # wrong glyph
        "♧ 2.3 月月 News & Trends ♧",  # two weekday ideographs
    ])
    def test_malformed_headers_are_not_recognized(self, header):
        from news_trends_text.parsers.period_parser import scan_period_labels

        assert scan_period_labels(header) == []


class TestExtractQuote:
    """Test pull-quote extraction."""

    def test_first_quoted_phrase_wins(self):
        from news_trends_text.parsers import extract_quote

        assert extract_quote('x "Stay bullish" y "Second"') == "Stay bullish"

    def test_quote_is_trimmed(self):
        from news_trends_text.parsers import extract_quote

        assert extract_quote('"  padded  "') == "padded"

    def test_no_quote_gives_empty_string(self):
        from news_trends_text.parsers import extract_quote

        assert extract_quote("no quotes") == ""
        assert extract_quote('one " only') == ""

    def test_quote_may_span_lines(self):
        from news_trends_text.parsers import extract_quote

        assert extract_quote('"line one\nline two"') == "line one\nline two"


class TestSplitPeriods:
    """Test partitioning on headers."""

    def test_two_periods_with_labels_and_quotes(self, sample_bulletin):
        from news_trends_text.parsers import split_periods

        periods = split_periods(sample_bulletin)

        assert [p.title for p in periods] == ["2.3 月", "2.10 火"]
        assert [p.quote for p in periods] == ["Stay bullish", "Patience pays"]

    def test_header_text_is_discarded(self, sample_bulletin):
        from news_trends_text.parsers import split_periods

        periods = split_periods(sample_bulletin)

        assert all("News & Trends" not in p.body for p in periods)

    def test_empty_input_has_no_periods(self):
        from news_trends_text.parsers import split_periods

        assert split_periods("") == ()
        assert split_periods("  \n\t ") == ()

    def test_input_without_header_is_one_implicit_period(self):
        from news_trends_text.parsers import split_periods

        periods = split_periods("Ⅰ. Markets\nㆍ x")

        assert len(periods) == 1
        assert periods[0].title == "Week 1"
        assert periods[0].body == "Ⅰ. Markets\nㆍ x"

    def test_header_without_content_is_dropped(self):
        from news_trends_text.parsers import split_periods

        periods = split_periods(f"{HEADER_2_3}\n   \n{HEADER_2_10}\nⅠ. Global")

        assert len(periods) == 1

    def test_blank_preamble_is_dropped(self):
        from news_trends_text.parsers import split_periods

        periods = split_periods(f"\n\n{HEADER_2_3}\nⅠ. Markets")

        assert [p.title for p in periods] == ["2.3 月"]


class TestPeriodLabelPairing:
    """Test label pairing under malformed input."""

    def test_positional_preamble_shifts_labels(self):
        """Non-blank text before the first header takes the first label."""
        from news_trends_text.parsers import split_periods, PositionalPairing

        periods = split_periods(f"Preface\n{HEADER_2_3}\nⅠ. Markets", pairing=PositionalPairing())

        assert [p.title for p in periods] == ["2.3 月", "Week 2"]
        assert periods[0].body.strip() == "Preface"

    def test_anchored_preamble_gets_fallback(self):
        from news_trends_text.parsers import split_periods, AnchoredPairing

        periods = split_periods(f"Preface\n{HEADER_2_3}\nⅠ. Markets", pairing=AnchoredPairing())

        assert [p.title for p in periods] == ["Week 1", "2.3 月"]

    def test_positional_empty_period_shifts_labels(self):
        """A dropped empty period still contributed a label to the scan."""
        from news_trends_text.parsers import split_periods, PositionalPairing

        text = f"{HEADER_2_3}\n\n{HEADER_2_10}\nⅠ. Global"
        periods = split_periods(text, pairing=PositionalPairing())

        assert [p.title for p in periods] == ["2.3 月"]

    def test_anchored_empty_period_keeps_own_label(self):
        from news_trends_text.parsers import split_periods, AnchoredPairing

        text = f"{HEADER_2_3}\n\n{HEADER_2_10}\nⅠ. Global"
        periods = split_periods(text, pairing=AnchoredPairing())

        assert [p.title for p in periods] == ["2.10 火"]
