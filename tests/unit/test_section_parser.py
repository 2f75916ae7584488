"""
Unit tests for section splitting.

Sections open with Ⅰ. to Ⅵ.; text before the first marker is preamble and
never a section.
"""

import pytest


class TestSplitSections:
    """Test numeral-marker section splitting."""

    def test_scenario_single_section_after_quote(self):
        from news_trends_text.parsers import split_sections

        sections = split_sections('\n"Stay bullish"\nⅠ. Markets\n1. Stocks rose\n📍 Record high close')

        assert len(sections) == 1
        assert sections[0].title == "Markets"
        assert [s.title for s in sections[0].subsections] == ["1. Stocks rose"]

    def test_all_six_numerals_open_sections(self):
        from news_trends_text.parsers import split_sections

        text = "\n".join(f"{n}. Title {n}\nㆍ item" for n in "ⅠⅡⅢⅣⅤⅥ")
        sections = split_sections(text)

        assert [s.title for s in sections] == [f"Title {n}" for n in "ⅠⅡⅢⅣⅤⅥ"]

    def test_numerals_beyond_the_table_do_not_split(self):
        from news_trends_text.parsers import split_sections

        sections = split_sections("Ⅰ. One\nⅦ. Not a section\nㆍ item")

        assert [s.title for s in sections] == ["One"]

    def test_text_without_markers_has_no_sections(self):
        """All of it is preamble."""
        from news_trends_text.parsers import split_sections

        assert split_sections('"quote"\n1. Stocks rose\nㆍ x') == ()
        assert split_sections("") == ()

    def test_preamble_is_dropped(self):
        from news_trends_text.parsers import split_sections

        sections = split_sections("Intro line\nmore intro\nⅠ. Markets\nㆍ x")

        assert [s.title for s in sections] == ["Markets"]
        assert [i.text for i in sections[0].items] == ["x"]

    def test_blank_sections_are_dropped(self):
        from news_trends_text.parsers import split_sections

        sections = split_sections("Ⅰ.   \nⅡ. Policy\nㆍ x")

        assert [s.title for s in sections] == ["Policy"]

    def test_section_keeps_caption_line_for_subsections(self):
        """A section without subsection markers is titled by its caption line."""
        from news_trends_text.parsers import split_sections

        sections = split_sections("Ⅰ. Global\nㆍ 달러 약세")

        assert sections[0].subsections[0].title == "Global"

    def test_marker_requires_immediate_dot(self):
        from news_trends_text.parsers import split_sections

        assert split_sections("Ⅰ Markets\nㆍ x") == ()


class TestSectionCaptionPairing:
    """Test caption fallbacks under both pairing policies."""

    def test_positional_missing_caption_shifts_later_titles(self):
        """A marker with nothing after it loses its caption to the next section."""
        from news_trends_text.parsers import split_sections, PositionalPairing

        sections = split_sections("Ⅰ.\nfoo\nⅡ. Policy\nbar", pairing=PositionalPairing())

        assert [s.title for s in sections] == ["Policy", "Section 2"]

    def test_anchored_missing_caption_uses_fallback_in_place(self):
        from news_trends_text.parsers import split_sections, AnchoredPairing

        sections = split_sections("Ⅰ.\nfoo\nⅡ. Policy\nbar", pairing=AnchoredPairing())

        assert [s.title for s in sections] == ["Section 1", "Policy"]

    def test_whitespace_caption_uses_fallback(self):
        from news_trends_text.parsers import split_sections, PositionalPairing

        sections = split_sections("Ⅰ.   \nfoo", pairing=PositionalPairing())

        assert [s.title for s in sections] == ["Section 1"]

    @pytest.mark.parametrize("policy", ["positional", "anchored"])
    def test_well_formed_input_is_policy_independent(self, policy):
        from news_trends_text.parsers import split_sections, create_pairing

        sections = split_sections("Ⅰ. A\nㆍ x\nⅡ. B\nㆍ y", pairing=create_pairing(policy))

        assert [s.title for s in sections] == ["A", "B"]

    def test_scan_section_titles(self):
        from news_trends_text.parsers.section_parser import scan_section_titles

        assert scan_section_titles("Ⅰ. Markets\nx\nⅡ.\ny\nⅢ.  Policy ") == ["Markets", "Policy"]


class TestUnicodeWhitespace:
    """Pasted CJK text often carries no-break or ideographic spaces."""

    @pytest.mark.parametrize("space", ["\u00a0", "\u3000", "\u2009"])
    @pytest.mark.parametrize("policy", ["positional", "anchored"])
    def test_caption_after_non_ascii_space(self, space, policy):
        from news_trends_text.parsers import split_sections, create_pairing

        text = f"Ⅰ.{space}Markets\n1. a\nⅡ. Policy\n1. b"
        sections = split_sections(text, pairing=create_pairing(policy))

        assert [s.title for s in sections] == ["Markets", "Policy"]

    def test_scan_skips_non_ascii_space(self):
        from news_trends_text.parsers.section_parser import scan_section_titles

        assert scan_section_titles("Ⅰ.\u3000글로벌 마켓\nⅡ.\u00a0Policy") == ["글로벌 마켓", "Policy"]

    def test_ideographic_space_only_is_no_caption(self):
        from news_trends_text.parsers.section_parser import scan_section_titles

        assert scan_section_titles("Ⅰ.\u3000\u00a0\nfoo") == []
