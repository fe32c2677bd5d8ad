"""
Unit tests for form and variant extraction.
"""

from pealim.common.utils import strip_niqqud
from pealim.input.extract import (
    MODERN_USAGE_NOTE,
    extract_aux_variants,
    extract_contained_variants,
    extract_form,
    find_aux_panel,
    read_transliteration,
    split_spelling,
)
from pealim.schema import EMPTY_FORM


SHALOM_POINTED = "שָׁלוֹם"
SHALOM_PLAIN = "שלום"


class TestSpelling:
    """Tests for pointed/unpointed spelling."""

    def test_strip_niqqud(self):
        assert strip_niqqud(SHALOM_POINTED) == SHALOM_PLAIN

    def test_unpointed_derived_from_pointed(self, make_soup):
        soup = make_soup(f'<div><span class="menukad">{SHALOM_POINTED}</span></div>')
        assert split_spelling(soup.find("span")) == (SHALOM_POINTED, SHALOM_PLAIN)

    def test_tilde_gives_both_spellings(self, make_soup):
        soup = make_soup('<div><span class="menukad">פָּתוּר</span> ~ פתור</div>')
        assert split_spelling(soup.find("span")) == ("פָּתוּר", "פתור")


class TestTransliteration:
    """Tests for transliteration and stress offset."""

    def test_stress_offset_counts_text_before_bold(self, make_soup):
        soup = make_soup('<div class="transcription">kot<b>e</b>v</div>')
        assert read_transliteration(soup.div) == ("kotev", 3)

    def test_leading_whitespace_ignored(self, make_soup):
        soup = make_soup('<div class="transcription">\n   kot<b>e</b>v  </div>')
        assert read_transliteration(soup.div) == ("kotev", 3)

    def test_no_stress_marker(self, make_soup):
        soup = make_soup('<div class="transcription">kotev</div>')
        assert read_transliteration(soup.div) == ("kotev", 0)

    def test_missing_transcription(self):
        assert read_transliteration(None) == ("", 0)


class TestExtractForm:
    """Tests for primary form extraction."""

    def test_extract_form(self, make_soup):
        soup = make_soup(
            '<div id="AP-ms"><div><span class="menukad">כּוֹתֵב</span></div>'
            '<div class="transcription">kot<b>e</b>v</div>'
            '<div class="meaning">I (m.) write</div></div>'
        )
        form = extract_form(soup.div)

        assert form.pointed == "כּוֹתֵב"
        assert form.unpointed == strip_niqqud("כּוֹתֵב")
        assert form.transliteration == "kotev"
        assert form.stress_offset == 3
        assert form.variations == ()

    def test_missing_node_is_empty(self):
        assert extract_form(None) is EMPTY_FORM
        assert EMPTY_FORM.is_empty()


class TestContainedVariants:
    """Tests for alternates kept inside the form block."""

    def test_extra_child_divs_are_variants(self, make_soup):
        soup = make_soup(
            '<div id="PERF-2ms">'
            '<div><span class="menukad">A</span><div class="transcription">a</div></div>'
            '<div><span class="menukad">B</span><div class="transcription">b<b>e</b></div></div>'
            '<div class="meaning"><span class="menukad">C</span></div>'
            '<div class="aux-forms"><span class="menukad">D</span></div>'
            "</div>"
        )
        variants = extract_contained_variants(soup.find("div", id="PERF-2ms"))

        assert [v.pointed for v in variants] == ["B"]
        assert variants[0].transliteration == "be"
        assert variants[0].stress_offset == 1

    def test_child_without_menukad_skipped(self, make_soup):
        soup = make_soup(
            '<div id="x"><div><span class="menukad">A</span></div>'
            '<div class="transcription">a</div></div>'
        )
        assert extract_contained_variants(soup.find("div", id="x")) == []

    def test_popover_panel_not_a_contained_variant(self, make_soup):
        soup = make_soup(
            '<td class="conj-td" id="PERF-2ms">'
            '<div><span class="menukad">A</span></div>'
            '<div class="popover-host"><div class="aux-forms">'
            '<div><span class="menukad">B</span></div>'
            "</div></div></td>"
        )
        assert extract_contained_variants(soup.td) == []

    def test_none(self):
        assert extract_contained_variants(None) == []


class TestAuxVariants:
    """Tests for alternates in aux-forms panels."""

    def test_panel_inside_popover(self, make_soup):
        soup = make_soup(
            '<td class="conj-td"><div class="popover-host"><div class="aux-forms hidden">'
            '<div><span class="menukad">B</span> <span class="transcription">b<b>o</b></span></div>'
            "</div></div></td>"
        )
        cell = soup.td
        assert find_aux_panel(cell) is not None

        variants = extract_aux_variants(cell)
        assert len(variants) == 1
        assert variants[0].pointed == "B"
        assert variants[0].transliteration == "bo"
        assert variants[0].stress_offset == 1

    def test_form_identifier_block(self, make_soup):
        soup = make_soup(
            '<td class="conj-td"><div class="aux-forms">'
            '<div><div id="PERF-2mp"><div><span class="menukad">X</span></div>'
            '<div class="transcription">x<b>e</b>m</div></div></div>'
            "</div></td>"
        )
        variants = extract_aux_variants(soup.td)
        assert [(v.pointed, v.transliteration, v.stress_offset) for v in variants] == [("X", "xem", 1)]

    def test_no_panel(self, make_soup):
        soup = make_soup('<td class="conj-td"><div id="s"></div></td>')
        assert extract_aux_variants(soup.td) == []
        assert extract_aux_variants(None) == []

    def test_modern_usage_note_filtered(self, make_soup):
        markup = (
            '<td class="conj-td"><div class="aux-forms">'
            f"{MODERN_USAGE_NOTE}: "
            '<div><span class="menukad">M</span> <span class="transcription">m</span></div>'
            "</div></td>"
        )
        assert len(extract_aux_variants(make_soup(markup).td)) == 1
        assert extract_aux_variants(make_soup(markup).td, filter_modern_usage=True) == []

    def test_note_element_suppresses_until_next_text(self, make_soup):
        soup = make_soup(
            '<td class="conj-td"><div class="aux-forms">'
            f"<p>{MODERN_USAGE_NOTE}:</p>"
            '<div><span class="menukad">A</span></div>'
            " Also: "
            '<div><span class="menukad">B</span></div>'
            "</div></td>"
        )
        variants = extract_aux_variants(soup.td, filter_modern_usage=True)
        assert [v.pointed for v in variants] == ["B"]

    def test_unrelated_note_not_filtered(self, make_soup):
        soup = make_soup(
            '<td class="conj-td"><div class="aux-forms">'
            "In colloquial speech the ending is often unstressed: "
            '<div><span class="menukad">A</span></div>'
            "</div></td>"
        )
        assert len(extract_aux_variants(soup.td, filter_modern_usage=True)) == 1
        assert extract_aux_variants(soup.td, filter_unstressed_ending=True) == []

    def test_blocks_before_note_kept(self, make_soup):
        soup = make_soup(
            '<td class="conj-td"><div class="aux-forms">'
            '<div><span class="menukad">BEFORE</span></div>'
            f"{MODERN_USAGE_NOTE}: "
            '<div><span class="menukad">SUPPRESSED</span></div>'
            " Also: "
            '<div><span class="menukad">AFTER</span></div>'
            "</div></td>"
        )
        variants = extract_aux_variants(soup.td, filter_modern_usage=True)
        assert [v.pointed for v in variants] == ["BEFORE", "AFTER"]
