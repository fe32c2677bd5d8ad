"""Map a Pealim page onto noun, adjective and verb records.

Each grammatical slot is looked up on its own through SLOT_LOCATORS: find
the gating table row (if any), resolve the slot id inside that row block,
then extract the form and its variants. A slot that cannot be found is an
empty form; only an undetectable part of speech is an error.
"""

import re
from dataclasses import replace
from typing import List, NamedTuple, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from pealim.common.errors import PartOfSpeechError
from pealim.input.extract import (
    extract_aux_variants,
    extract_contained_variants,
    extract_form,
)
from pealim.input.slots import SLOT_LOCATORS, Slot
from pealim.schema import (
    EMPTY_FORM,
    GENDER_FEMININE,
    GENDER_MASCULINE,
    GENDER_UNKNOWN,
    PARTS_OF_SPEECH,
    POS_ADJECTIVE,
    POS_NOUN,
    POS_VERB,
    AdjectiveResult,
    Form,
    NounResult,
    PartOfSpeechRecord,
    VerbResult,
)


NOUN_RE = re.compile(r"Noun\s*–\s*([^,]+?)\s+pattern", re.IGNORECASE)
ADJECTIVE_RE = re.compile(r"Adjective\s*–\s*([^,]+?)\s+pattern", re.IGNORECASE)
VERB_RE = re.compile(r"Verb\s*–", re.IGNORECASE)
BINYAN_RE = re.compile(r"Verb\s*–\s*(.+)", re.IGNORECASE)
ROOT_RE = re.compile(r"Root:\s*(.+)")
HYPHEN_RE = re.compile(r"\s*-\s*")

ROOT_PREFIX = "Root:"
MEANING_HEADING = "Meaning"
INFINITIVE_PARTICLE = "to "
FUTURE_PARTICLE = "will "


class PageHeader(NamedTuple):
    """What the paragraph under the page title says about the word."""
    pos: Optional[str]
    pattern: str
    binyan: str
    gender: str
    paragraph: Optional[Tag]


def read_page_header(soup: BeautifulSoup) -> PageHeader:
    """Detect part of speech, pattern, binyan and gender.

    The paragraph reads e.g. "Noun – miktav pattern, masculine" or
    "Verb – PA'AL".
    """
    paragraph = soup.select_one("h2.page-header + p")
    text = paragraph.get_text() if paragraph is not None else ""
    lowered = text.lower()

    gender = GENDER_UNKNOWN
    if "masculine" in lowered:
        gender = GENDER_MASCULINE
    elif "feminine" in lowered:
        gender = GENDER_FEMININE

    pos = None
    binyan = ""
    match = NOUN_RE.search(text)
    if match:
        pos = POS_NOUN
    else:
        match = ADJECTIVE_RE.search(text)
        if match:
            pos = POS_ADJECTIVE
        elif VERB_RE.search(text):
            pos = POS_VERB
            binyan_match = BINYAN_RE.search(text)
            if binyan_match:
                binyan = binyan_match.group(1).strip()

    pattern = match.group(1).strip() if match else ""
    return PageHeader(pos=pos, pattern=pattern, binyan=binyan, gender=gender, paragraph=paragraph)


def read_root(header_paragraph: Optional[Tag]) -> str:
    """Read "Root: פ - ת - ר" from the paragraph after the header, as "פ – ת – ר"."""
    if header_paragraph is None:
        return ""
    paragraph = header_paragraph.find_next_sibling()
    if paragraph is None or paragraph.name != "p":
        return ""
    text = paragraph.get_text().strip()
    if not text.startswith(ROOT_PREFIX):
        return ""
    match = ROOT_RE.match(text)
    if not match:
        return ""
    return HYPHEN_RE.sub(" – ", match.group(1).strip())


def read_meaning(soup: BeautifulSoup) -> str:
    for heading in soup.select("h3.page-header"):
        if heading.get_text().strip() != MEANING_HEADING:
            continue
        lead = heading.find_next_sibling("div", class_="lead")
        return lead.get_text().strip() if lead is not None else ""
    return ""


def find_conjugation_table(soup: BeautifulSoup) -> Optional[Tag]:
    return soup.select_one("table.conjugation-table")


def find_row_by_label(table: Tag, label: str) -> Optional[Tag]:
    """Return the first row whose header cell contains label."""
    for row in table.find_all("tr"):
        th = row.find("th")
        if th is not None and label in th.get_text().strip():
            return row
    return None


def row_block(row: Tag) -> List[Tag]:
    """The row plus the rows its header cell spans (e.g. 1st/2nd/3rd person)."""
    rows = [row]
    th = row.find("th")
    try:
        span = int(th.get("rowspan", 1)) if th is not None else 1
    except (TypeError, ValueError):
        span = 1
    current = row
    for _ in range(span - 1):
        current = current.find_next_sibling("tr")
        if current is None:
            break
        rows.append(current)
    return rows


def resolve_slot(scope: List[Tag], slot: Slot) -> Optional[Tuple[Tag, Tag]]:
    """Return (cell, form_element) for a slot id within scope, or None.

    The id sits either on the cell itself or on a div inside a td.conj-td.
    """
    for node in scope:
        cell = node.find("td", id=slot.value)
        if cell is not None:
            form_element = cell.find("div", id=slot.value)
            return cell, (form_element if form_element is not None else cell)
    for node in scope:
        form_element = node.find("div", id=slot.value)
        if form_element is None:
            continue
        cell = form_element.find_parent("td", class_="conj-td")
        if cell is not None:
            return cell, form_element
    return None


def extract_slot(table: Optional[Tag], slot: Slot) -> Form:
    """Extract one slot with its variants (contained first, then aux panel)."""
    if table is None:
        return EMPTY_FORM
    locator = SLOT_LOCATORS[slot]
    scope = [table]
    if locator.row_label:
        row = find_row_by_label(table, locator.row_label)
        if row is None:
            return EMPTY_FORM
        scope = row_block(row)

    resolved = resolve_slot(scope, slot)
    if resolved is None:
        return EMPTY_FORM
    cell, form_element = resolved

    form = extract_form(form_element)
    variations = extract_contained_variants(form_element) + extract_aux_variants(
        cell,
        filter_unstressed_ending=locator.filter_unstressed_ending,
        filter_modern_usage=locator.filter_modern_usage,
    )
    if variations:
        form = form.with_variations(variations)
    return form


def _strip_exclamation(text: str) -> str:
    return text.replace("!", "").strip()


def strip_exclamation_marks(form: Form) -> Form:
    """Remove "!" from the spellings and transliteration of an imperative form and its variations."""
    cleaned = replace(
        form,
        pointed=_strip_exclamation(form.pointed),
        unpointed=_strip_exclamation(form.unpointed),
        transliteration=_strip_exclamation(form.transliteration),
    )
    if not cleaned.variations:
        return cleaned
    return cleaned.with_variations(
        replace(
            v,
            pointed=_strip_exclamation(v.pointed),
            unpointed=_strip_exclamation(v.unpointed),
            transliteration=_strip_exclamation(v.transliteration),
        )
        for v in cleaned.variations
    )


def imperative_meaning(meaning: str) -> str:
    """'to write' -> 'write'."""
    return meaning.replace(INFINITIVE_PARTICLE, "")


def future_meaning(meaning: str) -> str:
    """'to write' -> 'will write'."""
    return meaning.replace(INFINITIVE_PARTICLE, FUTURE_PARTICLE)


def map_noun(table: Optional[Tag], header: PageHeader, url: str, root: str, meaning: str) -> NounResult:
    return NounResult(
        gender=header.gender,
        pattern=header.pattern,
        meaning=meaning,
        url=url,
        root=root,
        singular=extract_slot(table, Slot.NOUN_SINGULAR),
        plural=extract_slot(table, Slot.NOUN_PLURAL),
    )


def map_adjective(table: Optional[Tag], header: PageHeader, url: str, root: str, meaning: str) -> AdjectiveResult:
    return AdjectiveResult(
        pattern=header.pattern,
        meaning=meaning,
        url=url,
        root=root,
        m_singular=extract_slot(table, Slot.ADJ_M_SINGULAR),
        f_singular=extract_slot(table, Slot.ADJ_F_SINGULAR),
        m_plural=extract_slot(table, Slot.ADJ_M_PLURAL),
        f_plural=extract_slot(table, Slot.ADJ_F_PLURAL),
    )


def map_verb(table: Optional[Tag], header: PageHeader, url: str, root: str, meaning: str) -> VerbResult:
    past_1s = extract_slot(table, Slot.PAST_1S)
    past_1p = extract_slot(table, Slot.PAST_1P)
    past_3p = extract_slot(table, Slot.PAST_3P)
    future_1s = extract_slot(table, Slot.FUTURE_1S)
    future_1p = extract_slot(table, Slot.FUTURE_1P)

    return VerbResult(
        binyan=header.binyan,
        meaning=meaning,
        url=url,
        root=root,
        infinitive=extract_slot(table, Slot.INFINITIVE),

        m_singular=extract_slot(table, Slot.PRESENT_MS),
        f_singular=extract_slot(table, Slot.PRESENT_FS),
        m_plural=extract_slot(table, Slot.PRESENT_MP),
        f_plural=extract_slot(table, Slot.PRESENT_FP),

        imperative_m_singular=strip_exclamation_marks(extract_slot(table, Slot.IMPERATIVE_2MS)),
        imperative_f_singular=strip_exclamation_marks(extract_slot(table, Slot.IMPERATIVE_2FS)),
        imperative_m_plural=strip_exclamation_marks(extract_slot(table, Slot.IMPERATIVE_2MP)),
        imperative_f_plural=strip_exclamation_marks(extract_slot(table, Slot.IMPERATIVE_2FP)),
        imperative_meaning=imperative_meaning(meaning),

        past_1st_m_singular=past_1s,
        past_1st_f_singular=past_1s,
        past_1st_m_plural=past_1p,
        past_1st_f_plural=past_1p,
        past_2nd_m_singular=extract_slot(table, Slot.PAST_2MS),
        past_2nd_f_singular=extract_slot(table, Slot.PAST_2FS),
        past_2nd_m_plural=extract_slot(table, Slot.PAST_2MP),
        past_2nd_f_plural=extract_slot(table, Slot.PAST_2FP),
        past_3rd_m_singular=extract_slot(table, Slot.PAST_3MS),
        past_3rd_f_singular=extract_slot(table, Slot.PAST_3FS),
        past_3rd_m_plural=past_3p,
        past_3rd_f_plural=past_3p,

        future_1st_m_singular=future_1s,
        future_1st_f_singular=future_1s,
        future_1st_m_plural=future_1p,
        future_1st_f_plural=future_1p,
        future_2nd_m_singular=extract_slot(table, Slot.FUTURE_2MS),
        future_2nd_f_singular=extract_slot(table, Slot.FUTURE_2FS),
        future_2nd_m_plural=extract_slot(table, Slot.FUTURE_2MP),
        future_2nd_f_plural=extract_slot(table, Slot.FUTURE_2FP),
        future_3rd_m_singular=extract_slot(table, Slot.FUTURE_3MS),
        future_3rd_f_singular=extract_slot(table, Slot.FUTURE_3FS),
        future_3rd_m_plural=extract_slot(table, Slot.FUTURE_3MP),
        future_3rd_f_plural=extract_slot(table, Slot.FUTURE_3FP),
        future_meaning=future_meaning(meaning),
    )


_MAPPERS = {
    POS_NOUN: map_noun,
    POS_ADJECTIVE: map_adjective,
    POS_VERB: map_verb,
}


def map_document(soup: BeautifulSoup, url: str, part_of_speech: Optional[str] = None) -> PartOfSpeechRecord:
    """Build the record for a parsed page.

    part_of_speech overrides detection. Raises PartOfSpeechError when neither
    yields noun, adjective or verb.
    """
    header = read_page_header(soup)
    pos = part_of_speech or header.pos
    if not pos:
        raise PartOfSpeechError()
    if pos not in PARTS_OF_SPEECH:
        raise PartOfSpeechError(f"Unsupported part of speech: {pos}", requested=pos)

    root = read_root(header.paragraph)
    meaning = read_meaning(soup)
    table = find_conjugation_table(soup)
    return _MAPPERS[pos](table, header, url, root, meaning)


__all__ = [
    "PageHeader",
    "read_page_header",
    "read_root",
    "read_meaning",
    "find_conjugation_table",
    "find_row_by_label",
    "row_block",
    "resolve_slot",
    "extract_slot",
    "strip_exclamation_marks",
    "imperative_meaning",
    "future_meaning",
    "map_noun",
    "map_adjective",
    "map_verb",
    "map_document",
]
