"""Form and variant extraction from conjugation table cells.

A form block on Pealim looks like:

    <div id="AP-ms">
      <div><span class="menukad">כּוֹתֵב</span></div>
      <div class="transcription">ko<b>te</b>v</div>
      <div class="meaning">I (m.) write</div>
    </div>

Alternate spellings appear either as further child divs of the same block or
in an "aux-forms" panel (often hidden inside a popover) attached to the cell.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from bs4.element import Comment, NavigableString, Tag

from pealim.common.utils import strip_niqqud
from pealim.input.slots import FORM_IDENTIFIERS
from pealim.schema.base import EMPTY_FORM, Form, Variant


TILDE = "~"

# Usage notes that precede a non-form block inside aux-forms panels
MODERN_USAGE_NOTE = "In modern language, the masculine form is generally used"
UNSTRESSED_ENDING_NOTE = "the ending is often unstressed"

# Child divs of a form block that hold no alternate spelling
NON_FORM_CLASSES = ("meaning", "aux-forms", "popover-host")


def split_spelling(menukad: Tag) -> Tuple[str, str]:
    """Return (pointed, unpointed) for a span.menukad element.

    "פָּתוּר ~ פתור" in the parent gives both spellings; otherwise the
    unpointed one is derived by stripping niqqud.
    """
    pointed = menukad.get_text().strip()
    parent = menukad.parent
    parent_text = parent.get_text().strip() if parent is not None else ""
    if TILDE in parent_text:
        head, _, tail = parent_text.partition(TILDE)
        return head.strip() or pointed, tail.strip()
    return pointed, strip_niqqud(pointed)


def _text_before(container: Tag, marker: Tag) -> str:
    """Concatenate the text of container that precedes marker in document order."""
    parts: List[str] = []
    for node in container.descendants:
        if node is marker:
            break
        if isinstance(node, NavigableString) and not isinstance(node, Comment):
            parts.append(str(node))
    return "".join(parts)


def read_transliteration(transcription: Optional[Tag]) -> Tuple[str, int]:
    """Return (transliteration, stress_offset) from a transcription element.

    The stressed vowel is wrapped in <b>; its offset is counted against the
    trimmed transliteration.
    """
    if transcription is None:
        return "", 0
    transliteration = transcription.get_text().strip()
    marker = transcription.find("b")
    if marker is None:
        return transliteration, 0
    return transliteration, len(_text_before(transcription, marker).lstrip())


def _spelling_fields(menukad: Optional[Tag], transcription: Optional[Tag]) -> Dict[str, Union[str, int]]:
    pointed, unpointed = split_spelling(menukad) if menukad is not None else ("", "")
    transliteration, stress_offset = read_transliteration(transcription)
    return {
        "pointed": pointed,
        "unpointed": unpointed,
        "transliteration": transliteration,
        "stress_offset": stress_offset,
    }


def extract_form(node: Optional[Tag]) -> Form:
    """Extract the primary form held by a form block (or a cell)."""
    if node is None:
        return EMPTY_FORM
    menukad = node.find("span", class_="menukad")
    transcription = node.find("div", class_="transcription")
    return Form(**_spelling_fields(menukad, transcription))


def _variant_of(form: Form) -> Variant:
    return Variant(
        pointed=form.pointed,
        unpointed=form.unpointed,
        transliteration=form.transliteration,
        stress_offset=form.stress_offset,
    )


def extract_contained_variants(node: Optional[Tag]) -> List[Variant]:
    """Extract alternates stored as extra child divs of the form block itself.

    The first child div is the primary form. "meaning" children and the
    aux-forms panel (bare or wrapped in a popover-host) are not forms.
    """
    variants: List[Variant] = []
    if node is None:
        return variants
    for index, child in enumerate(node.find_all("div", recursive=False)):
        if index == 0:
            continue
        classes = child.get("class") or []
        if any(name in classes for name in NON_FORM_CLASSES):
            continue
        if child.find("div", class_="aux-forms") is not None:
            continue
        menukad = child.find("span", class_="menukad")
        if menukad is None:
            continue
        transcription = child.find("div", class_="transcription")
        variants.append(Variant(**_spelling_fields(menukad, transcription)))
    return variants


def find_aux_panel(cell: Tag) -> Optional[Tag]:
    """Locate the aux-forms panel of a cell, whether shown or hidden.

    The panel sits in the cell or one level down in a popover-host wrapper.
    """
    popover = cell.find("div", class_="popover-host")
    if popover is not None:
        panel = popover.find("div", class_="aux-forms")
        if panel is not None:
            return panel
    return cell.find("div", class_="aux-forms")


def _is_form_identifier(value) -> bool:
    return value in FORM_IDENTIFIERS


def _panel_block_variant(block: Tag) -> Optional[Variant]:
    form_div = block.find("div", id=_is_form_identifier)
    if form_div is not None:
        return _variant_of(extract_form(form_div))
    menukad = block.find("span", class_="menukad")
    if menukad is None:
        return None
    transcription = block.find(["span", "div"], class_="transcription")
    return Variant(**_spelling_fields(menukad, transcription))


def _contains_note(text: str, notes: Sequence[str]) -> bool:
    return any(note in text for note in notes)


def _blocks_after_notes(panel: Tag, notes: Sequence[str]) -> Iterator[Tag]:
    """Yield panel child elements, dropping those that follow a usage note.

    Once a note is seen, elements are skipped until the next non-empty text
    node directly inside the panel.
    """
    suppressing = False
    for node in panel.children:
        if isinstance(node, Comment):
            continue
        if isinstance(node, NavigableString):
            text = str(node).strip()
            if _contains_note(text, notes):
                suppressing = True
            elif text:
                suppressing = False
            continue
        if not isinstance(node, Tag):
            continue
        if node.find("span", class_="menukad") is None and _contains_note(node.get_text(), notes):
            # Note wrapped in its own element, e.g. <p>In modern language...</p>
            suppressing = True
            continue
        if not suppressing:
            yield node


def extract_aux_variants(
    cell: Optional[Tag],
    filter_unstressed_ending: bool = False,
    filter_modern_usage: bool = False,
) -> List[Variant]:
    """Extract alternates from the cell's aux-forms panel.

    With a filter set, the matching usage note and the block right after it
    are left out.
    """
    variants: List[Variant] = []
    if cell is None:
        return variants
    panel = find_aux_panel(cell)
    if panel is None:
        return variants

    notes: List[str] = []
    if filter_modern_usage:
        notes.append(MODERN_USAGE_NOTE)
    if filter_unstressed_ending:
        notes.append(UNSTRESSED_ENDING_NOTE)

    if notes:
        blocks: Iterator[Tag] = _blocks_after_notes(panel, notes)
    else:
        blocks = (child for child in panel.children if isinstance(child, Tag))

    for block in blocks:
        variant = _panel_block_variant(block)
        if variant is not None:
            variants.append(variant)
    return variants


__all__ = [
    "TILDE",
    "MODERN_USAGE_NOTE",
    "UNSTRESSED_ENDING_NOTE",
    "split_spelling",
    "read_transliteration",
    "extract_form",
    "extract_contained_variants",
    "find_aux_panel",
    "extract_aux_variants",
]
