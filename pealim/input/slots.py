"""Slot identifiers used by Pealim conjugation tables.

Every grammatical cell of the table carries a fixed element id (e.g. "AP-ms"
for the masculine singular present). SLOT_LOCATORS maps each slot to the
labeled table row that gates it and to the boilerplate-note filters its
auxiliary panel needs.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional


class Slot(str, Enum):
    # Noun
    NOUN_SINGULAR = "s"
    NOUN_PLURAL = "p"
    # Adjective
    ADJ_M_SINGULAR = "ms-a"
    ADJ_F_SINGULAR = "fs-a"
    ADJ_M_PLURAL = "mp-a"
    ADJ_F_PLURAL = "fp-a"
    # Verb
    INFINITIVE = "INF-L"
    PRESENT_MS = "AP-ms"
    PRESENT_FS = "AP-fs"
    PRESENT_MP = "AP-mp"
    PRESENT_FP = "AP-fp"
    IMPERATIVE_2MS = "IMP-2ms"
    IMPERATIVE_2FS = "IMP-2fs"
    IMPERATIVE_2MP = "IMP-2mp"
    IMPERATIVE_2FP = "IMP-2fp"
    FUTURE_1S = "IMPF-1s"
    FUTURE_1P = "IMPF-1p"
    FUTURE_2MS = "IMPF-2ms"
    FUTURE_2FS = "IMPF-2fs"
    FUTURE_2MP = "IMPF-2mp"
    FUTURE_2FP = "IMPF-2fp"
    FUTURE_3MS = "IMPF-3ms"
    FUTURE_3FS = "IMPF-3fs"
    FUTURE_3MP = "IMPF-3mp"
    FUTURE_3FP = "IMPF-3fp"
    PAST_1S = "PERF-1s"
    PAST_1P = "PERF-1p"
    PAST_2MS = "PERF-2ms"
    PAST_2FS = "PERF-2fs"
    PAST_2MP = "PERF-2mp"
    PAST_2FP = "PERF-2fp"
    PAST_3MS = "PERF-3ms"
    PAST_3FS = "PERF-3fs"
    PAST_3P = "PERF-3p"


ROW_ABSOLUTE_STATE = "Absolute state"
ROW_PRESENT = "Present tense"
ROW_IMPERATIVE = "Imperative"
ROW_FUTURE = "Future tense"
ROW_PAST = "Past tense"


class SlotLocator(NamedTuple):
    row_label: Optional[str] = None
    filter_unstressed_ending: bool = False
    filter_modern_usage: bool = False


def _row(label: str, unstressed: bool = False, modern: bool = False) -> SlotLocator:
    return SlotLocator(row_label=label, filter_unstressed_ending=unstressed, filter_modern_usage=modern)


SLOT_LOCATORS: Dict[Slot, SlotLocator] = {
    Slot.NOUN_SINGULAR: _row(ROW_ABSOLUTE_STATE),
    Slot.NOUN_PLURAL: _row(ROW_ABSOLUTE_STATE),

    Slot.ADJ_M_SINGULAR: SlotLocator(),
    Slot.ADJ_F_SINGULAR: SlotLocator(),
    Slot.ADJ_M_PLURAL: SlotLocator(),
    Slot.ADJ_F_PLURAL: SlotLocator(),

    Slot.INFINITIVE: SlotLocator(),

    Slot.PRESENT_MS: _row(ROW_PRESENT),
    Slot.PRESENT_FS: _row(ROW_PRESENT),
    Slot.PRESENT_MP: _row(ROW_PRESENT),
    Slot.PRESENT_FP: _row(ROW_PRESENT),

    Slot.IMPERATIVE_2MS: _row(ROW_IMPERATIVE),
    Slot.IMPERATIVE_2FS: _row(ROW_IMPERATIVE),
    Slot.IMPERATIVE_2MP: _row(ROW_IMPERATIVE),
    Slot.IMPERATIVE_2FP: _row(ROW_IMPERATIVE, modern=True),

    Slot.FUTURE_1S: _row(ROW_FUTURE),
    Slot.FUTURE_1P: _row(ROW_FUTURE),
    Slot.FUTURE_2MS: _row(ROW_FUTURE),
    Slot.FUTURE_2FS: _row(ROW_FUTURE),
    Slot.FUTURE_2MP: _row(ROW_FUTURE),
    Slot.FUTURE_2FP: _row(ROW_FUTURE, modern=True),
    Slot.FUTURE_3MS: _row(ROW_FUTURE),
    Slot.FUTURE_3FS: _row(ROW_FUTURE),
    Slot.FUTURE_3MP: _row(ROW_FUTURE),
    Slot.FUTURE_3FP: _row(ROW_FUTURE, modern=True),

    Slot.PAST_1S: _row(ROW_PAST),
    Slot.PAST_1P: _row(ROW_PAST),
    Slot.PAST_2MS: _row(ROW_PAST),
    Slot.PAST_2FS: _row(ROW_PAST),
    Slot.PAST_2MP: _row(ROW_PAST, unstressed=True),
    Slot.PAST_2FP: _row(ROW_PAST, unstressed=True),
    Slot.PAST_3MS: _row(ROW_PAST),
    Slot.PAST_3FS: _row(ROW_PAST),
    Slot.PAST_3P: _row(ROW_PAST),
}

# Ids that mark a form block inside an auxiliary-forms panel
FORM_IDENTIFIERS = frozenset(slot.value for slot in Slot)


__all__ = [
    "Slot",
    "SlotLocator",
    "SLOT_LOCATORS",
    "FORM_IDENTIFIERS",
    "ROW_ABSOLUTE_STATE",
    "ROW_PRESENT",
    "ROW_IMPERATIVE",
    "ROW_FUTURE",
    "ROW_PAST",
]
