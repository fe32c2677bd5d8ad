"""Verb record: infinitive plus present, imperative, past and future paradigms.

Slots the page gives once for both genders (1st person, past 3rd plural) are
stored in both the masculine and feminine fields so every tense exposes a
complete m/f x sg/pl grid.
"""

from __future__ import annotations

from dataclasses import dataclass

from pealim.schema.base import EMPTY_FORM, Form, PartOfSpeechRecord


@dataclass(frozen=True)
class VerbResult(PartOfSpeechRecord):
    pos: str = "verb"
    binyan: str = ""

    infinitive: Form = EMPTY_FORM

    # Present tense
    m_singular: Form = EMPTY_FORM
    f_singular: Form = EMPTY_FORM
    m_plural: Form = EMPTY_FORM
    f_plural: Form = EMPTY_FORM

    # Imperative
    imperative_m_singular: Form = EMPTY_FORM
    imperative_f_singular: Form = EMPTY_FORM
    imperative_m_plural: Form = EMPTY_FORM
    imperative_f_plural: Form = EMPTY_FORM
    imperative_meaning: str = ""

    # Past tense
    past_1st_m_singular: Form = EMPTY_FORM
    past_1st_f_singular: Form = EMPTY_FORM
    past_1st_m_plural: Form = EMPTY_FORM
    past_1st_f_plural: Form = EMPTY_FORM
    past_2nd_m_singular: Form = EMPTY_FORM
    past_2nd_f_singular: Form = EMPTY_FORM
    past_2nd_m_plural: Form = EMPTY_FORM
    past_2nd_f_plural: Form = EMPTY_FORM
    past_3rd_m_singular: Form = EMPTY_FORM
    past_3rd_f_singular: Form = EMPTY_FORM
    past_3rd_m_plural: Form = EMPTY_FORM
    past_3rd_f_plural: Form = EMPTY_FORM

    # Future tense
    future_1st_m_singular: Form = EMPTY_FORM
    future_1st_f_singular: Form = EMPTY_FORM
    future_1st_m_plural: Form = EMPTY_FORM
    future_1st_f_plural: Form = EMPTY_FORM
    future_2nd_m_singular: Form = EMPTY_FORM
    future_2nd_f_singular: Form = EMPTY_FORM
    future_2nd_m_plural: Form = EMPTY_FORM
    future_2nd_f_plural: Form = EMPTY_FORM
    future_3rd_m_singular: Form = EMPTY_FORM
    future_3rd_f_singular: Form = EMPTY_FORM
    future_3rd_m_plural: Form = EMPTY_FORM
    future_3rd_f_plural: Form = EMPTY_FORM
    future_meaning: str = ""


__all__ = ["VerbResult"]
