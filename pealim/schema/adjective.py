"""Adjective record: masculine/feminine x singular/plural."""

from __future__ import annotations

from dataclasses import dataclass

from pealim.schema.base import EMPTY_FORM, Form, PartOfSpeechRecord


@dataclass(frozen=True)
class AdjectiveResult(PartOfSpeechRecord):
    pos: str = "adjective"
    pattern: str = ""
    m_singular: Form = EMPTY_FORM
    f_singular: Form = EMPTY_FORM
    m_plural: Form = EMPTY_FORM
    f_plural: Form = EMPTY_FORM


__all__ = ["AdjectiveResult"]
