"""Noun record: gender-tagged singular/plural pair."""

from __future__ import annotations

from dataclasses import dataclass

from pealim.schema.base import EMPTY_FORM, Form, PartOfSpeechRecord


GENDER_MASCULINE = "masculine"
GENDER_FEMININE = "feminine"
GENDER_UNKNOWN = "unknown"


@dataclass(frozen=True)
class NounResult(PartOfSpeechRecord):
    pos: str = "noun"
    gender: str = GENDER_UNKNOWN
    pattern: str = ""
    singular: Form = EMPTY_FORM
    plural: Form = EMPTY_FORM


__all__ = [
    "GENDER_MASCULINE",
    "GENDER_FEMININE",
    "GENDER_UNKNOWN",
    "NounResult",
]
