"""Transliteration normalization.

Pealim romanizes ך/כ/ח as "ch" and צ/ץ as "tz". Two optional passes rewrite
these as "kh" and "c". "ch" -> "kh" keeps the length, so the stress offset
stays put; "tz" -> "c" shortens the text by one per occurrence, so the offset
is pulled back by one for every "tz" that starts before it.
"""

from dataclasses import replace
from typing import Tuple, TypeVar

from pealim.schema.base import Form, PartOfSpeechRecord, Variant


CH_SOURCE = "ch"
CH_TARGET = "kh"
TZ_SOURCE = "tz"
TZ_TARGET = "c"

V = TypeVar("V", bound=Variant)
R = TypeVar("R", bound=PartOfSpeechRecord)


def replace_ch_with_kh(text: str) -> str:
    return text.replace(CH_SOURCE, CH_TARGET)


def shifted_stress_offset(text: str, stress_offset: int, source: str, target: str) -> int:
    """Return where stress_offset lands after replacing source with target in text.

    Occurrences are scanned one character at a time so overlapping matches
    count too.
    """
    shrink = len(source) - len(target)
    shifted = stress_offset
    index = text.find(source)
    while index != -1:
        if index < stress_offset:
            shifted -= shrink
        index = text.find(source, index + 1)
    return max(shifted, 0)


def replace_tz_with_c(text: str, stress_offset: int) -> Tuple[str, int]:
    shifted = shifted_stress_offset(text, stress_offset, TZ_SOURCE, TZ_TARGET)
    return text.replace(TZ_SOURCE, TZ_TARGET), shifted


def normalize(form: V, use_ch_to_kh: bool = True, use_tz_to_c: bool = True) -> V:
    """Return a copy of form (and of its variations) with the enabled substitutions applied."""
    transliteration = form.transliteration
    stress_offset = form.stress_offset
    if use_ch_to_kh:
        transliteration = replace_ch_with_kh(transliteration)
    if use_tz_to_c:
        transliteration, stress_offset = replace_tz_with_c(transliteration, stress_offset)
    updated = replace(form, transliteration=transliteration, stress_offset=stress_offset)
    if isinstance(updated, Form) and updated.variations:
        updated = updated.with_variations(
            normalize(v, use_ch_to_kh, use_tz_to_c) for v in updated.variations
        )
    return updated


def normalize_result(result: R, use_ch_to_kh: bool = True, use_tz_to_c: bool = True) -> R:
    """Normalize every form of a part-of-speech record."""
    if not (use_ch_to_kh or use_tz_to_c):
        return result
    return result.map_forms(lambda form: normalize(form, use_ch_to_kh, use_tz_to_c))


__all__ = [
    "CH_SOURCE",
    "CH_TARGET",
    "TZ_SOURCE",
    "TZ_TARGET",
    "replace_ch_with_kh",
    "shifted_stress_offset",
    "replace_tz_with_c",
    "normalize",
    "normalize_result",
]
