"""Base value types shared by all part-of-speech records."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Iterator, Tuple


@dataclass(frozen=True)
class Variant:
    """One rendering of a word form.

    stress_offset indexes the stressed vowel in transliteration; it is 0
    (and meaningless) when the page marked no stress.
    """
    pointed: str = ""
    unpointed: str = ""
    transliteration: str = ""
    stress_offset: int = 0

    def is_empty(self) -> bool:
        return not (self.pointed or self.unpointed or self.transliteration)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pointed": self.pointed,
            "unpointed": self.unpointed,
            "transliteration": self.transliteration,
            "stress_offset": self.stress_offset,
        }


@dataclass(frozen=True)
class Form(Variant):
    """The primary rendering of a slot plus its alternate renderings."""
    variations: Tuple[Variant, ...] = ()

    def with_variations(self, variations) -> "Form":
        return replace(self, variations=tuple(variations))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.variations:
            data["variations"] = [v.to_dict() for v in self.variations]
        return data


EMPTY_FORM = Form()


@dataclass(frozen=True)
class PartOfSpeechRecord:
    """Fields common to noun, adjective and verb records."""
    pos: str = ""
    meaning: str = ""
    url: str = ""
    root: str = ""

    def forms(self) -> Iterator[Tuple[str, Form]]:
        """Yield (field_name, Form) for every form-valued field, in declaration order."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Form):
                yield f.name, value

    def map_forms(self, fn: Callable[[Form], Form]) -> "PartOfSpeechRecord":
        """Return a copy with fn applied to every form field."""
        return replace(self, **{name: fn(form) for name, form in self.forms()})

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.to_dict() if isinstance(value, Form) else value
        return data
