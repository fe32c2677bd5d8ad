"""Record definitions for parsed inflection tables."""

from pealim.schema.base import (
    Variant,
    Form,
    EMPTY_FORM,
    PartOfSpeechRecord,
)
from pealim.schema.noun import (
    GENDER_MASCULINE,
    GENDER_FEMININE,
    GENDER_UNKNOWN,
    NounResult,
)
from pealim.schema.adjective import AdjectiveResult
from pealim.schema.verb import VerbResult

POS_NOUN = "noun"
POS_ADJECTIVE = "adjective"
POS_VERB = "verb"
PARTS_OF_SPEECH = (POS_NOUN, POS_ADJECTIVE, POS_VERB)

__all__ = [
    # Base
    "Variant",
    "Form",
    "EMPTY_FORM",
    "PartOfSpeechRecord",
    # Parts of speech
    "POS_NOUN",
    "POS_ADJECTIVE",
    "POS_VERB",
    "PARTS_OF_SPEECH",
    # Noun
    "GENDER_MASCULINE",
    "GENDER_FEMININE",
    "GENDER_UNKNOWN",
    "NounResult",
    # Adjective
    "AdjectiveResult",
    # Verb
    "VerbResult",
]
