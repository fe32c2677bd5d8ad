# Test fixtures
from .pages import (
    NOUN_URL,
    NOUN_PAGE,
    ADJECTIVE_URL,
    ADJECTIVE_PAGE,
    VERB_URL,
    VERB_PAGE,
    UNKNOWN_URL,
    UNKNOWN_PAGE,
)

__all__ = [
    "NOUN_URL",
    "NOUN_PAGE",
    "ADJECTIVE_URL",
    "ADJECTIVE_PAGE",
    "VERB_URL",
    "VERB_PAGE",
    "UNKNOWN_URL",
    "UNKNOWN_PAGE",
]
