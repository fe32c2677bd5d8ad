"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pealim.input import parse_page
from tests.fixtures import (
    ADJECTIVE_PAGE,
    ADJECTIVE_URL,
    NOUN_PAGE,
    NOUN_URL,
    VERB_PAGE,
    VERB_URL,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "network: mark as requiring network access")


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env from leaking into config tests."""
    monkeypatch.delenv("PEALIM_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("PEALIM_CACHE_DIR", raising=False)


# ============================================================================
# Markup Fixtures
# ============================================================================


@pytest.fixture
def make_soup():
    """Parse an HTML snippet the same way pages are parsed."""
    def _make(markup):
        return BeautifulSoup(markup, "html.parser")
    return _make


@pytest.fixture
def noun_soup():
    return BeautifulSoup(NOUN_PAGE, "html.parser")


@pytest.fixture
def verb_soup():
    return BeautifulSoup(VERB_PAGE, "html.parser")


# ============================================================================
# Parsed Records
# ============================================================================


@pytest.fixture
def noun_result():
    return parse_page(NOUN_PAGE, NOUN_URL)


@pytest.fixture
def adjective_result():
    return parse_page(ADJECTIVE_PAGE, ADJECTIVE_URL)


@pytest.fixture
def verb_result():
    return parse_page(VERB_PAGE, VERB_URL)


@pytest.fixture
def raw_verb_result():
    """Verb record without transliteration rewriting."""
    return parse_page(VERB_PAGE, VERB_URL, use_ch_to_kh=False, use_tz_to_c=False)
