"""Input processing: fetching Pealim pages and parsing them into records."""

from pealim.input.slots import (
    Slot,
    SlotLocator,
    SLOT_LOCATORS,
    FORM_IDENTIFIERS,
)
from pealim.input.extract import (
    extract_form,
    extract_contained_variants,
    extract_aux_variants,
)
from pealim.input.categories import (
    read_page_header,
    find_row_by_label,
    extract_slot,
    map_document,
)
from pealim.input.transliteration import (
    normalize,
    normalize_result,
)
from pealim.input.html import (
    fetch_page_html,
    fetch_page_html_status,
)
from pealim.input.processing import parse_page

__all__ = [
    # slots
    "Slot",
    "SlotLocator",
    "SLOT_LOCATORS",
    "FORM_IDENTIFIERS",
    # extract
    "extract_form",
    "extract_contained_variants",
    "extract_aux_variants",
    # categories
    "read_page_header",
    "find_row_by_label",
    "extract_slot",
    "map_document",
    # transliteration
    "normalize",
    "normalize_result",
    # html
    "fetch_page_html",
    "fetch_page_html_status",
    # processing
    "parse_page",
]
