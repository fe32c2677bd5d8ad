"""Page processing: HTML -> normalized part-of-speech record."""

from typing import Optional

from bs4 import BeautifulSoup

from pealim.common.logging import log_debug
from pealim.input.categories import map_document
from pealim.input.transliteration import normalize_result
from pealim.schema import PartOfSpeechRecord


def parse_page(
    html: str,
    url: str,
    part_of_speech: Optional[str] = None,
    use_ch_to_kh: bool = True,
    use_tz_to_c: bool = True,
    debug: bool = False,
) -> PartOfSpeechRecord:
    """Parse a Pealim page into a noun, adjective or verb record.

    Args:
        html: Raw page markup
        url: Page URL, kept on the record for linking
        part_of_speech: "noun", "adjective" or "verb"; detected from the page when None
        use_ch_to_kh: Rewrite "ch" as "kh" in transliterations
        use_tz_to_c: Rewrite "tz" as "c" in transliterations

    Raises PartOfSpeechError if the part of speech can't be determined.
    The returned record's ``pos`` is the part of speech that was used.
    """
    soup = BeautifulSoup(html, "html.parser")
    result = map_document(soup, url, part_of_speech)
    log_debug(debug, f"mapped {url} as {result.pos}; {sum(1 for _ in result.forms())} form fields")
    return normalize_result(result, use_ch_to_kh=use_ch_to_kh, use_tz_to_c=use_tz_to_c)
