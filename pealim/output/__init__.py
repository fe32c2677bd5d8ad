"""Output generation: HTML tables and the files they are saved to."""

from pealim.output.html import (
    format_transliteration,
    format_hebrew_cell,
    generate_tables,
    generate_html,
)
from pealim.output.files import (
    html_filename_for_url,
    save_html_file,
)

__all__ = [
    # html
    "format_transliteration",
    "format_hebrew_cell",
    "generate_tables",
    "generate_html",
    # files
    "html_filename_for_url",
    "save_html_file",
]
