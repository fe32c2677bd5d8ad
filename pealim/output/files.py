"""Writing rendered tables to disk."""

import time
from pathlib import Path

from pealim.common.utils import ensure_dir, sanitize_filename, url_last_segment


def html_filename_for_url(url: str) -> str:
    """File name for a page URL, e.g. ".../dict/1-lichtov/" gives "1-lichtov.html"."""
    segment = url_last_segment(url)
    if segment:
        return f"{sanitize_filename(segment)}.html"
    return f"pealim-{int(time.time() * 1000)}.html"


def save_html_file(html: str, url: str, output_dir: Path, verbose: bool = False) -> Path:
    """Write html into output_dir under a name derived from url, replacing any existing file."""
    ensure_dir(output_dir)
    file_path = output_dir / html_filename_for_url(url)
    if file_path.exists():
        file_path.unlink()
    file_path.write_text(html, encoding="utf-8")
    if verbose:
        print(f"[file] Saved HTML: {file_path} ({len(html):,} bytes)")
    return file_path
