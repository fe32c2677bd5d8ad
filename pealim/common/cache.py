"""On-disk cache of fetched pages, keyed by the URL's last path segment."""

from pathlib import Path
from typing import Optional

from pealim.common.utils import sanitize_filename, url_last_segment


def get_cache_path(cache_dir: Path, url: str) -> Optional[Path]:
    """Get the cache file path for a page URL, or None if the URL has no usable key."""
    key = url_last_segment(url)
    if not key:
        return None
    return cache_dir / f"{sanitize_filename(key)}.html"


def read_cached_page(cache_dir: Path, url: str, verbose: bool = False) -> Optional[str]:
    """Return cached HTML for a URL, or None if not cached."""
    cache_path = get_cache_path(cache_dir, url)
    if cache_path is None or not cache_path.exists():
        return None
    html = cache_path.read_text(encoding="utf-8", errors="ignore")
    if not html:
        return None
    if verbose:
        print(f"[cache] [hit] {cache_path.name}")
    return html


def write_cached_page(cache_dir: Path, url: str, html: str, verbose: bool = False) -> Optional[Path]:
    """Write fetched HTML to the cache. Returns the cache path, if any."""
    cache_path = get_cache_path(cache_dir, url)
    if cache_path is None:
        return None
    cache_dir.mkdir(parents=True, exist_ok=True)
    cache_path.write_text(html, encoding="utf-8")
    if verbose:
        print(f"[cache] [save] {cache_path.name} ({len(html):,} bytes)")
    return cache_path


__all__ = [
    "get_cache_path",
    "read_cached_page",
    "write_cached_page",
]
