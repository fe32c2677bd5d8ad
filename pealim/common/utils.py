"""Common utility functions shared across the library."""

import os
import re
from pathlib import Path
from typing import Iterable, Optional, Tuple


# .env files read on import; earlier files win, the real environment wins over both
ENV_FILES = (
    Path(__file__).resolve().parents[2] / ".env",
    Path(__file__).resolve().parents[1] / ".env",
)

# Hebrew points and cantillation marks (niqqud, te'amim, dagesh, shin/sin dots)
NIQQUD_RE = re.compile(r"[\u0591-\u05C7]")


def parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse `KEY=value` (optionally `export KEY="value"`) into (key, value).

    Blank lines, comments and lines without `=` give None.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("\"'")


def load_env_files(paths: Iterable[Path] = ENV_FILES) -> None:
    """Copy variables from .env files into os.environ without overriding existing ones."""
    for path in paths:
        if not path.is_file():
            continue
        for raw in path.read_text(encoding="utf-8", errors="ignore").splitlines():
            parsed = parse_env_line(raw)
            if parsed is not None:
                os.environ.setdefault(*parsed)


load_env_files()


def strip_niqqud(text: str) -> str:
    """Remove vowel points and cantillation marks from Hebrew text."""
    return NIQQUD_RE.sub("", text)


def sanitize_filename(name: str) -> str:
    """Sanitize a string for use as a filename.

    Replaces invalid characters with underscores.
    """
    return re.sub(r'[/\\:*?"<>|]', '_', name)


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)


URL_LAST_PATH_SEGMENT_RE = re.compile(r"/([^/]+)/?$")


def url_last_segment(url: str) -> Optional[str]:
    """Last path segment of a URL ("https://www.pealim.com/dict/1-lichtov/" -> "1-lichtov")."""
    match = URL_LAST_PATH_SEGMENT_RE.search(url.split("?", 1)[0].split("#", 1)[0])
    return match.group(1) if match else None
