"""Scraper configuration.

A config file (default: pealim.config.json) may specify:
- output_dir: where rendered HTML files are written (default: ~/Desktop/Pealim HTML)
- use_ch_to_kh: transliterate ך, כ and ח as "kh" instead of "ch" (default: true)
- use_tz_to_c: transliterate צ and ץ as "c" instead of "tz" (default: true)
- timeout: HTTP timeout in seconds (default: 20)
- max_retries: attempts per page on transient errors (default: 3)
- cache_dir: if set, fetched pages are cached there
- delay: seconds to sleep between pages (default: 0)

PEALIM_OUTPUT_DIR and PEALIM_CACHE_DIR in the environment (or .env) take
precedence over the file.
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional


CONFIG_FILENAME = "pealim.config.json"
DEFAULT_OUTPUT_DIR = str(Path("~") / "Desktop" / "Pealim HTML")


@dataclass
class ScraperConfig:
    """Configuration for a scraping run."""
    output_dir: str = DEFAULT_OUTPUT_DIR
    use_ch_to_kh: bool = True
    use_tz_to_c: bool = True
    timeout: float = 20.0
    max_retries: int = 3
    cache_dir: Optional[str] = None
    delay: float = 0.0

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")
        if self.delay < 0:
            raise ValueError(f"delay must not be negative, got {self.delay}")


def load_config(path: Optional[Path] = None) -> ScraperConfig:
    """Load configuration from a JSON file, then apply environment overrides.

    A missing file yields the defaults.
    """
    config_path = path or Path.cwd() / CONFIG_FILENAME
    data = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a JSON object")

    config = ScraperConfig(
        output_dir=data.get("output_dir", DEFAULT_OUTPUT_DIR),
        use_ch_to_kh=bool(data.get("use_ch_to_kh", True)),
        use_tz_to_c=bool(data.get("use_tz_to_c", True)),
        timeout=float(data.get("timeout", 20.0)),
        max_retries=int(data.get("max_retries", 3)),
        cache_dir=data.get("cache_dir"),
        delay=float(data.get("delay", 0.0)),
    )

    env_output = os.environ.get("PEALIM_OUTPUT_DIR")
    if env_output:
        config.output_dir = env_output
    env_cache = os.environ.get("PEALIM_CACHE_DIR")
    if env_cache:
        config.cache_dir = env_cache
    return config


def write_config(path: Path, config: ScraperConfig) -> Path:
    """Write a configuration file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2, ensure_ascii=False)
    return path


def get_output_dir(config: ScraperConfig) -> Path:
    """Get the resolved output directory path from config."""
    return Path(config.output_dir).expanduser().resolve()


def get_cache_dir(config: ScraperConfig) -> Optional[Path]:
    """Get the resolved cache directory, or None when caching is off."""
    if not config.cache_dir:
        return None
    return Path(config.cache_dir).expanduser().resolve()
