"""Common utilities shared across input and output processing."""

from pealim.common.utils import (
    NIQQUD_RE,
    strip_niqqud,
    sanitize_filename,
    ensure_dir,
    url_last_segment,
    parse_env_line,
    load_env_files,
)
from pealim.common.logging import (
    log_debug,
    log_verbose,
    log_error,
)
from pealim.common.errors import (
    PartOfSpeechError,
    PageFetchError,
)
from pealim.common.cache import (
    get_cache_path,
    read_cached_page,
    write_cached_page,
)
from pealim.common.config import (
    CONFIG_FILENAME,
    ScraperConfig,
    load_config,
    write_config,
    get_output_dir,
    get_cache_dir,
)

__all__ = [
    # utils
    "NIQQUD_RE",
    "strip_niqqud",
    "sanitize_filename",
    "ensure_dir",
    "url_last_segment",
    "parse_env_line",
    "load_env_files",
    # logging
    "log_debug",
    "log_verbose",
    "log_error",
    # errors
    "PartOfSpeechError",
    "PageFetchError",
    # cache
    "get_cache_path",
    "read_cached_page",
    "write_cached_page",
    # config
    "CONFIG_FILENAME",
    "ScraperConfig",
    "load_config",
    "write_config",
    "get_output_dir",
    "get_cache_dir",
]
