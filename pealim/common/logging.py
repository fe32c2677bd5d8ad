"""Logging utilities.

Messages follow the "[tag] [subtag] text" convention so verbose runs stay
greppable, e.g. "[fetch] [retry] status 503, retrying in 2s".
"""

import sys


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_verbose(enabled: bool, tag: str, message: str) -> None:
    """Print a tagged progress message if verbose output is enabled."""
    if enabled:
        print(f"[{tag}] {message}")


def log_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"[error] {message}", file=sys.stderr)
