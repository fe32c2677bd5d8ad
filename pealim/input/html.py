"""HTML fetching for Pealim pages."""

from typing import Tuple

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from pealim.common.errors import PageFetchError


# Module-level session for connection reuse
_session = requests.Session()
_session.headers.update({
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
})


class _TransientStatus(Exception):
    """A response worth retrying (5xx or 429)."""

    def __init__(self, response: requests.Response):
        self.response = response
        super().__init__(f"status {response.status_code}")


def _is_transient(status: int) -> bool:
    return status == 429 or status >= 500


def _get_once(url: str, timeout: float) -> requests.Response:
    resp = _session.get(url, timeout=timeout)
    if _is_transient(resp.status_code):
        raise _TransientStatus(resp)
    return resp


def _log_retry(retry_state) -> None:
    exc = retry_state.outcome.exception()
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    print(f"[fetch] [retry] {exc}, retrying in {delay:.1f}s (attempt {retry_state.attempt_number})")


def _get_with_retry(url: str, timeout: float, max_retries: int, base_delay: float, verbose: bool) -> requests.Response:
    """GET with exponential backoff on connection errors and transient statuses.

    404 and other client errors are returned immediately.
    """
    retryer = Retrying(
        reraise=True,
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=8),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout, _TransientStatus)),
        before_sleep=_log_retry if verbose else None,
    )
    return retryer(_get_once, url, timeout)


def fetch_page_html(
    url: str,
    timeout: float = 20.0,
    max_retries: int = 3,
    base_delay: float = 1.0,
    verbose: bool = False,
) -> str:
    """Fetch a page and return its HTML.

    Raises PageFetchError with the final HTTP status (0 for network errors).
    """
    try:
        resp = _get_with_retry(url, timeout, max_retries, base_delay, verbose)
    except _TransientStatus as e:
        raise PageFetchError(url, e.response.status_code, e.response.reason or "") from e
    except requests.RequestException as e:
        raise PageFetchError(url, 0, str(e)) from e

    if verbose:
        print(f"[fetch] [info] GET {url} -> {resp.status_code}")
    if resp.status_code != 200:
        raise PageFetchError(url, resp.status_code, resp.reason or "")
    return resp.text if resp.text is not None else ""


def fetch_page_html_status(url: str, timeout: float = 20.0, max_retries: int = 3) -> Tuple[str, int]:
    """Fetch a page and return (html_content, status_code) without raising."""
    try:
        return fetch_page_html(url, timeout=timeout, max_retries=max_retries), 200
    except PageFetchError as e:
        return "", e.status


__all__ = [
    "fetch_page_html",
    "fetch_page_html_status",
]
