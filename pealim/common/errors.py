"""Exceptions raised by the scraper."""


class PartOfSpeechError(ValueError):
    """The page is not a noun, adjective or verb page (or an unsupported one was requested)."""

    def __init__(self, message: str = "", requested: str = ""):
        self.requested = requested
        super().__init__(
            message
            or "Could not determine part of speech. The page does not appear to be a noun, adjective, or verb."
        )


class PageFetchError(RuntimeError):
    """Fetching a page failed. ``status`` is the HTTP status, or 0 for network errors."""

    def __init__(self, url: str, status: int, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"status {status}" if status else "network error"
        if reason:
            detail += f": {reason}"
        super().__init__(f"Failed to fetch {url} ({detail})")
