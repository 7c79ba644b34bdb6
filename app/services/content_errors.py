"""
Errors raised by the Perplexity content cache. Routers translate them to HTTP:
InvalidKeyError -> 400, UpstreamUnavailableError / ContentParseError -> 500.
"""


class ContentCacheError(Exception):
    """Base error; `code` is the machine-readable value returned to HTTP callers."""

    code = "content_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidKeyError(ContentCacheError):
    """Empty location or topic. Raised before any store or network access."""

    code = "invalid_key"


class UpstreamUnavailableError(ContentCacheError):
    """Perplexity call failed: network error, timeout, non-2xx status or empty answer."""

    code = "upstream_unavailable"


class ContentParseError(ContentCacheError):
    """Perplexity answered, but not with the JSON shape we asked for."""

    code = "content_parse_error"

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text
