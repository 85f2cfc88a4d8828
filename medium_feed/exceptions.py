class FeedFetchError(Exception):
    """Raised when a proxied feed URL cannot be reached or answers with a non-2xx status."""


class FeedPayloadError(Exception):
    """Raised when the proxy answers but the payload is not usable (not JSON, status != ok, no items)."""
