"""
Fetch error taxonomy.

TransientNetworkError: retryable (rate limit, connection failure, 5xx).
NotFoundError: the provider has nothing for the query. Callers treat it
as an empty result.
UnrecoverableFetchError: retries exhausted. Propagated to the caller.
MalformedConfigError: booster data present but not in the expected shape.
The resolver degrades it to "no data" instead of raising.
"""


class FetchError(Exception):
    """Base exception for upstream fetch failures."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class TransientNetworkError(FetchError):
    """Raised for a failure that may succeed on retry."""


class NotFoundError(FetchError):
    """Raised when the provider reports no resource for the request (HTTP 404)."""

    def __init__(self, url: str) -> None:
        super().__init__(url, f"Not found: {url}", status_code=404)


class UnrecoverableFetchError(FetchError):
    """Raised when a request still fails after all retries."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        super().__init__(url, f"Failed to fetch {url}: {reason}", status_code=status_code)


class MalformedConfigError(ValueError):
    """Raised when a booster data document is missing expected fields."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Malformed booster data in {source}: {reason}")
