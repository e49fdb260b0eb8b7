"""Error classes for the feed and catalog layer."""


class FeedError(Exception):
    """Base class for all feed errors."""
    pass


class FeedFetchError(FeedError):
    """Error raised when a feed cannot be downloaded or parsed."""
    pass


class CatalogLookupError(FeedError, LookupError):
    """Error raised when a cached article, feature or use case cannot be found.

    Attributes:
        status: HTTP-style status for callers that serve the catalog over HTTP
            (503 when the cache is empty, 404 for a missing index).
    """

    def __init__(self, message: str, status: int = 404):
        super().__init__(message)
        self.status = status
