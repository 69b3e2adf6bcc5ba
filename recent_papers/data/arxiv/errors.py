class ArxivError(Exception):
    """Base exception for arXiv feed operations."""


class FetchError(ArxivError):
    """Failed to fetch the arXiv feed."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FeedParseError(ArxivError):
    """Failed to parse the arXiv feed markup."""
