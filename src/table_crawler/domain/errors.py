class CrawlerError(RuntimeError):
    """Base exception for crawler errors."""


class RequestFailed(CrawlerError):
    """Raised when the endpoint answers with a non-success status."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Request failed with status {status_code}")
