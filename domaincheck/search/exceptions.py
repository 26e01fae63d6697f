class SearchError(Exception):
    """Base exception for domain search errors."""


class UpstreamFailureError(SearchError):
    """Raised when the API answered, but with a failure envelope."""

    def __init__(self, message: str, code: int, status: str) -> None:
        super().__init__(message)
        self.code = code
        self.status = status
