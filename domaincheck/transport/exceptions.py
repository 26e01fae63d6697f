class TransportError(Exception):
    """Raised when the upstream API cannot be reached or answers with an error."""


class TransportNetworkError(TransportError):
    """Raised on connection failures, timeouts and other network issues."""


class TransportStatusError(TransportError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class RequestCancelledError(Exception):
    """Raised when an in-flight request is aborted through its cancellation token."""
