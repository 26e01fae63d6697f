from abc import ABC, abstractmethod

from domaincheck.decoding.models import RawResponse
from domaincheck.transport.cancellation import CancellationToken


class BaseTransport(ABC):
    """Contract for clients that deliver raw API responses."""

    @abstractmethod
    def post_form(
        self,
        path: str,
        field: str,
        value: str,
        token: CancellationToken | None = None,
    ) -> RawResponse:
        """POST a single form field to *path* and return the buffered body.

        Raises:
            TransportError: on network failures or non-2xx responses.
            RequestCancelledError: if *token* is cancelled before completion.
        """

    def close(self) -> None:
        """Release underlying resources."""
