import threading
from collections.abc import Callable

from domaincheck.logging.logger import Log
from domaincheck.search.models import SearchResult
from domaincheck.search.orchestrator import DomainSearch
from domaincheck.transport.cancellation import CancellationToken
from domaincheck.transport.exceptions import RequestCancelledError


class SearchCall:
    """One cancellable background search.

    Exactly one of *on_success* / *on_failure* runs, unless the call is
    cancelled first. Once ``cancel()`` returns no callback will start; a
    callback that had already started runs to completion without holding
    up ``cancel()``.
    """

    def __init__(
        self,
        search: DomainSearch,
        query: str,
        on_success: Callable[[SearchResult], None],
        on_failure: Callable[[Exception], None],
    ) -> None:
        self._search = search
        self._query = query
        self._on_success = on_success
        self._on_failure = on_failure
        self._token = CancellationToken()
        self._deliver_lock = threading.Lock()
        self._delivered = False
        self._thread: threading.Thread | None = None

    @property
    def is_cancelled(self) -> bool:
        return self._token.is_cancelled

    def start(self) -> "SearchCall":
        if self._thread is not None:
            raise RuntimeError("SearchCall already started")
        self._thread = threading.Thread(target=self._run, name="domain-search", daemon=True)
        self._thread.start()
        return self

    def cancel(self) -> None:
        """Abort the pending request and discard its eventual result."""
        with self._deliver_lock:
            self._token.cancel()
        Log.debug(f"Search for '{self._query}' cancelled")

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        try:
            result = self._search.search(self._query, self._token)
        except RequestCancelledError:
            return
        except Exception as exc:
            self._deliver(self._on_failure, exc)
            return
        self._deliver(self._on_success, result)

    def _deliver(self, callback: Callable[..., None], value: object) -> None:
        with self._deliver_lock:
            if self._token.is_cancelled or self._delivered:
                return
            self._delivered = True
        callback(value)
