import threading

import httpx

from domaincheck.decoding.models import RawResponse
from domaincheck.logging.logger import Log
from domaincheck.transport.base import BaseTransport
from domaincheck.transport.cancellation import CancellationToken
from domaincheck.transport.exceptions import (
    RequestCancelledError,
    TransportNetworkError,
    TransportStatusError,
)


class HttpxTransport(BaseTransport):
    """Form-POST transport built on an explicitly configured httpx client."""

    def __init__(
        self,
        *,
        base_url: str,
        connect_timeout_seconds: float,
        read_timeout_seconds: float,
        write_timeout_seconds: float,
        connection_retries: int = 1,
        user_agent: str = "domaincheck",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(
                connect=connect_timeout_seconds,
                read=read_timeout_seconds,
                write=write_timeout_seconds,
                pool=connect_timeout_seconds,
            ),
            headers={"User-Agent": user_agent},
            transport=transport or httpx.HTTPTransport(retries=connection_retries),
            follow_redirects=True,
        )

    def post_form(
        self,
        path: str,
        field: str,
        value: str,
        token: CancellationToken | None = None,
    ) -> RawResponse:
        if token is not None:
            token.raise_if_cancelled()
        Log.debug(f"Making request to: {path}")
        try:
            return self._send(path, field, value, token)
        except (httpx.HTTPError, httpx.StreamError) as exc:
            if token is not None and token.is_cancelled:
                raise RequestCancelledError(f"Request to {path} was cancelled") from exc
            Log.error(f"Network request failed: {exc}")
            raise TransportNetworkError(f"Upstream network error: {exc}") from exc

    def _send(
        self,
        path: str,
        field: str,
        value: str,
        token: CancellationToken | None,
    ) -> RawResponse:
        request = self._client.build_request("POST", path, data={field: value})
        if token is None:
            response = self._client.send(request, stream=True)
        else:
            response = _PendingSend(self._client, request, token).wait()
        try:
            return self._collect(response, token)
        finally:
            response.close()

    def _collect(self, response: httpx.Response, token: CancellationToken | None) -> RawResponse:
        unregister = token.on_cancel(response.close) if token is not None else None
        try:
            body = self._read_body(response, token)
        finally:
            if unregister is not None:
                unregister()
        Log.debug(f"Response code: {response.status_code}")
        if not response.is_success:
            Log.warning(f"HTTP error: {response.status_code} {response.reason_phrase}")
            raise TransportStatusError(
                f"Upstream returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return RawResponse(
            body=body,
            content_type=response.headers.get("content-type"),
            status_code=response.status_code,
        )

    @staticmethod
    def _read_body(response: httpx.Response, token: CancellationToken | None) -> bytes:
        chunks: list[bytes] = []
        for chunk in response.iter_bytes():
            if token is not None:
                token.raise_if_cancelled()
            chunks.append(chunk)
        if token is not None:
            token.raise_if_cancelled()
        return b"".join(chunks)

    def close(self) -> None:
        self._client.close()


class _PendingSend:
    """Sends a request on a helper thread so that a cancel need not wait for headers.

    httpx offers no way to interrupt a synchronous send that is still
    connecting or waiting for the status line. The caller waits on either the
    send finishing or the token firing; on cancel it raises at once and the
    late response, if one ever arrives, is closed by the helper thread.
    """

    def __init__(
        self,
        client: httpx.Client,
        request: httpx.Request,
        token: CancellationToken,
    ) -> None:
        self._client = client
        self._request = request
        self._token = token
        self._finished = threading.Event()
        self._lock = threading.Lock()
        self._response: httpx.Response | None = None
        self._error: Exception | None = None
        self._abandoned = False

    def wait(self) -> httpx.Response:
        unregister = self._token.on_cancel(self._finished.set)
        threading.Thread(target=self._run, name="domaincheck-send", daemon=True).start()
        try:
            self._finished.wait()
        finally:
            unregister()
        with self._lock:
            if self._token.is_cancelled:
                self._abandoned = True
                if self._response is not None:
                    self._response.close()
                raise RequestCancelledError(f"Request to {self._request.url} was cancelled")
            if self._error is not None:
                raise self._error
            if self._response is None:
                raise RuntimeError("Send finished without a response")
            return self._response

    def _run(self) -> None:
        try:
            response = self._client.send(self._request, stream=True)
        except Exception as exc:
            with self._lock:
                self._error = exc
        else:
            with self._lock:
                if self._abandoned:
                    response.close()
                else:
                    self._response = response
        finally:
            self._finished.set()
