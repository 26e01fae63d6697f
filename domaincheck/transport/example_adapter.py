"""Example transport adapter.

Serves canned upstream bodies without touching the network. Useful for local
development, tests, and as a template for new transport adapters.
"""

import json

from domaincheck.decoding.models import RawResponse
from domaincheck.transport.base import BaseTransport
from domaincheck.transport.cancellation import CancellationToken
from domaincheck.transport.exceptions import TransportStatusError


class ExampleTransport(BaseTransport):
    """Answers search with ``<value>.com`` (available) and ``<value>.net``
    (registered), and whois with a short escaped text record.

    Bodies registered in *responses* take precedence, keyed by path.
    """

    def __init__(
        self,
        *,
        search_path: str,
        whois_path: str,
        responses: dict[str, str] | None = None,
    ) -> None:
        self._search_path = search_path
        self._whois_path = whois_path
        self._responses = dict(responses or {})

    def post_form(
        self,
        path: str,
        field: str,
        value: str,
        token: CancellationToken | None = None,
    ) -> RawResponse:
        _ = field
        if token is not None:
            token.raise_if_cancelled()
        if path in self._responses:
            return self._text_response(self._responses[path], "text/html; charset=UTF-8")
        if path == self._whois_path:
            return self._text_response(
                f"Domain Name: {value}\\nRegistrar: Example Registrar\\n",
                "text/plain; charset=UTF-8",
            )
        if path == self._search_path:
            return self._text_response(self._search_body(value), "application/json")
        raise TransportStatusError(f"Upstream returned HTTP 404 for {path}", status_code=404)

    @staticmethod
    def _search_body(name: str) -> str:
        price = {"register": {"1": "9.99"}, "renew": {"1": "12.99"}, "categories": ["Popular"]}
        return json.dumps({
            "code": 1,
            "status": "success",
            "message": {
                "currency": {"id": 1, "code": "EUR", "prefix": "€", "suffix": "", "format": 1, "rate": "1.00000"},
                "domains": [
                    {"domain": f"{name}.com", "status": "available", "price": price},
                    {"domain": f"{name}.net", "status": "registered", "price": price},
                ],
            },
        })

    @staticmethod
    def _text_response(body: str, content_type: str) -> RawResponse:
        return RawResponse(body=body.encode("utf-8"), content_type=content_type, status_code=200)
