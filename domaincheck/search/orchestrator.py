from domaincheck.config.settings import Settings
from domaincheck.decoding.decoder import ResponseDecoder
from domaincheck.logging.logger import Log
from domaincheck.search.exceptions import UpstreamFailureError
from domaincheck.search.models import SearchResult
from domaincheck.search.ordering import prioritize_extension
from domaincheck.search.query import parse_query
from domaincheck.search.whois import normalize_whois_text
from domaincheck.transport.base import BaseTransport
from domaincheck.transport.cancellation import CancellationToken
from domaincheck.transport.factory import TransportFactory

DOMAIN_FIELD = "domain"


class DomainSearch:
    """Searches domain availability and fetches whois records.

    Stateless between calls: every search sends one request, decodes it
    through the response pipeline and reorders the result.
    """

    def __init__(
        self,
        transport: BaseTransport,
        decoder: ResponseDecoder,
        *,
        search_path: str,
        whois_path: str,
    ) -> None:
        self._transport = transport
        self._decoder = decoder
        self._search_path = search_path
        self._whois_path = whois_path

    def search(self, query: str, token: CancellationToken | None = None) -> SearchResult:
        """Search availability for *query*.

        Raises:
            UpstreamFailureError: if the API answered with a failure envelope.
            TransportError: if the request itself failed.
            RequestCancelledError: if *token* was cancelled.
        """
        parsed = parse_query(query)
        Log.debug(f"Searching for domain: {parsed.name} (extension: {parsed.extension})")

        raw = self._transport.post_form(self._search_path, DOMAIN_FIELD, parsed.name, token)
        if token is not None:
            token.raise_if_cancelled()
        envelope = self._decoder.decode(raw)

        if not envelope.is_success:
            Log.error(
                f"Search for '{parsed.name}' failed: code={envelope.code} "
                f"status={envelope.status} message={envelope.message}"
            )
            raise UpstreamFailureError(
                envelope.message or "Search failed",
                code=envelope.code,
                status=envelope.status,
            )

        domains = list(envelope.domains)
        if parsed.extension is not None:
            domains = prioritize_extension(domains, parsed.extension)
        Log.info(f"Search for '{parsed.name}' returned {len(domains)} domains")
        return SearchResult(domains=domains, currency=envelope.currency)

    def whois(self, domain: str, token: CancellationToken | None = None) -> str:
        """Fetch the whois record of *domain* as display-ready plain text."""
        raw = self._transport.post_form(self._whois_path, DOMAIN_FIELD, domain, token)
        if token is not None:
            token.raise_if_cancelled()
        return normalize_whois_text(raw.text())

    def close(self) -> None:
        self._transport.close()


def build_domain_search(
    settings: Settings,
    transport: BaseTransport | None = None,
) -> DomainSearch:
    """Build a DomainSearch with the configured transport adapter."""
    return DomainSearch(
        transport=transport or TransportFactory.create(settings),
        decoder=ResponseDecoder(),
        search_path=settings.api_search_path,
        whois_path=settings.api_whois_path,
    )
