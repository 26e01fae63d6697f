from domaincheck.config.settings import Settings
from domaincheck.transport.base import BaseTransport
from domaincheck.transport.example_adapter import ExampleTransport
from domaincheck.transport.httpx_adapter import HttpxTransport


class TransportFactory:
    """Creates the configured transport adapter."""

    SUPPORTED_PROVIDERS = ("example", "httpx")

    @classmethod
    def create(cls, settings: Settings) -> BaseTransport:
        provider = settings.transport_provider.lower()
        if provider == "example":
            return ExampleTransport(
                search_path=settings.api_search_path,
                whois_path=settings.api_whois_path,
            )
        if provider == "httpx":
            return HttpxTransport(
                base_url=settings.api_base_url,
                connect_timeout_seconds=settings.api_connect_timeout_seconds,
                read_timeout_seconds=settings.api_read_timeout_seconds,
                write_timeout_seconds=settings.api_write_timeout_seconds,
                connection_retries=settings.api_connection_retries,
                user_agent=settings.api_user_agent,
            )
        raise ValueError(
            f"Unknown transport provider '{provider}'. "
            f"Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
        )
