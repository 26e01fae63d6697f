from dataclasses import dataclass, field

from domaincheck.decoding.models import Currency, DomainRecord


@dataclass(frozen=True)
class Query:
    """User input split into the name sent upstream and the wanted extension."""

    name: str
    extension: str | None = None


@dataclass
class SearchResult:
    """Domains returned by a successful search, in display order."""

    domains: list[DomainRecord] = field(default_factory=list)
    currency: Currency | None = None

    @property
    def is_empty(self) -> bool:
        return not self.domains
