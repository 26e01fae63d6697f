from domaincheck.search.call import SearchCall
from domaincheck.search.models import Query, SearchResult
from domaincheck.search.orchestrator import DomainSearch, build_domain_search
from domaincheck.search.query import parse_query

__all__ = [
    "DomainSearch",
    "Query",
    "SearchCall",
    "SearchResult",
    "build_domain_search",
    "parse_query",
]
