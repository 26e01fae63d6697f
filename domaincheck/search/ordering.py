from collections.abc import Iterable

from domaincheck.decoding.models import DomainRecord


def prioritize_extension(domains: Iterable[DomainRecord], extension: str) -> list[DomainRecord]:
    """Move domains whose last label equals *extension* to the front.

    Stable partition: relative order inside both groups is preserved. The
    comparison is exact and case-sensitive against the suffix after the
    last dot, so ``"com.tr"`` never matches ``shop.com.tr``.
    """
    return sorted(domains, key=lambda domain: 0 if domain.tld == extension else 1)
