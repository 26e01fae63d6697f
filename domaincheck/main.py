import sys

from domaincheck.config.settings import Settings
from domaincheck.logging.logger import Log
from domaincheck.search.exceptions import UpstreamFailureError
from domaincheck.search.orchestrator import build_domain_search
from domaincheck.transport.exceptions import TransportError


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build search -> run one query."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)
    if not args:
        Log.error("Usage: python -m domaincheck.main <domain>")
        return 2

    search = build_domain_search(settings)
    try:
        result = search.search(args[0])
    except (UpstreamFailureError, TransportError) as exc:
        Log.error(f"Search failed: {exc}")
        return 1
    finally:
        search.close()

    if result.is_empty:
        Log.info("No domains found")
    for domain in result.domains:
        price = domain.price.register_price if domain.price else None
        Log.info(f"{domain.name}\t{domain.status}\t{price or '-'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
