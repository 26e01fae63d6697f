from domaincheck.search.models import Query


def parse_query(query: str) -> Query:
    """Split ``"shop.com.tr"`` into name ``"shop"`` and extension ``"com.tr"``.

    Blank segments are dropped. The name is passed through as typed.
    """
    if "." not in query:
        return Query(name=query)
    parts = [part for part in query.split(".") if part.strip()]
    if not parts:
        return Query(name="")
    if len(parts) == 1:
        return Query(name=parts[0])
    return Query(name=parts[0], extension=".".join(parts[1:]))
