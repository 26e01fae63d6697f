from domaincheck.decoding.models import ContentKind


def classify(sanitized: str) -> ContentKind:
    """Route text to the JSON path when it looks like an object or array.

    This is a prefix check only; malformed JSON still routes to JSON and is
    handled by recovery.
    """
    if sanitized.strip().startswith(("{", "[")):
        return ContentKind.JSON
    return ContentKind.PLAIN_TEXT
