def normalize_whois_text(raw: str) -> str:
    """Turn escaped ``\\n``/``\\t`` sequences into real whitespace and drop ``\\r``."""
    return raw.replace("\\n", "\n").replace("\\t", "\t").replace("\\r", "").strip()
