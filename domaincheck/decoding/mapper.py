"""Maps a decoded JSON document onto the canonical response envelope."""

from typing import Any

from domaincheck.decoding.exceptions import MalformedPayloadError
from domaincheck.decoding.models import (
    ERROR_STATUS,
    SUCCESS_CODE,
    SUCCESS_STATUS,
    Currency,
    DomainAddons,
    DomainPrice,
    DomainRecord,
    ErrorText,
    PeriodFee,
    ResponseEnvelope,
    SearchPayload,
)


def map_envelope(data: Any) -> ResponseEnvelope:
    """Build a ResponseEnvelope from a decoded JSON document.

    Absent ``message``, ``domains`` and ``currency`` are not errors. A string
    ``message`` marks an error-only response.

    Raises:
        MalformedPayloadError: when the document cannot represent an envelope.
    """
    if not isinstance(data, dict):
        raise MalformedPayloadError("Envelope must be a JSON object")
    code = _build_code(data.get("code"))
    status = _build_status(data.get("status"))
    message = data.get("message")

    if isinstance(message, str):
        # A bare text message never carries domains, whatever the document claims.
        if code == SUCCESS_CODE and status == SUCCESS_STATUS:
            status = ERROR_STATUS
        return ResponseEnvelope(code=code, status=status, payload=ErrorText(message))

    if message is not None and not isinstance(message, dict):
        raise MalformedPayloadError("'message' must be an object, a string or null")

    if code != SUCCESS_CODE or status != SUCCESS_STATUS:
        return ResponseEnvelope(code=code, status=status)

    message = message or {}
    payload = SearchPayload(
        domains=_build_domains(message.get("domains")),
        currency=_build_currency(message.get("currency")),
    )
    return ResponseEnvelope(code=code, status=status, payload=payload)


def _build_code(raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise MalformedPayloadError(f"'code' must be an integer, got {raw!r:.80}")


def _build_status(raw: Any) -> str:
    if raw is None:
        return ERROR_STATUS
    if not isinstance(raw, str):
        raise MalformedPayloadError(f"'status' must be a string, got {raw!r}")
    return raw


def _build_domains(raw: Any) -> tuple[DomainRecord, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MalformedPayloadError("'message.domains' must be a list")
    return tuple(_build_domain(item, i) for i, item in enumerate(raw))


def _build_domain(raw: Any, index: int) -> DomainRecord:
    if not isinstance(raw, dict):
        raise MalformedPayloadError(f"Domain at index {index} must be an object")
    name = raw.get("domain")
    if not name or not isinstance(name, str):
        raise MalformedPayloadError(
            f"Domain at index {index}: 'domain' must be a non-empty string"
        )
    status = raw.get("status")
    if status is None:
        status = ""
    if not isinstance(status, str):
        raise MalformedPayloadError(f"Domain at index {index}: 'status' must be a string")
    return DomainRecord(name=name, status=status, price=_build_price(raw.get("price"), index))


def _build_currency(raw: Any) -> Currency | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise MalformedPayloadError("'message.currency' must be an object or null")
    return Currency(
        id=_optional_int(raw.get("id")),
        code=_text(raw.get("code")),
        prefix=_text(raw.get("prefix")),
        suffix=_text(raw.get("suffix")),
        format=_optional_int(raw.get("format")),
        rate=_text(raw.get("rate")),
    )


def _build_price(raw: Any, index: int) -> DomainPrice | None:
    # Upstream sends an empty list instead of null for unpriced domains.
    if raw is None or raw == []:
        return None
    if not isinstance(raw, dict):
        raise MalformedPayloadError(f"Domain at index {index}: 'price' must be an object")
    return DomainPrice(
        register=_fee_table(raw.get("register")),
        renew=_fee_table(raw.get("renew")),
        transfer=_fee_table(raw.get("transfer")),
        categories=_categories(raw.get("categories")),
        group=_optional_text(raw.get("group")),
        addons=_build_addons(raw.get("addons")),
        grace_period=_build_period(raw.get("grace_period")),
        grace_period_days=_optional_int(raw.get("grace_period_days")),
        grace_period_fee=_optional_text(raw.get("grace_period_fee")),
        redemption_period=_build_period(raw.get("redemption_period")),
        redemption_period_days=_optional_int(raw.get("redemption_period_days")),
        redemption_period_fee=_optional_text(raw.get("redemption_period_fee")),
    )


def _build_addons(raw: Any) -> DomainAddons | None:
    if not isinstance(raw, dict):
        return None
    return DomainAddons(
        dns=bool(raw.get("dns")),
        email=bool(raw.get("email")),
        idprotect=bool(raw.get("idprotect")),
    )


def _build_period(raw: Any) -> PeriodFee | None:
    if not isinstance(raw, dict):
        return None
    return PeriodFee(days=_optional_int(raw.get("days")) or 0, price=_text(raw.get("price")))


def _categories(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(str(c) for c in raw if c is not None)


def _fee_table(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(term): _text(fee) for term, fee in raw.items() if fee is not None}


def _optional_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def _optional_text(raw: Any) -> str | None:
    if raw is None:
        return None
    return _text(raw)


def _text(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw)
