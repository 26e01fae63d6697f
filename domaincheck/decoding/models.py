import codecs
from dataclasses import dataclass, field
from email.message import Message
from enum import Enum

SUCCESS_CODE = 1
SUCCESS_STATUS = "success"
ERROR_STATUS = "error"


class ContentKind(Enum):
    """Routing decision for sanitized response text."""

    JSON = "json"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class RawResponse:
    """Fully buffered response body as handed over by the transport."""

    body: bytes
    content_type: str | None = None
    status_code: int | None = None

    def text(self) -> str:
        """Decode the body using the declared charset, defaulting to UTF-8."""
        return self.body.decode(self._charset(), errors="replace")

    def _charset(self) -> str:
        if not self.content_type:
            return "utf-8"
        header = Message()
        header["content-type"] = self.content_type
        charset = header.get_content_charset()
        if not charset:
            return "utf-8"
        try:
            codecs.lookup(charset)
        except LookupError:
            return "utf-8"
        return charset


@dataclass(frozen=True)
class Currency:
    """Pricing currency reported alongside the domain list."""

    id: int | None = None
    code: str = ""
    prefix: str = ""
    suffix: str = ""
    format: int | None = None
    rate: str = ""


@dataclass(frozen=True)
class DomainAddons:
    """Optional services sold with a domain."""

    dns: bool = False
    email: bool = False
    idprotect: bool = False

    def available_addons(self) -> list[str]:
        addons: list[str] = []
        if self.dns:
            addons.append("DNS")
        if self.email:
            addons.append("Email")
        if self.idprotect:
            addons.append("ID Protection")
        return addons

    def has_any_addon(self) -> bool:
        return self.dns or self.email or self.idprotect


@dataclass(frozen=True)
class PeriodFee:
    """Grace or redemption period: length in days and its fee."""

    days: int
    price: str


@dataclass(frozen=True)
class DomainPrice:
    """Fee tables keyed by term length in years ("1", "2", ...)."""

    register: dict[str, str] = field(default_factory=dict)
    renew: dict[str, str] = field(default_factory=dict)
    transfer: dict[str, str] = field(default_factory=dict)
    categories: tuple[str, ...] = ()
    group: str | None = None
    addons: DomainAddons | None = None
    grace_period: PeriodFee | None = None
    grace_period_days: int | None = None
    grace_period_fee: str | None = None
    redemption_period: PeriodFee | None = None
    redemption_period_days: int | None = None
    redemption_period_fee: str | None = None

    @property
    def register_price(self) -> str | None:
        return self.register.get("1")

    @property
    def renewal_price(self) -> str | None:
        return self.renew.get("1")

    @property
    def transfer_price(self) -> str | None:
        return self.transfer.get("1")

    @property
    def is_popular(self) -> bool:
        return "Popular" in self.categories

    @property
    def is_hot(self) -> bool:
        return self.group == "hot"


@dataclass(frozen=True)
class DomainRecord:
    """A single availability result, e.g. ``example.com``."""

    name: str
    status: str
    price: DomainPrice | None = None

    @property
    def is_available(self) -> bool:
        return self.status == "available"

    @property
    def is_registered(self) -> bool:
        return self.status == "registered"

    @property
    def tld(self) -> str:
        """Suffix after the last dot (whole name when there is no dot)."""
        return self.name.rsplit(".", 1)[-1]

    @property
    def label(self) -> str:
        """Everything before the last dot."""
        return self.name.rsplit(".", 1)[0]


@dataclass(frozen=True)
class SearchPayload:
    """Payload of a successful search envelope."""

    domains: tuple[DomainRecord, ...] = ()
    currency: Currency | None = None


@dataclass(frozen=True)
class ErrorText:
    """Diagnostic text of an error-only envelope."""

    text: str


EnvelopePayload = SearchPayload | ErrorText | None


@dataclass(frozen=True)
class ResponseEnvelope:
    """Canonical decoded response.

    A ``SearchPayload`` is carried if and only if ``code == 1`` and
    ``status == "success"``; every other combination is a failure.
    """

    code: int
    status: str
    payload: EnvelopePayload = None

    def __post_init__(self) -> None:
        claims_success = self.code == SUCCESS_CODE and self.status == SUCCESS_STATUS
        has_domains = isinstance(self.payload, SearchPayload)
        if claims_success != has_domains:
            raise ValueError(
                f"Envelope code={self.code} status={self.status!r} is inconsistent "
                f"with payload {type(self.payload).__name__}"
            )

    @classmethod
    def failure(cls, message: str, code: int = 0, status: str = ERROR_STATUS) -> "ResponseEnvelope":
        return cls(code=code, status=status, payload=ErrorText(message))

    @property
    def is_success(self) -> bool:
        return isinstance(self.payload, SearchPayload)

    @property
    def message(self) -> str | None:
        if isinstance(self.payload, ErrorText):
            return self.payload.text
        return None

    @property
    def domains(self) -> tuple[DomainRecord, ...]:
        if isinstance(self.payload, SearchPayload):
            return self.payload.domains
        return ()

    @property
    def currency(self) -> Currency | None:
        if isinstance(self.payload, SearchPayload):
            return self.payload.currency
        return None
