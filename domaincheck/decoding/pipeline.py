from abc import ABC, abstractmethod
from dataclasses import dataclass

from domaincheck.decoding.models import ContentKind, RawResponse, ResponseEnvelope


@dataclass(slots=True)
class DecodeContext:
    raw: RawResponse
    original_text: str = ""
    sanitized_text: str = ""
    kind: ContentKind | None = None
    envelope: ResponseEnvelope | None = None


class DecodeStep(ABC):
    @abstractmethod
    def run(self, context: DecodeContext) -> DecodeContext:
        raise NotImplementedError
