from domaincheck.decoding.classifier import classify
from domaincheck.decoding.decoder import ResponseDecoder
from domaincheck.decoding.mapper import map_envelope
from domaincheck.decoding.models import ContentKind, RawResponse, ResponseEnvelope
from domaincheck.decoding.recoverer import decode_envelope
from domaincheck.decoding.sanitizer import sanitize

__all__ = [
    "ContentKind",
    "RawResponse",
    "ResponseDecoder",
    "ResponseEnvelope",
    "classify",
    "decode_envelope",
    "map_envelope",
    "sanitize",
]
