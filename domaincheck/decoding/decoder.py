"""Raw response -> ResponseEnvelope decoding pipeline."""

from collections.abc import Sequence

from domaincheck.decoding.models import RawResponse, ResponseEnvelope
from domaincheck.decoding.pipeline import DecodeContext, DecodeStep
from domaincheck.decoding.steps import ClassifyStep, DecodeEnvelopeStep, SanitizeStep


def default_steps() -> list[DecodeStep]:
    return [SanitizeStep(), ClassifyStep(), DecodeEnvelopeStep()]


class ResponseDecoder:
    """Runs sanitize -> classify -> decode over a buffered response.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, steps: Sequence[DecodeStep] | None = None) -> None:
        self._steps = list(steps) if steps is not None else default_steps()

    def decode(self, raw: RawResponse) -> ResponseEnvelope:
        """Decode *raw* into an envelope. Never raises for malformed bodies."""
        context = DecodeContext(raw=raw)
        for step in self._steps:
            context = step.run(context)
        if context.envelope is None:
            raise ValueError("Decoding pipeline finished without an envelope")
        return context.envelope

    def decode_text(self, text: str) -> ResponseEnvelope:
        return self.decode(RawResponse(body=text.encode("utf-8")))
