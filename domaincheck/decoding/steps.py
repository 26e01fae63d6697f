from domaincheck.decoding.classifier import classify
from domaincheck.decoding.pipeline import DecodeContext, DecodeStep
from domaincheck.decoding.recoverer import decode_envelope
from domaincheck.decoding.sanitizer import sanitize
from domaincheck.logging.logger import Log


class SanitizeStep(DecodeStep):
    def run(self, context: DecodeContext) -> DecodeContext:
        context.original_text = context.raw.text()
        Log.debug(f"Original response: {Log.excerpt(context.original_text)}")
        context.sanitized_text = sanitize(context.original_text)
        Log.debug(f"Cleaned response: {Log.excerpt(context.sanitized_text)}")
        return context


class ClassifyStep(DecodeStep):
    def run(self, context: DecodeContext) -> DecodeContext:
        context.kind = classify(context.sanitized_text)
        return context


class DecodeEnvelopeStep(DecodeStep):
    def run(self, context: DecodeContext) -> DecodeContext:
        if context.kind is None:
            raise ValueError("DecodeContext.kind must be set before decoding")
        context.envelope = decode_envelope(context.sanitized_text, context.kind)
        return context
