"""Best-effort decoding of sanitized text into a response envelope.

Decoding order:
1. Plain text is never parsed; it becomes a failure envelope verbatim.
2. The whole text is decoded as JSON and mapped onto the envelope.
3. On failure, the region between the first ``{`` and the last ``}`` is
   decoded instead.
4. If that fails too, a failure envelope embedding the text is returned.

The brace slice is not depth aware: a stray ``{`` or ``}`` inside a string
literal that precedes the real document produces a wrong slice, which then
fails to decode and ends in step 4.
"""

import json

from domaincheck.decoding.exceptions import MalformedPayloadError
from domaincheck.decoding.mapper import map_envelope
from domaincheck.decoding.models import ContentKind, ResponseEnvelope
from domaincheck.logging.logger import Log

PARSE_FAILURE_PREFIX = "Response parsing failed: "


def decode_envelope(sanitized: str, kind: ContentKind) -> ResponseEnvelope:
    """Decode *sanitized* into a ResponseEnvelope without ever raising."""
    if kind is ContentKind.PLAIN_TEXT:
        Log.debug("Response is plain text, creating error envelope")
        return ResponseEnvelope.failure(sanitized)

    try:
        return decode_strict(sanitized)
    except MalformedPayloadError as exc:
        Log.warning(f"JSON decoding failed for cleaned content: {exc}")

    candidate = extract_braced_region(sanitized)
    if candidate is None:
        Log.error("No JSON object found in response, creating error envelope")
        return ResponseEnvelope.failure(sanitized)

    Log.debug(f"Extracted JSON: {Log.excerpt(candidate)}")
    try:
        return decode_strict(candidate)
    except MalformedPayloadError as exc:
        Log.error(f"Manual JSON extraction also failed: {exc}")
    return ResponseEnvelope.failure(PARSE_FAILURE_PREFIX + sanitized)


def decode_strict(text: str) -> ResponseEnvelope:
    """Decode *text* as an envelope document.

    Raises:
        MalformedPayloadError: if the text is not valid JSON or not an envelope.
    """
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError(f"Invalid JSON: {exc}", text) from exc
    try:
        return map_envelope(document)
    except MalformedPayloadError as exc:
        exc.text = text
        raise


def extract_braced_region(text: str) -> str | None:
    """Return text from the first ``{`` through the last ``}``, if ordered."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]
