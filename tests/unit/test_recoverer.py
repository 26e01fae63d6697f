"""Tests for best-effort envelope decoding and brace recovery."""

import json
from unittest.mock import patch

import pytest

from domaincheck.decoding.exceptions import MalformedPayloadError
from domaincheck.decoding.mapper import map_envelope
from domaincheck.decoding.models import ContentKind, ErrorText
from domaincheck.decoding.recoverer import (
    PARSE_FAILURE_PREFIX,
    decode_envelope,
    decode_strict,
    extract_braced_region,
)

_DOC = {
    "code": 1,
    "status": "success",
    "message": {"domains": [{"domain": "a.com", "status": "available"}]},
}
_JSON = json.dumps(_DOC)


class TestDirectDecode:
    def test_valid_document_matches_direct_mapping(self) -> None:
        assert decode_envelope(_JSON, ContentKind.JSON) == map_envelope(_DOC)

    def test_valid_document_skips_recovery(self) -> None:
        with patch("domaincheck.decoding.recoverer.extract_braced_region") as extract:
            decode_envelope(_JSON, ContentKind.JSON)
        extract.assert_not_called()

    def test_error_document_is_returned_as_is(self) -> None:
        envelope = decode_envelope('{"code":0,"status":"error","message":"Bad"}', ContentKind.JSON)
        assert envelope.message == "Bad"
        assert envelope.code == 0


class TestPlainText:
    @pytest.mark.parametrize("text", ["Fatal error: out of memory", "Domain is invalid", ""])
    def test_plain_text_becomes_failure_envelope(self, text: str) -> None:
        envelope = decode_envelope(text, ContentKind.PLAIN_TEXT)
        assert envelope.code == 0
        assert envelope.status == "error"
        assert envelope.payload == ErrorText(text)
        assert envelope.domains == ()

    def test_plain_text_is_not_parsed(self) -> None:
        with patch("domaincheck.decoding.recoverer.decode_strict") as strict:
            decode_envelope('ok {"code":1}', ContentKind.PLAIN_TEXT)
        strict.assert_not_called()


class TestBraceRecovery:
    def test_recovers_json_followed_by_text(self) -> None:
        text = _JSON + " PHP Deprecated: something happened"
        assert decode_envelope(text, ContentKind.JSON) == map_envelope(_DOC)

    def test_recovers_json_inside_array_prefix(self) -> None:
        text = "[debug] " + _JSON
        assert decode_envelope(text, ContentKind.JSON) == map_envelope(_DOC)

    def test_unrecoverable_json_embeds_text(self) -> None:
        text = '{"code": 1, "status": '
        envelope = decode_envelope(text, ContentKind.JSON)
        assert envelope.code == 0
        assert envelope.status == "error"
        assert envelope.message == text

    def test_failed_extraction_uses_parse_failure_prefix(self) -> None:
        text = "{broken} and {still broken}"
        envelope = decode_envelope(text, ContentKind.JSON)
        assert envelope.message == PARSE_FAILURE_PREFIX + text

    def test_non_envelope_json_fails_softly(self) -> None:
        envelope = decode_envelope("[1, 2, 3]", ContentKind.JSON)
        assert not envelope.is_success
        assert envelope.message == "[1, 2, 3]"

    def test_stray_brace_before_document_is_not_recovered(self) -> None:
        text = '{"note": "}"} ' + _JSON
        envelope = decode_envelope(text, ContentKind.JSON)
        assert not envelope.is_success
        assert envelope.message == PARSE_FAILURE_PREFIX + text


class TestDecodeStrict:
    def test_invalid_json_raises_with_text(self) -> None:
        with pytest.raises(MalformedPayloadError, match="Invalid JSON") as info:
            decode_strict("{nope")
        assert info.value.text == "{nope"

    def test_mapping_error_carries_text(self) -> None:
        with pytest.raises(MalformedPayloadError) as info:
            decode_strict('{"status": "success"}')
        assert info.value.text == '{"status": "success"}'


class TestExtractBracedRegion:
    def test_slices_first_open_to_last_close(self) -> None:
        assert extract_braced_region('x {"a": {"b": 1}} y') == '{"a": {"b": 1}}'

    @pytest.mark.parametrize("text", ["no braces", "} reversed {", "{ unterminated", "}"])
    def test_returns_none_without_ordered_pair(self, text: str) -> None:
        assert extract_braced_region(text) is None


class TestHostileDocuments:
    @pytest.mark.parametrize(
        "text",
        [
            '{"code": "²", "status": "success", "message": {"domains": []}}',
            '{"code": ' + "9" * 5000 + ', "status": "success"}',
        ],
        ids=["superscript-digit-code", "oversized-integer-code"],
    )
    def test_unusable_code_yields_failure_envelope(self, text: str) -> None:
        envelope = decode_envelope(text, ContentKind.JSON)
        assert not envelope.is_success
        assert envelope.message == PARSE_FAILURE_PREFIX + text

    def test_oversized_integer_raises_malformed_payload(self) -> None:
        text = '{"code": ' + "9" * 5000 + "}"
        with pytest.raises(MalformedPayloadError, match="Invalid JSON") as info:
            decode_strict(text)
        assert info.value.text == text

    def test_scalar_categories_do_not_break_decoding(self) -> None:
        document = {
            "code": 1,
            "status": "success",
            "message": {
                "domains": [{"domain": "a.com", "status": "available", "price": {"categories": 5}}],
            },
        }
        envelope = decode_envelope(json.dumps(document), ContentKind.JSON)
        assert envelope.is_success
        assert envelope.domains[0].price is not None
        assert envelope.domains[0].price.categories == ()
