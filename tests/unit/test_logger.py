import logging
from collections.abc import Iterator

import pytest

from domaincheck.decoding.decoder import ResponseDecoder
from domaincheck.decoding.models import RawResponse
from domaincheck.logging.logger import BODY_EXCERPT_LIMIT, Log


@pytest.fixture(autouse=True)
def _restore_levels() -> Iterator[None]:
    names = ("domaincheck", "httpx", "httpcore")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestExcerpt:
    def test_short_text_is_unchanged(self) -> None:
        assert Log.excerpt("short body") == "short body"

    def test_long_text_is_cut_with_remainder_count(self) -> None:
        text = "x" * (BODY_EXCERPT_LIMIT + 25)
        excerpt = Log.excerpt(text)
        assert excerpt.startswith("x" * BODY_EXCERPT_LIMIT)
        assert excerpt.endswith("... [25 more chars]")

    def test_custom_limit(self) -> None:
        assert Log.excerpt("abcdef", limit=3) == "abc... [3 more chars]"


class TestConfigure:
    def test_sets_level_and_single_handler(self) -> None:
        Log.configure("info")
        Log.configure("info")
        logger = logging.getLogger("domaincheck")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_quiets_http_libraries_outside_debug(self) -> None:
        Log.configure("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_debug_level_opens_http_libraries(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("httpx").level == logging.DEBUG
        assert logging.getLogger("httpcore").level == logging.DEBUG


def test_decoder_logs_long_bodies_as_excerpts(caplog: pytest.LogCaptureFixture) -> None:
    body = '{"code":0,"status":"error","message":"' + "y" * 2000 + '"}'
    logging.getLogger("domaincheck").setLevel(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="domaincheck"):
        ResponseDecoder().decode(RawResponse(body=body.encode("utf-8")))
    originals = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Original")]
    assert originals
    assert len(originals[0]) < len(body)
    assert originals[0].endswith("more chars]")
