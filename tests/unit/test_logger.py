import logging

import pytest

from doc_intake.logging.logger import Log, _request_id


@pytest.fixture(autouse=True)
def _clear_request_id() -> None:
    _request_id.set(None)


class TestRender:
    def test_plain_message(self) -> None:
        assert Log._render("hello", {}) == "hello"

    def test_appends_fields(self) -> None:
        assert Log._render("loaded", {"files": 2, "passed": True}) == "loaded [files=2, passed=True]"

    def test_appends_bound_request_id(self) -> None:
        Log.bind_request("req-1")
        assert Log._render("loaded", {"files": 2}) == "loaded [files=2, request_id=req-1]"

    def test_bind_generates_id(self) -> None:
        request_id = Log.bind_request()
        assert len(request_id) == 32


def test_messages_reach_the_doc_intake_logger(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="doc_intake"):
        Log.info("Verdict ready", passed=True)

    assert "Verdict ready [passed=True]" in caplog.text
