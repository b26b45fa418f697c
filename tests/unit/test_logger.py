import logging

import pytest

from app.logging.logger import Log, mask_visitor_id


class TestMaskVisitorId:
    def test_keeps_eight_character_prefix(self) -> None:
        assert mask_visitor_id("0123456789abcdef") == "01234567..."

    @pytest.mark.parametrize("visitor_id", [None, ""])
    def test_missing_id(self, visitor_id: str | None) -> None:
        assert mask_visitor_id(visitor_id) == "none"


class TestLog:
    def test_configure_sets_level_and_single_handler(self) -> None:
        Log.configure("debug")
        Log.configure("warning")
        logger = logging.getLogger("resumesite")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_messages_reach_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("INFO")
        with caplog.at_level(logging.INFO, logger="resumesite"):
            Log.info("Upload request: file=cv.pdf")
        assert "Upload request: file=cv.pdf" in caplog.text

    def test_configure_quiets_client_libraries(self) -> None:
        Log.configure("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("pdfminer").level == logging.WARNING

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            (Log.debug, logging.DEBUG),
            (Log.info, logging.INFO),
            (Log.warning, logging.WARNING),
            (Log.error, logging.ERROR),
        ],
    )
    def test_each_level_is_recorded(
        self, method, level: int, caplog: pytest.LogCaptureFixture  # type: ignore[no-untyped-def]
    ) -> None:
        Log.configure("DEBUG")
        with caplog.at_level(logging.DEBUG, logger="resumesite"):
            method("stream opened")
        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(level, "stream opened")]
