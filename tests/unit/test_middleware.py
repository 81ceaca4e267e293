"""Tests for the structured request logger."""

import json
import logging

from api.middleware import StructuredLogger, request_id_ctx


class TestStructuredLogger:

    def _entries(self, caplog):
        return [json.loads(record.getMessage()) for record in caplog.records]

    def test_info_line(self, caplog):
        logger = StructuredLogger("sailfrisco.test")
        with caplog.at_level(logging.INFO, logger="sailfrisco.test"):
            logger.info("Request completed", path="/api/marine", status_code=200, query=None)

        [entry] = self._entries(caplog)
        assert entry["level"] == "INFO"
        assert entry["message"] == "Request completed"
        assert entry["service"] == "sailfrisco-server"
        assert entry["status_code"] == 200
        assert "query" not in entry
        assert "request_id" not in entry

    def test_error_carries_request_id(self, caplog):
        logger = StructuredLogger("sailfrisco.test")
        token = request_id_ctx.set("req-42")
        try:
            with caplog.at_level(logging.INFO, logger="sailfrisco.test"):
                logger.error("Unhandled exception", error_type="RuntimeError")
        finally:
            request_id_ctx.reset(token)

        [entry] = self._entries(caplog)
        assert entry["level"] == "ERROR"
        assert entry["request_id"] == "req-42"
        assert caplog.records[0].levelno == logging.ERROR
