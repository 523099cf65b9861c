"""Unit tests for snaptest.utils."""

import logging

import pytest
from jinja2 import UndefinedError

from snaptest.utils import configure_logging, get_logger, render_template

pytestmark = pytest.mark.unit


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("store").name == "snaptest.store"

    def test_library_logs_propagate(self, caplog):
        with caplog.at_level(logging.INFO, logger="snaptest"):
            get_logger("assertion").info("Recorded snapshot %s", "x.txt")
        assert "Recorded snapshot x.txt" in caplog.text


class TestConfigureLogging:
    def test_writes_log_file(self, fresh_logging, tmp_path):
        log_file = tmp_path / "logs" / "snaptest.log"

        configure_logging(logging.INFO, log_file=log_file)
        get_logger("store").info("Wrote %s", "x.txt")
        for handler in fresh_logging.handlers:
            handler.flush()

        assert "snaptest.store - INFO - Wrote x.txt" in log_file.read_text()

    def test_configures_once(self, fresh_logging):
        configure_logging(logging.INFO)
        count = len(fresh_logging.handlers)
        configure_logging(logging.DEBUG)
        assert len(fresh_logging.handlers) == count
        assert fresh_logging.level == logging.INFO


class TestRenderTemplate:
    def test_renders(self):
        assert render_template("{{ a }}-{{ b }}", {"a": 1, "b": 2}) == "1-2"

    def test_strict_undefined(self):
        with pytest.raises(UndefinedError, match="missing"):
            render_template("{{ missing }}", {})
