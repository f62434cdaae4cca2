"""Tests for render run logging."""

import json

from vafchart.utils import logging_config
from vafchart.utils.logging_config import RenderLogger, get_logger, reset_logger


class TestRenderLogger:
    """Tests for RenderLogger."""

    def test_writes_jsonl_events(self, tmp_path):
        """Test that request and result events land in the JSONL file."""
        render_logger = RenderLogger(log_dir=tmp_path)
        request_id = render_logger.log_render_request("chart.json", "mutations", 3, 1, "None", False)
        render_logger.log_render_result(request_id, 1, 0, {"mutated_with_vaf": 2}, [0, 0.1])
        render_logger.close()

        entries = [json.loads(line) for line in render_logger_file(tmp_path).read_text().splitlines()]
        assert [entry["event_type"] for entry in entries] == ["render_request", "render_result"]
        assert entries[1]["request_id"] == request_id

    def test_new_logger_closes_previous_handlers(self, tmp_path):
        """Test that replacing a logger closes the old file handler."""
        first = RenderLogger(log_dir=tmp_path / "first")
        old_handler = first.file_handler
        second = RenderLogger(log_dir=tmp_path / "second")

        assert old_handler.stream is None
        assert old_handler not in second.logger.handlers
        second.close()

    def test_close_detaches_handlers(self, tmp_path):
        """Test that close leaves no handlers behind."""
        render_logger = RenderLogger(log_dir=tmp_path)
        render_logger.close()

        assert render_logger.logger.handlers == []
        assert render_logger.file_handler is None

    def test_without_file_logging(self):
        """Test that file logging can be turned off."""
        render_logger = RenderLogger(enable_file_logging=False)
        assert render_logger.log_file is None
        assert render_logger.file_handler is None
        render_logger.close()


class TestGlobalLogger:
    """Tests for get_logger and reset_logger."""

    def test_reset_closes_global_logger(self, tmp_path):
        """Test that reset_logger closes the file handler of the global logger."""
        reset_logger()
        render_logger = get_logger(log_dir=tmp_path)
        handler = render_logger.file_handler
        assert get_logger() is render_logger

        reset_logger()

        assert handler.stream is None
        assert logging_config._global_logger is None


def render_logger_file(log_dir):
    return next(log_dir.glob("render_runs_*.jsonl"))
