"""Logging configuration for VAF chart renderings.

Provides structured logging of render runs for debugging and auditing which
samples ended up as lines or gray points.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any


class RenderLogger:
    """Logger for chart renderings with structured output."""

    def __init__(self, log_dir: Path | None = None, enable_file_logging: bool = True):
        """Initialize the render logger.

        Args:
            log_dir: Directory for log files. Defaults to ./logs
            enable_file_logging: Whether to write logs to files
        """
        self.logger = logging.getLogger("vafchart.render")
        self.logger.setLevel(logging.INFO)

        # Remove existing handlers to avoid duplicates
        self.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        # JSONL file of render events
        self.file_handler = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"render_runs_{timestamp}.jsonl"

            self.file_handler = logging.FileHandler(log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.logger.addHandler(self.file_handler)

            self.log_file = log_file
            self.logger.info(f"Render logging enabled: {log_file}")
        else:
            self.log_file = None

    def close(self) -> None:
        """Detach and close this logger's handlers."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        self.file_handler = None

    def _write(self, log_entry: dict[str, Any]) -> None:
        if self.file_handler:
            self.file_handler.stream.write(json.dumps(log_entry) + '\n')
            self.file_handler.flush()

    def log_render_request(
        self,
        source: str,
        molecular_profile_id: str,
        num_samples: int,
        num_positions: int,
        group_by: str,
        use_log_scale: bool,
    ) -> str:
        """Log a render request.

        Returns:
            Request ID for tracking
        """
        request_id = f"{molecular_profile_id}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"

        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "render_request",
            "request_id": request_id,
            "input": {
                "source": source,
                "molecular_profile_id": molecular_profile_id,
                "num_samples": num_samples,
                "num_positions": num_positions,
                "group_by": group_by,
                "use_log_scale": use_log_scale,
            }
        }

        self.logger.info(
            f"Render Request: {num_positions} positions x {num_samples} samples "
            f"in {molecular_profile_id} (group by: {group_by})"
        )
        self._write(log_entry)

        return request_id

    def log_render_result(
        self,
        request_id: str,
        num_lines: int,
        num_gray_points: int,
        status_counts: dict[str, int],
        tickmarks: list[float],
    ) -> None:
        """Log the outcome of a render."""

        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "render_result",
            "request_id": request_id,
            "output": {
                "num_lines": num_lines,
                "num_gray_points": num_gray_points,
                "status_counts": status_counts,
                "tickmarks": tickmarks,
            }
        }

        self.logger.info(f"Render Result: {num_lines} lines, {num_gray_points} gray points")
        self._write(log_entry)

    def log_render_error(self, request_id: str, source: str, error: Exception) -> None:
        """Log a render failure."""

        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "render_error",
            "request_id": request_id,
            "input": {"source": source},
            "error": {
                "type": type(error).__name__,
                "message": str(error),
            }
        }

        self.logger.error(f"Render Error: {source} - {error}")
        self._write(log_entry)


# Global logger instance
_global_logger: RenderLogger | None = None


def get_logger(log_dir: Path | None = None, enable_file_logging: bool = True) -> RenderLogger:
    """Get or create the global render logger."""
    global _global_logger

    if _global_logger is None:
        _global_logger = RenderLogger(log_dir=log_dir, enable_file_logging=enable_file_logging)

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = None
