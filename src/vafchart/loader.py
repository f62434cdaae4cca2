"""Loading of chart input files.

Input files are JSON objects matching ChartInput: samples, per-position
mutation lists, the molecular profile, coverage and optional grouping.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from vafchart.models.chart_input import ChartInput

logger = logging.getLogger(__name__)


def load_chart_input(path: str | Path) -> ChartInput:
    """Load a chart input from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Validated chart input

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If JSON is invalid or does not match the schema
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Chart input file not found: {path}")

    logger.info(f"Loading chart input from {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in chart input file: {str(e)}")

    if not isinstance(data, dict):
        raise ValueError("Invalid chart input format: expected a JSON object")

    try:
        chart_input = ChartInput(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid chart input: {str(e)}")

    logger.info(
        f"Loaded {len(chart_input.samples)} samples and {len(chart_input.mutations)} mutation positions"
    )
    return chart_input
