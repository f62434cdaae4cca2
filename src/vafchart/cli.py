"""Command-line interface for the VAF chart.

ARCHITECTURE:
    CLI Commands → loader → ChartEngine → JSON Output

Two workflows: render (chart input file to render data) and ticks (axis labels)

Key Design:
- Typer framework for auto-help and type validation
- Options fall back to VAFCHART_* environment variables (.env supported)
- Flexible I/O: stdout or JSON file output
"""

import json
from pathlib import Path
from typing import Optional
import typer
from dotenv import load_dotenv
from vafchart.constants import DEFAULT_NUM_TICKS, DEFAULT_PLOT_HEIGHT_PX
from vafchart.engine import ChartEngine
from vafchart.loader import load_chart_input
from vafchart.utils.logging_config import get_logger
from vafchart.utils.ticks import get_y_axis_tickmarks, minimal_distinct_tick_strings

load_dotenv()

app = typer.Typer(
    name="vafchart",
    help="Plot-ready data for longitudinal variant allele frequency timelines",
    add_completion=False,
)


@app.command()
def render(
    input_file: Path = typer.Argument(..., help="Chart input JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    height: float = typer.Option(DEFAULT_PLOT_HEIGHT_PX, "--height", envvar="VAFCHART_HEIGHT", help="Plot height in pixels"),
    log_scale: bool = typer.Option(False, "--log-scale/--linear", envvar="VAFCHART_LOG_SCALE", help="Log10 y axis"),
    ticks: int = typer.Option(DEFAULT_NUM_TICKS, "--ticks", envvar="VAFCHART_NUM_TICKS", help="Number of y axis ticks"),
    log: bool = typer.Option(False, "--log/--no-log", help="Enable render logging"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", envvar="VAFCHART_LOG_DIR", help="Render log directory"),
) -> None:
    """Compute lines, gray points and y axis for a chart input file."""

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}")
        raise typer.Exit(1)

    try:
        chart_input = load_chart_input(input_file)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(1)

    render_logger = get_logger(log_dir=log_dir, enable_file_logging=True) if log else None
    request_id = None
    if render_logger:
        request_id = render_logger.log_render_request(
            source=str(input_file),
            molecular_profile_id=chart_input.molecular_profile_id,
            num_samples=len(chart_input.samples),
            num_positions=len(chart_input.mutations),
            group_by=chart_input.group_by,
            use_log_scale=log_scale,
        )

    engine = ChartEngine(pixel_height=height, use_log_scale=log_scale, num_ticks=ticks)
    try:
        rendering = engine.render(chart_input)
    except Exception as e:
        if render_logger:
            render_logger.log_render_error(request_id, str(input_file), e)
        raise

    if render_logger:
        render_logger.log_render_result(
            request_id,
            num_lines=len(rendering.render_data.line_data),
            num_gray_points=len(rendering.render_data.gray_points),
            status_counts=rendering.render_data.status_counts(),
            tickmarks=rendering.y_axis.tickmarks,
        )

    output_data = rendering.model_dump(mode="json")
    output_data["pixel_points"] = rendering.pixel_points()

    if output:
        print(rendering.to_report())
        with open(output, "w") as f:
            json.dump(output_data, f, indent=2)
        print(f"Saved to {output}")
    else:
        print(json.dumps(output_data, indent=2))


@app.command()
def ticks(
    min_y: float = typer.Argument(..., help="Lower end of the axis"),
    max_y: float = typer.Argument(..., help="Upper end of the axis"),
    num_ticks: int = typer.Option(DEFAULT_NUM_TICKS, "--num-ticks", "-n", help="Number of ticks"),
) -> None:
    """Show y axis tickmarks and their labels."""
    tickmarks = get_y_axis_tickmarks(min_y, max_y, num_ticks)
    labels = minimal_distinct_tick_strings(tickmarks)
    print(" ".join(labels))


@app.command()
def version() -> None:
    """Show version information."""
    from vafchart import __version__
    print(f"VAF Chart version {__version__}")


if __name__ == "__main__":
    app()
