"""Render data models consumed by the chart drawing layer."""

from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field, field_validator

from vafchart.models.mutation import MutationRecord
from vafchart.utils.scale import y_value_scale_function


class MutationStatus(str, Enum):
    """Status of one sample at one mutation position.

    MUTATED_WITH_VAF: called mutation with read counts (real point)
    PROFILED_WITH_READS_BUT_UNCALLED: reads seen but not called (real point)
    MUTATED_BUT_NO_VAF: called mutation without read counts (uncertain)
    NOT_PROFILED: no call, gene not profiled in the sample (uncertain)
    PROFILED_BUT_NOT_MUTATED: no call, gene profiled, so VAF is zero (real point)
    """

    MUTATED_WITH_VAF = "mutated_with_vaf"
    PROFILED_WITH_READS_BUT_UNCALLED = "profiled_with_reads_but_uncalled"
    MUTATED_BUT_NO_VAF = "mutated_but_no_vaf"
    NOT_PROFILED = "not_profiled"
    PROFILED_BUT_NOT_MUTATED = "profiled_but_not_mutated"

    @property
    def is_real(self) -> bool:
        """Whether the status yields a line point."""
        return self in REAL_STATUSES

    @property
    def has_observed_vaf(self) -> bool:
        return self in OBSERVED_STATUSES


OBSERVED_STATUSES = frozenset(
    {MutationStatus.MUTATED_WITH_VAF, MutationStatus.PROFILED_WITH_READS_BUT_UNCALLED}
)
REAL_STATUSES = OBSERVED_STATUSES | {MutationStatus.PROFILED_BUT_NOT_MUTATED}


class RenderPoint(BaseModel):
    """A point placed on the timeline.

    ``x`` is the sample's index in the master sample ordering, independent of
    grouping. ``mutation`` is None for synthetic points.
    """

    x: int = Field(..., ge=0, description="Sample order index")
    y: float = Field(..., description="VAF as a fraction")
    sample_id: str
    status: MutationStatus
    position_key: str = Field(..., description="Identity of the mutation position")
    group: str | None = Field(None, description="Group label of the series")
    mutation: MutationRecord | None = None


class RenderLine(BaseModel):
    """Connected points for one mutation position within one sample group."""

    position_key: str
    group: str | None = None
    points: list[RenderPoint] = Field(..., min_length=1)

    @field_validator("points")
    @classmethod
    def validate_points(cls, v: list[RenderPoint]) -> list[RenderPoint]:
        """Line points must be real and strictly increasing in x."""
        for point in v:
            if not point.status.is_real:
                raise ValueError(f"Status '{point.status.value}' cannot be part of a line")
        for previous, current in zip(v, v[1:]):
            if current.x <= previous.x:
                raise ValueError(f"Line points must be strictly increasing in x, got {previous.x} then {current.x}")
        return v

    @property
    def sample_ids(self) -> list[str]:
        return [point.sample_id for point in self.points]


class RenderData(BaseModel):
    """Everything the timeline needs to draw mutation series."""

    line_data: list[RenderLine] = Field(default_factory=list)
    gray_points: list[RenderPoint] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.line_data and not self.gray_points

    def lines_by_key(self) -> dict[tuple[str, str | None], RenderLine]:
        """Index lines by (position key, group)."""
        return {(line.position_key, line.group): line for line in self.line_data}

    def all_points(self) -> list[RenderPoint]:
        return [point for line in self.line_data for point in line.points] + list(self.gray_points)

    def status_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for point in self.all_points():
            counts[point.status.value] = counts.get(point.status.value, 0) + 1
        return counts


class YAxisLayout(BaseModel):
    """Y axis range, tickmarks and labels for one rendering."""

    min_y: float
    max_y: float
    pixel_height: float
    use_log_scale: bool = False
    tickmarks: list[float] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)

    def scale(self) -> Callable[[float], float]:
        return y_value_scale_function(self.min_y, self.max_y, self.pixel_height, self.use_log_scale)

    def to_pixel(self, value: float) -> float:
        """Pixel y coordinate of a domain value."""
        return self.scale()(value)


def _pixel_row(point: RenderPoint, pixel_y: float, line_index: int | None) -> dict:
    return {
        "line": line_index,
        "sample_id": point.sample_id,
        "x": point.x,
        "y": point.y,
        "pixel_y": pixel_y,
        "status": point.status.value,
    }


class ChartRendering(BaseModel):
    """Render data together with the axis it is drawn against."""

    render_data: RenderData
    y_axis: YAxisLayout

    def pixel_points(self) -> list[dict]:
        """Every point with its pixel y coordinate, for the drawing layer."""
        scale = self.y_axis.scale()
        rows = []
        for line_index, line in enumerate(self.render_data.line_data):
            for point in line.points:
                rows.append(_pixel_row(point, scale(point.y), line_index))
        for point in self.render_data.gray_points:
            rows.append(_pixel_row(point, scale(point.y), None))
        return rows

    def to_report(self) -> str:
        """Simple report output."""
        report = f"\nLines: {len(self.render_data.line_data)} | Gray points: {len(self.render_data.gray_points)}\n"
        scale_name = "log10" if self.y_axis.use_log_scale else "linear"
        report += f"Y axis ({scale_name}): {self.y_axis.min_y} to {self.y_axis.max_y}\n"
        report += f"Ticks: {', '.join(self.y_axis.labels)}\n"

        counts = self.render_data.status_counts()
        if counts:
            report += "\nPoints by status:\n"
            for status, count in sorted(counts.items()):
                report += f"  {status}: {count}\n"

        return report
