"""Data models for the VAF chart."""

from vafchart.models.chart_input import ChartInput
from vafchart.models.coverage import CoverageInformation, ProfileEntry, SampleCoverage
from vafchart.models.mutation import MutationRecord
from vafchart.models.render import (
    ChartRendering,
    MutationStatus,
    RenderData,
    RenderLine,
    RenderPoint,
    YAxisLayout,
)
from vafchart.models.sample import Sample

__all__ = [
    "Sample",
    "MutationRecord",
    "ProfileEntry",
    "SampleCoverage",
    "CoverageInformation",
    "MutationStatus",
    "RenderPoint",
    "RenderLine",
    "RenderData",
    "YAxisLayout",
    "ChartRendering",
    "ChartInput",
]
