"""Render data synthesis for the VAF timeline chart.

ARCHITECTURE:
    Samples + Mutations + Coverage → (SampleGroupSplitter) → per-series classification → RenderData → YAxisLayout

For every mutation position (and every sample group within it when grouping is
active) the engine classifies each sample, keeps the range between the first
and last observed VAF, draws real points as one line and estimates uncertain
samples as gray points halfway between their real neighbours.

Key Design:
- Pure functions over immutable snapshots, nothing is cached between calls
- x is the sample's index in the master ordering, whatever the grouping
- Leading and trailing gaps are never filled or estimated
- Unknown samples and missing coverage exclude data instead of raising
"""

import bisect
import logging

from vafchart.classifier import SampleSlot, classify_sample
from vafchart.constants import DEFAULT_NUM_TICKS, DEFAULT_PLOT_HEIGHT_PX, GROUP_BY_NONE
from vafchart.grouping import is_grouping_active, split_mutations_by_sample_group
from vafchart.models.chart_input import ChartInput
from vafchart.models.coverage import CoverageInformation
from vafchart.models.mutation import MutationRecord
from vafchart.models.render import ChartRendering, RenderData, RenderLine, RenderPoint, YAxisLayout
from vafchart.models.sample import Sample
from vafchart.utils.ticks import (
    ceil10,
    floor10,
    get_y_axis_tickmarks,
    minimal_distinct_tick_strings,
    num_leading_decimal_zeros,
    round10,
)

logger = logging.getLogger(__name__)


def _order_samples(samples: list[Sample], sample_id_index: dict[str, int]) -> list[tuple[int, Sample]]:
    ordered = []
    for sample in samples:
        x = sample_id_index.get(sample.sample_id)
        if x is None:
            logger.debug(f"Sample {sample.sample_id} has no order index, skipping")
            continue
        ordered.append((x, sample))
    ordered.sort(key=lambda item: item[0])

    # One sample per x; the first listed wins
    unique: list[tuple[int, Sample]] = []
    for x, sample in ordered:
        if unique and unique[-1][0] == x:
            logger.debug(f"Sample {sample.sample_id} shares x={x} with {unique[-1][1].sample_id}, skipping")
            continue
        unique.append((x, sample))
    return unique


def _to_point(x: int, slot: SampleSlot, y: float, position_key: str, group: str | None) -> RenderPoint:
    return RenderPoint(
        x=x,
        y=y,
        sample_id=slot.sample.sample_id,
        status=slot.status,
        position_key=position_key,
        group=group,
        mutation=slot.mutation,
    )


def synthesize_series(
    series: list[MutationRecord],
    ordered_samples: list[tuple[int, Sample]],
    molecular_profile_id: str,
    coverage: CoverageInformation,
    group: str | None = None,
    sample_to_group: dict[str, str] | None = None,
) -> tuple[RenderLine | None, list[RenderPoint]]:
    """Build the line and gray points of one series.

    Args:
        series: Records of one mutation position (one group bucket when grouped)
        ordered_samples: (x, sample) pairs in master order
        molecular_profile_id: Profile the chart is drawn for
        coverage: Coverage facts for all samples
        group: Group label of the series, when grouping is active
        sample_to_group: Sample id to group label; restricts the sample universe when given

    Returns:
        The line (None when no sample has an observed VAF) and the gray points
    """
    first = series[0]
    position_key = first.position_key

    if sample_to_group is not None:
        universe = [(x, s) for x, s in ordered_samples if sample_to_group.get(s.sample_id) == group]
    else:
        universe = ordered_samples

    known_ids = {sample.sample_id for _, sample in universe}
    mutation_by_sample: dict[str, MutationRecord] = {}
    for mutation in series:
        if mutation.sample_id not in known_ids:
            logger.debug(f"Ignoring {mutation.sample_mutation_key}: sample not in series")
            continue
        if mutation.sample_id in mutation_by_sample:
            logger.debug(f"Ignoring duplicate record {mutation.sample_mutation_key}")
            continue
        mutation_by_sample[mutation.sample_id] = mutation

    slots: list[tuple[int, SampleSlot]] = []
    for x, sample in universe:
        slot = classify_sample(
            sample,
            first.hugo_gene_symbol,
            mutation_by_sample.get(sample.sample_id),
            coverage,
            molecular_profile_id,
        )
        if slot is not None:
            slots.append((x, slot))

    observed = [i for i, (_, slot) in enumerate(slots) if slot.status.has_observed_vaf]
    if not observed:
        return None, []

    line_points: list[RenderPoint] = []
    candidates: list[tuple[int, SampleSlot]] = []
    for x, slot in slots[observed[0]:observed[-1] + 1]:
        if slot.status.is_real:
            line_points.append(_to_point(x, slot, slot.vaf or 0.0, position_key, group))
        else:
            candidates.append((x, slot))

    # Gray points sit halfway between the nearest real neighbours
    line_xs = [point.x for point in line_points]
    gray_points = []
    for x, slot in candidates:
        right = bisect.bisect_right(line_xs, x)
        if right == 0 or right == len(line_points):
            continue
        y = (line_points[right - 1].y + line_points[right].y) / 2
        gray_points.append(_to_point(x, slot, y, position_key, group))

    return RenderLine(position_key=position_key, group=group, points=line_points), gray_points


def compute_render_data(
    samples: list[Sample],
    mutations: list[list[MutationRecord]],
    sample_id_index: dict[str, int],
    molecular_profile_id: str,
    coverage: CoverageInformation,
    group_by: str = GROUP_BY_NONE,
    sample_to_group: dict[str, str] | None = None,
) -> RenderData:
    """Compute lines and gray points for every mutation position.

    When grouping is active every position is split by sample group first.
    Positions already split by group are split again without change.

    Args:
        samples: Samples of the timeline
        mutations: One list of records per mutation position
        sample_id_index: Sample id to x position
        molecular_profile_id: Profile the chart is drawn for
        coverage: Coverage facts keyed by unique sample key
        group_by: Clinical attribute the samples are grouped by, or GROUP_BY_NONE
        sample_to_group: Sample id to group label

    Returns:
        RenderData with one line per series that has an observed VAF
    """
    grouping = is_grouping_active(group_by)
    sample_to_group = sample_to_group or {}
    ordered_samples = _order_samples(samples, sample_id_index)

    if grouping:
        series_list = split_mutations_by_sample_group(mutations, sample_to_group)
    else:
        series_list = mutations

    render_data = RenderData()
    for series in series_list:
        if not series:
            continue
        if grouping:
            group = sample_to_group.get(series[0].sample_id)
            line, gray_points = synthesize_series(
                series, ordered_samples, molecular_profile_id, coverage, group, sample_to_group
            )
        else:
            line, gray_points = synthesize_series(series, ordered_samples, molecular_profile_id, coverage)

        if line is not None:
            render_data.line_data.append(line)
        render_data.gray_points.extend(gray_points)

    logger.debug(
        f"Rendered {len(render_data.line_data)} lines and {len(render_data.gray_points)} gray points "
        f"from {len(series_list)} series"
    )
    return render_data


def _one_significant_decimal(value: float) -> int:
    return -(num_leading_decimal_zeros(value) + 1)


def compute_y_axis_layout(
    render_data: RenderData,
    pixel_height: float = DEFAULT_PLOT_HEIGHT_PX,
    use_log_scale: bool = False,
    num_ticks: int | None = DEFAULT_NUM_TICKS,
) -> YAxisLayout:
    """Derive the y axis range, ticks and labels from the points to draw.

    The top of the axis is the largest y rounded up to one significant
    decimal, capped at 1. The bottom is 0. Under log scale with no zero
    VAF it is the smallest y rounded down the same way, one decade lower
    when that would meet the top.
    """
    ys = [point.y for point in render_data.all_points()]
    top = max(ys, default=0.0)
    max_y = min(1.0, ceil10(top, _one_significant_decimal(top))) if top > 0 else 1.0

    min_y = 0.0
    positives = [y for y in ys if y > 0]
    # Zero VAFs keep the bottom at 0, which the log scale floors
    if use_log_scale and positives and len(positives) == len(ys):
        low = min(positives)
        exponent = _one_significant_decimal(low)
        min_y = floor10(low, exponent)
        if min_y >= max_y:
            min_y = round10(min_y / 10, exponent - 1)

    tickmarks = get_y_axis_tickmarks(min_y, max_y, num_ticks)
    return YAxisLayout(
        min_y=min_y,
        max_y=max_y,
        pixel_height=pixel_height,
        use_log_scale=use_log_scale,
        tickmarks=tickmarks,
        labels=minimal_distinct_tick_strings(tickmarks),
    )


class ChartEngine:
    """
    Engine for VAF timeline rendering.

    Holds the drawing settings; every call to render() is independent.
    """

    def __init__(
        self,
        pixel_height: float = DEFAULT_PLOT_HEIGHT_PX,
        use_log_scale: bool = False,
        num_ticks: int | None = DEFAULT_NUM_TICKS,
    ):
        self.pixel_height = pixel_height
        self.use_log_scale = use_log_scale
        self.num_ticks = num_ticks

    def render(self, chart_input: ChartInput) -> ChartRendering:
        """Compute render data and the matching y axis for one chart."""
        render_data = compute_render_data(
            samples=chart_input.samples,
            mutations=chart_input.mutations,
            sample_id_index=chart_input.sample_id_index,
            molecular_profile_id=chart_input.molecular_profile_id,
            coverage=chart_input.coverage,
            group_by=chart_input.group_by,
            sample_to_group=chart_input.sample_groups,
        )
        y_axis = compute_y_axis_layout(
            render_data,
            pixel_height=self.pixel_height,
            use_log_scale=self.use_log_scale,
            num_ticks=self.num_ticks,
        )
        return ChartRendering(render_data=render_data, y_axis=y_axis)
