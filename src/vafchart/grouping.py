"""Splitting of mutation positions into per sample-group series."""

from collections import OrderedDict

from vafchart.constants import GROUP_BY_NONE
from vafchart.models.mutation import MutationRecord


def is_grouping_active(group_by: str | None) -> bool:
    return group_by is not None and group_by != GROUP_BY_NONE


def split_position_by_sample_group(
    mutations: list[MutationRecord],
    sample_to_group: dict[str, str],
) -> list[list[MutationRecord]]:
    """Split one position's records into buckets by sample group label.

    Buckets appear in the order their label is first seen and keep the input
    order of their records. Samples without a label share one bucket.
    """
    buckets: OrderedDict[str | None, list[MutationRecord]] = OrderedDict()
    for mutation in mutations:
        label = sample_to_group.get(mutation.sample_id)
        buckets.setdefault(label, []).append(mutation)
    return list(buckets.values())


def split_mutations_by_sample_group(
    positions: list[list[MutationRecord]],
    sample_to_group: dict[str, str],
) -> list[list[MutationRecord]]:
    """Split every position, flattening the buckets in position order."""
    return [
        bucket
        for mutations in positions
        for bucket in split_position_by_sample_group(mutations, sample_to_group)
    ]
