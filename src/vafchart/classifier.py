"""Mutation status classification for one sample at one mutation position.

The status decides how a sample is drawn:

- A mutation record with read counts is a real point at its VAF
  (PROFILED_WITH_READS_BUT_UNCALLED when the record is tagged uncalled).
  An uncalled record without alt reads is a zero (PROFILED_BUT_NOT_MUTATED).
- A mutation record without read counts is uncertain (MUTATED_BUT_NO_VAF).
- No record and the gene was profiled means a definite zero VAF
  (PROFILED_BUT_NOT_MUTATED).
- No record and the gene was not profiled is uncertain (NOT_PROFILED).
- A sample not profiled at all in the molecular profile has no status.
"""

import logging
from typing import NamedTuple

from vafchart.models.coverage import CoverageInformation
from vafchart.models.mutation import MutationRecord
from vafchart.models.render import MutationStatus
from vafchart.models.sample import Sample

logger = logging.getLogger(__name__)


class SampleSlot(NamedTuple):
    """Classification of one sample at one position."""

    sample: Sample
    status: MutationStatus
    vaf: float | None
    mutation: MutationRecord | None


def classify_sample(
    sample: Sample,
    gene: str,
    mutation: MutationRecord | None,
    coverage: CoverageInformation,
    molecular_profile_id: str,
) -> SampleSlot | None:
    """Classify a sample at a mutation position.

    Args:
        sample: Sample to classify
        gene: Gene symbol of the position
        mutation: The sample's record at this position, if any
        coverage: Coverage facts for all samples
        molecular_profile_id: Profile the chart is drawn for

    Returns:
        The slot, or None when the sample is not profiled at all in the profile
    """
    sample_coverage = coverage.for_sample(sample.unique_sample_key)
    if sample_coverage is None or sample_coverage.is_excluded_from(molecular_profile_id):
        logger.debug(f"Sample {sample.sample_id} not profiled in {molecular_profile_id}, skipping")
        return None

    if mutation is not None:
        vaf = mutation.vaf
        if vaf is None:
            return SampleSlot(sample, MutationStatus.MUTATED_BUT_NO_VAF, None, mutation)
        if mutation.is_uncalled and not mutation.tumor_alt_count:
            return SampleSlot(sample, MutationStatus.PROFILED_BUT_NOT_MUTATED, 0.0, mutation)
        if mutation.is_uncalled:
            return SampleSlot(sample, MutationStatus.PROFILED_WITH_READS_BUT_UNCALLED, vaf, mutation)
        return SampleSlot(sample, MutationStatus.MUTATED_WITH_VAF, vaf, mutation)

    if sample_coverage.is_profiled_for_gene(molecular_profile_id, gene):
        return SampleSlot(sample, MutationStatus.PROFILED_BUT_NOT_MUTATED, 0.0, None)
    return SampleSlot(sample, MutationStatus.NOT_PROFILED, None, None)
