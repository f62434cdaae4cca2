"""Sequencing coverage models.

A sample's coverage for one molecular profile is split into four partitions:

- ``all_genes``: profiled at whole-profile granularity
- ``by_gene``: profiled gene by gene (gene panels)
- ``not_profiled_all_genes``: explicitly not profiled for the whole profile
- ``not_profiled_by_gene``: explicitly not profiled for individual genes

Absence of a mutation call only means "zero VAF" when the sample was profiled
for the gene. Otherwise the value is unknown.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileEntry(BaseModel):
    """A profiled / not-profiled fact for one sample in one molecular profile."""

    model_config = ConfigDict(frozen=True)

    molecular_profile_id: str
    profiled: bool = True
    sample_id: str | None = None
    unique_sample_key: str | None = None
    patient_id: str | None = None
    study_id: str | None = None


def _mentions(entries: list[ProfileEntry], molecular_profile_id: str) -> bool:
    return any(entry.molecular_profile_id == molecular_profile_id for entry in entries)


class SampleCoverage(BaseModel):
    """Coverage facts for one sample, across molecular profiles."""

    all_genes: list[ProfileEntry] = Field(default_factory=list)
    by_gene: dict[str, list[ProfileEntry]] = Field(default_factory=dict)
    not_profiled_all_genes: list[ProfileEntry] = Field(default_factory=list)
    not_profiled_by_gene: dict[str, list[ProfileEntry]] = Field(default_factory=dict)

    @field_validator("by_gene", "not_profiled_by_gene", mode="before")
    @classmethod
    def wrap_single_entries(cls, v: Any) -> Any:
        """Accept a single entry per gene as well as a list."""
        if isinstance(v, dict):
            return {
                gene: entries if isinstance(entries, list) else [entries]
                for gene, entries in v.items()
            }
        return v

    def is_profiled_in(self, molecular_profile_id: str) -> bool:
        """Whether any gene of the sample was profiled in the profile."""
        if _mentions(self.all_genes, molecular_profile_id):
            return True
        return any(_mentions(entries, molecular_profile_id) for entries in self.by_gene.values())

    def is_excluded_from(self, molecular_profile_id: str) -> bool:
        """Whether the sample is not profiled at all in the profile.

        Samples with only gene-level not-profiled facts stay in the chart, they
        are uncertain for those genes rather than absent.
        """
        if self.is_profiled_in(molecular_profile_id):
            return False
        return not any(
            _mentions(entries, molecular_profile_id)
            for entries in self.not_profiled_by_gene.values()
        )

    def is_profiled_for_gene(self, molecular_profile_id: str, gene: str) -> bool:
        if _mentions(self.not_profiled_by_gene.get(gene, []), molecular_profile_id):
            return False
        return _mentions(self.all_genes, molecular_profile_id) or _mentions(
            self.by_gene.get(gene, []), molecular_profile_id
        )


class CoverageInformation(BaseModel):
    """Coverage facts for every sample, keyed by unique sample key."""

    samples: dict[str, SampleCoverage] = Field(default_factory=dict)

    def for_sample(self, unique_sample_key: str) -> SampleCoverage | None:
        return self.samples.get(unique_sample_key)
