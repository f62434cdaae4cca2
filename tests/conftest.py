"""Pytest configuration and fixtures."""

import pytest

PROFILE_ID = "mutations"


@pytest.fixture
def make_sample():
    """Factory for samples numbered like the timeline (sample1, sample2, ...)."""
    from vafchart.models.sample import Sample

    def _make(i: int) -> Sample:
        return Sample(
            sample_id=f"sample{i}",
            unique_sample_key=f"uniqueKey{i}",
            patient_id="patient",
            study_id="study",
        )

    return _make


@pytest.fixture
def make_mutation():
    """Factory for mutation records; vaf_percent=None leaves read counts out."""
    from vafchart.models.mutation import MutationRecord

    def _make(
        sample_i: int,
        gene: str,
        protein_change: str,
        vaf_percent: int | None = None,
        mutation_status: str = "",
    ) -> MutationRecord:
        return MutationRecord(
            hugo_gene_symbol=gene,
            protein_change=protein_change,
            sample_id=f"sample{sample_i}",
            unique_sample_key=f"uniqueKey{sample_i}",
            patient_id="patient",
            study_id="study",
            molecular_profile_id=PROFILE_ID,
            mutation_status=mutation_status,
            tumor_alt_count=vaf_percent,
            tumor_ref_count=None if vaf_percent is None else 100 - vaf_percent,
            chromosome="1",
            start_position=0,
            end_position=0,
            reference_allele="",
            variant_allele="",
        )

    return _make


@pytest.fixture
def make_coverage():
    """Factory for coverage: profiled samples, samples not profiled at all,
    and samples not profiled for specific genes."""
    from vafchart.models.coverage import CoverageInformation, ProfileEntry, SampleCoverage

    def _entry(i: int, profiled: bool) -> ProfileEntry:
        return ProfileEntry(
            molecular_profile_id=PROFILE_ID,
            profiled=profiled,
            sample_id=f"sample{i}",
            unique_sample_key=f"uniqueKey{i}",
            patient_id="patient",
            study_id="study",
        )

    def _make(
        profiled: list[int],
        unprofiled: list[int],
        unprofiled_by_gene: dict[int, list[str]] | None = None,
    ) -> CoverageInformation:
        samples = {}
        for i in profiled:
            samples[f"uniqueKey{i}"] = SampleCoverage(all_genes=[_entry(i, True)])
        for i in unprofiled:
            samples[f"uniqueKey{i}"] = SampleCoverage(not_profiled_all_genes=[_entry(i, False)])
        for i, genes in (unprofiled_by_gene or {}).items():
            samples[f"uniqueKey{i}"] = SampleCoverage(
                not_profiled_by_gene={gene: _entry(i, False) for gene in genes}
            )
        return CoverageInformation(samples=samples)

    return _make


@pytest.fixture
def three_samples(make_sample):
    return [make_sample(1), make_sample(2), make_sample(3)]


@pytest.fixture
def sample_id_index():
    return {"sample1": 0, "sample2": 1, "sample3": 2, "sample4": 3}


@pytest.fixture
def chart_input_data():
    """Chart input as it appears in a JSON file."""
    def sample(i):
        return {
            "sample_id": f"sample{i}",
            "unique_sample_key": f"uniqueKey{i}",
            "patient_id": "patient",
            "study_id": "study",
        }

    def mutation(i, vaf_percent=None):
        return {
            "hugo_gene_symbol": "TP53",
            "protein_change": "R248Q",
            "sample_id": f"sample{i}",
            "unique_sample_key": f"uniqueKey{i}",
            "molecular_profile_id": PROFILE_ID,
            "tumor_alt_count": vaf_percent,
            "tumor_ref_count": None if vaf_percent is None else 100 - vaf_percent,
        }

    return {
        "samples": [sample(1), sample(2), sample(3)],
        "mutations": [[mutation(1, 20), mutation(2), mutation(3, 15)]],
        "molecular_profile_id": PROFILE_ID,
        "coverage": {
            "samples": {
                f"uniqueKey{i}": {"all_genes": [{"molecular_profile_id": PROFILE_ID}]}
                for i in (1, 2, 3)
            }
        },
    }
