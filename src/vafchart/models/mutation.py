"""Mutation call models."""

from pydantic import BaseModel, ConfigDict, Field

from vafchart.constants import UNCALLED_MUTATION_STATUS


class MutationRecord(BaseModel):
    """One mutation call for one sample in one molecular profile.

    VAF is derived from the tumor read counts when both are present. Records
    tagged ``uncalled`` had supporting reads but were not formally called.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hugo_gene_symbol": "TP53",
                "protein_change": "R248Q",
                "sample_id": "P-0001-T01",
                "unique_sample_key": "UC0wMDAxLVQwMTpzdHVkeQ",
                "molecular_profile_id": "msk_impact_mutations",
                "tumor_alt_count": 42,
                "tumor_ref_count": 158,
            }
        },
    )

    hugo_gene_symbol: str = Field(..., description="Gene symbol (e.g., TP53)")
    protein_change: str = Field(..., description="Protein change label (e.g., R248Q)")
    sample_id: str = Field(..., description="Sample carrying the mutation")
    unique_sample_key: str = Field(..., description="Unique key of the sample")
    patient_id: str | None = Field(None, description="Owning patient identifier")
    study_id: str | None = Field(None, description="Owning study identifier")
    molecular_profile_id: str = Field(..., description="Molecular profile the call belongs to")
    mutation_status: str | None = Field(None, description="Raw status tag (e.g., uncalled)")
    tumor_alt_count: int | None = Field(None, ge=0, description="Reads supporting the variant")
    tumor_ref_count: int | None = Field(None, ge=0, description="Reads supporting the reference")

    # Genomic event
    chromosome: str | None = Field(None, description="Chromosome")
    start_position: int | None = Field(None, description="Start position")
    end_position: int | None = Field(None, description="End position")
    reference_allele: str | None = Field(None, description="Reference allele")
    variant_allele: str | None = Field(None, description="Variant allele")

    @property
    def vaf(self) -> float | None:
        """Variant allele frequency, or None when a read count is missing."""
        if self.tumor_alt_count is None or self.tumor_ref_count is None:
            return None
        depth = self.tumor_alt_count + self.tumor_ref_count
        if depth == 0:
            return None
        return self.tumor_alt_count / depth

    @property
    def is_uncalled(self) -> bool:
        return (self.mutation_status or "").lower() == UNCALLED_MUTATION_STATUS

    def _event(self) -> list[str]:
        return [
            "" if value is None else str(value)
            for value in (
                self.chromosome,
                self.start_position,
                self.end_position,
                self.reference_allele,
                self.variant_allele,
            )
        ]

    @property
    def position_key(self) -> str:
        """Identity of the mutation position, shared by every sample carrying it."""
        return "_".join([self.hugo_gene_symbol, self.protein_change, *self._event()])

    @property
    def sample_mutation_key(self) -> str:
        """Identity of this single record."""
        return "_".join([self.hugo_gene_symbol, self.protein_change, self.sample_id, *self._event()])
