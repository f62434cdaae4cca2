"""Inbound data bundle for one chart rendering."""

from pydantic import BaseModel, Field, model_validator

from vafchart.constants import GROUP_BY_NONE
from vafchart.models.coverage import CoverageInformation
from vafchart.models.mutation import MutationRecord
from vafchart.models.sample import Sample


class ChartInput(BaseModel):
    """Samples, mutations and coverage for one patient timeline.

    ``mutations`` holds one list of records per mutation position. When
    ``sample_id_index`` is omitted the order of ``samples`` is the x order.
    """

    samples: list[Sample]
    mutations: list[list[MutationRecord]] = Field(default_factory=list)
    molecular_profile_id: str
    coverage: CoverageInformation = Field(default_factory=CoverageInformation)
    group_by: str = Field(GROUP_BY_NONE, description="Clinical attribute to group samples by")
    sample_groups: dict[str, str] = Field(default_factory=dict, description="Sample id to group label")
    sample_id_index: dict[str, int] = Field(default_factory=dict)

    @model_validator(mode="after")
    def default_sample_order(self) -> "ChartInput":
        if not self.sample_id_index:
            self.sample_id_index = {sample.sample_id: i for i, sample in enumerate(self.samples)}
        return self
