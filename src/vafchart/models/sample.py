"""Sample data models."""

from pydantic import BaseModel, ConfigDict, Field


class Sample(BaseModel):
    """A sequenced sample belonging to one patient."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "sample_id": "P-0001-T01",
                "unique_sample_key": "UC0wMDAxLVQwMTpzdHVkeQ",
                "patient_id": "P-0001",
                "study_id": "msk_impact",
            }
        },
    )

    sample_id: str = Field(..., description="Sample identifier within the study")
    unique_sample_key: str = Field(..., description="Sample key unique across studies")
    patient_id: str = Field(..., description="Owning patient identifier")
    study_id: str = Field(..., description="Owning study identifier")
