from pydantic import BaseModel, ConfigDict, Field


class GeoKey(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    label: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class Candidate(BaseModel):
    label: str
    score: float


class RankedResult(BaseModel):
    label: str
    distance: float
