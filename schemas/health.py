# schemas/health.py
from pydantic import BaseModel, ConfigDict, Field


class CapabilitiesOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    supports_hint1: bool = Field(alias="supportsHint1")
    forced: bool = False


class SchemaHealthOut(BaseModel):
    ok: bool
    capabilities: CapabilitiesOut
