# model/api.py
from pydantic import BaseModel, ConfigDict


class DumpStoreRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    input: str


class DumpStoreResponse(BaseModel):
    # Snapshot JSON nested as a string, not inline.
    result: str
