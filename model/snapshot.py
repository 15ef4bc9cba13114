# model/snapshot.py
from typing import Dict
from pydantic import BaseModel, Field

BucketEntries = Dict[str, str]


class Snapshot(BaseModel):
    """
    Full contents of one store at scan time.

    `buckets` maps bucket name -> {hex(key): value text}. Built in one piece
    per extraction and never reused.
    """

    path: str
    buckets: Dict[str, BucketEntries] = Field(default_factory=dict)
