from __future__ import annotations

from typing import List
from pydantic import BaseModel

from src.core.schemas import ItemFrequency


class ItemListResponse(BaseModel):
    items: List[ItemFrequency]
    schema_version: str


class LookupResponse(BaseModel):
    query: str
    name: str
    count: int


class HistogramResponse(BaseModel):
    lines: List[str]


class HealthResponse(BaseModel):
    status: str
    items_loaded: int
    timestamp: str
