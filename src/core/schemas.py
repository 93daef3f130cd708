from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class ItemFrequency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Normalized item name")
    count: int = Field(ge=0, description="Number of occurrences")


class BackupDocument(BaseModel):
    header: str
    separator: str
    items: List[ItemFrequency] = Field(default_factory=list)

    def as_dict(self) -> dict:
        return {item.name: item.count for item in self.items}


def try_validate_item(name: str, count: object) -> Optional[ItemFrequency]:
    """Validate one parsed backup entry.

    Returns an ItemFrequency or None if validation fails.
    """
    try:
        return ItemFrequency.model_validate({"name": name, "count": count})
    except ValueError:
        return None
