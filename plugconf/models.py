from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class MergeRequest(BaseModel):
    requested: Optional[str] = Field(default=None, description="Comma separated extension names")
    defaults: List[str] = Field(default_factory=list, description="Built-in defaults, in order")
    available: Optional[List[str]] = Field(
        default=None,
        description="Registered extension names; None means every default exists",
    )

    def extension_exists(self, name: str) -> bool:
        return self.available is None or name in self.available


class MergeResult(BaseModel):
    names: List[str]


class PropertyValue(BaseModel):
    key: str
    value: Optional[str] = None


class PropertiesBody(BaseModel):
    properties: Dict[str, str] = Field(default_factory=dict)
