from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class Segment(BaseModel):
    """One marker/length segment. The payload is consumed but not kept."""
    model_config = ConfigDict(frozen=True)

    type: int = Field(..., ge=0, le=0xFFFF)
    # counts its own two bytes; 0 and 1 are accepted with no payload
    length: int = Field(..., ge=0, le=0xFFFF)

    @property
    def payload_length(self) -> int:
        return max(self.length - 2, 0)

    def render(self) -> str:
        return f"Type={self.type:X}\nLen={self.length}"
