from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field
from typing import List, Union
from .segment import Segment


class Document(BaseModel):
    segments: List[Segment] = Field(default_factory=list)
    consumed: int = Field(0, ge=0)

    @property
    def terminal(self) -> Segment | None:
        return self.segments[-1] if self.segments else None

    # Convenience constructors over the binary layer
    @classmethod
    def from_binary(cls, data: Union[bytes, bytearray, str, Path]) -> "Document":
        from ..binary.reader import parse_bytes
        return parse_bytes(data)

    def to_binary(self, *, fill: int = 0x00) -> bytes:
        from ..binary.writer import write_document
        return write_document(self, fill=fill)
