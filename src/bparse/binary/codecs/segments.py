"""
Sample grammar: a start marker, any number of marker/length segments and a
terminal segment.

    FF D8                      start marker
    FF xx LL LL <LLLL-2 bytes> generic segment (xx != DA)
    FF DA LL LL <LLLL-2 bytes> terminal segment, always last

Grammar values are built once from GrammarConfig via build_*() factories;
the module-level parsers use the default markers.
"""
from __future__ import annotations
from typing import Tuple
from pydantic import BaseModel, Field, model_validator

from ..combinators import appended, bind, many, times
from ..outcome import Parser
from ..primitives import any_byte, byte_equal_to, end_of_input, word, word_equal_to, word_matching
from ...models.segment import Segment


class Marker:
    START = 0xFFD8
    TERMINAL = 0xFFDA


class GrammarConfig(BaseModel):
    start_marker: int = Field(Marker.START, ge=0, le=0xFFFF)
    terminal_marker: int = Field(Marker.TERMINAL, ge=0, le=0xFFFF)
    require_end: bool = False  # reject trailing bytes after the terminal segment

    @model_validator(mode="after")
    def _markers_differ(self) -> "GrammarConfig":
        if self.start_marker == self.terminal_marker:
            raise ValueError("start and terminal markers must differ")
        return self


def build_start_marker(marker: int = Marker.START) -> Parser[int]:
    hi, lo = marker >> 8, marker & 0xFF
    return bind(byte_equal_to(hi), lambda _: byte_equal_to(lo), lambda _a, _b: marker)


def _payload(length: int) -> Parser[Tuple[int, ...]]:
    # length includes its own two bytes; 0 and 1 mean an empty payload
    return times(any_byte, max(length - 2, 0))


def _segment(marker_parser: Parser[int]) -> Parser[Segment]:
    length_and_payload = bind(word, _payload, lambda length, _data: length)
    return bind(
        marker_parser,
        lambda _type: length_and_payload,
        lambda seg_type, length: Segment(type=seg_type, length=length),
    )


def build_generic_segment(terminal: int = Marker.TERMINAL) -> Parser[Segment]:
    return _segment(word_matching(lambda v: v != terminal))


def build_terminal_segment(terminal: int = Marker.TERMINAL) -> Parser[Segment]:
    return _segment(word_equal_to(terminal))


def build_document(config: GrammarConfig | None = None) -> Parser[Tuple[Segment, ...]]:
    cfg = config or GrammarConfig()
    start = build_start_marker(cfg.start_marker)
    generic = build_generic_segment(cfg.terminal_marker)
    terminal = build_terminal_segment(cfg.terminal_marker)
    if cfg.require_end:
        terminal = bind(terminal, lambda _: end_of_input, lambda seg, _end: seg)

    body = bind(many(generic), lambda _segs: terminal, appended)
    return bind(start, lambda _: body, lambda _marker, segs: segs)


start_marker = build_start_marker()
generic_segment = build_generic_segment()
terminal_segment = build_terminal_segment()
DOCUMENT = build_document()
