from __future__ import annotations
from typing import Callable

from .combinators import bind, not_followed_by
from .cursor import Cursor
from .outcome import Failure, Outcome, Parser, Success


def byte_matching(predicate: Callable[[int], bool]) -> Parser[int]:
    """The only parser that reads the buffer: one byte, or nothing on failure."""
    def parse(cur: Cursor) -> Outcome[int]:
        if cur.at_end() or not predicate(cur.current()):
            return Failure.at(cur)
        return Success(cur.current(), cur.advance())
    return parse


def byte_equal_to(expected: int) -> Parser[int]:
    if not (0 <= expected <= 0xFF): raise ValueError(f"byte out of range: {expected}")
    return byte_matching(lambda b: b == expected)


any_byte: Parser[int] = byte_matching(lambda _: True)

# big-endian u16
word: Parser[int] = bind(any_byte, lambda _hi: any_byte, lambda hi, lo: (hi << 8) | lo)


def word_matching(predicate: Callable[[int], bool]) -> Parser[int]:
    def parse(cur: Cursor) -> Outcome[int]:
        res = word(cur)
        if not res.success:
            return res.reanchor(cur)
        if not predicate(res.value):
            return Failure.at(cur)
        return res
    return parse


def word_equal_to(expected: int) -> Parser[int]:
    """
    Match a fixed u16 as two single-byte matches (high, then low), so a
    mismatch on the second byte is visible in Failure.attempted_at.
    """
    if not (0 <= expected <= 0xFFFF): raise ValueError(f"word out of range: {expected}")
    hi, lo = expected >> 8, expected & 0xFF
    return bind(byte_equal_to(hi), lambda _: byte_equal_to(lo), lambda _a, _b: expected)


end_of_input: Parser[None] = not_followed_by(any_byte)
