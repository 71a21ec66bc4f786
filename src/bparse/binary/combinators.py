"""
Combinators build new parsers out of existing ones. Building never runs
anything; the returned closure does the work when applied to a Cursor.

Failure cursors follow two policies that are kept apart on purpose:
  - map_ / bind / alternate / not_followed_by report the cursor they were given.
  - times reports the cursor reached just before the repetition that failed.
Either way Failure.attempted_at keeps the position of the last failing primitive.
"""
from __future__ import annotations
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from .cursor import Cursor
from .outcome import Failure, Outcome, Parser, Success

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def succeed(value: T) -> Parser[T]:
    def parse(cur: Cursor) -> Outcome[T]:
        return Success(value, cur)
    return parse


def fail() -> Parser[T]:
    def parse(cur: Cursor) -> Outcome[T]:
        return Failure.at(cur)
    return parse


def map_(p: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    def parse(cur: Cursor) -> Outcome[U]:
        res = p(cur)
        if not res.success:
            return res.reanchor(cur)
        return Success(f(res.value), res.remainder)
    return parse


def bind(
    p: Parser[T],
    f: Callable[[T], Parser[U]],
    g: Optional[Callable[[T, U], V]] = None,
) -> Parser[V]:
    """
    Run p, build the next parser from its value with f, run that on p's
    remainder and project both values through g (default: keep the second).
    A failure at either step is reported at the original input cursor.
    """
    def parse(cur: Cursor) -> Outcome[V]:
        first = p(cur)
        if not first.success:
            return first.reanchor(cur)
        second = f(first.value)(first.remainder)
        if not second.success:
            return second.reanchor(cur)
        value = second.value if g is None else g(first.value, second.value)
        return Success(value, second.remainder)
    return parse


def alternate(first: Parser[T], second: Parser[T], *more: Parser[T]) -> Parser[T]:
    branches = (first, second) + more

    def parse(cur: Cursor) -> Outcome[T]:
        for branch in branches[:-1]:
            res = branch(cur)
            if res.success:
                return res
        # last branch's outcome is returned untouched
        return branches[-1](cur)
    return parse


def not_followed_by(p: Parser[T]) -> Parser[None]:
    """Zero-width: succeeds with None exactly when p fails. Never consumes."""
    def parse(cur: Cursor) -> Outcome[None]:
        res = p(cur)
        if res.success:
            return Failure.at(cur)
        return Success(None, cur)
    return parse


def many(p: Parser[T]) -> Parser[Tuple[T, ...]]:
    # loop, not recursion: depth must not grow with the input
    def parse(cur: Cursor) -> Outcome[Tuple[T, ...]]:
        values = []
        rem = cur
        while True:
            res = p(rem)
            if not res.success or res.remainder == rem:
                break
            values.append(res.value)
            rem = res.remainder
        return Success(tuple(values), rem)
    return parse


def times(p: Parser[T], n: int) -> Parser[Tuple[T, ...]]:
    if n < 0: raise ValueError(f"repetition count must be non-negative, got {n}")

    def parse(cur: Cursor) -> Outcome[Tuple[T, ...]]:
        values = []
        rem = cur
        for _ in range(n):
            res = p(rem)
            if not res.success:
                return res.reanchor(rem)
            values.append(res.value)
            rem = res.remainder
        return Success(tuple(values), rem)
    return parse


def appended(items: Sequence[T], item: T) -> Tuple[T, ...]:
    return (*items, item)
