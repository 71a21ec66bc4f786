from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .cursor import Cursor

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    remainder: Cursor

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    remainder: the cursor the failing combinator chooses to report
      (the original input for bind/map/alternate, the last reached cursor for times).
    attempted_at: where the last failing primitive attempt failed.
    """
    remainder: Cursor
    attempted_at: Cursor

    @property
    def success(self) -> bool:
        return False

    @classmethod
    def at(cls, cur: Cursor) -> "Failure":
        return cls(remainder=cur, attempted_at=cur)

    def reanchor(self, cur: Cursor) -> "Failure":
        return Failure(remainder=cur, attempted_at=self.attempted_at)


Outcome = Union[Success[T], Failure]

# any callable Cursor -> Outcome; no base class
Parser = Callable[[Cursor], Outcome[T]]
