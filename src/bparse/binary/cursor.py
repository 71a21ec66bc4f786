from __future__ import annotations


class Cursor:
    """
    Immutable (buffer, position) view over a read-only byte buffer.
    advance() returns a new Cursor over the same memoryview; nothing here
    copies or writes the underlying bytes.
    """
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview, pos: int = 0):
        buf = data if isinstance(data, memoryview) and data.readonly else memoryview(data).toreadonly()
        if not (0 <= pos <= len(buf)): raise ValueError(f"cursor position {pos} out of bounds 0..{len(buf)}")
        object.__setattr__(self, "buf", buf)
        object.__setattr__(self, "pos", pos)

    @classmethod
    def over(cls, data: bytes | bytearray | memoryview) -> "Cursor":
        return cls(data, 0)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cursor is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Cursor is immutable; cannot delete {name!r}")

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos
    def at_end(self) -> bool: return self.pos >= len(self.buf)

    def current(self) -> int:
        if self.at_end(): raise ValueError(f"read past end at {self.pos}")
        return self.buf[self.pos]

    def advance(self) -> "Cursor":
        if self.at_end(): raise ValueError(f"advance past end at {self.pos}")
        return Cursor(self.buf, self.pos + 1)

    # identity of the buffer, not its contents
    def __eq__(self, other):
        if not isinstance(other, Cursor): return NotImplemented
        return self.buf is other.buf and self.pos == other.pos

    def __hash__(self):
        return hash((id(self.buf), self.pos))

    def __repr__(self):
        return f"Cursor(pos={self.pos}, len={len(self.buf)})"
