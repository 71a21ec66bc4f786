from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from .codecs.segments import DOCUMENT, GrammarConfig, build_document
from .cursor import Cursor
from .outcome import Failure

from bparse.models.document import Document
from bparse.models.segment import Segment

logger = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ParseError(ValueError):
    """The grammar rejected the input. Carries the failure outcome, nothing more."""

    def __init__(self, outcome: Failure):
        super().__init__("parse failed")
        self.outcome = outcome


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    data = p.read_bytes()
    logger.debug("loaded %d bytes from %s", len(data), p)
    return data


# -----------------------------
# Full parse
# -----------------------------

def parse_bytes(data: BytesLike, config: Optional[GrammarConfig] = None) -> Document:
    """
    Wrap the whole buffer in a Cursor, apply the document grammar and
    build a Document. Any failure raises ParseError.
    """
    raw = load_bytes(data)
    grammar = DOCUMENT if config is None else build_document(config)
    res = grammar(Cursor.over(raw))
    if not res.success:
        logger.debug(
            "document rejected: reported at %d, attempted at %d (of %d bytes)",
            res.remainder.tell(), res.attempted_at.tell(), len(raw),
        )
        raise ParseError(res)

    doc = Document(segments=list(res.value), consumed=res.remainder.tell())
    logger.debug("parsed %d segments, consumed %d of %d bytes", len(doc.segments), doc.consumed, len(raw))
    return doc


def parse_file(path: Union[str, Path], config: Optional[GrammarConfig] = None) -> Document:
    return parse_bytes(Path(path), config)


def iter_segments(data: BytesLike, config: Optional[GrammarConfig] = None) -> Iterator[Segment]:
    """Segments in file order, terminal last. The whole document is parsed first."""
    yield from parse_bytes(data, config).segments
