from __future__ import annotations

import logging

from .codecs.segments import Marker
from ..models.document import Document

logger = logging.getLogger(__name__)


def write_document(
    doc: Document,
    *,
    fill: int = 0x00,
    start_marker: int = Marker.START,
    terminal_marker: int = Marker.TERMINAL,
) -> bytes:
    """
    Emit a buffer the document grammar accepts: start marker, then each
    segment header followed by its payload length in fill bytes (payloads
    are not kept). The terminal segment must be last and appear only once.
    """
    if not (0 <= fill <= 0xFF):
        raise ValueError(f"fill byte out of range: {fill}")
    if not doc.segments or doc.segments[-1].type != terminal_marker:
        raise ValueError(f"document must end with a {terminal_marker:04X} segment")
    for i, seg in enumerate(doc.segments[:-1]):
        if seg.type == terminal_marker:
            raise ValueError(f"segment[{i}] uses the terminal marker {terminal_marker:04X} before the end")

    out = bytearray()
    out += start_marker.to_bytes(2, "big")
    for seg in doc.segments:
        out += seg.type.to_bytes(2, "big")
        out += seg.length.to_bytes(2, "big")
        out += bytes([fill]) * seg.payload_length
    logger.debug("wrote %d segments, %d bytes", len(doc.segments), len(out))
    return bytes(out)
