"""
Chunk sink
==========
Drains a producer into a byte sink in emission order, flushing once.
"""

import logging
from typing import BinaryIO, Iterable, Iterator

logger = logging.getLogger(__name__)

BUFFER_SIZE = 1024 * 1024   # 1 MiB


def write_chunks(chunks: Iterable[bytes], sink: BinaryIO) -> int:
    """
    Write every chunk, in order, then flush the sink exactly once.

    A failing write propagates immediately; whatever already reached the
    sink stays there and flush is not called.
    Returns the total number of bytes written.
    """
    total = 0
    for chunk in chunks:
        view = memoryview(chunk)
        while view:
            written = sink.write(view)
            # Raw sinks may accept part of a chunk; None means nothing was taken.
            if written is None:
                raise BlockingIOError(
                    0, f"sink would block with {len(view)} bytes pending")
            if written == 0:
                raise OSError("short write: 0 bytes")
            view = view[written:]
        total += len(chunk)
    sink.flush()
    logger.debug(f"Sink: wrote {total}B")
    return total


def key_chunks(key: bytes, size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Split key material into fixed-size slices for write_chunks."""
    if size <= 0:
        raise ValueError("chunk size must be positive.")
    for start in range(0, len(key), size):
        yield key[start:start + size]
