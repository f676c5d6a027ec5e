import logging
import time
from random import Random
from typing import BinaryIO, Optional

from randfile.digest import ContentDigest
from randfile.fill import FillMode, describe


logger = logging.getLogger(__name__)


class WriteFailure(Exception):
    pass


def _ms(ns_start: int) -> float:
    return (time.perf_counter_ns() - ns_start) / 1e6


def write_block(stream: BinaryIO, block: bytes, target: int, offset: int,
                digest: Optional[ContentDigest] = None) -> int:
    """
    Write as much of ``block`` as fits below ``target`` and return the byte count.

    ``offset`` is how many bytes this file already holds. Nothing is written
    once it reaches ``target``; a block that would cross it is cut short.
    """
    if offset >= target:
        return 0
    if offset + len(block) > target:
        block = block[:target - offset]
    view = memoryview(block)
    done = 0
    while done < len(block):
        try:
            n = stream.write(view[done:])
        except OSError as e:
            raise WriteFailure(f"Write failed at offset {offset + done}: {e}") from e
        # Streams that do not report a count are taken to write everything.
        if n is None:
            n = len(block) - done
        if n <= 0:
            raise WriteFailure(f"Stream accepted no bytes at offset {offset + done}")
        done += n
    if digest is not None:
        digest.update(block)
    return len(block)


def write_sized(stream: BinaryIO, target: int, mode: FillMode,
                rng: Random = None, digest: Optional[ContentDigest] = None) -> int:
    """Fill ``stream`` with exactly ``target`` bytes produced by ``mode``."""
    if target < 0:
        raise ValueError("target must be >= 0")
    rng = rng or Random()
    t0 = time.perf_counter_ns()
    logger.debug("WRITER,WRITE,START,RUN,target=%d;mode=%s", target, describe(mode))

    offset = 0
    n_blocks = 0
    blocks = mode.blocks(rng)
    while offset < target:
        offset += write_block(stream, next(blocks), target, offset, digest)
        n_blocks += 1

    logger.debug("WRITER,WRITE,END,SUCCESS,bytes=%d;blocks=%d;time_ms=%.3f",
                 offset, n_blocks, _ms(t0))
    return offset
