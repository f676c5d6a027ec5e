from dataclasses import dataclass
from random import Random
from typing import Iterator, Optional, Sequence, Tuple, Union

from randfile.constants import BLOCK_SIZE


Pattern = Union[str, bytes]


def _as_bytes(pattern: Pattern) -> bytes:
    data = pattern.encode("utf-8") if isinstance(pattern, str) else bytes(pattern)
    if not data:
        raise ValueError("Patterns must be non-empty")
    return data


@dataclass(frozen=True)
class RandomBytes:
    """Every block is freshly drawn from the generator."""

    def blocks(self, rng: Random) -> Iterator[bytes]:
        while True:
            yield rng.randbytes(BLOCK_SIZE)


@dataclass(frozen=True)
class SinglePattern:
    pattern: bytes

    def __post_init__(self):
        object.__setattr__(self, "pattern", _as_bytes(self.pattern))

    def block(self) -> bytes:
        # Whole repetitions only; the last copy may run past BLOCK_SIZE.
        reps = -(-BLOCK_SIZE // len(self.pattern))
        return self.pattern * reps

    def blocks(self, rng: Random) -> Iterator[bytes]:
        block = self.block()
        while True:
            yield block


@dataclass(frozen=True)
class RotatingPatterns:
    patterns: Tuple[bytes, ...]

    def __post_init__(self):
        patterns = tuple(_as_bytes(p) for p in self.patterns)
        if len(patterns) < 2:
            raise ValueError("RotatingPatterns needs at least two patterns")
        object.__setattr__(self, "patterns", patterns)

    def block(self, rng: Random) -> bytes:
        parts = []
        length = 0
        while length < BLOCK_SIZE:
            part = rng.choice(self.patterns)
            parts.append(part)
            length += len(part)
        return b"".join(parts)

    def blocks(self, rng: Random) -> Iterator[bytes]:
        while True:
            yield self.block(rng)


FillMode = Union[RandomBytes, SinglePattern, RotatingPatterns]


def select_fill_mode(patterns: Optional[Sequence[Pattern]] = None) -> FillMode:
    """Pick the fill strategy from how many patterns were supplied."""
    if not patterns:
        return RandomBytes()
    if len(patterns) == 1:
        return SinglePattern(patterns[0])
    return RotatingPatterns(tuple(patterns))


def describe(mode: FillMode) -> str:
    if isinstance(mode, SinglePattern):
        return f"pattern(len={len(mode.pattern)})"
    if isinstance(mode, RotatingPatterns):
        return f"rotating(count={len(mode.patterns)})"
    return "random_bytes"
