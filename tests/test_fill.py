from random import Random

import pytest

from randfile.constants import BLOCK_SIZE
from randfile.fill import (RandomBytes, RotatingPatterns, SinglePattern,
                           describe, select_fill_mode)


def test_select_fill_mode():
    assert select_fill_mode(None) == RandomBytes()
    assert select_fill_mode([]) == RandomBytes()
    assert select_fill_mode(["AB"]) == SinglePattern(b"AB")
    mode = select_fill_mode(["A", "B", "C"])
    assert isinstance(mode, RotatingPatterns)
    assert mode.patterns == (b"A", b"B", b"C")


def test_patterns_must_be_non_empty():
    with pytest.raises(ValueError):
        SinglePattern("")
    with pytest.raises(ValueError):
        RotatingPatterns(["A", ""])


def test_rotating_needs_two_patterns():
    with pytest.raises(ValueError):
        RotatingPatterns(["A"])


def test_str_patterns_are_utf8():
    assert SinglePattern("é").pattern == "é".encode("utf-8")


def test_single_pattern_block_is_not_trimmed():
    block = SinglePattern("ABC").block()
    # 1366 copies are needed to reach 4096
    assert len(block) == 1366 * 3
    assert len(block) >= BLOCK_SIZE
    assert block == b"ABC" * 1366


def test_single_pattern_reuses_block():
    blocks = SinglePattern("xyz").blocks(Random(0))
    first, second = next(blocks), next(blocks)
    assert first is second


def test_random_blocks_are_fresh():
    blocks = RandomBytes().blocks(Random(1))
    first, second = next(blocks), next(blocks)
    assert len(first) == len(second) == BLOCK_SIZE
    assert first != second


def test_random_blocks_are_seeded():
    a = next(RandomBytes().blocks(Random(42)))
    b = next(RandomBytes().blocks(Random(42)))
    assert a == b


def test_rotating_block():
    mode = RotatingPatterns(["A", "BB", "CCC"])
    block = mode.block(Random(3))
    assert BLOCK_SIZE <= len(block) < BLOCK_SIZE + 3
    assert set(block) <= set(b"ABC")
    # every pattern is picked somewhere in a block this long
    assert {b"A"[0], b"B"[0], b"C"[0]} <= set(block)


def test_describe():
    assert describe(RandomBytes()) == "random_bytes"
    assert describe(SinglePattern("AB")) == "pattern(len=2)"
    assert describe(RotatingPatterns(["A", "B"])) == "rotating(count=2)"
