"""Shared fixtures for the skip-list tests."""
import random

import pytest

from pyskip import MAX_LEVEL, SkipList


class ScriptedBits(random.Random):
    """Random source whose single-bit draws follow a fixed script."""

    def __init__(self, bits=(), default=0):
        super().__init__(0)
        self._bits = list(bits)
        self._default = default

    def getrandbits(self, k):
        assert k == 1
        return self._bits.pop(0) if self._bits else self._default


def _check_invariants(sl):
    header = sl.header
    assert header.key is None
    assert header.height == MAX_LEVEL

    chain = []
    node = header.forward(1)
    while node is not None:
        chain.append(node)
        node = node.forward(1)

    # Order and uniqueness on the level-1 chain.
    keys = [n.key for n in chain]
    assert all(a < b for a, b in zip(keys, keys[1:]))
    assert len(chain) == sl.count == len(sl)

    # Tower containment and per-level ordering.
    for n in [header, *chain]:
        assert 1 <= n.height <= MAX_LEVEL
        for level in range(1, n.height + 1):
            m = n.forward(level)
            if m is None:
                continue
            assert m.height >= level
            if n is not header:
                assert n.key < m.key

    # Each level chain holds exactly the nodes tall enough for it.
    for level in range(1, sl.max_level + 1):
        walked = []
        node = header.forward(level)
        while node is not None:
            walked.append(id(node))
            node = node.forward(level)
        assert walked == [id(n) for n in chain if n.height >= level]

    # Tight max level.
    assert sl.max_level == max([1] + [n.height for n in chain])
    for level in range(sl.max_level + 1, MAX_LEVEL + 1):
        assert header.forward(level) is None
    assert (header.forward(sl.max_level) is None) == (not chain)
    return keys


@pytest.fixture
def check_invariants():
    """Return a helper asserting every structural invariant; yields the level-1 keys."""
    return _check_invariants


@pytest.fixture
def skiplist():
    """Create an empty skip list with reproducible tower heights."""
    return SkipList(rng=random.Random(1234))


@pytest.fixture
def scripted():
    return ScriptedBits
