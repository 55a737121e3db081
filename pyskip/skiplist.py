"""Probabilistic ordered index (skip list) over totally-ordered keys.

The list keeps a keyless header node of maximum height and a stack of
linked chains of geometrically decreasing density above the level-1 chain,
which holds every key exactly once and in ascending order.

Complexities (average case):
    • search   – O(log n)
    • insert   – O(log n)
    • delete   – O(log n)

Tower heights follow a geometric distribution with a fixed 50 % branching
factor, capped at `MAX_LEVEL`.

Instances are single-threaded: every operation writes the shared search
trail, so even concurrent `search` calls need external locking.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from random import Random
from typing import Generic, Optional, TypeVar

from .node import MAX_LEVEL, Node
from .render import render as render_list

__all__ = ["SkipList"]

logger = logging.getLogger(__name__)

K = TypeVar("K")


class SkipList(Generic[K]):
    """Ordered set of unique keys backed by a skip list."""

    def __init__(self, *, rng: Optional[Random] = None):
        self._header: Node[K] = Node.header()
        self._max_level = 1
        self._count = 0
        self._rng = rng if rng is not None else Random()
        # trail[L-1] is the last node visited at level L by the latest descent.
        self._trail: list[Node[K]] = [self._header] * MAX_LEVEL

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def header(self) -> Node[K]:
        return self._header

    @property
    def max_level(self) -> int:
        """Greatest tower height currently in the list (1 when empty)."""
        return self._max_level

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _random_level(self) -> int:
        level = 1
        while level < MAX_LEVEL and self._rng.getrandbits(1):
            level += 1
        return level

    def _descend(self, key: K) -> Optional[Node[K]]:
        """Fill the trail for `key` and return the first node with key >= `key`."""
        if key is None:
            raise ValueError("skip list keys must not be None")
        trail = self._trail
        x = self._header
        for level in range(self._max_level, 0, -1):
            while (nxt := x.forward(level)) is not None and nxt.key < key:  # type: ignore[operator]
                x = nxt
            trail[level - 1] = x
        return trail[0].forward(1)

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def search(self, key: K) -> Optional[K]:
        """Return the stored key equal to `key`, or None when absent."""
        candidate = self._descend(key)
        if candidate is not None and candidate.key == key:
            return candidate.key
        return None

    def __contains__(self, key: object) -> bool:
        return key is not None and self.search(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        x = self._header.forward(1)
        while x is not None:
            yield x.key  # type: ignore[misc]
            x = x.forward(1)

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, key: K) -> None:
        """Add `key`; inserting a key that is already present does nothing."""
        candidate = self._descend(key)
        if candidate is not None and candidate.key == key:
            return
        height = self._random_level()
        # Allocate before touching any link so a failure leaves the list intact.
        new_node: Node[K] = Node(height, key)
        header = self._header
        # Levels above max_level were empty: the header links straight to us.
        for level in range(self._max_level + 1, height + 1):
            header.set_forward(level, new_node)
            new_node.set_forward(level, None)
        trail = self._trail
        for level in range(1, min(height, self._max_level) + 1):
            prev = trail[level - 1]
            new_node.set_forward(level, prev.forward(level))
            prev.set_forward(level, new_node)
        if height > self._max_level:
            logger.debug("skip list grew from level %d to %d", self._max_level, height)
            self._max_level = height
        self._count += 1

    def delete(self, key: K) -> None:
        """Remove `key`; deleting an absent key does nothing."""
        candidate = self._descend(key)
        if candidate is None or candidate.key != key:
            return
        trail = self._trail
        for level in range(1, candidate.height + 1):
            trail[level - 1].set_forward(level, candidate.forward(level))
        old_level = self._max_level
        while self._max_level > 1 and self._header.forward(self._max_level) is None:
            self._max_level -= 1
        if self._max_level != old_level:
            logger.debug("skip list shrank from level %d to %d", old_level, self._max_level)
        self._count -= 1

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def render(self) -> str:
        """Draw the list as ASCII art, one box per node."""
        return render_list(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:  # pragma: no cover
        return f"SkipList<count={self._count} max_level={self._max_level}>"
