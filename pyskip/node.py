"""Skip-list node: a key plus a tower of forward links.

Levels are numbered from 1 (the bottom, densest chain) up to the node's
height. The list header is an ordinary node without a key whose height is
`MAX_LEVEL`, so the same link logic serves both interior nodes and the head.
"""
from __future__ import annotations

from typing import Generic, Optional, TypeVar

__all__ = ["MAX_LEVEL", "Node"]

K = TypeVar("K")

MAX_LEVEL = 32  # Caps tower height and the size of the search trail.


class Node(Generic[K]):
    __slots__ = ("_key", "_forward")

    def __init__(self, height: int, key: Optional[K] = None):
        if not 1 <= height <= MAX_LEVEL:
            raise ValueError(f"node height must be in [1, {MAX_LEVEL}], got {height}")
        self._key = key
        self._forward: list[Optional[Node[K]]] = [None] * height

    @classmethod
    def header(cls) -> "Node[K]":
        """Create a keyless node of maximum height to head a list."""
        return cls(MAX_LEVEL)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def key(self) -> Optional[K]:
        return self._key

    @property
    def height(self) -> int:
        return len(self._forward)

    def forward(self, level: int) -> Optional[Node[K]]:
        """Return the next node at `level` (1-based), or None at end of list."""
        self._check_level(level)
        return self._forward[level - 1]

    def set_forward(self, level: int, node: Optional[Node[K]]) -> None:
        self._check_level(level)
        self._forward[level - 1] = node

    def _check_level(self, level: int) -> None:
        if not 1 <= level <= len(self._forward):
            raise IndexError(f"level {level} out of range for node of height {len(self._forward)}")

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self._key!r} h={len(self._forward)}>"
