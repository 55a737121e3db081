"""pyskip: a probabilistic ordered index (skip list) for embedding.

The package exposes the container via `pyskip.SkipList` and the underlying
node type via `pyskip.Node` so that collaborators such as the ASCII renderer
can walk the level-1 chain directly.
"""

from __future__ import annotations

__all__ = [
    "MAX_LEVEL",
    "Node",
    "SkipList",
    "render",
]

from .node import MAX_LEVEL, Node
from .render import render
from .skiplist import SkipList
