"""ASCII pretty-printer for skip lists.

The drawing runs top to bottom. Every level owns a column `NODE_WIDTH`
characters wide; an arrow column shows `|` while a link passes by and `V`
where it enters the next node. Each node is a box spanning as many columns
as its height, with the key centred on the middle row:

        |        |
        V        V
    +----------------+
    |                |
    |       3        |
    |                |
    +----------------+

Only the level-1 chain and the per-node `height`/`key` accessors are read,
so rendering never disturbs the list's search trail.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .node import Node

if TYPE_CHECKING:  # pragma: no cover
    from .skiplist import SkipList

__all__ = ["NODE_WIDTH", "render"]

NODE_WIDTH = 9


def _arrow_row(first: int, last: int, reach: int, middle: str, end: str) -> str:
    """One row of arrow columns for levels `first`..`last`.

    Columns at or below `reach` get `end`, the rest get `middle`.
    """
    pad_left = " " * ((NODE_WIDTH - 1) // 2)
    pad_right = " " * (NODE_WIDTH // 2)
    cells = [pad_left + (end if lev <= reach else middle) + pad_right for lev in range(first, last + 1)]
    return "".join(cells) + "\n"


def _edge(length: int, start: str, middle: str, end: str) -> str:
    return start + middle * (length - 2) + end


def _node_block(node: Node[Any], max_level: int) -> str:
    height = node.height
    width = height * NODE_WIDTH
    # Arrows for the levels above this node keep running beside the box.
    bypass = _arrow_row(height + 1, max_level, 0, "|", "|")

    label = str(node.key)
    left = max(0, (width - len(label)) // 2)
    rows = [
        _edge(width, "+", "-", "+"),
        _edge(width, "|", " ", "|"),
        _edge(left, "|", " ", " ") + label + _edge(width - left - len(label), " ", " ", "|"),
        _edge(width, "|", " ", "|"),
        _edge(width, "+", "-", "+"),
    ]
    out = [row + bypass for row in rows]
    out.append(_arrow_row(1, max_level, max_level, "|", "|"))
    out.append(_arrow_row(1, max_level, max_level, "|", "|"))
    return "".join(out)


def render(skiplist: "SkipList[Any]") -> str:
    """Return a multi-line drawing of `skiplist`."""
    max_level = skiplist.max_level
    out = [
        _arrow_row(1, max_level, max_level, "|", "|"),
        _arrow_row(1, max_level, max_level, "|", "|"),
    ]
    node = skiplist.header.forward(1)
    reach = max_level if node is None else node.height
    out.append(_arrow_row(1, max_level, reach, "|", "V"))
    while node is not None:
        out.append(_node_block(node, max_level))
        node = node.forward(1)
        reach = max_level if node is None else node.height
        out.append(_arrow_row(1, max_level, reach, "|", "V"))
    return "".join(out)
