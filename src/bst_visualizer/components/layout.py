"""Node placement for drawing a tree.

Positions are a pure function of the tree's current shape and must be
recomputed after every successful mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Optional

from ..core.types import K

if TYPE_CHECKING:
    from ..core.config import VisualizerConfig
    from ..core.tree import Node
    from ..interfaces.tree import SearchTree


@dataclass(frozen=True)
class NodePosition(Generic[K]):
    key: K
    x: float
    y: float
    depth: int


@dataclass(frozen=True)
class Edge(Generic[K]):
    """A parent-to-child link with both endpoints resolved."""

    parent: K
    child: K
    x1: float
    y1: float
    x2: float
    y2: float


def compute_positions(
    tree: SearchTree[K], config: VisualizerConfig
) -> dict[K, NodePosition[K]]:
    """Place nodes by halving the horizontal offset at each level.

    The root sits at (root_x, root_y); each child is shifted left or right
    by the current offset and down by level_gap. Deep trees may overlap.
    """
    positions: dict[K, NodePosition[K]] = {}
    if tree.root is None:
        return positions

    stack: list[tuple[Node[K], float, float, float, int]] = [
        (tree.root, config.root_x, config.root_y, config.root_offset, 0)
    ]
    while stack:
        node, x, y, offset, depth = stack.pop()
        positions[node.key] = NodePosition(node.key, x, y, depth)
        next_offset = offset / 2
        if node.right is not None:
            stack.append((node.right, x + offset, y + config.level_gap, next_offset, depth + 1))
        if node.left is not None:
            stack.append((node.left, x - offset, y + config.level_gap, next_offset, depth + 1))
    return positions


def compute_rank_positions(
    tree: SearchTree[K], config: VisualizerConfig
) -> dict[K, NodePosition[K]]:
    """Place nodes by in-order rank (x) and depth (y); never overlaps."""
    positions: dict[K, NodePosition[K]] = {}
    stack: list[tuple[Node[K], int]] = []
    current: Optional[Node[K]] = tree.root
    depth = 0
    rank = 0
    while stack or current is not None:
        while current is not None:
            stack.append((current, depth))
            current = current.left
            depth += 1
        node, depth = stack.pop()
        positions[node.key] = NodePosition(
            node.key,
            config.root_x + rank * config.node_spacing,
            config.root_y + depth * config.level_gap,
            depth,
        )
        rank += 1
        current = node.right
        depth += 1
    return positions


def compute_edges(
    tree: SearchTree[K], positions: dict[K, NodePosition[K]]
) -> list[Edge[K]]:
    """Return one edge per parent-child link, in preorder of the parent."""
    edges: list[Edge[K]] = []
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        here = positions[node.key]
        children = [c for c in (node.left, node.right) if c is not None]
        for child in children:
            there = positions[child.key]
            edges.append(Edge(node.key, child.key, here.x, here.y, there.x, there.y))
        stack.extend(reversed(children))
    return edges
