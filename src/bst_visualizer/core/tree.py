"""Unbalanced binary search tree engine.

Time Complexity:
Search/Insert/Delete: O(h), where h is the tree height (O(n) worst case,
since no rebalancing is performed)

All descents are iterative so that degenerate trees built from sorted
input never run into the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, Optional

from .errors import EmptyTreeError
from .types import K, SearchResult, TraversalOrder

logger = logging.getLogger(__name__)


# -----------------------------
# Node
# -----------------------------
class Node(Generic[K]):
    """A node holding a unique key and links to its two children."""

    __slots__ = ("key", "left", "right")

    def __init__(self, key: K) -> None:
        self.key: K = key
        self.left: Optional[Node[K]] = None
        self.right: Optional[Node[K]] = None

    def __repr__(self) -> str:
        return f"Node({self.key!r})"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# -----------------------------
# Binary Search Tree
# -----------------------------
class BinarySearchTree(Generic[K]):
    """Binary search tree with unique keys.

    Public API:
        - insert(key): Add a key; False if already present
        - delete(key): Remove a key; False if it was absent
        - find(key) / search(key): Membership, with the descent path
        - traversal(order): Pre-, in- or post-order key list
        - clear(): Drop every node

    Invariants:
        - Every key in a node's left subtree is smaller than its key
        - Every key in a node's right subtree is larger than its key
        - No two nodes share a key
    """

    __slots__ = ("_root", "_size")

    def __init__(self, keys: Iterable[K] = ()) -> None:
        self._root: Optional[Node[K]] = None
        self._size = 0
        self.insert_many(keys)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.find(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.inorder())

    @property
    def root(self) -> Optional[Node[K]]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Insert
    # -------------------------------
    def insert(self, key: K) -> bool:
        """Insert key; return False without mutating if it already exists."""
        if self._root is None:
            self._root = Node(key)
            self._size = 1
            logger.debug(f"Inserted {key!r} as root")
            return True

        current = self._root
        while True:
            if key == current.key:
                logger.debug(f"Rejected duplicate key {key!r}")
                return False
            if key < current.key:
                if current.left is None:
                    current.left = Node(key)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(key)
                    break
                current = current.right

        self._size += 1
        logger.debug(f"Inserted {key!r} under {current.key!r}")
        return True

    def insert_many(self, keys: Iterable[K]) -> list[bool]:
        """Insert keys in order, returning one result per key."""
        return [self.insert(key) for key in keys]

    # -------------------------------
    # Delete
    # -------------------------------
    def delete(self, key: K) -> bool:
        """Remove key; return whether it was present before the call.

        A node with two children keeps its place in the tree: it takes the
        key of its in-order successor, and the successor node (which never
        has a left child) is unlinked from the right subtree instead.
        """
        parent: Optional[Node[K]] = None
        target = self._root
        while target is not None and key != target.key:
            parent = target
            target = target.left if key < target.key else target.right

        if target is None:
            logger.debug(f"Delete of absent key {key!r}")
            return False

        if target.left is not None and target.right is not None:
            succ_parent = target
            successor = target.right
            while successor.left is not None:
                succ_parent = successor
                successor = successor.left
            target.key = successor.key
            # The successor now stands in for the node being unlinked
            parent, target = succ_parent, successor

        child = target.left if target.left is not None else target.right
        if parent is None:
            self._root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child

        self._size -= 1
        logger.debug(f"Deleted {key!r}; {self._size} nodes remain")
        return True

    # -------------------------------
    # Search
    # -------------------------------
    def search(self, key: K) -> SearchResult[K]:
        """Descend towards key, recording every key visited on the way."""
        path: list[K] = []
        current = self._root
        while current is not None:
            path.append(current.key)
            if key == current.key:
                return SearchResult(True, path)
            current = current.left if key < current.key else current.right
        return SearchResult(False, path)

    def find(self, key: K) -> bool:
        return self.search(key).found

    def successor_of(self, key: K) -> Optional[K]:
        """Return the smallest key greater than key, or None.

        Returns None as well when key itself is not in the tree.
        """
        candidate: Optional[K] = None
        current = self._root
        while current is not None and key != current.key:
            if key < current.key:
                candidate = current.key
                current = current.left
            else:
                current = current.right

        if current is None:
            return None
        if current.right is not None:
            return self._leftmost(current.right).key
        return candidate

    def min(self) -> K:
        if self._root is None:
            raise EmptyTreeError("min() of an empty tree")
        return self._leftmost(self._root).key

    def max(self) -> K:
        if self._root is None:
            raise EmptyTreeError("max() of an empty tree")
        current = self._root
        while current.right is not None:
            current = current.right
        return current.key

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        best = 0
        stack: list[tuple[Node[K], int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    @staticmethod
    def _leftmost(node: Node[K]) -> Node[K]:
        while node.left is not None:
            node = node.left
        return node

    # -------------------------------
    # Traversals
    # -------------------------------
    def traversal(self, order: TraversalOrder) -> list[K]:
        """Return every key in the requested depth-first order."""
        order = TraversalOrder(order)
        if order is TraversalOrder.PRE:
            return self.preorder()
        if order is TraversalOrder.IN:
            return self.inorder()
        return self.postorder()

    def preorder(self) -> list[K]:
        result: list[K] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            # Right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[K]:
        result: list[K] = []
        stack: list[Node[K]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.key)
            current = current.right
        return result

    def postorder(self) -> list[K]:
        # Reverse of a node-right-left preorder
        result: list[K] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    # -------------------------------
    # Reset
    # -------------------------------
    def clear(self) -> None:
        """Drop the root; every node becomes unreachable."""
        self._root = None
        self._size = 0
        logger.debug("Cleared tree")
