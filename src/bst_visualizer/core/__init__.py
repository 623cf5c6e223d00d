"""BST visualizer core."""

from .tree import BinarySearchTree, Node

__all__ = ["BinarySearchTree", "Node"]
