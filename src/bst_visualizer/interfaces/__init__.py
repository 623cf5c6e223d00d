"""Protocol definitions for BST visualizer components."""

from .tree import SearchTree

__all__ = ["SearchTree"]
