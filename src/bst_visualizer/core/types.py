"""Common type definitions for the BST visualizer.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar


class Comparable(Protocol):
    """A type whose values support total ordering."""

    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=Comparable)

# Keys entered through the command surface are always integers
Key = int


class TraversalOrder(str, Enum):
    """Fixed depth-first traversal orders."""

    PRE = "preorder"
    IN = "inorder"
    POST = "postorder"


@dataclass
class SearchResult(Generic[K]):
    """Outcome of a descent: whether the key was found and every key visited."""

    found: bool
    path: list[K] = field(default_factory=list)
