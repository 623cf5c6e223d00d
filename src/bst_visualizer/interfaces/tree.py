"""Protocol definition for the search tree consumed by the presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.types import K

if TYPE_CHECKING:
    from ..core.tree import Node
    from ..core.types import SearchResult, TraversalOrder


@runtime_checkable
class SearchTree(Protocol[K]):
    """Ordered tree with unique keys and atomic mutations."""

    @property
    def root(self) -> Node[K] | None:
        """Root node, or None when the tree is empty."""
        ...

    def insert(self, key: K) -> bool:
        """Insert key; False if it already exists."""
        ...

    def delete(self, key: K) -> bool:
        """Remove key; False if it was not present."""
        ...

    def find(self, key: K) -> bool:
        """Return whether key is present."""
        ...

    def search(self, key: K) -> SearchResult[K]:
        """Return presence plus the keys visited during the descent."""
        ...

    def traversal(self, order: TraversalOrder) -> list[K]:
        """Return every key in the requested order."""
        ...

    def clear(self) -> None:
        """Remove every key."""
        ...
