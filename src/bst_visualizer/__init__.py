"""BST Visualizer - binary search tree engine with animated presentation."""

from .core.config import VisualizerConfig, load_config
from .core.errors import (
    BSTError,
    EmptyTreeError,
    InvalidInputError,
    ConfigError,
)
from .core.tree import BinarySearchTree, Node
from .core.types import Key, SearchResult, TraversalOrder
from .components.commands import CommandResult, Session

__all__ = [
    "VisualizerConfig",
    "load_config",
    "BSTError",
    "EmptyTreeError",
    "InvalidInputError",
    "ConfigError",
    "BinarySearchTree",
    "Node",
    "Key",
    "SearchResult",
    "TraversalOrder",
    "CommandResult",
    "Session",
]
