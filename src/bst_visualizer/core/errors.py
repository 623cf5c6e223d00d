"""Exception hierarchy for the BST visualizer.

Expected engine outcomes (duplicate key, key not found) are reported as
boolean results and never raised. These exceptions cover the remaining
failures around the engine.
"""

from __future__ import annotations


class BSTError(Exception):
    """Base exception for all BST visualizer errors."""
    pass


class EmptyTreeError(BSTError):
    """Raised when a query needs at least one node but the tree is empty."""
    pass


class InvalidInputError(BSTError):
    """Raised when user input cannot be turned into keys or a command."""
    pass


class ConfigError(BSTError):
    """Raised when configuration values or files are invalid."""
    pass
