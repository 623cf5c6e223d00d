"""Command surface over a single tree.

Turns user text into keys and engine calls, and engine outcomes into
user-facing messages. Malformed input is rejected here with
InvalidInputError and never reaches the tree.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..core.config import VisualizerConfig
from ..core.errors import InvalidInputError
from ..core.tree import BinarySearchTree
from ..core.types import Key, TraversalOrder
from .animation import OperationPlan, plan_delete, plan_find, plan_insert

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")
_INTEGER = re.compile(r"[+-]?\d+")


def parse_keys(text: str) -> list[Key]:
    """Parse one integer or a comma/whitespace separated batch of them."""
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise InvalidInputError("Please enter a value.")

    keys: list[Key] = []
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            raise InvalidInputError(f"'{token}' is not a valid integer.")
        try:
            keys.append(int(token))
        except ValueError as e:
            # Digit strings beyond the interpreter's conversion limit
            raise InvalidInputError(f"'{token[:20]}...' is too long to be a valid integer.") from e
    return keys


@dataclass
class CommandResult:
    """Outcome of one command as shown to the user."""

    command: str
    ok: bool
    message: str
    plans: list[OperationPlan[Key]] = field(default_factory=list)
    traversal: Optional[list[Key]] = None


class Session:
    """One user's tree plus the pacing settings for animating it.

    Args:
        config: Visualizer configuration; defaults are used when omitted
    """

    def __init__(self, config: Optional[VisualizerConfig] = None) -> None:
        self.config = config if config is not None else VisualizerConfig()
        self.tree: BinarySearchTree[Key] = BinarySearchTree()

    # -------------------------------
    # Operations
    # -------------------------------
    def insert(self, text: str) -> CommandResult:
        keys = parse_keys(text)
        plans = [plan_insert(self.tree, key, self.config) for key in keys]

        added = [p.key for p in plans if p.ok]
        rejected = [p.key for p in plans if not p.ok]
        messages = []
        if added:
            messages.append(f"Inserted {_join(added)}.")
        for key in rejected:
            messages.append(f"Cannot add {key}. This element already exists in the tree.")
        if rejected:
            logger.info(f"Rejected duplicate keys: {rejected}")
        return CommandResult("insert", not rejected, " ".join(messages), plans)

    def delete(self, text: str) -> CommandResult:
        keys = parse_keys(text)
        plans = [plan_delete(self.tree, key, self.config) for key in keys]
        messages = [
            f"Deleted {p.key}." if p.ok else f"Cannot delete {p.key}. It is not in the tree."
            for p in plans
        ]
        return CommandResult("delete", all(p.ok for p in plans), " ".join(messages), plans)

    def find(self, text: str) -> CommandResult:
        keys = parse_keys(text)
        plans = [plan_find(self.tree, key, self.config) for key in keys]
        messages = [
            f"Found {p.key}." if p.ok else f"{p.key} is not in the tree."
            for p in plans
        ]
        return CommandResult("find", all(p.ok for p in plans), " ".join(messages), plans)

    def traverse(self, order: TraversalOrder | str) -> CommandResult:
        try:
            order = TraversalOrder(order)
        except ValueError as e:
            raise InvalidInputError(f"Unknown traversal order: {order}") from e

        keys = self.tree.traversal(order)
        label = order.value.capitalize()
        body = _join(keys) if keys else "(empty)"
        return CommandResult("traverse", True, f"{label}: {body}", traversal=keys)

    def clear(self) -> CommandResult:
        self.tree.clear()
        return CommandResult("clear", True, "Tree cleared.")

    def set_speed(self, value: str | float) -> CommandResult:
        try:
            speed = float(value)
        except ValueError as e:
            raise InvalidInputError(f"'{value}' is not a valid speed.") from e

        if not self.config.min_speed <= speed <= self.config.max_speed:
            raise InvalidInputError(
                f"Speed must be between {self.config.min_speed} and {self.config.max_speed}."
            )
        self.config.speed = speed
        return CommandResult("speed", True, f"Speed set to {speed:g}x.")

    # -------------------------------
    # Textual dispatch
    # -------------------------------
    def execute(self, line: str) -> CommandResult:
        """Run a command such as ``insert 5 3 8`` or ``inorder``."""
        parts = line.split(maxsplit=1)
        verb = parts[0].lower() if parts else ""
        rest = parts[1] if len(parts) > 1 else ""

        if verb in ("insert", "add"):
            return self.insert(rest)
        if verb in ("delete", "remove"):
            return self.delete(rest)
        if verb in ("find", "search"):
            return self.find(rest)
        if verb in ("print", "preorder"):
            return self.traverse(TraversalOrder.PRE)
        if verb == "inorder":
            return self.traverse(TraversalOrder.IN)
        if verb == "postorder":
            return self.traverse(TraversalOrder.POST)
        if verb in ("clear", "reset"):
            return self.clear()
        if verb == "speed":
            return self.set_speed(rest.strip())
        if not verb:
            raise InvalidInputError("Please enter a command.")
        raise InvalidInputError(f"Unknown command: {verb}")


def _join(keys: list[Key]) -> str:
    return ", ".join(str(k) for k in keys)
