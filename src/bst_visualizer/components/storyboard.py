"""Frame sequences for replaying commands visually.

A storyboard keeps its own replica of the tree. Each recorded command is
replayed on the replica one operation at a time, so visit steps are drawn
against the layout the tree had before the mutation and terminal steps
against the layout after it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..core.tree import BinarySearchTree
from ..core.types import Key
from .animation import StepKind
from .layout import Edge, NodePosition, compute_edges, compute_positions

if TYPE_CHECKING:
    from ..core.config import VisualizerConfig
    from .animation import AnimationStep, OperationPlan
    from .commands import CommandResult

_CAPTIONS = {
    StepKind.VISIT: "{op} {key}: visiting {visit}",
    StepKind.FOUND: "Found {key}.",
    StepKind.INSERTED: "Inserted {key}.",
    StepKind.SETTLE: "Inserted {key}.",
    StepKind.DELETED: "Deleted {key}.",
    StepKind.DUPLICATE: "Cannot add {key}. This element already exists in the tree.",
    StepKind.NOT_FOUND: "{key} is not in the tree.",
}


# Outcome steps carry no delay of their own and are held for the settle time
_TERMINAL = frozenset({
    StepKind.FOUND,
    StepKind.INSERTED,
    StepKind.DELETED,
    StepKind.DUPLICATE,
    StepKind.NOT_FOUND,
})


@dataclass(frozen=True)
class Frame:
    positions: dict[Key, NodePosition[Key]]
    edges: list[Edge[Key]]
    highlighted: tuple[Key, ...] = ()
    marked: Optional[Key] = None
    caption: str = ""
    delay_ms: float = 0.0


@dataclass
class Storyboard:
    """Accumulates frames for every command result it is given."""

    config: VisualizerConfig
    frames: list[Frame] = field(default_factory=list)
    tree: BinarySearchTree[Key] = field(default_factory=BinarySearchTree)

    def snapshot(self, caption: str = "", delay_ms: float = 0.0, **kwargs) -> Frame:
        positions = compute_positions(self.tree, self.config)
        edges = compute_edges(self.tree, positions)
        return Frame(positions, edges, caption=caption, delay_ms=delay_ms, **kwargs)

    def record(self, result: CommandResult) -> None:
        hold = self.config.scaled(self.config.settle_ms)
        if result.command in ("insert", "delete", "find"):
            for plan in result.plans:
                self._record_plan(plan, hold)
        elif result.command == "clear":
            self.tree.clear()
            self.frames.append(self.snapshot(result.message, hold))
        elif result.command == "traverse":
            self.frames.append(
                self.snapshot(result.message, hold, highlighted=tuple(result.traversal or ()))
            )

    def _record_plan(self, plan: OperationPlan[Key], hold: float) -> None:
        before = self.snapshot()
        for step in plan.steps:
            if step.kind is StepKind.VISIT:
                self.frames.append(self._frame(before, plan, step, hold))
                continue
            if step.kind is StepKind.INSERTED:
                self.tree.insert(plan.key)
            elif step.kind is StepKind.DELETED:
                self.tree.delete(plan.key)
            self.frames.append(self._frame(self.snapshot(), plan, step, hold))

    def _frame(
        self, base: Frame, plan: OperationPlan[Key], step: AnimationStep[Key], hold: float
    ) -> Frame:
        caption = _CAPTIONS[step.kind].format(
            op=plan.operation.capitalize(), key=plan.key, visit=step.key
        )
        marked = plan.key if step.kind in (
            StepKind.FOUND, StepKind.INSERTED, StepKind.SETTLE
        ) else None
        return Frame(
            base.positions,
            base.edges,
            highlighted=step.highlighted,
            marked=marked,
            caption=caption,
            delay_ms=hold if step.kind in _TERMINAL else step.delay_ms,
        )
