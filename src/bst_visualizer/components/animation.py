"""Step planning for animated tree operations.

The tree is never paused mid-mutation. Each planner replays the descent
read-only through ``search()`` to schedule highlight steps, then performs
the whole operation with a single engine call. Delays are divided by the
configured speed multiplier and have no effect on results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic

from ..core.types import K

if TYPE_CHECKING:
    from ..core.config import VisualizerConfig
    from ..interfaces.tree import SearchTree

logger = logging.getLogger(__name__)


class StepKind(str, Enum):
    VISIT = "visit"
    FOUND = "found"
    INSERTED = "inserted"
    DELETED = "deleted"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    SETTLE = "settle"


@dataclass(frozen=True)
class AnimationStep(Generic[K]):
    """One frame of an animation.

    Attributes:
        kind: What happened at this step
        key: Key the step is about (visited node or operation key)
        highlighted: Keys highlighted while the step is shown
        delay_ms: How long to hold the step, already speed-adjusted
    """

    kind: StepKind
    key: K
    highlighted: tuple[K, ...]
    delay_ms: float


@dataclass
class OperationPlan(Generic[K]):
    """Completed operation plus the steps to replay it."""

    operation: str
    key: K
    ok: bool
    steps: list[AnimationStep[K]] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        return sum(step.delay_ms for step in self.steps)


def _visit_steps(path: list[K], delay_ms: float) -> list[AnimationStep[K]]:
    return [
        AnimationStep(StepKind.VISIT, key, tuple(path[: i + 1]), delay_ms)
        for i, key in enumerate(path)
    ]


def plan_insert(tree: SearchTree[K], key: K, config: VisualizerConfig) -> OperationPlan[K]:
    """Highlight the insertion path, then insert key."""
    result = tree.search(key)
    steps = _visit_steps(result.path, config.scaled(config.insert_step_ms))

    if result.found:
        steps.append(AnimationStep(StepKind.DUPLICATE, key, (), 0.0))
        return OperationPlan("insert", key, False, steps)

    ok = tree.insert(key)
    steps.append(AnimationStep(StepKind.INSERTED, key, (key,), 0.0))
    steps.append(AnimationStep(StepKind.SETTLE, key, (), config.scaled(config.settle_ms)))
    logger.debug(f"Planned insert of {key!r} in {len(steps)} steps")
    return OperationPlan("insert", key, ok, steps)


def plan_find(tree: SearchTree[K], key: K, config: VisualizerConfig) -> OperationPlan[K]:
    """Highlight the search path; ends on FOUND or NOT_FOUND."""
    result = tree.search(key)
    steps = _visit_steps(result.path, config.scaled(config.find_step_ms))
    if result.found:
        steps.append(AnimationStep(StepKind.FOUND, key, tuple(result.path), 0.0))
    else:
        steps.append(AnimationStep(StepKind.NOT_FOUND, key, (), 0.0))
    return OperationPlan("find", key, result.found, steps)


def plan_delete(tree: SearchTree[K], key: K, config: VisualizerConfig) -> OperationPlan[K]:
    """Highlight the path to key, then delete it."""
    result = tree.search(key)
    steps = _visit_steps(result.path, config.scaled(config.delete_step_ms))
    ok = tree.delete(key)
    kind = StepKind.DELETED if ok else StepKind.NOT_FOUND
    steps.append(AnimationStep(kind, key, (), 0.0))
    return OperationPlan("delete", key, ok, steps)
