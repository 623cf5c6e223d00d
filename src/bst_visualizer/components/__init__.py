"""Presentation-side components built on the tree engine."""

from .animation import AnimationStep, OperationPlan, StepKind, plan_delete, plan_find, plan_insert
from .commands import CommandResult, Session, parse_keys
from .layout import Edge, NodePosition, compute_edges, compute_positions, compute_rank_positions
from .storyboard import Frame, Storyboard

__all__ = [
    "AnimationStep",
    "OperationPlan",
    "StepKind",
    "plan_delete",
    "plan_find",
    "plan_insert",
    "CommandResult",
    "Session",
    "parse_keys",
    "Edge",
    "NodePosition",
    "compute_edges",
    "compute_positions",
    "compute_rank_positions",
    "Frame",
    "Storyboard",
]
