"""matplotlib rendering of tree frames.

Draws nodes as labelled circles joined by edges, and plays a storyboard
back as an animation, either on screen or saved to GIF/MP4.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.animation import FFMpegWriter, FuncAnimation, PillowWriter
from matplotlib.patches import Circle

from ..components.layout import compute_edges, compute_positions
from ..components.storyboard import Frame

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from ..core.config import VisualizerConfig
    from ..core.tree import BinarySearchTree
    from ..core.types import Key

logger = logging.getLogger(__name__)

# Animation clock; longer frames are held for several ticks
TICK_MS = 50


def frame_from_tree(tree: BinarySearchTree[Key], config: VisualizerConfig, caption: str = "") -> Frame:
    """Build a still frame of the tree's current shape."""
    positions = compute_positions(tree, config)
    return Frame(positions, compute_edges(tree, positions), caption=caption)


def draw_frame(ax: Axes, frame: Frame, config: VisualizerConfig) -> None:
    """Draw one frame onto ax, replacing whatever was there."""
    ax.clear()
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(frame.caption, fontsize=11)

    for edge in frame.edges:
        ax.plot([edge.x1, edge.x2], [edge.y1, edge.y2], color="#166534", linewidth=1.5, zorder=1)

    highlighted = set(frame.highlighted)
    for pos in frame.positions.values():
        if pos.key == frame.marked:
            color = config.found_color
        elif pos.key in highlighted:
            color = config.highlight_color
        else:
            color = config.node_color
        ax.add_patch(Circle((pos.x, pos.y), config.node_radius, color=color, zorder=2))
        ax.text(pos.x, pos.y, str(pos.key), ha="center", va="center",
                color="white", fontsize=10, fontweight="bold", zorder=3)

    if frame.positions:
        pad = config.node_radius * 2
        xs = [p.x for p in frame.positions.values()]
        ys = [p.y for p in frame.positions.values()]
        ax.set_xlim(min(xs) - pad, max(xs) + pad)
        # Screen coordinates: y grows downwards
        ax.set_ylim(max(ys) + pad, min(ys) - pad)


def tick_schedule(frames: list[Frame]) -> list[int]:
    """Expand frames into per-tick indices so each is held for its delay."""
    schedule: list[int] = []
    for i, frame in enumerate(frames):
        schedule.extend([i] * max(1, math.ceil(frame.delay_ms / TICK_MS)))
    return schedule


def animate_frames(
    frames: list[Frame], config: VisualizerConfig, output: str | None = None
) -> str | None:
    """Play frames on screen, or save them when output is given.

    Returns the path actually written, or None when nothing was saved.

    Args:
        frames: Frames to play, in order
        config: Drawing configuration
        output: Output file (.gif or .mp4); shows a window when None
    """
    if not frames:
        logger.warning("No frames to animate")
        return None

    if output:
        # Non-interactive backend for file rendering
        matplotlib.use("Agg")

    fig, ax = plt.subplots(figsize=(10, 6))
    schedule = tick_schedule(frames)

    def update(tick: int) -> tuple:
        draw_frame(ax, frames[schedule[tick]], config)
        return ()

    ani = FuncAnimation(
        fig, update, frames=len(schedule), interval=TICK_MS, blit=False, repeat=False
    )

    if output is None:
        plt.show()
        return None

    fps = 1000 // TICK_MS
    logger.info(f"Rendering {len(frames)} frames ({len(schedule)} ticks) to {output}")
    if output.lower().endswith(".mp4"):
        try:
            ani.save(output, writer=FFMpegWriter(fps=fps, bitrate=1800), dpi=100)
        except (RuntimeError, OSError) as e:
            logger.error(f"Error saving MP4 (is ffmpeg installed?): {e}")
            output = output[:-4] + ".gif"
            logger.warning(f"Saving GIF to {output} instead")
            ani.save(output, writer=PillowWriter(fps=fps), dpi=100)
    else:
        ani.save(output, writer=PillowWriter(fps=fps), dpi=100)
    plt.close(fig)
    return output
