"""Draw the arm with matplotlib."""

import logging
from typing import Optional

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from twolink.layout import ArmLayout
from twolink.kinematics import Point2D

logger = logging.getLogger(__name__)

LINK_COLOR = '#374151'
JOINT_COLOR = '#3B82F6'
TARGET_COLOR = '#EF4444'


def draw_arm(layout: ArmLayout, target: Optional[Point2D] = None,
             ax: Optional[Axes] = None, margin: float = 20.0) -> Axes:
    """
    Draw links, joints and (in IK mode) the requested target.

    Args:
        layout: Joint positions from layout.joint_positions
        target: IK target to mark, if any
        ax: Axes to draw into; a new figure is created if omitted
        margin: Padding around the arm's reach

    Returns:
        The axes drawn into
    """
    if ax is None:
        ax = Figure(figsize=(6, 6)).add_subplot()

    xs = [p.x for p in layout.points()]
    ys = [p.y for p in layout.points()]

    # Target first so the arm is drawn on top of it
    if target is not None:
        ax.plot(target.x, target.y, 'o', color=TARGET_COLOR, markersize=7,
                label='Target')

    ax.plot(xs, ys, '-', color=LINK_COLOR, linewidth=4)
    ax.plot(xs, ys, 'o', color=JOINT_COLOR, markersize=8)

    reach = max(abs(v) for v in xs + ys)
    if target is not None:
        reach = max(reach, abs(target.x), abs(target.y))
    reach += margin

    ax.set_xlim(-reach, reach)
    ax.set_ylim(-reach, reach)
    ax.set_aspect('equal')
    ax.axhline(0, color='black', linewidth=0.5, ls='--')
    ax.axvline(0, color='black', linewidth=0.5, ls='--')
    ax.grid(True, linestyle='--', alpha=0.7)
    return ax


def save_arm(path: str, layout: ArmLayout, target: Optional[Point2D] = None,
             title: Optional[str] = None) -> None:
    """Render the arm to an image file."""
    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot()
    draw_arm(layout, target=target, ax=ax)
    if title:
        ax.set_title(title)
    fig.savefig(path, dpi=100, bbox_inches='tight')
    logger.info("Saved arm rendering to %s", path)
