"""Joint positions of the arm for drawing.

The solvers only report the end-effector; anything that draws the arm needs
the elbow too, and a mapping from the arm frame (y up) onto a drawing surface
(y down).
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from twolink.angles import deg_to_rad
from twolink.kinematics import ArmConfig, JointAngles, Point2D

# Default drawing surface, matching the demo canvas
SURFACE_WIDTH = 500
SURFACE_HEIGHT = 500


@dataclass(frozen=True)
class ArmLayout:
    """Base, elbow and end-effector positions in the arm frame."""
    base: Point2D
    elbow: Point2D
    end_effector: Point2D

    def points(self) -> Tuple[Point2D, Point2D, Point2D]:
        return (self.base, self.elbow, self.end_effector)


def joint_positions(config: ArmConfig, angles: JointAngles) -> ArmLayout:
    """
    Compute every joint position for a pose.

    Args:
        config: Segment lengths
        angles: Joint angles (degrees)

    Returns:
        ArmLayout with the base at the origin
    """
    t1 = deg_to_rad(angles.angle1)
    t12 = deg_to_rad(angles.angle1 + angles.angle2)

    elbow_x = config.length1 * np.cos(t1)
    elbow_y = config.length1 * np.sin(t1)
    end_x = elbow_x + config.length2 * np.cos(t12)
    end_y = elbow_y + config.length2 * np.sin(t12)

    return ArmLayout(
        base=Point2D(0.0, 0.0),
        elbow=Point2D(float(elbow_x), float(elbow_y)),
        end_effector=Point2D(float(end_x), float(end_y)),
    )


def to_surface(point: Point2D, width: float = SURFACE_WIDTH,
               height: float = SURFACE_HEIGHT) -> Tuple[float, float]:
    """
    Map an arm-frame point onto a y-down drawing surface.

    The base sits at the centre of the surface.

    Example:
        >>> to_surface(Point2D(100, 50))
        (350.0, 200.0)
    """
    return (width / 2 + point.x, height / 2 - point.y)
