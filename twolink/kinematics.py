"""Forward and inverse kinematics for a 2-link planar arm.

Angles are in degrees. ``angle1`` is measured counter-clockwise from the
positive x-axis; ``angle2`` is measured relative to the first segment, so the
second segment points along ``angle1 + angle2``.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

import numpy as np

from twolink.angles import deg_to_rad, rad_to_deg

logger = logging.getLogger(__name__)

# Relative slack on the reachability test, scaled by L1 + L2
REACH_TOLERANCE = 1e-9


class InvalidArmConfig(ValueError):
    """Raised when segment lengths do not describe a valid arm."""


class ElbowBranch(Enum):
    """Which of the two mirror-image IK solutions to return."""
    ELBOW_UP = "up"
    ELBOW_DOWN = "down"


@dataclass(frozen=True)
class ArmConfig:
    """Segment lengths of the arm.

    Link 1 (length1): base to elbow
    Link 2 (length2): elbow to end-effector
    """
    length1: float
    length2: float

    def __post_init__(self):
        for name in ("length1", "length2"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidArmConfig(
                    f"{name} must be a positive finite length, got {value!r}")


@dataclass(frozen=True)
class JointAngles:
    angle1: float
    angle2: float


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class Solved:
    """IK found joint angles for the target."""
    angles: JointAngles

    @property
    def reachable(self) -> bool:
        return True


@dataclass(frozen=True)
class Unreachable:
    """IK target lies outside the annulus [min_reach, max_reach]."""
    distance: float
    min_reach: float
    max_reach: float

    @property
    def reachable(self) -> bool:
        return False


IKResult = Union[Solved, Unreachable]


def workspace_bounds(config: ArmConfig) -> Tuple[float, float]:
    """
    Inner and outer radius of the reachable workspace.

    Args:
        config: Segment lengths

    Returns:
        (min_reach, max_reach) measured from the base joint
    """
    return (abs(config.length1 - config.length2),
            config.length1 + config.length2)


def _distance(target: Point2D) -> float:
    # hypot does not overflow for large finite coordinates
    return float(np.hypot(target.x, target.y))


def _within_reach(config: ArmConfig, dist: float) -> bool:
    min_reach, max_reach = workspace_bounds(config)
    slack = REACH_TOLERANCE * max_reach
    return min_reach - slack <= dist <= max_reach + slack


def _unit_scale(config: ArmConfig) -> float:
    """Power of two within a factor of two of the longer link; dividing by it is exact."""
    _, exponent = math.frexp(max(config.length1, config.length2))
    return math.ldexp(0.5, exponent)


def is_reachable(config: ArmConfig, target: Point2D) -> bool:
    """True if some pair of joint angles places the end-effector at target."""
    return _within_reach(config, _distance(target))


def solve_forward(config: ArmConfig, angles: JointAngles) -> Point2D:
    """
    Compute forward kinematics.

    Args:
        config: Segment lengths
        angles: Joint angles (degrees)

    Returns:
        End-effector position in the arm frame

    Example:
        >>> solve_forward(ArmConfig(100, 80), JointAngles(0, 0))
        Point2D(x=180.0, y=0.0)
    """
    t1 = deg_to_rad(angles.angle1)
    t12 = deg_to_rad(angles.angle1 + angles.angle2)

    x = config.length1 * np.cos(t1) + config.length2 * np.cos(t12)
    y = config.length1 * np.sin(t1) + config.length2 * np.sin(t12)
    return Point2D(float(x), float(y))


def solve_inverse(config: ArmConfig, target: Point2D,
                  branch: ElbowBranch = ElbowBranch.ELBOW_UP) -> IKResult:
    """
    Compute inverse kinematics.

    Uses the law of cosines for the elbow and splits the shoulder angle into
    the bearing of the target minus the interior angle at the base.

    Args:
        config: Segment lengths
        target: Desired end-effector position in the arm frame
        branch: Elbow-up (default, elbow angle in [0, 180]) or elbow-down

    Returns:
        Solved with joint angles in degrees, or Unreachable
    """
    x, y = target.x, target.y

    # Distance to target
    dist = _distance(target)

    if not _within_reach(config, dist):
        min_reach, max_reach = workspace_bounds(config)
        logger.debug("Target (%.3f, %.3f) unreachable: distance %.3f outside [%.3f, %.3f]",
                     x, y, dist, min_reach, max_reach)
        return Unreachable(dist, min_reach, max_reach)

    # Work in units of about the arm's reach so squares stay near 1
    scale = _unit_scale(config)
    L1, L2 = config.length1 / scale, config.length2 / scale
    xs, ys, ds = x / scale, y / scale, dist / scale
    d_squared = xs**2 + ys**2

    # Elbow angle using law of cosines, clamped to absorb rounding at the boundary
    cos_theta2 = (d_squared - L1**2 - L2**2) / (2 * L1 * L2)
    theta2 = np.arccos(np.clip(cos_theta2, -1.0, 1.0))

    # Interior angle at the base between segment 1 and the target line
    if ds == 0.0:
        # Only reachable when L1 == L2; segment 1 lies along +x, folded back
        phi = 0.0
    else:
        cos_phi = (L1**2 + d_squared - L2**2) / (2 * L1 * ds)
        phi = np.arccos(np.clip(cos_phi, -1.0, 1.0))

    alpha = np.arctan2(y, x)

    if branch is ElbowBranch.ELBOW_UP:
        theta1 = alpha - phi
    else:
        theta1 = alpha + phi
        theta2 = -theta2

    angles = JointAngles(rad_to_deg(theta1), rad_to_deg(theta2))
    logger.debug("IK (%.3f, %.3f) -> %s", x, y, angles)
    return Solved(angles)
