"""Presentation state for the FK/IK demo.

ArmSession holds the user's inputs. Nothing is cached: every snapshot() solves
again with whatever the inputs are at that moment.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from twolink.kinematics import (
    ArmConfig, ElbowBranch, IKResult, JointAngles, Point2D,
    solve_forward, solve_inverse,
)
from twolink.layout import ArmLayout, joint_positions

logger = logging.getLogger(__name__)

REST_POSE = JointAngles(0.0, 0.0)


class Mode(Enum):
    FK = "fk"
    IK = "ik"


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw and label one solve.

    angles and layout are the pose that gets drawn. end_effector is None when
    the IK target is unreachable; the drawn rest pose is not a solution.
    """
    mode: Mode
    angles: JointAngles
    layout: ArmLayout
    end_effector: Optional[Point2D]
    target: Optional[Point2D] = None
    ik_result: Optional[IKResult] = None

    @property
    def text(self) -> str:
        if self.mode is Mode.FK:
            return format_position(self.end_effector)
        if self.ik_result is not None and not self.ik_result.reachable:
            return (f"Target ({self.target.x:.2f}, {self.target.y:.2f}) "
                    f"is unreachable")
        return format_angles(self.angles)


@dataclass
class ArmSession:
    """Mutable inputs of the demo page; defaults match its initial state."""
    mode: Mode = Mode.FK
    length1: float = 100.0
    length2: float = 80.0
    angle1: float = 0.0
    angle2: float = 0.0
    target_x: float = 100.0
    target_y: float = 50.0
    branch: ElbowBranch = ElbowBranch.ELBOW_UP

    @property
    def config(self) -> ArmConfig:
        return ArmConfig(self.length1, self.length2)

    def toggle(self) -> Mode:
        """Switch between FK and IK, returning the new mode."""
        self.mode = Mode.IK if self.mode is Mode.FK else Mode.FK
        return self.mode

    def snapshot(self) -> Frame:
        """
        Solve with the current inputs.

        Returns:
            Frame for the active mode. An unreachable IK target is drawn at
            REST_POSE but keeps its Unreachable result.

        Raises:
            InvalidArmConfig: If either length is not positive
        """
        config = self.config

        if self.mode is Mode.FK:
            angles = JointAngles(self.angle1, self.angle2)
            end = solve_forward(config, angles)
            return Frame(Mode.FK, angles, joint_positions(config, angles), end)

        target = Point2D(self.target_x, self.target_y)
        result = solve_inverse(config, target, self.branch)
        if result.reachable:
            angles = result.angles
        else:
            logger.info("Target (%.2f, %.2f) out of reach, drawing rest pose",
                        target.x, target.y)
            angles = REST_POSE
        layout = joint_positions(config, angles)
        end = layout.end_effector if result.reachable else None
        return Frame(Mode.IK, angles, layout, end,
                     target=target, ik_result=result)


def format_position(point: Point2D) -> str:
    """
    Example:
        >>> format_position(Point2D(180.0, 0.0))
        '(180.00, 0.00)'
    """
    return f"({point.x:.2f}, {point.y:.2f})"


def format_angles(angles: JointAngles) -> str:
    return f"θ1 = {angles.angle1:.2f}°, θ2 = {angles.angle2:.2f}°"
