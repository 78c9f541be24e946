"""Tests for the FK/IK presentation session."""

import pytest
from twolink.kinematics import (
    ElbowBranch, InvalidArmConfig, JointAngles, Point2D, Solved, Unreachable,
)
from twolink.session import ArmSession, Mode, REST_POSE, format_angles, format_position


class TestSessionDefaults:

    def test_initial_state(self):
        session = ArmSession()
        assert session.mode is Mode.FK
        assert (session.length1, session.length2) == (100.0, 80.0)
        assert (session.target_x, session.target_y) == (100.0, 50.0)
        assert session.branch is ElbowBranch.ELBOW_UP

    def test_toggle(self):
        session = ArmSession()
        assert session.toggle() is Mode.IK
        assert session.toggle() is Mode.FK


class TestForwardMode:

    def test_snapshot_at_rest(self):
        frame = ArmSession().snapshot()
        assert frame.mode is Mode.FK
        assert frame.target is None
        assert frame.ik_result is None
        assert frame.text == "(180.00, 0.00)"

    def test_snapshot_follows_input_changes(self):
        session = ArmSession()
        first = session.snapshot()
        session.angle1 = 90.0
        second = session.snapshot()
        assert first.text == "(180.00, 0.00)"
        assert abs(second.end_effector.x) < 1e-9
        assert abs(second.end_effector.y - 180) < 1e-9

    def test_invalid_lengths_raise(self):
        session = ArmSession(length1=0)
        with pytest.raises(InvalidArmConfig):
            session.snapshot()


class TestInverseMode:

    def test_snapshot_solves_target(self):
        session = ArmSession(mode=Mode.IK)
        frame = session.snapshot()
        assert isinstance(frame.ik_result, Solved)
        assert frame.angles == frame.ik_result.angles
        assert frame.target == Point2D(100.0, 50.0)
        assert abs(frame.end_effector.x - 100) < 1e-6
        assert abs(frame.end_effector.y - 50) < 1e-6
        assert frame.text.startswith("θ1 = ")

    def test_unreachable_is_reported_not_solved(self):
        session = ArmSession(mode=Mode.IK, target_x=300.0, target_y=0.0)
        frame = session.snapshot()
        assert isinstance(frame.ik_result, Unreachable)
        assert frame.angles == REST_POSE
        assert frame.end_effector is None
        assert frame.layout.end_effector == Point2D(180.0, 0.0)
        assert frame.text == "Target (300.00, 0.00) is unreachable"

    def test_elbow_down_branch(self):
        session = ArmSession(mode=Mode.IK, branch=ElbowBranch.ELBOW_DOWN)
        frame = session.snapshot()
        assert frame.angles.angle2 < 0


class TestFormatting:

    def test_format_position(self):
        assert format_position(Point2D(180.0, 0.0)) == "(180.00, 0.00)"

    def test_format_angles(self):
        assert format_angles(JointAngles(-17.381, 104.108)) == "θ1 = -17.38°, θ2 = 104.11°"
