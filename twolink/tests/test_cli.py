"""Tests for the command-line front end."""

import pytest
from twolink.cli import main, EXIT_OK, EXIT_INVALID, EXIT_UNREACHABLE


class TestForwardCommand:

    def test_default_pose(self, capsys):
        assert main(['fk']) == EXIT_OK
        assert capsys.readouterr().out.strip() == "(180.00, 0.00)"

    def test_angles(self, capsys):
        assert main(['fk', '--angle1', '90', '--angle2', '-90']) == EXIT_OK
        assert capsys.readouterr().out.strip() == "(80.00, 100.00)"

    def test_invalid_length(self, capsys):
        assert main(['fk', '--l1', '0']) == EXIT_INVALID
        assert "length1" in capsys.readouterr().err


class TestInverseCommand:

    def test_fully_extended(self, capsys):
        assert main(['ik', '--x', '180', '--y', '0']) == EXIT_OK
        assert capsys.readouterr().out.strip() == "θ1 = 0.00°, θ2 = 0.00°"

    def test_elbow_down(self, capsys):
        assert main(['ik', '--x', '20', '--y', '0', '--elbow-down']) == EXIT_OK
        assert "θ2 = -180.00°" in capsys.readouterr().out

    def test_unreachable(self, capsys):
        assert main(['ik', '--x', '181', '--y', '0']) == EXIT_UNREACHABLE
        assert "unreachable" in capsys.readouterr().out

    def test_plot(self, tmp_path):
        path = tmp_path / 'arm.png'
        assert main(['ik', '--plot', str(path)]) == EXIT_OK
        assert path.exists()
        assert path.stat().st_size > 0


def test_mode_required():
    with pytest.raises(SystemExit):
        main([])
