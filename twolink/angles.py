"""Degree/radian conversion shared by the solvers and the renderer."""

import numpy as np


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return float(np.deg2rad(deg))


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return float(np.rad2deg(rad))
