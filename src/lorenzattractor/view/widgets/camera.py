"""
Camera Math
Turns the (azimuth, elevation) view angles into a VTK camera placement.

The scene is rotated by `elevation` about X, then by `azimuth` about Y, and
viewed down -Z. Instead of rotating the scene we move the camera by the
inverse rotation.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np
import numpy.typing as npt


def rotation_x(degrees: float) -> npt.NDArray[np.float64]:
    a = np.radians(degrees)
    c, s = np.cos(a), np.sin(a)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(degrees: float) -> npt.NDArray[np.float64]:
    a = np.radians(degrees)
    c, s = np.cos(a), np.sin(a)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def camera_vectors(
    azimuth: float, elevation: float
) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Unit direction from the focal point towards the camera, and the view-up.

    Args:
        azimuth: Rotation about Y in degrees.
        elevation: Rotation about X in degrees.

    Returns:
        (direction, up) as length-3 arrays.
    """
    inverse = rotation_y(-azimuth) @ rotation_x(-elevation)
    direction = inverse @ np.array([0.0, 0.0, 1.0])
    up = inverse @ np.array([0.0, 1.0, 0.0])
    return direction, up
