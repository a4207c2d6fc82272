"""
Segment Color Mapping
=====================
Maps a point's position along the trajectory to an RGB color in [0, 1].

Modes:
    SINGLE:  constant cyan.
    RAINBOW: hue sweeps 0..360 degrees along the trajectory (S = V = 1).
    FADE:    linear blend from blue to red with a fixed green channel.
"""
from __future__ import annotations

from enum import IntEnum
import math
from typing import Tuple

import numpy as np
import numpy.typing as npt

RGB = Tuple[float, float, float]

SINGLE_COLOR: RGB = (0.0, 1.0, 1.0)
FADE_GREEN: float = 0.2


class ColorMode(IntEnum):
    SINGLE = 0
    RAINBOW = 1
    FADE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def cycled(self, step: int = 1) -> ColorMode:
        """Next (step=1) or previous (step=-1) mode, wrapping around."""
        return ColorMode((self.value + step) % len(ColorMode))


def hue_to_rgb(hue: float) -> RGB:
    """HSV to RGB at full saturation and value, hue in degrees."""
    c = 1.0
    x = c * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))
    if hue < 60.0:
        return c, x, 0.0
    if hue < 120.0:
        return x, c, 0.0
    if hue < 180.0:
        return 0.0, c, x
    if hue < 240.0:
        return 0.0, x, c
    if hue < 300.0:
        return x, 0.0, c
    return c, 0.0, x


def color_for(index: int, total: int, mode: ColorMode) -> RGB:
    """
    Color of the segment starting at `index` in a trajectory of `total` points.

    Raises:
        ValueError: If `total` is not positive in a mode that depends on it.
    """
    if mode == ColorMode.SINGLE:
        return SINGLE_COLOR
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}.")

    ratio = index / total
    if mode == ColorMode.RAINBOW:
        return hue_to_rgb(ratio * 360.0)
    return ratio, FADE_GREEN, 1.0 - ratio


def segment_colors(count: int, total: int, mode: ColorMode) -> npt.NDArray[np.float64]:
    """
    Vectorized `color_for` for indices 0..count-1.

    Returns:
        (count, 3) float64 array, row i equal to color_for(i, total, mode).
    """
    count = max(int(count), 0)
    if mode == ColorMode.SINGLE:
        return np.tile(np.asarray(SINGLE_COLOR, dtype=np.float64), (count, 1))
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}.")

    ratio = np.arange(count, dtype=np.float64) / total
    colors = np.empty((count, 3), dtype=np.float64)

    if mode == ColorMode.FADE:
        colors[:, 0] = ratio
        colors[:, 1] = FADE_GREEN
        colors[:, 2] = 1.0 - ratio
        return colors

    hue = ratio * 360.0
    x = 1.0 - np.abs(np.fmod(hue / 60.0, 2.0) - 1.0)
    sector = np.minimum((hue // 60.0).astype(np.int64), 5)
    ones = np.ones(count, dtype=np.float64)
    zeros = np.zeros(count, dtype=np.float64)

    # (r, g, b) per 60-degree sector
    table = (
        (ones, x, zeros),
        (x, ones, zeros),
        (zeros, ones, x),
        (zeros, x, ones),
        (x, zeros, ones),
        (ones, zeros, x),
    )
    for channel in range(3):
        colors[:, channel] = np.choose(sector, [row[channel] for row in table])
    return colors
