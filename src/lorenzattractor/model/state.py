"""
Visualizer State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the Lorenz parameters, the computed trajectory,
   the animation controller, the color mode and the view angles in one place.
2. Explicit context: The instance is created once in `main.py` and passed by
   reference to the window and the key bindings. Nothing here is a
   module-level singleton.
3. Consistency: Parameter changes go through `set_param()`, which recomputes
   the trajectory synchronously. Reading `trajectory` after a direct edit of
   `params` recomputes first, so a stale buffer is never drawn.

Classes:
    ViewState: Camera angles and orthographic extent.
    LorenzState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import List, Optional, Tuple

import numpy as np
import numpy.typing as npt

from lorenzattractor.config import (
    LORENZ_POINTS, TIME_STEP, DEFAULT_SPEED, SPEED_STEP,
    DEFAULT_AZIMUTH, DEFAULT_ELEVATION, DEFAULT_DIM, MIN_DIM,
)
from lorenzattractor.model.animation import AnimationController
from lorenzattractor.model.colors import ColorMode, RGB, color_for
from lorenzattractor.model.lorenz import SimulationParameters, compute_trajectory

logger = logging.getLogger(__name__)

PARAMETER_NAMES: Tuple[str, ...] = ("sigma", "beta", "rho")


@dataclass
class ViewState:
    azimuth: int = DEFAULT_AZIMUTH
    elevation: int = DEFAULT_ELEVATION
    dim: float = DEFAULT_DIM
    aspect: float = 1.0


@dataclass
class LorenzState:
    """
    Holds the entire state of the visualizer.
    Pass this instance to the window and to the key bindings.
    """
    params: SimulationParameters = field(default_factory=SimulationParameters)
    n_points: int = LORENZ_POINTS
    dt: float = TIME_STEP

    color_mode: ColorMode = ColorMode.FADE
    view: ViewState = field(default_factory=ViewState)
    animation: Optional[AnimationController] = None

    _trajectory: Optional[npt.NDArray[np.float64]] = field(default=None, init=False, repr=False)
    _computed_for: Optional[Tuple[float, float, float]] = field(default=None, init=False, repr=False)
    # Bumped on every recompute so views can cache per buffer
    revision: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.n_points <= 0:
            raise ValueError(f"n_points must be positive, got {self.n_points}.")
        if self.animation is None:
            self.animation = AnimationController(total=self.n_points, speed_seconds=DEFAULT_SPEED)
        elif self.animation.total != self.n_points:
            logger.debug(
                f"Animation total {self.animation.total} re-targeted to {self.n_points} points."
            )
            self.animation.reset(self.n_points, self.animation.start_time)
        self.recompute()

    # ------------------------------------------------------------------------------
    # Trajectory
    # ------------------------------------------------------------------------------

    @property
    def trajectory(self) -> npt.NDArray[np.float64]:
        """The (n_points, 3) buffer matching the current parameters."""
        if self._trajectory is None or self._computed_for != self.params.signature():
            self.recompute()
        return self._trajectory

    def recompute(self) -> npt.NDArray[np.float64]:
        """Full O(N) recomputation; replaces the buffer in one assignment."""
        snapshot = replace(self.params)
        points = compute_trajectory(snapshot, n_points=self.n_points, dt=self.dt)
        self._trajectory = points
        self._computed_for = snapshot.signature()
        self.revision += 1
        logger.info(
            f"Trajectory recomputed: s={snapshot.sigma:.1f} b={snapshot.beta:.2f} "
            f"r={snapshot.rho:.1f} ({self.n_points} points)."
        )
        return points

    def set_param(self, name: str, delta: float) -> float:
        """
        Nudge sigma, beta or rho by `delta` and recompute.

        Returns:
            The new parameter value.

        Raises:
            ValueError: If `name` is not a Lorenz parameter.
        """
        if name not in PARAMETER_NAMES:
            raise ValueError(f"Unknown parameter '{name}'. Expected one of {PARAMETER_NAMES}.")
        value = getattr(self.params, name) + delta
        setattr(self.params, name, value)
        self.recompute()
        return value

    def first_non_finite(self) -> Optional[int]:
        """Index of the first row containing inf/NaN, or None."""
        bad = ~np.isfinite(self.trajectory).all(axis=1)
        if not bad.any():
            return None
        return int(np.argmax(bad))

    # ------------------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------------------

    def tick(self, now: float) -> int:
        return self.animation.tick(now)

    def toggle_animation(self, now: float) -> bool:
        return self.animation.toggle(now)

    def set_speed(self, seconds: float) -> float:
        return self.animation.set_speed(seconds)

    def adjust_speed(self, delta: float) -> float:
        return self.animation.adjust_speed(delta)

    def faster(self) -> float:
        return self.adjust_speed(-SPEED_STEP)

    def slower(self) -> float:
        return self.adjust_speed(SPEED_STEP)

    @property
    def points_to_draw(self) -> int:
        return self.animation.points_to_draw

    # ------------------------------------------------------------------------------
    # Colors
    # ------------------------------------------------------------------------------

    def set_color_mode(self, mode: ColorMode) -> None:
        self.color_mode = ColorMode(mode)
        logger.info(f"Color mode: {self.color_mode.label}.")

    def cycle_color_mode(self, step: int = 1) -> ColorMode:
        self.set_color_mode(self.color_mode.cycled(step))
        return self.color_mode

    def color_for(self, index: int) -> RGB:
        return color_for(index, self.n_points, self.color_mode)

    # ------------------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------------------

    def rotate(self, d_azimuth: int = 0, d_elevation: int = 0) -> None:
        self.view.azimuth = (self.view.azimuth + d_azimuth) % 360
        self.view.elevation = (self.view.elevation + d_elevation) % 360

    def zoom(self, delta: float) -> float:
        """Change the orthographic half-height; never below MIN_DIM."""
        self.view.dim = max(self.view.dim + delta, MIN_DIM)
        return self.view.dim

    def reset_view(self) -> None:
        self.view.azimuth = DEFAULT_AZIMUTH
        self.view.elevation = DEFAULT_ELEVATION

    def set_aspect(self, width: int, height: int) -> float:
        self.view.aspect = width / height if height > 0 else 1.0
        return self.view.aspect

    # ------------------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------------------

    def status_lines(self) -> List[str]:
        """Text overlay lines, bottom line first."""
        anim = self.animation
        lines = [
            f"Lorenz Attractor - View: {self.view.azimuth},{self.view.elevation}",
            f"Animation: {'ON' if anim.enabled else 'OFF'} | "
            f"Speed: {anim.speed_seconds:.1f}s | Color: {self.color_mode.label}",
        ]
        if anim.enabled:
            lines.append(f"Progress: {anim.visible_count}/{self.n_points} points")
        lines.append(
            f"Params: s={self.params.sigma:.1f} b={self.params.beta:.2f} r={self.params.rho:.1f}"
        )
        lines.append(
            "Controls: s/S,b/B,r/R=params, SPACE=anim, c/C=cycle color, +/-=speed, "
            "z/Z=zoom, arrows=rotate, 0=reset view"
        )
        return lines
