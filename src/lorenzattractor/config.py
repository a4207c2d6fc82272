"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants and
defaults of the visualizer.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (step sizes, key increments, axis
   extents) from being scattered throughout the model and the view.
2. Overrides: The command line in `main.py` only replaces a handful of these
   per run; everything else is read from here.

Exports:
    LORENZ_POINTS (int): Number of integrated trajectory points.
    TIME_STEP (float): Forward-Euler step size.
    INITIAL_CONDITION (tuple): Starting (x, y, z) of the integration.
"""
from typing import Tuple

# --- Integration ---
LORENZ_POINTS: int = 50000
TIME_STEP: float = 0.001
INITIAL_CONDITION: Tuple[float, float, float] = (1.0, 1.0, 1.0)

DEFAULT_SIGMA: float = 10.0
DEFAULT_BETA: float = 2.6666
DEFAULT_RHO: float = 28.0

# Increments applied by the s/S, b/B and r/R keys
SIGMA_STEP: float = 0.5
BETA_STEP: float = 0.1
RHO_STEP: float = 1.0

# --- Animation ---
MIN_SPEED: float = 1.0
SPEED_STEP: float = 1.0
DEFAULT_SPEED: float = 20.0
FRAME_INTERVAL_MS: int = 16

# --- View ---
DEFAULT_AZIMUTH: int = 0
DEFAULT_ELEVATION: int = 15
DEFAULT_DIM: float = 60.0
MIN_DIM: float = 2.0
ANGLE_STEP: int = 5
DIM_STEP: float = 2.0

# Reference axes: (start, end) along X, Y and Z
AXIS_EXTENTS: Tuple[Tuple[float, float], ...] = ((-30.0, 20.0), (-20.0, 20.0), (-10.0, 40.0))
AXIS_LABEL_OFFSETS: Tuple[float, float, float] = (22.0, 22.0, 42.0)

# --- Window ---
WINDOW_TITLE: str = "Lorenz Attractor"
WINDOW_SIZE: Tuple[int, int] = (800, 600)
