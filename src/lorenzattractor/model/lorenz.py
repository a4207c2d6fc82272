"""
Lorenz Trajectory Generator
===========================
Fixed-step forward-Euler integration of the Lorenz system

    dx/dt = sigma * (y - x)
    dy/dt = x * (rho - z) - y
    dz/dt = x * y - beta * z

Classes:
    SimulationParameters: The three control parameters of the ODE system.

Functions:
    compute_trajectory: Integrates N steps into a freshly allocated (N, 3) array.
"""
from __future__ import annotations

from dataclasses import dataclass, astuple
import logging
from typing import Tuple

import numpy as np
import numpy.typing as npt
import numba as nb

from lorenzattractor.config import (
    LORENZ_POINTS, TIME_STEP, INITIAL_CONDITION,
    DEFAULT_SIGMA, DEFAULT_BETA, DEFAULT_RHO,
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationParameters:
    sigma: float = DEFAULT_SIGMA
    beta: float = DEFAULT_BETA
    rho: float = DEFAULT_RHO

    def signature(self) -> Tuple[float, float, float]:
        """Hashable snapshot used to detect a stale trajectory."""
        return astuple(self)


# No fastmath here: the recurrence has to stay bitwise reproducible.
@nb.njit(cache=True)
def _euler_kernel(
    out: npt.NDArray[np.float64],
    x: float,
    y: float,
    z: float,
    sigma: float,
    beta: float,
    rho: float,
    dt: float,
) -> None:
    """Writes one integrated state per row of `out`."""
    for i in range(out.shape[0]):
        dx = sigma * (y - x)
        dy = x * (rho - z) - y
        dz = x * y - beta * z
        x = x + dt * dx
        y = y + dt * dy
        z = z + dt * dz
        out[i, 0] = x
        out[i, 1] = y
        out[i, 2] = z


def compute_trajectory(
    params: SimulationParameters,
    n_points: int = LORENZ_POINTS,
    dt: float = TIME_STEP,
    initial: Tuple[float, float, float] = INITIAL_CONDITION,
) -> npt.NDArray[np.float64]:
    """
    Integrates the Lorenz system with forward Euler.

    The initial condition itself is not stored: row 0 holds the state after
    the first step. Divergent parameters simply yield inf/NaN rows.

    Args:
        params: sigma, beta and rho.
        n_points: Number of steps (and rows) to produce.
        dt: Step size.
        initial: Starting (x, y, z).

    Returns:
        (n_points, 3) float64 array.

    Raises:
        ValueError: If n_points is not positive.
    """
    if n_points <= 0:
        raise ValueError(f"n_points must be positive, got {n_points}.")

    points = np.empty((n_points, 3), dtype=np.float64)
    x0, y0, z0 = (float(v) for v in initial)
    _euler_kernel(
        points, x0, y0, z0,
        float(params.sigma), float(params.beta), float(params.rho), float(dt),
    )
    logger.debug(
        f"Integrated {n_points} steps (dt={dt}) for "
        f"s={params.sigma}, b={params.beta}, r={params.rho}."
    )
    return points
