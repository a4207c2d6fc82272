"""
Key Bindings
============
Maps key presses onto `LorenzState` mutators.

Why is this file needed?
------------------------
The window only translates Qt key events into key names ("s", "left", ...)
and forwards them here. Keeping the table free of Qt makes it testable and
keeps the window a thin router.

Key names:
    Printable keys use their character (case sensitive, " " for space).
    Arrows are "left", "right", "up" and "down".
"""
from __future__ import annotations

import logging
from typing import Callable, Dict

from lorenzattractor.config import SIGMA_STEP, BETA_STEP, RHO_STEP, ANGLE_STEP, DIM_STEP
from lorenzattractor.model.state import LorenzState

logger = logging.getLogger(__name__)

KeyAction = Callable[[LorenzState, float], None]


def _param(name: str, delta: float) -> KeyAction:
    def action(state: LorenzState, now: float) -> None:
        state.set_param(name, delta)
    return action


KEY_BINDINGS: Dict[str, KeyAction] = {
    " ": lambda state, now: state.toggle_animation(now),
    "c": lambda state, now: state.cycle_color_mode(1),
    "C": lambda state, now: state.cycle_color_mode(-1),
    "+": lambda state, now: state.faster(),
    "=": lambda state, now: state.faster(),
    "-": lambda state, now: state.slower(),
    "_": lambda state, now: state.slower(),
    "s": _param("sigma", SIGMA_STEP),
    "S": _param("sigma", -SIGMA_STEP),
    "b": _param("beta", BETA_STEP),
    "B": _param("beta", -BETA_STEP),
    "r": _param("rho", RHO_STEP),
    "R": _param("rho", -RHO_STEP),
    "z": lambda state, now: state.zoom(-DIM_STEP),
    "Z": lambda state, now: state.zoom(DIM_STEP),
    "0": lambda state, now: state.reset_view(),
    "right": lambda state, now: state.rotate(d_azimuth=ANGLE_STEP),
    "left": lambda state, now: state.rotate(d_azimuth=-ANGLE_STEP),
    "up": lambda state, now: state.rotate(d_elevation=ANGLE_STEP),
    "down": lambda state, now: state.rotate(d_elevation=-ANGLE_STEP),
}


def handle_key(state: LorenzState, key: str, now: float) -> bool:
    """
    Apply the action bound to `key`.

    Args:
        state: The visualizer state to mutate.
        key: Key name as described in the module docstring.
        now: Current time in seconds (needed when the animation restarts).

    Returns:
        True if the key was bound, False otherwise.
    """
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    logger.debug(f"Key '{key}' pressed.")
    action(state, now)
    return True
