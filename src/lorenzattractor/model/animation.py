"""
Animation Progress Controller
=============================
Converts elapsed wall-clock time into the number of trajectory points that
are currently revealed.

Why is this file needed?
------------------------
1. Determinism: The controller never reads a clock. The caller passes the
   current time (in seconds) to `tick()`, so the reveal can be unit tested.
2. Decoupling: The view only asks for `points_to_draw`; it does not know
   whether the animation is idle, running or complete.

Classes:
    AnimationPhase: IDLE / RUNNING / COMPLETE.
    AnimationController: The reveal state machine.
"""
from __future__ import annotations

from enum import Enum
import logging
import math

from lorenzattractor.config import DEFAULT_SPEED, MIN_SPEED

logger = logging.getLogger(__name__)


class AnimationPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


class AnimationController:
    """
    Progressive reveal of `total` points over `speed_seconds`.

    While enabled, each `tick(now)` sets
    ``visible_count = floor(total * elapsed / speed_seconds)``
    clamped to [0, total]. The count never goes down until the animation is
    enabled again.
    """

    def __init__(
        self,
        total: int,
        speed_seconds: float = DEFAULT_SPEED,
        enabled: bool = True,
        start_time: float = 0.0,
        loop: bool = False,
    ) -> None:
        if total < 0:
            raise ValueError(f"Animation total must not be negative, got {total}.")
        self.total: int = total
        self.speed_seconds: float = max(float(speed_seconds), MIN_SPEED)
        self.enabled: bool = enabled
        self.visible_count: int = 0
        self.start_time: float = start_time
        # Replay from the start instead of holding the finished trajectory
        self.loop: bool = loop
        self._complete: bool = False

    # ------------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------------

    @property
    def phase(self) -> AnimationPhase:
        if not self.enabled:
            return AnimationPhase.IDLE
        if self._complete:
            return AnimationPhase.COMPLETE
        return AnimationPhase.RUNNING

    @property
    def points_to_draw(self) -> int:
        """All points when idle, otherwise the revealed prefix."""
        return self.visible_count if self.enabled else self.total

    # ------------------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------------------

    def enable(self, now: float) -> None:
        """(Re)start the reveal from zero."""
        self.enabled = True
        self._restart(now)
        logger.info("Animation enabled.")

    def disable(self) -> None:
        self.enabled = False
        logger.info("Animation disabled.")

    def toggle(self, now: float) -> bool:
        if self.enabled:
            self.disable()
        else:
            self.enable(now)
        return self.enabled

    def tick(self, now: float) -> int:
        """
        Advance the reveal to time `now` and return the visible count.

        Idle controllers are left untouched.
        """
        if not self.enabled:
            return self.visible_count

        if self._complete:
            if self.loop:
                self._restart(now)
            return self.visible_count

        elapsed = max(now - self.start_time, 0.0)
        count = math.floor(self.total * (elapsed / self.speed_seconds))
        count = min(max(count, self.visible_count), self.total)

        if count >= self.total:
            count = self.total
            self._complete = True
            # Fresh reference point for the next restart
            self.start_time = now
            logger.debug(f"Animation complete ({self.total} points).")

        self.visible_count = count
        return count

    def set_speed(self, seconds: float) -> float:
        """Set the reveal duration; anything below MIN_SPEED is clamped."""
        self.speed_seconds = max(float(seconds), MIN_SPEED)
        return self.speed_seconds

    def adjust_speed(self, delta: float) -> float:
        return self.set_speed(self.speed_seconds + delta)

    def reset(self, total: int, now: float) -> None:
        """Re-target the controller to a trajectory of a new length."""
        if total < 0:
            raise ValueError(f"Animation total must not be negative, got {total}.")
        self.total = total
        self._restart(now)

    def _restart(self, now: float) -> None:
        self.start_time = now
        self.visible_count = 0
        self._complete = False
