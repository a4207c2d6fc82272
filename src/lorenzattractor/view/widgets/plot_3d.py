"""
3D Visualization Widget (PyVista Wrapper) - Unified Rendering
"""

from __future__ import annotations

from typing import Optional, Tuple

import logging
import numpy as np
import numpy.typing as npt

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from lorenzattractor.config import AXIS_EXTENTS, AXIS_LABEL_OFFSETS
from lorenzattractor.model.colors import ColorMode, segment_colors
from lorenzattractor.model.state import LorenzState, ViewState
from lorenzattractor.view.widgets.camera import camera_vectors
from lorenzattractor.view.widgets.vtk_utils import VtkUtils, COLOR_ARRAY

logger = logging.getLogger(__name__)

CAMERA_DISTANCE = 100.0
HUD_NAME = "hud"


class PyVistaWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._vtk_utils = VtkUtils()
        self._init_plotter()

        # --- Actors state ---
        self._trajectory_actor: Optional[pv.Actor] = None
        self._axes_actor: Optional[pv.Actor] = None

        # --- Data cache ---
        # Full per-segment colors for (n_points, mode); sliced every frame
        self._cached_colors: Optional[npt.NDArray[np.float64]] = None
        self._cached_colors_key: Optional[Tuple[int, ColorMode]] = None
        # Drawable length of the current trajectory buffer
        self._cached_finite_for: Optional[int] = None
        self._cached_finite_count: int = 0

        self._last_trajectory_signature: Optional[Tuple[int, int, ColorMode]] = None
        self._last_camera_signature: Optional[Tuple[int, int, float]] = None
        self._last_hud: Optional[str] = None

        self._draw_axes()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_scene(self, state: LorenzState, force: bool = False) -> None:
        """
        Refreshes all layers of the scene, rendering only if something changed:
        1. Trajectory (visible prefix, per-segment colors)
        2. Camera (view angles, zoom)
        3. HUD text
        """
        changed = self._update_trajectory_layer(state, force)
        changed |= self._update_camera(state.view, force)
        changed |= self._update_hud(state, force)

        if changed:
            self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Layer Management
    # ------------------------------------------------------------------------------

    def _update_trajectory_layer(self, state: LorenzState, force: bool) -> bool:
        """Rebuild the line data only if the visible prefix or the colors changed."""
        trajectory = state.trajectory
        count = min(state.points_to_draw, self._finite_count(state))

        signature = (state.revision, count, state.color_mode)
        if not force and signature == self._last_trajectory_signature:
            return False
        self._last_trajectory_signature = signature

        if count < 2:
            self._clear_trajectory_layer()
            return True

        colors = self._colors_for(state.n_points, state.color_mode)[: count - 1]
        poly = self._vtk_utils.segments_to_polydata(trajectory[:count], colors)

        if self._trajectory_actor is None:
            self._trajectory_actor = self.plotter.add_mesh(
                poly,
                scalars=COLOR_ARRAY,
                rgb=True,
                line_width=1.5,
                lighting=False,
                pickable=False,
                show_scalar_bar=False,
                reset_camera=False,
            )
        else:
            # Update the existing dataset in-place to prevent blinking
            self._trajectory_actor.mapper.dataset.copy_from(poly)
            self._trajectory_actor.SetVisibility(True)
        return True

    def _finite_count(self, state: LorenzState) -> int:
        """Number of leading rows that can be drawn (stops at the first inf/NaN)."""
        key = state.revision
        if key != self._cached_finite_for:
            self._cached_finite_for = key
            bad = state.first_non_finite()
            if bad is None:
                self._cached_finite_count = state.n_points
            else:
                self._cached_finite_count = bad
                logger.warning(
                    f"Trajectory diverges at point {bad}; drawing only the first {bad} points."
                )
        return self._cached_finite_count

    def _colors_for(self, n_points: int, mode: ColorMode) -> npt.NDArray[np.float64]:
        key = (n_points, mode)
        if key != self._cached_colors_key:
            self._cached_colors = segment_colors(max(n_points - 1, 0), n_points, mode)
            self._cached_colors_key = key
        return self._cached_colors

    def _clear_trajectory_layer(self) -> None:
        """Removes the trajectory actor."""
        if self._trajectory_actor:
            self.plotter.remove_actor(self._trajectory_actor)
            self._trajectory_actor = None

    def _draw_axes(self) -> None:
        """Light grey reference axes with X/Y/Z labels."""
        axes = self._vtk_utils.axes_polydata(AXIS_EXTENTS)
        self._axes_actor = self.plotter.add_mesh(
            axes,
            color=(0.8, 0.8, 0.8),
            line_width=1.0,
            lighting=False,
            pickable=False,
            show_scalar_bar=False,
            reset_camera=False,
        )

        label_points = np.diag(np.asarray(AXIS_LABEL_OFFSETS, dtype=np.float64))
        self.plotter.add_point_labels(
            label_points,
            ["X", "Y", "Z"],
            font_size=12,
            text_color="white",
            shape=None,
            show_points=False,
            always_visible=True,
            reset_camera=False,
        )

    def _update_camera(self, view: ViewState, force: bool) -> bool:
        sig = (view.azimuth, view.elevation, view.dim)
        if not force and sig == self._last_camera_signature:
            return False
        self._last_camera_signature = sig

        direction, up = camera_vectors(view.azimuth, view.elevation)
        cam = self.plotter.camera
        cam.focal_point = (0.0, 0.0, 0.0)
        cam.position = tuple(direction * CAMERA_DISTANCE)
        cam.up = tuple(up)
        cam.parallel_scale = view.dim
        cam.clipping_range = (0.0, 2.0 * CAMERA_DISTANCE)
        return True

    def _update_hud(self, state: LorenzState, force: bool) -> bool:
        # Lines are stacked upwards from the lower-left corner
        text = "\n".join(reversed(state.status_lines()))
        if not force and text == self._last_hud:
            return False
        self._last_hud = text
        self.plotter.add_text(
            text,
            position="lower_left",
            font_size=9,
            color="white",
            name=HUD_NAME,
        )
        return True

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("black")
        self.plotter.enable_parallel_projection()
        self.plotter.enable_anti_aliasing()
        # View angles come from the key bindings only
        self.plotter.disable()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
