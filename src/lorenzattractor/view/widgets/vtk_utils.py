"""
VTK and Geometry Utilities
Helper functions for converting trajectory arrays into PyVista line data.
"""
from typing import Sequence, Tuple

import numpy as np
import numpy.typing as npt
import pyvista as pv

import logging

logger = logging.getLogger(__name__)

COLOR_ARRAY = "colors"


class VtkUtils:
    @staticmethod
    def segment_cells(n_points: int) -> npt.NDArray[np.int_]:
        """
        Flat VTK cell array of consecutive two-point lines.

        Returns:
            [2, 0, 1, 2, 1, 2, ...] describing n_points - 1 segments.
        """
        n_segments = max(n_points - 1, 0)
        cells = np.empty((n_segments, 3), dtype=np.int_)
        cells[:, 0] = 2
        cells[:, 1] = np.arange(n_segments)
        cells[:, 2] = np.arange(1, n_segments + 1)
        return cells.ravel()

    @staticmethod
    def to_rgb_bytes(colors: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
        """[0, 1] float RGB -> uint8 RGB."""
        return np.clip(np.rint(np.asarray(colors) * 255.0), 0, 255).astype(np.uint8)

    def segments_to_polydata(
        self,
        points: npt.NDArray[np.float64],
        colors: npt.NDArray[np.float64],
    ) -> pv.PolyData:
        """
        Build one line cell per consecutive pair of points.

        Args:
            points: (N, 3) array.
            colors: (N - 1, 3) float RGB, one per segment.

        Raises:
            ValueError: If the color count does not match the segment count.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        n_segments = max(points.shape[0] - 1, 0)
        if len(colors) != n_segments:
            raise ValueError(f"Expected {n_segments} segment colors, got {len(colors)}.")

        pd = pv.PolyData(points)
        pd.lines = self.segment_cells(points.shape[0])
        pd.verts = np.empty(0, dtype=np.int_)
        pd.cell_data[COLOR_ARRAY] = self.to_rgb_bytes(colors).reshape(-1, 3)
        return pd

    @staticmethod
    def axes_polydata(extents: Sequence[Tuple[float, float]]) -> pv.PolyData:
        """Three reference axis segments through the origin."""
        pts = []
        for axis, (lo, hi) in enumerate(extents):
            start = [0.0, 0.0, 0.0]
            end = [0.0, 0.0, 0.0]
            start[axis] = lo
            end[axis] = hi
            pts.extend([start, end])

        pd = pv.PolyData(np.asarray(pts, dtype=np.float64))
        pd.lines = np.hstack([[2, 2 * i, 2 * i + 1] for i in range(len(extents))]).astype(np.int_)
        pd.verts = np.empty(0, dtype=np.int_)
        return pd
