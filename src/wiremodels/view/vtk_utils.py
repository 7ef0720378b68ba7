"""
VTK Utilities
Conversion of wireframe models into PyVista data sets.
"""
import logging

import numpy as np
import numpy.typing as npt
import pyvista as pv

from wiremodels.model.wireframe import WireframeModel

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def segments_to_lines(segments: npt.NDArray[np.int64]) -> npt.NDArray[np.int64]:
        """
        Flattens an (M, 2) array of segment indices into the VTK cell layout
        [2, i0, j0, 2, i1, j1, ...].

        Raises:
            ValueError: If the input is not of shape (M, 2).
        """
        arr = np.asarray(segments, dtype=np.int64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected shape (M, 2), got {arr.shape}.")

        counts = np.full((arr.shape[0], 1), 2, dtype=np.int64)
        return np.hstack([counts, arr]).ravel()

    @staticmethod
    def to_polydata(model: WireframeModel) -> pv.PolyData:
        """
        Converts a WireframeModel into a PolyData made of line cells,
        one cell per line segment in segment order, and vertex cells,
        one per point primitive in point order.
        """
        if model.vertex_count == 0:
            raise ValueError(f"Model '{model.name}' has no vertices to convert.")

        lines = None
        if model.segment_count:
            lines = VtkUtils.segments_to_lines(model.segment_array())
        verts = None
        if model.point_count:
            counts = np.ones((model.point_count, 1), dtype=np.int64)
            verts = np.hstack([counts, model.point_array().reshape(-1, 1)]).ravel()
        poly = pv.PolyData(model.vertex_array(), lines=lines, verts=verts)

        logger.debug(
            "Converted '%s' to PolyData with %d points, %d lines and %d verts.",
            model.name, poly.n_points, poly.n_lines, poly.n_verts
        )
        return poly
