"""
Point Cloud
Conversion of a wireframe model into a model made only of points.
"""
from __future__ import annotations

import logging

from wiremodels.model.wireframe import WireframeModel

logger = logging.getLogger(__name__)


def make_point_cloud(model: WireframeModel) -> WireframeModel:
    """
    Builds a model with the same vertices as `model`, one point primitive for
    every vertex used by a primitive of `model` (in index order), and no
    line segments. Vertices that no primitive uses are kept but not drawn.
    """
    if not isinstance(model, WireframeModel):
        raise TypeError("Can only make a point cloud from a WireframeModel.")

    cloud = WireframeModel(
        name=f"PointCloud: {model.name}",
        vertices=list(model.vertices),
        visible=model.visible,
    )

    used = {i for s in model.segments for i in s.as_tuple()}
    used.update(p.index for p in model.points)
    for index in sorted(used):
        cloud.add_point(index)

    logger.debug("Point cloud of '%s' has %d points.", model.name, cloud.point_count)
    return cloud
