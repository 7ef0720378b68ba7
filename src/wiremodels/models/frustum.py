"""
View Frustum
============
Wireframe model of a camera's perspective view volume: a frustum of a
pyramid along the negative z-axis with its apex at the origin.

The front face lies in the plane z = -near and is bounded by left/right and
bottom/top. The back face at z = -far is the front face scaled by far/near.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from wiremodels import config
from wiremodels.model.geometry_primitives import Vertex
from wiremodels.model.geometry_utils import deg2rad
from wiremodels.model.wireframe import WireframeModel
from wiremodels.models.base import ModelGenerator
from wiremodels.models.registry import ModelKind, register_model

_LEFT, _RIGHT, _BOTTOM, _TOP, _NEAR, _FAR = config.FRUSTUM_BOUNDS


@register_model
@dataclass(frozen=True)
class ViewFrustum(ModelGenerator):
    KEY = ModelKind.VIEW_FRUSTUM

    left: float = _LEFT
    right: float = _RIGHT
    bottom: float = _BOTTOM
    top: float = _TOP
    near: float = _NEAR
    far: float = _FAR

    @classmethod
    def from_fov(cls, fovy: float, aspect: float, near: float, far: float) -> ViewFrustum:
        """
        Frustum given by a vertical field of view (degrees) and the aspect ratio of the front face.
        """
        top = near * math.tan(deg2rad(fovy) / 2.0)
        right = top * aspect
        return cls(left=-right, right=right, bottom=-top, top=top, near=near, far=far)

    @property
    def name(self) -> str:
        return "View Frustum Model"

    def _populate(self, model: WireframeModel) -> None:
        left, right, bottom, top = self.left, self.right, self.bottom, self.top
        near, far = self.near, self.far

        # IEEE semantics: a degenerate near = 0 gives inf/nan instead of raising.
        with np.errstate(divide="ignore", invalid="ignore"):
            corners = np.array([[left, top], [right, top], [right, bottom], [left, bottom]], dtype=np.float64)
            back = corners / np.float64(near) * np.float64(far)

        for x, y in corners:
            model.add_vertex(Vertex(float(x), float(y), -near))
        for x, y in back:
            model.add_vertex(Vertex(float(x), float(y), -far))

        # front (near) face
        model.add_segments((0, 1), (1, 2), (2, 3), (3, 0))
        # back (far) face
        model.add_segments((4, 5), (5, 6), (6, 7), (7, 4))
        # lines from front to back
        model.add_segments((0, 4), (1, 5), (2, 6), (3, 7))
