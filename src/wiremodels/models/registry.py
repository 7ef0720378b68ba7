from __future__ import annotations

from enum import StrEnum
from typing import Any

from wiremodels.models.base import ModelGenerator


class ModelKind(StrEnum):
    """Keys of the registered model generators."""
    TRIANGULAR_PRISM = "triangular-prism"
    TRIANGULAR_PYRAMID = "triangular-pyramid"
    VIEW_FRUSTUM = "view-frustum"
    AXES_3D = "axes-3d"
    AXES_2D = "axes-2d"
    SQUARE = "square"
    CONE_SECTOR = "cone-sector"


_REGISTRY: dict[str, type[ModelGenerator]] = {}


def register_model(cls: type[ModelGenerator]) -> type[ModelGenerator]:
    """Class decorator to register a generator by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def get_model_class(key: str) -> type[ModelGenerator]:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No model registered for key '{key}'")
    return cls


def create_model(key: str, **params: Any) -> ModelGenerator:
    return get_model_class(key)(**params)


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
