from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import ClassVar, NoReturn, Protocol, runtime_checkable

from wiremodels.model.errors import InvalidParameterError
from wiremodels.model.wireframe import WireframeModel

logger = logging.getLogger(__name__)


class ModelGenerator(ABC):
    """
    Base class for the parametric model generators.

    Subclasses are frozen dataclasses holding their parameters. Parameters are
    validated on construction, so `build()` can never fail half way through.
    """
    KEY: ClassVar[str] = ""  # Override in subclass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable label, for display only."""

    @abstractmethod
    def _populate(self, model: WireframeModel) -> None:
        raise NotImplementedError("`_populate` must be implemented in subclass.")

    def build(self) -> WireframeModel:
        """Create a new model holding this generator's vertices and line segments."""
        model = WireframeModel(name=self.name)
        self._populate(model)
        logger.debug(
            "Built %s: %d vertices, %d line segments.",
            model.name, model.vertex_count, model.segment_count
        )
        return model

    def _reject(self, message: str) -> NoReturn:
        logger.error("%s: %s", type(self).__name__, message)
        raise InvalidParameterError(message)


@runtime_checkable
class MeshMaker(Protocol):
    """A model whose tessellation can be changed interactively."""

    @property
    def latitude_count(self) -> int: ...

    @property
    def longitude_count(self) -> int: ...

    def remake(self, n: int, k: int) -> MeshMaker: ...
