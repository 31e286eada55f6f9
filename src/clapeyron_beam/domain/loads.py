from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Optional, Union

from clapeyron_beam.domain.config import UNIFORM_TOL, ZERO_TOL

LoadType = Literal["point", "distributed", "moment"]


@dataclass(frozen=True)
class PointLoad:
    id: str
    position: float   # m
    magnitude: float  # kN (con signo)

    kind: ClassVar[LoadType] = "point"


@dataclass(frozen=True)
class DistributedLoad:
    """
    Carga distribuida lineal: w1 en `start`, w2 en `end` (kN/m).
    Si w1 == w2 es uniforme; si no, trapezoidal/triangular.
    Invariante: start < end.
    """
    id: str
    start: float  # m
    end: float    # m
    w1: float     # kN/m
    w2: float     # kN/m

    kind: ClassVar[LoadType] = "distributed"

    @property
    def length(self) -> float:
        return float(self.end - self.start)

    @property
    def is_uniform(self) -> bool:
        return abs(self.w1 - self.w2) < UNIFORM_TOL

    @property
    def resultant(self) -> float:
        if self.is_uniform:
            return float(self.w1 * self.length)
        return float((self.w1 + self.w2) * self.length / 2.0)

    @property
    def centroid_offset(self) -> float:
        """Distancia del centroide de la carga medida desde `start`."""
        length = self.length
        if self.is_uniform or abs(self.w1 + self.w2) < ZERO_TOL:
            # w1 + w2 ≈ 0 => centro geométrico (evita división por cero)
            return length / 2.0
        return length * (self.w1 + 2.0 * self.w2) / (3.0 * (self.w1 + self.w2))

    @property
    def centroid(self) -> float:
        return float(self.start + self.centroid_offset)


@dataclass(frozen=True)
class MomentLoad:
    id: str
    position: float   # m
    magnitude: float  # kN·m (con signo)

    kind: ClassVar[LoadType] = "moment"


Load = Union[PointLoad, DistributedLoad, MomentLoad]


@dataclass(frozen=True)
class LoadInput:
    """
    Datos crudos de formulario. None = campo ausente; 0.0 es un valor válido.
    Los momentos usan sus propios campos (moment_position / moment_magnitude).
    """
    type: Optional[str]
    position: Optional[float] = None
    magnitude: Optional[float] = None
    start: Optional[float] = None
    end: Optional[float] = None
    w1: Optional[float] = None
    w2: Optional[float] = None
    moment_position: Optional[float] = None
    moment_magnitude: Optional[float] = None

    @classmethod
    def from_load(cls, load: Load) -> "LoadInput":
        if isinstance(load, PointLoad):
            return cls(type="point", position=load.position, magnitude=load.magnitude)
        if isinstance(load, DistributedLoad):
            return cls(type="distributed", start=load.start, end=load.end, w1=load.w1, w2=load.w2)
        return cls(type="moment", moment_position=load.position, moment_magnitude=load.magnitude)
