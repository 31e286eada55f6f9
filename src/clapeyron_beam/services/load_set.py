from __future__ import annotations

import logging
import uuid
from typing import List, Optional, Tuple

from clapeyron_beam.domain.loads import DistributedLoad, Load, LoadInput, MomentLoad, PointLoad
from clapeyron_beam.engine.validation import validate_load

logger = logging.getLogger(__name__)


class InvalidLoadError(ValueError):
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Carga inválida: " + ", ".join(self.errors))


def new_load_id() -> str:
    return f"load_{uuid.uuid4().hex[:12]}"


def build_load(data: LoadInput, load_id: str) -> Load:
    """Convierte datos de formulario YA validados en una carga del modelo."""
    if data.type == "point":
        return PointLoad(id=load_id, position=float(data.position), magnitude=float(data.magnitude))
    if data.type == "distributed":
        return DistributedLoad(
            id=load_id,
            start=float(data.start),
            end=float(data.end),
            w1=float(data.w1),
            w2=float(data.w2),
        )
    if data.type == "moment":
        return MomentLoad(
            id=load_id,
            position=float(data.moment_position),
            magnitude=float(data.moment_magnitude),
        )
    raise InvalidLoadError(["Tipo de carga no soportado"])


class LoadSet:
    """
    Lista de cargas del usuario para un tramo dado.
    El motor recibe siempre `loads` (tupla inmutable): nunca la lista viva.
    """

    def __init__(self, span_length: float, loads: Optional[List[Load]] = None):
        self.span_length = float(span_length)
        self._loads: List[Load] = list(loads or [])

    @property
    def loads(self) -> Tuple[Load, ...]:
        return tuple(self._loads)

    def __len__(self) -> int:
        return len(self._loads)

    def _check(self, data: LoadInput, others: List[Load]) -> List[str]:
        res = validate_load(data, self.span_length, others)
        if not res.is_valid:
            raise InvalidLoadError(res.errors)
        for w in res.warnings:
            logger.info("Aviso de carga (%s): %s", data.type, w)
        return res.warnings

    def add(self, data: LoadInput) -> Load:
        self._check(data, self._loads)
        load = build_load(data, new_load_id())
        self._loads.append(load)
        logger.debug("Carga agregada: %s", load)
        return load

    def update(self, load_id: str, data: LoadInput) -> Load:
        others = [ld for ld in self._loads if ld.id != load_id]
        if len(others) == len(self._loads):
            raise KeyError(load_id)
        self._check(data, others)

        new_load = build_load(data, load_id)
        self._loads = [new_load if ld.id == load_id else ld for ld in self._loads]
        return new_load

    def remove(self, load_id: str) -> None:
        self._loads = [ld for ld in self._loads if ld.id != load_id]

    def clear(self) -> None:
        self._loads = []

