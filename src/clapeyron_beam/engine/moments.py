from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple

import numpy as np

from clapeyron_beam.domain.loads import DistributedLoad, Load, MomentLoad, PointLoad
from clapeyron_beam.domain.results import MaxMoment, MomentSamplePoint, Reactions

logger = logging.getLogger(__name__)


# -------------------------
# Contribución de cada carga (viga simplemente apoyada)
# -------------------------
def _point_moment(P: float, a: float, x: np.ndarray, L: float) -> np.ndarray:
    # R1 = P*(L-a)/L, R2 = P*a/L
    R1 = P * (L - a) / L
    return np.where(x <= a, R1 * x, R1 * x - P * (x - a))


def _uniform_moment(w: float, start: float, end: float, x: np.ndarray, L: float) -> np.ndarray:
    """
    Resultante W en el centro solo para la reacción; dentro del tramo cargado
    se descuenta la integral parcial w*(x-start)^2/2, no la resultante completa.
    """
    W = w * (end - start)
    center = 0.5 * (start + end)
    R1 = W * (L - center) / L

    t = x - start
    inside = R1 * x - w * t * t * 0.5
    beyond = R1 * x - W * (x - center)
    return np.where(x <= start, R1 * x, np.where(x <= end, inside, beyond))


def _trapezoidal_moment(load: DistributedLoad, x: np.ndarray, L: float) -> np.ndarray:
    w1 = float(load.w1)
    w2 = float(load.w2)
    start = float(load.start)
    end = float(load.end)
    length = end - start

    W = load.resultant
    centroid = load.centroid
    R1 = W * (L - centroid) / L

    # integral exacta de la rampa lineal hasta x (cúbica en ξ)
    xi = x - start
    partial = w1 * xi * xi / 2.0 + (w2 - w1) * xi * xi * xi / (6.0 * length)
    inside = R1 * x - partial
    beyond = R1 * x - W * (x - centroid)
    return np.where(x <= start, R1 * x, np.where(x <= end, inside, beyond))


def _applied_moment(M0: float, a: float, x: np.ndarray, L: float) -> np.ndarray:
    # par aplicado: salto de magnitud M0 en x = a
    return np.where(x <= a, -M0 * x / L, M0 * (L - x) / L)


def _load_moment_array(load: Load, x: np.ndarray, L: float) -> np.ndarray:
    if isinstance(load, PointLoad):
        return _point_moment(float(load.magnitude), float(load.position), x, L)

    if isinstance(load, DistributedLoad):
        if load.length <= 0:
            return np.zeros_like(x, dtype=float)
        if load.is_uniform:
            return _uniform_moment(float(load.w1), float(load.start), float(load.end), x, L)
        return _trapezoidal_moment(load, x, L)

    if isinstance(load, MomentLoad):
        return _applied_moment(float(load.magnitude), float(load.position), x, L)

    return np.zeros_like(x, dtype=float)


# -------------------------
# Evaluadores
# -------------------------
def moment_array(loads: Iterable[Load], x: np.ndarray, span_length: float) -> np.ndarray:
    """M(x) vectorizado: suma (superposición) de la contribución de cada carga."""
    x = np.asarray(x, dtype=float)
    L = float(span_length)
    M = np.zeros_like(x, dtype=float)
    for load in loads:
        M += _load_moment_array(load, x, L)
    return M


def moment_at(loads: Iterable[Load], x: float, span_length: float) -> float:
    """Momento flector en x (0 <= x <= L) para viga simplemente apoyada de un tramo."""
    return float(moment_array(loads, np.asarray([x], dtype=float), span_length)[0])


def reactions(load: Load, span_length: float) -> Reactions:
    """Reacciones verticales (R1 izquierda, R2 derecha) para una sola carga."""
    L = float(span_length)

    if isinstance(load, PointLoad):
        P = float(load.magnitude)
        a = float(load.position)
        return Reactions(r1=P * (L - a) / L, r2=P * a / L)

    if isinstance(load, DistributedLoad):
        if load.length <= 0:
            return Reactions(r1=0.0, r2=0.0)
        W = load.resultant
        c = load.centroid
        return Reactions(r1=W * (L - c) / L, r2=W * c / L)

    if isinstance(load, MomentLoad):
        # el par no aporta fuerza vertical neta: R1 + R2 = 0
        M0 = float(load.magnitude)
        return Reactions(r1=-M0 / L, r2=M0 / L)

    return Reactions(r1=0.0, r2=0.0)


def total_reactions(loads: Iterable[Load], span_length: float) -> Reactions:
    r1 = 0.0
    r2 = 0.0
    for load in loads:
        r = reactions(load, span_length)
        r1 += r.r1
        r2 += r.r2
    return Reactions(r1=r1, r2=r2)


# -------------------------
# Muestreo
# -------------------------
def generate_moment_points(
    loads: Sequence[Load],
    span_length: float,
    num_points: int = 200,
) -> Tuple[MomentSamplePoint, ...]:
    """
    Devuelve num_points + 1 puntos equiespaciados en [0, L] (ambos incluidos),
    ordenados por x creciente. La secuencia es inmutable: si cambian las
    cargas, se vuelve a generar.
    """
    n = int(num_points)
    if n < 1:
        raise ValueError(f"num_points debe ser >= 1 (recibido {num_points!r}).")

    L = float(span_length)
    xs = np.linspace(0.0, L, n + 1, dtype=float)
    Ms = moment_array(loads, xs, L)

    logger.debug("Diagrama M(x): %d cargas, %d puntos, L=%g m", len(loads), n + 1, L)
    return tuple(MomentSamplePoint(x=float(x), moment=float(m)) for x, m in zip(xs, Ms))


def find_max_moment(points: Iterable[MomentSamplePoint]) -> MaxMoment:
    """
    Máximo |M| del muestreo. Ante empate gana el primer punto (menor x):
    recorrido estable con comparación estricta.
    """
    max_moment = 0.0
    max_position = 0.0
    for p in points:
        if abs(p.moment) > abs(max_moment):
            max_moment = p.moment
            max_position = p.x
    return MaxMoment(max_moment=abs(max_moment), max_moment_position=max_position)
