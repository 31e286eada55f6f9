from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from numpy.polynomial import Polynomial

from clapeyron_beam.domain.config import ZERO_TOL
from clapeyron_beam.domain.loads import DistributedLoad, Load, MomentLoad, PointLoad
from clapeyron_beam.domain.results import (
    AlphaResults,
    CalculationValidation,
    IntegrationResult,
    MomentSamplePoint,
)
from clapeyron_beam.engine.moments import find_max_moment, generate_moment_points
from clapeyron_beam.engine.symmetry import check_load_symmetry

logger = logging.getLogger(__name__)

_X = Polynomial([0.0, 1.0])

# (x0, x1, M(x)) : tramo donde M es un polinomio
_Piece = Tuple[float, float, Polynomial]


def calculate_alphas(loads: Sequence[Load], span_length: float, num_points: int = 1000) -> AlphaResults:
    """
    Coeficientes alfa (Teorema de Clapeyron / Tres Momentos) por integración
    numérica del diagrama M(x) con la regla del trapecio.

    α1 (extremo izquierdo) usa el centroide medido desde el apoyo DERECHO,
    α2 (extremo derecho) usa el centroide medido desde el apoyo IZQUIERDO.
    """
    points = generate_moment_points(loads, span_length, num_points)
    integ = calculate_integrals(points, span_length)

    alpha1, alpha2, c_left, c_right = _alphas_from_integrals(integ, loads, span_length)
    mm = find_max_moment(points)

    return AlphaResults(
        alpha1=alpha1,
        alpha2=alpha2,
        area=integ.area,
        centroid_left=c_left,
        centroid_right=c_right,
        is_symmetric=check_load_symmetry(loads, span_length),
        max_moment=mm.max_moment,
        max_moment_position=mm.max_moment_position,
    )


def calculate_integrals(points: Sequence[MomentSamplePoint], span_length: float) -> IntegrationResult:
    """
    Regla del trapecio sobre pares consecutivos:
      A      = ∫ M(x) dx
      Sx     = ∫ x·M(x) dx        (centroide desde apoyo izquierdo)
      Sx_der = ∫ (L - x)·M(x) dx  (centroide desde apoyo derecho)
    """
    if len(points) < 2:
        return IntegrationResult(area=0.0, first_moment=0.0, first_moment_right=0.0)

    L = float(span_length)
    area = 0.0
    first = 0.0
    first_right = 0.0

    for p0, p1 in zip(points[:-1], points[1:]):
        dx = p1.x - p0.x
        avg_M = 0.5 * (p0.moment + p1.moment)
        avg_x = 0.5 * (p0.x + p1.x)

        area += avg_M * dx
        first += avg_x * avg_M * dx
        first_right += (L - avg_x) * avg_M * dx

    return IntegrationResult(area=area, first_moment=first, first_moment_right=first_right)


def _alphas_from_integrals(
    integ: IntegrationResult, loads: Sequence[Load], span_length: float
) -> Tuple[float, float, float, float]:
    """Devuelve (alpha1, alpha2, centroid_left, centroid_right)."""
    area = integ.area
    L = float(span_length)

    if abs(area) > ZERO_TOL:
        c_left = integ.first_moment / area
        c_right = integ.first_moment_right / area
    else:
        # sin cargas (o diagrama que se anula): evita NaN/Inf
        c_left = 0.0
        c_right = 0.0

    if abs(L) > ZERO_TOL:
        alpha1 = area * c_right / L
        alpha2 = area * c_left / L
    else:
        alpha1 = 0.0
        alpha2 = 0.0

    logger.debug("Alfas: A=%g, xL=%g, xR=%g, α1=%g, α2=%g (%d cargas)", area, c_left, c_right, alpha1, alpha2, len(loads))
    return alpha1, alpha2, c_left, c_right


# -------------------------
# Vía analítica (integración exacta por tramos polinómicos)
# -------------------------
def calculate_alpha_analytical(loads: Sequence[Load], span_length: float) -> AlphaResults:
    """
    Mismo M(x) que el evaluador, integrado en forma cerrada tramo a tramo.
    No calcula el momento máximo (requiere muestreo): queda en 0.
    """
    L = float(span_length)
    area = 0.0
    first = 0.0
    first_right = 0.0

    for load in loads:
        c = _load_contribution(load, L)
        area += c.area
        first += c.first_moment
        first_right += c.first_moment_right

    integ = IntegrationResult(area=area, first_moment=first, first_moment_right=first_right)
    alpha1, alpha2, c_left, c_right = _alphas_from_integrals(integ, loads, L)

    return AlphaResults(
        alpha1=alpha1,
        alpha2=alpha2,
        area=area,
        centroid_left=c_left,
        centroid_right=c_right,
        is_symmetric=check_load_symmetry(loads, L),
        max_moment=0.0,
        max_moment_position=0.0,
    )


def _load_contribution(load: Load, L: float) -> IntegrationResult:
    area = 0.0
    first = 0.0
    first_right = 0.0

    for x0, x1, M in _moment_pieces(load, L):
        if x1 <= x0:
            continue
        area += _definite(M, x0, x1)
        first += _definite(_X * M, x0, x1)
        first_right += _definite((L - _X) * M, x0, x1)

    return IntegrationResult(area=area, first_moment=first, first_moment_right=first_right)


def _definite(p: Polynomial, a: float, b: float) -> float:
    F = p.integ()
    return float(F(b) - F(a))


def _moment_pieces(load: Load, L: float) -> List[_Piece]:
    if isinstance(load, PointLoad):
        P = float(load.magnitude)
        a = float(load.position)
        R1 = P * (L - a) / L
        return [
            (0.0, a, R1 * _X),
            (a, L, R1 * _X - P * (_X - a)),
        ]

    if isinstance(load, DistributedLoad):
        s = float(load.start)
        e = float(load.end)
        length = e - s
        if length <= 0:
            return []

        W = load.resultant
        c = load.centroid
        R1 = W * (L - c) / L
        xi = _X - s

        if load.is_uniform:
            w = float(load.w1)
            partial = w * xi * xi / 2.0
        else:
            w1 = float(load.w1)
            w2 = float(load.w2)
            partial = w1 * xi * xi / 2.0 + (w2 - w1) * xi * xi * xi / (6.0 * length)

        return [
            (0.0, s, R1 * _X),
            (s, e, R1 * _X - partial),
            (e, L, R1 * _X - W * (_X - c)),
        ]

    if isinstance(load, MomentLoad):
        M0 = float(load.magnitude)
        a = float(load.position)
        return [
            (0.0, a, (-M0 / L) * _X),
            (a, L, (M0 / L) * (L - _X)),
        ]

    return []


# -------------------------
# Validación de resultados
# -------------------------
def validate_alpha_results(results: AlphaResults) -> CalculationValidation:
    """Avisos para mostrar (nunca errores duros)."""
    warnings: List[str] = []
    recommendations: List[str] = []

    if abs(results.alpha1) > 1000 or abs(results.alpha2) > 1000:
        warnings.append("Los valores de alfa son muy grandes, verifique las cargas aplicadas")

    if abs(results.alpha1) < ZERO_TOL and abs(results.alpha2) < ZERO_TOL:
        warnings.append("Los valores de alfa son muy pequeños, puede que no haya cargas significativas")

    if results.is_symmetric and abs(results.alpha1 - results.alpha2) > 1e-3:
        warnings.append("Las cargas parecen simétricas pero los alfas son diferentes")
        recommendations.append("Verifique la simetría de las cargas o use un solo valor alfa")

    if results.centroid_left < 0 or results.centroid_left > 1000:
        warnings.append("El centroide izquierdo está fuera del rango esperado")

    if results.centroid_right < 0 or results.centroid_right > 1000:
        warnings.append("El centroide derecho está fuera del rango esperado")

    return CalculationValidation(
        is_valid=not warnings,
        warnings=warnings,
        recommendations=recommendations,
    )
