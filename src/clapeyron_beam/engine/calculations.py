from __future__ import annotations

import logging
import traceback
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from clapeyron_beam.domain.config import DEFAULT_CONFIG, CalculationConfig
from clapeyron_beam.domain.loads import Load
from clapeyron_beam.domain.results import (
    AlphaResults,
    CalculationOutcome,
    CalculationSummary,
    MomentSamplePoint,
)
from clapeyron_beam.engine.alphas import calculate_alphas, validate_alpha_results
from clapeyron_beam.engine.moments import find_max_moment, generate_moment_points
from clapeyron_beam.engine.symmetry import analyze_load_symmetry

logger = logging.getLogger(__name__)


def run_calculation(
    loads: Sequence[Load],
    span_length: float,
    config: CalculationConfig = DEFAULT_CONFIG,
) -> CalculationOutcome:
    """
    Corrida completa:
      1) diagrama M(x) para visualizar (config.diagram_points)
      2) alfas por integración fina (config.num_points)
      3) avisos de validación + análisis de simetría + resumen
    """
    loads = tuple(loads)
    if not loads:
        return CalculationOutcome(errors=["No hay cargas aplicadas para calcular"])

    try:
        points = generate_moment_points(loads, span_length, config.diagram_points)
        results = calculate_alphas(loads, span_length, config.num_points)
        symmetry = analyze_load_symmetry(loads, span_length, config.tolerance)
    except (ArithmeticError, ValueError) as e:
        logger.error("Error durante el cálculo.\n%s", traceback.format_exc())
        return CalculationOutcome(
            errors=["Error durante el cálculo. Verifique los datos de entrada.", str(e)],
        )

    validation = validate_alpha_results(results)
    for w in validation.warnings:
        logger.warning("Resultado: %s", w)

    logger.info(
        "Cálculo: L=%g m, %d cargas, α1=%.6g, α2=%.6g, |M|max=%.4g kN·m en x=%.3g m",
        span_length, len(loads), results.alpha1, results.alpha2,
        results.max_moment, results.max_moment_position,
    )

    return CalculationOutcome(
        moment_points=points,
        alpha_results=results,
        symmetry=symmetry,
        summary=summarize(results, loads, span_length),
        warnings=list(validation.warnings),
        recommendations=list(validation.recommendations),
    )


def calculate_moment_diagram(
    loads: Sequence[Load],
    span_length: float,
    previous: Optional[AlphaResults] = None,
    num_points: int = DEFAULT_CONFIG.diagram_points,
) -> Tuple[Tuple[MomentSamplePoint, ...], Optional[AlphaResults]]:
    """
    Solo el diagrama (sin alfas). Si ya había resultados, se devuelve una copia
    con el momento máximo actualizado al nuevo muestreo.
    """
    points = generate_moment_points(tuple(loads), span_length, num_points)
    if previous is None:
        return points, None

    mm = find_max_moment(points)
    return points, replace(previous, max_moment=mm.max_moment, max_moment_position=mm.max_moment_position)


def summarize(results: AlphaResults, loads: Sequence[Load], span_length: float) -> CalculationSummary:
    return CalculationSummary(
        total_loads=len(loads),
        span_length=float(span_length),
        is_symmetric=results.is_symmetric,
        max_moment=results.max_moment,
        max_moment_position=results.max_moment_position,
        alpha1=results.alpha1,
        alpha2=results.alpha2,
        area=results.area,
        centroid_left=results.centroid_left,
        centroid_right=results.centroid_right,
    )
