from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from clapeyron_beam.domain.loads import DistributedLoad, Load, MomentLoad, PointLoad
from clapeyron_beam.domain.results import SymmetryAnalysis, SymmetryType
from clapeyron_beam.domain.units import fmt_plain

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.001


@dataclass(frozen=True)
class _LoadSymmetry:
    is_symmetric: bool
    confidence: float
    description: str


def check_load_symmetry(loads: Sequence[Load], span_length: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    if not loads:
        return True
    return analyze_load_symmetry(loads, span_length, tolerance).is_symmetric


def analyze_load_symmetry(
    loads: Sequence[Load],
    span_length: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SymmetryAnalysis:
    """
    Simetría del conjunto de cargas respecto al centro del tramo.

    Cada carga debe ser simétrica por sí misma (centrada) o tener su pareja
    espejo en 2*centro - posición. El tipo depende de la confianza promedio:
      - perfect:     > 0.95
      - approximate: > 0.80
      - none:        resto (o si alguna carga no es simétrica)
    """
    if not loads:
        return SymmetryAnalysis(
            is_symmetric=True,
            symmetry_type="perfect",
            confidence=1.0,
            details=["No hay cargas aplicadas"],
        )

    L = float(span_length)
    center = L / 2.0

    results = [_check_single(load, loads, center, L, tolerance) for load in loads]

    all_symmetric = all(r.is_symmetric for r in results)
    confidence = sum(r.confidence for r in results) / len(results)
    details = [f"Carga {k}: {r.description}" for k, r in enumerate(results, start=1)]

    symmetry_type: SymmetryType
    if all_symmetric and confidence > 0.95:
        symmetry_type = "perfect"
    elif all_symmetric and confidence > 0.8:
        symmetry_type = "approximate"
    else:
        symmetry_type = "none"

    logger.debug("Simetría: %s (confianza %.3f, %d cargas)", symmetry_type, confidence, len(loads))
    return SymmetryAnalysis(
        is_symmetric=all_symmetric,
        symmetry_type=symmetry_type,
        confidence=confidence,
        details=details,
    )


def _check_single(load: Load, all_loads: Sequence[Load], center: float, L: float, tol: float) -> _LoadSymmetry:
    if isinstance(load, PointLoad):
        return _check_point(load, all_loads, center, tol)
    if isinstance(load, DistributedLoad):
        return _check_distributed(load, all_loads, center, L, tol)
    if isinstance(load, MomentLoad):
        return _check_moment(load, all_loads, center, tol)
    return _LoadSymmetry(False, 0.0, "Tipo de carga desconocido")


def _check_point(load: PointLoad, all_loads: Sequence[Load], center: float, tol: float) -> _LoadSymmetry:
    P = fmt_plain(load.magnitude, 3)

    if abs(load.position - center) < tol:
        return _LoadSymmetry(True, 1.0, f"Carga puntual en el centro ({P} kN)")

    mirror = 2.0 * center - load.position
    for other in all_loads:
        if not isinstance(other, PointLoad):
            continue
        pos_err = abs(other.position - mirror)
        mag_err = abs(other.magnitude - load.magnitude)
        if pos_err < tol and mag_err < tol:
            confidence = max(0.0, 1.0 - (pos_err + mag_err) / tol)
            return _LoadSymmetry(True, confidence, f"Carga puntual simétrica encontrada ({P} kN)")

    return _LoadSymmetry(
        False, 0.0,
        f"Carga puntual sin pareja simétrica ({P} kN en {fmt_plain(load.position, 3)} m)",
    )


def _check_distributed(
    load: DistributedLoad, all_loads: Sequence[Load], center: float, L: float, tol: float
) -> _LoadSymmetry:
    load_center = 0.5 * (load.start + load.end)

    if abs(load_center - center) < tol and abs(load.w1 - load.w2) < tol:
        return _LoadSymmetry(True, 1.0, f"Carga distribuida uniforme centrada ({fmt_plain(load.w1, 3)} kN/m)")

    # espejo: [L-end, L-start] con la rampa invertida (w1 <-> w2)
    mirror_start = L - load.end
    mirror_end = L - load.start
    for other in all_loads:
        if not isinstance(other, DistributedLoad):
            continue
        if (
            abs(other.start - mirror_start) < tol
            and abs(other.end - mirror_end) < tol
            and abs(other.w1 - load.w2) < tol
            and abs(other.w2 - load.w1) < tol
        ):
            return _LoadSymmetry(True, 0.9, "Carga distribuida con pareja simétrica")

    return _LoadSymmetry(False, 0.0, "Carga distribuida sin simetría")


def _check_moment(load: MomentLoad, all_loads: Sequence[Load], center: float, tol: float) -> _LoadSymmetry:
    if abs(load.position - center) < tol:
        # un par en el centro solo es simétrico si es nulo o lo compensa otro opuesto
        balanced = any(
            isinstance(other, MomentLoad)
            and abs(other.position - center) < tol
            and abs(other.magnitude + load.magnitude) < tol
            for other in all_loads
        )
        if balanced or abs(load.magnitude) < tol:
            return _LoadSymmetry(True, 0.8, "Momento en el centro equilibrado")

    # el espejo físico de un par invierte el signo
    mirror = 2.0 * center - load.position
    for other in all_loads:
        if (
            isinstance(other, MomentLoad)
            and abs(other.position - mirror) < tol
            and abs(other.magnitude + load.magnitude) < tol
        ):
            return _LoadSymmetry(True, 0.9, "Momento con pareja simétrica opuesta")

    return _LoadSymmetry(
        False, 0.0,
        f"Momento sin simetría ({fmt_plain(load.magnitude, 3)} kN·m en {fmt_plain(load.position, 3)} m)",
    )


def suggest_symmetry_improvements(loads: Sequence[Load], span_length: float) -> List[str]:
    """Sugerencias para volver simétrico el conjunto (cargas a > 0.1 m del centro)."""
    center = float(span_length) / 2.0
    out: List[str] = []

    for k, load in enumerate(loads, start=1):
        if isinstance(load, PointLoad):
            if abs(load.position - center) > 0.1:
                mirror = 2.0 * center - load.position
                out.append(
                    f"Carga {k}: agregar carga puntual de {fmt_plain(load.magnitude, 3)} kN en posición {mirror:.2f} m"
                )
        elif isinstance(load, DistributedLoad):
            if abs(0.5 * (load.start + load.end) - center) > 0.1:
                out.append(f"Carga {k}: considerar centrar la carga distribuida respecto al tramo")
        elif isinstance(load, MomentLoad):
            if abs(load.position - center) > 0.1:
                mirror = 2.0 * center - load.position
                out.append(
                    f"Carga {k}: agregar momento de {fmt_plain(-load.magnitude, 3)} kN·m en posición {mirror:.2f} m"
                )

    return out


def calculate_symmetry_factor(loads: Sequence[Load], span_length: float) -> float:
    """0 = totalmente asimétrico, 1 = perfectamente simétrico."""
    if not loads:
        return 1.0
    return analyze_load_symmetry(loads, span_length).confidence
