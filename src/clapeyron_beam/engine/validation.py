from __future__ import annotations

import math
from decimal import Decimal
from typing import List, Optional, Sequence

from clapeyron_beam.domain.config import LOAD_LIMITS, SPAN_LIMITS
from clapeyron_beam.domain.loads import DistributedLoad, Load, LoadInput, PointLoad
from clapeyron_beam.domain.results import LoadValidationResult
from clapeyron_beam.domain.units import fmt_plain

# Nota: los campos opcionales se chequean SIEMPRE con "is None".
# Una posición o magnitud 0.0 es un dato válido, no un campo ausente.
# NaN / ±inf nunca llegan a las comparaciones de rango: son un error.


def _usable(value: Optional[float], required_msg: str, name: str, errors: List[str]) -> bool:
    """True si el campo tiene un número finito; si no, agrega el error."""
    if value is None:
        errors.append(required_msg)
        return False
    if not math.isfinite(value):
        errors.append(f"{name} debe ser un número finito")
        return False
    return True


def _finite(*values: Optional[float]) -> bool:
    return all(v is not None and math.isfinite(v) for v in values)


def validate_load(
    data: LoadInput,
    span_length: float,
    existing_loads: Sequence[Load] = (),
) -> LoadValidationResult:
    """
    Valida una carga antes de que entre al motor.
    errors  => la carga no puede usarse
    warnings => se puede usar, pero conviene revisar
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not data.type:
        errors.append("El tipo de carga es requerido")
        return LoadValidationResult(is_valid=False, errors=errors, warnings=warnings)

    L = float(span_length)

    if data.type == "point":
        _validate_point(data, L, errors, warnings)
    elif data.type == "distributed":
        _validate_distributed(data, L, errors, warnings)
    elif data.type == "moment":
        _validate_moment(data, L, errors, warnings)
    else:
        errors.append("Tipo de carga no válido")

    _validate_compatibility(data, existing_loads, L, warnings)
    _validate_engineering_limits(data, L, warnings)

    return LoadValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def _validate_point(data: LoadInput, L: float, errors: List[str], warnings: List[str]) -> None:
    if _usable(data.position, "La posición es requerida para cargas puntuales", "La posición", errors):
        if data.position < 0:
            errors.append("La posición no puede ser negativa")
        elif data.position > L:
            errors.append(f"La posición no puede exceder la longitud del tramo ({fmt_plain(L, 3)} m)")
        elif data.position == 0 or data.position == L:
            warnings.append("Carga aplicada en el apoyo: puede generar reacciones concentradas")

    if _usable(data.magnitude, "La magnitud es requerida para cargas puntuales", "La magnitud", errors):
        if abs(data.magnitude) < 0.001:
            warnings.append("La magnitud de la carga es muy pequeña")
        elif abs(data.magnitude) > LOAD_LIMITS.max_magnitude:
            warnings.append(f"Magnitud muy alta (>{fmt_plain(LOAD_LIMITS.max_magnitude)} kN): verifique los valores")
        elif abs(data.magnitude) < 0.1:
            warnings.append("Magnitud muy pequeña: puede tener poco impacto en el análisis")


def _validate_distributed(data: LoadInput, L: float, errors: List[str], warnings: List[str]) -> None:
    ok_start = _usable(data.start, "La posición inicial es requerida para cargas distribuidas", "La posición inicial", errors)
    ok_end = _usable(data.end, "La posición final es requerida para cargas distribuidas", "La posición final", errors)

    if ok_start and ok_end:
        if data.start < 0:
            errors.append("La posición inicial no puede ser negativa")
        if data.end > L:
            errors.append(f"La posición final no puede exceder la longitud del tramo ({fmt_plain(L, 3)} m)")
        if data.start >= data.end:
            errors.append("La posición final debe ser mayor que la inicial")

        length = data.end - data.start
        if length < 0.1:
            warnings.append("La longitud de la carga distribuida es muy pequeña")
        elif length > L * 0.9:
            warnings.append("La carga distribuida cubre casi todo el tramo")

    ok_w1 = _usable(data.w1, "La intensidad inicial (w1) es requerida", "La intensidad inicial (w1)", errors)
    ok_w2 = _usable(data.w2, "La intensidad final (w2) es requerida", "La intensidad final (w2)", errors)

    if ok_w1 and ok_w2:
        w1 = abs(data.w1)
        w2 = abs(data.w2)
        if w1 < 0.001 and w2 < 0.001:
            warnings.append("Ambas intensidades son muy pequeñas")

        if max(w1, w2) > LOAD_LIMITS.max_intensity:
            warnings.append("Intensidad de carga muy alta: verifique las unidades")

        if abs(data.w1 - data.w2) > max(w1, w2) * 5:
            warnings.append("Cambio muy brusco entre w1 y w2: considere subdividir la carga")


def _validate_moment(data: LoadInput, L: float, errors: List[str], warnings: List[str]) -> None:
    pos = data.moment_position
    mag = data.moment_magnitude

    if _usable(pos, "La posición es requerida para momentos aplicados", "La posición", errors):
        if pos < 0:
            errors.append("La posición no puede ser negativa")
        elif pos > L:
            errors.append(f"La posición no puede exceder la longitud del tramo ({fmt_plain(L, 3)} m)")
        elif pos == 0 or pos == L:
            warnings.append("Momento aplicado en el apoyo: puede requerir consideraciones especiales")

    if _usable(mag, "La magnitud es requerida para momentos aplicados", "La magnitud", errors):
        if abs(mag) < 0.001:
            warnings.append("La magnitud del momento es muy pequeña")
        elif abs(mag) > LOAD_LIMITS.max_moment:
            warnings.append("Magnitud de momento muy alta: verifique los valores")


def _validate_compatibility(data: LoadInput, existing: Sequence[Load], L: float, warnings: List[str]) -> None:
    if data.type == "distributed" and _finite(data.start, data.end):
        overlapping = [
            ld for ld in existing
            if isinstance(ld, DistributedLoad) and not (data.end <= ld.start or data.start >= ld.end)
        ]
        if overlapping:
            warnings.append("La carga distribuida se superpone con cargas existentes")

    if data.type == "point" and _finite(data.position):
        # 5% del tramo
        nearby = [
            ld for ld in existing
            if isinstance(ld, PointLoad) and abs(ld.position - data.position) < L * 0.05
        ]
        if nearby:
            warnings.append("Hay cargas puntuales muy cercanas: considere combinarlas")

    if len(existing) > 10:
        warnings.append("Muchas cargas aplicadas: considere simplificar el modelo")


def _decimal_places(v: float) -> int:
    if not math.isfinite(v):
        return 0
    exp = Decimal(repr(float(v))).as_tuple().exponent
    return max(0, -int(exp))


def _validate_engineering_limits(data: LoadInput, L: float, warnings: List[str]) -> None:
    if data.type == "point" and _finite(data.magnitude):
        if abs(data.magnitude) / L > 50:
            warnings.append("Relación carga/longitud muy alta para aplicaciones típicas")

    if data.type == "distributed" and _finite(data.w1, data.w2):
        avg = (abs(data.w1) + abs(data.w2)) / 2.0
        if avg * L > 1000:
            warnings.append("Carga total muy alta: verifique si las unidades son correctas")

    def _check_precision(value: Optional[float], name: str) -> None:
        if value is None:
            return
        if _decimal_places(value) > LOAD_LIMITS.position_precision:
            warnings.append(f"{name} tiene demasiados decimales: considere redondear")

    _check_precision(data.position, "Posición")
    _check_precision(data.start, "Posición inicial")
    _check_precision(data.end, "Posición final")
    _check_precision(data.moment_position, "Posición del momento")


def validate_load_set(loads: Sequence[Load], span_length: float) -> LoadValidationResult:
    """Chequeos sobre el conjunto completo (solo avisos)."""
    errors: List[str] = []
    warnings: List[str] = []

    if not loads:
        warnings.append("No hay cargas aplicadas")
        return LoadValidationResult(is_valid=True, errors=errors, warnings=warnings)

    L = float(span_length)
    center = L / 2.0

    total = 0.0
    moment_about_center = 0.0
    for ld in loads:
        if isinstance(ld, PointLoad):
            total += abs(ld.magnitude)
            moment_about_center += ld.magnitude * (ld.position - center)
        elif isinstance(ld, DistributedLoad):
            length = ld.end - ld.start
            total += (abs(ld.w1) + abs(ld.w2)) / 2.0 * length
            load_center = 0.5 * (ld.start + ld.end)
            moment_about_center += (ld.w1 + ld.w2) / 2.0 * length * (load_center - center)
        # los momentos aplicados no suman carga vertical

    if total == 0:
        warnings.append("La carga total es cero: verifique las magnitudes")
    elif total > 1000:
        warnings.append("Carga total muy alta: verifique las unidades y magnitudes")

    if abs(moment_about_center) < total * L * 0.1:
        warnings.append("Las cargas parecen aproximadamente simétricas")

    return LoadValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def validate_span(span_length: Optional[float]) -> LoadValidationResult:
    errors: List[str] = []
    warnings: List[str] = []

    if span_length is None:
        errors.append("La longitud del tramo es requerida")
        return LoadValidationResult(is_valid=False, errors=errors, warnings=warnings)

    L = float(span_length)
    if not math.isfinite(L):
        errors.append("La longitud del tramo debe ser un número finito")
        return LoadValidationResult(is_valid=False, errors=errors, warnings=warnings)

    if L <= 0:
        errors.append("La longitud del tramo debe ser positiva")
    elif L < SPAN_LIMITS.min:
        errors.append(f"La longitud mínima del tramo es {fmt_plain(SPAN_LIMITS.min, 3)} m")
    elif L > SPAN_LIMITS.max:
        errors.append(f"La longitud máxima del tramo es {fmt_plain(SPAN_LIMITS.max, 3)} m")

    if L < 1:
        warnings.append("Tramo muy corto: los resultados pueden no ser representativos")
    elif L > 100:
        warnings.append("Tramo muy largo: considere subdividir en varios tramos")

    return LoadValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def suggest_load_corrections(data: LoadInput, span_length: float) -> List[str]:
    L = float(span_length)
    Ls = fmt_plain(L, 3)
    out: List[str] = []

    if data.type == "point" and data.position is not None:
        if data.position < 0:
            out.append(f"Cambiar la posición a un valor entre 0 y {Ls}")
        elif data.position > L:
            out.append(f"Reducir la posición a máximo {Ls} m")

    elif data.type == "distributed" and data.start is not None and data.end is not None:
        if data.start >= data.end:
            out.append("Asegurar que la posición final sea mayor que la inicial")
        if data.end > L:
            out.append(f"Ajustar la posición final a máximo {Ls} m")

    elif data.type == "moment" and data.moment_position is not None:
        if data.moment_position < 0 or data.moment_position > L:
            out.append(f"Ajustar la posición entre 0 y {Ls} m")

    return out
