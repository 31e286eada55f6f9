from __future__ import annotations

from typing import Literal

from clapeyron_beam.domain.config import NUMBER_FORMAT

Quantity = Literal["position", "magnitude", "alpha", "moment"]

_UNITS = {
    "length": NUMBER_FORMAT.length_unit,
    "force": NUMBER_FORMAT.force_unit,
    "moment": NUMBER_FORMAT.moment_unit,
    "distributed": NUMBER_FORMAT.distributed_unit,
}


def fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def decimals_for(quantity: Quantity) -> int:
    return int(getattr(NUMBER_FORMAT, quantity))


def fmt_quantity(v: float, quantity: Quantity, unit: str = "") -> str:
    """
    Formatea según los decimales configurados para la magnitud.
    unit: "length" | "force" | "moment" | "distributed" | "" (sin unidad)
    """
    s = fmt_plain(v, decimals_for(quantity))
    label = _UNITS.get(unit, unit)
    return f"{s} {label}" if label else s
