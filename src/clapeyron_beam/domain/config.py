from __future__ import annotations

from dataclasses import dataclass

# Tolerancias numéricas del motor
UNIFORM_TOL = 1e-6   # |w1 - w2| por debajo => carga uniforme
ZERO_TOL = 1e-10     # área / longitud / suma de intensidades nulas


@dataclass(frozen=True)
class CalculationConfig:
    span_length: float = 6.0     # m
    num_points: int = 1000       # integración numérica (alfas)
    diagram_points: int = 200    # visualización del diagrama
    tolerance: float = 0.001     # chequeo de simetría


@dataclass(frozen=True)
class SpanLimits:
    min: float = 0.1
    max: float = 500.0
    default: float = 6.0
    step: float = 0.1


@dataclass(frozen=True)
class LoadLimits:
    max_magnitude: float = 1000.0   # kN
    max_moment: float = 1000.0      # kN·m
    max_intensity: float = 100.0    # kN/m
    position_precision: int = 3     # decimales máximos


@dataclass(frozen=True)
class NumberFormat:
    position: int = 3
    magnitude: int = 3
    alpha: int = 6
    moment: int = 4

    length_unit: str = "m"
    force_unit: str = "kN"
    moment_unit: str = "kN·m"
    distributed_unit: str = "kN/m"


DEFAULT_CONFIG = CalculationConfig()
SPAN_LIMITS = SpanLimits()
LOAD_LIMITS = LoadLimits()
NUMBER_FORMAT = NumberFormat()
