from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

SymmetryType = Literal["perfect", "approximate", "none"]


@dataclass(frozen=True)
class MomentSamplePoint:
    x: float       # m
    moment: float  # kN·m


@dataclass(frozen=True)
class MaxMoment:
    max_moment: float           # |M| máximo
    max_moment_position: float  # x donde ocurre


@dataclass(frozen=True)
class Reactions:
    r1: float  # apoyo izquierdo (kN)
    r2: float  # apoyo derecho (kN)


@dataclass(frozen=True)
class IntegrationResult:
    area: float                # ∫ M dx
    first_moment: float        # ∫ x·M dx
    first_moment_right: float  # ∫ (L - x)·M dx


@dataclass(frozen=True)
class AlphaResults:
    alpha1: float          # extremo izquierdo
    alpha2: float          # extremo derecho
    area: float
    centroid_left: float   # desde apoyo izquierdo
    centroid_right: float  # desde apoyo derecho
    is_symmetric: bool
    max_moment: float
    max_moment_position: float


@dataclass(frozen=True)
class SymmetryAnalysis:
    is_symmetric: bool
    symmetry_type: SymmetryType
    confidence: float  # 0..1
    details: List[str]


@dataclass(frozen=True)
class LoadValidationResult:
    is_valid: bool
    errors: List[str]
    warnings: List[str]


@dataclass(frozen=True)
class CalculationValidation:
    is_valid: bool
    warnings: List[str]
    recommendations: List[str]


@dataclass(frozen=True)
class CalculationSummary:
    total_loads: int
    span_length: float
    is_symmetric: bool
    max_moment: float
    max_moment_position: float
    alpha1: float
    alpha2: float
    area: float
    centroid_left: float
    centroid_right: float


@dataclass(frozen=True)
class CalculationOutcome:
    """Resultado completo de una corrida (diagrama + alfas + avisos)."""
    moment_points: Tuple[MomentSamplePoint, ...] = ()
    alpha_results: Optional[AlphaResults] = None
    symmetry: Optional[SymmetryAnalysis] = None
    summary: Optional[CalculationSummary] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.alpha_results is not None and not self.errors
