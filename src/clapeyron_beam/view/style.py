from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class DiagramStyle:
    beam_lw: float = 2

    moment_lw: float = 2.0
    moment_color: str = "#e74c3c"
    fill_alpha: float = 0.3
    max_marker_size: float = 22.0

    arrow_lw: float = 1.0
    arrow_scale: float = 11.0
    point_color: str = "#e74c3c"
    dist_color: str = "#9b59b6"
    moment_load_color: str = "#f39c12"

    # Alturas relativas a L (fijas)
    arrow_height_pctL: float = 12.0
    dist_height_pctL: float = 8.0
    moment_radius_pctL: float = 4.0
    support_size_pctL: float = 3.0

    font_size: int = 9
