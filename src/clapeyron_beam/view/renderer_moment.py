from __future__ import annotations

import os
from typing import Dict, Optional, Sequence

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Arc, Polygon

from clapeyron_beam.domain.loads import DistributedLoad, Load, MomentLoad, PointLoad
from clapeyron_beam.domain.results import AlphaResults, MomentSamplePoint
from clapeyron_beam.domain.units import fmt_quantity
from clapeyron_beam.engine.moments import find_max_moment
from clapeyron_beam.view.style import DiagramStyle


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _as_arrays(points: Sequence[MomentSamplePoint]):
    x = np.asarray([p.x for p in points], dtype=float)
    M = np.asarray([p.moment for p in points], dtype=float)
    return x, M


# -------------------------
# Diagrama de momentos
# -------------------------
def render_moment(
    ax,
    points: Sequence[MomentSamplePoint],
    results: Optional[AlphaResults] = None,
    style: DiagramStyle = DiagramStyle(),
    y_zoom: float = 1.0,
):
    """
    Dibuja M(x) (positivo hacia arriba), sombrea el área y marca el |M| máximo.
    Si se pasan resultados, agrega α1/α2 en el título.
    """
    ax.clear()
    x, M = _as_arrays(points)

    ax.axhline(0.0, linewidth=1.0, color="black")
    if len(x) == 0:
        ax.set_title("Diagrama de Momento Flector M(x)")
        return

    ax.plot(x, M, linewidth=style.moment_lw, color=style.moment_color)
    ax.fill_between(x, M, 0.0, alpha=style.fill_alpha, color=style.moment_color)

    ax.set_xlim(float(x[0]), float(x[-1]))
    mmax = float(np.max(np.abs(M)))
    mmax = max(mmax, 1.0)
    pad = 1.25
    ax.set_ylim(-mmax * y_zoom * pad, mmax * y_zoom * pad)

    # máximo absoluto (mismo criterio que los resultados: primer máximo)
    mm = find_max_moment(points)
    if mm.max_moment > 0:
        i = int(np.argmin(np.abs(x - mm.max_moment_position)))
        xi, Mi = float(x[i]), float(M[i])
        ax.scatter([xi], [Mi], s=style.max_marker_size, zorder=6, color="black")

        y_min, y_max = ax.get_ylim()
        my = 0.05 * (y_max - y_min)
        ty = Mi + my if Mi >= 0 else Mi - my
        ty = _clamp(ty, y_min + my, y_max - my)
        ax.text(
            xi, ty,
            f"{fmt_quantity(Mi, 'moment', 'moment')}\nx = {fmt_quantity(xi, 'position', 'length')}",
            ha="center", va="bottom" if Mi >= 0 else "top",
            fontsize=style.font_size, zorder=7,
        )

    title = "Diagrama de Momento Flector M(x)"
    if results is not None:
        title += f"   α1 = {fmt_quantity(results.alpha1, 'alpha')}   α2 = {fmt_quantity(results.alpha2, 'alpha')}"
    ax.set_title(title, fontsize=style.font_size + 1)
    ax.set_xlabel("x [m]")
    ax.set_ylabel("M [kN·m]")
    ax.grid(True, alpha=0.25)


# -------------------------
# Esquema de viga y cargas
# -------------------------
def _draw_arrow(ax, x: float, y0: float, y1: float, color: str, style: DiagramStyle):
    ax.annotate(
        "",
        xy=(x, y1),
        xytext=(x, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color=color,
            shrinkA=0,
            shrinkB=0,
        ),
    )


def _draw_support(ax, x: float, size: float):
    tri = Polygon(
        [[x, 0.0], [x - size / 2.0, -size], [x + size / 2.0, -size]],
        closed=True, facecolor="#34495e", edgecolor="#2c3e50",
    )
    ax.add_patch(tri)


def render_loads(ax, loads: Sequence[Load], span_length: float, style: DiagramStyle = DiagramStyle()):
    """
    Viga simplemente apoyada con sus cargas.
    Convención de dibujo: magnitud positiva = carga hacia abajo.
    """
    ax.clear()
    L = float(span_length)
    h_arrow = L * style.arrow_height_pctL / 100.0
    h_dist = L * style.dist_height_pctL / 100.0
    r_mom = L * style.moment_radius_pctL / 100.0
    s_sup = L * style.support_size_pctL / 100.0

    ax.plot([0.0, L], [0.0, 0.0], linewidth=style.beam_lw * 2, color="#2c3e50", solid_capstyle="butt")
    _draw_support(ax, 0.0, s_sup)
    _draw_support(ax, L, s_sup)

    wmax = max([max(abs(d.w1), abs(d.w2)) for d in loads if isinstance(d, DistributedLoad)] or [1.0])
    wmax = max(wmax, 1e-12)

    for load in loads:
        if isinstance(load, PointLoad):
            x = float(load.position)
            down = load.magnitude >= 0
            if down:
                _draw_arrow(ax, x, h_arrow, 0.0, style.point_color, style)
            else:
                _draw_arrow(ax, x, 0.0, h_arrow, style.point_color, style)
            ax.text(x, h_arrow * 1.05, fmt_quantity(load.magnitude, "magnitude", "force"),
                    ha="center", va="bottom", fontsize=style.font_size)

        elif isinstance(load, DistributedLoad):
            a, b = float(load.start), float(load.end)
            ya = h_dist * abs(load.w1) / wmax
            yb = h_dist * abs(load.w2) / wmax
            poly = Polygon(
                [[a, 0.0], [a, ya], [b, yb], [b, 0.0]],
                closed=True, facecolor=style.dist_color, edgecolor=style.dist_color, alpha=0.3,
            )
            ax.add_patch(poly)
            label = fmt_quantity(load.w1, "magnitude", "distributed")
            if not load.is_uniform:
                label = f"{fmt_quantity(load.w1, 'magnitude')} → {fmt_quantity(load.w2, 'magnitude', 'distributed')}"
            ax.text(0.5 * (a + b), max(ya, yb) * 1.1 + 0.02 * L, label,
                    ha="center", va="bottom", fontsize=style.font_size)

        elif isinstance(load, MomentLoad):
            x = float(load.position)
            # el signo queda en la etiqueta
            arc = Arc((x, 0.0), 2 * r_mom, 2 * r_mom, theta1=30.0, theta2=330.0,
                      color=style.moment_load_color, lw=style.arrow_lw * 1.5)
            ax.add_patch(arc)
            ax.text(x, r_mom * 1.3, fmt_quantity(load.magnitude, "magnitude", "moment"),
                    ha="center", va="bottom", fontsize=style.font_size)

    ax.set_xlim(-0.05 * L, 1.05 * L)
    ax.set_ylim(-2.5 * s_sup, max(h_arrow, h_dist, r_mom) * 1.6)
    ax.set_xlabel("x [m]")
    ax.set_yticks([])
    ax.set_title(f"Viga simplemente apoyada  L = {fmt_quantity(L, 'position', 'length')}", fontsize=style.font_size + 1)


# -------------------------
# Exportación (para la memoria PDF)
# -------------------------
def save_figures(
    out_dir: str,
    loads: Sequence[Load],
    span_length: float,
    points: Sequence[MomentSamplePoint],
    results: Optional[AlphaResults] = None,
    dpi: int = 150,
    style: DiagramStyle = DiagramStyle(),
) -> Dict[str, str]:
    """Guarda esquema de cargas y diagrama M(x) como PNG. Devuelve {clave: path}."""
    os.makedirs(out_dir, exist_ok=True)
    out: Dict[str, str] = {}

    fig = Figure(figsize=(10, 3))
    ax = fig.add_subplot(111)
    render_loads(ax, loads, span_length, style)
    fig.tight_layout()
    path = os.path.join(out_dir, "cargas.png")
    fig.savefig(path, dpi=dpi)
    out["cargas"] = path

    fig = Figure(figsize=(10, 3.5))
    ax = fig.add_subplot(111)
    render_moment(ax, points, results, style)
    fig.tight_layout()
    path = os.path.join(out_dir, "momento.png")
    fig.savefig(path, dpi=dpi)
    out["m"] = path

    return out
