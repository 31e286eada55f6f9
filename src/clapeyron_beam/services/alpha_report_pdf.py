# path: src/clapeyron_beam/services/alpha_report_pdf.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, StyleSheet1, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Flowable, Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from clapeyron_beam.domain.loads import DistributedLoad, Load, MomentLoad, PointLoad
from clapeyron_beam.domain.results import AlphaResults, CalculationValidation, SymmetryAnalysis
from clapeyron_beam.domain.units import fmt_quantity

# Este módulo no calcula ni dibuja: recibe resultados del motor y
# paths a PNG ya generados (view.renderer_moment.save_figures).

FIGURES = (
    # clave, título, alto máximo
    ("cargas", "Esquema de cargas", 70 * mm),
    ("m", "Diagrama de momento M(x)", 80 * mm),
)

THEORY = [
    "Viga simplemente apoyada de un tramo; M(x) por superposición de cada carga (elasticidad lineal).",
    "Convención: cargas positivas hacia abajo; momento flector positivo = tracción en fibra inferior.",
    "Área y momentos estáticos del diagrama por regla del trapecio sobre un muestreo uniforme.",
    "α1 (apoyo izquierdo) usa el centroide medido desde el apoyo derecho; α2 usa el medido desde el izquierdo.",
]

EQUATIONS = [
    "A  = ∫ M(x) dx",
    "xL = ∫ x·M(x) dx / A",
    "xR = ∫ (L - x)·M(x) dx / A",
    "α1 = A · xR / L",
    "α2 = A · xL / L",
]


@dataclass(frozen=True)
class ReportHeader:
    titulo: str = "Coeficientes α - Teorema de los Tres Momentos"
    proyecto: str = ""
    autor: str = ""
    fecha: Optional[datetime] = None
    revision: str = "A"


def describe_load(load: Load) -> List[str]:
    """Fila de tabla: [tipo, ubicación, magnitud]."""
    if isinstance(load, PointLoad):
        return [
            "Puntual",
            f"x = {fmt_quantity(load.position, 'position', 'length')}",
            fmt_quantity(load.magnitude, "magnitude", "force"),
        ]
    if isinstance(load, DistributedLoad):
        span = f"[{fmt_quantity(load.start, 'position')}, {fmt_quantity(load.end, 'position', 'length')}]"
        if load.is_uniform:
            return ["Distribuida uniforme", span, fmt_quantity(load.w1, "magnitude", "distributed")]
        ramp = f"{fmt_quantity(load.w1, 'magnitude')} → {fmt_quantity(load.w2, 'magnitude', 'distributed')}"
        return ["Distribuida trapezoidal", span, ramp]
    if isinstance(load, MomentLoad):
        return [
            "Momento aplicado",
            f"x = {fmt_quantity(load.position, 'position', 'length')}",
            fmt_quantity(load.magnitude, "magnitude", "moment"),
        ]
    return ["?", "-", "-"]


def export_alpha_report(
    out_pdf_path: str,
    header: ReportHeader,
    span_length: float,
    loads: Sequence[Load],
    results: AlphaResults,
    symmetry: Optional[SymmetryAnalysis] = None,
    validation: Optional[CalculationValidation] = None,
    imagenes: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Memoria de cálculo de los coeficientes α en PDF.

    imagenes: {"cargas": path_png, "m": path_png}; ambas opcionales.
    Una imagen que falta en disco deja un aviso en su lugar.
    """
    st = _styles()
    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=18 * mm,
        rightMargin=18 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=header.titulo,
        author=header.autor,
    )
    width = doc.width

    story: List[Flowable] = []
    story += _cover(header, span_length, st, width)
    story += _theory(st)
    story += _loads_section(loads, st, width)
    story += _results_section(results, symmetry, validation, st, width)
    story += _figures_section(imagenes or {}, st, width)

    doc.build(story)


# -------------------------
# Secciones
# -------------------------
def _cover(header: ReportHeader, span_length: float, st: StyleSheet1, width: float) -> List[Flowable]:
    fecha = header.fecha or datetime.now()
    rows = [
        ["Proyecto", header.proyecto or "-"],
        ["Autor", header.autor or "-"],
        ["Fecha", fecha.strftime("%d/%m/%Y %H:%M")],
        ["Revisión", header.revision],
        ["Luz del tramo", fmt_quantity(span_length, "position", "length")],
    ]
    return [
        Paragraph(header.titulo, st["Titulo"]),
        Spacer(1, 5 * mm),
        _table(rows, [0.25 * width, 0.75 * width], kind="kv"),
        Spacer(1, 6 * mm),
    ]


def _theory(st: StyleSheet1) -> List[Flowable]:
    out: List[Flowable] = [Paragraph("Base teórica", st["Heading2"])]
    out += [Paragraph(f"• {line}", st["BodyText"]) for line in THEORY]
    out.append(Spacer(1, 2 * mm))
    # espacios duros para que la fuente monoespaciada alinee los "="
    out += [Paragraph(eq.replace(" ", "&nbsp;"), st["Mono"]) for eq in EQUATIONS]
    out.append(Spacer(1, 5 * mm))
    return out


def _loads_section(loads: Sequence[Load], st: StyleSheet1, width: float) -> List[Flowable]:
    out: List[Flowable] = [Paragraph("Cargas aplicadas", st["Heading2"])]
    if not loads:
        out.append(Paragraph("No hay cargas aplicadas.", st["Nota"]))
    else:
        rows = [["#", "Tipo", "Ubicación", "Magnitud"]]
        rows += [[str(k)] + describe_load(ld) for k, ld in enumerate(loads, start=1)]
        out.append(_table(rows, [0.06 * width, 0.30 * width, 0.32 * width, 0.32 * width], kind="grid"))
    out.append(Spacer(1, 5 * mm))
    return out


def _results_section(
    results: AlphaResults,
    symmetry: Optional[SymmetryAnalysis],
    validation: Optional[CalculationValidation],
    st: StyleSheet1,
    width: float,
) -> List[Flowable]:
    rows = [
        ["α1 (extremo izquierdo)", fmt_quantity(results.alpha1, "alpha")],
        ["α2 (extremo derecho)", fmt_quantity(results.alpha2, "alpha")],
        ["Área del diagrama A [kN·m²]", fmt_quantity(results.area, "moment")],
        ["Centroide desde apoyo izq.", fmt_quantity(results.centroid_left, "position", "length")],
        ["Centroide desde apoyo der.", fmt_quantity(results.centroid_right, "position", "length")],
        ["|M| máximo", fmt_quantity(results.max_moment, "moment", "moment")],
        ["Posición de |M| máximo", fmt_quantity(results.max_moment_position, "position", "length")],
        ["Cargas simétricas", "Sí" if results.is_symmetric else "No"],
    ]
    note = (
        "Cargas simétricas: un solo valor α aplicable a ambos extremos."
        if results.is_symmetric
        else "Cargas asimétricas: dos valores α diferentes para cada extremo del tramo."
    )
    out: List[Flowable] = [
        Paragraph("Resultados", st["Heading2"]),
        _table(rows, [0.45 * width, 0.55 * width], kind="kv"),
        Spacer(1, 3 * mm),
        Paragraph(note, st["Nota"]),
        Spacer(1, 4 * mm),
    ]

    if symmetry is not None:
        out.append(Paragraph(
            f"Análisis de simetría: {symmetry.symmetry_type} (confianza {symmetry.confidence:.2f})",
            st["Heading3"],
        ))
        out += [Paragraph(f"• {d}", st["BodyText"]) for d in symmetry.details]
        out.append(Spacer(1, 3 * mm))

    if validation is not None:
        avisos = list(validation.warnings) + list(validation.recommendations)
        if avisos:
            out.append(Paragraph("Advertencias", st["Heading3"]))
            out += [Paragraph(f"• {a}", st["BodyText"]) for a in avisos]
            out.append(Spacer(1, 3 * mm))

    return out


def _figures_section(imagenes: Dict[str, str], st: StyleSheet1, width: float) -> List[Flowable]:
    paths = {k.strip().lower(): v.strip() for k, v in imagenes.items() if k and v and v.strip()}
    if not paths:
        return []

    out: List[Flowable] = [Paragraph("Figuras", st["Heading2"])]
    for key, title, max_h in FIGURES:
        out.append(Paragraph(title, st["Heading3"]))
        path = paths.get(key, "")
        if path and os.path.exists(path):
            out.append(_scaled_image(path, width, max_h))
        else:
            out.append(Paragraph(f"(Sin imagen: '{key}' no disponible)", st["Nota"]))
        out.append(Spacer(1, 4 * mm))
    return out


# -------------------------
# helpers
# -------------------------
def _styles() -> StyleSheet1:
    st = getSampleStyleSheet()
    st.add(ParagraphStyle(name="Titulo", parent=st["Heading1"], alignment=TA_CENTER))
    st.add(ParagraphStyle(name="Nota", parent=st["BodyText"], fontSize=9, leading=11, textColor=colors.HexColor("#555555")))
    st.add(ParagraphStyle(name="Mono", parent=st["BodyText"], fontName="Courier", fontSize=9, leading=11))
    return st


def _table(rows: List[List[str]], col_widths: List[float], kind: str) -> Table:
    """kind="kv": etiqueta | valor;  kind="grid": primera fila de encabezado."""
    cmds = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 9.5),
        ("GRID", (0, 0), (-1, -1), 0.4, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 5),
        ("RIGHTPADDING", (0, 0), (-1, -1), 5),
    ]
    if kind == "kv":
        cmds.append(("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke))
    elif kind == "grid":
        cmds += [
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("ALIGN", (0, 1), (0, -1), "CENTER"),
        ]
    t = Table(rows, colWidths=col_widths)
    t.setStyle(TableStyle(cmds))
    return t


def _scaled_image(path: str, max_w: float, max_h: float) -> Image:
    img = Image(path)
    w, h = float(img.imageWidth), float(img.imageHeight)
    if w > 0 and h > 0:
        k = min(max_w / w, max_h / h, 1.0)
        img.drawWidth, img.drawHeight = w * k, h * k
    return img
