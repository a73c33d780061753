# path: src/simple_beam/services/report_pdf.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import DistributedLoad, MomentLoad, PointLoad
from simple_beam.domain.results import AnalysisResult

# Nota: no genera gráficos. Acepta paths a imágenes ya generadas
# (view.renderer_diagrams.save_diagram_images) y el resultado del motor.


@dataclass(frozen=True)
class ReportHeader:
    title: str
    project: str = ""
    author: str = ""
    date: Optional[datetime] = None
    revision: str = "A"


def _load_rows(beam: Beam) -> List[List[str]]:
    rows = [["#", "Tipo", "Posición [m]", "Largo [m]", "Valor"]]
    for k, ld in enumerate(beam.loads, start=1):
        name = f"{k}" + (f" ({ld.label})" if ld.label else "")
        if isinstance(ld, PointLoad):
            rows.append([name, "Puntual", _f(ld.position, 3), "-", f"{_f(ld.value, 2)} N"])
        elif isinstance(ld, DistributedLoad):
            rows.append([name, "Distribuida", _f(ld.position, 3), _f(ld.length, 3), f"{_f(ld.value, 2)} N/m"])
        elif isinstance(ld, MomentLoad):
            rows.append([name, "Momento", _f(ld.position, 3), "-", f"{_f(ld.value, 2)} N·m"])
    return rows


def export_analysis_pdf(
    out_pdf_path: str,
    header: ReportHeader,
    beam: Beam,
    result: AnalysisResult,
    images: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """Memoria de cálculo en PDF (A4): datos, reacciones, máximos, resumen de cargas y diagramas."""
    imgs = _normalize_images_dict(images)

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))
    styles.add(ParagraphStyle(name="MonoSmall", parent=styles["BodyText"], fontName="Courier", fontSize=8, leading=10))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.title,
    )

    story: List[object] = []

    # ----------------- Portada -----------------
    story.append(Paragraph(header.title, styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    date = header.date or datetime.now()
    meta_rows = [
        ["Proyecto:", header.project or "-"],
        ["Autor:", header.author or "-"],
        ["Fecha:", date.strftime("%Y-%m-%d %H:%M")],
        ["Revisión:", header.revision],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_table_style(key_column=True))
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    story.append(Paragraph("Base teórica y supuestos", styles["Heading2"]))
    base = [
        "Viga de Euler-Bernoulli simplemente apoyada, material elástico lineal, pequeñas deformaciones.",
        "Convención: cargas y distribuidas positivas hacia abajo, momentos aplicados positivos horarios, "
        "reacciones positivas hacia arriba, momento flector positivo si tracciona la fibra inferior.",
        "V(x) por suma de fuerzas a la izquierda; M(x) integrando V; δ(x) por doble integración de M/EI "
        "con corrección lineal para δ = 0 en ambos apoyos.",
    ]
    story.extend(_bullets(base, styles))
    story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Ecuaciones principales", styles["Heading3"]))
    eq = [
        "ΣMa = 0  ⇒  Rb = (Σ[P·(x - a)] + Σ[w·(e - s)·(xc - a)] + ΣM) / (b - a)",
        "ΣFy = 0  ⇒  Ra = ΣP + Σ[w·(e - s)] - Rb",
        "M_i = M_(i-1) + V_(i-1)·dx",
        "θ_i = θ_(i-1) + M_(i-1)/EI·dx,   δ_i = δ_(i-1) + θ_(i-1)·dx",
    ]
    story.extend(_mono_block(eq, styles))
    story.append(Spacer(1, 3 * mm))

    # ----------------- Datos -----------------
    story.append(Paragraph("Datos", styles["Heading2"]))
    dims = [
        ["L [m]", _f(beam.length, 3)],
        ["E [Pa]", f"{beam.elastic_modulus:.4g}"],
        ["I [m^4]", f"{beam.moment_of_inertia:.4g}"],
        ["EI [N·m²]", f"{beam.EI:.4g}"],
        ["Puntos de discretización", str(beam.num_points)],
    ]
    t = Table(dims, colWidths=[55 * mm, 125 * mm])
    t.setStyle(_table_style(key_column=True))
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Cargas aplicadas", styles["Heading3"]))
    t = Table(_load_rows(beam), repeatRows=1)
    t.setStyle(_table_style(header_rows=1))
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Resultados", styles["Heading2"]))
    rrows = [["Apoyo", "x [m]", "R [N]"]]
    for name, r in zip(("A", "B"), result.reactions):
        rrows.append([name, _f(r.position, 3), _f(r.value, 3)])
    t = Table(rrows, colWidths=[30 * mm, 55 * mm, 95 * mm])
    t.setStyle(_table_style(header_rows=1))
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    mx = result.maxima
    ls = result.load_summary
    kv = [
        ["Σ reacciones [N]", _f(result.sum_forces, 3)],
        ["|V| máx [N]", _f(mx.shear, 3)],
        ["|M| máx [N·m]", _f(mx.moment, 3)],
        ["|δ| máx [mm]", _f(mx.deflection * 1e3, 4)],
        ["Σ cargas puntuales [N]", _f(ls.total_point_loads, 3)],
        ["Σ cargas distribuidas [N]", _f(ls.total_distributed_load, 3)],
        ["Σ momentos [N·m]", _f(ls.total_moment, 3)],
    ]
    t = Table(kv, colWidths=[80 * mm, 100 * mm])
    t.setStyle(_table_style(key_column=True))
    story.append(t)

    # ----------------- Figuras -----------------
    story.append(PageBreak())
    story.append(Paragraph("Diagramas", styles["Heading2"]))

    _append_figure(story, styles, "shear", "Esfuerzo cortante V(x)", imgs, max_w=180 * mm, max_h=80 * mm)
    _append_figure(story, styles, "moment", "Momento flector M(x)", imgs, max_w=180 * mm, max_h=80 * mm)
    _append_figure(story, styles, "deflection", "Deformada δ(x)", imgs, max_w=180 * mm, max_h=80 * mm)

    doc.build(story)


# ----------------- helpers -----------------

def _normalize_images_dict(images: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not images:
        return {}
    out: Dict[str, str] = {}
    for k, v in images.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading3"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        # Dejar evidencia en el PDF si no se insertó la imagen
        story.append(Paragraph(f"(Sin imagen: '{key}' no disponible o no existe en disco)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _bullets(items: List[str], styles):
    out: List[object] = []
    for it in items:
        out.append(Paragraph(f"• {it}", styles["BodyText"]))
        out.append(Spacer(1, 1.2 * mm))
    return out


def _mono_block(lines: List[str], styles):
    return [Paragraph(ln.replace(" ", "&nbsp;"), styles["MonoSmall"]) for ln in lines]


def _table_style(*, key_column: bool = False, header_rows: int = 0, font_size: int = 9):
    """Grilla simple; key_column sombrea la primera columna (tablas clave/valor)."""
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 10 if key_column else font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "TOP" if key_column else "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 6 if key_column else 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 6 if key_column else 4),
        ("TOPPADDING", (0, 0), (-1, -1), 4 if key_column else 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4 if key_column else 3),
    ]
    if key_column:
        ts.append(("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke))
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw > 0 and ih > 0:
        scale = min(max_w / iw, max_h / ih, 1.0)
        img.drawWidth = iw * scale
        img.drawHeight = ih * scale
    return img
