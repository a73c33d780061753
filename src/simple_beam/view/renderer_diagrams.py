from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from simple_beam.domain.results import AnalysisResult, DiscretizedSeries  # noqa: E402


# key -> (atributo en AnalysisResult, título, etiqueta eje y, escala de valores)
DIAGRAMS: Dict[str, Tuple[str, str, str, float]] = {
    "shear": ("shear_force", "Esfuerzo cortante V(x)", "V [kN]", 1e-3),
    "moment": ("bending_moment", "Momento flector M(x)", "M [kN·m]", 1e-3),
    "deflection": ("deflection", "Deformada δ(x)", "δ [mm]", 1e3),
}


def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _annotate_peak(ax, x: np.ndarray, y: np.ndarray, unit: str):
    """Marca el |máximo| y anota su valor, dentro del recuadro."""
    if not y.size:
        return
    i = int(np.argmax(np.abs(y)))
    yi = float(y[i])
    if abs(yi) < 1e-12:
        return

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * (x_max - x_min)
    my = 0.03 * (y_max - y_min)

    ax.scatter([float(x[i])], [yi], s=18, zorder=6)
    ty = yi + my if yi > 0 else yi - my
    ax.text(
        _clamp(float(x[i]), x_min + mx, x_max - mx),
        _clamp(ty, y_min + my, y_max - my),
        f"{_fmt_plain(yi, 3)} {unit}",
        ha="center", va="bottom" if yi > 0 else "top", fontsize=8, zorder=7,
    )


def render_series(
    ax,
    series: DiscretizedSeries,
    *,
    title: str,
    ylabel: str,
    scale: float = 1.0,
    y_zoom: float = 1.0,
    xlim: Optional[Tuple[float, float]] = None,
):
    ax.clear()
    x = np.asarray(series.x, dtype=float)
    y = np.asarray(series.values, dtype=float) * scale

    ax.plot(x, y)
    ax.fill_between(x, y, 0.0, alpha=0.15)
    ax.axhline(0.0, linewidth=1.0)

    if xlim is None:
        ax.set_xlim(float(x[0]), float(x[-1]))
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ymax = float(np.max(np.abs(y))) if y.size else 1.0
    ymax = ymax if ymax > 0 else 1.0
    pad = 1.15
    ax.set_ylim(-ymax * y_zoom * pad, ymax * y_zoom * pad)

    unit = ylabel.split("[")[-1].rstrip("]") if "[" in ylabel else ""
    _annotate_peak(ax, x, y, unit)

    ax.set_ylabel(ylabel)
    ax.set_xlabel("x [m]")
    ax.set_title(title)
    ax.grid(True, alpha=0.25)


def save_diagram_images(result: AnalysisResult, out_dir: str, dpi: int = 120) -> Dict[str, str]:
    """
    Genera shear.png, moment.png y deflection.png en out_dir.
    Devuelve {"shear": path, "moment": path, "deflection": path}.
    """
    os.makedirs(out_dir, exist_ok=True)
    out: Dict[str, str] = {}
    for key, (attr, title, ylabel, scale) in DIAGRAMS.items():
        fig, ax = plt.subplots(figsize=(8.0, 3.2))
        try:
            render_series(ax, getattr(result, attr), title=title, ylabel=ylabel, scale=scale)
            fig.tight_layout()
            path = os.path.join(out_dir, f"{key}.png")
            fig.savefig(path, dpi=dpi)
        finally:
            plt.close(fig)
        out[key] = path
    return out
