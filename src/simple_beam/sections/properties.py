from __future__ import annotations

import math
from typing import Any, Mapping

from simple_beam.domain.errors import UnsupportedSectionError, ValidationError
from simple_beam.sections.shapes import (
    CircleSection, IBeamSection, RectangleSection, Section, SectionProperties
)


def _rect_I_about_centroid(b: float, h: float) -> float:
    """I de un rectángulo b (ancho) x h (alto), respecto a su eje baricéntrico horizontal."""
    return (b * h**3) / 12.0


def _ibeam_I(s: IBeamSection) -> float:
    h = float(s.height)
    b = float(s.width)
    tw = float(s.web_thickness)
    tf = float(s.flange_thickness)

    # alas: propia + Steiner (centroide de cada ala a h/2 - tf/2 del eje)
    I_flanges = 2.0 * (_rect_I_about_centroid(b, tf) + b * tf * (h / 2.0 - tf / 2.0) ** 2)
    I_web = _rect_I_about_centroid(tw, h - 2.0 * tf)
    return I_flanges + I_web


def section_properties(section: Section) -> SectionProperties:
    """Área, inercia y módulo resistente elástico (respecto al eje fuerte)."""
    if isinstance(section, RectangleSection):
        w = float(section.width)
        h = float(section.height)
        return SectionProperties(
            area=w * h,
            moment_of_inertia=_rect_I_about_centroid(w, h),
            section_modulus=w * h**2 / 6.0,
        )

    if isinstance(section, CircleSection):
        r = float(section.diameter) / 2.0
        return SectionProperties(
            area=math.pi * r**2,
            moment_of_inertia=math.pi * r**4 / 4.0,
            section_modulus=math.pi * r**3 / 4.0,
        )

    if isinstance(section, IBeamSection):
        h = float(section.height)
        b = float(section.width)
        tw = float(section.web_thickness)
        tf = float(section.flange_thickness)
        I = _ibeam_I(section)
        return SectionProperties(
            area=2.0 * b * tf + tw * (h - 2.0 * tf),
            moment_of_inertia=I,
            section_modulus=I / (h / 2.0),
        )

    raise UnsupportedSectionError(f"Tipo de sección no soportado: {type(section).__name__}")


# Claves del cliente (camelCase) -> campo del dataclass
_FIELDS = {
    "rectangle": (RectangleSection, {"width": "width", "height": "height"}),
    "circle": (CircleSection, {"diameter": "diameter"}),
    "i_beam": (IBeamSection, {
        "height": "height",
        "width": "width",
        "webThickness": "web_thickness",
        "flangeThickness": "flange_thickness",
    }),
}


def parse_section(d: Mapping[str, Any]) -> Section:
    """
    {"type": "rectangle" | "circle" | "i_beam", ...dimensiones}
    Las dimensiones pueden venir planas o dentro de "dimensions".
    """
    kind = str((d or {}).get("type") or "").strip().lower()
    if kind not in _FIELDS:
        raise UnsupportedSectionError(f"Tipo de sección no soportado: {kind or '(vacío)'}")

    cls, fields = _FIELDS[kind]
    dims = dict(d)
    if isinstance(d.get("dimensions"), Mapping):
        dims.update(d["dimensions"])
    # circular: el cliente a veces manda el diámetro como "width"
    if kind == "circle" and dims.get("diameter") is None and dims.get("width") is not None:
        dims["diameter"] = dims["width"]

    kwargs = {}
    for key, attr in fields.items():
        v = dims.get(key)
        try:
            fv = float(v)
        except (TypeError, ValueError):
            raise ValidationError(f'Sección {kind}: "{key}" debe ser numérico (valor={v!r}).') from None
        if not fv > 0:
            raise ValidationError(f'Sección {kind}: "{key}" debe ser mayor que cero ({key}={fv:g}).')
        kwargs[attr] = fv

    section = cls(**kwargs)
    if isinstance(section, IBeamSection) and not section.web_height > 0:
        raise ValidationError(
            f"Sección i_beam: las alas (2·{section.flange_thickness:g}) superan la altura {section.height:g}."
        )
    return section
