from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RectangleSection:
    """Rectángulo macizo b x h [m]."""
    width: float
    height: float


@dataclass(frozen=True)
class CircleSection:
    """Circular maciza de diámetro d [m]."""
    diameter: float


@dataclass(frozen=True)
class IBeamSection:
    """
    Doble T simétrica idealizada: 2 alas iguales + alma entre alas.
    height es la altura total (alas incluidas). Todas las dimensiones en m.
    """
    height: float
    width: float
    web_thickness: float
    flange_thickness: float

    @property
    def web_height(self) -> float:
        return float(self.height - 2.0 * self.flange_thickness)


@dataclass(frozen=True)
class SectionProperties:
    area: float               # m^2
    moment_of_inertia: float  # m^4
    section_modulus: float    # m^3

    def to_dict(self) -> dict:
        return {
            "area": self.area,
            "momentOfInertia": self.moment_of_inertia,
            "sectionModulus": self.section_modulus,
        }


Section = Union[RectangleSection, CircleSection, IBeamSection]
