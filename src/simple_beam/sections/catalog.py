from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from simple_beam.sections.properties import section_properties
from simple_beam.sections.shapes import CircleSection, IBeamSection, RectangleSection, Section


@dataclass(frozen=True)
class SectionPreset:
    id: str
    name: str
    section: Section

    def to_dict(self) -> Dict[str, Any]:
        s = self.section
        out: Dict[str, Any] = {"id": self.id, "name": self.name}
        if isinstance(s, RectangleSection):
            out.update(type="rectangle", width=s.width, height=s.height)
        elif isinstance(s, CircleSection):
            out.update(type="circle", diameter=s.diameter)
        else:
            out.update(
                type="i_beam",
                width=s.width,
                height=s.height,
                webThickness=s.web_thickness,
                flangeThickness=s.flange_thickness,
            )
        # I calculada, no tabulada
        out["momentOfInertia"] = section_properties(s).moment_of_inertia
        return out


SECTION_PRESETS: List[SectionPreset] = [
    SectionPreset("rectangular_100x50", "Rectangular 100x50 mm", RectangleSection(width=0.05, height=0.1)),
    SectionPreset("circular_100", "Circular Ø100 mm", CircleSection(diameter=0.1)),
    SectionPreset(
        "i_beam_200",
        "Perfil I 200 mm",
        IBeamSection(height=0.2, width=0.1, web_thickness=0.008, flange_thickness=0.012),
    ),
]


def get_preset(preset_id: str) -> Optional[SectionPreset]:
    key = (preset_id or "").strip()
    for p in SECTION_PRESETS:
        if p.id == key:
            return p
    return None


def presets_as_dicts() -> List[Dict[str, Any]]:
    return [p.to_dict() for p in SECTION_PRESETS]
