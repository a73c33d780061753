from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SupportKind(str, Enum):
    SIMPLE = "simple"
    FIXED = "fixed"
    ROLLER = "roller"


@dataclass(frozen=True)
class Support:
    """
    Apoyo con posición conocida.
    El motor solo tiene solución cerrada para dos apoyos SIMPLE;
    FIXED / ROLLER se aceptan como dato pero el solver los rechaza.
    """
    position: float
    kind: SupportKind = SupportKind.SIMPLE
    label: str = ""
