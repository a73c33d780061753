from __future__ import annotations
from dataclasses import dataclass
from typing import Union

# Convención de usuario:
#   - P y w positivos hacia abajo (N, N/m)
#   - M positivo horario (N·m)


@dataclass(frozen=True)
class PointLoad:
    position: float
    value: float       # N (down+)
    label: str = ""


@dataclass(frozen=True)
class DistributedLoad:
    position: float    # inicio del tramo
    length: float      # largo del tramo cargado
    value: float       # N/m (down+)
    label: str = ""

    @property
    def end(self) -> float:
        return float(self.position + self.length)

    @property
    def total(self) -> float:
        """Resultante sin recortar: w·ℓ."""
        return float(self.value * self.length)


@dataclass(frozen=True)
class MomentLoad:
    position: float
    value: float       # N·m (horario+)
    label: str = ""


Load = Union[PointLoad, DistributedLoad, MomentLoad]

LOAD_TYPES = {
    "point": PointLoad,
    "distributed": DistributedLoad,
    "moment": MomentLoad,
}
