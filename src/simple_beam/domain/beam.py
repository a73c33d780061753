from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from simple_beam.domain.loads import Load
from simple_beam.domain.supports import Support

DEFAULT_ELASTIC_MODULUS = 210e9     # Pa (acero)
DEFAULT_MOMENT_OF_INERTIA = 1e-6    # m^4
DEFAULT_NUM_POINTS = 100

# Tolerancia relativa (× L) para comparar posiciones sobre la viga
POSITION_TOL_REL = 1e-9


@dataclass(frozen=True)
class Beam:
    """
    Viga recta (unidades SI).

    - length: largo total [m]
    - loads: cargas en el orden ingresado
    - supports: apoyos (para el solver: exactamente dos simples)
    - elastic_modulus: E [Pa]
    - moment_of_inertia: I [m^4]
    - num_points: cantidad de tramos de la discretización (la grilla tiene num_points + 1 puntos)
    """
    length: float
    loads: Tuple[Load, ...] = field(default_factory=tuple)
    supports: Tuple[Support, ...] = field(default_factory=tuple)
    elastic_modulus: float = DEFAULT_ELASTIC_MODULUS
    moment_of_inertia: float = DEFAULT_MOMENT_OF_INERTIA
    num_points: int = DEFAULT_NUM_POINTS

    def __post_init__(self):
        # Aceptar listas en la construcción, pero guardar tuplas (inmutable)
        object.__setattr__(self, "loads", tuple(self.loads))
        object.__setattr__(self, "supports", tuple(self.supports))

    @property
    def EI(self) -> float:
        return float(self.elastic_modulus * self.moment_of_inertia)

    @property
    def dx(self) -> float:
        return float(self.length) / int(self.num_points)

    @property
    def tol(self) -> float:
        return POSITION_TOL_REL * max(1.0, abs(float(self.length)))
