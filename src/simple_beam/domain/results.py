from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np


@dataclass(frozen=True)
class Reaction:
    position: float
    value: float       # N (up+)
    kind: str = "simple"

    def to_dict(self) -> Dict[str, Any]:
        return {"position": float(self.position), "value": float(self.value), "type": self.kind}


@dataclass(frozen=True)
class ReactionResult:
    reactions: Tuple[Reaction, Reaction]
    sum_forces: float  # Ra + Rb (debería igualar la resultante de cargas)


@dataclass(frozen=True)
class DiscretizedSeries:
    """
    Serie muestreada sobre la grilla común: x[i], values[i], i = 0..num_points.
    Todas las series de un mismo cálculo comparten x índice a índice.
    """
    x: np.ndarray
    values: np.ndarray

    def __post_init__(self):
        # Copia propia de solo lectura: el dataclass congelado no alcanza a los arrays
        for name in ("x", "values"):
            arr = np.array(getattr(self, name), dtype=float, copy=True)
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)

    def __len__(self) -> int:
        return int(self.x.size)

    def points(self) -> List[Tuple[float, float]]:
        return [(float(xi), float(vi)) for xi, vi in zip(self.x, self.values)]

    def max_abs(self) -> float:
        if not self.values.size:
            return 0.0
        return float(np.max(np.abs(self.values)))

    def to_list(self) -> List[Dict[str, float]]:
        return [{"x": xi, "value": vi} for xi, vi in self.points()]


@dataclass(frozen=True)
class Maxima:
    shear: float
    moment: float
    deflection: float


@dataclass(frozen=True)
class LoadSummary:
    total_point_loads: float
    total_distributed_load: float   # Σ w·ℓ (sin recorte)
    total_moment: float


@dataclass(frozen=True)
class AnalysisResult:
    reactions: Tuple[Reaction, ...]
    sum_forces: float
    shear_force: DiscretizedSeries
    bending_moment: DiscretizedSeries
    deflection: DiscretizedSeries
    maxima: Maxima
    load_summary: LoadSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reactions": [r.to_dict() for r in self.reactions],
            "sumForces": float(self.sum_forces),
            "shearForce": self.shear_force.to_list(),
            "bendingMoment": self.bending_moment.to_list(),
            "deflection": self.deflection.to_list(),
            "maxima": {
                "shear": self.maxima.shear,
                "moment": self.maxima.moment,
                "deflection": self.maxima.deflection,
            },
            "loadSummary": {
                "totalPointLoads": self.load_summary.total_point_loads,
                "totalDistributedLoad": self.load_summary.total_distributed_load,
                "totalMoment": self.load_summary.total_moment,
            },
        }
