from __future__ import annotations

import math

import numpy as np


def build_grid(length: float, num_points: int) -> np.ndarray:
    """Abscisas x_i = i·dx, i = 0..num_points (extremos exactos en 0 y L)."""
    return np.linspace(0.0, float(length), int(num_points) + 1, dtype=float)


def nearest_index(x: float, dx: float, num_points: int) -> int:
    """Índice de grilla más cercano a x (acotado a [0, num_points]). Empates: hacia arriba."""
    i = int(math.floor(float(x) / float(dx) + 0.5))
    return max(0, min(int(num_points), i))
