from __future__ import annotations

import logging

import numpy as np

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad
from simple_beam.domain.results import DiscretizedSeries, ReactionResult
from simple_beam.engine.grid import nearest_index

logger = logging.getLogger(__name__)


# Convención:
# - V(x): reacciones (up+) menos cargas (down+) a la izquierda de x
# - M(x): sagging+, obtenido integrando V
# - δ(x): up+, doble integración de M/EI corregida a cero en ambos apoyos


def shear_force(beam: Beam, reactions: ReactionResult, x: np.ndarray) -> DiscretizedSeries:
    """
    V(x_i) = Σ R(xr <= x_i) - Σ P(xp <= x_i) - Σ w·clip(x_i - p, 0, ℓ)

    La distribuida entra acumulada (rampa lineal en su tramo, resultante completa después).
    """
    x = np.asarray(x, dtype=float)
    tol = beam.tol
    V = np.zeros_like(x, dtype=float)

    # reacciones: V += R * H(x - xr)
    r_x = np.array([float(r.position) for r in reactions.reactions], dtype=float)
    r_v = np.array([float(r.value) for r in reactions.reactions], dtype=float)
    if r_x.size:
        H = (x[:, None] >= r_x[None, :] - tol).astype(float)
        V += H @ r_v

    pts = [ld for ld in beam.loads if isinstance(ld, PointLoad)]
    if pts:
        p_x = np.array([float(p.position) for p in pts], dtype=float)
        p_v = np.array([float(p.value) for p in pts], dtype=float)
        H = (x[:, None] >= p_x[None, :] - tol).astype(float)
        V -= H @ p_v

    dls = [ld for ld in beam.loads if isinstance(ld, DistributedLoad)]
    if dls:
        a = np.array([float(d.position) for d in dls], dtype=float)[None, :]
        ln = np.array([float(d.length) for d in dls], dtype=float)[None, :]
        w = np.array([float(d.value) for d in dls], dtype=float)[None, :]
        lx = np.clip(x[:, None] - a, 0.0, ln)
        V -= np.sum(w * lx, axis=1)

    return DiscretizedSeries(x=x, values=V)


def bending_moment(beam: Beam, shear: DiscretizedSeries) -> DiscretizedSeries:
    """
    Cuadratura de rectángulo izquierdo sobre V:
      M_0 = 0,  M_i = M_{i-1} + V_{i-1}·dx

    Momentos concentrados: salto de valor M en el índice más cercano a su posición,
    arrastrado a todos los índices siguientes.
    """
    x = shear.x
    dx = beam.dx
    V = shear.values

    M = np.zeros_like(V, dtype=float)
    if V.size > 1:
        M[1:] = np.cumsum(V[:-1] * dx)

    for ld in beam.loads:
        if isinstance(ld, MomentLoad):
            k = nearest_index(float(ld.position), dx, beam.num_points)
            M[k:] += float(ld.value)

    return DiscretizedSeries(x=x, values=M)


def deflection(beam: Beam, moment: DiscretizedSeries, reactions: ReactionResult) -> DiscretizedSeries:
    """
    Doble integración de la curvatura κ = M/EI (rectángulo izquierdo):
      θ_0 = 0,  θ_i = θ_{i-1} + κ_{i-1}·dx
      δ_0 = 0,  δ_i = δ_{i-1} + θ_{i-1}·dx

    Ambas constantes quedan fijadas en x=0; se resta la recta que pasa por δ en los
    dos apoyos, de modo que δ = 0 exacto en ambos índices de apoyo.
    """
    x = moment.x
    dx = beam.dx
    kappa = moment.values / beam.EI

    theta = np.zeros_like(kappa, dtype=float)
    delta = np.zeros_like(kappa, dtype=float)
    if kappa.size > 1:
        theta[1:] = np.cumsum(kappa[:-1] * dx)
        delta[1:] = np.cumsum(theta[:-1] * dx)

    ia, ib = sorted(nearest_index(float(r.position), dx, beam.num_points) for r in reactions.reactions)

    if ib == ia:
        # ambos apoyos caen en el mismo punto de grilla: solo se puede anular uno
        logger.warning("Apoyos en el mismo índice de grilla (%d): corrección por constante.", ia)
        corr = np.full_like(delta, delta[ia])
    else:
        t = (x - x[ia]) / (x[ib] - x[ia])
        corr = delta[ia] * (1.0 - t) + delta[ib] * t

    return DiscretizedSeries(x=x, values=delta - corr)
