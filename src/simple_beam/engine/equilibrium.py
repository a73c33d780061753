from __future__ import annotations

import logging
from typing import Optional, Tuple

from simple_beam.domain.beam import Beam
from simple_beam.domain.errors import UnsupportedConfigurationError
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad
from simple_beam.domain.results import Reaction, ReactionResult
from simple_beam.domain.supports import SupportKind

logger = logging.getLogger(__name__)


def _clip_dist_to_span(a: float, b: float, x0: float, Lq: float) -> Optional[Tuple[float, float]]:
    if Lq <= 0:
        return None
    x1 = max(a, x0)
    x2 = min(b, x0 + Lq)
    if x2 <= x1:
        return None
    return x1, x2


def _sum_contributions(beam: Beam, a: float, b: float) -> Tuple[float, float]:
    """
    Devuelve (ΣF, ΣMa):
      ΣF:  resultante vertical de las cargas (down+)
      ΣMa: momento de las cargas respecto al apoyo a (horario+)
    Las distribuidas se recortan a [a, b] y se reemplazan por su resultante en el centroide.
    """
    F = 0.0
    Ma = 0.0

    for ld in beam.loads:
        if isinstance(ld, PointLoad):
            P = float(ld.value)
            F += P
            Ma += P * (float(ld.position) - a)

        elif isinstance(ld, DistributedLoad):
            clipped = _clip_dist_to_span(a, b, float(ld.position), float(ld.length))
            if clipped is None:
                logger.debug("Distribuida ignorada (no intersecta [%g, %g]): %s", a, b, ld)
                continue
            s, e = clipped
            F_res = float(ld.value) * (e - s)
            x_cent = 0.5 * (s + e)
            F += F_res
            Ma += F_res * (x_cent - a)

        elif isinstance(ld, MomentLoad):
            # solo momento, sin fuerza neta
            Ma += float(ld.value)

    return F, Ma


def solve_reactions(beam: Beam) -> ReactionResult:
    """
    Viga simplemente apoyada en a < b.

    Ecuaciones:
      ΣMa = 0  =>  Rb = ΣMa_cargas / (b - a)
      ΣFy = 0  =>  Ra = ΣF_cargas - Rb
    """
    supports = list(beam.supports)
    if len(supports) != 2 or any(s.kind != SupportKind.SIMPLE for s in supports):
        kinds = ", ".join(f"{getattr(s.kind, 'value', s.kind)}@{s.position:g}" for s in supports)
        raise UnsupportedConfigurationError(
            f"Configuración de apoyos no soportada: se requieren exactamente dos apoyos simples (hay: {kinds})."
        )

    sa, sb = sorted(supports, key=lambda s: float(s.position))
    a = float(sa.position)
    b = float(sb.position)
    if b - a <= beam.tol:
        raise UnsupportedConfigurationError(
            f"Apoyos coincidentes en x={a:g} m: la viga es inestable."
        )

    F, Ma = _sum_contributions(beam, a, b)

    Rb = Ma / (b - a)
    Ra = F - Rb

    logger.debug("Reacciones: Ra=%g N @ %g m, Rb=%g N @ %g m (ΣF=%g N)", Ra, a, Rb, b, F)

    return ReactionResult(
        reactions=(
            Reaction(position=a, value=Ra, kind=SupportKind.SIMPLE.value),
            Reaction(position=b, value=Rb, kind=SupportKind.SIMPLE.value),
        ),
        sum_forces=Ra + Rb,
    )
