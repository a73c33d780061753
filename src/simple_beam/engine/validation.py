from __future__ import annotations

import math
import numbers

from simple_beam.domain.beam import Beam
from simple_beam.domain.errors import ValidationError
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad


def _inside(x: float, L: float, tol: float) -> bool:
    return (x >= -tol) and (x <= L + tol)


def _positive_finite(v: float) -> bool:
    x = float(v)
    return math.isfinite(x) and x > 0


def validate_beam(beam: Beam) -> None:
    """
    Corta en la primera inconsistencia (orden fijo):
      1) L > 0
      2) al menos una carga
      3) al menos dos apoyos
      4) apoyos dentro de [0, L]
      5) cargas con valor finito y dentro de [0, L] (distribuida: tramo completo y largo > 0)
      6) E, I finitos > 0 y num_points entero >= 1
    """
    L = float(beam.length)
    if not (math.isfinite(L) and L > 0):
        raise ValidationError(f"El largo de la viga debe ser mayor que cero (L={L:g}).")

    if not beam.loads:
        raise ValidationError("Debe definirse al menos una carga.")

    if len(beam.supports) < 2:
        raise ValidationError(f"Deben definirse al menos dos apoyos (hay {len(beam.supports)}).")

    tol = beam.tol

    for k, sp in enumerate(beam.supports, start=1):
        if not _inside(float(sp.position), L, tol):
            raise ValidationError(
                f"Apoyo #{k} fuera de la viga: x={sp.position:g} m no está en [0, {L:g}] m."
            )

    for k, ld in enumerate(beam.loads, start=1):
        if not isinstance(ld, (PointLoad, DistributedLoad, MomentLoad)):
            raise ValidationError(f"Tipo de carga inválido (#{k}): {type(ld).__name__}")
        if not math.isfinite(float(ld.value)):
            raise ValidationError(f"Carga #{k}: el valor debe ser un número finito (valor={ld.value!r}).")
        if isinstance(ld, (PointLoad, MomentLoad)):
            if not _inside(float(ld.position), L, tol):
                kind = "Carga puntual" if isinstance(ld, PointLoad) else "Momento"
                raise ValidationError(
                    f"{kind} #{k} fuera de la viga: x={ld.position:g} m no está en [0, {L:g}] m."
                )
        elif isinstance(ld, DistributedLoad):
            x0 = float(ld.position)
            if not _inside(x0, L, tol) or x0 + float(ld.length) > L + tol:
                raise ValidationError(
                    f"Carga distribuida #{k} fuera de la viga: [{x0:g}, {ld.end:g}] m no está en [0, {L:g}] m."
                )
            if not float(ld.length) > 0:
                raise ValidationError(
                    f"Carga distribuida #{k}: el largo debe ser mayor que cero (ℓ={ld.length:g} m)."
                )

    if not _positive_finite(beam.elastic_modulus):
        raise ValidationError(f"El módulo de elasticidad debe ser positivo y finito (E={beam.elastic_modulus:g} Pa).")
    if not _positive_finite(beam.moment_of_inertia):
        raise ValidationError(f"El momento de inercia debe ser positivo y finito (I={beam.moment_of_inertia:g} m^4).")

    n = beam.num_points
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValidationError(f"num_points debe ser un entero >= 1 (num_points={n!r}).")
