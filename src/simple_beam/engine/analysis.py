from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from simple_beam.domain.beam import Beam
from simple_beam.domain.results import AnalysisResult
from simple_beam.engine.aggregate import aggregate_results
from simple_beam.engine.diagrams import shear_force, bending_moment, deflection
from simple_beam.engine.equilibrium import solve_reactions
from simple_beam.engine.grid import build_grid
from simple_beam.engine.normalize import parse_job
from simple_beam.engine.validation import validate_beam

logger = logging.getLogger(__name__)


def run_analysis(beam: Beam) -> AnalysisResult:
    """
    Pipeline completo sobre una Beam ya armada:
      validación -> reacciones -> V -> M -> δ -> resultado

    Cada etapa usa la serie completa de la anterior (suma prefija), en orden.
    """
    validate_beam(beam)

    reactions = solve_reactions(beam)
    x = build_grid(beam.length, beam.num_points)
    V = shear_force(beam, reactions, x)
    M = bending_moment(beam, V)
    d = deflection(beam, M, reactions)

    result = aggregate_results(beam, reactions, V, M, d)
    logger.info(
        "Viga L=%g m, %d cargas: Ra=%g N, Rb=%g N, |V|max=%g N, |M|max=%g N·m, |δ|max=%g m",
        beam.length,
        len(beam.loads),
        result.reactions[0].value,
        result.reactions[1].value,
        result.maxima.shear,
        result.maxima.moment,
        result.maxima.deflection,
    )
    return result


def analyze_beam(job: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Punto de entrada con el formato del cliente:
      {beamLength, loads[], supports[], elasticModulus?, momentOfInertia?, numPoints?}
    Devuelve {"input": {...}, "results": {...}}.
    """
    beam = parse_job(job)
    result = run_analysis(beam)
    return {
        "input": {
            "beamLength": float(beam.length),
            "elasticModulus": float(beam.elastic_modulus),
            "momentOfInertia": float(beam.moment_of_inertia),
        },
        "results": result.to_dict(),
    }
