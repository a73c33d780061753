from __future__ import annotations

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad
from simple_beam.domain.results import (
    AnalysisResult, DiscretizedSeries, LoadSummary, Maxima, ReactionResult
)


def summarize_loads(beam: Beam) -> LoadSummary:
    return LoadSummary(
        total_point_loads=float(sum(float(l.value) for l in beam.loads if isinstance(l, PointLoad))),
        total_distributed_load=float(sum(l.total for l in beam.loads if isinstance(l, DistributedLoad))),
        total_moment=float(sum(float(l.value) for l in beam.loads if isinstance(l, MomentLoad))),
    )


def aggregate_results(
    beam: Beam,
    reactions: ReactionResult,
    shear: DiscretizedSeries,
    moment: DiscretizedSeries,
    deflection: DiscretizedSeries,
) -> AnalysisResult:
    return AnalysisResult(
        reactions=tuple(reactions.reactions),
        sum_forces=float(reactions.sum_forces),
        shear_force=shear,
        bending_moment=moment,
        deflection=deflection,
        maxima=Maxima(
            shear=shear.max_abs(),
            moment=moment.max_abs(),
            deflection=deflection.max_abs(),
        ),
        load_summary=summarize_loads(beam),
    )
