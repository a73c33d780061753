import logging

import numpy as np
import pytest
from pytest import approx

from simple_beam.domain.beam import Beam
from simple_beam.domain.loads import PointLoad, DistributedLoad, MomentLoad
from simple_beam.domain.results import DiscretizedSeries
from simple_beam.domain.supports import Support
from simple_beam.engine.diagrams import shear_force, bending_moment, deflection
from simple_beam.engine.equilibrium import solve_reactions
from simple_beam.engine.grid import build_grid, nearest_index


def _run(beam):
    r = solve_reactions(beam)
    x = build_grid(beam.length, beam.num_points)
    V = shear_force(beam, r, x)
    M = bending_moment(beam, V)
    d = deflection(beam, M, r)
    return r, V, M, d


def test_grid_is_uniform_and_spans_the_beam():
    x = build_grid(10.0, 100)
    assert x.size == 101
    assert x[0] == 0.0 and x[-1] == 10.0
    assert np.allclose(np.diff(x), 0.1)


def test_nearest_index_rounds_half_up():
    assert nearest_index(1.25, 0.5, 20) == 3
    assert nearest_index(5.0, 0.1, 100) == 50
    assert nearest_index(12.0, 0.1, 100) == 100


def test_point_load_shear_and_moment():
    beam = Beam(length=10.0, loads=(PointLoad(5.0, 1000.0),), supports=(Support(0.0), Support(10.0)))
    _, V, M, _ = _run(beam)

    assert V.values[0] == approx(500.0)
    assert V.values[49] == approx(500.0)
    assert V.values[50] == approx(-500.0)
    assert V.values[-1] == approx(0.0, abs=1e-9)

    assert M.values[0] == 0.0
    assert M.values[50] == approx(2500.0)   # P·L/4
    assert M.values[-1] == approx(0.0, abs=1e-8)


def test_distributed_load_shear_ramps_linearly():
    beam = Beam(length=10.0, loads=(DistributedLoad(0.0, 10.0, 100.0),), supports=(Support(0.0), Support(10.0)))
    _, V, _, _ = _run(beam)
    assert np.allclose(V.values[:-1], 500.0 - 100.0 * V.x[:-1])
    assert V.values[-1] == approx(0.0, abs=1e-9)

    # fuera del tramo la resultante completa queda aplicada
    beam = Beam(length=10.0, loads=(DistributedLoad(2.0, 4.0, 50.0),), supports=(Support(0.0), Support(10.0)))
    r, V, _, _ = _run(beam)
    Ra = r.reactions[0].value
    assert V.values[10] == approx(Ra)
    assert V.values[40] == approx(Ra - 50.0 * 2.0)
    assert V.values[80] == approx(Ra - 200.0)


def test_moments_do_not_enter_shear():
    beam = Beam(length=10.0, loads=(MomentLoad(5.0, 600.0),), supports=(Support(0.0), Support(10.0)))
    _, V, _, _ = _run(beam)
    assert np.allclose(V.values[:-1], -60.0)


def test_moment_load_jumps_only_at_nearest_index():
    beam = Beam(
        length=10.0,
        loads=(PointLoad(2.0, 1000.0), MomentLoad(5.0, 500.0)),
        supports=(Support(0.0), Support(10.0)),
    )
    _, V, M, _ = _run(beam)
    dx = beam.dx
    k = 50

    steps = np.diff(M.values) - V.values[:-1] * dx
    assert steps[k - 1] == approx(500.0)
    others = np.delete(steps, k - 1)
    assert np.allclose(others, 0.0, atol=1e-8)
    assert M.values[-1] == approx(0.0, abs=1e-8)


def test_deflection_is_zero_at_both_supports():
    beam = Beam(length=10.0, loads=(PointLoad(5.0, 1000.0),), supports=(Support(0.0), Support(10.0)))
    _, _, _, d = _run(beam)
    assert d.values[0] == 0.0
    assert d.values[-1] == 0.0
    assert np.all(d.values[1:-1] < 0.0)

    beam = Beam(
        length=10.0,
        loads=(PointLoad(5.0, 1000.0), PointLoad(0.0, 200.0)),
        supports=(Support(2.0), Support(8.0)),
    )
    _, _, _, d = _run(beam)
    assert d.values[20] == 0.0
    assert d.values[80] == 0.0


def test_midspan_deflection_matches_closed_form():
    P, L = 1000.0, 10.0
    beam = Beam(length=L, loads=(PointLoad(L / 2, P),), supports=(Support(0.0), Support(L)), num_points=1000)
    _, _, _, d = _run(beam)
    expected = -P * L**3 / (48.0 * beam.EI)
    assert d.values[500] == approx(expected, rel=1e-2)


def test_all_series_share_the_grid():
    beam = Beam(
        length=7.0,
        loads=(DistributedLoad(1.0, 3.0, 20.0), MomentLoad(6.0, -40.0)),
        supports=(Support(0.0), Support(7.0)),
        num_points=35,
    )
    _, V, M, d = _run(beam)
    for s in (V, M, d):
        assert len(s) == 36
        assert np.array_equal(s.x, V.x)
        assert s.x[0] == 0.0 and s.x[-1] == 7.0


@pytest.mark.parametrize("a, b", [(0.33, 9.77), (1.3, 8.6), (2.45, 7.55)])
def test_deflection_is_zero_at_off_grid_supports(a, b):
    beam = Beam(
        length=10.0,
        loads=(PointLoad(5.0, 1000.0), DistributedLoad(0.0, 10.0, 50.0)),
        supports=(Support(a), Support(b)),
        num_points=10,
    )
    _, _, _, d = _run(beam)
    ia = nearest_index(a, beam.dx, beam.num_points)
    ib = nearest_index(b, beam.dx, beam.num_points)
    assert ia != ib
    assert d.values[ia] == 0.0
    assert d.values[ib] == 0.0


def test_supports_on_the_same_grid_index_fall_back_to_constant(caplog):
    beam = Beam(
        length=1.0,
        loads=(PointLoad(0.5, 100.0),),
        supports=(Support(0.0), Support(0.4)),
        num_points=1,
    )
    r = solve_reactions(beam)
    x = build_grid(beam.length, beam.num_points)
    M = bending_moment(beam, shear_force(beam, r, x))

    with caplog.at_level(logging.WARNING, logger="simple_beam"):
        d = deflection(beam, M, r)

    assert any("mismo índice" in rec.getMessage() for rec in caplog.records)
    assert d.values[0] == 0.0
    assert len(d) == 2


def test_series_are_read_only_and_do_not_share_buffers():
    beam = Beam(length=10.0, loads=(PointLoad(5.0, 1000.0),), supports=(Support(0.0), Support(10.0)))
    _, V, M, d = _run(beam)

    for s in (V, M, d):
        with pytest.raises(ValueError):
            s.x[0] = 99.0
        with pytest.raises(ValueError):
            s.values[0] = 99.0

    assert not np.shares_memory(V.x, M.x)
    assert not np.shares_memory(M.x, d.x)


def test_series_copy_their_inputs():
    x = np.linspace(0.0, 1.0, 3)
    v = np.array([1.0, 2.0, 3.0])
    series = DiscretizedSeries(x=x, values=v)
    x[1] = 42.0
    v[1] = 42.0
    assert series.x[1] == approx(0.5)
    assert series.values[1] == 2.0
