import pytest
import numpy as np
from beam_warming.boundary import enforce_full
from beam_warming.flux import BeamWarmingFlux
from beam_warming.grid import build


def quadratic_field():
    """
    interior [0, 1, 4, 9, 16] with periodic ghosts
    """
    grid = build(5, ns=BeamWarmingFlux.stencil_width)
    field = grid.allocate()
    field.interior = np.arange(5) ** 2
    enforce_full(field)
    return field


@pytest.mark.parametrize(
    "u, expected",
    [
        # left-biased: 0.5 * (1 * (3 * 4 - 1) - 0.5 * (4 - 1))
        (1.0, 4.75),
        # right-biased: 0.5 * (-1 * (3 * 9 - 16) - 0.5 * (16 - 9))
        (-1.0, -7.25),
    ],
)
def test_upwind_direction(u, expected):
    flux = BeamWarmingFlux(u=u, coef=0.5)(quadratic_field())
    # interface between cells 2 and 3
    assert flux[3] == pytest.approx(expected)


def test_branches_differ():
    field = quadratic_field()
    positive = BeamWarmingFlux(u=1.0, coef=0.5)(field)
    negative = BeamWarmingFlux(u=-1.0, coef=0.5)(field)
    assert not np.allclose(positive, -negative)


@pytest.mark.parametrize("u", [1.0, -1.0, 0.3, -0.7])
def test_periodic_closure(u):
    flux = BeamWarmingFlux(u=u, coef=0.5)(quadratic_field())
    assert len(flux) == 6
    assert flux[0] == flux[5]


def test_negative_velocity_reads_second_ghost():
    """
    the last interface depends on cells 0 and 1 through the right ghosts
    """
    flux = BeamWarmingFlux(u=-1.0, coef=0.5)(quadratic_field())
    # 0.5 * (-1 * (3 * 0 - 1) - 0.5 * (1 - 0))
    assert flux[5] == pytest.approx(0.25)
    assert flux[0] == pytest.approx(0.25)


@pytest.mark.parametrize("u", [0.005, -0.005, 1.0, -2.0])
def test_constant_state(u):
    """
    consistency: a uniform density gives the physical flux u * rho
    """
    grid = build(8, ns=2)
    field = grid.allocate()
    field.data[...] = 2.5
    flux = BeamWarmingFlux(u=u, coef=0.3)(field)
    assert flux == pytest.approx(u * 2.5 * np.ones(9))


def test_zero_velocity():
    flux = BeamWarmingFlux(u=0.0, coef=10.0)(quadratic_field())
    assert np.all(flux == 0.0)


def test_writes_into_buffer():
    buffer = np.zeros(6)
    flux = BeamWarmingFlux(u=1.0, coef=0.5)(quadratic_field(), buffer)
    assert flux is buffer


def test_needs_two_ghost_cells():
    grid = build(5, ns=1)
    with pytest.raises(ValueError):
        BeamWarmingFlux(u=1.0, coef=0.5)(grid.allocate())
