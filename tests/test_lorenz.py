"""
Unit Tests for the Lorenz Trajectory Generator

Checks the forward-Euler recurrence, its determinism and the handling of
divergent parameters.
"""

import numpy as np
import pytest

from lorenzattractor.model.lorenz import SimulationParameters, compute_trajectory


def reference_euler(params, n_points, dt=0.001, initial=(1.0, 1.0, 1.0)):
    """Plain Python rendition of the recurrence."""
    x, y, z = initial
    out = []
    for _ in range(n_points):
        dx = params.sigma * (y - x)
        dy = x * (params.rho - z) - y
        dz = x * y - params.beta * z
        x, y, z = x + dt * dx, y + dt * dy, z + dt * dz
        out.append((x, y, z))
    return np.array(out)


@pytest.fixture
def classic():
    return SimulationParameters(sigma=10.0, beta=8.0 / 3.0, rho=28.0)


def test_length_is_exactly_n(classic):
    for n in (1, 2, 137, 5000):
        traj = compute_trajectory(classic, n_points=n)
        assert traj.shape == (n, 3)
        assert traj.dtype == np.float64


def test_first_point_is_one_step_from_initial_condition(classic):
    first = compute_trajectory(classic, n_points=1)[0]

    assert first[0] == pytest.approx(1.0 + 0.001 * 10.0 * (1.0 - 1.0))
    assert first[1] == pytest.approx(1.0 + 0.001 * (1.0 * (28.0 - 1.0) - 1.0))
    assert first[2] == pytest.approx(1.0 + 0.001 * (1.0 * 1.0 - 8.0 / 3.0 * 1.0))
    assert first[1] == pytest.approx(1.026)
    # 1 + dt * (1 - 8/3), i.e. 0.998333...
    assert first[2] == pytest.approx(1 - 0.001 * (8.0 / 3.0 - 1))
    assert first[2] == pytest.approx(0.998333, abs=1e-6)


def test_deterministic(classic):
    a = compute_trajectory(classic, n_points=20000)
    b = compute_trajectory(SimulationParameters(sigma=10.0, beta=8.0 / 3.0, rho=28.0), n_points=20000)

    assert np.array_equal(a, b)


def test_returns_a_fresh_buffer(classic):
    a = compute_trajectory(classic, n_points=100)
    b = compute_trajectory(classic, n_points=100)

    assert a is not b
    assert not np.shares_memory(a, b)


def test_matches_reference_recurrence(classic):
    traj = compute_trajectory(classic, n_points=500)
    expected = reference_euler(classic, 500)

    np.testing.assert_allclose(traj, expected, rtol=1e-12, atol=0.0)


def test_derivatives_use_pre_update_state():
    # With sequential updates dy would see the new x; here x changes on step one
    params = SimulationParameters(sigma=10.0, beta=1.0, rho=5.0)
    first = compute_trajectory(params, n_points=1, initial=(0.0, 1.0, 0.0))[0]

    assert first[0] == pytest.approx(0.0 + 0.001 * 10.0 * 1.0)
    assert first[1] == pytest.approx(1.0 + 0.001 * (0.0 * 5.0 - 1.0))
    assert first[2] == pytest.approx(0.0)


def test_custom_step_and_initial_condition():
    params = SimulationParameters()
    traj = compute_trajectory(params, n_points=50, dt=0.01, initial=(2.0, -1.0, 3.0))
    expected = reference_euler(params, 50, dt=0.01, initial=(2.0, -1.0, 3.0))

    np.testing.assert_allclose(traj, expected, rtol=1e-12)


def test_initial_condition_is_not_stored(classic):
    traj = compute_trajectory(classic, n_points=10)

    assert not np.array_equal(traj[0], np.array([1.0, 1.0, 1.0]))


def test_different_parameters_give_different_trajectories(classic):
    a = compute_trajectory(classic, n_points=1000)
    b = compute_trajectory(SimulationParameters(sigma=10.5, beta=8.0 / 3.0, rho=28.0), n_points=1000)

    assert not np.array_equal(a, b)


def test_divergent_parameters_are_valid_output():
    params = SimulationParameters(sigma=1e6, beta=8.0 / 3.0, rho=28.0)

    with np.errstate(all="ignore"):
        traj = compute_trajectory(params, n_points=1000)

    assert traj.shape == (1000, 3)
    assert not np.isfinite(traj).all()


@pytest.mark.parametrize("n_points", [0, -1])
def test_non_positive_length_is_rejected(classic, n_points):
    with pytest.raises(ValueError):
        compute_trajectory(classic, n_points=n_points)


def test_signature_tracks_values():
    params = SimulationParameters()
    before = params.signature()
    params.rho += 1.0

    assert params.signature() != before
    assert params.signature() == (params.sigma, params.beta, params.rho)
