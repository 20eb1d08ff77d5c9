import math

import pytest

from brachistodp.brachistochrone import (
    ACTIONS,
    G,
    Brachistochrone,
    time_horizon_for,
)


@pytest.fixture
def solved():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    b.solve()
    return b


def _steps(points):
    return [(b[0] - a[0], b[1] - a[1]) for a, b in zip(points, points[1:])]


def test_every_downward_action_has_positive_finite_cost():
    assert len(ACTIONS) == 153
    b = Brachistochrone(16, 1.0, (0.0, 16.0), (16.0, 0.0))
    downward = [u for u in ACTIONS if u[1] < 0]
    assert len(downward) == 72
    costs = [float(b.cost((0.0, 16.0), u)) for u in downward]
    assert all(0.0 < c < math.inf for c in costs)


@pytest.mark.parametrize("n, expected", [(10, 5), (60, 20), (1000, 200)])
def test_time_horizon_for(n, expected):
    assert time_horizon_for(n) == expected


def test_time_horizon_attribute_matches_function():
    b = Brachistochrone(30, 1.0, (0.0, 30.0), (30.0, 5.0))
    assert b.time_horizon == time_horizon_for(30)


def test_negative_resolution_rejected():
    with pytest.raises(ValueError):
        Brachistochrone(-1, 1.0, (0.0, 1.0), (1.0, 0.0))


def test_cost_of_free_fall_matches_kinematics():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    drop = 2.0
    assert b.cost((0.0, 10.0), (0.0, -drop)) == pytest.approx(math.sqrt(2 * drop / G), rel=1e-5)


def test_cost_is_additive_along_free_fall():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    split = b.cost((0.0, 10.0), (0.0, -2.0)) + b.cost((0.0, 8.0), (0.0, -2.0))
    whole = b.cost((0.0, 10.0), (0.0, -4.0))
    assert split == pytest.approx(whole, rel=1e-5)


def test_cost_scales_with_mu():
    coarse = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    fine = Brachistochrone(20, 0.5, (0.0, 20.0), (20.0, 4.0))
    assert coarse.cost((0.0, 10.0), (0.0, -2.0)) == pytest.approx(
        fine.cost((0.0, 20.0), (0.0, -4.0)), rel=1e-5
    )


def test_cost_of_horizontal_move_at_start_height_is_infinite():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    result = float(b.cost((0.0, 10.0), (3.0, 0.0)))
    assert result == math.inf


def test_cost_of_rising_above_start_is_nan():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    result = float(b.cost((0.0, 9.0), (1.0, 3.0)))
    assert repr(result) == "nan"


def test_path_before_solve_is_empty():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (10.0, 2.0))
    assert list(b.path_iter((0.0, 10.0))) == []


def test_path_runs_from_start_to_end(solved):
    path = list(solved.path_iter((0.0, 10.0)))
    points = [p for _, p in path]
    assert points[0] == (0.0, 10.0)
    assert points[-1] == (10.0, 2.0)
    assert len(path) == solved.time_horizon + 1


def test_path_steps_are_actions(solved):
    points = [p for _, p in solved.path_iter((0.0, 10.0))]
    assert all(step in ACTIONS for step in _steps(points))


def test_path_costs_decrease_to_zero(solved):
    costs = [c for c, _ in solved.path_iter((0.0, 10.0))]
    assert costs[-1] == 0.0
    assert all(a >= b for a, b in zip(costs, costs[1:]))


def test_path_cost_is_sum_of_step_costs(solved):
    path = list(solved.path_iter((0.0, 10.0)))
    points = [p for _, p in path]
    total = sum(solved.cost(p, u) for p, u in zip(points, _steps(points)))
    assert path[0][0] == pytest.approx(total, rel=1e-4)


def test_path_never_rises_above_start(solved):
    points = [p for _, p in solved.path_iter((0.0, 10.0))]
    assert all(y <= 10.0 for _, y in points)


def test_optimal_path_beats_straight_grid_path(solved):
    best = next(iter(solved.path_iter((0.0, 10.0))))[0]
    straight = solved.cost((0.0, 10.0), (5.0, -4.0)) + solved.cost((5.0, 6.0), (5.0, -4.0))
    assert best <= straight


def test_unreachable_end_gives_empty_path():
    b = Brachistochrone(10, 1.0, (0.0, 2.0), (5.0, 8.0))
    b.solve()
    assert list(b.path_iter((0.0, 2.0))) == []


def test_fractional_start_keeps_offset(solved):
    points = [p for _, p in solved.path_iter((0.5, 10.25))]
    assert points[0] == (0.5, 10.25)
    assert all(step in ACTIONS for step in _steps(points))
    assert all(x % 1 == 0.5 for x, _ in points)


def test_solve_is_repeatable(solved):
    first = list(solved.path_iter((0.0, 10.0)))
    solved.solve()
    assert list(solved.path_iter((0.0, 10.0))) == first


def test_start_outside_grid_raises(solved):
    with pytest.raises(IndexError):
        list(solved.path_iter((0.0, 11.0)))


def test_end_outside_grid_raises():
    b = Brachistochrone(10, 1.0, (0.0, 10.0), (12.0, 2.0))
    with pytest.raises(IndexError):
        b.solve()