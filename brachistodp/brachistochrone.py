"""Discrete dynamic-programming solver for the brachistochrone problem.

The plane is sampled on an ``(n + 1) x (n + 1)`` integer grid, where each grid
unit stands for ``mu`` metres. A body released from rest at ``start`` moves
between grid points, one action per time step, and the solver finds the
sequence of moves that reaches ``end`` in the least time. Each action moves at
most 8 cells to the right and at most 8 cells up or down.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

G = 9.81

_MAX_DX = 8
_MAX_DY = 8

ACTIONS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in range(_MAX_DX + 1)
    for dy in range(-_MAX_DY, _MAX_DY + 1)
)

# Action codes that are not indices into ACTIONS.
UNINIT = 254
TERMINAL = 255

_TWO_G = np.float32(2.0) * np.float32(G)

Point = tuple[float, float]


def time_horizon_for(n: int) -> int:
    """Return the number of time steps used for a grid of resolution ``n``."""
    if n >= 1000:
        return n // 5
    if n >= 500:
        return n // 4
    if n >= 50:
        return n // 3
    return n // 2


def _point(value: Sequence[float]) -> Point:
    x, y = value
    return float(x), float(y)


class Brachistochrone:
    """Fastest-descent path on a grid, solved backwards in time."""

    def __init__(self, n: int, mu: float, start: Sequence[float], end: Sequence[float]) -> None:
        if n < 0:
            raise ValueError(f"grid resolution must not be negative: {n}")
        self.n = int(n)
        self.time_horizon = time_horizon_for(self.n)
        self.mu = float(mu)
        self.start = _point(start)
        self.end = _point(end)

        shape = (self.time_horizon + 1, self.n + 1, self.n + 1)
        self._values = np.full(shape, np.inf, dtype=np.float32)
        self._actions = np.full(shape, UNINIT, dtype=np.uint8)

    def _axis(self, value: float) -> int:
        # Truncate towards zero, saturating negatives and NaN at zero.
        if not value > 0:
            return 0
        if value >= self.n + 1:
            raise IndexError(f"coordinate {value} lies outside the grid 0..={self.n}")
        return int(value)

    def _cell(self, point: Sequence[float]) -> tuple[int, int]:
        x, y = point
        return self._axis(x), self._axis(y)

    def cost(self, x_k: Sequence[float], u: Sequence[float]) -> float:
        """Time to travel from grid point ``x_k`` by the move ``u``."""
        mu = np.float32(self.mu)
        here = np.asarray(x_k, dtype=np.float32)
        move = np.asarray(u, dtype=np.float32)
        here_scaled = here * mu
        next_scaled = (here + move) * mu
        y_start_scaled = np.float32(self.start[1]) * mu

        with np.errstate(all="ignore"):
            delta = next_scaled - here_scaled
            distance = np.sqrt(np.sum(delta * delta, dtype=np.float32))
            speeds = np.sqrt(_TWO_G * (y_start_scaled - next_scaled[1])) + np.sqrt(
                _TWO_G * (y_start_scaled - here_scaled[1])
            )
            return float(np.float32(2.0) * distance / speeds)

    def _action_costs(self) -> np.ndarray:
        """Cost of every action from every grid point, shaped (actions, x, y)."""
        mu = np.float32(self.mu)
        y_start_scaled = np.float32(self.start[1]) * mu
        grid = np.arange(self.n + 1, dtype=np.float32)
        xs = grid[:, None]
        ys = grid[None, :]
        moves = np.array(ACTIONS, dtype=np.float32)
        dx = moves[:, 0, None, None]
        dy = moves[:, 1, None, None]

        with np.errstate(all="ignore"):
            delta_x = (xs + dx) * mu - xs * mu
            delta_y = (ys + dy) * mu - ys * mu
            distance = np.sqrt(delta_x * delta_x + delta_y * delta_y)
            speeds = np.sqrt(_TWO_G * (y_start_scaled - (ys + dy) * mu)) + np.sqrt(
                _TWO_G * (y_start_scaled - ys * mu)
            )
            costs = np.float32(2.0) * distance / speeds

        costs[np.isnan(costs)] = np.inf
        return costs.astype(np.float32, copy=False)

    def solve(self) -> None:
        """Fill the cost-to-go table for every step and grid point."""
        size = self.n + 1
        horizon = self.time_horizon
        end_x, end_y = self._cell(self.end)
        self._values[horizon, end_x, end_y] = 0.0
        self._actions[horizon, end_x, end_y] = TERMINAL

        costs = self._action_costs()
        padded = np.full((size + _MAX_DX, size + 2 * _MAX_DY), np.inf, dtype=np.float32)

        for k in reversed(range(horizon)):
            padded[:size, _MAX_DY:_MAX_DY + size] = self._values[k + 1]
            following = sliding_window_view(padded, (size, size)).reshape(len(ACTIONS), size, size)
            total = costs + following
            best = np.argmin(total, axis=0)
            best_value = np.take_along_axis(total, best[None], axis=0)[0]
            reachable = np.isfinite(best_value)
            self._values[k] = np.where(reachable, best_value, np.inf)
            self._actions[k] = np.where(reachable, best, UNINIT).astype(np.uint8)

    def path_iter(self, start: Sequence[float]) -> Iterator[tuple[float, Point]]:
        """Yield ``(cost_to_go, point)`` along the optimal path from ``start``."""
        current = _point(start)
        k = 0
        while True:
            x, y = self._cell(current)
            action = int(self._actions[k, x, y])
            if action == UNINIT:
                return
            cost = float(self._values[k, x, y])
            point = current
            if action == TERMINAL:
                yield cost, point
                return
            dx, dy = ACTIONS[action]
            current = (current[0] + dx, current[1] + dy)
            k += 1
            yield cost, point