# brachistodp

Finds an approximate brachistochrone, the curve of fastest descent under
gravity, by dynamic programming over a square grid. It also holds the
parameters and button logic of a small simulation front end.

## The solver

`brachistodp.brachistochrone.Brachistochrone(n, mu, start, end)` works on an
`(n + 1)` by `(n + 1)` grid of integer points, each grid unit standing for
`mu` metres. `start` and `end` are given in grid units. At each step the path
moves by a vector from a fixed set: 0 to 8 cells along x and -8 to 8 cells
along y. The cost of one step (`cost(x_k, u)`) is the time a body takes to
slide along that straight segment, having started from rest at the start
height, with g = 9.81 m/s².

`solve()` fills the cost-to-go table backwards over a time horizon chosen from
`n` by `time_horizon_for(n)` (`n // 2` below 50, `n // 3` from 50, `n // 4`
from 500, `n // 5` from 1000). `path_iter(start)` then yields
`(cost_to_go, point)` pairs along the best path found, ending at `end`. If
`end` cannot be reached within the horizon, it yields nothing.

```python
from brachistodp.brachistochrone import Brachistochrone

n = 20
mu = 10.0 / n
start = (0.0, 10.0 / mu)
end = (10.0 / mu, 2.0 / mu)

solver = Brachistochrone(n, mu, start, end)
solver.solve()
for cost, point in solver.path_iter(start):
    print(f"{cost:.3f} s left at {point}")
```

## The front-end logic

`brachistodp.app` contains the following:

- `Params`: start and end points in metres, grid resolution, viewport size,
  friction and straight-line mode.
- `set_start_x`, `set_start_y`, `set_end_x`, `set_end_y`: change a point only
  if the start then stays more than 2 m to the left of and above the end.
  They return whether the change was made.
- `coords(r, params)`: maps metres to window pixels (50 px per metre, origin
  shifted by a quarter of the viewport width and three eighths of its height).
- `generate_path(params)`: solves the grid with `grid_resolution` cells and
  returns the path as line segments in window coordinates.
  `straight_path(params)` returns the single straight segment instead.
- `Controller`: the Start, waiting (`...`) and Reset states of the start
  button. `press()` starts straight-line mode at once, or waits until
  `path_ready(segments)` is called. Both set the body position and the start
  time. Pressing in the Reset state clears them again.
- `reached_end(position, params)`: whether the body has reached or passed
  the end point.
- `format_time(secs)`: shows elapsed time as `MM:SS.mmm`.
- `Localization`: a key-to-label table loaded with `Localization.from_json`.
  An unknown key raises `KeyError`. `language_from_path` picks `"en"` or
  `"pt"` from a URL path such as `/pt/`, and raises `ValueError` for any
  other two-letter prefix.

## Command line

```
brachistodp
```

This solves the path for the default parameters: start `(0, 10)`, end
`(10, 2)`, resolution 50, viewport 1280×720. It prints one segment per line
as `x1 y1 x2 y2` in window pixels. The options are:

- `--start X Y` and `--end X Y` set the points in metres.
- `--grid-resolution N` sets the resolution, from 10 to 150.
- `--straight-line` prints the straight segment instead of the solved path.
- `--width` and `--height` set the viewport size.

The end must lie more than 2 m to the right of the start and more than 2 m
below it.

## What it does not do

The package draws no window, runs no physics simulation and ships no
translation files. Callers place the path segments and body position that it
computes into their own renderer or physics engine, and supply their own
label tables.

## Tests

```
pip install -e .[test]
pytest
```