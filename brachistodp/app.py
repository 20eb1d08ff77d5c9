"""Simulation parameters, UI state and path generation for the brachistochrone demo.

Window coordinates follow the rendering convention of the demo: one metre
is ``PX_PER_M`` pixels and the origin is shifted so that the simulation
area sits in the lower-left part of the viewport.
"""

from __future__ import annotations

import argparse
import enum
import json
import math
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from brachistodp.brachistochrone import Brachistochrone

Point = tuple[float, float]
Segment = tuple[Point, Point]

TIME_SCALE = 0.7
PX_PER_M = 50.0
MAIN_BODY_RADIUS = PX_PER_M / 2.0 / math.sqrt(math.pi)
MAIN_BODY_DENSITY = 4.0
PATH_SPAWN_OFFSET: Point = (-MAIN_BODY_RADIUS / 4.0, -MAIN_BODY_RADIUS)

DEFAULT_VIEWPORT: Point = (1280.0, 720.0)

GRID_RESOLUTION_RANGE = (10, 150)
FRICTION_RANGE = (0.0, 0.99)


@dataclass
class Params:
    """Parameters of one simulation run."""

    start: Point = (0.0, 10.0)
    end: Point = (10.0, 2.0)
    grid_resolution: int = 50
    viewport_width: float = 0.0
    viewport_height: float = 0.0
    friction: float = 0.0
    straight_line: bool = False


@dataclass
class Localization:
    """Translation table from keys to display strings."""

    translations: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        try:
            return self.translations[key]
        except KeyError:
            raise KeyError(f"Translation key not found: {key}") from None

    @classmethod
    def from_json(cls, text: str) -> Localization:
        data = json.loads(text)
        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise ValueError("translation file must map strings to strings")
        return cls(dict(data))


class ButtonState(enum.Enum):
    """State of the start/reset button."""

    START = "start"
    WAITING = "waiting"
    RESET = "reset"


def language_from_path(path: str) -> str:
    """Pick the interface language from a URL path such as ``/pt/``."""
    if path[0:1] == "/" and len(path) >= 4 and path[3:4] == "/":
        lang = path[1:3]
        if lang == "pt":
            return "pt"
        raise ValueError(f"Invalid lang: {lang}")
    return "en"


def coords(r: Sequence[float], params: Params) -> Point:
    """Map simulation coordinates in metres to window coordinates in pixels."""
    x, y = r
    return (
        x * PX_PER_M - params.viewport_width / 4.0,
        y * PX_PER_M - 3.0 * params.viewport_height / 8.0,
    )


def format_time(secs: float) -> str:
    """Format a duration in seconds as ``MM:SS.mmm``."""
    minutes = max(0, math.trunc(secs / 60.0))
    seconds = max(0, math.trunc(math.fmod(secs, 60.0)))
    millis = max(0, math.floor(math.fmod(secs * 1000.0, 1000.0) + 0.5))
    return f"{minutes:02}:{seconds:02}.{millis:03}"


def reached_end(position: Sequence[float], params: Params) -> bool:
    """Whether the body centred at ``position`` has reached or passed the end."""
    end_x, end_y = coords(params.end, params)
    px, py = position
    dx = px - end_x
    dy = py - (end_y + MAIN_BODY_RADIUS)
    return dx * dx + dy * dy < PX_PER_M / 2.0 or px > end_x + PX_PER_M / 6.0


def set_start_x(params: Params, value: float) -> bool:
    """Move the start horizontally if it stays more than 2 m left of the end."""
    if params.end[0] > value + 2.0:
        params.start = (value, params.start[1])
        return True
    return False


def set_start_y(params: Params, value: float) -> bool:
    """Move the start vertically if it stays more than 2 m above the end."""
    if params.end[1] < value - 2.0:
        params.start = (params.start[0], value)
        return True
    return False


def set_end_x(params: Params, value: float) -> bool:
    """Move the end horizontally if it stays more than 2 m right of the start."""
    if params.start[0] < value - 2.0:
        params.end = (value, params.end[1])
        return True
    return False


def set_end_y(params: Params, value: float) -> bool:
    """Move the end vertically if it stays more than 2 m below the start."""
    if params.start[1] > value + 2.0:
        params.end = (params.end[0], value)
        return True
    return False


def generate_path(params: Params) -> list[Segment]:
    """Solve the discrete brachistochrone and return its segments in window coordinates."""
    n = int(params.grid_resolution)
    if n <= 0:
        raise ValueError(f"grid resolution must be positive: {n}")
    largest = max(params.start[1], params.end[0])
    mu = largest / n
    if not mu > 0:
        raise ValueError("start height and end distance must not both be zero")
    inverse = 1.0 / mu
    start = (inverse * params.start[0], inverse * params.start[1])
    end = (inverse * params.end[0], inverse * params.end[1])

    solver = Brachistochrone(n, mu, start, end)
    solver.solve()

    points = [
        coords((mu * x, mu * y), params) for _, (x, y) in solver.path_iter(start)
    ]
    return list(zip(points, points[1:]))


def straight_path(params: Params) -> list[Segment]:
    """The single straight segment from start to end, offset under the body."""
    ox, oy = PATH_SPAWN_OFFSET
    sx, sy = coords(params.start, params)
    ex, ey = coords(params.end, params)
    return [((sx + ox, sy + oy), (ex + ox, ey + oy))]


class Controller:
    """State of the start/reset button, the track and the simulation timer."""

    def __init__(self, params: Params, localization: Localization) -> None:
        self.params = params
        self.localization = localization
        self.state = ButtonState.START
        self.label = localization.get("start")
        self.segments: list[Segment] = []
        self.body_position: Point | None = None
        self.started_at: float | None = None
        self.clock: Callable[[], float] = time.monotonic

    def press(self) -> None:
        """Handle a press of the start/reset button."""
        if self.state is ButtonState.START:
            if self.params.straight_line:
                self.label = self.localization.get("reset")
                self.state = ButtonState.RESET
                self.segments = straight_path(self.params)
                self.body_position = coords(self.params.start, self.params)
                self.started_at = self.clock()
            else:
                self.label = "..."
                self.state = ButtonState.WAITING
        elif self.state is ButtonState.RESET:
            self.label = self.localization.get("start")
            self.state = ButtonState.START
            self.started_at = None
            self.body_position = None
            self.segments = []

    def path_ready(self, segments: Sequence[Segment]) -> None:
        """Accept a generated path, place the body and start the timer."""
        if self.state is not ButtonState.WAITING:
            return
        x, y = coords(self.params.start, self.params)
        # Nudge the body right so it does not spawn inside the track.
        self.body_position = (x + MAIN_BODY_RADIUS, y)
        self.segments = list(segments)
        self.label = self.localization.get("reset")
        self.state = ButtonState.RESET
        self.started_at = self.clock()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brachistodp",
        description="Compute a brachistochrone track and print its segments in window coordinates.",
    )
    defaults = Params()
    parser.add_argument("--start", nargs=2, type=float, metavar=("X", "Y"), default=defaults.start)
    parser.add_argument("--end", nargs=2, type=float, metavar=("X", "Y"), default=defaults.end)
    parser.add_argument("--grid-resolution", type=int, default=defaults.grid_resolution)
    parser.add_argument("--straight-line", action="store_true")
    parser.add_argument("--width", type=float, default=DEFAULT_VIEWPORT[0])
    parser.add_argument("--height", type=float, default=DEFAULT_VIEWPORT[1])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    low, high = GRID_RESOLUTION_RANGE
    if not low <= args.grid_resolution <= high:
        parser.error(f"grid resolution must be between {low} and {high}")
    start = (args.start[0], args.start[1])
    end = (args.end[0], args.end[1])
    if not end[0] > start[0] + 2.0:
        parser.error("the end must lie more than 2 m to the right of the start")
    if not start[1] > end[1] + 2.0:
        parser.error("the end must lie more than 2 m below the start")

    params = Params(
        start=start,
        end=end,
        grid_resolution=args.grid_resolution,
        viewport_width=args.width,
        viewport_height=args.height,
        straight_line=args.straight_line,
    )
    segments = straight_path(params) if params.straight_line else generate_path(params)
    for (x1, y1), (x2, y2) in segments:
        print(f"{x1:.3f} {y1:.3f} {x2:.3f} {y2:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())