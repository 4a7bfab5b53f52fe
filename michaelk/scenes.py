"""Backdrops: the valley with its hills and dam, the planting plot and rain."""

from __future__ import annotations

import random
from typing import List, Protocol, Tuple

from .canvas import (
    DARK_BLUE,
    GREY,
    Color,
    Screen,
    pxl_bg,
    pxl_fbg,
    pxl_fg,
    smart_set_pxl,
)

_NIGHT = 236
_DAY = 81
_EARTH = 94
_HILL_DARK = 100
_HILL_PALE = 143
_HILL_LIGHT = 144
_PLOT_HILL = 130

_STARS = ("x", ".", "+", "o")
_STAR_COLORS = (241, 248, 245)

_SKY_SEED = 2
_RAIN_CHANCE = 0.03
_STAR_DENSITY = 0.3


class IntRandom(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def _dam(screen: Screen, x1: int, y1: int, x2: int, y2: int) -> None:
    screen.fill_rect(x1, y1 - 1, x2, y2 - 1, pxl_fg("@", DARK_BLUE))
    screen.fill_rect(x1, y1, x2, y2, pxl_fg("#", GREY))


def _night_sky(
    screen: Screen,
    frame: int,
    skybox: Tuple[int, int, int, int],
    density: float,
    bg: Color,
) -> None:
    """Scatter stars over the box; the same seed gives the same sky every frame."""
    rng = random.Random(_SKY_SEED)
    left, top, right, bottom = skybox
    for x in range(left, right):
        for y in range(top, bottom):
            if rng.random() < density:
                star = _STARS[rng.randrange(len(_STARS))]
                color = _STAR_COLORS[rng.randrange(len(_STAR_COLORS))]
                screen.set_pxl(x + frame, y, pxl_fbg(star, color, bg))


def _landscape(screen: Screen, frame: int, day: bool, skyline: int, soil_line: int) -> None:
    width, height = screen.width, screen.height
    if day:
        screen.fill_rect(0, 0, width, skyline, pxl_bg(" ", _DAY))
    else:
        screen.fill_rect(0, 0, width, skyline, pxl_bg(" ", _NIGHT))
        _night_sky(screen, frame, (0, 0, width, skyline), _STAR_DENSITY, _NIGHT)

    ground = pxl_bg(" ", _EARTH)
    dark_hill = pxl_fg("#", _HILL_DARK)
    pale_hill = pxl_fg("#", _HILL_PALE)
    light_hill = pxl_fg("#", _HILL_LIGHT)

    screen.fill_rect(0, height, width, skyline, ground)

    radius = width // 2
    base = height + width // 4
    screen.fill_circle(width, base + 2, radius, dark_hill)
    screen.fill_circle(width + 2, base + 2, radius, light_hill)
    screen.fill_circle(width + 4, base + 2, radius, dark_hill)
    screen.fill_circle(width + 2, base + 4, radius, pale_hill)
    screen.fill_circle(width // 4, base + 2, radius, dark_hill)

    screen.fill_rect(0, height, width, soil_line, ground)
    _dam(screen, width // 2 + width // 8, soil_line, width - width // 4, soil_line + 3)


def draw_mountains_intro(screen: Screen, frame: int, day: bool) -> None:
    """The title-screen valley: a tall sky over hills and a dam near the bottom."""
    height = screen.height
    _landscape(screen, frame, day, height // 2, height - height // 8)


def draw_mountains(screen: Screen, frame: int, day: bool) -> None:
    """The side view of the farm: sky, hills, soil and the dam."""
    height = screen.height
    _landscape(screen, frame, day, height // 4 + height // 6, height // 2 + height // 4)


def rock_array(screen: Screen, count: int, rng: IntRandom) -> List[Tuple[int, int, int]]:
    """Random rocks below the soil line, as (x, y, height) triples."""
    soil_line = screen.height // 2 + screen.height // 4
    rocks = []
    for _ in range(count):
        rock_height = rng.randrange(1, 4)
        y = rng.randrange(soil_line, screen.height)
        x = rng.randrange(0, screen.width)
        rocks.append((x, y, rock_height))
    return rocks


def planting_view(screen: Screen) -> None:
    """The top-down plot: bare earth with a hill in the bottom-right corner."""
    width, height = screen.width, screen.height
    screen.fill_rect(0, height, width, 0, pxl_fbg("#", _EARTH, _EARTH))
    screen.fill_circle(width, height, height // 2, pxl_fbg("#", _PLOT_HILL, _EARTH))


def rain(screen: Screen, time: int) -> None:
    """Raindrops falling one row per time step, keeping what lies beneath."""
    width, height = screen.width, screen.height
    rng = random.Random(_SKY_SEED)
    drop = pxl_fg(".", DARK_BLUE)
    for x in range(width):
        for y in range(height):
            if rng.random() < _RAIN_CHANCE:
                smart_set_pxl(screen, x, (y + time) % height, drop)