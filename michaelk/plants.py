"""Crops, puddles and weeds that live on the farm plot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .canvas import Pixel, Screen, pxl_bg, pxl_fbg, pxl_fg


class RandomSource(Protocol):
    def random(self) -> float: ...


_SOIL = 94
_LEAF = 28
_DAMP_EARTH = 235
_ORANGE = 166
_LIGHT_GREEN = 118
_PUDDLE_BLUE = 33

_VINE = pxl_fbg("*", _LEAF, _SOIL)


def _chance(rng: RandomSource, probability: float) -> bool:
    return rng.random() < probability


def _within(cx: int, cy: int, x: int, y: int, radius: int) -> bool:
    dx = x - cx
    dy = y - cy
    return dx * dx + dy * dy <= radius * radius


def _water_radius(level: int) -> int:
    if level == 0:
        return 0
    if 1 <= level <= 10:
        return 1
    if 11 <= level <= 30:
        return 2
    return 3


def _body_radius(stage: int) -> int:
    if stage <= 29:
        return 0
    if stage <= 59:
        return 1
    if stage <= 75:
        return 2
    return 3


def _draw_vine(screen: Screen, x: int, y: int, segments: int) -> None:
    """Draw the first few of the four vine strokes hanging from (x, y)."""
    strokes = [
        (x, y, x + 1, y + 2),
        (x + 1, y + 2, x + 3, y + 3),
        (x - 1, y + 2, x - 3, y + 4),
        (x, y + 1, x, y + 5),
    ]
    for stroke in strokes[:segments]:
        screen.line(*stroke, _VINE)


def _draw_crop_vine(screen: Screen, x: int, y: int, stage: int) -> None:
    if stage <= 9:
        screen.set_pxl(x, y + 1, _VINE)
    elif stage <= 29:
        _draw_vine(screen, x, y, 1)
    elif stage <= 59:
        _draw_vine(screen, x, y, 2)
    elif stage <= 79:
        _draw_vine(screen, x, y, 3)
    else:
        _draw_vine(screen, x, y, 4)


def _draw_body(screen: Screen, x: int, y: int, radius: int, pixel: Pixel) -> None:
    if radius == 0:
        screen.set_pxl(x, y, pixel)
    else:
        screen.fill_circle(x, y, radius, pixel)


def _draw_water(screen: Screen, x: int, y: int, level: int) -> None:
    radius = _water_radius(level)
    if radius > 0:
        screen.fill_circle(x, y, radius, pxl_bg(" ", _DAMP_EARTH))


def _grown(stage: int, level: int, rng: RandomSource) -> tuple:
    """One growth tick: wetter crops grow faster and slowly dry out."""
    if _chance(rng, max(level, 1) / 100.0):
        stage += 1
    if level > 1 and _chance(rng, 0.09):
        level -= 1
    return stage, level


def _watered(level: int, amount: int) -> int:
    """The level wraps and always ends between 1 and 51."""
    return (level + amount) % 51 + 1


@dataclass
class Pumpkin:
    """A pumpkin planted at (x, y)."""

    x: int
    y: int
    growth_stage: int = 0
    water_lvl: int = 0

    def grow(self, rng: RandomSource) -> None:
        """Advance one tick of growth and drying."""
        self.growth_stage, self.water_lvl = _grown(self.growth_stage, self.water_lvl, rng)

    def contains_coords(self, x: int, y: int) -> bool:
        return _within(self.x, self.y, x, y, 2)

    def water(self, amount: int) -> None:
        """Add water; the level always ends between 1 and 51."""
        self.water_lvl = _watered(self.water_lvl, amount)

    def is_ready(self) -> bool:
        return self.growth_stage > 95

    def draw(self, screen: Screen) -> None:
        """Top-down view: damp earth, then the fruit."""
        _draw_water(screen, self.x, self.y, self.water_lvl)
        if self.growth_stage <= 29:
            body = pxl_fbg("o", _LEAF, _SOIL)
        elif self.growth_stage <= 95:
            body = pxl_fg("0", _ORANGE)
        else:
            body = pxl_fg("@", _ORANGE)
        _draw_body(screen, self.x, self.y, _body_radius(self.growth_stage), body)

    def draw_at(self, screen: Screen, x: int, y: int) -> None:
        """Side view at a given screen position: fruit, then vine."""
        if self.growth_stage <= 29:
            body = pxl_fbg("o", _LEAF, _SOIL)
        elif self.growth_stage <= 59:
            body = pxl_fg("O", _ORANGE)
        else:
            body = pxl_fg("@", _ORANGE)
        _draw_body(screen, x, y, _body_radius(self.growth_stage), body)
        _draw_crop_vine(screen, x, y, self.growth_stage)


@dataclass
class Melon:
    """A melon planted at (x, y)."""

    x: int
    y: int
    growth_stage: int = 0
    water_lvl: int = 0

    def grow(self, rng: RandomSource) -> None:
        """Advance one tick of growth and drying."""
        self.growth_stage, self.water_lvl = _grown(self.growth_stage, self.water_lvl, rng)

    def contains_coords(self, x: int, y: int) -> bool:
        return _within(self.x, self.y, x, y, 2)

    def water(self, amount: int) -> None:
        """Add water; the level always ends between 1 and 51."""
        self.water_lvl = _watered(self.water_lvl, amount)

    def is_ready(self) -> bool:
        return self.growth_stage > 95

    def draw(self, screen: Screen) -> None:
        """Top-down view: damp earth, then the fruit."""
        _draw_water(screen, self.x, self.y, self.water_lvl)
        if self.growth_stage <= 29:
            body = pxl_fg("*", _LEAF)
        elif self.growth_stage <= 59:
            body = pxl_fg("o", _LIGHT_GREEN)
        else:
            body = pxl_fg("0", _LIGHT_GREEN)
        _draw_body(screen, self.x, self.y, _body_radius(self.growth_stage), body)

    def draw_at(self, screen: Screen, x: int, y: int) -> None:
        """Side view at a given screen position: vine, then fruit."""
        if self.growth_stage <= 29:
            body = pxl_fg("*", _LEAF)
        elif self.growth_stage <= 59:
            body = pxl_fg("o", _LIGHT_GREEN)
        else:
            body = pxl_fg("O", _LIGHT_GREEN)
        _draw_crop_vine(screen, x, y, self.growth_stage)
        _draw_body(screen, x, y, _body_radius(self.growth_stage), body)


@dataclass
class Puddle:
    """A pool where the watering can is refilled."""

    x: int
    y: int
    radius: int = 2

    def draw(self, screen: Screen) -> None:
        screen.fill_circle(self.x, self.y, self.radius, pxl_fg("~", _PUDDLE_BLUE))

    def contains_coords(self, x: int, y: int) -> bool:
        return _within(self.x, self.y, x, y, self.radius)


@dataclass
class Weed:
    """A weed whose size cycles as it grows."""

    x: int
    y: int
    radius: int = 1

    def grow(self, rng: RandomSource) -> None:
        if _chance(rng, 0.1):
            self.radius = (self.radius + 1) % 3

    def draw(self, screen: Screen) -> None:
        pixel = pxl_fbg("X", _LEAF, _SOIL)
        if self.radius != 0:
            screen.fill_circle(self.x, self.y, self.radius, pixel)
        else:
            screen.set_pxl(self.x, self.y, pixel)

    def draw_at(self, screen: Screen, x: int, y: int) -> None:
        segments = self.radius + 1 if 0 <= self.radius <= 2 else 4
        _draw_vine(screen, x, y, segments)

    def contains_coords(self, x: int, y: int) -> bool:
        return _within(self.x, self.y, x, y, self.radius)