"""The farming game: a top-down plot for planting and a side view of the valley."""

from __future__ import annotations

import enum
import random
from typing import List, Optional, Protocol, Tuple

from .canvas import BLACK, GREEN, BorderStyle, Screen, pxl, pxl_bg, pxl_fbg, pxl_fg
from .plants import Melon, Puddle, Pumpkin, Weed
from .scenes import draw_mountains, planting_view, rain


class GameRandom(Protocol):
    def random(self) -> float: ...

    def randrange(self, start: int, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


class HandOption(enum.Enum):
    """What the player is holding."""

    CLICKER = enum.auto()
    WATER = enum.auto()
    PUMPKIN_SEEDS = enum.auto()
    MELON_SEEDS = enum.auto()


_MENU_HANDS = (
    HandOption.CLICKER,
    HandOption.WATER,
    HandOption.PUMPKIN_SEEDS,
    HandOption.MELON_SEEDS,
)
_BIRD_MODE = 4
_MENU_ENTRIES = 5

_DAY_LENGTH = 1200
_RAIN_START = 400
_RAIN_END = 800
_NIGHTFALL = 600

_WEED_CHANCE = 0.01
_HARVEST_FOOD = 20
_WATERING = 20
_FULL_CAN = 6

_LETTERS = (
    [chr(c) for c in range(ord("a"), ord("z") + 1)]
    + [chr(c) for c in range(ord("A"), ord("Z") + 1)]
    + [" "]
)
_BARCODE = (True, False, True, False, False, True)

MenuBounds = Tuple[int, int, int, int]


def _trunc_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


class Game:
    """State of the farm: crops, seeds, water, weeds and the time of day."""

    def __init__(self, rng: Optional[GameRandom] = None) -> None:
        self.rng: GameRandom = rng if rng is not None else random.Random()
        self.hunger = 100
        self.pumpkins: List[Pumpkin] = []
        self.melons: List[Melon] = []
        self.p_seeds = 10
        self.m_seeds = 2
        self.in_hand = HandOption.CLICKER
        self.topview = True
        self.water = 4
        self.puddles: List[Puddle] = []
        self.time = 0
        self.weeds: List[Weed] = []

    def run(self, screen: Screen) -> None:
        """Draw and update one frame of the game."""
        if self.topview:
            self.menu(screen)
        else:
            self.draw_landscape(screen)
        if _RAIN_START < self.time < _RAIN_END:
            rain(screen, self.time)
            for crop in [*self.pumpkins, *self.melons]:
                crop.water(1)
        if self.rng.random() < _WEED_CHANCE:
            self.weeds.append(
                Weed(self.rng.randrange(0, screen.width), self.rng.randrange(0, screen.height))
            )

    def _draw_menu_entry(self, screen: Screen, index: int, bounds: MenuBounds, box_size: int) -> None:
        x1, x2, y1, y2 = bounds
        if index < len(_MENU_HANDS) and self.in_hand is _MENU_HANDS[index]:
            style = BorderStyle.simple().with_colors(GREEN, BLACK)
        else:
            style = BorderStyle.simple()
        screen.rect_border(x1, y1, x2, y2, style)

        if index == 0:
            handle = pxl_fg("+", 130)
            blade = pxl_fg("#", 240)
            screen.line(x1 + 1, y2 - 1, x2 - 1, box_size // 2, handle)
            screen.line(x2 - 1, box_size // 2, x1 + 2, y1 + 2, blade)
        elif index == 1:
            wave = pxl_fg("~", 33)
            for j in range(min(self.water, _FULL_CAN)):
                screen.line(x1 + 1, y2 - 1 - j, x2 - 1, y2 - 1 - j, wave)
            screen.print_fbg(x1 + 1, y2 - 1, "Water", 33, BLACK)
        elif index in (2, 3):
            body_color, seeds = (166, self.p_seeds) if index == 2 else (34, self.m_seeds)
            cx = (x1 + x2) // 2
            cy = (y1 + y2) // 2
            screen.fill_circle(cx, cy, 2, pxl_bg(" ", body_color))
            screen.set_pxl(cx, cy, pxl_fbg("*", 22, body_color))
            screen.print(x1 + 1, y2 - 1, f"Seeds:{seeds}")
        else:
            screen.print(x1 + 1, y2 - 2, "Bird")
            screen.print(x1 + 1, y2 - 1, "Mode")

    def menu(self, screen: Screen) -> None:
        """Top-down plot with the tool menu; clicks pick a tool or act on the plot."""
        planting_view(screen)
        box_size = screen.height // 8

        menu_bounds: List[MenuBounds] = []
        for i in range(_MENU_ENTRIES):
            y1 = 1 + i * box_size
            y2 = y1 + box_size - 1
            x1 = 1
            x2 = x1 + box_size
            bounds = (x1, x2, y1, y2)
            self._draw_menu_entry(screen, i, bounds, box_size)
            menu_bounds.append(bounds)

        press = screen.get_mouse_press()
        if press is not None:
            mx, my = press
            for i, (x1, x2, y1, y2) in enumerate(menu_bounds):
                if x1 <= mx <= x2 and y1 <= my <= y2:
                    if i == _BIRD_MODE:
                        self.topview = False
                        self.in_hand = HandOption.CLICKER
                    else:
                        self.in_hand = _MENU_HANDS[i]
                    break
            else:
                self.try_plant(mx, my)
                self.try_water(mx, my)
                self.try_harvest(mx, my)

        for pumpkin in self.pumpkins:
            pumpkin.draw(screen)
            pumpkin.grow(self.rng)
        for melon in self.melons:
            melon.draw(screen)
            melon.grow(self.rng)
        for puddle in self.puddles:
            puddle.draw(screen)
        for weed in self.weeds:
            weed.draw(screen)
            weed.grow(self.rng)

    def is_tile_occupied(self, x: int, y: int) -> bool:
        """Whether a crop or weed already covers (x, y)."""
        return any(thing.contains_coords(x, y) for thing in [*self.pumpkins, *self.melons, *self.weeds])

    def try_plant(self, x: int, y: int) -> None:
        """Plant the seed in hand at (x, y) if there is room and a seed left."""
        if self.is_tile_occupied(x, y):
            return
        if self.in_hand is HandOption.PUMPKIN_SEEDS and self.p_seeds > 0:
            self.pumpkins.append(Pumpkin(x, y))
            self.p_seeds -= 1
        elif self.in_hand is HandOption.MELON_SEEDS and self.m_seeds > 0:
            self.melons.append(Melon(x, y))
            self.m_seeds -= 1

    def try_water(self, x: int, y: int) -> None:
        """Water a crop at (x, y), or refill the can from a puddle there."""
        if self.in_hand is not HandOption.WATER:
            return
        for crops in (self.pumpkins, self.melons):
            for crop in crops:
                if self.water <= 0:
                    break
                if crop.contains_coords(x, y):
                    crop.water(_WATERING)
                    self.water -= 1
                    return
        if any(puddle.contains_coords(x, y) for puddle in self.puddles):
            self.water = _FULL_CAN

    def try_harvest(self, x: int, y: int) -> None:
        """Pick a ripe crop at (x, y) for food and seeds, or pull a weed."""
        if self.in_hand is not HandOption.CLICKER:
            return
        for index, pumpkin in enumerate(self.pumpkins):
            if pumpkin.contains_coords(x, y) and pumpkin.is_ready():
                self.p_seeds += self.rng.randint(1, 3)
                del self.pumpkins[index]
                self.hunger += _HARVEST_FOOD
                return
        for index, melon in enumerate(self.melons):
            if melon.contains_coords(x, y) and melon.is_ready():
                self.m_seeds += self.rng.randint(1, 3)
                del self.melons[index]
                self.hunger += _HARVEST_FOOD
                return
        for index, weed in enumerate(self.weeds):
            if weed.contains_coords(x, y):
                del self.weeds[index]
                return

    def draw_landscape(self, screen: Screen) -> None:
        """Side view of the valley with the crops below the soil line."""
        draw_mountains(screen, 0, self.time < _NIGHTFALL)
        width, height = screen.width, screen.height

        arrow_width = width // 20
        arrow_height = height // 10
        arrow = pxl_bg(" ", 82)
        screen.fill_triangle(
            1, arrow_height // 2 + 1, arrow_width, 1, arrow_width, arrow_height, arrow
        )
        screen.fill_rect(arrow_width, arrow_height - 2, arrow_width * 2, 3, arrow)

        press = screen.get_mouse_press()
        if press is not None:
            mx, my = press
            if 1 <= mx <= arrow_width * 2 and 1 <= my <= arrow_height:
                self.topview = True

        soil_line = height // 2 + height // 4

        def map_y(y: int) -> int:
            clamped = min(max(y, 0), 100)
            return height - clamped * (height - soil_line) // 100

        for pumpkin in self.pumpkins:
            pumpkin.draw_at(screen, pumpkin.x, map_y(pumpkin.y))
            pumpkin.grow(self.rng)
        for melon in self.melons:
            melon.draw_at(screen, melon.x, map_y(melon.y))
            melon.grow(self.rng)
        for weed in self.weeds:
            weed.draw_at(screen, weed.x, map_y(weed.y))
            weed.grow(self.rng)

    def add_time(self, amount: int) -> None:
        """Advance the clock, wrapping at the end of the day."""
        self.time = _trunc_mod(self.time + amount, _DAY_LENGTH)


def read_letter(screen: Screen) -> Optional[str]:
    """The first letter or space pressed this frame, lower case checked first."""
    return next((ch for ch in _LETTERS if screen.is_key_pressed(ch)), None)


def barcode(screen: Screen, box: Tuple[int, int, int, int]) -> None:
    """Draw striped barcode rows across the box (x1, y1, x2, y2)."""
    x1, y1, x2, y2 = box
    for row in range(y1, y2 + 1):
        if _BARCODE[row % len(_BARCODE)]:
            stripe = pxl("-") if row % 4 == 0 else pxl("=")
            screen.line(x1, row, x2, row, stripe)