"""The application: title screen, game loop and terminal front end."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .banner import banner_height, render
from .canvas import BLACK, GREY, Screen
from .dialogue import ENTER
from .game import Game, GameRandom
from .plants import Puddle
from .scenes import draw_mountains_intro

ESCAPE = "escape"
SPACE = " "

_TITLE = "The Life and Times"
_SUBTITLE = "of Michael K."
_CREDITS = "A farming game\nInspired by J. M. Coetzee"
_PROMPT = "Press Space to start"
_TITLE_BG = 236
_PROMPT_BG = 94

_DEFAULT_FPS = 10.0

_MOUSE_ON = "\x1b[?1000h\x1b[?1006h"
_MOUSE_OFF = "\x1b[?1006l\x1b[?1000l"
_MOUSE_RE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_OTHER_SEQ_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z~]|\x1bO.")

Point = Tuple[int, int]


def title(screen: Screen, frame: int) -> None:
    """Draw the title, typed out one letter per frame, then the start prompt."""
    width = screen.width
    heading = _TITLE[:frame]
    start_x = width // 2 - len(heading) * 3
    start_y = 3
    screen.print_fbg(start_x, start_y, render(heading), GREY, _TITLE_BG)
    if frame > len(_TITLE):
        subtitle = _SUBTITLE[: max(frame - len(_TITLE), 1)]
        screen.print_fbg(start_x + 16, start_y + 8, render(subtitle), GREY, _TITLE_BG)
        screen.print_fbg(width // 2 - 10, start_y + 16, _CREDITS, GREY, _TITLE_BG)
        if frame % 4 != 0:
            screen.print_fbg(
                width // 2 - 12, start_y + 24 + banner_height(), _PROMPT, BLACK, _PROMPT_BG
            )


class App:
    """The whole program state, advanced one frame at a time."""

    def __init__(self, width: int, height: int, rng: Optional[GameRandom] = None) -> None:
        self.screen = Screen(width, height)
        self.game = Game(rng)
        pond = Puddle(width - 6, 4)
        pond.radius = 4
        self.game.puddles = [
            Puddle(width, 5),
            Puddle(width - 2, 0),
            Puddle(width - 2, 1),
            pond,
        ]
        self.left_intro = False
        self.frame = 0

    def step(self, keys: Iterable[str], mouse_press: Optional[Point]) -> bool:
        """Run one frame with this frame's input; False when the player quits."""
        self.screen.set_input(keys, mouse_press)
        self.screen.clear()
        self.frame += 1
        if self.screen.is_key_pressed(ESCAPE):
            return False
        if self.left_intro:
            self.game.run(self.screen)
            self.game.add_time(1)
        else:
            draw_mountains_intro(self.screen, 1, False)
            title(self.screen, self.frame)
            self.left_intro = self.screen.is_key_pressed(SPACE)
        return True


def render_screen(screen: Screen, term) -> str:
    """The escape-coded text that paints the screen on a blessed terminal."""
    parts: List[str] = []
    for y in range(screen.height):
        parts.append(term.move_xy(0, y))
        current = None
        for x in range(screen.width):
            pixel = screen.get_pxl(x, y)
            colors = (pixel.fg, pixel.bg)
            if colors != current:
                parts.append(term.normal)
                if pixel.fg is not None:
                    parts.append(term.color(pixel.fg))
                if pixel.bg is not None:
                    parts.append(term.on_color(pixel.bg))
                current = colors
            parts.append(pixel.chr)
    parts.append(term.normal)
    return "".join(parts)


def _parse_input(raw: str) -> Tuple[Set[str], Optional[Point]]:
    """Key names and the first left-button press found in raw terminal input."""
    press: Optional[Point] = None
    for match in _MOUSE_RE.finditer(raw):
        button, col, row, kind = match.groups()
        if press is None and kind == "M" and int(button) == 0:
            press = (int(col) - 1, int(row) - 1)
    rest = _OTHER_SEQ_RE.sub("", _MOUSE_RE.sub("", raw))
    keys: Set[str] = set()
    for ch in rest:
        if ch == "\x1b":
            keys.add(ESCAPE)
        elif ch in "\r\n":
            keys.add(ENTER)
        elif ch.isprintable():
            keys.add(ch)
    return keys, press


def _read_frame_input(term, period: float) -> str:
    chunks: List[str] = []
    deadline = time.monotonic() + period
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        keystroke = term.inkey(timeout=remaining)
        if keystroke:
            chunks.append(str(keystroke))
    return "".join(chunks)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the game in the terminal until Escape is pressed."""
    import blessed

    parser = argparse.ArgumentParser(prog="michaelk", description="A small farming game.")
    parser.add_argument("--fps", type=float, default=_DEFAULT_FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    term = blessed.Terminal()
    app = App(max(term.width, 1), max(term.height, 1), random.Random(args.seed))
    period = 1.0 / args.fps
    out = sys.stdout
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        out.write(_MOUSE_ON)
        out.flush()
        try:
            while True:
                keys, press = _parse_input(_read_frame_input(term, period))
                if not app.step(keys, press):
                    break
                out.write(render_screen(app.screen, term))
                out.flush()
        finally:
            out.write(_MOUSE_OFF + term.normal)
            out.flush()
    return 0