"""First-person views: a carriage interior in perspective and blinking eyelids."""

from __future__ import annotations

import math
from typing import Callable

from .canvas import BLACK, Screen, pxl_bg, pxl_fg

_EYELID = pxl_bg(" ", 232)


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _slope(x1: int, y1: int, x2: int, y2: int) -> float:
    if x1 == x2:
        raise ValueError("slope is undefined (vertical line)")
    return (y2 - y1) / (x2 - x1)


def calculate_x(x1: int, y1: int, x2: int, y2: int, y_need_x: int) -> int:
    """Horizontal position for a height along the line's slope, offset from x1."""
    slope = _slope(x1, y1, x2, y2)
    if slope == 0:
        raise ValueError("no x for a given y on a horizontal line")
    return _round_half_away(y_need_x / slope) + x1


def calculate_y(x1: int, y1: int, x2: int, y2: int, x_need_y: int) -> int:
    """The line's y at a given x, rounded to the nearest cell."""
    slope = _slope(x1, y1, x2, y2)
    return _round_half_away(y1 + slope * (x_need_y - x1))


def _forward_chair(screen: Screen, frame: int, x: int, y: int, scale: int) -> None:
    vanishing_x = screen.width // 2
    chair_height = screen.height // 12 * scale
    chair_width = screen.width // 16 * scale
    seat = pxl_fg("%", 52)
    border = pxl_fg("%", 255)
    half = chair_width // 2

    screen.fill_circle(x + half, y - chair_height, half, seat)
    screen.circle(x + half, y - chair_height, half, border)
    screen.fill_rect(x, y, x + chair_width, y - chair_height, seat)

    end_y = calculate_y(x, y, vanishing_x, 0, x - half)
    screen.line(x, y, x - half, end_y, seat)
    end_y = calculate_y(x + chair_width, y, vanishing_x, 0, x + half)
    screen.line(x + chair_width, y, x + half, end_y, seat)
    screen.rect(x, y, x + chair_width, y - chair_height, border)


def forward_view(screen: Screen, frame: int) -> None:
    """Looking down a carriage aisle towards a vanishing point."""
    seat = pxl_fg("%", 58)
    floor = pxl_fg("#", 236)
    walkway = pxl_fg("#", 238)
    shadow = pxl_fg("#", BLACK)

    width, height = screen.width, screen.height
    vanishing_x = width // 2
    offset = 6
    angle = width // 3
    floor_height = height - height // 6

    screen.fill_rect(0, 0, width, height, floor)
    screen.fill_rect(vanishing_x - offset, height, vanishing_x + offset, 0, walkway)
    for spread in range(1, 7):
        screen.line(angle, height, vanishing_x - spread, 0, walkway)
        screen.line(width - angle, height, vanishing_x + spread, 0, walkway)
    for start in range(angle, width - angle + 1):
        screen.line(start, height, vanishing_x, 0, walkway)

    screen.fill_rect(0, 0, width, floor_height, seat)
    screen.fill_rect(vanishing_x - 2 * offset, 0, vanishing_x + 2 * offset, floor_height, shadow)

    wall_rows = height // 2 + height // 4
    edge_x = calculate_x(angle, height, vanishing_x - offset, 0, floor_height)
    for i in range(wall_rows):
        if i > height // 4:
            start_x = calculate_x(angle, height, vanishing_x - offset, 0, floor_height - i)
        else:
            start_x = edge_x
        screen.line(0, wall_rows - i, start_x, floor_height - i, seat)
        screen.line(edge_x, floor_height, edge_x, 0, shadow)

    for row in range(floor_height, height, 12):
        start_x = calculate_x(angle, height, vanishing_x, 0, row)
        _forward_chair(screen, frame, start_x, row, 2)


def open_eyes(screen: Screen, frame: int) -> bool:
    """Draw eyelids parting from the middle; True while they are still closing the view."""
    step = _trunc_div(frame, 2)
    start = screen.height // 2
    curve = step * step
    screen.fill_rect(0, 0, screen.width, start - curve, _EYELID)
    screen.fill_rect(0, screen.height, screen.width, start + curve, _EYELID)
    return curve - start <= 0


def close_eyes(screen: Screen, frame: int) -> bool:
    """Draw eyelids coming in from the edges; True once they would meet."""
    step = _trunc_div(frame, 2)
    curve = -(step + step)
    screen.fill_rect(0, 0, screen.width, -curve, _EYELID)
    screen.fill_rect(0, screen.height, screen.width, screen.height + curve, _EYELID)
    return curve >= screen.height // 2


def waking_up(screen: Screen, frame: int) -> bool:
    """Play the blinking wake-up sequence; False once the frame is past it."""
    blink: Callable[[Screen, int], bool]
    if frame < 21:
        blink = open_eyes
    elif frame <= 31:
        frame -= 20
        blink = close_eyes
    elif frame <= 36:
        frame -= 30
        blink = open_eyes
    elif frame <= 46:
        frame -= 45
        blink = close_eyes
    elif 70 < frame < 90:
        frame -= 70
        blink = open_eyes
    else:
        return False
    blink(screen, frame)
    return True