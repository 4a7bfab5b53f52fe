"""A character-cell drawing surface with primitives for lines, shapes and text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional, Tuple

Color = Optional[int]
"""A 256-colour terminal palette index, or None for the terminal default."""

BLACK = 0
DARK_YELLOW = 3
DARK_BLUE = 4
GREY = 7
GREEN = 10
BLUE = 12

Point = Tuple[int, int]


@dataclass(frozen=True)
class Pixel:
    """One character cell: a glyph with foreground and background colours."""

    chr: str = " "
    fg: Color = None
    bg: Color = None


def pxl(chr: str) -> Pixel:
    """A pixel with default colours."""
    return Pixel(chr)


def pxl_fg(chr: str, fg: Color) -> Pixel:
    """A pixel with a foreground colour."""
    return Pixel(chr, fg=fg)


def pxl_bg(chr: str, bg: Color) -> Pixel:
    """A pixel with a background colour."""
    return Pixel(chr, bg=bg)


def pxl_fbg(chr: str, fg: Color, bg: Color) -> Pixel:
    """A pixel with both colours set."""
    return Pixel(chr, fg=fg, bg=bg)


@dataclass(frozen=True)
class BorderStyle:
    """The eight pixels used to draw a rectangle border."""

    top_left: Pixel
    top_right: Pixel
    bottom_left: Pixel
    bottom_right: Pixel
    top: Pixel
    bottom: Pixel
    left: Pixel
    right: Pixel

    @classmethod
    def _from_chars(cls, chars: str) -> "BorderStyle":
        tl, tr, bl, br, horizontal, vertical = chars
        return cls(
            top_left=pxl(tl),
            top_right=pxl(tr),
            bottom_left=pxl(bl),
            bottom_right=pxl(br),
            top=pxl(horizontal),
            bottom=pxl(horizontal),
            left=pxl(vertical),
            right=pxl(vertical),
        )

    @classmethod
    def simple(cls) -> "BorderStyle":
        """Thin box-drawing border."""
        return cls._from_chars("┌┐└┘─│")

    @classmethod
    def heavy(cls) -> "BorderStyle":
        """Heavy box-drawing border."""
        return cls._from_chars("┏┓┗┛━┃")

    def with_colors(self, fg: Color, bg: Color) -> "BorderStyle":
        """The same border with every pixel recoloured."""
        def recolor(p: Pixel) -> Pixel:
            return replace(p, fg=fg, bg=bg)

        return BorderStyle(
            top_left=recolor(self.top_left),
            top_right=recolor(self.top_right),
            bottom_left=recolor(self.bottom_left),
            bottom_right=recolor(self.bottom_right),
            top=recolor(self.top),
            bottom=recolor(self.bottom),
            left=recolor(self.left),
            right=recolor(self.right),
        )


def _line_points(start_x: int, start_y: int, end_x: int, end_y: int) -> Iterator[Point]:
    """Cells of a line between two points, ends included (Bresenham)."""
    if end_y == start_y:
        lo, hi = sorted((start_x, end_x))
        for x in range(lo, hi + 1):
            yield x, start_y
        return
    if end_x == start_x:
        lo, hi = sorted((start_y, end_y))
        for y in range(lo, hi + 1):
            yield start_x, y
        return

    def low(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
        dx = x1 - x0
        dy = y1 - y0
        yi = 1
        if dy < 0:
            yi, dy = -1, -dy
        d = 2 * dy - dx
        y = y0
        for x in range(x0, x1 + 1):
            yield x, y
            if d > 0:
                y += yi
                d -= 2 * dx
            d += 2 * dy

    def high(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
        dx = x1 - x0
        dy = y1 - y0
        xi = 1
        if dx < 0:
            xi, dx = -1, -dx
        d = 2 * dx - dy
        x = x0
        for y in range(y0, y1 + 1):
            yield x, y
            if d > 0:
                x += xi
                d -= 2 * dy
            d += 2 * dx

    if abs(end_y - start_y) < abs(end_x - start_x):
        if start_x > end_x:
            yield from low(end_x, end_y, start_x, start_y)
        else:
            yield from low(start_x, start_y, end_x, end_y)
    elif start_y > end_y:
        yield from high(end_x, end_y, start_x, start_y)
    else:
        yield from high(start_x, start_y, end_x, end_y)


def _orient2d(a: Point, b: Point, c: Point) -> int:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _triangle_interior(
    width: int, height: int, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int
) -> Iterator[Point]:
    """Interior cells of a triangle, clipped to the screen, by edge functions."""
    v0 = (x1, y1)
    v1 = (x2, y2)
    v2 = (x3, y3)
    # Only counter-clockwise triangles fill, so fix the winding.
    cross = (v1[1] - v0[1]) * (v2[0] - v1[0]) - (v1[0] - v0[0]) * (v2[1] - v1[1])
    if cross > 0:
        v1, v2 = v2, v1

    min_x = max(min(v0[0], v1[0], v2[0]), 0)
    max_x = min(max(v0[0], v1[0], v2[0]), width - 1)
    min_y = max(min(v0[1], v1[1], v2[1]), 0)
    max_y = min(max(v0[1], v1[1], v2[1]), height - 1)

    a01, b01 = v0[1] - v1[1], v1[0] - v0[0]
    a12, b12 = v1[1] - v2[1], v2[0] - v1[0]
    a20, b20 = v2[1] - v0[1], v0[0] - v2[0]

    # Fill-rule bias: top-left edges keep 0, the others lose one.
    bias0 = 0 if v1[1] > v2[1] else -1
    bias1 = 0 if v2[1] > v0[1] else -1
    bias2 = 0 if v0[1] > v1[1] else -1

    p = (min_x, min_y)
    w0_row = _orient2d(v1, v2, p) + bias0
    w1_row = _orient2d(v2, v0, p) + bias1
    w2_row = _orient2d(v0, v1, p) + bias2

    for y in range(min_y, max_y):
        w0, w1, w2 = w0_row, w1_row, w2_row
        for x in range(min_x, max_x):
            if (w0 | w1 | w2) >= 0:
                yield x, y
            w0 += a12
            w1 += a20
            w2 += a01
        w0_row += b12
        w1_row += b20
        w2_row += b01


def _circle_offsets(radius: int) -> Iterator[Point]:
    """Midpoint-circle steps (dx, dy) for one octant, after the axis points."""
    rx, ry = 0, radius
    d = 3 - 2 * radius
    while ry >= rx:
        rx += 1
        if d > 0:
            ry -= 1
            d += 4 * (rx - ry) + 10
        else:
            d += 4 * rx + 6
        yield rx, ry


class Screen:
    """A fixed-size grid of pixels plus the input seen during the current frame."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [[Pixel()] * width for _ in range(height)]
        self._keys: frozenset = frozenset()
        self._mouse_press: Optional[Point] = None

    def __str__(self) -> str:
        return "\n".join("".join(p.chr for p in row) for row in self._cells)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pxl(self, x: int, y: int) -> Pixel:
        """The pixel at (x, y); IndexError outside the screen."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} screen")
        return self._cells[y][x]

    def set_pxl(self, x: int, y: int, pixel: Pixel) -> None:
        """Set one pixel; positions outside the screen are ignored."""
        if self._in_bounds(x, y):
            self._cells[y][x] = pixel

    def clear(self) -> None:
        """Reset every cell to a blank default pixel."""
        blank = Pixel()
        for row in self._cells:
            row[:] = [blank] * self.width

    def print(self, x: int, y: int, text: str) -> None:
        """Write text at (x, y) in default colours; newlines start a new row at x."""
        self.print_fbg(x, y, text, None, None)

    def print_fbg(self, x: int, y: int, text: str, fg: Color, bg: Color) -> None:
        """Write coloured text at (x, y), clipped to the screen."""
        for row, line_text in enumerate(text.split("\n")):
            for col, ch in enumerate(line_text):
                self.set_pxl(x + col, y + row, Pixel(ch, fg, bg))

    def _span(self, x1: int, x2: int, y: int, pixel: Pixel) -> None:
        if not 0 <= y < self.height:
            return
        lo = max(min(x1, x2), 0)
        hi = min(max(x1, x2), self.width - 1)
        if lo <= hi:
            self._cells[y][lo : hi + 1] = [pixel] * (hi - lo + 1)

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, pixel: Pixel) -> None:
        """Fill the rectangle with corners (x1, y1) and (x2, y2), inclusive."""
        lo, hi = sorted((y1, y2))
        for y in range(max(lo, 0), min(hi, self.height - 1) + 1):
            self._span(x1, x2, y, pixel)

    def rect(self, x1: int, y1: int, x2: int, y2: int, pixel: Pixel) -> None:
        """Outline a rectangle with one pixel."""
        self.line(x1, y1, x2, y1, pixel)
        self.line(x2, y1, x2, y2, pixel)
        self.line(x1, y2, x2, y2, pixel)
        self.line(x1, y1, x1, y2, pixel)

    def rect_border(self, x1: int, y1: int, x2: int, y2: int, style: BorderStyle) -> None:
        """Outline a rectangle with a border style."""
        min_x, max_x = sorted((x1, x2))
        min_y, max_y = sorted((y1, y2))
        self._span(min_x, max_x, min_y, style.top)
        self._span(min_x, max_x, max_y, style.bottom)
        for y in range(min_y, max_y + 1):
            self.set_pxl(min_x, y, style.left)
            self.set_pxl(max_x, y, style.right)
        self.set_pxl(min_x, min_y, style.top_left)
        self.set_pxl(max_x, min_y, style.top_right)
        self.set_pxl(min_x, max_y, style.bottom_left)
        self.set_pxl(max_x, max_y, style.bottom_right)

    def line(self, x1: int, y1: int, x2: int, y2: int, pixel: Pixel) -> None:
        """Draw a line; the parts outside the screen are dropped."""
        for x, y in _line_points(x1, y1, x2, y2):
            self.set_pxl(x, y, pixel)

    def circle(self, x: int, y: int, radius: int, pixel: Pixel) -> None:
        """Outline a circle around (x, y)."""
        if radius < 0:
            raise ValueError(f"radius must not be negative, got {radius}")
        for px, py in ((x, y + radius), (x, y - radius), (x + radius, y), (x - radius, y)):
            self.set_pxl(px, py, pixel)
        for dx, dy in _circle_offsets(radius):
            for px, py in (
                (x + dx, y + dy), (x - dx, y + dy), (x + dx, y - dy), (x - dx, y - dy),
                (x + dy, y + dx), (x - dy, y + dx), (x + dy, y - dx), (x - dy, y - dx),
            ):
                self.set_pxl(px, py, pixel)

    def fill_circle(self, x: int, y: int, radius: int, pixel: Pixel) -> None:
        """Fill a circle around (x, y)."""
        if radius < 0:
            raise ValueError(f"radius must not be negative, got {radius}")
        self._span(x - radius, x + radius, y, pixel)
        for dx, dy in _circle_offsets(radius):
            self._span(x - dx, x + dx, y + dy, pixel)
            self._span(x - dx, x + dx, y - dy, pixel)
            self._span(x - dy, x + dy, y + dx, pixel)
            self._span(x - dy, x + dy, y - dx, pixel)

    def fill_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, pixel: Pixel
    ) -> None:
        """Outline and fill a triangle."""
        self.line(x1, y1, x2, y2, pixel)
        self.line(x2, y2, x3, y3, pixel)
        self.line(x3, y3, x1, y1, pixel)
        for x, y in _triangle_interior(self.width, self.height, x1, y1, x2, y2, x3, y3):
            self.set_pxl(x, y, pixel)

    def set_input(self, keys: Iterable[str], mouse_press: Optional[Point]) -> None:
        """Record the keys pressed and the left-button press of this frame."""
        self._keys = frozenset(keys)
        self._mouse_press = None if mouse_press is None else (int(mouse_press[0]), int(mouse_press[1]))

    def is_key_pressed(self, key: str) -> bool:
        """Whether the key was pressed this frame."""
        return key in self._keys

    def get_mouse_press(self) -> Optional[Point]:
        """Where the left mouse button was pressed this frame, if it was."""
        return self._mouse_press


def smart_set_pxl(screen: Screen, x: int, y: int, pixel: Pixel) -> None:
    """Set a pixel's glyph and foreground while keeping the background underneath."""
    if 0 <= x < screen.width and 0 <= y < screen.height:
        under = screen.get_pxl(x, y)
        screen.set_pxl(x, y, Pixel(pixel.chr, pixel.fg, under.bg))


def _smart_points(screen: Screen, points: Iterable[Point], pixel: Pixel) -> None:
    for x, y in points:
        smart_set_pxl(screen, x, y, pixel)


def h_line(screen: Screen, start_x: int, start_y: int, end_x: int, pixel: Pixel) -> None:
    """Horizontal line, ends included, keeping backgrounds."""
    lo, hi = sorted((start_x, end_x))
    _smart_points(screen, ((x, start_y) for x in range(lo, hi + 1)), pixel)


def v_line(screen: Screen, start_x: int, start_y: int, end_y: int, pixel: Pixel) -> None:
    """Vertical line, ends included, keeping backgrounds."""
    lo, hi = sorted((start_y, end_y))
    _smart_points(screen, ((start_x, y) for y in range(lo, hi + 1)), pixel)


def line(
    screen: Screen, start_x: int, start_y: int, end_x: int, end_y: int, pixel: Pixel
) -> None:
    """Line between two points, keeping backgrounds."""
    _smart_points(screen, _line_points(start_x, start_y, end_x, end_y), pixel)


def triangle(
    screen: Screen, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, pixel: Pixel
) -> None:
    """Triangle outline, keeping backgrounds."""
    line(screen, x1, y1, x2, y2, pixel)
    line(screen, x2, y2, x3, y3, pixel)
    line(screen, x3, y3, x1, y1, pixel)


def fill_triangle(
    screen: Screen, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, pixel: Pixel
) -> None:
    """Filled triangle, keeping backgrounds."""
    triangle(screen, x1, y1, x2, y2, x3, y3, pixel)
    _smart_points(
        screen,
        _triangle_interior(screen.width, screen.height, x1, y1, x2, y2, x3, y3),
        pixel,
    )


PixelSetter = Callable[[int, int, Pixel], None]