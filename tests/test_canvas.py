import pytest

from michaelk.canvas import (
    BorderStyle,
    Pixel,
    Screen,
    fill_triangle,
    h_line,
    line,
    pxl,
    pxl_bg,
    pxl_fbg,
    pxl_fg,
    smart_set_pxl,
    triangle,
    v_line,
)


def marked(screen, ch="#"):
    return {
        (x, y)
        for y in range(screen.height)
        for x in range(screen.width)
        if screen.get_pxl(x, y).chr == ch
    }


def test_pixel_helpers():
    assert pxl("a") == Pixel("a", None, None)
    assert pxl_fg("b", 3) == Pixel("b", 3, None)
    assert pxl_bg("c", 4) == Pixel("c", None, 4)
    assert pxl_fbg("d", 5, 6) == Pixel("d", 5, 6)


def test_screen_rejects_bad_size():
    with pytest.raises(ValueError):
        Screen(0, 5)


def test_set_and_get_round_trip():
    screen = Screen(10, 5)
    p = pxl_fbg("@", 166, 94)
    screen.set_pxl(3, 2, p)
    assert screen.get_pxl(3, 2) == p
    assert screen.get_pxl(2, 3) == Pixel()


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 5)])
def test_get_out_of_bounds_raises(x, y):
    with pytest.raises(IndexError):
        Screen(10, 5).get_pxl(x, y)


def test_set_out_of_bounds_is_ignored():
    screen = Screen(4, 3)
    before = str(screen)
    screen.set_pxl(-1, 0, pxl("#"))
    screen.set_pxl(4, 2, pxl("#"))
    assert str(screen) == before


def test_print_clips_and_breaks_lines():
    screen = Screen(5, 3)
    screen.print(-1, 0, "abc")
    screen.print(0, 1, "xy\nz")
    assert screen.get_pxl(0, 0).chr == "b"
    assert screen.get_pxl(1, 0).chr == "c"
    assert screen.get_pxl(1, 1).chr == "y"
    assert screen.get_pxl(0, 2).chr == "z"


def test_print_fbg_colours():
    screen = Screen(8, 2)
    screen.print_fbg(1, 1, "hi", 7, 0)
    assert screen.get_pxl(2, 1) == Pixel("i", 7, 0)


def test_fill_rect_is_inclusive_in_any_order():
    screen = Screen(6, 4)
    p = pxl("#")
    screen.fill_rect(3, 2, 1, 0, p)
    assert marked(screen) == {(x, y) for x in range(1, 4) for y in range(0, 3)}


def test_clear_resets():
    screen = Screen(3, 3)
    screen.fill_rect(0, 0, 2, 2, pxl("#"))
    screen.clear()
    assert marked(screen) == set()


@pytest.mark.parametrize("x1,y1,x2,y2", [(0, 0, 9, 3), (2, 7, 5, 0), (8, 1, 1, 6), (4, 4, 4, 0)])
def test_line_endpoints_and_symmetry(x1, y1, x2, y2):
    forward = Screen(10, 8)
    forward.line(x1, y1, x2, y2, pxl("#"))
    backward = Screen(10, 8)
    backward.line(x2, y2, x1, y1, pxl("#"))
    cells = marked(forward)
    assert cells == marked(backward)
    assert (x1, y1) in cells and (x2, y2) in cells
    assert len(cells) == max(abs(x2 - x1), abs(y2 - y1)) + 1


def test_rect_outline():
    screen = Screen(6, 6)
    screen.rect(1, 1, 4, 3, pxl("#"))
    cells = marked(screen)
    assert (1, 1) in cells and (4, 3) in cells
    assert (2, 2) not in cells


def test_smart_set_pxl_keeps_background():
    screen = Screen(4, 4)
    screen.fill_rect(0, 0, 3, 3, pxl_bg(" ", 94))
    smart_set_pxl(screen, 1, 1, pxl_fbg("*", 28, 200))
    assert screen.get_pxl(1, 1) == Pixel("*", 28, 94)
    smart_set_pxl(screen, 10, 10, pxl("*"))
    assert marked(screen, "*") == {(1, 1)}


def test_smart_line_matches_plain_line_and_keeps_background():
    smart = Screen(10, 8)
    smart.fill_rect(0, 0, 9, 7, pxl_bg(" ", 33))
    line(smart, 1, 6, 8, 2, pxl_fg("#", 5))
    plain = Screen(10, 8)
    plain.line(1, 6, 8, 2, pxl("#"))
    assert marked(smart) == marked(plain)
    assert all(smart.get_pxl(x, y).bg == 33 for x, y in marked(smart))


def test_h_and_v_line_inclusive():
    screen = Screen(8, 8)
    h_line(screen, 5, 1, 2, pxl("#"))
    v_line(screen, 0, 6, 3, pxl("#"))
    assert marked(screen) == {(x, 1) for x in range(2, 6)} | {(0, y) for y in range(3, 7)}


def test_circle_negative_radius_raises():
    with pytest.raises(ValueError):
        Screen(5, 5).circle(2, 2, -1, pxl("#"))
    with pytest.raises(ValueError):
        Screen(5, 5).fill_circle(2, 2, -1, pxl("#"))


def test_fill_circle_covers_axis_points_only_within_radius():
    screen = Screen(15, 15)
    screen.fill_circle(7, 7, 3, pxl("#"))
    cells = marked(screen)
    for point in [(7, 7), (4, 7), (10, 7), (7, 4), (7, 10)]:
        assert point in cells
    assert all((x - 7) ** 2 + (y - 7) ** 2 <= 4 * 4 for x, y in cells)


def test_circle_outline_is_subset_of_filled():
    outline = Screen(15, 15)
    outline.circle(7, 7, 4, pxl("#"))
    filled = Screen(15, 15)
    filled.fill_circle(7, 7, 4, pxl("#"))
    assert marked(outline) <= marked(filled)
    assert (7, 7) not in marked(outline)


def test_fill_triangle_stays_in_bounding_box():
    screen = Screen(20, 20)
    screen.fill_triangle(2, 2, 15, 5, 6, 14, pxl("#"))
    cells = marked(screen)
    assert {(2, 2), (15, 5), (6, 14)} <= cells
    assert all(2 <= x <= 15 and 2 <= y <= 14 for x, y in cells)
    outline = Screen(20, 20)
    triangle(outline, 2, 2, 15, 5, 6, 14, pxl("#"))
    assert marked(outline) < cells


def test_fill_triangle_winding_independent():
    a = Screen(20, 20)
    a.fill_triangle(2, 2, 15, 5, 6, 14, pxl("#"))
    b = Screen(20, 20)
    b.fill_triangle(2, 2, 6, 14, 15, 5, pxl("#"))
    assert marked(a) == marked(b)


def test_smart_fill_triangle_matches_screen_version():
    smart = Screen(20, 20)
    fill_triangle(smart, 1, 10, 18, 0, 18, 19, pxl("#"))
    plain = Screen(20, 20)
    plain.fill_triangle(1, 10, 18, 0, 18, 19, pxl("#"))
    assert marked(smart) == marked(plain)


def test_rect_border_uses_style():
    style = BorderStyle.heavy()
    screen = Screen(10, 6)
    screen.rect_border(8, 4, 1, 0, style)
    assert screen.get_pxl(1, 0) == style.top_left
    assert screen.get_pxl(8, 0) == style.top_right
    assert screen.get_pxl(1, 4) == style.bottom_left
    assert screen.get_pxl(8, 4) == style.bottom_right
    assert screen.get_pxl(4, 0) == style.top
    assert screen.get_pxl(1, 2) == style.left
    assert screen.get_pxl(4, 2) == Pixel()


def test_border_with_colors():
    style = BorderStyle.simple().with_colors(10, 0)
    assert style.top_left.fg == 10 and style.right.bg == 0
    assert style.top.chr == BorderStyle.simple().top.chr
    assert BorderStyle.simple().top != BorderStyle.heavy().top


def test_input_state():
    screen = Screen(5, 5)
    assert screen.get_mouse_press() is None
    screen.set_input({"enter", "a"}, (3, 4))
    assert screen.is_key_pressed("enter")
    assert not screen.is_key_pressed("esc")
    assert screen.get_mouse_press() == (3, 4)
    screen.set_input([], None)
    assert not screen.is_key_pressed("enter")
    assert screen.get_mouse_press() is None