import pytest

from michaelk.canvas import GREEN, Screen
from michaelk.dialogue import (
    ENTER,
    Dialogue,
    dialogue_box,
    display_prompt,
    is_skipping,
    leave,
    pt_in_box,
    tutorial_skipping,
)


def make_screen():
    return Screen(60, 48)


def row(screen, y):
    return str(screen).split("\n")[y]


def inside(screen):
    (x1, y1), (x2, y2) = dialogue_box(screen)
    return (x1 + x2) // 2, (y1 + y2) // 2


def outside(screen):
    return 0, 0


def test_pt_in_box_is_strict():
    box = ((0, 0), (10, 10))
    assert pt_in_box((5, 5), box) is True
    assert pt_in_box((0, 5), box) is False
    assert pt_in_box((10, 5), box) is False
    assert pt_in_box((5, 10), box) is False


def test_dialogue_box_lies_on_screen_and_is_centered():
    screen = make_screen()
    (x1, y1), (x2, y2) = dialogue_box(screen)
    assert 0 <= x1 < x2 < screen.width
    assert 0 <= y1 < y2 <= screen.height
    assert x1 + x2 == screen.width


def test_is_skipping_without_input():
    screen = make_screen()
    assert is_skipping(screen) is True


def test_is_skipping_stops_on_enter():
    screen = make_screen()
    screen.set_input([ENTER], None)
    assert is_skipping(screen) is False


@pytest.mark.parametrize("where, expected", [(inside, False), (outside, True)])
def test_is_skipping_click(where, expected):
    screen = make_screen()
    screen.set_input([], where(screen))
    assert is_skipping(screen) is expected


def test_tutorial_skipping_shows_tip():
    screen = make_screen()
    (_, _), (_, y2) = dialogue_box(screen)
    assert tutorial_skipping(screen) is True
    assert "Tip:" in row(screen, y2 - 2)


def test_tutorial_skipping_stops_on_enter_without_tip():
    screen = make_screen()
    (_, _), (_, y2) = dialogue_box(screen)
    screen.set_input([ENTER], None)
    assert tutorial_skipping(screen) is False
    assert "Tip:" not in row(screen, y2 - 2)


@pytest.mark.parametrize("where, expected", [(inside, True), (outside, False)])
def test_leave_click(where, expected):
    screen = make_screen()
    screen.set_input([], where(screen))
    assert leave(screen) is expected


def test_leave_without_click_stays():
    assert leave(make_screen()) is True


def test_display_prompt_shows_prefix():
    screen = make_screen()
    (_, y1), _ = dialogue_box(screen)
    display_prompt(screen, 3, "Hello there", "Anna")
    text = row(screen, y1 + 1)
    assert "Hel" in text
    assert "Hello" not in text


def test_display_prompt_marker_after_full_text():
    screen = make_screen()
    _, (x2, y2) = dialogue_box(screen)
    display_prompt(screen, 4, "Hi", "Anna")
    assert screen.get_pxl(x2 - 1, y2 - 1).chr == "V"


def test_display_prompt_no_marker_on_multiple_of_three():
    screen = make_screen()
    _, (x2, y2) = dialogue_box(screen)
    display_prompt(screen, 3, "Hi", "Anna")
    assert screen.get_pxl(x2 - 1, y2 - 1).chr != "V"
    assert screen.get_pxl(x2 - 1, y2 - 1).chr == " "


def test_new_dialogue_state():
    d = Dialogue(["Yes", "No"], "Well?")
    assert d.is_prompting is True
    assert d.is_active is True
    assert d.current_char == 0
    assert d.choice == -1


def test_prompting_types_and_names_speaker():
    screen = make_screen()
    (x1, y1), _ = dialogue_box(screen)
    d = Dialogue(["Yes"], "Good morning")
    assert d.write_prompt(screen, 1, "Anna") == 0
    assert d.current_char == 2
    d.write_prompt(screen, 2, "Anna")
    assert d.current_char == 4
    assert "Good" in row(screen, y1 + 1)
    assert row(screen, y1)[x1 + 1 : x1 + 5] == "Anna"
    assert screen.get_pxl(x1 + 1, y1).fg == GREEN
    assert d.is_prompting is True


def test_enter_moves_to_choices():
    screen = make_screen()
    (x1, y1), _ = dialogue_box(screen)
    d = Dialogue(["Yes", "No"], "Well?")
    screen.set_input([ENTER], None)
    d.write_prompt(screen, 1, "Anna")
    assert d.is_prompting is False

    screen.clear()
    screen.set_input([], None)
    assert d.write_prompt(screen, 2, "Anna") == 0
    assert d.current_char == 0
    assert row(screen, y1)[x1 + 1 : x1 + 4] == "You"
    assert "Yes" in row(screen, y1 + 2)
    assert "No" in row(screen, y1 + 5)


def choose(screen, d, index):
    (x1, y1), _ = dialogue_box(screen)
    screen.set_input([ENTER], None)
    d.write_prompt(screen, 1, "Anna")
    screen.set_input([], (x1 + 3, y1 + 3 * index + 1))
    d.write_prompt(screen, 2, "Anna")


@pytest.mark.parametrize("index", [0, 1])
def test_click_selects_choice(index):
    screen = make_screen()
    d = Dialogue(["Yes", "No"], "Well?")
    choose(screen, d, index)
    assert d.choice == index


def test_confirm_choice_returns_index_plus_one():
    screen = make_screen()
    d = Dialogue(["Yes", "No"], "Well?")
    choose(screen, d, 1)
    screen.set_input([], inside(screen))
    assert d.write_prompt(screen, 3, "Anna") == 2


def test_chosen_answer_is_typed_out():
    screen = make_screen()
    (_, y1), _ = dialogue_box(screen)
    d = Dialogue(["Absolutely", "No"], "Well?")
    choose(screen, d, 0)
    screen.clear()
    screen.set_input([], None)
    assert d.write_prompt(screen, 3, "Anna") == 0
    assert d.current_char == 2
    assert "Ab" in row(screen, y1 + 1)
    assert "Abs" not in row(screen, y1 + 1)


def test_click_outside_after_choice_resets():
    screen = make_screen()
    d = Dialogue(["Yes", "No"], "Well?")
    choose(screen, d, 0)
    screen.set_input([], outside(screen))
    assert d.write_prompt(screen, 3, "Anna") == 0
    assert d.choice == -1
    assert d.is_prompting is True
    assert d.is_active is False


def test_click_outside_during_choices_returns_to_prompt_and_leaves():
    screen = make_screen()
    d = Dialogue(["Yes"], "Well?")
    screen.set_input([ENTER], None)
    d.write_prompt(screen, 1, "Anna")
    screen.set_input([], outside(screen))
    d.write_prompt(screen, 2, "Anna")
    assert d.is_prompting is True
    assert d.is_active is False


def test_custom_skipping_fn_is_used():
    screen = make_screen()
    d = Dialogue(["Yes"], "Well?")
    d.skipping_fn = lambda s: False
    d.write_prompt(screen, 1, "Anna")
    assert d.is_prompting is False


def test_reset_restores_start():
    d = Dialogue(["Yes"], "Well?")
    d.is_prompting = False
    d.choice = 0
    d.current_char = 8
    d.reset()
    assert (d.is_prompting, d.is_active, d.choice, d.current_char) == (True, False, -1, 0)