"""Conversation boxes: a typed-out prompt followed by clickable answers."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from .canvas import BLACK, GREEN, GREY, BorderStyle, Screen, pxl_bg

ENTER = "enter"
"""Key name that advances a conversation."""

Point = Tuple[int, int]
Box = Tuple[Point, Point]
InputCheck = Callable[[Screen], bool]

_TIP = (
    "Tip: You will know if someone is done talking by the flashing arrow. "
    "Click in the box or press enter to continue"
)
_CHARS_PER_FRAME = 2


def dialogue_box(screen: Screen) -> Box:
    """Corners of the dialogue box in the lower part of the screen."""
    width, height = screen.width, screen.height
    x1 = width // 6
    x2 = width - x1
    y1 = height // 3 + height // 3 + height // 24
    y2 = height - height // 6 + height // 24
    return (x1, y1), (x2, y2)


def pt_in_box(pt: Point, box: Box) -> bool:
    """Whether a point lies strictly inside a box given as its two corners."""
    (x1, y1), (x2, y2) = box
    x, y = pt
    return x1 < x < x2 and y1 < y < y2


def _press_in_dialogue(screen: Screen) -> Optional[bool]:
    """None without a click this frame, else whether it landed in the box."""
    press = screen.get_mouse_press()
    if press is None:
        return None
    return pt_in_box(press, dialogue_box(screen))


def _draw_frame(screen: Screen) -> Box:
    box = dialogue_box(screen)
    (x1, y1), (x2, y2) = box
    screen.fill_rect(x1, y1, x2, y2, pxl_bg(" ", BLACK))
    screen.rect_border(x1, y1, x2, y2, BorderStyle.heavy())
    return box


def _draw_more_marker(screen: Screen, box: Box) -> None:
    _, (x2, y2) = box
    screen.print(x2 - 1, y2 - 1, "V")


def display_prompt(screen: Screen, current_char: int, prompt: str, name: str) -> None:
    """Draw the box with the first current_char characters of the prompt."""
    box = _draw_frame(screen)
    (x1, y1), _ = box
    screen.print(x1 + 1, y1 + 1, prompt[:current_char])
    if current_char % 3 != 0 and current_char > len(prompt):
        _draw_more_marker(screen, box)


def is_skipping(screen: Screen) -> bool:
    """False once the player presses enter or clicks inside the box."""
    if screen.is_key_pressed(ENTER):
        return False
    return _press_in_dialogue(screen) is not True


def tutorial_skipping(screen: Screen) -> bool:
    """Like is_skipping, but shows a hint while the player has not moved on."""
    if screen.is_key_pressed(ENTER):
        return False
    if _press_in_dialogue(screen) is True:
        return False
    (x1, _), (_, y2) = dialogue_box(screen)
    screen.print_fbg(x1 + 1, y2 - 2, _TIP, GREY, BLACK)
    return True


def leave(screen: Screen) -> bool:
    """False when the player clicks outside the box, which ends the talk."""
    return _press_in_dialogue(screen) is not False


class Dialogue:
    """A prompt spoken to the player and the answers the player can choose."""

    def __init__(self, choices: Sequence[str], prompt: str) -> None:
        self.choices: List[str] = list(choices)
        self.prompt = prompt
        self.is_prompting = True
        self.is_active = True
        self.current_char = 0
        self.choice = -1
        self.leaving_fn: InputCheck = leave
        self.skipping_fn: InputCheck = is_skipping

    def __repr__(self) -> str:
        return f"Dialogue(choices={self.choices!r}, prompt={self.prompt!r})"

    def _choice_boxes(self, screen: Screen, box: Box) -> List[Box]:
        (x1, y1), _ = box
        boxes = []
        for i, text in enumerate(self.choices):
            top = y1 + 3 * i
            screen.rect_border(x1 + 1, top + 1, x1 + 2 + len(text), top + 3, BorderStyle.simple())
            screen.print(x1 + 2, top + 2, text)
            boxes.append(((x1 + 2, top), (x1 + 10 + len(text), top + 3)))
        return boxes

    def write_prompt(self, screen: Screen, frame: int, speaker_name: str) -> int:
        """Draw one frame of the conversation.

        Returns 0 while it goes on, or the chosen answer's index plus one once
        the player has confirmed an answer.
        """
        self.is_active = True
        box = _draw_frame(screen)
        (x1, y1), _ = box
        speaker = speaker_name

        if self.is_prompting:
            screen.print(x1 + 1, y1 + 1, self.prompt[: self.current_char])
            if frame % 3 != 0 and self.current_char > len(self.prompt):
                _draw_more_marker(screen, box)
            self.current_char += _CHARS_PER_FRAME
            self.is_prompting = self.skipping_fn(screen)
        elif self.choice == -1:
            speaker = "You"
            self.current_char = 0
            boxes = self._choice_boxes(screen, box)
            press = screen.get_mouse_press()
            if press is not None:
                if pt_in_box(press, box):
                    for i, option in enumerate(boxes):
                        if pt_in_box(press, option):
                            self.choice = i
                else:
                    self.is_prompting = True
        else:
            speaker = "You"
            screen.print(x1 + 1, y1 + 1, self.choices[self.choice][: self.current_char])
            self.current_char += _CHARS_PER_FRAME
            if frame % 3 != 0 and self.current_char > len(self.prompt):
                _draw_more_marker(screen, box)
            press = screen.get_mouse_press()
            if press is not None:
                if pt_in_box(press, box):
                    return self.choice + 1
                self.reset()
                return 0

        self.is_active = self.leaving_fn(screen)
        screen.print_fbg(x1 + 1, y1, speaker, GREEN, BLACK)
        return 0

    def reset(self) -> None:
        """Return to the start of the prompt and mark the talk inactive."""
        self.is_prompting = True
        self.is_active = False
        self.choice = -1
        self.current_char = 0