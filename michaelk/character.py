"""People the player can talk to, each with a chain of dialogues."""

from __future__ import annotations

from typing import List

from .canvas import Screen
from .dialogue import Dialogue

_FACE = (
    (3, 0, ".------\\ /------."),
    (3, 1, "|       -       |"),
    (3, 2, "|               |"),
    (3, 3, "|               |"),
    (3, 4, "|               |"),
    (0, 5, "_______________________"),
    (0, 6, "===========.==========="),
    (2, 7, "/ ~~~~~     ~~~~~ \\"),
    (1, 8, "/|     |     |\\"),
    (0, 9, "W   ---  / \\  ---   W"),
    (1, 10, "\\.      |o o|      ./"),
    (2, 11, "|                 |"),
    (3, 12, "\\    #########    /"),
    (4, 13, "\\  ## ----- ##  /"),
    (5, 14, "\\##         ##/"),
    (6, 15, "\\_____v_____/"),
)


class Character:
    """A named person in a seat, who steps through dialogues as answers are chosen."""

    def __init__(self, name: str, dialogue: Dialogue, seat: int) -> None:
        self.name = name
        self.dialogues: List[Dialogue] = [dialogue]
        self.current = 0
        self.seat = seat

    def __repr__(self) -> str:
        return f"Character(name={self.name!r}, seat={self.seat})"

    def talk_to(self, screen: Screen, frame: int) -> bool:
        """Run one frame of the current dialogue; False once the talk is over."""
        advance = self.dialogues[self.current].write_prompt(screen, frame, self.name)
        if advance:
            self.dialogues[self.current].reset()
            self.current += advance
        if self.current < len(self.dialogues):
            return self.dialogues[self.current].is_active
        self.current = 0
        return False

    def add_dialogue(self, dialogue: Dialogue) -> None:
        """Append a dialogue to the chain."""
        self.dialogues.append(dialogue)

    def draw_face(self, screen: Screen, frame: int, x: int, y: int) -> None:
        """Draw the character's face with its top-left corner near (x, y)."""
        for dx, dy, text in _FACE:
            screen.print(x + dx, y + dy, text)