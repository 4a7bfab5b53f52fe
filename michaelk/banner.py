"""Large block-letter banners in the six-row FIGlet standard style."""

from __future__ import annotations

from typing import Dict, Tuple

_HEIGHT = 6

_RAW_GLYPHS: Dict[str, Tuple[str, ...]] = {
    " ": ("  ", "  ", "  ", "  ", "  ", "  "),
    ".": ("    ", "    ", "    ", " _  ", "(_) ", "    "),
    "A": ("    _    ", "   / \\   ", "  / _ \\  ", " / ___ \\ ", "/_/   \\_\\", "         "),
    "B": (" ____  ", "| __ ) ", "|  _ \\ ", "| |_) |", "|____/ ", "       "),
    "C": ("  ____ ", " / ___|", "| |    ", "| |___ ", " \\____|", "       "),
    "D": (" ____  ", "|  _ \\ ", "| | | |", "| |_| |", "|____/ ", "       "),
    "E": (" _____ ", "| ____|", "|  _|  ", "| |___ ", "|_____|", "       "),
    "F": (" _____ ", "|  ___|", "| |_   ", "|  _|  ", "|_|    ", "       "),
    "G": ("  ____ ", " / ___|", "| |  _ ", "| |_| |", " \\____|", "       "),
    "H": (" _   _ ", "| | | |", "| |_| |", "|  _  |", "|_| |_|", "       "),
    "I": (" ___ ", "|_ _|", " | | ", " | | ", "|___|", "     "),
    "J": ("     _ ", "    | |", " _  | |", "| |_| |", " \\___/ ", "       "),
    "K": (" _  __", "| |/ /", "| ' / ", "| . \\ ", "|_|\\_\\", "      "),
    "L": (" _     ", "| |    ", "| |    ", "| |___ ", "|_____|", "       "),
    "M": (" __  __ ", "|  \\/  |", "| |\\/| |", "| |  | |", "|_|  |_|", "        "),
    "N": (" _   _ ", "| \\ | |", "|  \\| |", "| |\\  |", "|_| \\_|", "       "),
    "O": ("  ___  ", " / _ \\ ", "| | | |", "| |_| |", " \\___/ ", "       "),
    "P": (" ____  ", "|  _ \\ ", "| |_) |", "|  __/ ", "|_|    ", "       "),
    "Q": ("  ___  ", " / _ \\ ", "| | | |", "| |_| |", " \\__\\_\\", "       "),
    "R": (" ____  ", "|  _ \\ ", "| |_) |", "|  _ < ", "|_| \\_\\", "       "),
    "S": (" ____  ", "/ ___| ", "\\___ \\ ", " ___) |", "|____/ ", "       "),
    "T": (" _____ ", "|_   _|", "  | |  ", "  | |  ", "  |_|  ", "       "),
    "U": (" _   _ ", "| | | |", "| | | |", "| |_| |", " \\___/ ", "       "),
    "V": ("__     __", "\\ \\   / /", " \\ \\ / / ", "  \\ V /  ", "   \\_/   ", "         "),
    "W": (
        "__        __",
        "\\ \\      / /",
        " \\ \\ /\\ / / ",
        "  \\ V  V /  ",
        "   \\_/\\_/   ",
        "            ",
    ),
    "X": ("__  __", "\\ \\/ /", " \\  / ", " /  \\ ", "/_/\\_\\", "      "),
    "Y": ("__   __", "\\ \\ / /", " \\ V / ", "  | |  ", "  |_|  ", "       "),
    "Z": (" _____", "|__  /", "  / / ", " / /_ ", "/____|", "      "),
    "a": ("       ", "  __ _ ", " / _` |", "| (_| |", " \\__,_|", "       "),
    "b": (" _     ", "| |__  ", "| '_ \\ ", "| |_) |", "|_.__/ ", "       "),
    "c": ("      ", "  ___ ", " / __|", "| (__ ", " \\___|", "      "),
    "d": ("     _ ", "  __| |", " / _` |", "| (_| |", " \\__,_|", "       "),
    "e": ("      ", "  ___ ", " / _ \\", "|  __/", " \\___|", "      "),
    "f": ("  __ ", " / _|", "| |_ ", "|  _|", "|_|  ", "     "),
    "g": ("       ", "  __ _ ", " / _` |", "| (_| |", " \\__, |", " |___/ "),
    "h": (" _     ", "| |__  ", "| '_ \\ ", "| | | |", "|_| |_|", "       "),
    "i": (" _ ", "(_)", "| |", "| |", "|_|", "   "),
    "j": ("   _ ", "  (_)", "  | |", "  | |", " _/ |", "|__/ "),
    "k": (" _    ", "| | __", "| |/ /", "|   < ", "|_|\\_\\", "      "),
    "l": (" _ ", "| |", "| |", "| |", "|_|", "   "),
    "m": (
        "           ",
        " _ __ ___  ",
        "| '_ ` _ \\ ",
        "| | | | | |",
        "|_| |_| |_|",
        "           ",
    ),
    "n": ("       ", " _ __  ", "| '_ \\ ", "| | | |", "|_| |_|", "       "),
    "o": ("       ", "  ___  ", " / _ \\ ", "| (_) |", " \\___/ ", "       "),
    "p": ("       ", " _ __  ", "| '_ \\ ", "| |_) |", "| .__/ ", "|_|    "),
    "q": ("       ", "  __ _ ", " / _` |", "| (_| |", " \\__, |", "    |_|"),
    "r": ("      ", " _ __ ", "| '__|", "| |   ", "|_|   ", "      "),
    "s": ("     ", " ___ ", "/ __|", "\\__ \\", "|___/", "     "),
    "t": (" _   ", "| |_ ", "| __|", "| |_ ", " \\__|", "     "),
    "u": ("       ", " _   _ ", "| | | |", "| |_| |", " \\__,_|", "       "),
    "v": ("       ", "__   __", "\\ \\ / /", " \\ V / ", "  \\_/  ", "       "),
    "w": (
        "          ",
        "__      __",
        "\\ \\ /\\ / /",
        " \\ V  V / ",
        "  \\_/\\_/  ",
        "          ",
    ),
    "x": ("      ", "__  __", "\\ \\/ /", " >  < ", "/_/\\_\\", "      "),
    "y": ("       ", " _   _ ", "| | | |", "| |_| |", " \\__, |", " |___/ "),
    "z": ("     ", " ____", "|_  /", " / / ", "/___|", "     "),
}


def _normalise(rows: Tuple[str, ...]) -> Tuple[str, ...]:
    width = max(len(row) for row in rows)
    return tuple(row.ljust(width) for row in rows)


_FONT: Dict[str, Tuple[str, ...]] = {ch: _normalise(rows) for ch, rows in _RAW_GLYPHS.items()}


def banner_height() -> int:
    """Number of text rows in every banner."""
    return _HEIGHT


def render(text: str) -> str:
    """Render text as a banner, rows joined by newlines.

    Raises ValueError for a character the font has no glyph for.
    """
    glyphs = []
    for ch in text:
        glyph = _FONT.get(ch)
        if glyph is None:
            raise ValueError(f"no banner glyph for {ch!r}")
        glyphs.append(glyph)
    return "\n".join("".join(glyph[row] for glyph in glyphs) for row in range(_HEIGHT))