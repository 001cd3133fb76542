"""Styled text segments that make up a prompt module."""

from __future__ import annotations

from dataclasses import dataclass

Color = str | int | tuple[int, int, int]

_NAMED_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "cyan": 6,
    "white": 7,
}

_RESET = "\x1b[0m"


def _color_codes(color: Color, base: int) -> list[str]:
    """Return the SGR parameters for a colour; ``base`` is 30 or 40."""
    if isinstance(color, str):
        try:
            return [str(base + _NAMED_COLORS[color.lower()])]
        except KeyError:
            raise ValueError(f"unknown colour name: {color!r}") from None
    if isinstance(color, int):
        if not 0 <= color <= 255:
            raise ValueError(f"fixed colour out of range: {color}")
        return [str(base + 8), "5", str(color)]
    if len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise ValueError(f"invalid RGB colour: {color!r}")
    r, g, b = color
    return [str(base + 8), "2", str(r), str(g), str(b)]


@dataclass(frozen=True)
class Style:
    """Terminal text attributes and colours."""

    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def _codes(self) -> list[str]:
        flags = (
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        )
        codes = [code for enabled, code in flags if enabled]
        if self.foreground is not None:
            codes.extend(_color_codes(self.foreground, 30))
        if self.background is not None:
            codes.extend(_color_codes(self.background, 40))
        return codes

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape sequences for this style."""
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


@dataclass
class Segment:
    """A single configurable element of a module.

    A segment without its own style inherits the style of its module.
    """

    name: str
    value: str = ""
    style: Style | None = None

    def ansi_string(self) -> str:
        """Return the value painted with the segment's style."""
        if self.style is None:
            return self.value
        return self.style.paint(self.value)

    def is_empty(self) -> bool:
        """Whether the segment holds only whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()