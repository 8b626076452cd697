"""RGBA colours as found in textmate and VSCode themes."""

from __future__ import annotations

import string
from dataclasses import dataclass

_HEX_DIGITS = frozenset(string.hexdigits)


class GialloError(Exception):
    """Base class for errors raised by this package."""


class InvalidHexColorError(GialloError, ValueError):
    """A colour string could not be parsed as a hex colour."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid hex color {value!r}: {reason}")
        self.value = value
        self.reason = reason


def _parse_component(digits: str, original: str) -> int:
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise InvalidHexColorError(original, f"invalid hex component '{digits}'")
    return int(digits, 16)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``, ``white`` or ``black``.

        The leading ``#`` is optional.
        """
        digits = text.lstrip("#")
        if digits == "white":
            return WHITE
        if digits == "black":
            return BLACK

        length = len(digits)
        if length in (3, 4):
            parts = [_parse_component(ch, text) * 17 for ch in digits]
        elif length in (6, 8):
            parts = [
                _parse_component(digits[i : i + 2], text) for i in range(0, length, 2)
            ]
        else:
            raise InvalidHexColorError(text, f"invalid length {length}")
        return cls(*parts)

    def as_hex(self) -> str:
        """Upper-case hex form, with the alpha byte only when not opaque."""
        if self.a < 255:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_css_color_property(self) -> str:
        return f"color: {self.as_hex()};"

    def as_css_bg_color_property(self) -> str:
        return f"background-color: {self.as_hex()};"

    def as_ansi_fg(self) -> str:
        """Truecolor foreground SGR parameters (without ``ESC[`` and ``m``)."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def as_ansi_bg(self) -> str:
        """Truecolor background SGR parameters (without ``ESC[`` and ``m``)."""
        return f"48;2;{self.r};{self.g};{self.b}"


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


def css_light_dark_color_property(light: Color, dark: Color) -> str:
    """A ``color`` declaration switching between two colours by scheme."""
    return f"color: light-dark({light.as_hex()}, {dark.as_hex()});"


def css_light_dark_bg_color_property(light: Color, dark: Color) -> str:
    """A ``background-color`` declaration switching between two colours by scheme."""
    return f"background-color: light-dark({light.as_hex()}, {dark.as_hex()});"