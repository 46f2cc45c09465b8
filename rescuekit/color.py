"""An immutable 24-bit RGB colour."""

from __future__ import annotations

import math
import random as _random
from functools import total_ordering


@total_ordering
class Color:
    """A colour with red, green and blue components from 0 to 255."""

    __slots__ = ("_value",)

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= component < 256 for component in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._value = (red << 16) + (green << 8) + blue

    def red(self) -> int:
        return (self._value >> 16) & 0xFF

    def green(self) -> int:
        return (self._value >> 8) & 0xFF

    def blue(self) -> int:
        return self._value & 0xFF

    def to_rgb(self) -> int:
        """Return the colour packed as 0xRRGGBB."""
        return self._value

    def to_html(self) -> str:
        """Return the colour as an HTML ``#rrggbb`` string."""
        return f"#{self.red():02x}{self.green():02x}{self.blue():02x}"

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        if not 0 <= hex_value <= 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> float:
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        generator = rng if rng is not None else _random
        return cls(generator.randint(0, 255), generator.randint(0, 255), generator.randint(0, 255))

    @classmethod
    def white(cls) -> Color:
        return cls.from_hex(0xFFFFFF)

    @classmethod
    def black(cls) -> Color:
        return cls.from_hex(0x000000)

    @classmethod
    def red_color(cls) -> Color:
        return cls.from_hex(0xFF0000)

    @classmethod
    def green_color(cls) -> Color:
        return cls.from_hex(0x00FF00)

    @classmethod
    def blue_color(cls) -> Color:
        return cls.from_hex(0x0000FF)

    @classmethod
    def yellow(cls) -> Color:
        return cls.from_hex(0xFFFF00)

    @classmethod
    def cyan(cls) -> Color:
        return cls.from_hex(0x00FFFF)

    @classmethod
    def magenta(cls) -> Color:
        return cls.from_hex(0xFF00FF)

    @classmethod
    def gray(cls) -> Color:
        return cls.from_hex(0x808080)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Color) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Color({self.red()}, {self.green()}, {self.blue()})"

    def __str__(self) -> str:
        for name in ("black", "blue_color", "cyan", "gray", "green_color", "magenta", "red_color", "white", "yellow"):
            if getattr(Color, name)() == self:
                return f"Color.{name}()"
        return self.to_html()