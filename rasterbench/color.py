# rasterbench/color.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Color:
    """
    RGB color with integer channels in [0, 255].

    Channels are not clamped. Blends produce fractional values which are
    truncated toward zero when a Color is built from them.
    """

    r: int
    g: int
    b: int

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b

    @staticmethod
    def from_hex(value: str) -> Color:
        """Parse '#rrggbb' (the leading '#' is optional)."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"expected a #rrggbb color, got {value!r}")
        try:
            raw = int(digits, 16)
        except ValueError:
            raise ValueError(
                f"expected a #rrggbb color, got {value!r}"
            ) from None
        return Color((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)

    def as_float(self) -> tuple[float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    @staticmethod
    def lerp(a: Color, b: Color, t: float) -> Color:
        return Color(
            math.trunc(a.r + (b.r - a.r) * t),
            math.trunc(a.g + (b.g - a.g) * t),
            math.trunc(a.b + (b.b - a.b) * t),
        )

    @staticmethod
    def interpolate2d(
        c00: Color, c10: Color, c01: Color, c11: Color, s: float, t: float
    ) -> Color:
        """
        Bilinear blend of four corner colors.

        c00, c10, c01, c11 sit at (0,0), (1,0), (0,1), (1,1). `s` blends
        along the first axis, `t` along the second. The blend is carried
        out in floating point and truncated once at the end.
        """

        def channel(a: int, b: int, c: int, d: int) -> int:
            bottom = a + (b - a) * s
            top = c + (d - c) * s
            return math.trunc(bottom + (top - bottom) * t)

        return Color(
            channel(c00.r, c10.r, c01.r, c11.r),
            channel(c00.g, c10.g, c01.g, c11.g),
            channel(c00.b, c10.b, c01.b, c11.b),
        )


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
