"""Placement colors. RGB tuples of ints 0-255; HSL given as degrees / percent like the palette table.
Kept apart from the physics path: nothing in transition.py reads a color."""

import colorsys
import random
from typing import Tuple

RGB = Tuple[int, int, int]


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """h in degrees, s and l in percent."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l / 100.0, s / 100.0)
    return (round(r * 255), round(g * 255), round(b * 255))


def hex_to_rgb(value: str) -> RGB:
    s = value.lstrip("#")
    if len(s) != 6:
        raise ValueError(f"expected #rrggbb, got {value!r}")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))


def sample_color(definition, rng: random.Random) -> RGB:
    """Fixed color if the material has one, else integer h/s/l drawn inclusively from its ranges."""
    if definition.color is not None:
        return definition.color
    h = rng.randint(*definition.hue)
    s = rng.randint(*definition.saturation)
    l = rng.randint(*definition.lightness)
    return hsl_to_rgb(h, s, l)
