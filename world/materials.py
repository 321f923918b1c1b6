"""
Material registry: one immutable MaterialDef per MaterialId, built once at import.
Physics reads weight / stickiness / solid / self_sticky only; color ranges, button
colors, category and note are for placement and the palette.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from world.color import RGB, hex_to_rgb, hsl_to_rgb
from world.constants import CLEAR_COLOR, RISE_SCALE

INF = math.inf

CATEGORIES = ("tools", "solids", "powders", "liquids", "gases", "misc")


class MaterialId(IntEnum):
    EMPTY = 0
    SAND = 1
    STONE = 2
    METAL = 3
    GLASS = 4
    SALT = 5
    CORN_STARCH = 6
    WATER = 7
    OIL = 8
    LAVA = 9
    SLIME = 10
    ACID = 11
    STEAM = 12
    HELIUM = 13
    SMOKE = 14
    CLOUD = 15
    FIRE = 16
    EXPLOSIVE = 17
    ICE = 18
    SNOW = 19
    BOUNCY = 20
    ELECTRICITY = 21
    MAGNET = 22
    ANTIMATTER = 23
    SAND_CLONE = 24
    PLANT = 25
    SAWDUST = 26
    GLUE = 27
    UNICORN_FLESH = 28


@dataclass(frozen=True)
class MaterialDef:
    name: str
    solid: bool
    weight: float
    stickiness: float
    category: str
    button_color: RGB
    button_text_color: RGB
    hue: Tuple[int, int] = (0, 0)
    saturation: Tuple[int, int] = (0, 0)
    lightness: Tuple[int, int] = (0, 0)
    color: Optional[RGB] = None
    self_sticky: bool = False
    note: str = ""

    def __post_init__(self) -> None:
        if self.solid and not (self.weight == INF and self.stickiness == INF):
            raise ValueError(f"{self.name}: solids carry infinite weight and stickiness")
        if not self.solid and (math.isinf(self.weight) or math.isinf(self.stickiness)):
            raise ValueError(f"{self.name}: infinite coefficients are reserved for solids")
        if self.category not in CATEGORIES:
            raise ValueError(f"{self.name}: unknown category {self.category!r}")


DARK_TEXT = hex_to_rgb("#2d3748")
LIGHT_TEXT = hex_to_rgb("#e2e8f0")


def _solid(name, hue, sat, lig, button, text, category="solids", note=""):
    return MaterialDef(
        name=name, solid=True, weight=INF, stickiness=INF, category=category,
        button_color=button, button_text_color=text,
        hue=hue, saturation=sat, lightness=lig, note=note,
    )


def _loose(name, weight, stickiness, hue, sat, lig, button, text, category, note="", self_sticky=False):
    return MaterialDef(
        name=name, solid=False, weight=weight, stickiness=stickiness, category=category,
        button_color=button, button_text_color=text,
        hue=hue, saturation=sat, lightness=lig, self_sticky=self_sticky, note=note,
    )


M = MaterialId

MATERIALS: Dict[MaterialId, MaterialDef] = {
    M.EMPTY: MaterialDef(
        name="Eraser", solid=False, weight=0.0, stickiness=0.0, category="tools",
        button_color=LIGHT_TEXT, button_text_color=DARK_TEXT, color=CLEAR_COLOR,
    ),
    # Solids
    M.STONE: _solid("Stone", (215, 248), (8, 31), (45, 55), hsl_to_rgb(230, 20, 50), LIGHT_TEXT),
    M.METAL: _solid("Metal", (200, 210), (5, 15), (30, 40), hsl_to_rgb(205, 10, 35), LIGHT_TEXT),
    M.GLASS: _solid("Glass", (180, 200), (5, 10), (70, 80), hsl_to_rgb(190, 7, 75), DARK_TEXT),
    # Powders
    M.SAND: _loose("Sand", 1.0, 0.5, (38, 38), (66, 88), (60, 70), hex_to_rgb("#f6ad55"), DARK_TEXT, "powders"),
    M.SALT: _loose("Salt", 0.9, 0.4, (0, 0), (0, 5), (90, 95), hsl_to_rgb(0, 2, 92), DARK_TEXT, "powders"),
    M.CORN_STARCH: _loose(
        "Corn Starch", 1.0, 0.8, (38, 47), (60, 88), (79, 80), hsl_to_rgb(40, 70, 79), DARK_TEXT, "powders",
    ),
    M.SAWDUST: _loose("Sawdust", 0.8, 0.6, (20, 30), (30, 40), (50, 60), hsl_to_rgb(25, 35, 55), LIGHT_TEXT, "powders"),
    # Liquids
    M.WATER: _loose("Water", 0.7, 0.0, (200, 220), (70, 90), (50, 60), hsl_to_rgb(210, 80, 55), LIGHT_TEXT, "liquids"),
    M.OIL: _loose("Oil", 0.6, 0.1, (40, 60), (80, 90), (20, 30), hsl_to_rgb(50, 85, 25), LIGHT_TEXT, "liquids"),
    M.LAVA: _loose("Lava", 1.5, 0.3, (0, 30), (90, 100), (40, 60), hsl_to_rgb(15, 95, 50), LIGHT_TEXT, "liquids"),
    M.SLIME: _loose("Slime", 0.9, 0.7, (100, 120), (70, 90), (50, 60), hsl_to_rgb(110, 80, 55), DARK_TEXT, "liquids"),
    M.ACID: _loose(
        "Acid", 0.7, 0.0, (70, 90), (80, 95), (40, 50), hsl_to_rgb(80, 85, 45), DARK_TEXT, "liquids",
        note="Corrosive; dissolving other materials is not simulated.",
    ),
    M.GLUE: _loose(
        "Glue", 0.5, 0.9, (20, 39), (20, 28), (80, 90), hsl_to_rgb(30, 24, 85), DARK_TEXT, "liquids",
        note="Hangs in strands from surfaces and from itself.", self_sticky=True,
    ),
    # Gases
    M.STEAM: _loose("Steam", -0.1, 0.0, (200, 220), (5, 15), (80, 90), hsl_to_rgb(210, 10, 85), DARK_TEXT, "gases"),
    M.HELIUM: _loose("Helium", -0.5, 0.0, (20, 40), (5, 10), (90, 95), hsl_to_rgb(30, 7, 92), DARK_TEXT, "gases"),
    M.SMOKE: _loose("Smoke", -0.05, 0.0, (0, 0), (0, 10), (20, 30), hsl_to_rgb(0, 5, 25), LIGHT_TEXT, "gases"),
    M.CLOUD: _loose("Cloud", -0.02, 0.0, (0, 0), (0, 5), (85, 95), hsl_to_rgb(0, 2, 90), DARK_TEXT, "gases"),
    # Misc
    M.FIRE: _loose(
        "Fire", -0.2, 0.0, (0, 60), (90, 100), (50, 70), hsl_to_rgb(30, 95, 60), DARK_TEXT, "misc",
        note="Burning other materials is not simulated.",
    ),
    M.EXPLOSIVE: _solid(
        "Explosive", (0, 10), (50, 70), (20, 30), hsl_to_rgb(5, 60, 25), LIGHT_TEXT, "misc",
        note="Detonation is not simulated.",
    ),
    M.ICE: _solid(
        "Ice", (200, 220), (10, 20), (75, 85), hsl_to_rgb(210, 15, 80), DARK_TEXT, "misc",
        note="Melting into water is not simulated.",
    ),
    M.SNOW: _loose(
        "Snow", 0.3, 0.7, (0, 0), (0, 5), (95, 100), hsl_to_rgb(0, 2, 97), DARK_TEXT, "misc",
        note="Melting is not simulated.",
    ),
    M.BOUNCY: _solid(
        "Bouncy", (120, 140), (80, 90), (50, 60), hsl_to_rgb(130, 85, 55), DARK_TEXT, "misc",
        note="Bouncing is not simulated.",
    ),
    M.ELECTRICITY: _loose(
        "Electricity", 0.0, 0.0, (40, 60), (90, 100), (70, 80), hsl_to_rgb(50, 95, 75), DARK_TEXT, "misc",
        note="Conduction is not simulated.",
    ),
    M.MAGNET: _solid(
        "Magnet", (240, 260), (10, 20), (20, 30), hsl_to_rgb(250, 15, 25), LIGHT_TEXT, "misc",
        note="Attracting metal is not simulated.",
    ),
    M.ANTIMATTER: _loose(
        "Antimatter", 0.1, 0.0, (300, 320), (90, 100), (50, 60), hsl_to_rgb(310, 95, 55), LIGHT_TEXT, "misc",
        note="Annihilation is not simulated.",
    ),
    M.SAND_CLONE: _loose(
        "Sand Clone", 1.0, 0.5, (38, 38), (66, 88), (60, 70), hex_to_rgb("#f6ad55"), DARK_TEXT, "misc",
        note="Behaves as sand; copying is not simulated.",
    ),
    M.PLANT: _solid(
        "Plant", (90, 110), (40, 60), (30, 40), hsl_to_rgb(100, 50, 35), LIGHT_TEXT, "misc",
        note="Growth is not simulated.",
    ),
    M.UNICORN_FLESH: _loose(
        "Unicorn Flesh", 1.0, 0.2, (330, 350), (80, 88), (68, 80), hsl_to_rgb(340, 84, 74), DARK_TEXT, "misc",
    ),
}

del M

assert set(MATERIALS) == set(MaterialId), "every MaterialId needs a definition"


def lookup(material: int) -> MaterialDef:
    """Definition for an id; an integer outside MaterialId raises ValueError."""
    return MATERIALS[MaterialId(material)]


def by_name(name: str) -> MaterialId:
    """Case-insensitive lookup by display name or enum name ("Corn Starch" / "CORN_STARCH")."""
    key = name.strip().lower()
    for mid, d in MATERIALS.items():
        if d.name.lower() == key or mid.name.lower() == key.replace(" ", "_"):
            return mid
    raise KeyError(name)


def by_category() -> Dict[str, List[MaterialId]]:
    """Palette grouping in CATEGORIES order; ids ascending within a category."""
    out: Dict[str, List[MaterialId]] = {c: [] for c in CATEGORIES}
    for mid in MaterialId:
        out[MATERIALS[mid].category].append(mid)
    return out


def _fall_limit(d: MaterialDef) -> int:
    if d.weight >= 1 and not math.isinf(d.weight):
        return int(math.floor(d.weight))
    return 1


def _rise_limit(d: MaterialDef) -> int:
    if d.weight < 0:
        return int(math.floor(abs(d.weight) * RISE_SCALE))
    return 0


# Per-id tables for the transition loop, indexed by the uint8 stored in Grid.material.
_ORDERED = [MATERIALS[mid] for mid in MaterialId]
MOVABLE = np.array([mid != MaterialId.EMPTY and not d.solid for mid, d in zip(MaterialId, _ORDERED)], dtype=bool)
STICKINESS = tuple(d.stickiness for d in _ORDERED)
SELF_STICKY = tuple(d.self_sticky for d in _ORDERED)
FALL_LIMIT = tuple(_fall_limit(d) for d in _ORDERED)
RISE_LIMIT = tuple(_rise_limit(d) for d in _ORDERED)
