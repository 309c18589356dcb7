"""
Riichi Mahjong Tiles

Defines the 34 distinct tile values used in Japanese Mahjong:
- 9 Characters (萬子 manzu)
- 9 Dots (筒子 pinzu)
- 9 Bamboos (索子 souzu)
- 4 Winds (東南西北)
- 3 Dragons (白發中)

Every counting-based routine works on a 34-element count array indexed by
``tile_to_index``:
    0-8:   1m-9m
    9-17:  1p-9p
    18-26: 1s-9s
    27-30: East, South, West, North
    31-33: White, Green, Red
"""

from enum import IntEnum
from dataclasses import dataclass
from typing import Iterable, List
import numpy as np


NUM_TILE_TYPES = 34
COPIES_PER_TYPE = 4


class TileSuit(IntEnum):
    """Tile suits"""
    CHARACTERS = 0  # m
    DOTS = 1        # p
    BAMBOOS = 2     # s
    WINDS = 3
    DRAGONS = 4


class WindType(IntEnum):
    """Wind tile types, in turn order"""
    EAST = 0   # 東
    SOUTH = 1  # 南
    WEST = 2   # 西
    NORTH = 3  # 北


class DragonType(IntEnum):
    """Dragon tile types, in dora order"""
    WHITE = 0  # 白 (Haku)
    GREEN = 1  # 發 (Hatsu)
    RED = 2    # 中 (Chun)


NUMBERED_SUITS = (TileSuit.CHARACTERS, TileSuit.DOTS, TileSuit.BAMBOOS)

SUIT_LETTERS = {
    TileSuit.CHARACTERS: "m",
    TileSuit.DOTS: "p",
    TileSuit.BAMBOOS: "s",
}


@dataclass(frozen=True, order=True)
class Tile:
    """
    A single tile value.

    Attributes:
        suit: The suit of the tile
        value: 1-9 for numbered suits, a WindType (0-3) or DragonType (0-2) for honors
    """
    suit: TileSuit
    value: int

    def __post_init__(self):
        """Validate tile values"""
        if self.suit in NUMBERED_SUITS:
            if not 1 <= self.value <= 9:
                raise ValueError(f"Numbered suits must have value 1-9, got {self.value}")
        elif self.suit == TileSuit.WINDS:
            if not 0 <= self.value <= 3:
                raise ValueError(f"Wind tiles must have value 0-3, got {self.value}")
        elif self.suit == TileSuit.DRAGONS:
            if not 0 <= self.value <= 2:
                raise ValueError(f"Dragon tiles must have value 0-2, got {self.value}")
        else:
            raise ValueError(f"Unknown suit: {self.suit}")

    @property
    def is_honor(self) -> bool:
        """Check if tile is an honor tile (Wind or Dragon)"""
        return self.suit in (TileSuit.WINDS, TileSuit.DRAGONS)

    @property
    def is_wind(self) -> bool:
        return self.suit == TileSuit.WINDS

    @property
    def is_dragon(self) -> bool:
        return self.suit == TileSuit.DRAGONS

    @property
    def is_terminal(self) -> bool:
        """Check if tile is a terminal (1 or 9 of numbered suits)"""
        if self.suit in NUMBERED_SUITS:
            return self.value in (1, 9)
        return False

    @property
    def is_terminal_or_honor(self) -> bool:
        """Check if tile is terminal or honor (yaochuuhai)"""
        return self.is_terminal or self.is_honor

    @property
    def is_simple(self) -> bool:
        """Check if tile is a simple (2-8 of numbered suits)"""
        if self.suit in NUMBERED_SUITS:
            return 2 <= self.value <= 8
        return False

    @property
    def is_green(self) -> bool:
        """Check if tile is a green tile (for All Green)"""
        if self.suit == TileSuit.BAMBOOS:
            return self.value in (2, 3, 4, 6, 8)
        if self.suit == TileSuit.DRAGONS:
            return self.value == DragonType.GREEN
        return False

    @property
    def tile_index(self) -> int:
        """Unique index for this tile type (0-33)."""
        return tile_to_index(self)

    def __repr__(self) -> str:
        return f"Tile({self.suit.name}, {self.value})"

    def __str__(self) -> str:
        """Compact notation: 5m, 9s, 1z (East) ... 7z (Red)"""
        if self.suit in NUMBERED_SUITS:
            return f"{self.value}{SUIT_LETTERS[self.suit]}"
        if self.suit == TileSuit.WINDS:
            return f"{self.value + 1}z"
        return f"{self.value + 5}z"

    @classmethod
    def from_index(cls, tile_index: int) -> 'Tile':
        """Create a tile from its type index (0-33)."""
        return index_to_tile(tile_index)

    @classmethod
    def from_string(cls, s: str) -> 'Tile':
        """
        Create tile from its compact notation.

        Args:
            s: String like "1m", "9s", "5p", "1z" (East) or "7z" (Red dragon)
        """
        tiles = parse_tiles(s)
        if len(tiles) != 1:
            raise ValueError(f"Expected exactly one tile, got {s!r}")
        return tiles[0]


def tile_to_index(tile: Tile) -> int:
    """Map a tile to its dense index in [0, 33]."""
    if tile.suit in NUMBERED_SUITS:
        return 9 * int(tile.suit) + tile.value - 1
    if tile.suit == TileSuit.WINDS:
        return 27 + tile.value
    return 31 + tile.value


def index_to_tile(tile_index: int) -> Tile:
    """Inverse of ``tile_to_index``."""
    if not 0 <= tile_index < NUM_TILE_TYPES:
        raise ValueError(f"Tile index must be 0-33, got {tile_index}")
    if tile_index < 27:
        return Tile(TileSuit(tile_index // 9), tile_index % 9 + 1)
    if tile_index < 31:
        return Tile(TileSuit.WINDS, tile_index - 27)
    return Tile(TileSuit.DRAGONS, tile_index - 31)


def to_count_array(tiles: Iterable[Tile]) -> np.ndarray:
    """Convert tiles to a 34-element array counting each tile type."""
    counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
    for tile in tiles:
        counts[tile_to_index(tile)] += 1
    return counts


def parse_tiles(notation: str) -> List[Tile]:
    """
    Parse compact tile notation.

    Digits are buffered until a suit letter closes them:
    "123m456p789s11z" -> 1m 2m 3m 4p 5p 6p 7s 8s 9s East East.
    Honors use z with 1-4 = East, South, West, North and
    5-7 = White, Green, Red. A 0 in a suit is read as a five; 0z is
    rejected.
    """
    tiles: List[Tile] = []
    digits: List[int] = []
    for ch in notation.replace(" ", ""):
        if ch.isdigit():
            digits.append(int(ch))
            continue
        if not digits:
            raise ValueError(f"Suit letter {ch!r} without tile numbers in {notation!r}")
        if ch == "m":
            tiles.extend(Tile(TileSuit.CHARACTERS, d or 5) for d in digits)
        elif ch == "p":
            tiles.extend(Tile(TileSuit.DOTS, d or 5) for d in digits)
        elif ch == "s":
            tiles.extend(Tile(TileSuit.BAMBOOS, d or 5) for d in digits)
        elif ch == "z":
            for d in digits:
                if 1 <= d <= 4:
                    tiles.append(Tile(TileSuit.WINDS, d - 1))
                elif 5 <= d <= 7:
                    tiles.append(Tile(TileSuit.DRAGONS, d - 5))
                else:
                    raise ValueError(f"Honor tiles are 1z-7z, got {d}z")
        else:
            raise ValueError(f"Unknown suit letter {ch!r} in {notation!r}")
        digits = []
    if digits:
        raise ValueError(f"Trailing tile numbers without a suit in {notation!r}")
    return tiles


def tiles_to_string(tiles: Iterable[Tile]) -> str:
    """Render tiles back to compact notation, sorted and grouped by suit."""
    groups = {}
    for tile in sorted(tiles):
        letter = SUIT_LETTERS.get(tile.suit, "z")
        groups.setdefault(letter, []).append(str(tile)[0])
    return "".join(
        "".join(groups[letter]) + letter
        for letter in ("m", "p", "s", "z")
        if letter in groups
    )


# Convenience functions for creating specific tiles
def man(value: int) -> Tile:
    """Create a Characters tile (1-9m)"""
    return Tile(TileSuit.CHARACTERS, value)

def pin(value: int) -> Tile:
    """Create a Dots tile (1-9p)"""
    return Tile(TileSuit.DOTS, value)

def sou(value: int) -> Tile:
    """Create a Bamboos tile (1-9s)"""
    return Tile(TileSuit.BAMBOOS, value)

def wind(wind_type: WindType) -> Tile:
    """Create a Wind tile"""
    return Tile(TileSuit.WINDS, int(wind_type))

def dragon(dragon_type: DragonType) -> Tile:
    """Create a Dragon tile"""
    return Tile(TileSuit.DRAGONS, int(dragon_type))


# Named wind tiles
EAST = wind(WindType.EAST)
SOUTH = wind(WindType.SOUTH)
WEST = wind(WindType.WEST)
NORTH = wind(WindType.NORTH)

# Named dragon tiles
WHITE_DRAGON = dragon(DragonType.WHITE)
GREEN_DRAGON = dragon(DragonType.GREEN)
RED_DRAGON = dragon(DragonType.RED)

# The thirteen terminal and honor tiles (kokushi musou)
TERMINAL_HONOR_INDICES = (0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33)
