"""
Melds and pairs.

A winning hand is built from four melds and one pair. Melds are either
declared by the player (open calls, closed kans) or found by the
decomposer in the concealed part of the hand.
"""

from enum import IntEnum
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .tiles import Tile, NUMBERED_SUITS, NUM_TILE_TYPES, index_to_tile


class MeldType(IntEnum):
    """Types of melds"""
    SEQUENCE = 0  # 順子 shuntsu
    TRIPLET = 1   # 刻子 koutsu
    QUAD = 2      # 槓子 kantsu


@dataclass(frozen=True)
class Meld:
    """
    Represents a meld (group of tiles).

    Attributes:
        meld_type: Sequence, Triplet or Quad
        tiles: The tiles of the meld, lowest first for sequences
        is_open: Whether the meld was formed by calling a discard
    """
    meld_type: MeldType
    tiles: Tuple[Tile, ...]
    is_open: bool = False

    def __post_init__(self):
        """Validate meld"""
        if self.meld_type == MeldType.SEQUENCE:
            if len(self.tiles) != 3:
                raise ValueError("Sequence must have exactly 3 tiles")
            if not self._is_valid_sequence(self.tiles):
                raise ValueError(f"Invalid sequence: {self.tiles}")
        elif self.meld_type == MeldType.TRIPLET:
            if len(self.tiles) != 3:
                raise ValueError("Triplet must have exactly 3 tiles")
            if not all(t == self.tiles[0] for t in self.tiles):
                raise ValueError("Triplet tiles must be identical")
        elif self.meld_type == MeldType.QUAD:
            if len(self.tiles) != 4:
                raise ValueError("Quad must have exactly 4 tiles")
            if not all(t == self.tiles[0] for t in self.tiles):
                raise ValueError("Quad tiles must be identical")

    @staticmethod
    def _is_valid_sequence(tiles: Tuple[Tile, ...]) -> bool:
        """Three consecutive tiles of one numbered suit, in ascending order"""
        if tiles[0].suit not in NUMBERED_SUITS:
            return False
        if not all(t.suit == tiles[0].suit for t in tiles):
            return False
        return (
            tiles[0].value <= 7
            and tiles[1].value == tiles[0].value + 1
            and tiles[2].value == tiles[1].value + 1
        )

    @classmethod
    def sequence(cls, first: Tile, is_open: bool = False) -> 'Meld':
        """Build the sequence starting at ``first``."""
        index = first.tile_index
        tiles = (first, index_to_tile(index + 1), index_to_tile(index + 2))
        return cls(MeldType.SEQUENCE, tiles, is_open)

    @classmethod
    def triplet(cls, tile: Tile, is_open: bool = False) -> 'Meld':
        return cls(MeldType.TRIPLET, (tile,) * 3, is_open)

    @classmethod
    def quad(cls, tile: Tile, is_open: bool = False) -> 'Meld':
        return cls(MeldType.QUAD, (tile,) * 4, is_open)

    @property
    def base_tile(self) -> Tile:
        """Lowest tile of a sequence, or the repeated tile"""
        return self.tiles[0]

    @property
    def is_sequence(self) -> bool:
        return self.meld_type == MeldType.SEQUENCE

    @property
    def is_triplet_or_quad(self) -> bool:
        return self.meld_type in (MeldType.TRIPLET, MeldType.QUAD)

    @property
    def is_quad(self) -> bool:
        return self.meld_type == MeldType.QUAD

    def contains(self, tile: Tile) -> bool:
        return tile in self.tiles

    def to_count_array(self) -> np.ndarray:
        """Convert meld to 34-element count array"""
        counts = np.zeros(NUM_TILE_TYPES, dtype=np.int8)
        for tile in self.tiles:
            counts[tile.tile_index] += 1
        return counts

    def __str__(self) -> str:
        tiles_str = "".join(str(t) for t in self.tiles)
        state = "open" if self.is_open else "closed"
        return f"[{state} {self.meld_type.name.lower()}: {tiles_str}]"


@dataclass(frozen=True)
class Pair:
    """The pair (雀頭 jantou) of a standard hand"""
    tile: Tile

    @property
    def tiles(self) -> Tuple[Tile, Tile]:
        return (self.tile, self.tile)

    def __str__(self) -> str:
        return f"[pair: {self.tile}{self.tile}]"


@dataclass(frozen=True)
class DeclaredMeld:
    """
    A meld the player called before winning.

    Attributes:
        meld_type: SEQUENCE (chi), TRIPLET (pon) or QUAD (open kan)
        tile: Representative tile; the lowest tile for a chi
    """
    meld_type: MeldType
    tile: Tile

    def to_meld(self) -> Meld:
        if self.meld_type == MeldType.SEQUENCE:
            return Meld.sequence(self.tile, is_open=True)
        if self.meld_type == MeldType.TRIPLET:
            return Meld.triplet(self.tile, is_open=True)
        return Meld.quad(self.tile, is_open=True)
