"""
Hand structures.

The decomposer produces either a StandardHand or an IrregularHand.
The yaku checker then settles on the final shape: StandardHand,
NineGatesHand, SevenPairsHand or ThirteenOrphansHand.
"""

from enum import IntEnum
from dataclasses import dataclass
from typing import List, Tuple, Union
import numpy as np

from .tiles import Tile
from .melds import Meld, Pair


class WaitShape(IntEnum):
    """Type of wait (待ち machi) that the winning tile completed"""
    RYANMEN = 0   # 両面 two-sided, 23 waiting on 1/4
    TANKI = 1     # 単騎 pair wait
    PENCHAN = 2   # 辺張 edge, 12 waiting on 3 / 89 waiting on 7
    KANCHAN = 3   # 嵌張 closed, 46 waiting on 5
    SHANPON = 4   # 双碰 triplet-pair, 22+55 waiting on 2/5

    # Special waits for yakuman
    KOKUSHI_SINGLE = 5    # 国士無双 single wait
    KOKUSHI_THIRTEEN = 6  # 国士無双十三面 thirteen-sided wait
    NINE_SIDED = 7        # 純正九蓮宝燈 nine-sided wait


@dataclass(frozen=True)
class StandardHand:
    """Four melds and one pair (四面子一雀頭)"""
    melds: Tuple[Meld, ...]
    pair: Pair
    winning_tile: Tile
    wait: WaitShape

    @property
    def all_tiles(self) -> List[Tile]:
        """Every tile of the hand; quads contribute four"""
        tiles = list(self.pair.tiles)
        for meld in self.melds:
            tiles.extend(meld.tiles)
        return tiles

    @property
    def groups(self) -> List[Tuple[Tile, ...]]:
        """The five units: pair followed by the four melds"""
        return [self.pair.tiles] + [meld.tiles for meld in self.melds]

    @property
    def sequences(self) -> List[Meld]:
        return [m for m in self.melds if m.is_sequence]

    @property
    def triplets(self) -> List[Meld]:
        """Triplets and quads"""
        return [m for m in self.melds if m.is_triplet_or_quad]

    @property
    def is_open(self) -> bool:
        return any(m.is_open for m in self.melds)


@dataclass(frozen=True, eq=False)
class IrregularHand:
    """
    Tiles that did not split into four melds and a pair.

    ``counts`` is the full 34-count of the hand, declared melds included.
    """
    counts: np.ndarray
    winning_tile: Tile
    has_calls: bool = False


@dataclass(frozen=True)
class SevenPairsHand:
    """Seven pairs (七対子 chiitoitsu); a tile held four times is two pairs"""
    pairs: Tuple[Pair, ...]
    winning_tile: Tile
    wait: WaitShape = WaitShape.TANKI

    @property
    def all_tiles(self) -> List[Tile]:
        tiles: List[Tile] = []
        for pair in self.pairs:
            tiles.extend(pair.tiles)
        return tiles


@dataclass(frozen=True)
class ThirteenOrphansHand:
    """Thirteen orphans (国士無双 kokushi musou)"""
    tiles: Tuple[Tile, ...]
    pair: Pair
    winning_tile: Tile
    wait: WaitShape

    @property
    def all_tiles(self) -> List[Tile]:
        return list(self.tiles) + [self.pair.tile]


@dataclass(frozen=True)
class NineGatesHand:
    """
    Nine gates (九蓮宝燈 chuuren poutou).

    Still a standard hand for every other purpose; ``is_true_wait`` marks
    the nine-sided variant (純正).
    """
    hand: StandardHand
    is_true_wait: bool

    @property
    def winning_tile(self) -> Tile:
        return self.hand.winning_tile

    @property
    def wait(self) -> WaitShape:
        return WaitShape.NINE_SIDED if self.is_true_wait else self.hand.wait

    @property
    def all_tiles(self) -> List[Tile]:
        return self.hand.all_tiles


HandOrganization = Union[StandardHand, IrregularHand]
HandStructure = Union[StandardHand, NineGatesHand, SevenPairsHand, ThirteenOrphansHand]
