"""
Irregular hand shapes: seven pairs and thirteen orphans.

Both checks work on the full 34-count of the hand.
"""

from typing import List, Optional
import numpy as np

from .tiles import Tile, TERMINAL_HONOR_INDICES, index_to_tile
from .melds import Pair
from .hand import SevenPairsHand, ThirteenOrphansHand, WaitShape


def check_seven_pairs(counts: np.ndarray, winning_tile: Tile) -> Optional[SevenPairsHand]:
    """
    Seven pairs (七対子).

    Every held tile must appear exactly twice, or four times (two pairs).
    """
    pairs: List[Pair] = []
    for index in np.flatnonzero(counts):
        count = int(counts[index])
        if count not in (2, 4):
            return None  # Has a 1 or 3
        tile = index_to_tile(int(index))
        pairs.extend([Pair(tile)] * (count // 2))

    if len(pairs) != 7:
        return None
    return SevenPairsHand(tuple(pairs), winning_tile, WaitShape.TANKI)


def check_thirteen_orphans(counts: np.ndarray, winning_tile: Tile) -> Optional[ThirteenOrphansHand]:
    """
    Thirteen orphans (国士無双).

    One of each terminal and honor, one of them doubled. The wait is
    thirteen-sided when the doubled tile is the winning tile, i.e. the
    player held one of each before winning.
    """
    if winning_tile.tile_index not in TERMINAL_HONOR_INDICES:
        return None

    orphan_counts = counts[list(TERMINAL_HONOR_INDICES)]
    if int(counts.sum()) != int(orphan_counts.sum()):
        return None  # Has a simple
    if (orphan_counts == 0).any() or (orphan_counts > 2).any():
        return None
    pair_indices = [i for i in TERMINAL_HONOR_INDICES if counts[i] == 2]
    if len(pair_indices) != 1:
        return None

    pair = Pair(index_to_tile(pair_indices[0]))
    if pair.tile == winning_tile:
        wait = WaitShape.KOKUSHI_THIRTEEN
    else:
        wait = WaitShape.KOKUSHI_SINGLE

    tiles = tuple(index_to_tile(i) for i in TERMINAL_HONOR_INDICES)
    return ThirteenOrphansHand(tiles, pair, winning_tile, wait)
