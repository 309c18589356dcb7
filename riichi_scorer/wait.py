"""
Wait shape analysis for standard hands.
"""

from typing import List, Sequence

from .tiles import Tile
from .melds import Meld, Pair
from .hand import WaitShape


def _sequence_wait(meld: Meld, winning_tile: Tile) -> WaitShape:
    """Wait for a winning tile that sits inside a sequence"""
    low, middle, high = meld.tiles
    if winning_tile == middle:
        return WaitShape.KANCHAN
    if winning_tile == low:
        # 89 waiting on 7
        return WaitShape.PENCHAN if high.value == 9 else WaitShape.RYANMEN
    # 12 waiting on 3
    return WaitShape.PENCHAN if low.value == 1 else WaitShape.RYANMEN


def _meld_wait(meld: Meld, winning_tile: Tile) -> WaitShape:
    if meld.is_triplet_or_quad:
        return WaitShape.SHANPON
    return _sequence_wait(meld, winning_tile)


def determine_wait(melds: Sequence[Meld], pair: Pair, winning_tile: Tile) -> WaitShape:
    """
    Single wait for a completed decomposition.

    The pair is checked first, then the melds in order; the first unit
    holding the winning tile decides. Open melds are skipped since the
    winning tile cannot sit in an already called meld.
    """
    if winning_tile == pair.tile:
        return WaitShape.TANKI

    for meld in melds:
        if not meld.is_open and meld.contains(winning_tile):
            return _meld_wait(meld, winning_tile)

    raise AssertionError(f"Winning tile {winning_tile} is not in the pair or any meld")


def possible_waits(melds: Sequence[Meld], pair: Pair, winning_tile: Tile) -> List[WaitShape]:
    """
    Every wait consistent with the decomposition.

    A tile that appears both in the pair and in a sequence, or in two
    different sequences, could have completed either unit; all of them
    are returned in pair-then-meld order.
    """
    waits: List[WaitShape] = []
    if winning_tile == pair.tile:
        waits.append(WaitShape.TANKI)

    for meld in melds:
        if not meld.is_open and meld.contains(winning_tile):
            wait = _meld_wait(meld, winning_tile)
            if wait not in waits:
                waits.append(wait)

    if not waits:
        raise AssertionError(f"Winning tile {winning_tile} is not in the pair or any meld")
    return waits
