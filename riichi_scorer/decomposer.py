"""
Hand decomposition.

Splits a validated hand into four melds and a pair. Declared melds are
fixed first; the concealed remainder is searched pair-first, then by a
recursive triplet-before-sequence search over a 34-count array. The
first decomposition found is used. Hands that do not split are returned
as IrregularHand for the seven pairs / thirteen orphans checks.
"""

import logging
from typing import List, Optional
import numpy as np

from .context import HandInput
from .hand import HandOrganization, IrregularHand, StandardHand, WaitShape
from .melds import Meld, MeldType, Pair
from .rules import RuleSet, TENHOU_RULES
from .tiles import index_to_tile, to_count_array
from .validation import reject_input, validate_input
from .wait import determine_wait


logger = logging.getLogger(__name__)


def find_melds(counts: np.ndarray, melds: List[Meld]) -> bool:
    """
    Exhaust ``counts`` into concealed melds.

    Works on the lowest remaining tile: triplet first, then sequence.
    ``counts`` and ``melds`` are restored whenever a branch fails.
    """
    nonzero = np.flatnonzero(counts)
    if nonzero.size == 0:
        return True
    i = int(nonzero[0])

    # Try triplet
    if counts[i] >= 3:
        counts[i] -= 3
        melds.append(Meld.triplet(index_to_tile(i)))
        if find_melds(counts, melds):
            return True
        melds.pop()
        counts[i] += 3

    # Try sequence
    if i < 27 and i % 9 < 7 and counts[i + 1] > 0 and counts[i + 2] > 0:
        counts[i:i + 3] -= 1
        melds.append(Meld.sequence(index_to_tile(i)))
        if find_melds(counts, melds):
            return True
        melds.pop()
        counts[i:i + 3] += 1

    return False


def _remove_declared(hand_input: HandInput, concealed_counts: np.ndarray) -> List[Meld]:
    """Take closed kans and open melds out of the counts"""
    declared: List[Meld] = []

    for kan_tile in hand_input.closed_kans:
        index = kan_tile.tile_index
        if concealed_counts[index] < 4:
            reject_input("Declared closed kan is not present in hand tiles.")
        concealed_counts[index] -= 4
        declared.append(Meld.quad(kan_tile))

    for called in hand_input.open_melds:
        index = called.tile.tile_index
        if called.meld_type == MeldType.TRIPLET:
            if concealed_counts[index] < 3:
                reject_input("Declared pon is not present in hand tiles.")
            concealed_counts[index] -= 3
        elif called.meld_type == MeldType.QUAD:
            if concealed_counts[index] < 4:
                reject_input("Declared open kan is not present in hand tiles.")
            concealed_counts[index] -= 4
        else:
            if index >= 27 or index % 9 >= 7:
                reject_input("Invalid representative tile for chi (must be 1-7 of a suit).")
            if (concealed_counts[index:index + 3] < 1).any():
                reject_input("Declared chi is not present in hand tiles.")
            concealed_counts[index:index + 3] -= 1
        declared.append(called.to_meld())

    return declared


def _find_standard(
    concealed_counts: np.ndarray,
    declared: List[Meld],
    hand_input: HandInput,
) -> Optional[StandardHand]:
    winning_tile = hand_input.winning_tile
    melds_needed = 4 - len(declared)

    # Four declared melds: only the pair is left
    if melds_needed == 0:
        pairs = np.flatnonzero(concealed_counts == 2)
        if pairs.size != 1 or int(concealed_counts.sum()) != 2:
            return None
        pair = Pair(index_to_tile(int(pairs[0])))
        if pair.tile != winning_tile:
            return None
        return StandardHand(tuple(declared), pair, winning_tile, WaitShape.TANKI)

    for i in np.flatnonzero(concealed_counts >= 2):
        # Each candidate pair searches its own copy of the counts
        counts = concealed_counts.copy()
        counts[i] -= 2
        closed_melds: List[Meld] = []
        if find_melds(counts, closed_melds) and len(closed_melds) == melds_needed:
            pair = Pair(index_to_tile(int(i)))
            melds = tuple(declared + closed_melds)
            wait = determine_wait(melds, pair, winning_tile)
            return StandardHand(melds, pair, winning_tile, wait)

    return None


def organize_hand(hand_input: HandInput, rules: Optional[RuleSet] = None) -> HandOrganization:
    """
    Validate a hand and split it into melds.

    Returns:
        StandardHand when four melds and a pair are found, otherwise an
        IrregularHand carrying the full 34-count of the hand.

    Raises:
        InvalidInputError: The input is contradictory or inconsistent.
    """
    rules = rules or TENHOU_RULES
    master_counts = to_count_array(hand_input.hand_tiles)
    validate_input(hand_input, master_counts, rules)

    concealed_counts = master_counts.copy()
    declared = _remove_declared(hand_input, concealed_counts)
    if concealed_counts[hand_input.winning_tile.tile_index] == 0:
        reject_input("Winning tile is only present inside a declared meld.")

    standard = _find_standard(concealed_counts, declared, hand_input)
    if standard is not None:
        logger.debug(
            f"Standard decomposition: {' '.join(str(m) for m in standard.melds)} "
            f"{standard.pair} wait={standard.wait.name}"
        )
        return standard

    logger.debug("No standard decomposition; treating hand as irregular")
    return IrregularHand(
        counts=master_counts,
        winning_tile=hand_input.winning_tile,
        has_calls=hand_input.has_calls,
    )
