"""
Input validation.

Rejects contradictory context flags and impossible tile sets before
any decomposition is attempted.
"""

import logging
import numpy as np

from .context import HandInput, PlayerContext, GameContext, WinType
from .exceptions import InvalidInputError
from .melds import MeldType
from .rules import RuleSet
from .tiles import COPIES_PER_TYPE, man, pin, sou


logger = logging.getLogger(__name__)

FIVE_INDICES = (man(5).tile_index, pin(5).tile_index, sou(5).tile_index)
MAX_RED_FIVES = 4


def reject_input(reason: str) -> None:
    logger.info(f"Rejected input: {reason}")
    raise InvalidInputError(reason)


def validate_game_state(
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
    hand_input: HandInput,
) -> None:
    """Check the context flags for logical conflicts"""
    # Riichi conflicts
    if player.is_double_riichi and player.is_riichi:
        reject_input("Cannot be both Riichi and Double Riichi.")
    if player.is_ippatsu and not player.in_riichi:
        reject_input("Ippatsu requires Riichi or Double Riichi.")

    # Concealment conflicts
    if player.is_menzen and hand_input.open_melds:
        reject_input("Hand is declared concealed but has open melds.")
    if player.in_riichi and not player.is_menzen:
        reject_input("Riichi requires a concealed hand.")

    # Tsumo/Ron conflicts
    if game.is_haitei and win_type == WinType.RON:
        reject_input("Haitei (last draw) cannot be a Ron win.")
    if game.is_houtei and win_type == WinType.TSUMO:
        reject_input("Houtei (last discard) cannot be a Tsumo win.")
    if game.is_haitei and game.is_houtei:
        reject_input("Cannot be both Haitei and Houtei.")
    if game.is_rinshan and win_type == WinType.RON:
        reject_input("Rinshan (kan replacement draw) cannot be a Ron win.")
    if game.is_chankan and win_type == WinType.TSUMO:
        reject_input("Chankan (robbing a kan) cannot be a Tsumo win.")

    # Yakuman state conflicts
    if game.is_tenhou:
        if not player.is_dealer:
            reject_input("Tenhou requires the player to be the dealer.")
        if win_type != WinType.TSUMO:
            reject_input("Tenhou must be a Tsumo win.")
        if hand_input.has_calls:
            reject_input("Tenhou cannot have any calls (no open melds or kans).")
    if game.is_chiihou:
        if player.is_dealer:
            reject_input("Chiihou requires the player to be a non-dealer.")
        if win_type != WinType.TSUMO:
            reject_input("Chiihou must be a Tsumo win.")
        if hand_input.has_calls:
            reject_input("Chiihou cannot have any calls (no open melds or kans).")
    if game.is_renhou:
        if player.is_dealer:
            reject_input("Renhou requires the player to be a non-dealer.")
        if win_type != WinType.RON:
            reject_input("Renhou must be a Ron win.")


def validate_hand_composition(
    hand_input: HandInput,
    master_counts: np.ndarray,
    rules: RuleSet,
) -> None:
    """Check tile counts against the declared melds"""
    if len(hand_input.closed_kans) + len(hand_input.open_melds) > 4:
        reject_input("More than 4 total melds (kans + open melds) declared.")

    total_kans = len(hand_input.closed_kans) + sum(
        1 for m in hand_input.open_melds if m.meld_type == MeldType.QUAD
    )
    expected_tiles = 14 + total_kans
    if len(hand_input.hand_tiles) != expected_tiles:
        reject_input(
            f"Tile count {len(hand_input.hand_tiles)} does not match declared kans "
            f"(expected {expected_tiles} for {total_kans} kan)."
        )

    if hand_input.winning_tile not in hand_input.hand_tiles:
        reject_input("Winning tile is not present in the list of hand tiles.")

    if (master_counts > COPIES_PER_TYPE).any():
        reject_input(f"Hand contains more than {COPIES_PER_TYPE} of a single tile type.")

    num_akadora = hand_input.game_context.num_akadora
    if num_akadora < 0:
        reject_input("Number of akadora cannot be negative.")
    total_fives = int(sum(master_counts[i] for i in FIVE_INDICES))
    if num_akadora > total_fives:
        reject_input("Number of akadora exceeds the number of '5' tiles in the hand.")
    if num_akadora > MAX_RED_FIVES:
        reject_input(f"Number of akadora cannot be greater than {MAX_RED_FIVES}.")
    if num_akadora > rules.red_fives:
        reject_input(f"Number of akadora cannot be greater than {rules.red_fives} under {rules.name} rules.")


def validate_input(hand_input: HandInput, master_counts: np.ndarray, rules: RuleSet) -> None:
    """Run every check; raises InvalidInputError on the first failure."""
    validate_game_state(
        hand_input.player_context,
        hand_input.game_context,
        hand_input.win_type,
        hand_input,
    )
    validate_hand_composition(hand_input, master_counts, rules)
