"""
Fu (minipoint) calculation.
"""

from typing import List

from .context import GameContext, PlayerContext, WinType
from .hand import HandStructure, SevenPairsHand, StandardHand, WaitShape
from .melds import Meld, Pair
from .wait import possible_waits
from .yaku import Yaku, is_yakuman


BASE_FU = 20
CHIITOITSU_FU = 25
PINFU_TSUMO_FU = 20
PINFU_RON_FU = 30
OPEN_MINIMUM_FU = 30

MENZEN_RON_FU = 10
TSUMO_FU = 2
WAIT_FU = 2
VALUE_PAIR_FU = 2

# Wait shapes worth 2 fu
FU_WAITS = (WaitShape.KANCHAN, WaitShape.PENCHAN, WaitShape.TANKI)


def round_up_10(fu: int) -> int:
    return ((fu + 9) // 10) * 10


def calculate_fu(
    hand: HandStructure,
    yaku_list: List[Yaku],
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
) -> int:
    """
    Calculate fu for a scored hand.

    Yakuman hands have no fu (0). Seven pairs is always 25.

    Args:
        hand: Settled hand structure from the yaku checker
        yaku_list: Yaku awarded to the hand
        player: Context of the winning player
        game: Context of the current round
        win_type: Tsumo or Ron

    Returns:
        Fu rounded up to the next 10 (25 for seven pairs)
    """
    if any(is_yakuman(y) for y in yaku_list):
        return 0
    if isinstance(hand, SevenPairsHand):
        return CHIITOITSU_FU
    if not isinstance(hand, StandardHand):
        raise TypeError(f"Fu is only defined for standard hands, got {type(hand).__name__}")

    is_tsumo = win_type == WinType.TSUMO
    if Yaku.PINFU in yaku_list:
        return PINFU_TSUMO_FU if is_tsumo else PINFU_RON_FU

    is_closed = player.is_menzen and not hand.is_open

    fu = BASE_FU
    if is_tsumo:
        fu += TSUMO_FU
    elif is_closed:
        fu += MENZEN_RON_FU

    # The winning tile may complete more than one unit; take the reading
    # worth the most fu
    waits = possible_waits(hand.melds, hand.pair, hand.winning_tile)
    if any(w in FU_WAITS for w in waits):
        fu += WAIT_FU

    fu += pair_fu(hand.pair, player, game)
    for meld in hand.melds:
        fu += meld_fu(meld, hand, win_type)

    fu = round_up_10(fu)

    # Open hand with no fu at all
    if fu == BASE_FU:
        fu = OPEN_MINIMUM_FU
    return fu


def pair_fu(pair: Pair, player: PlayerContext, game: GameContext) -> int:
    """Dragon pair, seat wind pair and round wind pair each give 2 fu"""
    tile = pair.tile
    if tile.is_dragon:
        return VALUE_PAIR_FU
    fu = 0
    if tile.is_wind:
        if tile.value == player.seat_wind:
            fu += VALUE_PAIR_FU
        if tile.value == game.round_wind:
            fu += VALUE_PAIR_FU
    return fu


def meld_fu(meld: Meld, hand: StandardHand, win_type: WinType) -> int:
    """
    Fu for one meld.

    Triplet: 2 simple / 4 terminal-honor when open, doubled when concealed.
    Quad: 8 / 16 when open, 16 / 32 when concealed. A triplet completed by
    ron counts as open.
    """
    if meld.is_sequence:
        return 0

    fu = 4 if meld.base_tile.is_terminal_or_honor else 2
    if meld.is_quad:
        fu *= 4

    concealed = not meld.is_open
    if (
        concealed
        and not meld.is_quad
        and win_type == WinType.RON
        and hand.wait == WaitShape.SHANPON
        and meld.base_tile == hand.winning_tile
    ):
        concealed = False

    return fu * 2 if concealed else fu
