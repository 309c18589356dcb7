"""
Per-evaluation context: who won, how, and under which table state.
"""

from enum import IntEnum
from dataclasses import dataclass, field
from typing import List, Tuple

from .tiles import Tile, WindType
from .melds import DeclaredMeld


class WinType(IntEnum):
    """How the hand was won"""
    TSUMO = 0  # 自摸 self-draw
    RON = 1    # 栄和 claimed discard


@dataclass(frozen=True)
class PlayerContext:
    """
    Context for the winning player.

    Attributes:
        seat_wind: The player's own wind (jikaze)
        is_dealer: Player is the dealer (oya)
        is_riichi: Player declared riichi
        is_double_riichi: Player declared riichi on the first turn
        is_ippatsu: Win within one go-around of riichi
        is_menzen: Hand is fully concealed (closed kans allowed)
    """
    seat_wind: WindType = WindType.EAST
    is_dealer: bool = False
    is_riichi: bool = False
    is_double_riichi: bool = False
    is_ippatsu: bool = False
    is_menzen: bool = True

    @property
    def in_riichi(self) -> bool:
        return self.is_riichi or self.is_double_riichi


@dataclass(frozen=True)
class GameContext:
    """
    Context for the current round.

    Attributes:
        round_wind: Prevalent wind (bakaze)
        honba: Counter sticks on the table
        dora_indicators: Face-up dora indicator tiles
        uradora_indicators: Under-dora indicators, only scored under riichi
        num_akadora: Red fives held in the winning hand
        is_tenhou: Dealer wins on the initial deal
        is_chiihou: Non-dealer wins on the first draw
        is_renhou: Non-dealer wins on a discard before the first draw
        is_haitei: Win on the last tile of the wall
        is_houtei: Win on the last discard
        is_rinshan: Win on the replacement tile after a kan
        is_chankan: Win by robbing a kan
    """
    round_wind: WindType = WindType.EAST
    honba: int = 0
    dora_indicators: Tuple[Tile, ...] = ()
    uradora_indicators: Tuple[Tile, ...] = ()
    num_akadora: int = 0
    is_tenhou: bool = False
    is_chiihou: bool = False
    is_renhou: bool = False
    is_haitei: bool = False
    is_houtei: bool = False
    is_rinshan: bool = False
    is_chankan: bool = False


@dataclass
class HandInput:
    """
    Everything the scorer needs for one winning hand.

    Attributes:
        hand_tiles: Every tile the player holds, including the winning tile
            and the tiles of declared melds and closed kans
        winning_tile: The tile that completed the hand
        open_melds: Melds called from other players' discards
        closed_kans: Representative tiles of concealed kans
        player_context: Winning player's state
        game_context: Round state
        win_type: Tsumo or Ron
    """
    hand_tiles: List[Tile]
    winning_tile: Tile
    open_melds: List[DeclaredMeld] = field(default_factory=list)
    closed_kans: List[Tile] = field(default_factory=list)
    player_context: PlayerContext = field(default_factory=PlayerContext)
    game_context: GameContext = field(default_factory=GameContext)
    win_type: WinType = WinType.RON

    @property
    def has_calls(self) -> bool:
        return bool(self.open_melds or self.closed_kans)
