"""
Riichi Mahjong Hand Scorer
Japanese Mahjong winning-hand scoring with support for Tenhou, EMA and WRC rules
"""

from .tiles import Tile, TileSuit, WindType, DragonType, parse_tiles
from .melds import Meld, MeldType, Pair, DeclaredMeld
from .context import HandInput, PlayerContext, GameContext, WinType
from .exceptions import ScoringError, InvalidInputError, InvalidHandError
from .hand import (
    WaitShape, StandardHand, IrregularHand, SevenPairsHand,
    ThirteenOrphansHand, NineGatesHand,
)
from .decomposer import organize_hand
from .wait import determine_wait, possible_waits
from .yaku import Yaku, YakuType, YAKU_INFO
from .yaku_checker import check_all_yaku, YakuResult
from .dora import DoraSystem, get_dora_tile
from .fu import calculate_fu
from .points import HandLimit, Payment, calculate_basic_points, calculate_payment, round_up_100
from .scoring import RiichiScorer, ScoringResult, calculate_agari
from .rules import RuleSet, EMA_RULES, TENHOU_RULES, WRC_RULES

__version__ = "0.1.0"
__all__ = [
    "Tile",
    "TileSuit",
    "WindType",
    "DragonType",
    "parse_tiles",
    "Meld",
    "MeldType",
    "Pair",
    "DeclaredMeld",
    "HandInput",
    "PlayerContext",
    "GameContext",
    "WinType",
    "ScoringError",
    "InvalidInputError",
    "InvalidHandError",
    "WaitShape",
    "StandardHand",
    "IrregularHand",
    "SevenPairsHand",
    "ThirteenOrphansHand",
    "NineGatesHand",
    "organize_hand",
    "determine_wait",
    "possible_waits",
    "Yaku",
    "YakuType",
    "YAKU_INFO",
    "check_all_yaku",
    "YakuResult",
    "DoraSystem",
    "get_dora_tile",
    "calculate_fu",
    "HandLimit",
    "Payment",
    "calculate_basic_points",
    "calculate_payment",
    "round_up_100",
    "RiichiScorer",
    "ScoringResult",
    "calculate_agari",
    "RuleSet",
    "EMA_RULES",
    "TENHOU_RULES",
    "WRC_RULES",
]
