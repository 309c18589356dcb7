"""
Riichi Mahjong Scoring System

Scores a winning hand end to end:
- Hand decomposition and wait
- Yaku, yakuman and dora
- Fu
- Basic points, limits and payments
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .context import HandInput
from .decomposer import organize_hand
from .fu import calculate_fu
from .hand import HandStructure
from .points import (
    HandLimit, Payment, calculate_basic_points, calculate_payment,
    get_hand_limit, yakuman_basic_points,
)
from .rules import RuleSet, TENHOU_RULES
from .yaku import Yaku, count_yakuman, han_value, info, is_yakuman
from .yaku_checker import check_all_yaku


logger = logging.getLogger(__name__)


@dataclass
class ScoringResult:
    """Result of scoring calculation"""
    han: int = 0
    fu: int = 0
    yaku_list: List[Yaku] = field(default_factory=list)
    limit: HandLimit = HandLimit.NONE
    base_points: int = 0
    dora_count: int = 0
    uradora_count: int = 0
    akadora_count: int = 0
    is_yakuman: bool = False
    yakuman_count: int = 0
    hand: Optional[HandStructure] = None
    payment: Optional[Payment] = None

    def add_yaku(self, yaku: Yaku, is_open: bool = False):
        """Add a yaku to the result"""
        self.yaku_list.append(yaku)
        if is_yakuman(yaku):
            self.is_yakuman = True
            return
        self.han += han_value(yaku, is_open)
        if yaku == Yaku.DORA:
            self.dora_count += 1
        elif yaku == Yaku.URA_DORA:
            self.uradora_count += 1
        elif yaku == Yaku.AKA_DORA:
            self.akadora_count += 1

    @property
    def score(self) -> int:
        """Total points the winner collects"""
        return self.payment.total if self.payment else 0

    def summary(self) -> str:
        """Human readable breakdown"""
        lines = []
        for yaku in self.yaku_list:
            yaku_info = info(yaku)
            lines.append(f"  {yaku_info.name} ({yaku_info.japanese_name})")
        if self.is_yakuman:
            header = f"{self.yakuman_count}x Yakuman"
        else:
            header = f"{self.han} han {self.fu} fu"
            if self.limit != HandLimit.NONE:
                header += f" {self.limit.name.title()}"
        lines.insert(0, header)
        lines.append(f"Points: {self.payment}")
        return "\n".join(lines)


class RiichiScorer:
    """
    Riichi Mahjong hand scorer.

    Usage:
        scorer = RiichiScorer(TENHOU_RULES)
        result = scorer.calculate(hand_input)
        print(result.han, result.fu, result.score)
    """

    def __init__(self, rules: Optional[RuleSet] = None):
        self.rules = rules or TENHOU_RULES

    def calculate(self, hand_input: HandInput) -> ScoringResult:
        """
        Score a winning hand.

        Raises:
            InvalidInputError: The input is contradictory
            InvalidHandError: The tiles do not form a hand with a yaku
        """
        player = hand_input.player_context
        game = hand_input.game_context
        win_type = hand_input.win_type

        organization = organize_hand(hand_input, self.rules)
        yaku_result = check_all_yaku(organization, player, game, win_type, self.rules)

        result = ScoringResult(hand=yaku_result.hand_structure)
        is_open = not yaku_result.is_closed
        for yaku in yaku_result.yaku_list:
            result.add_yaku(yaku, is_open)

        if result.is_yakuman:
            result.yakuman_count = count_yakuman(result.yaku_list, self.rules.double_yakuman)
            result.han = 13 * result.yakuman_count
            result.limit = HandLimit.YAKUMAN
            result.base_points = yakuman_basic_points(result.yakuman_count)
            logger.debug(f"Yakuman x{result.yakuman_count}, base={result.base_points}")
        else:
            result.fu = calculate_fu(
                yaku_result.hand_structure, result.yaku_list, player, game, win_type
            )
            result.limit = get_hand_limit(result.han, result.fu, self.rules)
            result.base_points = calculate_basic_points(result.han, result.fu, self.rules)
            logger.debug(f"{result.han} han {result.fu} fu, base={result.base_points}")

        result.payment = calculate_payment(
            result.base_points, player.is_dealer, win_type, game.honba, self.rules
        )
        return result


def calculate_agari(hand_input: HandInput, rules: Optional[RuleSet] = None) -> ScoringResult:
    """Score a winning hand with a one-off scorer"""
    return RiichiScorer(rules).calculate(hand_input)
