"""
Basic points and payments.

Basic points (基本点) come from han and fu; every payment is a multiple
of them rounded up to the next 100.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .context import WinType
from .rules import RuleSet, TENHOU_RULES


class HandLimit(IntEnum):
    """Limit tiers"""
    NONE = 0
    MANGAN = 1      # 満貫
    HANEMAN = 2     # 跳満
    BAIMAN = 3      # 倍満
    SANBAIMAN = 4   # 三倍満
    YAKUMAN = 5     # 役満


LIMIT_BASE_POINTS = {
    HandLimit.MANGAN: 2000,
    HandLimit.HANEMAN: 3000,
    HandLimit.BAIMAN: 4000,
    HandLimit.SANBAIMAN: 6000,
    HandLimit.YAKUMAN: 8000,
}

# Kiriage mangan: 4 han 30 fu / 3 han 60 fu round up to mangan
KIRIAGE_THRESHOLD = 1920


def round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


def get_hand_limit(han: int, fu: int, rules: Optional[RuleSet] = None) -> HandLimit:
    """Limit tier reached by a hand of ``han`` / ``fu``"""
    rules = rules or TENHOU_RULES
    if han >= 13:
        return HandLimit.YAKUMAN if rules.kazoe_yakuman else HandLimit.SANBAIMAN
    if han >= 11:
        return HandLimit.SANBAIMAN
    if han >= 8:
        return HandLimit.BAIMAN
    if han >= 6:
        return HandLimit.HANEMAN
    if han == 5:
        return HandLimit.MANGAN

    base = fu * (2 ** (han + 2))
    if base >= LIMIT_BASE_POINTS[HandLimit.MANGAN]:
        return HandLimit.MANGAN
    if rules.kiriage_mangan and base >= KIRIAGE_THRESHOLD:
        return HandLimit.MANGAN
    return HandLimit.NONE


def calculate_basic_points(han: int, fu: int, rules: Optional[RuleSet] = None) -> int:
    """
    Basic points for a non-yakuman hand.

    Args:
        han: Total han, dora included
        fu: Fu from ``calculate_fu``
        rules: Rule set (kazoe yakuman, kiriage mangan)

    Returns:
        ``fu * 2 ** (han + 2)`` below mangan, otherwise the limit value
    """
    limit = get_hand_limit(han, fu, rules)
    if limit != HandLimit.NONE:
        return LIMIT_BASE_POINTS[limit]
    return fu * (2 ** (han + 2))


def yakuman_basic_points(yakuman_count: int) -> int:
    return LIMIT_BASE_POINTS[HandLimit.YAKUMAN] * yakuman_count


@dataclass(frozen=True)
class Payment:
    """
    Points paid to the winner.

    On ron the discarder pays ``total`` alone and both per-player fields
    hold that amount. On tsumo ``dealer_payment`` is paid by the dealer and
    ``non_dealer_payment`` by each non-dealer (a dealer tsumo has no
    dealer payer, so ``dealer_payment`` is 0).
    """
    dealer_payment: int
    non_dealer_payment: int
    total: int

    def __str__(self) -> str:
        if self.dealer_payment == self.non_dealer_payment:
            return f"{self.total}"
        if self.dealer_payment == 0:
            return f"{self.non_dealer_payment} all ({self.total})"
        return f"{self.non_dealer_payment}/{self.dealer_payment} ({self.total})"


def calculate_payment(
    base_points: int,
    is_dealer: bool,
    win_type: WinType,
    honba: int = 0,
    rules: Optional[RuleSet] = None,
) -> Payment:
    """
    Split basic points into payments.

    Ron: the discarder pays 6x (dealer win) or 4x (non-dealer win).
    Tsumo: a dealer collects 2x from each player; a non-dealer collects
    2x from the dealer and 1x from the others. Each share is rounded up
    to 100. Honba add ``rules.honba_value`` each, split between the payers
    on tsumo.
    """
    rules = rules or TENHOU_RULES
    honba_total = honba * rules.honba_value

    if win_type == WinType.RON:
        multiplier = 6 if is_dealer else 4
        total = round_up_100(base_points * multiplier) + honba_total
        return Payment(total, total, total)

    honba_share = honba_total // 3
    if is_dealer:
        each = round_up_100(base_points * 2) + honba_share
        return Payment(0, each, each * 3)

    from_dealer = round_up_100(base_points * 2) + honba_share
    from_others = round_up_100(base_points) + honba_share
    return Payment(from_dealer, from_others, from_dealer + from_others * 2)
