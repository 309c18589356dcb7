"""
Tests for basic points and payments
"""

import pytest

from riichi_scorer.context import WinType
from riichi_scorer.points import (
    HandLimit, Payment, calculate_basic_points, calculate_payment,
    get_hand_limit, round_up_100, yakuman_basic_points,
)
from riichi_scorer.rules import EMA_RULES, TENHOU_RULES, WRC_RULES


class TestBasicPoints:
    """Test han/fu to basic points"""

    def test_fu_formula(self):
        assert calculate_basic_points(1, 30) == 240
        assert calculate_basic_points(2, 25) == 400
        assert calculate_basic_points(3, 40) == 1280
        assert calculate_basic_points(4, 30) == 1920

    @pytest.mark.parametrize("fu", [20, 30, 70, 110])
    def test_five_han_is_mangan_at_any_fu(self, fu):
        assert calculate_basic_points(5, fu) == 2000
        assert get_hand_limit(5, fu) == HandLimit.MANGAN

    def test_limit_tiers(self):
        assert calculate_basic_points(6, 30) == 3000
        assert calculate_basic_points(7, 30) == 3000
        assert calculate_basic_points(8, 30) == 4000
        assert calculate_basic_points(10, 30) == 4000
        assert calculate_basic_points(11, 30) == 6000
        assert calculate_basic_points(12, 30) == 6000
        assert calculate_basic_points(13, 30) == 8000
        assert get_hand_limit(13, 30) == HandLimit.YAKUMAN

    def test_fu_formula_capped_at_mangan(self):
        """4 han 40 fu would be 2560"""
        assert calculate_basic_points(4, 40) == 2000
        assert get_hand_limit(4, 40) == HandLimit.MANGAN
        assert get_hand_limit(3, 70) == HandLimit.MANGAN
        assert get_hand_limit(3, 60) == HandLimit.NONE

    def test_kazoe_disabled(self):
        """Without kazoe yakuman, 13 han stays sanbaiman"""
        assert calculate_basic_points(13, 30, EMA_RULES) == 6000
        assert get_hand_limit(15, 30, EMA_RULES) == HandLimit.SANBAIMAN

    def test_kiriage_mangan(self):
        assert calculate_basic_points(4, 30, TENHOU_RULES) == 1920
        assert calculate_basic_points(4, 30, WRC_RULES) == 2000
        assert calculate_basic_points(3, 60, WRC_RULES) == 2000
        assert calculate_basic_points(3, 50, WRC_RULES) == 1600

    def test_yakuman_multiples(self):
        assert yakuman_basic_points(1) == 8000
        assert yakuman_basic_points(2) == 16000

    def test_round_up_100(self):
        assert round_up_100(7680) == 7700
        assert round_up_100(7700) == 7700
        assert round_up_100(1) == 100
        assert round_up_100(0) == 0


class TestPayments:
    """Test payment splitting"""

    def test_non_dealer_ron(self):
        payment = calculate_payment(1920, is_dealer=False, win_type=WinType.RON)
        assert payment.total == 7700

    def test_dealer_ron(self):
        payment = calculate_payment(1920, is_dealer=True, win_type=WinType.RON)
        assert payment.total == 11600

    def test_non_dealer_tsumo(self):
        payment = calculate_payment(1920, is_dealer=False, win_type=WinType.TSUMO)
        assert payment == Payment(dealer_payment=3900, non_dealer_payment=2000, total=7900)
        assert str(payment) == "2000/3900 (7900)"

    def test_dealer_tsumo(self):
        payment = calculate_payment(1920, is_dealer=True, win_type=WinType.TSUMO)
        assert payment == Payment(dealer_payment=0, non_dealer_payment=3900, total=11700)
        assert str(payment) == "3900 all (11700)"

    def test_mangan(self):
        assert calculate_payment(2000, False, WinType.RON).total == 8000
        assert calculate_payment(2000, True, WinType.RON).total == 12000
        assert calculate_payment(2000, False, WinType.TSUMO).total == 8000

    def test_honba_ron(self):
        payment = calculate_payment(2000, False, WinType.RON, honba=2)
        assert payment.total == 8600

    def test_honba_tsumo(self):
        """Each of the three payers adds 100 per honba"""
        payment = calculate_payment(2000, False, WinType.TSUMO, honba=1)
        assert payment.dealer_payment == 4100
        assert payment.non_dealer_payment == 2100
        assert payment.total == 8300
