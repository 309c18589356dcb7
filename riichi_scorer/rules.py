"""
Riichi Mahjong Rule Sets

Defines the scoring options that differ between rule variants:
- Tenhou (Japanese online platform)
- EMA (European Mahjong Association)
- WRC (World Riichi Championship)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Scoring configuration for Riichi Mahjong.

    Only the options that change how a single winning hand is valued
    live here; table rules (uma, oka, number of rounds) do not.
    """

    name: str = "Default"

    # Kuitan (open tanyao)
    allow_kuitan: bool = True

    # Double yakuman (suuankou tanki, kokushi 13-sided, junsei chuuren)
    double_yakuman: bool = True

    # Kazoe yakuman (13+ counted han score as yakuman, else sanbaiman)
    kazoe_yakuman: bool = True

    # Kiriage mangan (4 han 30 fu / 3 han 60 fu round up to mangan)
    kiriage_mangan: bool = False

    # Uradora counted for riichi wins
    uradora_on_riichi_win: bool = True

    # Red dora (akadora): maximum number of red 5s in the set
    red_fives: int = 3

    # Points per honba (counter stick) on a win
    honba_value: int = 300

    def __repr__(self) -> str:
        return f"RuleSet({self.name})"


# Tenhou Rules (Japanese online platform)
TENHOU_RULES = RuleSet(
    name="Tenhou",
    allow_kuitan=True,
    double_yakuman=True,
    kazoe_yakuman=True,
    kiriage_mangan=False,
    uradora_on_riichi_win=True,
    red_fives=3,  # One red 5 in each suit
    honba_value=300,
)


# EMA (European Mahjong Association) Rules
EMA_RULES = RuleSet(
    name="EMA",
    allow_kuitan=True,
    double_yakuman=False,
    kazoe_yakuman=False,  # 13+ han stays sanbaiman
    kiriage_mangan=False,
    uradora_on_riichi_win=True,
    red_fives=0,  # No red dora in EMA
    honba_value=300,
)


# WRC (World Riichi Championship) Rules
WRC_RULES = RuleSet(
    name="WRC",
    allow_kuitan=True,
    double_yakuman=False,
    kazoe_yakuman=False,
    kiriage_mangan=True,
    uradora_on_riichi_win=True,
    red_fives=0,
    honba_value=300,
)


RULE_PRESETS = {
    "tenhou": TENHOU_RULES,
    "ema": EMA_RULES,
    "wrc": WRC_RULES,
}
