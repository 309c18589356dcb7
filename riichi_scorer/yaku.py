"""
Yaku catalogue.

Every scoring pattern (and the three kinds of dora) with its han value
when the hand is closed and when it is open. A han_open of 0 means the
yaku requires a closed hand.
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Dict, Iterable


class YakuType(IntEnum):
    """Categories of Yaku"""
    NORMAL = 0          # Regular yaku
    YAKUMAN = 1         # Limit hand (yakuman)
    DOUBLE_YAKUMAN = 2  # Double yakuman
    DORA = 3            # Bonus tile, not a yaku


class Yaku(IntEnum):
    """Every pattern a hand can be awarded"""
    # 1 Han
    RIICHI = auto()
    IPPATSU = auto()
    MENZEN_TSUMO = auto()
    PINFU = auto()
    IIPEIKOU = auto()
    HAITEI = auto()
    HOUTEI = auto()
    RINSHAN = auto()
    CHANKAN = auto()
    TANYAO = auto()
    YAKUHAI_SEAT_WIND = auto()
    YAKUHAI_ROUND_WIND = auto()
    YAKUHAI_DRAGON = auto()

    # 2 Han
    DOUBLE_RIICHI = auto()
    CHIITOITSU = auto()
    SANSHOKU_DOUJUN = auto()
    ITTSU = auto()
    CHANTA = auto()
    TOITOI = auto()
    SANANKOU = auto()
    SANSHOKU_DOUKOU = auto()
    SANKANTSU = auto()
    SHOUSANGEN = auto()
    HONROUTOU = auto()

    # 3 Han
    RYANPEIKOU = auto()
    JUNCHAN = auto()
    HONITSU = auto()

    # 6 Han
    CHINITSU = auto()

    # Yakuman
    TENHOU = auto()
    CHIIHOU = auto()
    RENHOU = auto()
    DAISANGEN = auto()
    SUUANKOU = auto()
    DAISUUSHII = auto()
    SHOUSUUSHII = auto()
    TSUUIISOU = auto()
    CHINROUTOU = auto()
    RYUUIISOU = auto()
    SUUKANTSU = auto()
    KOKUSHI_MUSOU = auto()
    CHUUREN_POUTOU = auto()

    # Double yakuman
    SUUANKOU_TANKI = auto()
    KOKUSHI_MUSOU_13 = auto()
    JUNSEI_CHUUREN_POUTOU = auto()

    # Dora
    DORA = auto()
    URA_DORA = auto()
    AKA_DORA = auto()


@dataclass(frozen=True)
class YakuInfo:
    """Display names and value of a yaku"""
    name: str
    japanese_name: str
    han_closed: int
    han_open: int
    yaku_type: YakuType = YakuType.NORMAL

    @property
    def is_yakuman(self) -> bool:
        return self.yaku_type in (YakuType.YAKUMAN, YakuType.DOUBLE_YAKUMAN)


_Y = YakuType.YAKUMAN
_D = YakuType.DOUBLE_YAKUMAN

YAKU_INFO: Dict[Yaku, YakuInfo] = {
    # 1 Han
    Yaku.RIICHI: YakuInfo("Riichi", "立直", 1, 0),
    Yaku.IPPATSU: YakuInfo("Ippatsu", "一発", 1, 0),
    Yaku.MENZEN_TSUMO: YakuInfo("Menzen Tsumo", "門前清自摸和", 1, 0),
    Yaku.PINFU: YakuInfo("Pinfu", "平和", 1, 0),
    Yaku.IIPEIKOU: YakuInfo("Iipeikou", "一盃口", 1, 0),
    Yaku.HAITEI: YakuInfo("Haitei Raoyue", "海底摸月", 1, 1),
    Yaku.HOUTEI: YakuInfo("Houtei Raoyui", "河底撈魚", 1, 1),
    Yaku.RINSHAN: YakuInfo("Rinshan Kaihou", "嶺上開花", 1, 1),
    Yaku.CHANKAN: YakuInfo("Chankan", "槍槓", 1, 1),
    Yaku.TANYAO: YakuInfo("Tanyao", "断幺九", 1, 1),
    Yaku.YAKUHAI_SEAT_WIND: YakuInfo("Yakuhai (Seat Wind)", "役牌 自風", 1, 1),
    Yaku.YAKUHAI_ROUND_WIND: YakuInfo("Yakuhai (Round Wind)", "役牌 場風", 1, 1),
    Yaku.YAKUHAI_DRAGON: YakuInfo("Yakuhai (Dragon)", "役牌 三元牌", 1, 1),

    # 2 Han
    Yaku.DOUBLE_RIICHI: YakuInfo("Double Riichi", "両立直", 2, 0),
    Yaku.CHIITOITSU: YakuInfo("Chiitoitsu", "七対子", 2, 0),
    Yaku.SANSHOKU_DOUJUN: YakuInfo("Sanshoku Doujun", "三色同順", 2, 1),
    Yaku.ITTSU: YakuInfo("Ittsu", "一気通貫", 2, 1),
    Yaku.CHANTA: YakuInfo("Chanta", "混全帯幺九", 2, 1),
    Yaku.TOITOI: YakuInfo("Toitoi", "対々和", 2, 2),
    Yaku.SANANKOU: YakuInfo("Sanankou", "三暗刻", 2, 2),
    Yaku.SANSHOKU_DOUKOU: YakuInfo("Sanshoku Doukou", "三色同刻", 2, 2),
    Yaku.SANKANTSU: YakuInfo("Sankantsu", "三槓子", 2, 2),
    Yaku.SHOUSANGEN: YakuInfo("Shousangen", "小三元", 2, 2),
    Yaku.HONROUTOU: YakuInfo("Honroutou", "混老頭", 2, 2),

    # 3 Han
    Yaku.RYANPEIKOU: YakuInfo("Ryanpeikou", "二盃口", 3, 0),
    Yaku.JUNCHAN: YakuInfo("Junchan", "純全帯幺九", 3, 0),
    Yaku.HONITSU: YakuInfo("Honitsu", "混一色", 3, 2),

    # 6 Han
    Yaku.CHINITSU: YakuInfo("Chinitsu", "清一色", 6, 5),

    # Yakuman
    Yaku.TENHOU: YakuInfo("Tenhou", "天和", 13, 13, _Y),
    Yaku.CHIIHOU: YakuInfo("Chiihou", "地和", 13, 13, _Y),
    Yaku.RENHOU: YakuInfo("Renhou", "人和", 13, 13, _Y),
    Yaku.DAISANGEN: YakuInfo("Daisangen", "大三元", 13, 13, _Y),
    Yaku.SUUANKOU: YakuInfo("Suuankou", "四暗刻", 13, 0, _Y),
    Yaku.DAISUUSHII: YakuInfo("Daisuushii", "大四喜", 13, 13, _Y),
    Yaku.SHOUSUUSHII: YakuInfo("Shousuushii", "小四喜", 13, 13, _Y),
    Yaku.TSUUIISOU: YakuInfo("Tsuuiisou", "字一色", 13, 13, _Y),
    Yaku.CHINROUTOU: YakuInfo("Chinroutou", "清老頭", 13, 13, _Y),
    Yaku.RYUUIISOU: YakuInfo("Ryuuiisou", "緑一色", 13, 13, _Y),
    Yaku.SUUKANTSU: YakuInfo("Suukantsu", "四槓子", 13, 13, _Y),
    Yaku.KOKUSHI_MUSOU: YakuInfo("Kokushi Musou", "国士無双", 13, 0, _Y),
    Yaku.CHUUREN_POUTOU: YakuInfo("Chuuren Poutou", "九蓮宝燈", 13, 0, _Y),

    # Double yakuman
    Yaku.SUUANKOU_TANKI: YakuInfo("Suuankou Tanki", "四暗刻単騎", 26, 0, _D),
    Yaku.KOKUSHI_MUSOU_13: YakuInfo("Kokushi Musou 13-sided", "国士無双十三面", 26, 0, _D),
    Yaku.JUNSEI_CHUUREN_POUTOU: YakuInfo("Junsei Chuuren Poutou", "純正九蓮宝燈", 26, 0, _D),

    # Dora
    Yaku.DORA: YakuInfo("Dora", "ドラ", 1, 1, YakuType.DORA),
    Yaku.URA_DORA: YakuInfo("Ura Dora", "裏ドラ", 1, 1, YakuType.DORA),
    Yaku.AKA_DORA: YakuInfo("Aka Dora", "赤ドラ", 1, 1, YakuType.DORA),
}

# Double yakuman and the single yakuman each one replaces
DOUBLE_YAKUMAN_OVERRIDES = {
    Yaku.SUUANKOU_TANKI: Yaku.SUUANKOU,
    Yaku.KOKUSHI_MUSOU_13: Yaku.KOKUSHI_MUSOU,
    Yaku.JUNSEI_CHUUREN_POUTOU: Yaku.CHUUREN_POUTOU,
}


def info(yaku: Yaku) -> YakuInfo:
    return YAKU_INFO[yaku]


def is_yakuman(yaku: Yaku) -> bool:
    return YAKU_INFO[yaku].is_yakuman


def is_dora(yaku: Yaku) -> bool:
    return YAKU_INFO[yaku].yaku_type == YakuType.DORA


def han_value(yaku: Yaku, is_open: bool) -> int:
    """Han contributed by one entry of a (non-yakuman) yaku list"""
    yaku_info = YAKU_INFO[yaku]
    return yaku_info.han_open if is_open else yaku_info.han_closed


def count_yakuman(yaku_list: Iterable[Yaku], double_yakuman: bool = True) -> int:
    """Number of yakuman multiples in a yaku list"""
    total = 0
    for yaku in yaku_list:
        yaku_type = YAKU_INFO[yaku].yaku_type
        if yaku_type == YakuType.DOUBLE_YAKUMAN:
            total += 2 if double_yakuman else 1
        elif yaku_type == YakuType.YAKUMAN:
            total += 1
    return total
