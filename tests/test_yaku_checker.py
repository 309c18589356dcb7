"""
Tests for yaku detection
"""

import pytest

from riichi_scorer.decomposer import organize_hand
from riichi_scorer.exceptions import InvalidHandError
from riichi_scorer.hand import NineGatesHand, SevenPairsHand, StandardHand, WaitShape
from riichi_scorer.rules import RuleSet
from riichi_scorer.tiles import parse_tiles
from riichi_scorer.yaku import Yaku, count_yakuman
from riichi_scorer.yaku_checker import check_all_yaku, check_flush, post_process_yakuman


def evaluate(hand_input, rules=None):
    organization = organize_hand(hand_input, rules)
    return check_all_yaku(
        organization,
        hand_input.player_context,
        hand_input.game_context,
        hand_input.win_type,
        rules,
    )


class TestStateYaku:
    """Test yaku that come from the game state"""

    def test_pinfu_tsumo(self, make_input):
        """All four pinfu conditions plus a concealed self-draw"""
        result = evaluate(make_input("234567m345678p44s", "2m", tsumo=True))
        assert result.yaku_list == [Yaku.MENZEN_TSUMO, Yaku.PINFU, Yaku.TANYAO]
        assert result.is_closed

    def test_double_riichi_ippatsu(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", double_riichi=True, ippatsu=True))
        assert Yaku.DOUBLE_RIICHI in result.yaku_list
        assert Yaku.IPPATSU in result.yaku_list
        assert Yaku.RIICHI not in result.yaku_list

    def test_last_tile(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", tsumo=True, is_haitei=True))
        assert Yaku.HAITEI in result.yaku_list

        result = evaluate(make_input("234567m345678p44s", "2m", is_houtei=True))
        assert Yaku.HOUTEI in result.yaku_list

    def test_chankan_drops_pinfu(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", is_chankan=True))
        assert Yaku.CHANKAN in result.yaku_list
        assert Yaku.TANYAO in result.yaku_list
        assert Yaku.PINFU not in result.yaku_list

    def test_tenhou_short_circuits(self, make_input):
        result = evaluate(make_input(
            "234567m345678p44s", "2m", tsumo=True, dealer=True, is_tenhou=True, dora="1m",
        ))
        assert result.yaku_list == [Yaku.TENHOU]
        assert result.is_yakuman

    def test_rinshan_drops_pinfu(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", tsumo=True, is_rinshan=True))
        assert result.yaku_list == [Yaku.MENZEN_TSUMO, Yaku.RINSHAN, Yaku.TANYAO]

    def test_chiihou(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", tsumo=True, is_chiihou=True))
        assert result.yaku_list == [Yaku.CHIIHOU]

    def test_renhou(self, make_input):
        """Non-dealer ron before the first draw"""
        result = evaluate(make_input("234567m345678p44s", "2m", is_renhou=True, dora="1m"))
        assert result.yaku_list == [Yaku.RENHOU]


class TestHandYaku:
    """Test yaku that come from the hand shape"""

    def test_yakuhai_double_wind(self, make_input):
        """East triplet as East seat in the East round counts twice"""
        result = evaluate(make_input("111z234m567p789s55p", "4m"))
        assert result.yaku_list == [Yaku.YAKUHAI_SEAT_WIND, Yaku.YAKUHAI_ROUND_WIND]

    def test_shousangen(self, make_input):
        result = evaluate(make_input("555666z77z123m456p", "3m"))
        assert result.yaku_list.count(Yaku.YAKUHAI_DRAGON) == 2
        assert Yaku.SHOUSANGEN in result.yaku_list

    def test_open_tanyao(self, make_input):
        hand_input = make_input("567m345678p44s", "8p", chi=["2m"])
        result = evaluate(hand_input)
        assert result.yaku_list == [Yaku.TANYAO]
        assert not result.is_closed

        with pytest.raises(InvalidHandError, match="no yaku"):
            evaluate(hand_input, RuleSet(name="No kuitan", allow_kuitan=False))

    def test_iipeikou(self, make_input):
        result = evaluate(make_input("112233m456p789s55s", "3m"))
        assert result.yaku_list == [Yaku.IIPEIKOU]

    def test_ryanpeikou_over_seven_pairs(self, make_input):
        """A standard reading wins over seven pairs"""
        result = evaluate(make_input("112233m445566p77s", "7s"))
        assert Yaku.RYANPEIKOU in result.yaku_list
        assert Yaku.IIPEIKOU not in result.yaku_list
        assert Yaku.CHIITOITSU not in result.yaku_list

    def test_sanshoku_with_chanta(self, make_input):
        result = evaluate(make_input("123m123p123s789m55z", "9m"))
        assert Yaku.SANSHOKU_DOUJUN in result.yaku_list
        assert Yaku.CHANTA in result.yaku_list
        assert Yaku.PINFU not in result.yaku_list

    def test_ittsu(self, make_input):
        result = evaluate(make_input("123456789m234p55s", "5s"))
        assert Yaku.ITTSU in result.yaku_list

    def test_sanshoku_doukou(self, make_input):
        result = evaluate(make_input("222m222p222s456m77s", "4m"))
        assert Yaku.SANSHOKU_DOUKOU in result.yaku_list
        assert Yaku.SANANKOU in result.yaku_list
        assert Yaku.TANYAO in result.yaku_list

    def test_junchan_closed(self, make_input):
        result = evaluate(make_input("123m789m123p999s11p", "9s"))
        assert Yaku.JUNCHAN in result.yaku_list
        assert Yaku.CHANTA not in result.yaku_list

    def test_junchan_open_falls_back_to_chanta(self, make_input):
        result = evaluate(make_input("789m123p999s11p", "9s", chi=["1m"]))
        assert Yaku.CHANTA in result.yaku_list
        assert Yaku.JUNCHAN not in result.yaku_list

    def test_sanankou(self, make_input):
        result = evaluate(make_input("222m444p666s789s55m", "7s", tsumo=True))
        assert Yaku.SANANKOU in result.yaku_list
        assert Yaku.MENZEN_TSUMO in result.yaku_list
        assert Yaku.TOITOI not in result.yaku_list

    def test_toitoi_excludes_sanankou(self, make_input):
        result = evaluate(make_input("222m444p666s88s", "8s", pon=["5z"]))
        assert result.yaku_list == [Yaku.YAKUHAI_DRAGON, Yaku.TOITOI]

    def test_ron_triplet_not_concealed(self, make_input):
        """Winning on a shanpon by ron opens that triplet"""
        result = evaluate(make_input("222m444p666s888s55m", "8s"))
        assert Yaku.SUUANKOU not in result.yaku_list
        assert Yaku.TOITOI in result.yaku_list
        assert Yaku.TANYAO in result.yaku_list

    def test_sankantsu(self, make_input):
        result = evaluate(make_input("789m11p", "7m", kan=["2m", "3p", "4s"]))
        assert result.yaku_list == [Yaku.SANKANTSU]
        assert not result.is_closed

    def test_flush(self):
        assert check_flush(parse_tiles("123456789m11122z")) == [Yaku.HONITSU]
        assert check_flush(parse_tiles("11123456789999m")) == [Yaku.CHINITSU]
        assert check_flush(parse_tiles("123456789m123p55z")) == []

    def test_no_yaku(self, make_input):
        """Dora alone do not make a hand"""
        with pytest.raises(InvalidHandError, match="no yaku"):
            evaluate(make_input("456p789s234s99p", "4p", chi=["1m"], dora="3p"))


class TestSevenPairsYaku:
    """Test seven pairs evaluation"""

    def test_seven_pairs_riichi(self, make_input):
        result = evaluate(make_input("114477m225588p33s", "3s", riichi=True))
        assert isinstance(result.hand_structure, SevenPairsHand)
        assert result.yaku_list == [Yaku.CHIITOITSU, Yaku.RIICHI]

    def test_seven_pairs_tanyao(self, make_input):
        result = evaluate(make_input("224466m225588p33s", "3s"))
        assert result.yaku_list == [Yaku.CHIITOITSU, Yaku.TANYAO]

    def test_seven_pairs_honroutou(self, make_input):
        result = evaluate(make_input("1199m1199p11s1122z", "2z"))
        assert Yaku.HONROUTOU in result.yaku_list

    def test_all_terminal_seven_pairs(self, make_input):
        """Four 1m and four 9m count as two pairs each; no chinroutou"""
        result = evaluate(make_input("11119999m1199p11s", "1s"))
        assert isinstance(result.hand_structure, SevenPairsHand)
        assert result.yaku_list == [Yaku.CHIITOITSU, Yaku.HONROUTOU]
        assert not result.is_yakuman

    def test_all_honors_seven_pairs(self, make_input):
        """Yakuman ends evaluation before ordinary yaku and dora"""
        result = evaluate(make_input("11223344556677z", "7z", dora="1z", riichi=True))
        assert isinstance(result.hand_structure, SevenPairsHand)
        assert Yaku.CHIITOITSU in result.yaku_list
        assert Yaku.TSUUIISOU in result.yaku_list
        assert Yaku.DORA not in result.yaku_list
        assert Yaku.RIICHI not in result.yaku_list

    def test_irregular_with_calls(self, make_input):
        with pytest.raises(InvalidHandError, match="calls"):
            evaluate(make_input("14779m258p369s", "1m", pon=["1z"]))

    def test_no_shape(self, make_input):
        with pytest.raises(InvalidHandError, match="Invalid hand"):
            evaluate(make_input("14779m2589p369s11z", "1m"))


class TestYakuman:
    """Test yakuman detection"""

    def test_chinroutou_excludes_honroutou(self, make_input):
        result = evaluate(make_input("111m999m111p11s", "1p", pon=["9s"]))
        assert Yaku.CHINROUTOU in result.yaku_list
        assert Yaku.HONROUTOU not in result.yaku_list

    def test_suuankou_tanki(self, make_input):
        result = evaluate(make_input("222m444p666s888s55m", "5m"))
        assert result.yaku_list == [Yaku.SUUANKOU_TANKI]

    def test_suuankou_tsumo(self, make_input):
        result = evaluate(make_input("222m444p666s888s55m", "8s", tsumo=True))
        assert result.yaku_list == [Yaku.SUUANKOU]

    def test_kokushi_thirteen_sided(self, make_input):
        result = evaluate(make_input("119m19p19s1234567z", "1m"))
        assert result.yaku_list == [Yaku.KOKUSHI_MUSOU_13]

    def test_kokushi_single(self, make_input):
        result = evaluate(make_input("19m199p19s1234567z", "1m", tsumo=True))
        assert result.yaku_list == [Yaku.KOKUSHI_MUSOU]

    def test_junsei_chuuren(self, make_input):
        result = evaluate(make_input("11123455678999m", "5m"))
        assert isinstance(result.hand_structure, NineGatesHand)
        assert result.hand_structure.wait == WaitShape.NINE_SIDED
        assert result.yaku_list == [Yaku.JUNSEI_CHUUREN_POUTOU]

    def test_chuuren(self, make_input):
        result = evaluate(make_input("11123455678999m", "2m"))
        assert isinstance(result.hand_structure, NineGatesHand)
        assert result.hand_structure.wait == WaitShape.RYANMEN
        assert result.yaku_list == [Yaku.CHUUREN_POUTOU]

    def test_daisangen(self, make_input):
        result = evaluate(make_input("555666777z123m99p", "9p"))
        assert result.yaku_list == [Yaku.DAISANGEN]

    def test_shousuushii(self, make_input):
        """Three wind triplets and a wind pair"""
        result = evaluate(make_input("111222333z44z123m", "3m"))
        assert result.yaku_list == [Yaku.SHOUSUUSHII]

    def test_daisuushii(self, make_input):
        result = evaluate(make_input("111222333444z55m", "5m", tsumo=True))
        assert result.yaku_list == [Yaku.SUUANKOU_TANKI, Yaku.DAISUUSHII]
        assert count_yakuman(result.yaku_list) == 3
        assert count_yakuman(result.yaku_list, double_yakuman=False) == 2

    def test_ryuuiisou(self, make_input):
        """Green bamboo with the green dragon pair"""
        result = evaluate(make_input("234234666888s66z", "8s"))
        assert result.yaku_list == [Yaku.RYUUIISOU]

    def test_tsuuiisou_standard(self, make_input):
        result = evaluate(make_input("222z555666z77z", "7z", pon=["1z"]))
        assert isinstance(result.hand_structure, StandardHand)
        assert result.yaku_list == [Yaku.TSUUIISOU]

    def test_suukantsu(self, make_input):
        result = evaluate(make_input("55m", "5m", ankan=["1m", "2p", "3s", "4z"]))
        assert result.yaku_list == [Yaku.SUUKANTSU, Yaku.SUUANKOU_TANKI]

    def test_post_process(self):
        yakuman = [Yaku.TENHOU, Yaku.SUUANKOU, Yaku.SUUANKOU_TANKI]
        assert post_process_yakuman(yakuman) == [Yaku.TENHOU, Yaku.SUUANKOU_TANKI]


class TestDoraYaku:
    """Test dora attached to the yaku list"""

    def test_dora_ura_aka(self, make_input):
        result = evaluate(make_input(
            "234567m345678p44s", "2m", riichi=True, dora="1m", ura="3p", aka=1,
        ))
        assert result.yaku_list.count(Yaku.DORA) == 1
        assert result.yaku_list.count(Yaku.URA_DORA) == 1
        assert result.yaku_list.count(Yaku.AKA_DORA) == 1

    def test_no_ura_without_riichi(self, make_input):
        result = evaluate(make_input("234567m345678p44s", "2m", ura="3p"))
        assert Yaku.URA_DORA not in result.yaku_list

    def test_ura_disabled_by_rules(self, make_input):
        rules = RuleSet(name="No ura", uradora_on_riichi_win=False)
        result = evaluate(make_input("234567m345678p44s", "2m", riichi=True, ura="3p"), rules)
        assert Yaku.URA_DORA not in result.yaku_list
