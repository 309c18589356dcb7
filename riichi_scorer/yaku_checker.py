"""
Riichi Mahjong Yaku Checker

Takes an organized hand and the game state and identifies every yaku,
including yakuman and dora.

Evaluation order:
1. Game-state yakuman (tenhou, chiihou, renhou)
2. Hand-shape yakuman, after settling irregular hands into seven pairs
   or thirteen orphans
3. Double yakuman replace their single counterpart; any yakuman ends
   the evaluation
4. Regular yaku
5. Dora, only for hands that already have a yaku or riichi
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .context import GameContext, PlayerContext, WinType
from .dora import DoraSystem
from .exceptions import InvalidHandError
from .hand import (
    HandOrganization, HandStructure, IrregularHand, NineGatesHand,
    SevenPairsHand, StandardHand, ThirteenOrphansHand, WaitShape,
)
from .irregular import check_seven_pairs, check_thirteen_orphans
from .melds import Meld
from .rules import RuleSet, TENHOU_RULES
from .tiles import Tile, TileSuit, NUMBERED_SUITS
from .yaku import Yaku, DOUBLE_YAKUMAN_OVERRIDES, is_dora, is_yakuman


logger = logging.getLogger(__name__)


@dataclass
class YakuResult:
    """The settled hand shape and every yaku (and dora) it earned"""
    hand_structure: HandStructure
    yaku_list: List[Yaku]
    is_closed: bool = True

    @property
    def is_yakuman(self) -> bool:
        return any(is_yakuman(y) for y in self.yaku_list)


def check_all_yaku(
    organization: HandOrganization,
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
    rules: Optional[RuleSet] = None,
) -> YakuResult:
    """
    Check a hand for all yaku.

    Args:
        organization: Output of ``organize_hand``
        player: Context of the winning player
        game: Context of the current round
        win_type: Tsumo or Ron
        rules: Rule set to use

    Returns:
        YakuResult with the final hand structure and the yaku list

    Raises:
        InvalidHandError: The hand has no valid shape or no yaku
    """
    rules = rules or TENHOU_RULES

    # Game-state yakuman first
    yakuman = check_game_state_yakuman(game)

    hand_structure, hand_yakuman = resolve_hand_structure(organization, win_type)
    yakuman.extend(hand_yakuman)
    is_closed = _is_closed(hand_structure, player)

    if yakuman:
        final_yakuman = post_process_yakuman(yakuman)
        logger.debug(f"Yakuman: {[y.name for y in final_yakuman]}")
        return YakuResult(hand_structure, final_yakuman, is_closed)

    if isinstance(hand_structure, StandardHand):
        yaku_list = find_standard_yaku(hand_structure, player, game, win_type, rules, is_closed)
    elif isinstance(hand_structure, SevenPairsHand):
        yaku_list = find_chiitoitsu_yaku(hand_structure, player, game, win_type)
    else:
        # Kokushi and chuuren always carry a yakuman
        raise TypeError(f"Unexpected hand structure without yakuman: {type(hand_structure).__name__}")

    # Dora only count once the hand has a yaku or riichi
    if yaku_list or player.in_riichi:
        yaku_list.extend(find_dora(hand_structure.all_tiles, player, game, rules))

    if not any(not is_dora(y) for y in yaku_list):
        raise InvalidHandError("Hand has no yaku.")

    logger.debug(f"Yaku: {[y.name for y in yaku_list]}")
    return YakuResult(hand_structure, yaku_list, is_closed)


def _is_closed(hand_structure: HandStructure, player: PlayerContext) -> bool:
    if isinstance(hand_structure, StandardHand):
        return player.is_menzen and not hand_structure.is_open
    if isinstance(hand_structure, (NineGatesHand, SevenPairsHand, ThirteenOrphansHand)):
        return True
    raise TypeError(f"Unknown hand structure: {type(hand_structure).__name__}")


# === Yakuman ===

def check_game_state_yakuman(game: GameContext) -> List[Yaku]:
    """Tenhou, Chiihou and Renhou come straight from the round state"""
    yakuman = []
    if game.is_tenhou:
        yakuman.append(Yaku.TENHOU)
    if game.is_chiihou:
        yakuman.append(Yaku.CHIIHOU)
    if game.is_renhou:
        yakuman.append(Yaku.RENHOU)
    return yakuman


def resolve_hand_structure(
    organization: HandOrganization,
    win_type: WinType,
) -> Tuple[HandStructure, List[Yaku]]:
    """Settle the final hand shape and find its hand-based yakuman"""
    if isinstance(organization, StandardHand):
        yakuman, chuuren_flag = check_standard_yakuman(organization, win_type)
        if chuuren_flag is not None:
            return NineGatesHand(organization, chuuren_flag), yakuman
        return organization, yakuman

    if isinstance(organization, IrregularHand):
        if organization.has_calls:
            raise InvalidHandError("Invalid hand: irregular shapes cannot contain calls.")

        kokushi = check_thirteen_orphans(organization.counts, organization.winning_tile)
        if kokushi is not None:
            yakuman = [Yaku.KOKUSHI_MUSOU]
            if kokushi.wait == WaitShape.KOKUSHI_THIRTEEN:
                yakuman.append(Yaku.KOKUSHI_MUSOU_13)
            return kokushi, yakuman

        chiitoitsu = check_seven_pairs(organization.counts, organization.winning_tile)
        if chiitoitsu is not None:
            return chiitoitsu, check_chiitoitsu_yakuman(chiitoitsu)

        raise InvalidHandError("Invalid hand: not a standard hand, Kokushi or Chiitoitsu.")

    raise TypeError(f"Unknown hand organization: {type(organization).__name__}")


def check_standard_yakuman(hand: StandardHand, win_type: WinType) -> Tuple[List[Yaku], Optional[bool]]:
    """
    Check a 4-meld, 1-pair hand for all yakuman.

    Returns:
        (yakuman list, chuuren flag) where the flag is None for no chuuren,
        otherwise whether it is the true nine-sided wait
    """
    yakuman = []
    all_tiles = hand.all_tiles

    # Tile-based yakuman
    if all(t.is_honor for t in all_tiles):
        yakuman.append(Yaku.TSUUIISOU)
    if all(t.is_terminal for t in all_tiles):
        yakuman.append(Yaku.CHINROUTOU)
    if all(t.is_green for t in all_tiles):
        yakuman.append(Yaku.RYUUIISOU)

    # Meld-based yakuman
    if sum(1 for m in hand.melds if m.is_quad) == 4:
        yakuman.append(Yaku.SUUKANTSU)

    if count_concealed_triplets(hand, win_type) == 4:
        yakuman.append(Yaku.SUUANKOU)
        if hand.wait == WaitShape.TANKI:
            yakuman.append(Yaku.SUUANKOU_TANKI)

    if _count_triplets_of(hand, TileSuit.DRAGONS) == 3:
        yakuman.append(Yaku.DAISANGEN)

    wind_triplets = _count_triplets_of(hand, TileSuit.WINDS)
    if wind_triplets == 4:
        yakuman.append(Yaku.DAISUUSHII)
    elif wind_triplets == 3 and hand.pair.tile.is_wind:
        yakuman.append(Yaku.SHOUSUUSHII)

    chuuren_flag = check_chuuren(hand)
    if chuuren_flag is not None:
        yakuman.append(Yaku.CHUUREN_POUTOU)
        if chuuren_flag:
            yakuman.append(Yaku.JUNSEI_CHUUREN_POUTOU)

    return yakuman, chuuren_flag


def check_chiitoitsu_yakuman(hand: SevenPairsHand) -> List[Yaku]:
    """Seven pairs of honors is Tsuuiisou; the shape itself stays listed"""
    if all(pair.tile.is_honor for pair in hand.pairs):
        return [Yaku.CHIITOITSU, Yaku.TSUUIISOU]
    return []


def check_chuuren(hand: StandardHand) -> Optional[bool]:
    """
    Nine gates (1112345678999 + any tile of the same suit).

    Returns None if the hand is not chuuren, otherwise whether the
    winning tile is the extra tile (true nine-sided wait).
    """
    if hand.is_open:
        return None

    all_tiles = hand.all_tiles
    suits = {t.suit for t in all_tiles}
    if len(suits) != 1:
        return None
    suit = suits.pop()
    if suit not in NUMBERED_SUITS:
        return None

    suit_counts = [0] * 9
    for tile in all_tiles:
        suit_counts[tile.value - 1] += 1

    required = [3, 1, 1, 1, 1, 1, 1, 1, 3]
    extras = [suit_counts[i] - required[i] for i in range(9)]
    if any(e < 0 for e in extras) or sum(extras) != 1:
        return None

    extra_value = extras.index(1) + 1
    return hand.winning_tile.value == extra_value


def post_process_yakuman(yakuman: List[Yaku]) -> List[Yaku]:
    """Double yakuman replace their single counterpart"""
    replaced = {DOUBLE_YAKUMAN_OVERRIDES[y] for y in yakuman if y in DOUBLE_YAKUMAN_OVERRIDES}
    return [y for y in yakuman if y not in replaced]


# === Regular Yaku ===

def find_state_yaku(
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
    is_closed: bool,
) -> List[Yaku]:
    """Yaku that come from how and when the hand was won"""
    yaku_list = []
    if player.is_double_riichi:
        yaku_list.append(Yaku.DOUBLE_RIICHI)
    elif player.is_riichi:
        yaku_list.append(Yaku.RIICHI)
    if player.is_ippatsu:
        yaku_list.append(Yaku.IPPATSU)
    if is_closed and win_type == WinType.TSUMO:
        yaku_list.append(Yaku.MENZEN_TSUMO)
    if game.is_haitei and win_type == WinType.TSUMO:
        yaku_list.append(Yaku.HAITEI)
    if game.is_houtei and win_type == WinType.RON:
        yaku_list.append(Yaku.HOUTEI)
    if game.is_rinshan:
        yaku_list.append(Yaku.RINSHAN)
    if game.is_chankan:
        yaku_list.append(Yaku.CHANKAN)
    return yaku_list


def find_standard_yaku(
    hand: StandardHand,
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
    rules: RuleSet,
    is_closed: bool,
) -> List[Yaku]:
    """Find all regular yaku for a 4-meld, 1-pair hand"""
    yaku_list = find_state_yaku(player, game, win_type, is_closed)

    yaku_list.extend(check_yakuhai(hand, player, game))

    if check_pinfu(hand, player, game, is_closed):
        yaku_list.append(Yaku.PINFU)

    if check_tanyao(hand.all_tiles) and (is_closed or rules.allow_kuitan):
        yaku_list.append(Yaku.TANYAO)

    # Sequence yaku
    sequences = hand.sequences
    if is_closed:
        identical_pairs = count_identical_sequence_pairs(sequences)
        if identical_pairs >= 2:
            yaku_list.append(Yaku.RYANPEIKOU)
        elif identical_pairs == 1:
            yaku_list.append(Yaku.IIPEIKOU)

    if check_sanshoku_doujun(sequences):
        yaku_list.append(Yaku.SANSHOKU_DOUJUN)

    if check_ittsu(sequences):
        yaku_list.append(Yaku.ITTSU)

    # Triplet yaku; toitoi and sanankou are mutually exclusive
    triplets = hand.triplets
    if len(triplets) == 4:
        yaku_list.append(Yaku.TOITOI)
    elif count_concealed_triplets(hand, win_type) == 3:
        yaku_list.append(Yaku.SANANKOU)

    if sum(1 for m in triplets if m.is_quad) == 3:
        yaku_list.append(Yaku.SANKANTSU)

    if check_sanshoku_doukou(triplets):
        yaku_list.append(Yaku.SANSHOKU_DOUKOU)

    if check_shousangen(hand):
        yaku_list.append(Yaku.SHOUSANGEN)

    # Terminal/honor yaku
    all_tiles = hand.all_tiles
    if check_honroutou(all_tiles):
        yaku_list.append(Yaku.HONROUTOU)
    else:
        is_chanta, is_junchan = check_chanta_junchan(hand.groups)
        if is_junchan and is_closed:
            yaku_list.append(Yaku.JUNCHAN)
        elif is_chanta:
            yaku_list.append(Yaku.CHANTA)

    yaku_list.extend(check_flush(all_tiles))

    # Pinfu cannot come with a kan draw or a robbed kan
    if Yaku.PINFU in yaku_list and (Yaku.RINSHAN in yaku_list or Yaku.CHANKAN in yaku_list):
        yaku_list.remove(Yaku.PINFU)

    return yaku_list


def find_chiitoitsu_yaku(
    hand: SevenPairsHand,
    player: PlayerContext,
    game: GameContext,
    win_type: WinType,
) -> List[Yaku]:
    """Find all regular yaku for a seven pairs hand"""
    yaku_list = [Yaku.CHIITOITSU]
    yaku_list.extend(find_state_yaku(player, game, win_type, is_closed=True))

    all_tiles = hand.all_tiles
    if check_tanyao(all_tiles):
        yaku_list.append(Yaku.TANYAO)
    # Chinroutou needs four triplets, so an all-terminal seven pairs
    # (possible with a four-of-a-kind) stays honroutou.
    if all(t.is_terminal_or_honor for t in all_tiles):
        yaku_list.append(Yaku.HONROUTOU)
    yaku_list.extend(check_flush(all_tiles))
    return yaku_list


def find_dora(
    all_tiles: List[Tile],
    player: PlayerContext,
    game: GameContext,
    rules: RuleSet,
) -> List[Yaku]:
    """One DORA / URA_DORA / AKA_DORA entry per bonus tile"""
    dora_system = DoraSystem.from_game(game)
    dora = [Yaku.DORA] * dora_system.count_dora(all_tiles)
    if player.in_riichi and rules.uradora_on_riichi_win:
        dora.extend([Yaku.URA_DORA] * dora_system.count_uradora(all_tiles))
    dora.extend([Yaku.AKA_DORA] * dora_system.num_akadora)
    return dora


# === Yaku-specific helpers ===

def _count_triplets_of(hand: StandardHand, suit: TileSuit) -> int:
    return sum(1 for m in hand.triplets if m.base_tile.suit == suit)


def count_concealed_triplets(hand: StandardHand, win_type: WinType) -> int:
    """
    Concealed triplets and quads (for sanankou/suuankou).

    On a ron, the triplet the winning tile completed is not concealed.
    """
    count = 0
    for meld in hand.triplets:
        if meld.is_open:
            continue
        completed_by_ron = (
            win_type == WinType.RON
            and not meld.is_quad
            and hand.wait == WaitShape.SHANPON
            and meld.base_tile == hand.winning_tile
        )
        if not completed_by_ron:
            count += 1
    return count


def check_yakuhai(hand: StandardHand, player: PlayerContext, game: GameContext) -> List[Yaku]:
    """Dragon triplets, seat wind and round wind triplets"""
    yaku_list = []
    for meld in hand.triplets:
        if meld.base_tile.is_dragon:
            yaku_list.append(Yaku.YAKUHAI_DRAGON)

    triplet_tiles = {m.base_tile for m in hand.triplets}
    if Tile(TileSuit.WINDS, int(player.seat_wind)) in triplet_tiles:
        yaku_list.append(Yaku.YAKUHAI_SEAT_WIND)
    if Tile(TileSuit.WINDS, int(game.round_wind)) in triplet_tiles:
        yaku_list.append(Yaku.YAKUHAI_ROUND_WIND)
    return yaku_list


def check_pinfu(hand: StandardHand, player: PlayerContext, game: GameContext, is_closed: bool) -> bool:
    """All sequences, valueless pair, two-sided wait"""
    if not is_closed:
        return False
    if not all(m.is_sequence for m in hand.melds):
        return False

    pair_tile = hand.pair.tile
    if pair_tile.is_dragon:
        return False
    if pair_tile.is_wind and pair_tile.value in (player.seat_wind, game.round_wind):
        return False

    return hand.wait == WaitShape.RYANMEN


def check_tanyao(all_tiles: List[Tile]) -> bool:
    """All simples (no terminals/honors)"""
    return all(t.is_simple for t in all_tiles)


def count_identical_sequence_pairs(sequences: List[Meld]) -> int:
    """How many pairs of identical sequences (iipeikou / ryanpeikou)"""
    counts = Counter(m.base_tile for m in sequences)
    return sum(c // 2 for c in counts.values())


def check_sanshoku_doujun(sequences: List[Meld]) -> bool:
    """Three suits, same sequence"""
    suits_by_value: Dict[int, Set[TileSuit]] = {}
    for meld in sequences:
        suits_by_value.setdefault(meld.base_tile.value, set()).add(meld.base_tile.suit)
    return any(len(suits) >= 3 for suits in suits_by_value.values())


def check_ittsu(sequences: List[Meld]) -> bool:
    """1-2-3, 4-5-6, 7-8-9 in same suit"""
    starts_by_suit: Dict[TileSuit, Set[int]] = {}
    for meld in sequences:
        starts_by_suit.setdefault(meld.base_tile.suit, set()).add(meld.base_tile.value)
    return any({1, 4, 7}.issubset(starts) for starts in starts_by_suit.values())


def check_sanshoku_doukou(triplets: List[Meld]) -> bool:
    """Same triplet in three suits"""
    suits_by_value: Dict[int, Set[TileSuit]] = {}
    for meld in triplets:
        tile = meld.base_tile
        if tile.suit in NUMBERED_SUITS:
            suits_by_value.setdefault(tile.value, set()).add(tile.suit)
    return any(len(suits) >= 3 for suits in suits_by_value.values())


def check_shousangen(hand: StandardHand) -> bool:
    """Small 3 dragons (2 dragon triplets + dragon pair)"""
    return _count_triplets_of(hand, TileSuit.DRAGONS) == 2 and hand.pair.tile.is_dragon


def check_honroutou(all_tiles: List[Tile]) -> bool:
    """All terminals and honors, but not all terminals (chinroutou)"""
    return (
        all(t.is_terminal_or_honor for t in all_tiles)
        and not all(t.is_terminal for t in all_tiles)
    )


def check_chanta_junchan(groups: List[Tuple[Tile, ...]]) -> Tuple[bool, bool]:
    """
    Every group (pair included) holds a terminal or honor.

    Returns:
        (is_chanta, is_junchan); junchan additionally has no honors
    """
    has_honor = False
    for group in groups:
        if not any(t.is_terminal_or_honor for t in group):
            return False, False
        if any(t.is_honor for t in group):
            has_honor = True
    return True, not has_honor


def check_flush(all_tiles: List[Tile]) -> List[Yaku]:
    """Chinitsu (one suit) or Honitsu (one suit + honors)"""
    suits = {t.suit for t in all_tiles if not t.is_honor}
    if len(suits) != 1:
        return []
    if any(t.is_honor for t in all_tiles):
        return [Yaku.HONITSU]
    return [Yaku.CHINITSU]
