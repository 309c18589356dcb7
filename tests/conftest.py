"""
Shared fixtures for building hands from compact notation.
"""

import pytest

from riichi_scorer.context import GameContext, HandInput, PlayerContext, WinType
from riichi_scorer.melds import DeclaredMeld, MeldType
from riichi_scorer.tiles import Tile, WindType, parse_tiles


def build_input(
    hand,
    win,
    tsumo=False,
    pon=(),
    chi=(),
    kan=(),
    ankan=(),
    dora="",
    ura="",
    aka=0,
    honba=0,
    seat=WindType.EAST,
    round_wind=WindType.EAST,
    dealer=False,
    riichi=False,
    double_riichi=False,
    ippatsu=False,
    menzen=None,
    **game_flags,
):
    """
    Build a HandInput; ``hand`` holds the concealed tiles and the tiles of
    every declared meld are added to it.
    """
    hand_tiles = parse_tiles(hand)
    open_melds = []
    for notation in pon:
        tile = Tile.from_string(notation)
        open_melds.append(DeclaredMeld(MeldType.TRIPLET, tile))
        hand_tiles.extend([tile] * 3)
    for notation in chi:
        meld = DeclaredMeld(MeldType.SEQUENCE, Tile.from_string(notation))
        open_melds.append(meld)
        hand_tiles.extend(meld.to_meld().tiles)
    for notation in kan:
        tile = Tile.from_string(notation)
        open_melds.append(DeclaredMeld(MeldType.QUAD, tile))
        hand_tiles.extend([tile] * 4)
    closed_kans = []
    for notation in ankan:
        tile = Tile.from_string(notation)
        closed_kans.append(tile)
        hand_tiles.extend([tile] * 4)

    if menzen is None:
        menzen = not open_melds

    player = PlayerContext(
        seat_wind=seat,
        is_dealer=dealer,
        is_riichi=riichi,
        is_double_riichi=double_riichi,
        is_ippatsu=ippatsu,
        is_menzen=menzen,
    )
    game = GameContext(
        round_wind=round_wind,
        honba=honba,
        dora_indicators=tuple(parse_tiles(dora)),
        uradora_indicators=tuple(parse_tiles(ura)),
        num_akadora=aka,
        **game_flags,
    )
    return HandInput(
        hand_tiles=hand_tiles,
        winning_tile=Tile.from_string(win),
        open_melds=open_melds,
        closed_kans=closed_kans,
        player_context=player,
        game_context=game,
        win_type=WinType.TSUMO if tsumo else WinType.RON,
    )


@pytest.fixture
def make_input():
    """Factory fixture for HandInput"""
    return build_input
