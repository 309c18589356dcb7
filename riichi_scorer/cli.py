#!/usr/bin/env python3
"""
Score a Riichi Mahjong hand from the command line.

Usage:
    riichi-score 234567m345678p4s --win 4s --tsumo --riichi --dora 2p
    riichi-score 123m789p55s --pon 7z --chi 4s --win 5s --seat s
"""

import argparse
import logging
import sys
from typing import List, Optional

from .context import GameContext, HandInput, PlayerContext, WinType
from .exceptions import ScoringError
from .melds import DeclaredMeld, MeldType
from .rules import RULE_PRESETS
from .scoring import RiichiScorer
from .tiles import Tile, WindType, parse_tiles


logger = logging.getLogger(__name__)

WIND_CHOICES = {
    "e": WindType.EAST,
    "s": WindType.SOUTH,
    "w": WindType.WEST,
    "n": WindType.NORTH,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riichi-score",
        description="Score a winning Riichi Mahjong hand",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Tiles use compact notation: 123m 456p 789s, honors 1z-7z
(East South West North White Green Red). A 0 reads as a plain five;
declare red fives with --aka.

The positional hand holds the concealed tiles, winning tile included.
Called melds go in --pon/--chi/--kan/--ankan and are added to the hand.

Examples:
    riichi-score 234567m345678p4s --win 4s --tsumo --riichi --dora 2p
    riichi-score 123m789p55s --pon 7z --chi 4s --win 5s --seat s
        """
    )

    parser.add_argument("hand", type=str,
                       help="Concealed tiles including the winning tile")
    parser.add_argument("--win", type=str, required=True,
                       help="The winning tile")
    parser.add_argument("--tsumo", action="store_true",
                       help="Self-drawn win (default: ron)")

    # Called melds
    parser.add_argument("--pon", type=str, action="append", default=[],
                       help="Open triplet, by its tile (repeatable)")
    parser.add_argument("--chi", type=str, action="append", default=[],
                       help="Open sequence, by its lowest tile (repeatable)")
    parser.add_argument("--kan", type=str, action="append", default=[],
                       help="Open quad, by its tile (repeatable)")
    parser.add_argument("--ankan", type=str, action="append", default=[],
                       help="Concealed quad, by its tile (repeatable)")

    # Player state
    parser.add_argument("--riichi", action="store_true")
    parser.add_argument("--double-riichi", action="store_true")
    parser.add_argument("--ippatsu", action="store_true")
    parser.add_argument("--dealer", action="store_true",
                       help="Winner is the dealer")
    parser.add_argument("--seat", type=str, default="e", choices=sorted(WIND_CHOICES),
                       help="Seat wind")

    # Round state
    parser.add_argument("--round", type=str, default="e", choices=sorted(WIND_CHOICES),
                       help="Round wind")
    parser.add_argument("--dora", type=str, default="",
                       help="Dora indicators")
    parser.add_argument("--ura", type=str, default="",
                       help="Uradora indicators")
    parser.add_argument("--aka", type=int, default=0,
                       help="Number of red fives in the hand")
    parser.add_argument("--honba", type=int, default=0)
    for flag in ("haitei", "houtei", "rinshan", "chankan", "tenhou", "chiihou", "renhou"):
        parser.add_argument(f"--{flag}", action="store_true")

    parser.add_argument("--rules", type=str, default="tenhou", choices=sorted(RULE_PRESETS),
                       help="Rule set")
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Log decomposition and scoring steps")
    return parser


def _single_tile(parser: argparse.ArgumentParser, notation: str) -> Tile:
    try:
        return Tile.from_string(notation)
    except ValueError as e:
        parser.error(str(e))


def _tiles(parser: argparse.ArgumentParser, notation: str) -> List[Tile]:
    try:
        return parse_tiles(notation)
    except ValueError as e:
        parser.error(str(e))


def build_hand_input(parser: argparse.ArgumentParser, args: argparse.Namespace) -> HandInput:
    """Turn parsed arguments into a HandInput"""
    hand_tiles = _tiles(parser, args.hand)
    open_melds = []

    for notation in args.pon:
        tile = _single_tile(parser, notation)
        open_melds.append(DeclaredMeld(MeldType.TRIPLET, tile))
        hand_tiles.extend([tile] * 3)
    for notation in args.chi:
        meld = DeclaredMeld(MeldType.SEQUENCE, _single_tile(parser, notation))
        try:
            hand_tiles.extend(meld.to_meld().tiles)
        except ValueError as e:
            parser.error(f"Invalid chi {notation}: {e}")
        open_melds.append(meld)
    for notation in args.kan:
        tile = _single_tile(parser, notation)
        open_melds.append(DeclaredMeld(MeldType.QUAD, tile))
        hand_tiles.extend([tile] * 4)

    closed_kans = []
    for notation in args.ankan:
        tile = _single_tile(parser, notation)
        closed_kans.append(tile)
        hand_tiles.extend([tile] * 4)

    player = PlayerContext(
        seat_wind=WIND_CHOICES[args.seat],
        is_dealer=args.dealer,
        is_riichi=args.riichi,
        is_double_riichi=args.double_riichi,
        is_ippatsu=args.ippatsu,
        is_menzen=not open_melds,
    )
    game = GameContext(
        round_wind=WIND_CHOICES[args.round],
        honba=args.honba,
        dora_indicators=tuple(_tiles(parser, args.dora)),
        uradora_indicators=tuple(_tiles(parser, args.ura)),
        num_akadora=args.aka,
        is_tenhou=args.tenhou,
        is_chiihou=args.chiihou,
        is_renhou=args.renhou,
        is_haitei=args.haitei,
        is_houtei=args.houtei,
        is_rinshan=args.rinshan,
        is_chankan=args.chankan,
    )
    return HandInput(
        hand_tiles=hand_tiles,
        winning_tile=_single_tile(parser, args.win),
        open_melds=open_melds,
        closed_kans=closed_kans,
        player_context=player,
        game_context=game,
        win_type=WinType.TSUMO if args.tsumo else WinType.RON,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    hand_input = build_hand_input(parser, args)
    scorer = RiichiScorer(RULE_PRESETS[args.rules])
    try:
        result = scorer.calculate(hand_input)
    except ScoringError as e:
        logger.debug(f"Scoring failed: {e.reason}")
        print(f"Error: {e.reason}", file=sys.stderr)
        return 1

    print(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
