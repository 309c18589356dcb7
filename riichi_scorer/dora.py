"""
Dora System for Riichi Mahjong

Handles the bonus tiles of a winning hand:
- Regular dora (from indicators)
- Uradora (under-dora, counted for riichi wins)
- Akadora (red fives, declared as a count)
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .tiles import Tile, TileSuit, NUMBERED_SUITS
from .context import GameContext


def get_dora_tile(indicator: Tile) -> Tile:
    """
    Get the actual dora tile from an indicator.

    The dora is the next tile in sequence:
    - Numbers: 1->2->...->9->1
    - Winds: E->S->W->N->E
    - Dragons: White->Green->Red->White
    """
    if indicator.suit in NUMBERED_SUITS:
        return Tile(indicator.suit, indicator.value % 9 + 1)
    if indicator.suit == TileSuit.WINDS:
        return Tile(TileSuit.WINDS, (indicator.value + 1) % 4)
    return Tile(TileSuit.DRAGONS, (indicator.value + 1) % 3)


def count_dora(tiles: Iterable[Tile], indicators: Iterable[Tile]) -> int:
    """One per matching tile, per indicator"""
    tiles = list(tiles)
    count = 0
    for indicator in indicators:
        dora = get_dora_tile(indicator)
        count += sum(1 for tile in tiles if tile == dora)
    return count


@dataclass(frozen=True)
class DoraSystem:
    """
    Dora indicators of one round.

    Dora add han to a winning hand without being yaku themselves.
    """
    dora_indicators: Tuple[Tile, ...] = ()
    uradora_indicators: Tuple[Tile, ...] = ()
    num_akadora: int = 0

    @classmethod
    def from_game(cls, game: GameContext) -> 'DoraSystem':
        return cls(
            dora_indicators=tuple(game.dora_indicators),
            uradora_indicators=tuple(game.uradora_indicators),
            num_akadora=game.num_akadora,
        )

    def get_all_dora_tiles(self) -> List[Tile]:
        """Get list of all current dora tiles"""
        return [get_dora_tile(ind) for ind in self.dora_indicators]

    def get_all_uradora_tiles(self) -> List[Tile]:
        """Get list of all uradora tiles"""
        return [get_dora_tile(ind) for ind in self.uradora_indicators]

    def count_dora(self, tiles: Iterable[Tile]) -> int:
        return count_dora(tiles, self.dora_indicators)

    def count_uradora(self, tiles: Iterable[Tile]) -> int:
        return count_dora(tiles, self.uradora_indicators)

    def __repr__(self) -> str:
        dora_str = ", ".join(str(t) for t in self.get_all_dora_tiles())
        return f"DoraSystem(dora=[{dora_str}], red_fives={self.num_akadora})"
