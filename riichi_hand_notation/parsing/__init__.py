from .tiles import Suit, Honor, Tile
from .parser import ParsedHand, parse_hand, parse_hand_with_aka
from .constants import TILE_LABELS_34

__all__ = [
    "Suit", "Honor", "Tile", "ParsedHand",
    "parse_hand", "parse_hand_with_aka", "TILE_LABELS_34",
]
