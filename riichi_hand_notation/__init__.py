import logging

from .config import Config, setup_logging
from .errors import (
    HandNotationError, ParseError, UnexpectedCharacter, InvalidHonorNumber,
    RedFiveWithHonor, TrailingDigitsWithoutSuit,
    ValidationError, WrongTileCount, ExcessCopies,
)
from .parsing import Suit, Honor, Tile, ParsedHand, parse_hand, parse_hand_with_aka, TILE_LABELS_34
from .validation import TileCounts, to_counts, to_counts_34, to_string, validate_hand, is_valid_hand

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Config", "setup_logging",
    "HandNotationError", "ParseError", "UnexpectedCharacter", "InvalidHonorNumber",
    "RedFiveWithHonor", "TrailingDigitsWithoutSuit",
    "ValidationError", "WrongTileCount", "ExcessCopies",
    "Suit", "Honor", "Tile", "ParsedHand", "parse_hand", "parse_hand_with_aka", "TILE_LABELS_34",
    "TileCounts", "to_counts", "to_counts_34", "to_string", "validate_hand", "is_valid_hand",
]
