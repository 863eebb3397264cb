from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import Config
from ..errors import InvalidHonorNumber, RedFiveWithHonor, TrailingDigitsWithoutSuit, UnexpectedCharacter
from .constants import HONOR_LETTER, RED_FIVE_DIGIT, SUIT_LETTERS
from .tiles import Honor, Suit, Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedHand:
    tiles: Tuple[Tile, ...]
    aka_count: int = 0  # number of red fives (0m, 0p, 0s)

    def __len__(self):
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)


def _honor_from_digit(d: int) -> Honor:
    if not (1 <= d <= 7):
        raise InvalidHonorNumber(d)
    return Honor(d)


def parse_hand_with_aka(text: Optional[str]) -> ParsedHand:
    """
    Parse Tenhou-style groups like '123m406p789s11122z' into tiles, in the
    order they are written, counting red fives ('0') along the way.

    Digits are held until the suit letter that follows them. Whitespace is
    skipped anywhere. Raises a ParseError subclass on the first problem:
    UnexpectedCharacter, InvalidHonorNumber, RedFiveWithHonor or
    TrailingDigitsWithoutSuit.
    """
    tiles: List[Tile] = []
    aka_count = 0
    pending: List[Tuple[int, bool]] = []  # (digit, is_red)

    for ch in text or "":
        if ch == RED_FIVE_DIGIT:
            pending.append((5, True))
        elif "1" <= ch <= "9":
            pending.append((int(ch), False))
        elif ch in SUIT_LETTERS:
            suit = Suit(ch)
            for d, is_red in pending:
                tiles.append(Tile.suited(suit, d))
                if is_red: aka_count += 1
            pending.clear()
        elif ch == HONOR_LETTER:
            for d, is_red in pending:
                if is_red:
                    raise RedFiveWithHonor()
                tiles.append(Tile.honor_tile(_honor_from_digit(d)))
            pending.clear()
        elif ch in Config.WHITESPACE:
            continue
        else:
            raise UnexpectedCharacter(ch)

    if pending:
        raise TrailingDigitsWithoutSuit()

    logger.debug(f"Parsed {len(tiles)} tiles ({aka_count} red) from {text!r}")
    return ParsedHand(tuple(tiles), aka_count)


def parse_hand(text: Optional[str]) -> List[Tile]:
    return list(parse_hand_with_aka(text).tiles)
