from __future__ import annotations

from typing import Sequence

from ..config import Config
from ..errors import ExcessCopies, ValidationError, WrongTileCount
from ..parsing.tiles import Tile
from .counts import to_counts


def validate_hand(tiles: Sequence[Tile]) -> None:
    """
    Check a closed hand: exactly Config.HAND_SIZE tiles and no tile more than
    Config.MAX_COPIES times. The size check runs first; red fives count as
    plain fives.
    """
    if len(tiles) != Config.HAND_SIZE:
        raise WrongTileCount(len(tiles))

    for tile, count in to_counts(tiles).items():
        if count > Config.MAX_COPIES:
            raise ExcessCopies(tile, count)


def is_valid_hand(tiles: Sequence[Tile]) -> bool:
    try:
        validate_hand(tiles)
    except ValidationError:
        return False
    return True
