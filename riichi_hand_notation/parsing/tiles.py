from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from functools import total_ordering
from enum import Enum
from typing import Optional

from .constants import SUIT_OFFSETS, TILE_LABELS_34


class Suit(Enum):
    MAN = "m"
    PIN = "p"
    SOU = "s"


class Honor(Enum):
    EAST = 1
    SOUTH = 2
    WEST = 3
    NORTH = 4
    WHITE = 5
    GREEN = 6
    RED = 7


@total_ordering
@dataclass(frozen=True)
class Tile:
    """
    A single tile value: either suited (suit + rank 1..9) or an honor.

    Red fives are not a separate value; a red 5m is Tile.suited(Suit.MAN, 5).
    """
    suit: Optional[Suit] = None
    rank: Optional[int] = None
    honor: Optional[Honor] = None

    def __post_init__(self):
        if self.honor is not None:
            if self.suit is not None or self.rank is not None:
                raise ValueError("honor tiles have no suit or rank")
            if not isinstance(self.honor, Honor):
                raise ValueError(f"Bad honor: {self.honor!r}")
            return
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Bad suit: {self.suit!r}")
        if not isinstance(self.rank, int) or isinstance(self.rank, bool) or not (1 <= self.rank <= 9):
            raise ValueError(f"numbers 1..9, got {self.rank!r}")

    @classmethod
    def suited(cls, suit: Suit, rank: int) -> Tile:
        return cls(suit=suit, rank=rank)

    @classmethod
    def honor_tile(cls, honor: Honor) -> Tile:
        return cls(honor=honor)

    @classmethod
    def from_index(cls, idx: int) -> Tile:
        idx = operator.index(idx)
        if not (0 <= idx < 34):
            raise ValueError(f"Tile index out of range: {idx}")
        if idx >= SUIT_OFFSETS["z"]:
            return cls.honor_tile(Honor(idx - SUIT_OFFSETS["z"] + 1))
        return cls.suited(Suit("mps"[idx // 9]), idx % 9 + 1)

    @classmethod
    def from_label(cls, label: str) -> Tile:
        """Build a tile from a two-character label like '1m', '7z' or red '0p'."""
        m = re.fullmatch(r"([0-9])([mpsz])", label or "")
        if not m: raise ValueError(f"Bad tile label: {label}")
        d = int(m.group(1)); s = m.group(2)
        if s == "z":
            if not (1 <= d <= 7): raise ValueError("honors 1..7")
            return cls.honor_tile(Honor(d))
        if d == 0: d = 5
        return cls.suited(Suit(s), d)

    @property
    def is_honor(self) -> bool:
        return self.honor is not None

    @property
    def is_suited(self) -> bool:
        return self.honor is None

    @property
    def index(self) -> int:
        """Position in the 34-tile order m1..m9, p1..p9, s1..s9, z1..z7."""
        if self.is_honor:
            return SUIT_OFFSETS["z"] + self.honor.value - 1
        return SUIT_OFFSETS[self.suit.value] + self.rank - 1

    @property
    def label(self) -> str:
        return TILE_LABELS_34[self.index]

    def __str__(self):
        return self.label

    def __lt__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.index < other.index
