from __future__ import annotations

from typing import Dict, Iterable, Sequence, Union

import numpy as np

from ..parsing.tiles import Tile

TileCounts = Dict[Tile, int]


def to_counts(tiles: Iterable[Tile]) -> TileCounts:
    counts: TileCounts = {}
    for tile in tiles:
        counts[tile] = counts.get(tile, 0) + 1
    return counts


def to_counts_34(tiles: Iterable[Tile]) -> np.ndarray:
    """Count vector in 34-index order (m1..m9, p1..p9, s1..s9, z1..z7)."""
    idx = np.fromiter((t.index for t in tiles), dtype=np.int64)
    return np.bincount(idx, minlength=34)


def _counts_from(tiles_or_counts) -> np.ndarray:
    if isinstance(tiles_or_counts, np.ndarray) or (
        isinstance(tiles_or_counts, (list, tuple))
        and tiles_or_counts
        and not isinstance(tiles_or_counts[0], Tile)
    ):
        counts = np.asarray(tiles_or_counts, dtype=np.int64)
        if counts.shape != (34,):
            raise ValueError("counts must be length 34")
        if np.any(counts < 0):
            raise ValueError("counts invalid: negative entry")
        return counts
    return to_counts_34(tiles_or_counts)


def to_string(tiles_or_counts: Union[Iterable[Tile], Sequence[int], np.ndarray]) -> str:
    """
    Canonical notation for a hand, e.g. '123m456p789s11222z'.

    Accepts tiles or a 34-length count vector. Fives are always written as 5.
    """
    counts = _counts_from(tiles_or_counts)
    parts = []
    for suit, off, n in (("m",0,9),("p",9,9),("s",18,9),("z",27,7)):
        digits = []
        for i in range(n):
            digits.extend(str(i+1) for _ in range(int(counts[off + i])))
        if digits:
            parts.append("".join(digits) + suit)
    return "".join(parts)
