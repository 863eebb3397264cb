import numpy as np
import pytest

from riichi_hand_notation import Suit, Tile, parse_hand, parse_hand_with_aka, to_counts_34, to_string


def test_counts_34_shape_and_sum():
    tiles = parse_hand("123m406p789s11122z")
    counts = to_counts_34(tiles)
    assert counts.shape == (34,)
    assert counts.sum() == len(tiles)
    assert counts[Tile.suited(Suit.PIN, 5).index] == 1
    assert counts[27] == 3


def test_counts_34_empty():
    assert not to_counts_34([]).any()


def test_to_string_canonical():
    assert to_string(parse_hand("11222z789s456p123m")) == "123m456p789s11222z"
    assert to_string(parse_hand("0m5m")) == "55m"


def test_to_string_from_counts():
    counts = [0]*34
    counts[0] = 2; counts[33] = 1
    assert to_string(counts) == "11m7z"
    assert to_string(np.asarray(counts)) == "11m7z"


def test_to_string_round_trips_through_parser():
    text = "19m19p19s1234567z"
    assert to_string(parse_hand(to_string(parse_hand(text)))) == text


def test_to_string_empty():
    assert to_string([]) == ""


@pytest.mark.parametrize("counts", [[0]*33, [-1] + [0]*33])
def test_to_string_bad_counts(counts):
    with pytest.raises(ValueError):
        to_string(counts)


def test_count_vector_indices_back_to_tiles():
    hand = parse_hand_with_aka("123m406p789s11122z")
    counts = to_counts_34(hand)
    tiles = [Tile.from_index(i) for i in np.flatnonzero(counts) for _ in range(counts[i])]
    assert tiles == sorted(hand.tiles)
    assert Tile.from_index(np.int64(4)) == Tile.suited(Suit.MAN, 5)
    assert Tile.from_index(np.int64(33)).label == "7z"


def test_to_string_accepts_parsed_hand():
    assert to_string(parse_hand_with_aka("0m5m")) == "55m"
