from .counts import TileCounts, to_counts, to_counts_34, to_string
from .validate import validate_hand, is_valid_hand

__all__ = [
    "TileCounts", "to_counts", "to_counts_34", "to_string",
    "validate_hand", "is_valid_hand",
]
