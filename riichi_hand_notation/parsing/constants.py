SUIT_LETTERS = ("m", "p", "s")
HONOR_LETTER = "z"
SUIT_OFFSETS = {"m": 0, "p": 9, "s": 18, "z": 27}
RED_FIVE_DIGIT = "0"
TILE_LABELS_34 = tuple(
    [f"{i+1}m" for i in range(9)] +
    [f"{i-8}p" for i in range(9, 18)] +
    [f"{i-17}s" for i in range(18, 27)] +
    ["1z","2z","3z","4z","5z","6z","7z"]
)
