"""Exceptions raised while parsing and validating hand notation.

Every error carries its payload as attributes so callers can match on them
instead of on message text. All of them are ValueErrors.
"""

from .config import Config


class HandNotationError(ValueError):
    _fields = ()

    def __init__(self, *args):
        if len(args) != len(self._fields):
            raise TypeError(f"{type(self).__name__} takes {len(self._fields)} argument(s), got {len(args)}")
        for name, value in zip(self._fields, args):
            setattr(self, name, value)
        super().__init__(self._message())

    def _message(self):
        return type(self).__name__

    def _payload(self):
        return tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self._payload()))

    def __repr__(self):
        args = ", ".join(repr(v) for v in self._payload())
        return f"{type(self).__name__}({args})"

    def __reduce__(self):
        return (type(self), self._payload())


class ParseError(HandNotationError):
    pass


class UnexpectedCharacter(ParseError):
    _fields = ("char",)

    def _message(self):
        return f"Unexpected character: {self.char!r}"


class InvalidHonorNumber(ParseError):
    _fields = ("digit",)

    def _message(self):
        return f"Invalid honor number: {self.digit} (honors are 1..7)"


class RedFiveWithHonor(ParseError):
    def _message(self):
        return "Red fives (0) cannot be used with honors (z)"


class TrailingDigitsWithoutSuit(ParseError):
    def _message(self):
        return "Trailing numbers without suit suffix"


class ValidationError(HandNotationError):
    pass


class WrongTileCount(ValidationError):
    _fields = ("actual",)

    def _message(self):
        return f"Hand must have {Config.HAND_SIZE} tiles, got {self.actual}"


class ExcessCopies(ValidationError):
    _fields = ("tile", "count")

    def _message(self):
        return f"Tile {self.tile} appears {self.count} times (max {Config.MAX_COPIES})"
