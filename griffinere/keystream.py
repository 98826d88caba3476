"""
Keystream & Shift Transform
===========================
The key is tiled end-to-end until it covers the encoded segment, then
each symbol is shifted by the alphabet position of the key symbol above it:

    encrypt:  c = alphabet[(k + t) mod N]
    decrypt:  t = alphabet[(c - k + N) mod N]

Inputs are guaranteed alphabet-only by the codec, so a lookup miss here is
a bug upstream and raises InternalInvariantViolation.
"""

from typing import List

from .alphabet import Alphabet
from .errors import EmptyInput, InternalInvariantViolation


class Keystream:
    """Repeating-key positional shift over one alphabet."""

    def __init__(self, alphabet: Alphabet, key: str):
        self._alphabet = alphabet
        self._key      = key
        self._radix    = alphabet.radix

    def repeat_key_to(self, length: int) -> str:
        if length == 0:
            raise EmptyInput("Text cannot be empty")
        repeats = -(-length // len(self._key))
        return (self._key * repeats)[:length]

    def _position(self, symbol: str) -> int:
        pos = self._alphabet.index_of(symbol)
        if pos is None:
            raise InternalInvariantViolation(
                f"Symbol {symbol!r} is not in the alphabet at shift time."
            )
        return pos

    def shift_positive(self, key_symbol: str, text_symbol: str) -> str:
        k = self._position(key_symbol)
        t = self._position(text_symbol)
        return self._alphabet.symbol_at((k + t) % self._radix)

    def shift_negative(self, key_symbol: str, text_symbol: str) -> str:
        k = self._position(key_symbol)
        t = self._position(text_symbol)
        return self._alphabet.symbol_at((t - k + self._radix) % self._radix)

    def apply_positive(self, symbols) -> List[str]:
        """Shift every symbol forward against a keystream of matching length."""
        key = self.repeat_key_to(len(symbols))
        return [self.shift_positive(k, c) for k, c in zip(key, symbols)]

    def apply_negative(self, symbols) -> List[str]:
        key = self.repeat_key_to(len(symbols))
        return [self.shift_negative(k, c) for k, c in zip(key, symbols)]
