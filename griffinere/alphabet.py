"""
Alphabet Model
==============
The ordered, duplicate-free symbol set shared by the base-N codec (as its
radix) and the shift transform (as its modulus).

Rules:
    * never contains the '.' delimiter (reserved for the padding wrapper)
    * no duplicate symbols
    * at least 3 symbols
    * every key symbol must be present

Default alphabet: A-Z then a-z then 0-9 (62 symbols).
"""

import logging
from typing import Iterator, Optional

from .errors import InvalidAlphabet, KeyNotInAlphabet, KeyTooShort

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
)
DELIMITER           = "."
MIN_ALPHABET_LENGTH = 3
MIN_KEY_LENGTH      = 3


class Alphabet:
    """Immutable symbol list with an O(1) symbol -> index map."""

    __slots__ = ("_symbols", "_positions")

    def __init__(self, symbols: str):
        self._symbols   = symbols
        self._positions = {ch: i for i, ch in enumerate(symbols)}

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def radix(self) -> int:
        return len(self._symbols)

    @property
    def zero(self) -> str:
        """The symbol standing for digit 0 (and for each leading zero byte)."""
        return self._symbols[0]

    def index_of(self, symbol: str) -> Optional[int]:
        return self._positions.get(symbol)

    def symbol_at(self, index: int) -> str:
        return self._symbols[index]

    def __contains__(self, symbol) -> bool:
        return symbol in self._positions

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self):
        return f"Alphabet(radix={self.radix})"


def validate_alphabet(candidate: str, key: str) -> Alphabet:
    """
    Check `candidate` against the alphabet rules and make sure every
    symbol of `key` appears in it. Order of first appearance is kept.
    """
    if not candidate or not candidate.strip():
        raise InvalidAlphabet("Alphabet must not be empty or whitespace.")
    if DELIMITER in candidate:
        raise InvalidAlphabet(f"Alphabet must not contain '{DELIMITER}'")

    seen = set()
    unique = []
    for ch in candidate:
        if ch in seen:
            raise InvalidAlphabet(f"Duplicate character '{ch}' in provided alphabet.")
        seen.add(ch)
        unique.append(ch)

    if len(unique) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabet(
            f"Alphabet must contain at least {MIN_ALPHABET_LENGTH} unique characters."
        )

    for ch in key:
        if ch not in seen:
            raise KeyNotInAlphabet(
                f"Alphabet does not contain the character '{ch}' supplied in the key."
            )

    if " " in seen:
        logger.warning("Alphabet contains a space; ciphertext segments are space-delimited")

    return Alphabet("".join(unique))


def validate_key(key: str) -> str:
    if len(key) < MIN_KEY_LENGTH:
        raise KeyTooShort(f"Key must be at least {MIN_KEY_LENGTH} characters long")
    return key
