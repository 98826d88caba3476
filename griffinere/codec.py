"""
Base-N Byte Codec
=================
Maps arbitrary bytes to strings drawn only from the configured alphabet,
using the alphabet length as the numeric radix.

The byte string is read as one big-endian unsigned integer and written out
in base N. A plain integer conversion would drop leading zero bytes, so each
one is emitted as an extra copy of alphabet[0] in front of the digits:

    b"\\x00\\x00\\x01"  ->  zero, zero, then the base-N digits of 1

Large single segments are converted as one integer, so cost grows roughly
quadratically with segment length.
"""

import logging

from .alphabet import Alphabet
from .errors import EmptyInput, InvalidSymbol, MalformedPlaintext

logger = logging.getLogger(__name__)


class BaseNCodec:
    """Bijective bytes <-> alphabet-string codec."""

    def __init__(self, alphabet: Alphabet):
        self._alphabet = alphabet
        self._radix    = alphabet.radix
        self._zero     = alphabet.zero

    def encode_bytes(self, data: bytes) -> str:
        if not data:
            return ""

        zero_count = len(data) - len(data.lstrip(b"\x00"))
        value = int.from_bytes(data, byteorder="big")
        if value == 0:
            return self._zero * max(1, zero_count)

        digits = []
        while value > 0:
            value, rem = divmod(value, self._radix)
            digits.append(self._alphabet.symbol_at(rem))

        return self._zero * zero_count + "".join(reversed(digits))

    def decode_bytes(self, text: str) -> bytes:
        """
        Inverse of encode_bytes(). Raises InvalidSymbol if `text` holds a
        character the alphabet does not contain.
        """
        if not text:
            return b""

        zero_count = len(text) - len(text.lstrip(self._zero))

        value = 0
        for ch in text:
            digit = self._alphabet.index_of(ch)
            if digit is None:
                raise InvalidSymbol(f"Cipher text contains character '{ch}' not in the alphabet.")
            value = value * self._radix + digit

        byte_len = (value.bit_length() + 7) // 8
        return b"\x00" * zero_count + value.to_bytes(byte_len, byteorder="big")

    def encode_text(self, text: str) -> list:
        """UTF-8 encode `text`, then base-N encode. Returns the symbols as a list."""
        if len(text) == 0:
            raise EmptyInput("Text cannot be empty")
        return list(self.encode_bytes(text.encode("utf-8")))

    def decode_text(self, symbols) -> str:
        if len(symbols) == 0:
            raise EmptyInput("Encoded input cannot be empty")
        raw = self.decode_bytes("".join(symbols))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"UTF-8 decode failed on {len(raw)}B segment at offset {e.start}")
            raise MalformedPlaintext(
                "Decrypted segment is not valid UTF-8; wrong key or alphabet?"
            ) from e
