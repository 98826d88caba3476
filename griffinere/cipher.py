"""
Griffinere — Polyalphabetic cipher over a configurable alphabet
===============================================================
Each space-delimited segment of the message is UTF-8 encoded, rewritten in
base N over the alphabet (N = alphabet length), then shifted symbol by
symbol against the repeating key. Segments are rejoined with single spaces,
so runs of spaces survive the round trip unchanged.

Optionally, short messages are padded to a minimum length with encrypted
material borrowed from the message itself (see padding.py).

Not a modern cipher: deterministic, unauthenticated, key reused for every
segment. Use the AEAD constructions of a real crypto library when
confidentiality matters.
"""

import logging
from typing import Optional

from .alphabet import DEFAULT_ALPHABET, DELIMITER, validate_alphabet, validate_key
from .codec import BaseNCodec
from .errors import InvalidArgument, InvalidSymbol
from .keystream import Keystream
from .padding import borrow_padding

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR = " "


class Griffinere:
    """
    Griffinere cipher bound to one alphabet and one key.

    The instance holds no mutable state after construction and can be
    shared between threads.
    """

    def __init__(self, key: str, alphabet: Optional[str] = None):
        """
        Pass a key of at least 3 symbols. Omit `alphabet` to use the
        62-symbol default (A-Z, a-z, 0-9).
        """
        candidate = DEFAULT_ALPHABET if alphabet is None else alphabet
        self._alphabet  = validate_alphabet(candidate, key)
        self._key       = validate_key(key)
        self._codec     = BaseNCodec(self._alphabet)
        self._keystream = Keystream(self._alphabet, self._key)
        logger.info(f"Griffinere ready | radix={self.radix} key_len={len(self._key)}")

    @classmethod
    def with_alphabet(cls, alphabet: str, key: str) -> "Griffinere":
        return cls(key, alphabet)

    @property
    def alphabet(self) -> str:
        return self._alphabet.symbols

    @property
    def key(self) -> str:
        return self._key

    @property
    def radix(self) -> int:
        return self._alphabet.radix

    # ── encryption ──────────────────────────────────────────────────────────

    def _encrypt_segment(self, segment: str) -> str:
        encoded = self._codec.encode_text(segment)
        return "".join(self._keystream.apply_positive(encoded))

    def encrypt_string(self, plaintext: str,
                       minimum_response_length: Optional[int] = None) -> str:
        """
        Encrypt `plaintext`. Blank input gives "".
        With `minimum_response_length`, short messages are padded so the
        result is at least that long.
        """
        if minimum_response_length is not None:
            return self.encrypt_with_minimum_length(plaintext, minimum_response_length)
        if not plaintext or not plaintext.strip():
            return ""

        result = []
        for segment in plaintext.split(SEGMENT_SEPARATOR):
            if segment == "":
                result.append(segment)
                continue
            result.append(self._encrypt_segment(segment))
        return SEGMENT_SEPARATOR.join(result)

    def encrypt_with_minimum_length(self, plaintext: str, minimum_length: int) -> str:
        if not plaintext or not plaintext.strip():
            return ""
        if minimum_length < 1:
            raise InvalidArgument("Minimum response length must be greater than zero.")

        front, back = borrow_padding(plaintext, minimum_length)
        logger.debug(f"Padding: msg={len(plaintext)} min={minimum_length} "
                     f"front={len(front)} back={len(back)}")

        prefix = self.encrypt_string(front[::-1]) + DELIMITER if front else ""
        suffix = DELIMITER + self.encrypt_string(back) if back else ""
        return prefix + self.encrypt_string(plaintext) + suffix

    # ── decryption ──────────────────────────────────────────────────────────

    def _decrypt_segment(self, segment: str) -> str:
        for ch in segment:
            if ch not in self._alphabet:
                raise InvalidSymbol(f"Cipher text contains character '{ch}' not in the alphabet.")
        shifted = self._keystream.apply_negative(segment)
        return self._codec.decode_text(shifted)

    def decrypt_string(self, ciphertext: str) -> str:
        """
        Decrypt `ciphertext`. Blank input gives "".
        A padded ciphertext (prefix.message.suffix) is reduced to its
        middle segment first; the padding is never decrypted.
        """
        if not ciphertext or not ciphertext.strip():
            return ""

        if DELIMITER in ciphertext:
            ciphertext = ciphertext.split(DELIMITER)[1]

        result = []
        for segment in ciphertext.split(SEGMENT_SEPARATOR):
            if segment == "":
                result.append("")
                continue
            result.append(self._decrypt_segment(segment))
        return SEGMENT_SEPARATOR.join(result)

    def __repr__(self):
        return f"Griffinere(radix={self.radix}, key_len={len(self._key)})"
