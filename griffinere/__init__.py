"""
griffinere — Griffinere polyalphabetic cipher
=============================================
A repeating-key substitution cipher over any alphabet of 3 or more symbols.

Pipeline (per space-delimited segment):
    1  ENCODE     — UTF-8 bytes rewritten in base N over the alphabet
    2  SHIFT      — each symbol shifted by the matching key symbol (mod N)
    3  PAD        — optional: encrypted filler borrowed from the message,
                    wrapped as  prefix.ciphertext.suffix

Not cryptographically secure. Deterministic, unauthenticated, no diffusion.

License: Apache 2.0
"""

__version__  = "1.0.0"
__project__  = "Griffinere"

from .errors    import (
    GriffinereError,
    InvalidAlphabet,
    KeyTooShort,
    KeyNotInAlphabet,
    InvalidSymbol,
    InvalidArgument,
    EmptyInput,
    MalformedPlaintext,
    InternalInvariantViolation,
)
from .alphabet  import Alphabet, DEFAULT_ALPHABET, validate_alphabet, validate_key
from .codec     import BaseNCodec
from .keystream import Keystream
from .padding   import PADDING_RATIO
from .cipher    import Griffinere

__all__ = [
    "Griffinere",
    "Alphabet",
    "BaseNCodec",
    "Keystream",
    "DEFAULT_ALPHABET",
    "PADDING_RATIO",
    "validate_alphabet",
    "validate_key",
    "GriffinereError",
    "InvalidAlphabet",
    "KeyTooShort",
    "KeyNotInAlphabet",
    "InvalidSymbol",
    "InvalidArgument",
    "EmptyInput",
    "MalformedPlaintext",
    "InternalInvariantViolation",
]
