"""
Error taxonomy for the Griffinere cipher.

Every failure is a configuration or programming error the caller must fix:
nothing here is retried or recovered internally. All classes derive from
ValueError so callers that only catch ValueError keep working.
"""


class GriffinereError(ValueError):
    """Base class for every error raised by this package."""


class InvalidAlphabet(GriffinereError):
    """Alphabet contains the '.' delimiter, a duplicate, or too few symbols."""


class KeyTooShort(GriffinereError):
    """Key is shorter than the minimum key length."""


class KeyNotInAlphabet(GriffinereError):
    """Key uses a symbol the alphabet does not contain."""


class InvalidSymbol(GriffinereError):
    """Ciphertext contains a character outside the alphabet."""


class InvalidArgument(GriffinereError):
    """Argument outside its accepted range (e.g. a non-positive minimum length)."""


class EmptyInput(GriffinereError):
    """Zero-length buffer handed to the keystream or codec."""


class MalformedPlaintext(GriffinereError):
    """Decoded bytes are not valid UTF-8 (usually the wrong key or alphabet)."""


class InternalInvariantViolation(GriffinereError, RuntimeError):
    """A symbol escaped the alphabet between the codec and the shift step."""
