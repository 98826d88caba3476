"""
Length-Padding Extension
========================
Short messages can be stretched to a minimum length by borrowing characters
from the message itself. The borrowed characters are encrypted separately
and glued on either side with the '.' delimiter:

    encrypt(reversed(front)) + "." + encrypt(message) + "." + encrypt(back)

Roughly 4/5 of the shortfall is taken from the front of the space-stripped
message and the rest from its end, cycling through it when the message is
too short. The decrypter only ever reads the middle segment.
"""

import math
from typing import Tuple

PADDING_RATIO = 1.25


def split_shortfall(needed: int) -> Tuple[int, int]:
    """Return (front_count, back_count) for `needed` extra characters."""
    front_count = math.ceil(needed / PADDING_RATIO)
    return front_count, needed - front_count


def take_front(stripped: str, count: int) -> str:
    if not stripped:
        return ""
    return "".join(stripped[i % len(stripped)] for i in range(count))


def take_back(stripped: str, count: int) -> str:
    """Last `count` characters counted from the end, last character first."""
    if not stripped:
        return ""
    n = len(stripped)
    return "".join(stripped[n - 1 - (i % n)] for i in range(count))


def borrow_padding(plaintext: str, minimum_length: int) -> Tuple[str, str]:
    """
    Work out the raw (unencrypted) front and back padding for `plaintext`.
    Both are empty when the message already meets `minimum_length`.
    """
    if len(plaintext) >= minimum_length:
        return "", ""
    stripped = plaintext.replace(" ", "")
    front_count, back_count = split_shortfall(minimum_length - len(plaintext))
    return take_front(stripped, front_count), take_back(stripped, back_count)
