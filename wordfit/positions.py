"""
positions.py

Wire format for position constraints.

A position string interleaves letters and 1-based slot digits with no
delimiter, e.g. "a3g1" means ('a' at slot 3, 'g' at slot 1). Internally
pairs are kept as PositionPair with a 0-based position.
"""

from __future__ import annotations

import string
from typing import Iterable, List, NamedTuple

from wordfit.errors import InputFormatError

WORD_LENGTH = 5
ALPHABET = string.ascii_lowercase


class PositionPair(NamedTuple):
    letter: str
    position: int  # 0-based


def letter_index(c: str) -> int:
    """Map a lowercase letter to 0..25; raise InputFormatError otherwise."""
    if not isinstance(c, str) or len(c) != 1 or c not in ALPHABET:
        raise InputFormatError(f"not a lowercase letter: {c!r}")
    return ord(c) - 97


def check_letters(s: str, field: str = "letters") -> str:
    """Validate a plain letter signal such as 'shv'; return it unchanged."""
    if not isinstance(s, str):
        raise InputFormatError(f"{field} must be a string")
    for ch in s:
        if ch not in ALPHABET:
            raise InputFormatError(f"{field}: {ch!r} is not a lowercase letter")
    return s


def parse_position_pairs(s: str, field: str = "positions") -> List[PositionPair]:
    """
    Parse an interleaved letter/digit string into PositionPairs.

    Raises
    ------
    InputFormatError
        On odd length, a non-letter in a letter slot, a non-digit marker,
        or a digit outside 1..5.
    """
    if not isinstance(s, str):
        raise InputFormatError(f"{field} must be a string")
    if len(s) % 2 != 0:
        raise InputFormatError(f"{field}: odd length {len(s)}, expected letter/digit pairs")

    pairs: List[PositionPair] = []
    for k in range(0, len(s), 2):
        ch, marker = s[k], s[k + 1]
        if ch not in ALPHABET:
            raise InputFormatError(f"{field}: {ch!r} at offset {k} is not a lowercase letter")
        if not ("0" <= marker <= "9"):
            raise InputFormatError(f"{field}: {marker!r} at offset {k + 1} is not a digit")
        slot = int(marker)
        if slot < 1 or slot > WORD_LENGTH:
            raise InputFormatError(f"{field}: position {slot} outside 1..{WORD_LENGTH}")
        pairs.append(PositionPair(ch, slot - 1))
    return pairs


def format_position_pairs(pairs: Iterable[tuple[str, int]]) -> str:
    """Serialize (letter, 0-based position) pairs back to the interleaved form."""
    out: List[str] = []
    for ch, pos in pairs:
        letter_index(ch)
        if not isinstance(pos, int) or pos < 0 or pos >= WORD_LENGTH:
            raise InputFormatError(f"position out of range: {pos!r}")
        out.append(f"{ch}{pos + 1}")
    return "".join(out)
