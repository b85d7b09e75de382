"""
Feedback utilities for Wordle.

Scores a guess against a target and translates one scored guess into the
five signal strings understood by ConstraintState.from_signals.
"""

from collections import Counter
from typing import Dict, List

from wordfit.positions import WORD_LENGTH, format_position_pairs

Signals = Dict[str, str]


def _check_word(word: str, name: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"{name} must be a string")
    if len(word) != WORD_LENGTH:
        raise ValueError(f"{name} must be length {WORD_LENGTH}")
    if not word.isalpha() or not word.isascii():
        raise ValueError(f"{name} must be alphabetic")
    if not word.islower():
        raise ValueError(f"{name} must be lowercase")


def score_pattern(guess: str, target: str) -> List[int]:
    """
    Compute the 5-position Wordle feedback for `guess` against `target`.

    Returns
    -------
    list[int]
        0 = gray (absent, or over-used relative to target counts),
        1 = yellow (present elsewhere), 2 = green (exact position).
    """
    _check_word(guess, "guess")
    _check_word(target, "target")

    pattern: List[int] = [0] * WORD_LENGTH
    remaining = Counter(target)

    # Pass 1: mark greens and decrement availability
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = 2
            remaining[g] -= 1

    # Pass 2: mark yellows where counts allow (else gray)
    for i, g in enumerate(guess):
        if pattern[i] == 0 and remaining[g] > 0:
            pattern[i] = 1
            remaining[g] -= 1

    return pattern


def signals_from_feedback(guess: str, pattern: List[int]) -> Signals:
    """
    Translate one scored guess into keyword arguments for `solve`.

    - green  -> correct_positions
    - yellow -> invalid_positions, and the letter is required
    - gray of a letter never green/yellow -> doesnt_contain
    - gray of a letter also green/yellow -> invalid_positions; if that letter
      scored green/yellow exactly once it must occur exactly once

    Letters scored green/yellow two or more times alongside a gray are only
    marked as present, so the true target always stays a candidate.
    """
    _check_word(guess, "guess")
    if not isinstance(pattern, (list, tuple)) or len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have length {WORD_LENGTH}")
    if any(p not in (0, 1, 2) for p in pattern):
        raise ValueError("pattern elements must be in {0,1,2}")

    gy_counts: Counter = Counter()
    saw_gray = set()
    for ch, p in zip(guess, pattern):
        if p:
            gy_counts[ch] += 1
        else:
            saw_gray.add(ch)

    correct, invalid = [], []
    for i, (ch, p) in enumerate(zip(guess, pattern)):
        if p == 2:
            correct.append((ch, i))
        elif p == 1 or gy_counts[ch]:
            invalid.append((ch, i))

    doesnt, contains, once = [], [], []
    for ch in dict.fromkeys(guess):
        k = gy_counts[ch]
        if k == 0:
            doesnt.append(ch)
        elif k == 1 and ch in saw_gray:
            once.append(ch)
        else:
            contains.append(ch)

    return {
        "doesnt_contain": "".join(doesnt),
        "contains": "".join(contains),
        "contains_only_once": "".join(once),
        "invalid_positions": format_position_pairs(invalid),
        "correct_positions": format_position_pairs(correct),
    }
