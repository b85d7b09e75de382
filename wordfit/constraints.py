"""
constraints.py

Keeps track of Wordle-style constraints as a per-position letter domain plus
per-letter occurrence bounds.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List

import numpy as np

from wordfit.errors import ContradictionError
from wordfit.positions import (
    ALPHABET,
    WORD_LENGTH,
    check_letters,
    letter_index,
    parse_position_pairs,
)

logger = logging.getLogger(__name__)


class LetterCount(Enum):
    EXCLUDED = "excluded"
    PRESENT = "present"
    EXACTLY_ONCE = "present-exactly-once"


class ConstraintState:
    def __init__(self, word_length: int = WORD_LENGTH, alphabet_size: int = len(ALPHABET)):
        # slot-level allowance: True means the letter is possible in that position
        self.word_length = word_length
        self.alphabet_size = alphabet_size
        self.reset()

    def reset(self):
        self.pos_allowed = np.ones((self.word_length, self.alphabet_size), dtype=bool)
        self.min_counts = np.zeros(self.alphabet_size, dtype=np.int64)
        self.max_counts = np.full(self.alphabet_size, self.word_length, dtype=np.int64)

    def copy(self) -> "ConstraintState":
        other = ConstraintState(self.word_length, self.alphabet_size)
        other.pos_allowed = self.pos_allowed.copy()
        other.min_counts = self.min_counts.copy()
        other.max_counts = self.max_counts.copy()
        return other

    # ---------- Construction ----------

    @classmethod
    def from_signals(
        cls,
        doesnt_contain: str = "",
        contains: str = "",
        contains_only_once: str = "",
        invalid_positions: str = "",
        correct_positions: str = "",
    ) -> "ConstraintState":
        """
        Build a state from the five feedback strings.

        Every string is validated before anything is applied, so a malformed
        input never yields a half-built state.

        Raises
        ------
        InputFormatError
        """
        check_letters(doesnt_contain, "doesnt_contain")
        check_letters(contains, "contains")
        check_letters(contains_only_once, "contains_only_once")
        invalid = parse_position_pairs(invalid_positions, "invalid_positions")
        correct = parse_position_pairs(correct_positions, "correct_positions")

        state = cls()
        for ch in doesnt_contain:
            state.exclude_letter(ch)
        for ch in contains:
            state.require_letter(ch)
        for ch in contains_only_once:
            state.require_letter_once(ch)
        for ch, pos in invalid:
            state.forbid_position(ch, pos)
        for ch, pos in correct:
            state.fix_position(ch, pos)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "normalized constraints: domains=%s bounds=%s",
                [state.allowed_letters(i) for i in range(state.word_length)],
                {c: k.value for c, k in state.letter_constraints().items()},
            )
        return state

    # ---------- Signal application ----------

    def exclude_letter(self, c: str) -> None:
        li = letter_index(c)
        self.pos_allowed[:, li] = False
        self.max_counts[li] = 0

    def require_letter(self, c: str) -> None:
        li = letter_index(c)
        if self.min_counts[li] < 1:
            self.min_counts[li] = 1

    def require_letter_once(self, c: str) -> None:
        # exact count wins over a plain "present"; an exclusion stays at 0
        li = letter_index(c)
        if self.min_counts[li] < 1:
            self.min_counts[li] = 1
        if self.max_counts[li] > 1:
            self.max_counts[li] = 1

    def forbid_position(self, c: str, pos: int) -> None:
        self.pos_allowed[self._slot(pos), letter_index(c)] = False

    def fix_position(self, c: str, pos: int) -> None:
        li = letter_index(c)
        i = self._slot(pos)
        keep = self.pos_allowed[i, li]
        self.pos_allowed[i, :] = False
        # a letter already ruled out here leaves the slot empty
        self.pos_allowed[i, li] = keep

    def _slot(self, pos: int) -> int:
        if pos < 0 or pos >= self.word_length:
            raise IndexError(f"position out of range: {pos}")
        return pos

    # ---------- Introspection ----------

    def allowed_letters(self, pos: int) -> str:
        row = self.pos_allowed[self._slot(pos)]
        return "".join(ALPHABET[a] for a in np.flatnonzero(row))

    def letter_constraints(self) -> Dict[str, LetterCount]:
        out: Dict[str, LetterCount] = {}
        for li, ch in enumerate(ALPHABET):
            if self.max_counts[li] == 0:
                out[ch] = LetterCount.EXCLUDED
            elif self.min_counts[li] >= 1 and self.max_counts[li] == 1:
                out[ch] = LetterCount.EXACTLY_ONCE
            elif self.min_counts[li] >= 1:
                out[ch] = LetterCount.PRESENT
        return out

    def contradictions(self) -> List[str]:
        """Return the reasons no word can satisfy this state (empty if none are known)."""
        reasons: List[str] = []
        for li, ch in enumerate(ALPHABET):
            lo, hi = int(self.min_counts[li]), int(self.max_counts[li])
            if lo > hi:
                reasons.append(f"letter {ch!r} needs at least {lo} but at most {hi} occurrences")
                continue
            slots = int(self.pos_allowed[:, li].sum())
            if lo > slots:
                reasons.append(f"letter {ch!r} needs {lo} occurrences but only {slots} positions allow it")
            forced = int((self.pos_allowed[:, li] & (self.pos_allowed.sum(axis=1) == 1)).sum())
            if forced > hi:
                reasons.append(f"letter {ch!r} is fixed at {forced} positions but allowed at most {hi} times")
        for i in range(self.word_length):
            if not self.pos_allowed[i].any():
                reasons.append(f"position {i + 1} has no allowed letter")
        if int(self.min_counts.sum()) > self.word_length:
            reasons.append(f"more than {self.word_length} letter occurrences required")
        return reasons

    @property
    def is_satisfiable(self) -> bool:
        return not self.contradictions()

    def check(self) -> None:
        """Raise ContradictionError if the state is known to be unsatisfiable."""
        reasons = self.contradictions()
        if reasons:
            raise ContradictionError(reasons)

    def allows(self, word: str) -> bool:
        """True iff `word` fits every position domain and every letter bound."""
        if len(word) != self.word_length:
            return False
        counts = [0] * self.alphabet_size
        for i, ch in enumerate(word):
            li = ord(ch) - 97
            if li < 0 or li >= self.alphabet_size:
                return False
            if not self.pos_allowed[i, li]:
                return False
            counts[li] += 1
        for li in range(self.alphabet_size):
            if counts[li] < self.min_counts[li] or counts[li] > self.max_counts[li]:
                return False
        return True

    def __repr__(self) -> str:
        domains = "/".join(self.allowed_letters(i) or "-" for i in range(self.word_length))
        return f"ConstraintState({domains})"
