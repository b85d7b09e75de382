"""
solver.py

Finds the dictionary words that satisfy a ConstraintState.

Three equivalent strategies share one contract (position domains, excluded
letters, required letters, exact-once letters):
  - filter_candidates: plain linear scan, the reference behaviour
  - WordleSolver.candidates: the same scan vectorized over the vocab's code matrix
  - enumerate_assignments: backtracking over positions, for when no full
    word list is available up front
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Union

import numpy as np

from wordfit.constraints import ConstraintState
from wordfit.positions import ALPHABET
from wordfit.vocab import WordVocab

logger = logging.getLogger(__name__)


def filter_candidates(words: Iterable[str], state: ConstraintState) -> List[str]:
    """Keep only the words `state` allows, in their original order."""
    return [w for w in words if state.allows(w)]


def enumerate_assignments(
    state: ConstraintState,
    *,
    accept: Optional[Callable[[str], bool]] = None,
) -> Iterator[str]:
    """
    Yield every letter string satisfying `state`, in lexicographic order.

    Letters are assigned position by position from each position's domain.
    A branch is cut as soon as a letter would exceed its maximum count, or
    the remaining positions are too few to reach every outstanding minimum.
    `accept` (e.g. dictionary membership) is only consulted on complete words.
    """
    if state.contradictions():
        return

    n = state.word_length
    domains = [np.flatnonzero(state.pos_allowed[i]).tolist() for i in range(n)]
    min_counts = state.min_counts.tolist()
    max_counts = state.max_counts.tolist()
    counts = [0] * state.alphabet_size
    letters = [""] * n

    def deficit() -> int:
        return sum(lo - c for lo, c in zip(min_counts, counts) if lo > c)

    def extend(i: int) -> Iterator[str]:
        if i == n:
            word = "".join(letters)
            if accept is None or accept(word):
                yield word
            return
        for li in domains[i]:
            if counts[li] >= max_counts[li]:
                continue
            counts[li] += 1
            if deficit() <= n - i - 1:
                letters[i] = ALPHABET[li]
                yield from extend(i + 1)
            counts[li] -= 1

    yield from extend(0)


class WordleSolver:
    """
    Answers constraint queries against one shared, read-only WordVocab.

    Parameters
    ----------
    vocab : WordVocab
        The dictionary; never mutated, so one solver may serve concurrent callers.
    strict : bool, default=False
        If True, contradictory constraints raise ContradictionError instead of
        producing an empty result.
    """

    def __init__(self, vocab: WordVocab, *, strict: bool = False) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        self.vocab = vocab
        self.strict = bool(strict)

    def candidates(self, state: ConstraintState) -> List[str]:
        """Return every vocab word allowed by `state`, in vocab order."""
        if state.word_length != self.vocab.word_len:
            raise ValueError(
                f"state is for {state.word_length}-letter words, vocab has {self.vocab.word_len}"
            )
        reasons = state.contradictions()
        if reasons:
            logger.debug("unsatisfiable constraints: %s", "; ".join(reasons))
            return []
        if len(self.vocab) == 0:
            return []

        codes = self.vocab.codes.astype(np.intp)
        # (N, L): is each letter allowed at its position
        ok = state.pos_allowed[np.arange(state.word_length), codes].all(axis=1)

        # (N, 26): letter occurrence counts per word
        counts = (codes[:, :, None] == np.arange(state.alphabet_size)).sum(axis=1)
        ok &= (counts >= state.min_counts).all(axis=1)
        ok &= (counts <= state.max_counts).all(axis=1)

        return [self.vocab.word_at(int(i)) for i in np.flatnonzero(ok)]

    def solve(
        self,
        doesnt_contain: str = "",
        contains: str = "",
        contains_only_once: str = "",
        invalid_positions: str = "",
        correct_positions: str = "",
    ) -> List[str]:
        """
        Return every vocab word consistent with the five feedback strings.

        An empty list means no solution. Malformed strings raise
        InputFormatError before any search happens.
        """
        state = ConstraintState.from_signals(
            doesnt_contain,
            contains,
            contains_only_once,
            invalid_positions,
            correct_positions,
        )
        if self.strict:
            state.check()
        result = self.candidates(state)
        logger.debug("%d of %d words match", len(result), len(self.vocab))
        return result

    def solve_one(
        self,
        doesnt_contain: str = "",
        contains: str = "",
        contains_only_once: str = "",
        invalid_positions: str = "",
        correct_positions: str = "",
    ) -> Optional[str]:
        """Return the first matching word in vocab order, or None."""
        result = self.solve(
            doesnt_contain,
            contains,
            contains_only_once,
            invalid_positions,
            correct_positions,
        )
        return result[0] if result else None


def solve(
    doesnt_contain: str = "",
    contains: str = "",
    contains_only_once: str = "",
    invalid_positions: str = "",
    correct_positions: str = "",
    *,
    words: Union[WordVocab, Iterable[str]],
    strict: bool = False,
) -> List[str]:
    """Function-style entry point: build a solver over `words` and run one query."""
    vocab = words if isinstance(words, WordVocab) else WordVocab.from_words(words)
    return WordleSolver(vocab, strict=strict).solve(
        doesnt_contain,
        contains,
        contains_only_once,
        invalid_positions,
        correct_positions,
    )
