from __future__ import annotations
from typing import Iterable, Iterator, List, Sequence

import numpy as np
import pandas as pd

from wordfit.positions import ALPHABET, WORD_LENGTH


class WordVocab:
    """Immutable, ordered dictionary of equal-length lowercase words."""

    def __init__(self, words: Sequence[str], word_len: int = WORD_LENGTH) -> None:
        if isinstance(words, str) or not isinstance(words, (list, tuple)):
            raise TypeError("`words` must be a list or tuple of strings")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        for w in words:
            if len(w) != word_len or any(ch not in ALPHABET for ch in w):
                raise ValueError(f"not a {word_len}-letter lowercase word: {w!r}")

        # Enforce uniqueness (first occurrence policy should be handled by from_csv / from_words)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self.word_len = word_len
        self._words: tuple[str, ...] = tuple(words)
        self._index = {w: i for i, w in enumerate(self._words)}

        # N x word_len matrix of letter codes 0..25, shared read-only by solves
        codes = np.zeros((len(self._words), word_len), dtype=np.int8)
        for i, w in enumerate(self._words):
            codes[i] = [ord(ch) - 97 for ch in w]
        codes.setflags(write=False)
        self._codes = codes

    # ---------- Construction helpers ----------

    @classmethod
    def from_words(cls, words: Iterable[str], word_len: int = WORD_LENGTH) -> "WordVocab":
        """Lowercase, strip and dedupe `words`, dropping entries of the wrong shape."""
        clean: List[str] = []
        seen = set()
        for val in words:
            w = str(val).strip().lower()
            if len(w) != word_len or any(ch not in ALPHABET for ch in w):
                continue
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)
        return cls(clean, word_len)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = WORD_LENGTH,
        lowercase: bool = True,
        dedupe: bool = True,
        alpha_only: bool = True,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        alpha_only : bool, default=True
            If True, keep only a-z words.

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")

        clean: List[str] = []
        seen = set()

        for val in df[column].tolist():
            w = val.strip()
            w = w.lower() if lowercase else w

            if len(w) != word_len:
                continue
            if alpha_only and any(ch not in ALPHABET for ch in w):
                continue

            if dedupe:
                if w in seen:
                    continue
                seen.add(w)

            clean.append(w)

        return cls(clean, word_len)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    @property
    def codes(self) -> np.ndarray:
        """Read-only (N, word_len) array of letter codes."""
        return self._codes

    def contains(self, word: str) -> bool:
        """Return True iff `word` exists in the vocabulary (case-sensitive)."""
        return word in self._index

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
