"""
errors.py

Exceptions raised while turning feedback strings into constraints.
"""


class WordfitError(Exception):
    """Base class for all wordfit errors."""


class InputFormatError(WordfitError, ValueError):
    """A feedback string is malformed (bad letter, bad position marker, odd pairing)."""


class ContradictionError(WordfitError):
    """The constraints cannot be satisfied by any word."""

    def __init__(self, reasons):
        self.reasons = list(reasons)
        super().__init__("; ".join(self.reasons) or "contradictory constraints")
