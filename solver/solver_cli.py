"""
solver/solver_cli.py

Command-line front end for the constraint solver.

Loads a word list, applies the feedback you pass as flags, and prints every
matching word (or 'No valid solution').

Run:
  python -m solver.solver_cli --csv word_list.csv \
      --doesnt-contain shvecirodm --contains agn \
      --invalid a3a5a4g1 --correct n3a2g4y5

  python -m solver.solver_cli --csv word_list.csv --guess allot --pattern yybyy

Position flags pair a letter with a 1-based slot: 'a3' = 'a' at slot 3.
A scored guess is merged with any explicit signal flags.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Dict, List, Optional

from wordfit.errors import ContradictionError, InputFormatError
from wordfit.feedback import signals_from_feedback
from wordfit.solver import WordleSolver
from wordfit.vocab import WordVocab

logger = logging.getLogger(__name__)


def parse_feedback(s: str) -> List[int]:
    """Parse a 5-char feedback into a list of ints [0/1/2].
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != 5:
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return [int(x) for x in nums]

    mapping = {"g": 2, "y": 1, "b": 0, "2": 2, "1": 1, "0": 0}
    if len(s) != 5:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [mapping[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="List dictionary words consistent with Wordle feedback")
    ap.add_argument("--csv", default="word_list.csv", help="Path to word_list.csv")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--doesnt-contain", default="", help="letters absent from the word, e.g. 'shv'")
    ap.add_argument("--contains", default="", help="letters present at least once")
    ap.add_argument("--contains-only-once", default="", help="letters present exactly once")
    ap.add_argument("--invalid", default="", help="letter/slot pairs the letter is NOT at, e.g. 'a3g1'")
    ap.add_argument("--correct", default="", help="letter/slot pairs the letter IS at, e.g. 'n3a2'")
    ap.add_argument("--guess", help="a guessed word whose feedback is given by --pattern")
    ap.add_argument("--pattern", help="feedback for --guess: g/y/b, 2/1/0 or [0,1,2,2,0]")
    ap.add_argument("--one", action="store_true", help="print only the first match")
    ap.add_argument("--strict", action="store_true", help="report contradictory feedback as an error")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def collect_signals(args: argparse.Namespace) -> Dict[str, str]:
    """Merge the explicit signal flags with the signals implied by --guess/--pattern."""
    signals = {
        "doesnt_contain": args.doesnt_contain,
        "contains": args.contains,
        "contains_only_once": args.contains_only_once,
        "invalid_positions": args.invalid,
        "correct_positions": args.correct,
    }
    if args.guess is not None:
        scored = signals_from_feedback(args.guess.strip().lower(), parse_feedback(args.pattern))
        for key, value in scored.items():
            signals[key] += value
        logger.debug("signals from %s: %s", args.guess, scored)
    return signals


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if (args.guess is None) != (args.pattern is None):
        ap.error("--guess and --pattern must be given together")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        vocab = WordVocab.from_csv(args.csv, column=args.column)
    except (OSError, KeyError, ValueError) as e:
        print("Could not load word list:", e, file=sys.stderr)
        return 2
    logger.info("loaded %d words from %s", len(vocab), args.csv)
    solver = WordleSolver(vocab, strict=args.strict)

    try:
        signals = collect_signals(args)
        query = solver.solve_one if args.one else solver.solve
        found = query(**signals)
    except (InputFormatError, ValueError, TypeError) as e:
        print("Invalid feedback:", e, file=sys.stderr)
        return 2
    except ContradictionError as e:
        print("Contradictory feedback:", e, file=sys.stderr)
        return 1

    if not found:
        print("No valid solution")
    elif args.one:
        print(found)
    else:
        print(" ".join(found))
    return 0


if __name__ == "__main__":
    sys.exit(main())
