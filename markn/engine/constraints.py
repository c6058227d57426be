"""
Candidate filtering given game history.

Given:
  - a pool of numbers (often the full number sequence)
  - a history of (guess, score) pairs

Return:
  - numbers that would have produced exactly the recorded score for every
    guess, i.e. the targets still possible.

This is the direct, enumerate-and-check way of turning feedback into a
shrinking candidate set. The brute force generator is built on it, and tests
use it as an oracle for the monitors generator.
"""

from typing import Iterable, List, Tuple

from .numbers import Number
from .scoring import Score

# History is a sequence of (guess, score) tuples recorded by a game.
History = Iterable[Tuple[Number, Score]]


def is_consistent(candidate: Number, history: History) -> bool:
    """True if `candidate`, taken as the target, reproduces every recorded score."""
    for guess, s in history:
        if not s.equal(candidate.score(guess)):
            return False
    return True


def filter_candidates(numbers: Iterable[Number], history: History) -> List[Number]:
    """
    Keep only valid numbers consistent with ALL (guess, score) pairs.

    Order is preserved as in `numbers`.
    """
    hist = list(history)
    out: List[Number] = []
    for n in numbers:
        # Repeated digits can never be a target
        if not n.valid():
            continue
        if is_consistent(n, hist):
            out.append(n)
    return out
