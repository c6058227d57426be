"""
Scoring (feedback) for a single (target, guess) pair.

A score has two counters:
  - placed    : digits of the guess that are in the target at the same place
  - misplaced : digits of the guess that are in the target at another place

Because valid numbers never repeat a digit, every guess digit contributes to
at most one counter, so placed + misplaced <= places always holds.

Examples (4 places):
  score("0123", "0132") -> 2 2
  score("0123", "4567") -> 0 0
  score("0123", "3210") -> 0 4
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence


@dataclass
class Score:
    placed: int = 0
    misplaced: int = 0

    def set_placed(self, placed: int) -> None:
        self.placed = placed

    def get_placed(self) -> int:
        return self.placed

    def set_misplaced(self, misplaced: int) -> None:
        self.misplaced = misplaced

    def get_misplaced(self) -> int:
        return self.misplaced

    def count(self, in_place: bool) -> None:
        """Increment `placed` when in_place, else `misplaced`."""
        if in_place:
            self.placed += 1
        else:
            self.misplaced += 1

    def correct(self, places: int) -> bool:
        """True when every place matched, i.e. the guess IS the target."""
        return self.placed == places

    def valid(self, places: int) -> bool:
        """
        Arithmetic sanity of a score for a game with `places` places.

        Rules:
          - both counters non-negative
          - placed + misplaced <= places
          - placed == places - 1 forbids any misplaced digit: with unique
            digits the one remaining digit is either right or absent
        """
        if self.placed < 0 or self.misplaced < 0:
            return False
        if self.placed + self.misplaced > places:
            return False
        if self.placed == places - 1 and self.misplaced != 0:
            return False
        return True

    def equal(self, other: "Score") -> bool:
        return self.placed == other.placed and self.misplaced == other.misplaced

    def copy(self) -> "Score":
        return Score(self.placed, self.misplaced)

    def __str__(self) -> str:
        return f"{self.placed} {self.misplaced}"

    @staticmethod
    def parse(text: str) -> "Score":
        """
        Parse user text into a Score.

        Accepts "12", "1 2" or "1,2" (placed first). Raises ValueError for
        anything else. Range checks belong to validation.validate_score.
        """
        t = text.strip().replace(",", " ")
        parts = t.split()
        if len(parts) == 1 and len(parts[0]) == 2:
            parts = list(parts[0])
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"score must be two counts (placed misplaced); got {text!r}")
        return Score(int(parts[0]), int(parts[1]))


def score(target: Sequence[int], guess: Sequence[int]) -> Score:
    """
    Score `guess` with `target` as the ground truth.

    Preconditions:
      - len(target) == len(guess)
    """
    assert len(target) == len(guess), "Target and guess must have the same number of places"

    s = Score()
    for i, t in enumerate(target):
        for j, g in enumerate(guess):
            if g == t:
                s.count(i == j)
    return s
