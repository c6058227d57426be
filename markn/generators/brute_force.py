"""
Brute Force generator.

Strategy:
  - Walk the complete sequence of valid numbers (engine.sequence) and keep
    those that would have produced every recorded score.
  - The next guess is the first survivor, so with the same history it
    agrees with the monitors generator (both pick the smallest consistent
    number).

Notes:
  - The survivor list is narrowed by one round at a time on tell_score()
    and rebuilt from the full sequence on retract_score().
  - Cost is proportional to the sequence length (5040 for 10 digits and
    4 places) times the rounds. Useful as a reference and for comparisons.
"""

from __future__ import annotations

from typing import List, Tuple

from markn.engine import GameConfig, DEFAULT_CONFIG, Number, Score
from markn.engine import filter_candidates, number_sequence
from .base import BaseGenerator, GeneratorState, register


@register
class BruteForceGenerator(BaseGenerator):
    id = "brute_force"
    name = "Brute Force (sequence filter)"
    version = "1.0.0"

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        super().__init__(config)
        self.reset()

    def reset(self) -> None:
        super().reset()
        self.history: List[Tuple[Number, Score]] = []
        self._candidates: List[Number] = list(number_sequence(self.config))

    @property
    def rounds(self) -> int:
        return len(self.history)

    @property
    def candidates(self) -> List[Number]:
        """Numbers still consistent with every recorded score."""
        return list(self._candidates)

    def tell_score(self, score: Score, guess: Number | None = None) -> None:
        guess = self._scored_guess(guess).copy()
        s = score.copy()
        self.history.append((guess, s))
        self._candidates = filter_candidates(self._candidates, [(guess, s)])
        self.state = GeneratorState.SCORED

    def next_guess(self) -> Number | None:
        if not self.history:
            guess = self._first_guess()
        elif self._candidates:
            guess = self._candidates[0].copy()
            self.state = GeneratorState.SCORED
        else:
            self.state = GeneratorState.EXHAUSTED
            return None
        self.last_guess = guess
        return guess.copy()

    def retract_score(self) -> None:
        if not self.history:
            return
        self.history.pop()
        self._candidates = filter_candidates(number_sequence(self.config), self.history)
        self.state = GeneratorState.SCORED if self.history else GeneratorState.UNSCORED
        self.next_guess()
