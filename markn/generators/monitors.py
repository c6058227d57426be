"""
Monitors generator.

Every guess after the first is a number that could have produced the
scores of all the previous guesses.

Model:
  - There is a Monitor for each (digit, place) holding the requirements
    derived from the rounds scored so far.
  - A requirement says that some number of digits from a given set must be
    in the guess. Scoring a guess with (placed, misplaced) splits the digits
    into those in the guess and those not, and creates three requirements:

      placed    : `placed` digits from the guess, each in the SAME place
                  it had in the scored guess
      misplaced : `misplaced` digits from the guess, each in a DIFFERENT
                  place than it had in the scored guess
      other     : places - placed - misplaced digits from outside the guess,
                  in any place

    The cell (d, p) gets `placed` if d sat at p in the scored guess,
    `misplaced` if d was elsewhere in it, `other` if d was not in it.

Search:
  - Fill places left to right. At each place try digits in ascending order
    and ask that cell's monitor whether the digit may be picked; if so,
    recurse into the next place. Whatever happens below, the pick is undone
    on the way back out, and the digit is written into the guess only when
    the rest of the guess was completed.
  - When no digit works at some place, the caller backtracks.
  - Ascending order makes the result the smallest consistent number
    (place 0 most significant), so the output is a pure function of the
    recorded rounds.

Since the three requirements of a round partition every (digit, place) cell
and their needs sum to `places`, a completed guess has drawn exactly the
required count from each set: it reproduces every recorded score.
"""

from __future__ import annotations

from typing import List

from markn.engine import GameConfig, DEFAULT_CONFIG, Number, Score
from .base import BaseGenerator, GeneratorState, InvariantError, register
from .monitor import Monitor
from .requirements import RequirementStore

# Each scored round creates this many requirements.
REQUIREMENTS_PER_ROUND = 3


@register
class MonitorsGenerator(BaseGenerator):
    id = "monitors"
    name = "Monitors (constraint backtracking)"
    version = "1.0.0"

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, max_rounds: int | None = None):
        super().__init__(config)
        # One monitor slot per scored round
        self.max_rounds = int(max_rounds) if max_rounds else config.digits * config.places
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._store = RequirementStore()
        self._rounds = 0
        self.monitor: List[List[Monitor]] = [
            [Monitor(self._store, self.max_rounds) for _ in range(self.config.places)]
            for _ in range(self.config.digits)
        ]

    @property
    def rounds(self) -> int:
        return self._rounds

    def tell_score(self, score: Score, guess: Number | None = None) -> None:
        """
        Record the score of `guess` (default: the last guess produced).

        The score must already be valid (see engine.validation); an
        inconsistent one is fine and shows up as next_guess() -> None.
        """
        guess = self._scored_guess(guess)
        if self._rounds == self.max_rounds:
            raise OverflowError(f"more than {self.max_rounds} rounds scored")

        digits, places = self.config.digits, self.config.places

        # Two sets of digits: those in the guess, and those not
        in_guess = [False] * digits
        for place in range(places):
            in_guess[guess.get_digit(place)] = True
        not_in_guess = [not x for x in in_guess]

        placed_req = self._store.add(in_guess, score.placed)
        misplaced_req = self._store.add(in_guess, score.misplaced)
        other_req = self._store.add(not_in_guess, places - score.placed - score.misplaced)

        for i in range(places):
            digit = guess.get_digit(i)
            for place in range(places):
                if place == i:
                    self.monitor[digit][place].add_requirement(placed_req)
                else:
                    self.monitor[digit][place].add_requirement(misplaced_req)
        for digit in range(digits):
            if not_in_guess[digit]:
                for place in range(places):
                    self.monitor[digit][place].add_requirement(other_req)

        self._rounds += 1
        self.state = GeneratorState.SCORED
        self._check_depths()

    def next_guess(self) -> Number | None:
        """
        The next guess, or None when no number fits all the scores.

        A None leaves last_guess untouched; retract_score() recovers.
        """
        if self._rounds == 0:
            guess = self._first_guess()
        else:
            guess = Number(self.config.places)
            if not self._search_place(guess, 0):
                self.state = GeneratorState.EXHAUSTED
                return None
            self.state = GeneratorState.SCORED
        self.last_guess = guess
        return guess.copy()

    def _search_place(self, guess: Number, place: int) -> bool:
        places = self.config.places
        if place == places:
            return True
        for digit in range(self.config.digits):
            monitor = self.monitor[digit][place]
            if monitor.pick(digit, places - place):
                done = self._search_place(guess, place + 1)
                monitor.unpick(digit)
                if done:
                    guess.set_digit(digit, place)
                    return True
        return False

    def retract_score(self) -> None:
        """Back up to the state before the last tell_score()."""
        if self._rounds == 0:
            return

        empty = True
        for row in self.monitor:
            for m in row:
                empty = m.remove_requirement() and empty
        self._store.pop(REQUIREMENTS_PER_ROUND)
        self._rounds -= 1
        self._check_depths()
        if empty != (self._rounds == 0):
            raise InvariantError("monitor emptiness disagrees with the round count")

        self.state = GeneratorState.UNSCORED if self._rounds == 0 else GeneratorState.SCORED
        # Regenerate so last_guess is the guess whose score was just retracted
        self.next_guess()

    def _check_depths(self) -> None:
        for digit, row in enumerate(self.monitor):
            for place, m in enumerate(row):
                if m.depth != self._rounds:
                    raise InvariantError(
                        f"monitor ({digit}, {place}) holds {m.depth} requirements; "
                        f"expected {self._rounds}")
        if len(self._store) != REQUIREMENTS_PER_ROUND * self._rounds:
            raise InvariantError(
                f"store holds {len(self._store)} requirements for {self._rounds} rounds")
