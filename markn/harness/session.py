"""
Game sessions: one object per game, passed around explicitly.

GameSession   : the machine guesses a number the player keeps in mind.
                The player scores each guess; a wrong score that leaves no
                consistent number is reported, and retract() takes back the
                last score.
SecretSession : the machine keeps a random secret and scores the player's
                guesses.

Both keep a scoreboard: the list of (guess, score) rounds played so far,
as shown to the player.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from markn.engine import (
    GameConfig, DEFAULT_CONFIG, Number, Score, NumberScrambler, IdentityScrambler,
    validate_number, validate_score,
)
from markn.generators import create_generator

INCONSISTENT_MESSAGE = "Scores are inconsistent"


class GameSession:
    def __init__(self, generator_id: str = "monitors", config: GameConfig = DEFAULT_CONFIG, *,
                 seed: int | None = None, scramble: bool = True):
        self.config = config
        self.rng = random.Random(seed)
        self.scramble = scramble
        self.generator = create_generator(generator_id, config)
        self.scrambler: NumberScrambler = IdentityScrambler(config)
        self.rounds: List[Tuple[Number, Score]] = []
        self.guess: Number | None = None
        self.inconsistent = False
        self.solved = False
        self.message = ""

    def start(self) -> Number:
        """Start over: fresh generator and scrambler, first guess on the board."""
        self.generator.reset()
        self.scrambler = (NumberScrambler(self.config, self.rng) if self.scramble
                          else IdentityScrambler(self.config))
        self.rounds = []
        self.inconsistent = False
        self.solved = False
        self.message = ""
        self.guess = self._scrambled_guess()
        return self.guess

    def _scrambled_guess(self) -> Number | None:
        plain = self.generator.next_guess()
        if plain is None:
            return None
        return self.scrambler.scramble(plain)

    def score(self, s: Score) -> Number | None:
        """
        Score the guess on the board and get the next one.

        Returns the next guess, or None when the score was correct (game
        solved) or left no consistent number (inconsistent; retract to
        recover).

        Raises ValueError for an invalid score or when there is no guess
        waiting for a score.
        """
        if not validate_score(s, self.config):
            raise ValueError(f"invalid score {s} for {self.config.places} places")
        if self.guess is None or self.solved:
            raise ValueError("no guess is waiting for a score")

        self.generator.tell_score(s)
        self.rounds.append((self.guess, s.copy()))
        self.message = ""
        if s.correct(self.config.places):
            self.solved = True
            self.guess = None
            return None

        self.guess = self._scrambled_guess()
        if self.guess is None:
            self.inconsistent = True
            self.message = INCONSISTENT_MESSAGE
        return self.guess

    def retract(self) -> Number | None:
        """Take back the last score; its guess goes back on the board."""
        if not self.rounds:
            return self.guess
        self.generator.retract_score()
        guess, _ = self.rounds.pop()
        self.guess = guess
        self.inconsistent = False
        self.solved = False
        self.message = ""
        return self.guess

    def solve(self, target: Number) -> int:
        """
        Score every guess against `target` until it is guessed.

        Returns the number of guesses on the board when solved.
        """
        if not validate_number(target, self.config):
            raise ValueError(f"Number must have {self.config.places} unique digits")
        if self.guess is None and not self.solved:
            self.start()
        while not self.solved:
            if self.guess is None:
                raise RuntimeError(INCONSISTENT_MESSAGE)
            self.score(target.score(self.guess))
        return len(self.rounds)


class SecretSession:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG, *, seed: int | None = None):
        self.config = config
        self.rng = random.Random(seed)
        self.secret = Number.random(config, self.rng)
        self.rounds: List[Tuple[Number, Score]] = []

    def new(self) -> None:
        """Clear the board and deal a new secret."""
        self.secret = Number.random(self.config, self.rng)
        self.rounds = []

    @property
    def solved(self) -> bool:
        return bool(self.rounds) and self.rounds[-1][1].correct(self.config.places)

    def guess(self, number: Number) -> Score:
        if not validate_number(number, self.config):
            raise ValueError(f"Number must have {self.config.places} unique digits")
        s = self.secret.score(number)
        self.rounds.append((number.copy(), s))
        return s

    def reveal(self) -> Number:
        return self.secret.copy()
