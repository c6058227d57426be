from __future__ import annotations
import enum
from typing import Dict, Type

from markn.engine import GameConfig, DEFAULT_CONFIG, Number, Score, validate_number

# ---- Global generator registry ----
REGISTRY: Dict[str, Type["BaseGenerator"]] = {}


def register(cls: Type["BaseGenerator"]) -> Type["BaseGenerator"]:
    """
    Decorator: @register on a generator class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate generator id: {gid}")
    REGISTRY[gid] = cls
    return cls


class GeneratorState(enum.Enum):
    UNSCORED = "unscored"    # no round played yet
    SCORED = "scored"        # one or more rounds recorded
    EXHAUSTED = "exhausted"  # last search found no consistent guess


class InvariantError(RuntimeError):
    """Internal bookkeeping of a generator went out of step (a bug, not a game state)."""


# ---- Base class that generators inherit ----
class BaseGenerator:
    """
    A guess generator for the N digit number game.

    A player repeatedly calls next_guess() to get a guess and then
    tell_score() with the score that guess earned. Every guess after the
    first could have produced all the scores recorded so far. When no such
    number exists (the scores contradict each other) next_guess() returns
    None, and retract_score() is the way back.

    Generators are single-session, single-threaded objects.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config
        self.last_guess: Number | None = None
        self.state = GeneratorState.UNSCORED

    def reset(self) -> None:
        """Forget every round and start a new game with the same configuration."""
        self.last_guess = None
        self.state = GeneratorState.UNSCORED

    def next_guess(self) -> Number | None:
        raise NotImplementedError("Override in subclass")

    def tell_score(self, score: Score, guess: Number | None = None) -> None:
        raise NotImplementedError("Override in subclass")

    def retract_score(self) -> None:
        raise NotImplementedError("Override in subclass")

    @property
    def rounds(self) -> int:
        """Number of scored rounds currently recorded."""
        raise NotImplementedError("Override in subclass")

    def _scored_guess(self, guess: Number | None) -> Number:
        g = guess if guess is not None else self.last_guess
        if g is None:
            raise ValueError("no guess to score: call next_guess() first or pass the guess")
        if not validate_number(g, self.config):
            raise ValueError(f"cannot score {g}: not a valid number for {self.config}")
        return g

    def _first_guess(self) -> Number:
        """The standard first guess: digit k in place k, e.g. 0123."""
        guess = Number(self.config.places)
        for place in range(self.config.places):
            guess.set_digit(place, place)
        return guess
