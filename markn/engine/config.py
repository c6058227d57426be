"""
Game configuration for the N digit number game.

Two numbers define a game:
  - places : how many places (N) a target or guess has
  - digits : how many digit symbols are in play (10 means '0'..'9')

Note the conflicting terminology: the "N digit" in the game's name is the
number of PLACES in a number, not the size of the digit alphabet.

A configuration is immutable once built. Everything that needs the game
shape (numbers, generators, sessions, harness) takes a GameConfig instead
of reading a process-wide setting, so several games with different shapes
can coexist.
"""

from __future__ import annotations
from dataclasses import dataclass

DEFAULT_DIGITS = 10
DEFAULT_PLACES = 4

# Digits are rendered as single characters '0'..'9'.
MAX_DIGITS = 10


@dataclass(frozen=True)
class GameConfig:
    digits: int = DEFAULT_DIGITS
    places: int = DEFAULT_PLACES

    def __post_init__(self) -> None:
        if self.places < 1:
            raise ValueError(f"places must be >= 1; got {self.places}")
        if self.digits < self.places:
            raise ValueError(
                f"digits must be >= places (no repeated digits); got digits={self.digits}, "
                f"places={self.places}")
        if self.digits > MAX_DIGITS:
            raise ValueError(f"digits must be <= {MAX_DIGITS}; got {self.digits}")


DEFAULT_CONFIG = GameConfig()
