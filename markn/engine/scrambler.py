"""
Number scrambler.

Pseudorandomly remaps the places and the digits of a number so that the
steady, ascending order in which a generator explores numbers is not
visible to the player.

Scrambling is a relabelling: one permutation of places, one of digits.
Scores are invariant under applying the same relabelling to target and
guess, so a score given for a scrambled guess is exactly the score the
plain guess earns against the (unscrambled) target. Generators therefore
never see scrambled numbers and scores pass through unchanged.
"""

from __future__ import annotations

import random
from typing import List

from .config import GameConfig, DEFAULT_CONFIG
from .numbers import Number


def random_map(size: int, rng: random.Random) -> List[int]:
    """A random permutation of 0..size-1 (deal every item once)."""
    deal = list(range(size))
    rng.shuffle(deal)
    return deal


class NumberScrambler:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG, rng: random.Random | None = None):
        rng = rng or random.Random()
        self.config = config
        self.place_map = random_map(config.places, rng)
        self.digit_map = random_map(config.digits, rng)

    def scramble(self, n: Number) -> Number:
        out = Number(self.config.places)
        for place in range(self.config.places):
            out.set_digit(self.digit_map[n.get_digit(place)], self.place_map[place])
        return out

    def unscramble(self, n: Number) -> Number:
        """Inverse of scramble()."""
        inv_digit = {d: i for i, d in enumerate(self.digit_map)}
        out = Number(self.config.places)
        for place in range(self.config.places):
            out.set_digit(inv_digit[n.get_digit(self.place_map[place])], place)
        return out


class IdentityScrambler(NumberScrambler):
    """Leaves numbers as generated (useful for tests and for watching the algorithm)."""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config
        self.place_map = list(range(config.places))
        self.digit_map = list(range(config.digits))
